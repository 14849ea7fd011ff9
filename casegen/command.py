"""File-system helpers and external commands run on a path."""

from __future__ import annotations

import os
import shutil
import subprocess
from typing import Any, Union

from casegen.messages import default_log

PathLike = Union[str, "os.PathLike[str]"]

_PATH_SPLIT = os.sep
_OTHER_SPLIT = "\\" if os.sep == "/" else "/"


def _unify_split(path: str) -> str:
    return path.replace(_OTHER_SPLIT, _PATH_SPLIT)


def folder_path(path: PathLike) -> str:
    """The folder of ``path``, or ``path`` itself if it is a directory."""
    text = os.fspath(path)
    if os.path.isdir(text):
        return text
    text = _unify_split(text)
    pos = text.rfind(_PATH_SPLIT)
    return text[:pos] if pos != -1 else ""


def file_stem(path: PathLike) -> str:
    """The name of an existing file without its folder and extension."""
    text = os.fspath(path)
    if not os.path.isfile(text):
        default_log.fail(f"{text} is not a file or the file doesn't exist.")
    name = _unify_split(text).rsplit(_PATH_SPLIT, 1)[-1]
    dot = name.rfind(".")
    return name[:dot] if dot != -1 else name


def full_path(path: PathLike) -> str:
    """The absolute, resolved path of an existing file or folder."""
    text = os.fspath(path)
    try:
        return os.path.realpath(text, strict=True)
    except OSError:
        default_log.fail(f"Can't find full path :{text}.")


def create_directories(path: PathLike) -> None:
    """Create a folder and any missing parents."""
    text = _unify_split(os.fspath(path))
    if not text:
        return
    try:
        os.makedirs(text, exist_ok=True)
    except OSError:
        default_log.fail(f"Error in creating folder : {text}.")


def copy_file(source: PathLike, destination: PathLike) -> None:
    """Copy a file to a file or into a folder."""
    shutil.copy(os.fspath(source), os.fspath(destination))


def delete_file(path: PathLike) -> None:
    """Remove a file if it exists."""
    text = os.fspath(path)
    if os.path.isfile(text):
        os.remove(text)


def _join(*parts: Any) -> str:
    return " ".join(str(part) for part in parts if str(part))


class CommandPath:
    """A program on disk together with the arguments to run it with.

    Given explicit arguments, default arguments are switched off.
    """

    def __init__(self, path: PathLike = "", args: str | None = None) -> None:
        self.path = os.fspath(path)
        if args is None:
            self.args = ""
            self.enable_default_args = True
        else:
            self.args = args
            self.enable_default_args = False

    def add_args(self, *args: Any) -> None:
        """Append arguments, separated by spaces."""
        self.args = _join(self.args, *args)

    def clear_args(self) -> None:
        self.args = ""

    def command(self) -> str:
        """The command line: the path followed by the arguments."""
        return _join(self.path, self.args)

    def run(self) -> int:
        """Resolve the path, run the command in a shell and return its exit status."""
        self.path = full_path(self.path)
        return subprocess.run(self.command(), shell=True).returncode