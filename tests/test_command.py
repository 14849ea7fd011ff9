import os
import sys

import pytest

from casegen.command import (
    CommandPath,
    copy_file,
    create_directories,
    delete_file,
    file_stem,
    folder_path,
    full_path,
)
from casegen.messages import GeneratorError


def test_folder_path_of_directory_is_itself(tmp_path):
    assert folder_path(tmp_path) == str(tmp_path)


def test_folder_path_of_file(tmp_path):
    target = tmp_path / "case.in"
    target.write_text("1")
    assert folder_path(target) == str(tmp_path)


def test_folder_path_without_separator():
    assert folder_path("no_folder_name.txt") == ""


def test_folder_path_of_missing_file():
    path = os.path.join("alpha", "beta", "gamma.txt")
    assert folder_path(path) == os.path.join("alpha", "beta")


def test_file_stem(tmp_path):
    target = tmp_path / "7.in"
    target.write_text("data")
    assert file_stem(target) == "7"


def test_file_stem_missing_file_fails(tmp_path):
    with pytest.raises(GeneratorError):
        file_stem(tmp_path / "missing.in")


def test_full_path_resolves_relative(tmp_path, monkeypatch):
    (tmp_path / "x.txt").write_text("x")
    monkeypatch.chdir(tmp_path)
    assert full_path("x.txt") == os.path.realpath(tmp_path / "x.txt")


def test_full_path_missing_fails(tmp_path):
    with pytest.raises(GeneratorError):
        full_path(tmp_path / "nothing_here")


def test_create_directories_nested(tmp_path):
    nested = tmp_path / "a" / "b" / "c"
    create_directories(nested)
    assert nested.is_dir()
    create_directories(nested)
    assert nested.is_dir()


def test_copy_and_delete_file(tmp_path):
    source = tmp_path / "src.txt"
    source.write_text("payload")
    destination = tmp_path / "dst.txt"
    copy_file(source, destination)
    assert destination.read_text() == "payload"
    delete_file(destination)
    assert not destination.exists()
    delete_file(destination)
    assert source.exists()


def test_command_path_default_args():
    program = CommandPath("prog")
    assert program.enable_default_args is True
    assert program.command() == "prog"
    program.add_args("-a", 3)
    assert program.command() == "prog -a 3"
    program.clear_args()
    assert program.args == ""


def test_command_path_explicit_args():
    program = CommandPath("prog", "-x")
    assert program.enable_default_args is False
    program.add_args("-y")
    assert program.command() == "prog -x -y"


def test_run_returns_exit_status():
    program = CommandPath(sys.executable, '-c "raise SystemExit(3)"')
    assert program.run() == 3
    assert program.path == os.path.realpath(sys.executable)


def test_run_missing_program_fails(tmp_path):
    with pytest.raises(GeneratorError):
        CommandPath(tmp_path / "no_such_program").run()