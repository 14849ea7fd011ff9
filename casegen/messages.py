"""Diagnostic output for generators: warnings, failures and de-duplicated logs."""

from __future__ import annotations

import sys
from typing import Any, NoReturn, TextIO

FAIL_LABEL = "[FAIL]"
ERROR_LABEL = "[ERROR]"
WARN_LABEL = "[WARN]"
SUCCESS_LABEL = "[SUCCESS]"
SET_FAIL_LABEL = "[SET FAIL]"


class GeneratorError(Exception):
    """Raised where a generator reports a fatal failure."""


def _join(args: tuple[Any, ...]) -> str:
    return "".join(str(arg) for arg in args)


class MessageLog:
    """Writes messages to a stream, optionally suppressing repeated ones.

    With ``log_same`` true every message is written; otherwise a message that
    was already written once is skipped.  Without a stream, messages go to
    the current ``sys.stderr``.
    """

    def __init__(self, stream: TextIO | None = None, log_same: bool = True) -> None:
        self._stream = stream
        self.log_same = log_same
        self._logs: set[str] = set()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def print(self, *args: Any) -> None:
        """Write the arguments one after another, with no separator."""
        self.stream.write(_join(args))

    def println(self, *args: Any) -> None:
        """Write the arguments followed by a newline."""
        self.print(*args, "\n")

    def same_log(self, *args: Any) -> bool:
        """Tell whether this message was seen before, remembering it if not."""
        if self.log_same:
            return False
        key = _join(args)
        if key in self._logs:
            return True
        self._logs.add(key)
        return False

    def endl(self, count: int = 1) -> None:
        for _ in range(count):
            self.println()

    def fail(self, *args: Any) -> NoReturn:
        """Report a failure and raise :class:`GeneratorError`."""
        self.println(FAIL_LABEL, " ", *args)
        raise GeneratorError(_join(args))

    def error(self, *args: Any) -> NoReturn:
        """Report an error and raise :class:`GeneratorError`."""
        self.println(ERROR_LABEL, " ", *args)
        raise GeneratorError(_join(args))

    def warn(self, *args: Any) -> None:
        if not self.same_log(WARN_LABEL, " ", *args):
            self.println(WARN_LABEL, " ", *args)

    def info(self, *args: Any) -> None:
        if not self.same_log(*args):
            self.println(*args)

    def success(self, *args: Any) -> None:
        if not self.same_log(SUCCESS_LABEL, " ", *args):
            self.println(SUCCESS_LABEL, " ", *args)

    def set_fail(self, *args: Any) -> None:
        """Report a rejected setting; the caller keeps its old value."""
        if not self.same_log(SET_FAIL_LABEL, " ", *args):
            self.println(SET_FAIL_LABEL, " ", *args)


default_log = MessageLog()