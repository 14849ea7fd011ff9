"""Parsing of numbers and of range formats such as ``"[1, 10)"``."""

from __future__ import annotations

import re

from casegen.messages import default_log

LONG_LONG_MIN = -(2**63)
LONG_LONG_MAX = 2**63 - 1
UNSIGNED_LONG_LONG_MIN = 0
UNSIGNED_LONG_LONG_MAX = 2**64 - 1

CHAR_PATTERNS = (
    "[a-z]",
    "[A-Z]",
    "[a-zA-Z]",
    "[0-9]",
    "[a-zA-Z0-9]",
    "[01]",
)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:infinity|inf|nan))",
    re.IGNORECASE,
)


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"cannot convert {text!r} to an integer")
    return int(match.group(1))


def is_real_format(text: str) -> bool:
    """Tell whether the text is written as a real number."""
    return any(c in text for c in "eE.")


def string_to_value(text: str, kind: type) -> int | float:
    """Convert the leading number of ``text`` to ``int`` or ``float``.

    Integers written in real format are truncated toward zero.
    """
    if kind is float:
        match = _FLOAT_PREFIX.match(text)
        if match is None:
            raise ValueError(f"cannot convert {text!r} to a float")
        return float(match.group(1))
    if kind is int:
        if is_real_format(text):
            return int(string_to_value(text, float))
        return _leading_int(text)
    default_log.error("Unsupported type.")


def number_accuracy(text: str) -> int:
    """Number of significant decimal places of a number, plus one."""
    digit = 1
    in_decimal = False
    in_scientific = False
    scientific: list[str] = []
    for c in text:
        if in_decimal:
            if "0" <= c <= "9":
                digit += 1
            else:
                in_decimal = False
        if in_scientific:
            scientific.append(c)
        if c == ".":
            in_decimal = True
        if c in "eE":
            in_scientific = True
    if scientific:
        digit -= _leading_int("".join(scientific))
    return digit


def _find_first_of(text: str, chars: str) -> int:
    positions = [pos for pos in (text.find(c) for c in chars) if pos != -1]
    return min(positions) if positions else -1


def _split_range(text: str) -> tuple[int, int, int]:
    open_pos = _find_first_of(text, "[(")
    close_pos = _find_first_of(text, ")]")
    comma = text.find(",")
    if open_pos == -1 or close_pos == -1 or comma == -1:
        default_log.fail(f"{text} is an invalid range.")
    return open_pos, comma, close_pos


def format_to_int_range(text: str) -> tuple[int, int]:
    """Turn an interval such as ``"(1, 10]"`` into an inclusive integer range."""
    open_pos, comma, close_pos = _split_range(text)
    left = string_to_value(text[open_pos + 1:comma], int)
    right = string_to_value(text[comma + 1:close_pos], int)
    if text[open_pos] == "(":
        left += 1
    if text[close_pos] == ")":
        right -= 1
    default_log.warn(
        f'translate format "{text}" into range [{left}, {right}], please check.'
    )
    return left, right


def format_to_double_range(text: str) -> tuple[float, float]:
    """Turn an interval into a half-open real range ``[left, right)``."""
    open_pos, comma, close_pos = _split_range(text)
    left_text = text[open_pos + 1:comma]
    right_text = text[comma + 1:close_pos]
    left = string_to_value(left_text, float)
    right = string_to_value(right_text, float)
    accuracy = max(1, number_accuracy(left_text), number_accuracy(right_text))
    eps_open = 10.0 ** (-accuracy + 1)
    eps_close = 10.0 ** (-accuracy)
    if text[open_pos] == "(":
        left += eps_open
    if text[close_pos] == "]":
        right += eps_close
    default_log.warn(
        f'translate format "{text}" into range [{left:.{accuracy}f}, '
        f"{right:.{accuracy}f}), the accuracy is 10^{{-{accuracy - 1}}}, please check."
    )
    return left, right


def format_to_range(text: str, kind: type) -> tuple[int, int] | tuple[float, float]:
    """Parse a range format for integer or real values."""
    if kind is int:
        return format_to_int_range(text)
    if kind is float:
        return format_to_double_range(text)
    default_log.error("Unsupported type.")