"""Standard answer checkers: real sequences, word tokens and YES/NO answers."""

from __future__ import annotations

import math
import re
from collections import deque
from dataclasses import dataclass
from enum import Enum

YES = "YES"
NO = "NO"

_DOUBLE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class Verdict(Enum):
    OK = "ok"
    WA = "wrong answer"
    PE = "wrong output format"
    FAIL = "fail"


@dataclass(frozen=True)
class CheckResult:
    verdict: Verdict
    message: str

    @property
    def ok(self) -> bool:
        return self.verdict is Verdict.OK


def english_ending(n: int) -> str:
    """Ordinal suffix for ``n``: st, nd, rd or th."""
    if (n // 10) % 10 == 1:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def double_delta(expected: float, result: float) -> float:
    """The smaller of absolute and relative error."""
    absolute = abs(result - expected)
    if abs(expected) > 1e-9:
        return min(absolute, abs(absolute / expected))
    return absolute


def double_compare(expected: float, result: float, eps: float) -> bool:
    """Tell whether ``result`` is within absolute or relative ``eps``."""
    eps += 1e-15
    if math.isnan(expected):
        return math.isnan(result)
    if math.isinf(expected):
        if expected > 0:
            return result > 0 and math.isinf(result)
        return result < 0 and math.isinf(result)
    if math.isnan(result) or math.isinf(result):
        return False
    if abs(result - expected) <= eps:
        return True
    low, high = sorted((expected * (1.0 - eps), expected * (1.0 + eps)))
    return low <= result <= high


def compress(text: str) -> str:
    """Shorten long text for messages, keeping its start and end."""
    text = text.replace("\0", "~")
    if len(text) <= 64:
        return text
    return text[:30] + "..." + text[-31:]


def _read_double(token: str) -> float | None:
    if _DOUBLE.fullmatch(token) is None:
        return None
    value = float(token)
    return value if math.isfinite(value) else None


def compare_doubles(
    answer: str, output: str, eps: float = 1e-6, digits: int = 7
) -> CheckResult:
    """Compare two sequences of reals with absolute or relative error ``eps``."""
    found = deque(output.split())
    n = 0
    expected = result = 0.0
    for token in answer.split():
        n += 1
        value = _read_double(token)
        if value is None:
            return CheckResult(
                Verdict.FAIL, f'Expected double, but "{compress(token)}" found in answer'
            )
        expected = value
        if not found:
            return CheckResult(Verdict.PE, "Unexpected end of file - double expected")
        out_token = found.popleft()
        value = _read_double(out_token)
        if value is None:
            return CheckResult(
                Verdict.PE, f'Expected double, but "{compress(out_token)}" found'
            )
        result = value
        if not double_compare(expected, result, eps):
            return CheckResult(
                Verdict.WA,
                f"{n}{english_ending(n)} numbers differ - expected: "
                f"'{expected:.{digits}f}', found: '{result:.{digits}f}', "
                f"error = '{double_delta(expected, result):.{digits}f}'",
            )
    if found:
        return CheckResult(Verdict.PE, "Extra information in the output file")
    if n == 1:
        return CheckResult(
            Verdict.OK,
            f"found '{result:.{digits}f}', expected '{expected:.{digits}f}', "
            f"error '{double_delta(expected, result):.{digits}f}'",
        )
    return CheckResult(Verdict.OK, f"{n} numbers")


def compare_tokens(answer: str, output: str) -> CheckResult:
    """Compare two sequences of whitespace-separated tokens."""
    expected_tokens = deque(answer.split())
    found_tokens = deque(output.split())
    n = 0
    last = ""
    while expected_tokens and found_tokens:
        n += 1
        expected = expected_tokens.popleft()
        found = found_tokens.popleft()
        last = expected
        if expected != found:
            return CheckResult(
                Verdict.WA,
                f"{n}{english_ending(n)} words differ - expected: "
                f"'{compress(expected)}', found: '{compress(found)}'",
            )
    if not expected_tokens and not found_tokens:
        if n == 1:
            return CheckResult(Verdict.OK, f'"{compress(last)}"')
        return CheckResult(Verdict.OK, f"{n} tokens")
    if not expected_tokens:
        return CheckResult(Verdict.WA, "Participant output contains extra tokens")
    return CheckResult(Verdict.WA, "Unexpected EOF in the participants output")


def compare_yes_no(answer: str, output: str) -> CheckResult:
    """Compare sequences of YES/NO answers, ignoring case."""
    expected_tokens = deque(answer.split())
    found_tokens = deque(output.split())
    index = yes_count = no_count = 0
    last = ""
    while expected_tokens and found_tokens:
        index += 1
        ordinal = f"{index}{english_ending(index)} token"
        expected = expected_tokens.popleft().upper()
        last = found_tokens.popleft().upper()
        if expected not in (YES, NO):
            return CheckResult(
                Verdict.FAIL,
                f"{YES} or {NO} expected in answer, but {compress(expected)} found [{ordinal}]",
            )
        if last == YES:
            yes_count += 1
        elif last == NO:
            no_count += 1
        else:
            return CheckResult(
                Verdict.PE,
                f"{YES} or {NO} expected, but {compress(last)} found [{ordinal}]",
            )
        if expected != last:
            return CheckResult(
                Verdict.WA,
                f"expected {compress(expected)}, found {compress(last)} [{ordinal}]",
            )
    if expected_tokens:
        return CheckResult(
            Verdict.WA,
            f"Answer contains longer sequence [length = {index + len(expected_tokens)}], "
            f"but output contains {index} elements",
        )
    if found_tokens:
        return CheckResult(
            Verdict.WA,
            f"Output contains longer sequence [length = {index + len(found_tokens)}], "
            f"but answer contains {index} elements",
        )
    if index == 0:
        return CheckResult(Verdict.OK, "Empty output")
    if index == 1:
        return CheckResult(Verdict.OK, last)
    return CheckResult(
        Verdict.OK,
        f"{index} token(s): yes count is {yes_count}, no count is {no_count}",
    )