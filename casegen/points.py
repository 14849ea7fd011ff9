"""Random point sets within coordinate limits."""

from __future__ import annotations

import random
import sys
from typing import Callable

from casegen.geometry import Number, Point
from casegen.messages import MessageLog

NODE_LIMIT = 10_000_000


def _rand_value(left: Number, right: Number) -> Number:
    if isinstance(left, float) or isinstance(right, float):
        return random.uniform(left, right)
    return random.randint(left, right)


class RandomPoints:
    """A set of ``node_count`` random points in ``[x_left, x_right] x [y_left, y_right]``.

    Coordinates are real when any limit is a float, integer otherwise.
    Unless ``same_point`` is set, the generated points are distinct.
    """

    def __init__(
        self,
        node_count: int = 1,
        x_left_limit: Number = 0,
        x_right_limit: Number = 0,
        y_left_limit: Number = 0,
        y_right_limit: Number = 0,
    ) -> None:
        self.node_count = node_count
        self.x_left_limit = x_left_limit
        self.x_right_limit = x_right_limit
        self.y_left_limit = y_left_limit
        self.y_right_limit = y_right_limit
        self.points: list[Point] = []
        self.same_point = False
        self.output_node_count = True
        self._output_function: Callable[[RandomPoints], str] | None = None

    @property
    def _is_real(self) -> bool:
        return any(
            isinstance(v, float)
            for v in (self.x_left_limit, self.x_right_limit, self.y_left_limit, self.y_right_limit)
        )

    def _check_limits(self, log: MessageLog) -> None:
        if self.x_left_limit > self.x_right_limit:
            log.fail(f"range [{self.x_left_limit}, {self.x_right_limit}] for x-coordinate is invalid.")
        if self.y_left_limit > self.y_right_limit:
            log.fail(f"range [{self.y_left_limit}, {self.y_right_limit}] for y-coordinate is invalid.")
        n = self.node_count
        if n <= 0:
            log.fail(f"node_count should be greater than 0, but found {n}.")
        if n > NODE_LIMIT:
            log.fail(f"node_count should be less than node_limit({NODE_LIMIT}), but found {n}.")
        if not self.same_point and not self._is_real:
            x_range = self.x_right_limit - self.x_left_limit + 1
            y_range = self.y_right_limit - self.y_left_limit + 1
            if x_range >= n or y_range >= n:
                return
            max_count = x_range * y_range
            if max_count < n:
                log.fail(f"node_count should be less than or equal to {max_count}, but found {n}.")

    def _rand_point(self) -> Point:
        return Point(
            _rand_value(self.x_left_limit, self.x_right_limit),
            _rand_value(self.y_left_limit, self.y_right_limit),
        )

    def gen(self) -> None:
        """Generate the points, replacing any generated before."""
        log = MessageLog(log_same=False)
        self.points = []
        seen: set[Point] = set()
        self._check_limits(log)
        for _ in range(self.node_count):
            p = self._rand_point()
            while not self.same_point and p in seen:
                p = self._rand_point()
            if not self.same_point:
                seen.add(p)
            self.points.append(p)

    def default_output(self) -> str:
        parts: list[str] = []
        if self.output_node_count:
            parts.append(f"{self.node_count}\n")
        for count, p in enumerate(self.points, start=1):
            parts.append(str(p))
            if count < self.node_count:
                parts.append("\n")
        return "".join(parts)

    def set_output(self, func: Callable[[RandomPoints], str]) -> None:
        self._output_function = func

    def set_output_default(self) -> None:
        self._output_function = None

    def __str__(self) -> str:
        if self._output_function is not None:
            return self._output_function(self)
        return self.default_output()

    def println(self) -> str:
        """Write the points and a newline to standard output; return the text written."""
        text = f"{self}\n"
        sys.stdout.write(text)
        return text