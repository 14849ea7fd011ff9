"""Graph edges, optionally weighted."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Callable


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


@total_ordering
@dataclass(eq=False)
class Edge:
    """An edge ``u -> v``; ``w`` is ``None`` for an unweighted edge.

    Edges compare by their end points only.
    """

    u: int
    v: int
    w: Any = None
    swap_node: bool = False
    output_function: Callable[[Edge], str] | None = field(default=None, repr=False)

    def _key(self) -> tuple[int, int]:
        return (self.u, self.v)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def edge(self) -> tuple:
        """The edge as ``(u, v)`` or, when weighted, ``(u, v, w)``."""
        if self.w is None:
            return (self.u, self.v)
        return (self.u, self.v, self.w)

    def default_output(self) -> str:
        ends = (self.v, self.u) if self.swap_node else (self.u, self.v)
        parts = [*ends] if self.w is None else [*ends, self.w]
        return " ".join(_format_value(part) for part in parts)

    def set_output(self, func: Callable[[Edge], str]) -> None:
        self.output_function = func

    def set_output_default(self) -> None:
        self.output_function = None

    def __str__(self) -> str:
        if self.output_function is not None:
            return self.output_function(self)
        return self.default_output()

    def println(self) -> str:
        """Write the edge and a newline to standard output; return the text written."""
        text = f"{self}\n"
        sys.stdout.write(text)
        return text