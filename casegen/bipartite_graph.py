"""Random bipartite graphs: every edge joins the left part to the right part."""

from __future__ import annotations

import random
from enum import Enum
from itertools import chain

from casegen.edge import Edge
from casegen.graph import Graph, WeightFunction
from casegen.messages import default_log


class NodeOutputFormat(Enum):
    """What the first output line shows before the edge count."""

    NODE = "node"
    LEFT_RIGHT = "left_right"
    NODE_LEFT = "node_left"
    NODE_RIGHT = "node_right"


def _rand_sum(count: int, total: int) -> list[int]:
    """``count`` random positive integers that add up to ``total``."""
    if count > total or (count == 0 and total > 0):
        default_log.fail(
            f"cannot split {total} into {count} values greater than or equal to 1."
        )
    if count == 0:
        return []
    cuts = sorted(random.sample(range(1, total), count - 1))
    bounds = [0, *cuts, total]
    return [b - a for a, b in zip(bounds, bounds[1:])]


class BipartiteGraph(Graph):
    """A graph whose nodes split into a left and a right part.

    A ``left`` of -1 lets generation choose the part sizes so that
    ``edge_count`` edges fit.  Direction and self loops are fixed off.
    With ``different_part`` set, the left part is numbered first on output.
    """

    _locked = frozenset({"self_loop", "direction"})

    def __init__(
        self,
        node_count: int = 1,
        edge_count: int = 0,
        begin_node: int = 1,
        left: int = -1,
        nodes_weight_function: WeightFunction | None = None,
        edges_weight_function: WeightFunction | None = None,
    ) -> None:
        super().__init__(
            node_count, edge_count, begin_node,
            False, False, False, False, False,
            nodes_weight_function, edges_weight_function,
        )
        self._left = left
        self._right = node_count - left
        self.different_part = False
        self.node_output_format = NodeOutputFormat.NODE
        self._part: tuple[list[int], list[int]] = ([], [])
        self._degree: list[list[int]] = [[], []]
        self._d = [0, 0]

    @property
    def left(self) -> int:
        return self._left

    @left.setter
    def left(self, value: int) -> None:
        self._left = value
        self._right = self.node_count - value

    @property
    def right(self) -> int:
        return self._right

    @right.setter
    def right(self, value: int) -> None:
        self._right = value
        self._left = self.node_count - value

    def set_left_right(self, left: int, right: int) -> None:
        """Set both part sizes; the node count follows their sum."""
        total = left + right
        if total < 0:
            default_log.set_fail(
                "number of left part nodes add right part nodes must greater than 0,",
                f"but found {left} + {right} = {total}",
            )
            return
        self._left = left
        self._right = right
        if self.node_count != total:
            default_log.warn(
                "number of left part nodes add right part nodes is not equal to "
                f"node_count({total}),",
                f"set node_count to {left} + {right} = {total}.",
            )
            self.node_count = total

    def use_format_node(self) -> None:
        self.node_output_format = NodeOutputFormat.NODE

    def use_format_left_right(self) -> None:
        self.node_output_format = NodeOutputFormat.LEFT_RIGHT

    def use_format_node_left(self) -> None:
        self.node_output_format = NodeOutputFormat.NODE_LEFT

    def use_format_node_right(self) -> None:
        self.node_output_format = NodeOutputFormat.NODE_RIGHT

    # Generation

    def _rand_left(self) -> None:
        if self._left >= 0:
            return
        n, m = self.node_count, self.edge_count
        if not self.multiply_edge:
            low, high = 0, n // 2
            max_limit = high * (n - high)
            if m > max_limit:
                default_log.fail(
                    f"edges_count must less than or equal to {max_limit}, but found {m}."
                )
            limit = high
            while low <= high:
                mid = (low + high) // 2
                if mid * (n - mid) < m:
                    low = mid + 1
                else:
                    limit = high
                    high = mid - 1
        else:
            limit = 1
        if limit > n - limit:
            default_log.fail(f"node_count must greater than or equal to 2, but found {n}.")
        self._left = random.randint(limit, n - limit)
        self._right = n - self._left

    def _remark_node_indices(self) -> None:
        left_part, right_part = self._part
        if not left_part and not right_part:
            return
        indices = [0] * self.node_count
        for index, node in enumerate(chain(left_part, right_part), start=self.begin_node):
            indices[node] = index
        self.node_indices = indices

    def _self_init(self) -> None:
        self._rand_left()
        n = self.node_count
        self._right = n - self._left
        order = random.sample(range(n), n) if n > 0 else []
        split = max(0, min(self._left, n))
        self._part = (order[:split], order[split:])
        self._degree = [[], []]
        self._d = [0, 0]
        if self.different_part:
            self._remark_node_indices()
        if self.connect and n > 1:
            self._degree = [_rand_sum(self._left, n - 1), _rand_sum(self._right, n - 1)]
            self._d = [n - 1, n - 1]

    def _judge_self_limit(self) -> None:
        if self._left < 0:
            default_log.fail(
                "left part size must greater than or equal to 0,",
                f"but found {self._left}",
            )
        if self._right < 0:
            default_log.fail(
                "right part size must greater than or equal to 0,",
                f"but found {self._right}",
            )

    def _judge_upper_limit(self) -> None:
        n, m = self.node_count, self.edge_count
        if not self.multiply_edge:
            limit = self._left * self._right
            if limit < m:
                default_log.fail(
                    f"number of edges must less than or equal to {limit}, but found {m}."
                )
        elif n == 1 and m > 0:
            default_log.fail(f"number of edges must equal to 0, but found {m}.")

    def _rand_edge(self) -> Edge:
        left_part, right_part = self._part
        while True:
            u = random.choice(left_part)
            v = random.choice(right_part)
            if not self._judge_multiply_edge(u, v):
                return self._convert_edge(u, v)

    def _add_part_edge(self, f: int, i: int, j: int) -> None:
        u = self._part[f][i]
        v = self._part[f ^ 1][j]
        if f == 1:
            u, v = v, u
        self._add_edge(u, v)
        self._d[0] -= 1
        self._d[1] -= 1
        self._degree[f][i] -= 1
        self._degree[f ^ 1][j] -= 1

    def _generate_connect(self) -> None:
        f = 0
        while self._d[0] + self._d[1] > 0:
            own, other = self._degree[f], self._degree[f ^ 1]
            for i in range(len(own)):
                if own[i] != 1:
                    continue
                if self._d[f] == 1:
                    for j, degree in enumerate(other):
                        if degree == 1:
                            self._add_part_edge(f, i, j)
                else:
                    choices = [j for j, degree in enumerate(other) if degree >= 2]
                    self._add_part_edge(f, i, random.choice(choices))
            f ^= 1

    # Output

    def _format_output_node(self) -> list[int]:
        if not self.output_node_count:
            return []
        fmt = self.node_output_format
        if fmt is NodeOutputFormat.LEFT_RIGHT:
            return [self._left, self._right]
        if fmt is NodeOutputFormat.NODE_LEFT:
            return [self.node_count, self._left]
        if fmt is NodeOutputFormat.NODE_RIGHT:
            return [self.node_count, self._right]
        return [self.node_count]