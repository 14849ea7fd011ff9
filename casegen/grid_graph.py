"""Random grid graphs: nodes laid out row by row, edges between neighbours."""

from __future__ import annotations

import random

from casegen.edge import Edge
from casegen.graph import EDGE_LIMIT, NODE_LIMIT, Graph, WeightFunction
from casegen.messages import default_log

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class GridGraph(Graph):
    """A graph whose nodes fill a ``row`` x ``column`` grid in reading order.

    The last row may be incomplete.  Edges only join horizontally or
    vertically adjacent cells.  A ``row`` of -1 lets generation choose the
    number of rows so that ``edge_count`` edges fit.  Self loops are fixed off.
    """

    _locked = frozenset({"self_loop"})

    def __init__(
        self,
        node_count: int = 1,
        edge_count: int = 0,
        begin_node: int = 1,
        row: int = -1,
        nodes_weight_function: WeightFunction | None = None,
        edges_weight_function: WeightFunction | None = None,
    ) -> None:
        super().__init__(
            node_count, edge_count, begin_node,
            False, False, False, False, True,
            nodes_weight_function, edges_weight_function,
        )
        self._row = row
        self._column = (node_count + row - 1) // row if row > 0 else 0
        self._rank: list[int] = []

    @property
    def row(self) -> int:
        return self._row

    @row.setter
    def row(self, value: int) -> None:
        self._row = value
        if value > 0:
            self._column = (self.node_count + value - 1) // value

    @property
    def column(self) -> int:
        return self._column

    @column.setter
    def column(self, value: int) -> None:
        self._column = value
        if value > 0:
            self._row = (self.node_count + value - 1) // value

    def set_row_column(self, row: int, column: int, ignore: int = 0) -> None:
        """Set the grid shape; the last ``ignore`` cells are left out."""
        node = row * column - ignore
        if ignore >= column:
            default_log.set_fail(
                f"the ignored nodes should in range [0, {column}), but found {ignore}."
            )
            return
        if node > NODE_LIMIT:
            default_log.set_fail(
                f"node_count {row} * {column} - {ignore} = {node} "
                f"is greater than the node_limit({NODE_LIMIT})."
            )
            return
        self._row = row
        self._column = column
        if self.node_count != node:
            self.node_count = node

    def _count_edge_count(self, row: int, column: int) -> int:
        total = row * (column - 1) + column * (row - 1) - 2 * (row * column - self.node_count)
        if self.direction:
            total *= 2
        return total

    def _judge_upper_limit(self) -> None:
        n, m = self.node_count, self.edge_count
        if not self.multiply_edge:
            limit = self._count_edge_count(self._row, self._column)
            if m > limit:
                default_log.fail(f"edge_count must less than or equal to {limit}, but found {m}.")
        elif n == 1 and m > 0:
            default_log.fail(f"edge_count must equal to 0, but found {m}.")

    def _judge_self_limit(self) -> None:
        if self._row <= 0:
            default_log.fail(f"row must greater than 0, but found {self._row}.")
        if self._column <= 0:
            default_log.fail(f"column must greater than 0, but found {self._column}.")

    def _rand_row(self) -> None:
        n = self.node_count
        if self._row == -1:
            if not self.multiply_edge:
                best_count, best_row = 0, 0
                possible: list[int] = []
                for i in range(1, n + 1):
                    count = self._count_edge_count(i, (n + i - 1) // i)
                    if count > best_count:
                        best_count, best_row = count, i
                    if count >= self.edge_count:
                        possible.append(i)
                if possible:
                    self._row = random.choice(possible)
                else:
                    self.edge_count = min(EDGE_LIMIT, best_count)
                    default_log.warn(
                        "edge_count is large than the maximum possible, "
                        f"use upper edges limit {self.edge_count}."
                    )
                    self._row = best_row
            else:
                self._row = random.randint(1, n)
        if self._row == 0:
            default_log.fail("row can't be 0.")
        self._column = (n + self._row - 1) // self._row

    def _self_init(self) -> None:
        n = self.node_count
        self._rank = random.sample(range(n), n) if n > 0 else []
        self._rand_row()

    def _generate_connect(self) -> None:
        n, column, rank = self.node_count, self._column, self._rank
        for i in range(self._row):
            for j in range(1, column):
                x = i * column + j
                if x < n:
                    self._add_edge(rank[x], rank[x - 1])
            x, y = i * column, (i + 1) * column
            if x < n and y < n:
                self._add_edge(rank[x], rank[y])

    def _rand_edge(self) -> Edge:
        n, row, column, rank = self.node_count, self._row, self._column, self._rank
        while True:
            pos = random.randrange(n)
            dx, dy = random.choice(_STEPS)
            px = pos // column + dx
            py = pos % column + dy
            nxt = px * column + py
            if not (0 <= px < row and 0 <= py < column) or nxt >= n:
                continue
            if self._judge_multiply_edge(rank[pos], rank[nxt]):
                continue
            return self._convert_edge(rank[pos], rank[nxt])