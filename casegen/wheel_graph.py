"""Random wheel graphs: a cycle of rim nodes each joined to one hub."""

from __future__ import annotations

import random

from casegen.graph import Graph, WeightFunction
from casegen.messages import default_log


class WheelGraph(Graph):
    """A wheel on ``node_count`` nodes with ``2 * node_count - 2`` edges.

    The edge count, connectivity, multiple edges and self loops are fixed.
    """

    _locked = frozenset({"connect", "multiply_edge", "self_loop", "edge_count"})

    def __init__(
        self,
        node_count: int = 4,
        begin_node: int = 1,
        nodes_weight_function: WeightFunction | None = None,
        edges_weight_function: WeightFunction | None = None,
    ) -> None:
        super().__init__(
            node_count, 2 * node_count - 2, begin_node,
            True, False, False, False, False,
            nodes_weight_function, edges_weight_function,
        )

    def _self_init(self) -> None:
        self._assign("edge_count", 2 * self.node_count - 2)

    def _judge_lower_limit(self) -> None:
        n = self.node_count
        if n < 4:
            default_log.fail("node_count must greater than or equal to 4, ", f"but found {n}.")

    def _generate_graph(self) -> None:
        n = self.node_count
        order = random.sample(range(n), n)
        hub = order[n - 1]
        for i in range(n - 1):
            self._add_edge(order[i], order[(i + 1) % (n - 1)])
            self._add_edge(order[i], hub)