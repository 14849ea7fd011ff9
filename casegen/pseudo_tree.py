"""Random pseudo trees: connected graphs with exactly one cycle."""

from __future__ import annotations

import random

from casegen.graph import Graph, WeightFunction
from casegen.messages import default_log


class PseudoTree(Graph):
    """A connected graph on ``node_count`` nodes with ``node_count`` edges.

    It holds exactly one cycle, of ``cycle`` nodes.  A ``cycle`` of -1 lets
    generation choose a size in ``[3, node_count]``.  The edge count,
    connectivity, direction, self loops and multiple edges are fixed.
    """

    _locked = frozenset({"edge_count", "connect", "direction", "self_loop", "multiply_edge"})

    def __init__(
        self,
        node_count: int = 3,
        begin_node: int = 1,
        cycle: int = -1,
        nodes_weight_function: WeightFunction | None = None,
        edges_weight_function: WeightFunction | None = None,
    ) -> None:
        super().__init__(
            node_count, node_count, begin_node,
            False, False, False, True, True,
            nodes_weight_function, edges_weight_function,
        )
        self.cycle = cycle
        self._rank: list[int] = []

    def _self_init(self) -> None:
        n = self.node_count
        self._assign("edge_count", n)
        self._rank = random.sample(range(n), n) if n > 0 else []
        if self.cycle == -1 and n >= 3:
            self.cycle = random.randint(3, n)

    def _judge_self_limit(self) -> None:
        n, cycle = self.node_count, self.cycle
        if cycle < 3 or cycle > n:
            default_log.fail(f"cycle size must in range [3, {n}], but found {cycle}.")

    def _judge_lower_limit(self) -> None:
        n = self.node_count
        if n < 3:
            default_log.fail(f"node_count must greater than or equal to 3, but found {n}.")

    def _generate_cycle(self) -> None:
        cycle = self.cycle
        ring = random.sample(range(cycle), cycle)
        rank = self._rank
        for i, node in enumerate(ring):
            self._add_edge(rank[node], rank[ring[(i + 1) % cycle]])

    def _generate_other_edges(self) -> None:
        rank = self._rank
        for i in range(self.cycle, self.node_count):
            father = random.randrange(i)
            self._add_edge(rank[i], rank[father])

    def _generate_graph(self) -> None:
        self._generate_cycle()
        self._generate_other_edges()


class PseudoInTree(PseudoTree):
    """A directed pseudo tree in which every node has exactly one outgoing edge."""

    def __init__(
        self,
        node_count: int = 3,
        begin_node: int = 1,
        cycle: int = -1,
        nodes_weight_function: WeightFunction | None = None,
        edges_weight_function: WeightFunction | None = None,
    ) -> None:
        super().__init__(
            node_count, begin_node, cycle,
            nodes_weight_function, edges_weight_function,
        )
        self._assign("direction", True)
        self.swap_node = False


class PseudoOutTree(PseudoTree):
    """A directed pseudo tree in which every node has exactly one incoming edge."""

    def __init__(
        self,
        node_count: int = 3,
        begin_node: int = 1,
        cycle: int = -1,
        nodes_weight_function: WeightFunction | None = None,
        edges_weight_function: WeightFunction | None = None,
    ) -> None:
        super().__init__(
            node_count, begin_node, cycle,
            nodes_weight_function, edges_weight_function,
        )
        self._assign("direction", True)
        self.swap_node = False

    def _generate_other_edges(self) -> None:
        rank = self._rank
        for i in range(self.cycle, self.node_count):
            father = random.randrange(i)
            self._add_edge(rank[father], rank[i])