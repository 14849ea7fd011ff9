"""Random flower trees: one centre node joined to every other node."""

from __future__ import annotations

from casegen.graph import TreeGraph, WeightFunction


class Flower(TreeGraph):
    """A star-shaped tree; in a rooted flower the root is the centre."""

    def __init__(
        self,
        node_count: int = 1,
        begin_node: int = 1,
        is_rooted: bool = False,
        root: int = 1,
        nodes_weight_function: WeightFunction | None = None,
        edges_weight_function: WeightFunction | None = None,
    ) -> None:
        super().__init__(
            node_count, begin_node, is_rooted, root,
            nodes_weight_function, edges_weight_function,
        )

    def _generate_tree(self) -> None:
        centre, *others = self._rank
        for node in others:
            self._add_edge(centre, node)