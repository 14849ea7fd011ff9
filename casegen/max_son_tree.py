"""Random rooted trees in which no node has more than ``max_son`` sons."""

from __future__ import annotations

import random

from casegen.graph import TreeGraph, WeightFunction
from casegen.messages import default_log


def _rand_sum(count: int, total: int, low: int, high: int) -> list[int]:
    """``count`` random integers in ``[low, high]`` that add up to ``total``."""
    if count * low > total or count * high < total:
        default_log.fail(
            f"cannot split {total} into {count} values in range [{low}, {high}]."
        )
    values = [low] * count
    open_slots = [i for i in range(count)] if high > low else []
    for _ in range(total - count * low):
        pick = random.randrange(len(open_slots))
        index = open_slots[pick]
        values[index] += 1
        if values[index] == high:
            open_slots[pick] = open_slots[-1]
            open_slots.pop()
    return values


def _shuffle_index(times: list[int]) -> list[int]:
    """Each index repeated as often as ``times`` says, in random order."""
    result = [i for i, t in enumerate(times) for _ in range(t)]
    random.shuffle(result)
    return result


class MaxSonTree(TreeGraph):
    """A rooted tree in which each node has at most ``max_son`` sons.

    A ``max_son`` of -1 lets generation choose a limit.  The tree is always
    rooted.
    """

    _locked = frozenset({"is_rooted"})

    def __init__(
        self,
        node_count: int = 1,
        begin_node: int = 1,
        root: int = 1,
        max_son: int = -1,
        nodes_weight_function: WeightFunction | None = None,
        edges_weight_function: WeightFunction | None = None,
    ) -> None:
        super().__init__(
            node_count, begin_node, True, root,
            nodes_weight_function, edges_weight_function,
        )
        self.max_son = max_son

    def _self_init(self) -> None:
        super()._self_init()
        n = self.node_count
        if self.max_son == -1:
            if n == 1:
                self.max_son = 0
            elif n == 2:
                self.max_son = 1
            else:
                self.max_son = random.randint(2, n - 1)

    def _judge_self_limit(self) -> None:
        super()._judge_self_limit()
        n, max_son = self.node_count, self.max_son
        if max_son > n - 1:
            default_log.warn(
                f"the max_son limit {max_son} is greater than node_count - 1({n})",
                ", equivalent to a tree without a son limit",
            )
        max_son_limit = 0 if n == 1 else 1
        if max_son < max_son_limit:
            shown = "2 or more" if n > 1 else str(n)
            default_log.fail(
                f"the max_son limit of {shown} node's tree is greater than or equal to "
                f"{max_son_limit}, but found {max_son}."
            )

    def _generate_tree(self) -> None:
        n = self.node_count
        if n == 1:
            return
        max_degree = self.max_son + 1
        times = _rand_sum(n, n - 2, 0, max_degree - 1)
        root = self._root_index
        if times[root] == max_degree - 1:
            while True:
                p = random.randint(0, n - 1)
                if p != root and times[p] != max_degree - 1:
                    break
            times[root], times[p] = times[p], times[root]
        self._pruefer_decode(_shuffle_index(times))