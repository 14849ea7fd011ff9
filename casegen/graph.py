"""Random graphs and trees with optional node and edge weights."""

from __future__ import annotations

import heapq
import random
from collections import deque
from typing import Any, Callable, Iterable

from casegen.edge import Edge
from casegen.messages import default_log

NODE_LIMIT = 10_000_000
EDGE_LIMIT = 10_000_000

WeightFunction = Callable[[], Any]


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class Graph:
    """A random graph on ``node_count`` nodes with ``edge_count`` edges.

    Nodes are numbered internally from 0; on output they are shown as
    ``begin_node``, ``begin_node + 1``, ...  A graph is node (edge) weighted
    when a node (edge) weight function is given; each call of the function
    yields one weight.
    """

    _locked: frozenset[str] = frozenset()

    def __init__(
        self,
        node_count: int = 1,
        edge_count: int = 0,
        begin_node: int = 1,
        direction: bool = False,
        multiply_edge: bool = False,
        self_loop: bool = False,
        connect: bool = False,
        swap_node: bool = False,
        nodes_weight_function: WeightFunction | None = None,
        edges_weight_function: WeightFunction | None = None,
    ) -> None:
        self.node_count = node_count
        self.edge_count = edge_count
        self.begin_node = begin_node
        self.direction = direction
        self.multiply_edge = multiply_edge
        self.self_loop = self_loop
        self.connect = connect
        self.swap_node = swap_node
        self.output_node_count = True
        self.output_edge_count = True
        self.nodes_weight_function = nodes_weight_function
        self.edges_weight_function = edges_weight_function
        self.node_weighted = nodes_weight_function is not None
        self.edge_weighted = edges_weight_function is not None
        self.edges: list[Edge] = []
        self.nodes_weight: list[Any] = []
        self.node_indices: list[int] = []
        self._edge_set: set[tuple[int, int]] = set()
        self._output_function: Callable[[Graph], str] | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._locked and name in self.__dict__:
            raise AttributeError(f"{name} cannot be changed for {type(self).__name__}")
        super().__setattr__(name, value)

    def _assign(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)

    # Weight functions

    def check_gen_function(self) -> None:
        """Fail if a weighted graph lacks its weight functions."""
        self.check_nodes_weight_function()
        self.check_edges_weight_function()

    def check_nodes_weight_function(self) -> None:
        if self.node_weighted and self.nodes_weight_function is None:
            default_log.fail("nodes weight generator function is nullptr, please set it.")

    def check_edges_weight_function(self) -> None:
        if self.edge_weighted and self.edges_weight_function is None:
            default_log.fail("edges weight generator function is nullptr, please set it.")

    # Generation

    def default_node_indices(self) -> None:
        self.node_indices = [self.begin_node + i for i in range(self.node_count)]

    def gen(self) -> None:
        """Generate the graph, replacing anything generated before."""
        self.edges = []
        self._edge_set = set()
        self.nodes_weight = []
        self.default_node_indices()
        self._self_init()
        self.check_gen_function()
        self._judge_limits()
        self._generate_nodes_weight()
        self._generate_graph()

    def _self_init(self) -> None:
        pass

    def _judge_limits(self) -> None:
        n, m = self.node_count, self.edge_count
        if n <= 0:
            default_log.fail(f"node_count must greater than 0, but found {n}.")
        if n > NODE_LIMIT:
            default_log.fail(f"node_count must less than or equal to {NODE_LIMIT}, but found {n}.")
        if m < 0:
            default_log.fail(f"edge_count must greater than or equal to 0, but found {m}.")
        if m > EDGE_LIMIT:
            default_log.fail(f"edge_count must less than or equal to {EDGE_LIMIT}, but found {m}.")
        self._judge_self_limit()
        self._judge_lower_limit()
        self._judge_upper_limit()

    def _judge_self_limit(self) -> None:
        pass

    def _judge_lower_limit(self) -> None:
        n, m = self.node_count, self.edge_count
        if self.connect and m < n - 1:
            default_log.fail(f"edge_count must greater than or equal to {n - 1}, but found {m}.")

    def _judge_upper_limit(self) -> None:
        n, m = self.node_count, self.edge_count
        if not self.multiply_edge:
            limit = n * (n - 1) if self.direction else n * (n - 1) // 2
            if self.self_loop:
                limit += n
            if m > limit:
                default_log.fail(f"edge_count must less than or equal to {limit}, but found {m}.")
        elif n == 1 and not self.self_loop and m > 0:
            default_log.fail(f"edge_count must equal to 0, but found {m}.")

    def _generate_nodes_weight(self) -> None:
        if self.node_weighted:
            self.nodes_weight = [self.nodes_weight_function() for _ in range(self.node_count)]

    def _generate_graph(self) -> None:
        if self.connect:
            self._generate_connect()
        while len(self.edges) < self.edge_count:
            self._add_edge(self._rand_edge())

    def _generate_connect(self) -> None:
        order = random.sample(range(self.node_count), self.node_count)
        for i in range(1, self.node_count):
            self._add_edge(order[random.randrange(i)], order[i])

    def _rand_edge(self) -> Edge:
        n = self.node_count
        while True:
            u = random.randrange(n)
            v = random.randrange(n)
            if u == v and not self.self_loop:
                continue
            if self._judge_multiply_edge(u, v):
                continue
            return self._convert_edge(u, v)

    def _judge_multiply_edge(self, u: int, v: int) -> bool:
        """Tell whether adding ``u -> v`` would repeat an edge that is not allowed."""
        if self.multiply_edge:
            return False
        if (u, v) in self._edge_set:
            return True
        return not self.direction and (v, u) in self._edge_set

    def _convert_edge(self, u: int, v: int) -> Edge:
        w = self.edges_weight_function() if self.edge_weighted else None
        return Edge(u, v, w)

    def _add_edge(self, u: Edge | int, v: int | None = None) -> None:
        edge = u if isinstance(u, Edge) else self._convert_edge(u, v)
        self.edges.append(edge)
        self._edge_set.add((edge.u, edge.v))

    # Output

    def output_edges(self) -> list[Edge]:
        """The edges with nodes shown by their output indices."""
        indices = self.node_indices
        return [Edge(indices[e.u], indices[e.v], e.w) for e in self.edges]

    def _format_output_node(self) -> list[int]:
        return [self.node_count] if self.output_node_count else []

    def _may_swap(self) -> bool:
        return self.swap_node

    def default_output(self) -> str:
        first = self._format_output_node()
        if self.output_edge_count:
            first.append(self.edge_count)
        lines = [" ".join(str(x) for x in first)]
        if self.node_weighted:
            lines.append(" ".join(_format_value(w) for w in self.nodes_weight))
        edges = self.output_edges()
        if self._may_swap():
            for edge in edges:
                if random.getrandbits(1):
                    edge.swap_node = True
        lines.append("\n".join(str(edge) for edge in edges))
        return "\n".join(line for line in lines if line)

    def set_output(self, func: Callable[[Graph], str]) -> None:
        self._output_function = func

    def set_output_default(self) -> None:
        self._output_function = None

    def __str__(self) -> str:
        if self._output_function is not None:
            return self._output_function(self)
        return self.default_output()

    def println(self) -> None:
        print(self)


class TreeGraph(Graph):
    """A random tree; ``root`` counts from 1 and matters only when rooted.

    In a rooted tree every edge goes from father to son, and the root is
    printed after the node count.
    """

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
            node_count, node_count - 1, begin_node,
            False, False, False, True, True,
            nodes_weight_function, edges_weight_function,
        )
        self.is_rooted = is_rooted
        self.root = root
        self.output_edge_count = False
        self.output_root = True
        self._rank: list[int] = []

    @property
    def _root_index(self) -> int:
        return self.root - 1

    def _self_init(self) -> None:
        n = self.node_count
        self._assign("edge_count", n - 1)
        self._rank = random.sample(range(n), n) if n > 0 else []
        if self.is_rooted and 0 <= self._root_index < n:
            pos = self._rank.index(self._root_index)
            self._rank[0], self._rank[pos] = self._rank[pos], self._rank[0]

    def _judge_self_limit(self) -> None:
        n = self.node_count
        if self.is_rooted and not 1 <= self.root <= n:
            default_log.fail(f"root must be in range [1, {n}], but found {self.root}.")

    def _judge_lower_limit(self) -> None:
        pass

    def _judge_upper_limit(self) -> None:
        pass

    def _generate_graph(self) -> None:
        self._generate_tree()

    def _generate_tree(self) -> None:
        rank = self._rank
        for i in range(1, self.node_count):
            self._add_edge(rank[random.randrange(i)], rank[i])

    def _pruefer_decode(self, pruefer: Iterable[int]) -> None:
        """Add the edges of the tree that a Pruefer sequence encodes."""
        n = self.node_count
        if n == 1:
            return
        code = list(pruefer)
        degree = [1] * n
        for x in code:
            degree[x] += 1
        leaves = [i for i in range(n) if degree[i] == 1]
        heapq.heapify(leaves)
        pairs: list[tuple[int, int]] = []
        for x in code:
            leaf = heapq.heappop(leaves)
            pairs.append((x, leaf))
            degree[x] -= 1
            if degree[x] == 1:
                heapq.heappush(leaves, x)
        u = heapq.heappop(leaves)
        v = heapq.heappop(leaves)
        pairs.append((u, v))
        self._add_tree_edges(pairs)

    def _add_tree_edges(self, pairs: list[tuple[int, int]]) -> None:
        if not self.is_rooted:
            for u, v in pairs:
                self._add_edge(u, v)
            return
        adjacent: dict[int, list[int]] = {i: [] for i in range(self.node_count)}
        for u, v in pairs:
            adjacent[u].append(v)
            adjacent[v].append(u)
        seen = {self._root_index}
        queue = deque([self._root_index])
        while queue:
            father = queue.popleft()
            for son in adjacent[father]:
                if son not in seen:
                    seen.add(son)
                    self._add_edge(father, son)
                    queue.append(son)

    def _format_output_node(self) -> list[int]:
        first = super()._format_output_node()
        if self.is_rooted and self.output_root:
            first.append(self.node_indices[self._root_index])
        return first

    def _may_swap(self) -> bool:
        return self.swap_node and not self.is_rooted