from collections import Counter

import pytest

from casegen.messages import GeneratorError
from casegen.pseudo_tree import PseudoInTree, PseudoOutTree, PseudoTree


def _is_connected(n, edges):
    adjacent = {i: set() for i in range(n)}
    for e in edges:
        adjacent[e.u].add(e.v)
        adjacent[e.v].add(e.u)
    seen = {0}
    stack = [0]
    while stack:
        for nxt in adjacent[stack.pop()]:
            if nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    return len(seen) == n


def _cycle_size(n, edges):
    degree = Counter()
    adjacent = {i: [] for i in range(n)}
    for e in edges:
        degree[e.u] += 1
        degree[e.v] += 1
        adjacent[e.u].append(e.v)
        adjacent[e.v].append(e.u)
    remaining = set(range(n))
    leaves = [i for i in range(n) if degree[i] == 1]
    while leaves:
        leaf = leaves.pop()
        remaining.discard(leaf)
        for nxt in adjacent[leaf]:
            if nxt in remaining:
                degree[nxt] -= 1
                if degree[nxt] == 1:
                    leaves.append(nxt)
    return len(remaining)


@pytest.mark.parametrize("n", [3, 5, 10, 30])
def test_pseudo_tree_has_one_cycle(n):
    graph = PseudoTree(n)
    graph.gen()
    assert len(graph.edges) == n
    assert _is_connected(n, graph.edges)
    assert _cycle_size(n, graph.edges) == graph.cycle
    assert 3 <= graph.cycle <= n


def test_fixed_cycle_size():
    graph = PseudoTree(8, cycle=4)
    graph.gen()
    assert _cycle_size(8, graph.edges) == 4


def test_no_self_loops_or_repeated_edges():
    graph = PseudoTree(20, cycle=3)
    graph.gen()
    pairs = [frozenset((e.u, e.v)) for e in graph.edges]
    assert all(len(p) == 2 for p in pairs)
    assert len(set(pairs)) == len(pairs)


def test_in_tree_every_node_has_one_outgoing_edge():
    graph = PseudoInTree(12)
    graph.gen()
    out_degree = Counter(e.u for e in graph.edges)
    assert sorted(out_degree) == list(range(12))
    assert set(out_degree.values()) == {1}
    assert graph.direction is True


def test_out_tree_every_node_has_one_incoming_edge():
    graph = PseudoOutTree(12)
    graph.gen()
    in_degree = Counter(e.v for e in graph.edges)
    assert sorted(in_degree) == list(range(12))
    assert set(in_degree.values()) == {1}


def test_output_header_and_indices():
    graph = PseudoTree(6, begin_node=10)
    graph.gen()
    lines = str(graph).split("\n")
    assert lines[0] == "6 6"
    assert len(lines) == 7
    nodes = {int(x) for line in lines[1:] for x in line.split()}
    assert nodes == set(range(10, 16))


def test_edge_weights_come_from_function():
    graph = PseudoTree(5, edges_weight_function=lambda: 7)
    graph.gen()
    assert [e.w for e in graph.edges] == [7] * 5


def test_too_few_nodes_fails():
    with pytest.raises(GeneratorError):
        PseudoTree(2).gen()


def test_cycle_out_of_range_fails():
    with pytest.raises(GeneratorError):
        PseudoTree(5, cycle=6).gen()
    with pytest.raises(GeneratorError):
        PseudoTree(5, cycle=2).gen()


def test_fixed_settings_cannot_change():
    graph = PseudoTree(5)
    with pytest.raises(AttributeError):
        graph.edge_count = 3
    with pytest.raises(AttributeError):
        graph.direction = True
    assert graph.edge_count == 5
    assert graph.direction is False