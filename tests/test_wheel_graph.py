from collections import Counter

import pytest

from casegen.messages import GeneratorError
from casegen.wheel_graph import WheelGraph


def _degrees(graph):
    counts = Counter()
    for e in graph.edges:
        counts[e.u] += 1
        counts[e.v] += 1
    return counts


@pytest.mark.parametrize("n", [4, 5, 9])
def test_wheel_edge_count_matches_formula(n):
    w = WheelGraph(n)
    w.gen()
    assert len(w.edges) == 2 * n - 2
    assert w.edge_count == 2 * n - 2


def test_wheel_has_one_hub_and_rim_degree_three():
    w = WheelGraph(7)
    w.gen()
    degrees = sorted(_degrees(w).values())
    assert degrees == [3] * 6 + [6]


def test_hub_is_only_an_edge_target():
    w = WheelGraph(8)
    w.gen()
    hub = max(_degrees(w).items(), key=lambda item: item[1])[0]
    assert all(e.u != hub for e in w.edges)
    assert sum(1 for e in w.edges if e.v == hub) == 7


def test_wheel_has_no_repeated_edges():
    w = WheelGraph(6)
    w.gen()
    keys = {frozenset((e.u, e.v)) for e in w.edges}
    assert len(keys) == len(w.edges)


def test_too_few_nodes_fails():
    with pytest.raises(GeneratorError):
        WheelGraph(3).gen()


def test_edge_count_cannot_be_set():
    w = WheelGraph(5)
    with pytest.raises(AttributeError):
        w.edge_count = 3
    assert w.edge_count == 8


def test_connect_cannot_be_set():
    w = WheelGraph(5)
    with pytest.raises(AttributeError):
        w.connect = True
    assert w.connect is False


def test_output_first_line_and_weights():
    w = WheelGraph(6, begin_node=0, edges_weight_function=lambda: 7)
    w.gen()
    lines = str(w).split("\n")
    assert lines[0] == f"6 {len(w.edges)}"
    assert all(line.split()[2] == "7" for line in lines[1:])
    labels = {x for e in w.output_edges() for x in (e.u, e.v)}
    assert labels == set(range(6))