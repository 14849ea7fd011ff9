import random
from collections import Counter

import pytest

from casegen.flower import Flower
from casegen.messages import GeneratorError


@pytest.mark.parametrize("seed", range(5))
def test_one_centre_touches_every_edge(seed):
    random.seed(seed)
    g = Flower(6)
    g.gen()
    edges = g.output_edges()
    assert len(edges) == 5
    centres = [e.u for e in edges]
    assert len(set(centres)) == 1
    leaves = {e.v for e in edges}
    assert leaves | {centres[0]} == set(range(1, 7))


def test_rooted_flower_has_root_as_centre():
    random.seed(7)
    g = Flower(6, is_rooted=True, root=3)
    g.gen()
    edges = g.output_edges()
    assert all(e.u == 3 for e in edges)
    lines = str(g).split("\n")
    assert lines[0] == "6 3"
    assert all(line.split()[0] == "3" for line in lines[1:])


def test_unrooted_header_is_node_count():
    random.seed(8)
    g = Flower(5, begin_node=0)
    g.gen()
    lines = str(g).split("\n")
    assert lines[0] == "5"
    assert len(lines) == 5
    degrees = Counter()
    for e in g.output_edges():
        degrees[e.u] += 1
        degrees[e.v] += 1
    assert sorted(degrees.values()) == [1, 1, 1, 1, 4]
    assert set(degrees) == set(range(5))


def test_single_node_has_no_edges():
    g = Flower(1)
    g.gen()
    assert g.edges == []
    assert str(g) == "1"


def test_node_weights_are_generated():
    random.seed(9)
    g = Flower(4, nodes_weight_function=lambda: 2)
    g.gen()
    assert g.nodes_weight == [2, 2, 2, 2]
    assert str(g).split("\n")[1] == "2 2 2 2"


def test_root_out_of_range_fails():
    g = Flower(5, is_rooted=True, root=9)
    with pytest.raises(GeneratorError):
        g.gen()


def test_regenerating_replaces_edges():
    random.seed(10)
    g = Flower(7)
    g.gen()
    g.gen()
    assert len(g.edges) == 6