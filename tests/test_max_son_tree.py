import random
from collections import Counter

import pytest

from casegen.max_son_tree import MaxSonTree
from casegen.messages import GeneratorError


def _check_rooted_tree(tree):
    n = tree.node_count
    root = tree.node_indices[tree.root - 1]
    edges = tree.output_edges()
    assert len(edges) == n - 1
    sons = [e.v for e in edges]
    assert len(set(sons)) == n - 1
    assert root not in sons
    return Counter(e.u for e in edges)


@pytest.mark.parametrize("seed", range(8))
def test_son_limit_respected(seed):
    random.seed(seed)
    tree = MaxSonTree(10, 1, 1, 2)
    tree.gen()
    fathers = _check_rooted_tree(tree)
    assert max(fathers.values()) <= 2


@pytest.mark.parametrize("seed", range(5))
def test_binary_limit_with_other_root(seed):
    random.seed(seed)
    tree = MaxSonTree(15, 0, 7, 1)
    tree.gen()
    fathers = _check_rooted_tree(tree)
    assert max(fathers.values()) == 1
    assert tree.node_indices[6] == 6


@pytest.mark.parametrize("seed", range(5))
def test_default_max_son_is_chosen(seed):
    random.seed(seed)
    tree = MaxSonTree(8)
    tree.gen()
    assert 2 <= tree.max_son <= 7
    fathers = _check_rooted_tree(tree)
    assert max(fathers.values()) <= tree.max_son


def test_single_node():
    tree = MaxSonTree(1)
    tree.gen()
    assert tree.max_son == 0
    assert tree.edges == []
    assert str(tree) == "1 1"


def test_large_limit_still_builds_tree():
    random.seed(9)
    tree = MaxSonTree(6, 1, 2, 20)
    tree.gen()
    fathers = _check_rooted_tree(tree)
    assert sum(fathers.values()) == 5


def test_zero_limit_fails():
    tree = MaxSonTree(3, 1, 1, 0)
    with pytest.raises(GeneratorError):
        tree.gen()


def test_root_out_of_range_fails():
    tree = MaxSonTree(4, 1, 5, 2)
    with pytest.raises(GeneratorError):
        tree.gen()


def test_is_rooted_is_fixed():
    tree = MaxSonTree(4)
    with pytest.raises(AttributeError):
        tree.is_rooted = False
    assert tree.is_rooted is True


def test_output_starts_with_node_count_and_root():
    random.seed(11)
    tree = MaxSonTree(5, 1, 3, 2)
    tree.gen()
    lines = str(tree).split("\n")
    assert lines[0] == "5 3"
    assert len(lines) == 5


def test_edge_weights_are_generated():
    random.seed(12)
    tree = MaxSonTree(6, 1, 1, 3, edges_weight_function=lambda: 5)
    tree.gen()
    assert [e.w for e in tree.output_edges()] == [5] * 5