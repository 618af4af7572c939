import pytest

from judgekit.trees import (
    accumulated_praise,
    leaves_after_removal,
    max_independent_set,
    min_early_adopters,
    parents_of,
    subtree_sizes,
    traversals,
)

TREE = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (6, 7), (6, 8)]


def test_leaves_remove_root_leaves_nothing():
    assert leaves_after_removal([-1, 0, 0, 1, 1], 0) == 0


def test_leaves_star_remove_one_leaf():
    parents = [-1, 0, 0, 0]
    assert leaves_after_removal(parents, 1) == len(parents) - 2


def test_leaves_remove_only_child_makes_parent_leaf():
    assert leaves_after_removal([-1, 0, 1], 2) == leaves_after_removal([-1, 0], 0) + 1


def test_leaves_rejects_bad_node():
    with pytest.raises(ValueError):
        leaves_after_removal([-1, 0], 5)


def test_parents_are_edges():
    result = parents_of(8, TREE)
    edge_set = {frozenset(e) for e in TREE}
    for child, parent in enumerate(result, start=2):
        assert frozenset((child, parent)) in edge_set


def test_parents_path_out_of_order():
    assert parents_of(3, [(3, 2), (2, 1)]) == [1, 2]


def test_praise_from_head_reaches_everyone():
    superiors = [-1, 1, 2, 2, 3]
    assert accumulated_praise(superiors, [(1, 7)]) == [7] * len(superiors)


def test_praise_flows_only_downward():
    result = accumulated_praise([-1, 1, 2, 3, 4], [(3, 4)])
    assert result[:2] == [0, 0]
    assert result[2:] == [4, 4, 4]


def test_praise_none_given():
    assert accumulated_praise([-1, 1, 1], []) == [0, 0, 0]


def test_subtree_sizes_invariants():
    sizes = subtree_sizes(8, 1, TREE)
    assert sizes[1] == 8
    children = {1: [2, 3], 2: [4, 5], 3: [6], 6: [7, 8]}
    for node, kids in children.items():
        assert sizes[node] == 1 + sum(sizes[k] for k in kids)
    for leaf in (4, 5, 7, 8):
        assert sizes[leaf] == 1


def test_subtree_sizes_rejects_bad_root():
    with pytest.raises(ValueError):
        subtree_sizes(3, 4, [(1, 2), (2, 3)])


def test_traversals_example():
    nodes = [
        ("A", "B", "C"),
        ("B", "D", "."),
        ("C", "E", "F"),
        ("E", ".", "."),
        ("F", ".", "G"),
        ("D", ".", "."),
        ("G", ".", "."),
    ]
    pre, ino, post = traversals(nodes)
    assert pre == "ABDCEFG"
    assert ino == "DBAECFG"
    assert post == "DBEGFCA"


def test_traversals_single_node():
    assert traversals([("A", ".", ".")]) == ("A", "A", "A")


def test_traversals_requires_root():
    with pytest.raises(ValueError):
        traversals([("B", ".", ".")])


def _independent(nodes, edges):
    chosen = set(nodes)
    return all(not (a in chosen and b in chosen) for a, b in edges)


def test_independent_set_is_consistent():
    weights = [10, 30, 40, 10, 20, 20, 70, 30]
    total, nodes = max_independent_set(weights, TREE)
    assert total == sum(weights[v - 1] for v in nodes)
    assert _independent(nodes, TREE)
    assert nodes == sorted(nodes)
    assert total >= max(weights)


def test_independent_set_single_vertex():
    assert max_independent_set([5], []) == (5, [1])


def test_independent_set_path():
    edges = [(1, 2), (2, 3), (3, 4)]
    weights = [10, 1, 1, 10]
    total, nodes = max_independent_set(weights, edges)
    assert _independent(nodes, edges)
    assert total == weights[0] + weights[3]


def test_early_adopters_star_matches_single_edge():
    star = [(1, k) for k in range(2, 8)]
    assert min_early_adopters(7, star) == min_early_adopters(2, [(1, 2)]) == 1


def test_early_adopters_bounds():
    result = min_early_adopters(8, TREE)
    assert 1 <= result <= 8 // 2
    assert min_early_adopters(8, TREE) == min_early_adopters(
        8, [(b, a) for a, b in reversed(TREE)]
    )