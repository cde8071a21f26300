import pytest
from hypothesis import given, strategies as st

from dsakit.traversal import (
    bfs,
    dfs_iterative,
    dfs_recursive,
    find_bridges,
    format_matrix,
    has_cycle,
    topological_sort,
)

SOURCE_GRAPH = [[0, 1, 1, 0], [0, 0, 1, 0], [1, 0, 0, 1], [0, 0, 0, 1]]


def _assert_reaches_through_edges(matrix, order):
    assert len(set(order)) == len(order)
    for position, node in enumerate(order[1:], start=1):
        assert any(matrix[earlier][node] == 1 for earlier in order[:position])


def test_bfs_source_graph():
    assert bfs(SOURCE_GRAPH, 0) == [0, 1, 2, 3]


def test_bfs_from_isolated_sink():
    assert bfs(SOURCE_GRAPH, 3) == [3]


@pytest.mark.parametrize("traverse", [dfs_iterative, dfs_recursive, bfs])
def test_traversals_cover_reachable_vertices(traverse):
    order = traverse(SOURCE_GRAPH, 0)
    assert order[0] == 0
    assert set(order) == {0, 1, 2, 3}
    _assert_reaches_through_edges(SOURCE_GRAPH, order)


def test_dfs_recursive_descends_before_siblings():
    order = dfs_recursive(SOURCE_GRAPH, 1)
    assert order[:2] == [1, 2]
    assert set(order) == {0, 1, 2, 3}


@pytest.mark.parametrize("traverse", [dfs_iterative, dfs_recursive, bfs])
def test_traversals_reject_bad_start(traverse):
    with pytest.raises(ValueError):
        traverse(SOURCE_GRAPH, 4)


@given(
    st.integers(min_value=1, max_value=6).flatmap(
        lambda n: st.lists(
            st.lists(st.integers(0, 1), min_size=n, max_size=n), min_size=n, max_size=n
        )
    )
)
def test_traversals_agree_on_reached_set(matrix):
    reached = set(bfs(matrix, 0))
    for traverse in (dfs_iterative, dfs_recursive):
        order = traverse(matrix, 0)
        assert set(order) == reached
        _assert_reaches_through_edges(matrix, order)


def test_has_cycle():
    assert has_cycle([[1], [2], [0]]) is True
    assert has_cycle([[1], [2], []]) is False
    assert has_cycle([[0]]) is True
    assert has_cycle([]) is False


@given(
    st.integers(min_value=1, max_value=8).flatmap(
        lambda n: st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=15
        ).map(lambda pairs: (n, pairs))
    )
)
def test_topological_sort_respects_edges(graph):
    n, pairs = graph
    adjacency = [[] for _ in range(n)]
    for a, b in pairs:
        if a != b:
            adjacency[min(a, b)].append(max(a, b))
    assert has_cycle(adjacency) is False
    order = topological_sort(adjacency)
    assert sorted(order) == list(range(n))
    position = {node: i for i, node in enumerate(order)}
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            assert position[u] < position[v]


def test_find_bridges_triangle_with_tail():
    adjacency = [[1, 2], [0, 2], [0, 1, 3], [2]]
    assert {frozenset(edge) for edge in find_bridges(adjacency)} == {frozenset({2, 3})}


def test_find_bridges_cycle_has_none():
    assert find_bridges([[1, 3], [0, 2], [1, 3], [2, 0]]) == []


def test_find_bridges_path_every_edge():
    adjacency = [[1], [0, 2], [1, 3], [2]]
    edges = {frozenset(edge) for edge in find_bridges(adjacency)}
    assert edges == {frozenset({0, 1}), frozenset({1, 2}), frozenset({2, 3})}


def test_format_matrix():
    assert format_matrix([[0, 1], [1, 0]]) == "0  1  \n1  0  \n"


def test_format_matrix_rows():
    text = format_matrix(SOURCE_GRAPH)
    lines = text.splitlines()
    assert len(lines) == len(SOURCE_GRAPH)
    assert [list(map(int, line.split())) for line in lines] == SOURCE_GRAPH