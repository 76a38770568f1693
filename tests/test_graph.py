import pytest

from algokit.graph import MAX_VERTICES, Graph


def _demo():
    g = Graph(6, False)
    for src, dest in [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]:
        g.add_edge(src, dest)
    return g


@pytest.mark.parametrize("count", [0, -1, MAX_VERTICES + 1])
def test_invalid_vertex_count_raises(count):
    with pytest.raises(ValueError):
        Graph(count, False)


def test_max_vertices_allowed():
    g = Graph(MAX_VERTICES, True)
    assert g.num_vertices == MAX_VERTICES
    assert g.oriented is True


def test_add_edge_rejects_duplicates_and_self_loops():
    g = Graph(3, False)
    assert g.add_edge(0, 1) is True
    assert g.add_edge(0, 1) is False
    assert g.add_edge(1, 0) is False
    assert g.add_edge(2, 2) is False


def test_add_edge_invalid_vertex_raises():
    g = Graph(3, False)
    with pytest.raises(ValueError):
        g.add_edge(0, 3)
    with pytest.raises(ValueError):
        g.add_edge(-1, 0)


def test_has_edge_invalid_vertices_is_false():
    g = Graph(3, False)
    g.add_edge(0, 1)
    assert g.has_edge(0, 5) is False
    assert g.has_edge(-1, 1) is False


def test_undirected_edges_are_symmetric():
    g = Graph(3, False)
    g.add_edge(0, 2)
    assert g.has_edge(0, 2) and g.has_edge(2, 0)
    assert not g.has_edge(0, 1)


def test_directed_edges_are_one_way():
    g = Graph(3, True)
    g.add_edge(0, 2)
    assert g.has_edge(0, 2)
    assert not g.has_edge(2, 0)
    assert g.add_edge(2, 0) is True


def test_neighbors_most_recent_first():
    g = Graph(4, True)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(0, 3)
    assert g.neighbors(0) == [3, 2, 1]


def test_bfs_demo_order():
    assert _demo().bfs(0) == [0, 4, 1, 3, 2]


def test_bfs_distances_non_decreasing():
    g = _demo()
    order = g.bfs(2)
    distance = {2: 0}
    for vertex in order:
        for n in g.neighbors(vertex):
            distance.setdefault(n, distance[vertex] + 1)
    dists = [distance[v] for v in order]
    assert dists == sorted(dists)


def test_traversal_limited_to_component():
    g = Graph(5, False)
    g.add_edge(0, 1)
    g.add_edge(3, 4)
    assert sorted(g.bfs(0)) == [0, 1]
    assert sorted(g.dfs(4)) == [3, 4]
    assert g.recursive_dfs(2) == [2]


def test_directed_traversal_follows_direction():
    g = Graph(3, True)
    g.add_edge(1, 0)
    g.add_edge(1, 2)
    assert g.bfs(0) == [0]
    assert sorted(g.dfs(1)) == [0, 1, 2]


def test_dfs_consecutive_vertices_adjacent_on_path():
    g = Graph(4, False)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    order = g.recursive_dfs(0)
    assert order == [0, 1, 2, 3]
    assert g.dfs(0) == order


def test_traversal_invalid_start_raises():
    g = Graph(3, False)
    for method in (g.bfs, g.dfs, g.recursive_dfs, g.neighbors):
        with pytest.raises(ValueError):
            method(3)


def test_reversed_flips_edges():
    g = Graph(4, True)
    edges = [(0, 1), (1, 2), (3, 2)]
    for src, dest in edges:
        g.add_edge(src, dest)
    r = g.reversed()
    assert r.oriented is True
    for src, dest in edges:
        assert r.has_edge(dest, src)
        assert not r.has_edge(src, dest)
    assert r.reversed().bfs(0) == g.bfs(0)


def test_reverse_undirected_raises():
    with pytest.raises(ValueError):
        _demo().reversed()


def test_cycle_is_strongly_connected():
    g = Graph(4, True)
    for v in range(4):
        g.add_edge(v, (v + 1) % 4)
    assert g.is_strongly_connected() is True


def test_chain_is_not_strongly_connected():
    g = Graph(3, True)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    assert g.is_strongly_connected() is False


def test_isolated_vertex_breaks_strong_connectivity():
    g = Graph(3, True)
    g.add_edge(0, 1)
    g.add_edge(1, 0)
    assert g.is_strongly_connected() is False


def test_undirected_is_never_strongly_connected():
    assert _demo().is_strongly_connected() is False