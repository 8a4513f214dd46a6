import io
import random

import pytest

from dsalgo.dfs import connected_components, dfs, directed_adjacency, main


def _random_graph(seed, count, edge_count):
    rng = random.Random(seed)
    edges = [(rng.randrange(count), rng.randrange(count)) for _ in range(edge_count)]
    return directed_adjacency(count, edges)


def test_directed_adjacency_is_one_way():
    matrix = directed_adjacency(3, [(0, 1)])
    assert matrix[0][1] == 1
    assert matrix[1][0] == 0


def test_directed_adjacency_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        directed_adjacency(2, [(2, 0)])


def test_chain_timestamps():
    result = dfs(directed_adjacency(3, [(0, 1), (1, 2)]))
    assert result.discovery == (1, 2, 3)
    assert result.finish == (6, 5, 4)
    assert result.parents == (None, 0, 1)


@pytest.mark.parametrize("seed", range(5))
def test_timestamps_are_a_permutation(seed):
    count = 12
    result = dfs(_random_graph(seed, count, 20))
    stamps = list(result.discovery) + list(result.finish)
    assert sorted(stamps) == list(range(1, 2 * count + 1))
    assert all(d < f for d, f in zip(result.discovery, result.finish))


@pytest.mark.parametrize("seed", range(5))
def test_children_nest_inside_parents(seed):
    matrix = _random_graph(seed, 10, 15)
    result = dfs(matrix)
    for child, parent in enumerate(result.parents):
        if parent is None:
            continue
        assert matrix[parent][child] == 1
        assert result.discovery[parent] < result.discovery[child]
        assert result.finish[child] < result.finish[parent]


def test_components_without_edges_equal_vertex_count():
    count = 4
    assert connected_components(directed_adjacency(count, [])) == count


def test_components_follow_edge_direction():
    assert connected_components(directed_adjacency(2, [(1, 0)])) == 2


def test_components_match_forest_roots():
    matrix = _random_graph(7, 15, 10)
    roots = dfs(matrix).parents.count(None)
    assert connected_components(matrix) == roots


def test_main_reports(monkeypatch, capsys):
    edges = [(0, 1), (1, 2)]
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n1 2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = connected_components(directed_adjacency(3, edges))
    assert f"No of connected components: {expected}" in out
    assert "Vertex 2 started at" in out


def test_main_reports_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err