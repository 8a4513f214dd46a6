import io

import pytest

from dsalgo.bfs import NoPathError, bfs, main, shortest_path, undirected_adjacency

EDGES = [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)]


def test_adjacency_is_symmetric():
    matrix = undirected_adjacency(5, EDGES)
    for u, v in EDGES:
        assert matrix[u][v] == 1
        assert matrix[v][u] == 1
    assert all(matrix[i][j] == matrix[j][i] for i in range(5) for j in range(5))
    assert sum(map(sum, matrix)) == 2 * len(EDGES)


def test_adjacency_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        undirected_adjacency(3, [(0, 3)])


def test_distances():
    result = bfs(undirected_adjacency(5, EDGES), 0)
    assert result.distances == (0, 1, 1, 2, 3)
    assert result.parents[0] is None


def test_shortest_path_prefers_lower_vertices():
    result = bfs(undirected_adjacency(5, EDGES), 0)
    assert shortest_path(result, 4) == [0, 1, 3, 4]


def test_paths_match_distances_and_edges():
    matrix = undirected_adjacency(5, EDGES)
    result = bfs(matrix, 0)
    for target in range(5):
        path = shortest_path(result, target)
        assert path[0] == 0
        assert path[-1] == target
        assert len(path) == result.distances[target] + 1
        assert all(matrix[a][b] == 1 for a, b in zip(path, path[1:]))


def test_path_to_source_is_source_alone():
    result = bfs(undirected_adjacency(5, EDGES), 2)
    assert shortest_path(result, 2) == [2]


def test_unreachable_vertex():
    result = bfs(undirected_adjacency(4, [(0, 1)]), 0)
    assert result.distances[3] is None
    assert result.parents[3] is None
    with pytest.raises(NoPathError):
        shortest_path(result, 3)


def test_bad_source_and_target():
    matrix = undirected_adjacency(3, [(0, 1)])
    with pytest.raises(ValueError):
        bfs(matrix, 3)
    with pytest.raises(ValueError):
        shortest_path(bfs(matrix, 0), -1)


def test_main_prints_path(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n1 2\n0\n2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Shortest path from 0 to 2: 0 1 2" in out


def test_main_reports_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err