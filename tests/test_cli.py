import io

import pytest

from algodojo.tessoku.cli import main, run
from algodojo.tessoku.dp_paths import min_dungeon_route
from algodojo.tessoku.graphs import dijkstra


def test_square():
    assert run("a1", "3\n") == "9\n"


def test_tour_square_points():
    assert run("b23", "4\n0 0\n0 1\n1 0\n1 1\n") == "4\n"


def test_tour_collinear_points():
    assert run("b23", "3\n0 0\n1 0\n2 0\n") == "4\n"


def test_tour_without_points_is_an_error():
    with pytest.raises(ValueError):
        run("b23", "0\n")


def test_dungeon_route_matches_solver():
    ls, ms = [2, 4, 1, 3], [5, 3, 2]
    text = f"5\n{' '.join(map(str, ls))}\n{' '.join(map(str, ms))}\n"
    lines = run("a17", text).split("\n")
    route = [int(x) for x in lines[1].split()]
    assert int(lines[0]) == len(route)
    assert route == min_dungeon_route(ls, ms)
    assert route[0] == 1 and route[-1] == 5


def test_adjacency_listing():
    assert run("a61", "2 1\n1 2\n") == "1: {2}\n2: {1}\n"


def test_adjacency_isolated_vertex():
    lines = run("a61", "3 1\n1 2\n").splitlines()
    assert len(lines) == 3
    assert lines[2] == "3: {}"


def test_shortest_paths_match_dijkstra():
    text = "4 3\n1 2 5\n2 3 1\n1 3 9\n"
    got = run("a64", text).split()
    expected = dijkstra(4, [(0, 1, 5), (1, 2, 1), (0, 2, 9)])
    assert got == [str(-1 if d is None else d) for d in expected]
    assert got[3] == "-1"


def test_union_queries():
    text = "3 4\n1 1 2\n2 1 2\n2 1 3\n1 2 3\n"
    assert run("a66", text) == "Yes \nNo \n"


def test_judge_ranges():
    text = "3\n1 0 1\n3\n1 1\n2 2\n1 2\n"
    assert run("b6", text).splitlines() == ["win", "lose", "draw"]


def test_subset_choice_impossible():
    assert run("b18", "2 5\n2 2\n") == "-1\n"


def test_subset_choice_sums_to_target():
    xs = [3, 1, 4, 1, 5]
    lines = run("b18", "5 9\n3 1 4 1 5\n").split("\n")
    chosen = [int(x) for x in lines[1].split()]
    assert int(lines[0]) == len(chosen)
    assert sum(xs[i - 1] for i in chosen) == 9
    assert chosen == sorted(set(chosen))


def test_cut_queries():
    text = "3 2\n1 2\n2 3\n3\n2 1 3\n1 2\n2 1 3\n"
    assert run("b66", text) == "Yes \nNo \n"


def test_unknown_problem():
    with pytest.raises(ValueError):
        run("z9", "1")


def test_truncated_input():
    with pytest.raises(ValueError):
        run("b18", "3 4\n1 2\n")


def test_non_numeric_input():
    with pytest.raises(ValueError):
        run("a1", "three")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 2\n1 2\n3 4\n"))
    assert main(["a61"]) == 0
    assert capsys.readouterr().out == run("a61", "4 2\n1 2\n3 4\n")


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["a1"]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit):
        main(["nope"])