from compare import compare_strategies, main
from file_reader import parse_grid_file


def test_compare_open_grid(case_path):
    df = compare_strategies(parse_grid_file(case_path("small.txt")))
    assert list(df.columns) == ["method", "nodes_expanded", "steps", "path"]
    assert set(df["method"]) == {"BFS", "DFS", "DIJKSTRA", "AS"}
    assert df.loc[0, "steps"] == 5
    assert all(s >= 5 for s in df["steps"])
    assert df.loc[df["method"] == "BFS", "path"].iloc[0] == "(0,0) -> (1,0) -> (2,0) -> (2,1) -> (2,2)"


def test_compare_default_board(case_path):
    df = compare_strategies(parse_grid_file(case_path("default.txt")))
    steps = dict(zip(df["method"], df["steps"]))
    assert steps["BFS"] == steps["DIJKSTRA"] == steps["AS"] == 76
    assert steps["DFS"] >= 76


def test_compare_no_path(case_path):
    df = compare_strategies(parse_grid_file(case_path("enclosed.txt")))
    assert list(df["steps"]) == ["No Path Found"] * 4
    assert list(df["path"]) == [""] * 4


def test_main_prints_table(case_path, capsys):
    main(case_path("maze.txt"))
    out = capsys.readouterr().out
    assert "DIJKSTRA" in out
    assert "18" in out
