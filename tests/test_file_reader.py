import pytest

from file_reader import parse_grid_file
from constants import OBSTACLE


def write(tmp_path, text):
    path = tmp_path / "grid.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_literal_grid(case_path):
    grid = parse_grid_file(case_path("small.txt"))
    assert (grid.rows, grid.cols) == (3, 3)
    assert grid.start == (0, 0)
    assert grid.end == (2, 2)


def test_meta_and_obstacles(case_path):
    grid = parse_grid_file(case_path("default.txt"))
    assert (grid.rows, grid.cols) == (20, 50)
    assert grid.start == (10, 2)
    assert grid.end == (10, 47)
    assert grid.cell((0, 15)) == OBSTACLE
    assert not grid.is_obstacle((17, 15))
    assert not grid.is_obstacle((2, 33))
    assert len(grid.obstacles()) == 38


def test_meta_overrides_grid_markers(tmp_path):
    grid = parse_grid_file(write(tmp_path, "[GRID]\nS..\n..E\n[META]\nSTART,1,0\n"))
    assert grid.start == (1, 0)
    assert grid.cell((0, 0)) == "empty"


def test_comments_and_blank_lines_ignored(tmp_path):
    grid = parse_grid_file(write(tmp_path, "# header\n\n[META]\nROWS,4\nCOLS,6\n# no obstacles\n[OBSTACLES]\n"))
    assert (grid.rows, grid.cols) == (4, 6)
    assert grid.start is None


def test_hash_rows_inside_grid_section_are_cells(tmp_path):
    grid = parse_grid_file(write(tmp_path, "[GRID]\nS.E\n###\n"))
    assert grid.obstacles() == [(1, 0), (1, 1), (1, 2)]


@pytest.mark.parametrize("text", [
    "[META]\nROWS,x\n",
    "[META]\nSPEED,3\n",
    "[META]\nROWS,2\nCOLS,2\n[OBSTACLES]\n5,5\n",
    "[OBSTACLES]\n1\n",
    "1,1\n",
    "[META]\nROWS,3\n[GRID]\nS.\n.E\n",
])
def test_malformed_files(tmp_path, text):
    with pytest.raises(ValueError):
        parse_grid_file(write(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_grid_file(str(tmp_path / "nope.txt"))
