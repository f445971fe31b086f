import operator
from collections import namedtuple

import constants
from constants import EMPTY, OBSTACLE, START, END, PATH

Coord = namedtuple("Coord", ["row", "col"])


class InvalidInputError(ValueError):
    """Raised when a search is requested with unusable start/end cells."""


def get_neighbors(row, col, rows, cols):
    """Returns the in-bounds 4-directional neighbours of (row, col).

    Order is fixed (up, down, left, right) since BFS/DFS tie-breaks depend on it.
    """
    neighbors = []
    for dr, dc in constants.DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            neighbors.append(Coord(r, c))
    return neighbors


class Grid:
    """Fixed size rectangular grid of cell states."""
    def __init__(self, rows=constants.GRID_ROWS, cols=constants.GRID_COLS):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = int(rows)
        self.cols = int(cols)
        self.cells = [[EMPTY] * self.cols for _ in range(self.rows)]
        self.start = None   # Coord of the start marker
        self.end = None     # Coord of the end marker

    def __repr__(self):
        return f"Grid {self.rows}x{self.cols} start={self.start} end={self.end}"

    @classmethod
    def from_rows(cls, lines):
        """Builds a grid from text rows ('.' empty, '#' obstacle, 'S' start, 'E' end)."""
        lines = [line.strip() for line in lines if line.strip()]
        if not lines:
            raise ValueError("Grid needs at least one row")
        width = len(lines[0])
        grid = cls(len(lines), width)
        for r, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(f"Row {r} has {len(line)} cells, expected {width}")
            for c, ch in enumerate(line):
                state = constants.CELL_CHARS.get(ch)
                if state is None:
                    raise ValueError(f"Unknown cell character '{ch}' at ({r},{c})")
                if state == START:
                    grid.set_start(r, c)
                elif state == END:
                    grid.set_end(r, c)
                elif state == OBSTACLE:
                    grid.cells[r][c] = OBSTACLE
        return grid

    def copy(self):
        clone = Grid(self.rows, self.cols)
        clone.cells = [row[:] for row in self.cells]
        clone.start = self.start
        clone.end = self.end
        return clone

    # ---- queries ----

    def in_bounds(self, coord):
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, coord):
        row, col = coord
        return self.cells[row][col]

    def is_obstacle(self, coord):
        return self.cell(coord) == OBSTACLE

    def neighbors(self, coord):
        return get_neighbors(coord[0], coord[1], self.rows, self.cols)

    def obstacles(self):
        return [Coord(r, c)
                for r in range(self.rows)
                for c in range(self.cols)
                if self.cells[r][c] == OBSTACLE]

    # ---- placement ----

    def _place_marker(self, row, col, state):
        coord = Coord(row, col)
        if not self.in_bounds(coord):
            raise InvalidInputError(f"Cell {tuple(coord)} is outside the {self.rows}x{self.cols} grid")
        previous = self.start if state == START else self.end
        if previous is not None:
            self.cells[previous.row][previous.col] = EMPTY
        # Placing over the other marker removes it
        if self.start == coord:
            self.start = None
        if self.end == coord:
            self.end = None
        self.cells[row][col] = state
        if state == START:
            self.start = coord
        else:
            self.end = coord
        return coord

    def set_start(self, row, col):
        return self._place_marker(row, col, START)

    def set_end(self, row, col):
        return self._place_marker(row, col, END)

    def toggle_obstacle(self, row, col):
        """Flips an empty cell to obstacle and back. Start/end cells are left alone."""
        if not self.in_bounds((row, col)):
            raise InvalidInputError(f"Cell {(row, col)} is outside the {self.rows}x{self.cols} grid")
        state = self.cells[row][col]
        if state in (START, END):
            return False
        self.cells[row][col] = EMPTY if state == OBSTACLE else OBSTACLE
        return True

    def click(self, row, col):
        """Click placement: first click sets start, second sets end, later clicks toggle obstacles."""
        if self.start is None:
            self.set_start(row, col)
            return START
        if self.end is None:
            self.set_end(row, col)
            return END
        self.toggle_obstacle(row, col)
        return self.cells[row][col]

    def clear(self):
        self.cells = [[EMPTY] * self.cols for _ in range(self.rows)]
        self.start = None
        self.end = None

    # ---- search support ----

    def validate_endpoints(self, start, end):
        """Checks start/end are set, inside the grid and not obstacles.

        Returns:
            (Coord, Coord): the normalised start and end
        Raises:
            InvalidInputError
        """
        checked = []
        for name, coord in (("start", start), ("end", end)):
            if coord is None:
                raise InvalidInputError(f"Please set both start and end points ({name} is missing)")
            try:
                # floats and numeric strings are rejected rather than truncated
                coord = Coord(operator.index(coord[0]), operator.index(coord[1]))
            except (TypeError, ValueError, IndexError):
                raise InvalidInputError(f"Invalid {name} coordinate: {coord!r}")
            if not self.in_bounds(coord):
                raise InvalidInputError(f"{name.capitalize()} {tuple(coord)} is outside the {self.rows}x{self.cols} grid")
            if self.is_obstacle(coord):
                raise InvalidInputError(f"{name.capitalize()} {tuple(coord)} is an obstacle")
            checked.append(coord)
        return checked[0], checked[1]

    def mark_path(self, path):
        """Returns a copy of the cell matrix with path cells (except start/end) marked."""
        marked = [row[:] for row in self.cells]
        for row, col in path:
            if marked[row][col] not in (START, END):
                marked[row][col] = PATH
        return marked
