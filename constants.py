# Default grid dimensions used by the visualizer
GRID_ROWS = 20
GRID_COLS = 50

# Cell states
EMPTY = "empty"
OBSTACLE = "obstacle"
START = "start"
END = "end"
PATH = "path"  # display only, never stored in a grid under search

# Characters used by problem files and text rendering
CELL_CHARS = {
    '.': EMPTY,
    '#': OBSTACLE,
    'S': START,
    'E': END,
}
STATE_CHARS = {state: ch for ch, state in CELL_CHARS.items()}
STATE_CHARS[PATH] = '*'

# Neighbor expansion order: up, down, left, right
DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]

# Accepted method names (upper-cased) -> canonical name
ENUM_METHODS = ["BFS", "DFS", "DIJKSTRA", "AS"]
METHOD_ALIASES = {
    "BFS": "BFS",
    "DFS": "DFS",
    "DIJKSTRA": "DIJKSTRA",
    "CUS1": "DIJKSTRA",
    "AS": "AS",
    "ASTAR": "AS",
    "A*": "AS",
}

TEST_CASE_FOLDER = "Test_Cases_Grid"
