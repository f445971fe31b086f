from grid import Coord
from strategies.common import reconstruct_path

def run_dfs(grid, start, end):
    """Depth-First Search over the grid: returns (nodes_expanded, path_list).

    Cells are marked visited when pushed, so each cell enters the stack once
    and keeps the predecessor it was first discovered from.
    """
    start, end = Coord(*start), Coord(*end)
    stack = [start]
    came_from = {}
    visited = {start}
    nodes_expanded = 0

    while stack:
        node = stack.pop()
        nodes_expanded += 1

        if node == end:
            break

        # neighbours pushed in up, down, left, right order, so right is expanded first
        for neighbor in grid.neighbors(node):
            if neighbor not in visited and not grid.is_obstacle(neighbor):
                visited.add(neighbor)
                stack.append(neighbor)
                came_from[neighbor] = node

    return nodes_expanded, reconstruct_path(came_from, end, start)
