from collections import deque
from grid import Coord
from strategies.common import reconstruct_path

def run_bfs(grid, start, end):
    """Breadth-First Search over the grid: returns (nodes_expanded, path_list)."""
    start, end = Coord(*start), Coord(*end)
    q = deque([start])
    came_from = {}
    visited = {start}
    nodes_expanded = 0

    while q:
        node = q.popleft()
        nodes_expanded += 1

        # stop on the first dequeue of end, not on its discovery
        if node == end:
            break

        for neighbor in grid.neighbors(node):
            if neighbor not in visited and not grid.is_obstacle(neighbor):
                visited.add(neighbor)
                q.append(neighbor)
                came_from[neighbor] = node

    return nodes_expanded, reconstruct_path(came_from, end, start)
