from collections import deque
from grid import Coord
from strategies.common import reconstruct_path

def run_dijkstra(grid, start, end):
    """
    Dijkstra's algorithm with unit edge costs.
    The frontier is a FIFO queue rather than a priority queue; with every step
    costing 1 this expands cells in non-decreasing distance order anyway.
    Args:
        grid: Grid to search (read only)
        start: start Coord
        end: end Coord
    Returns:
        (nodes_expanded, path_list)
    """
    start, end = Coord(*start), Coord(*end)
    distances = [[float('inf')] * grid.cols for _ in range(grid.rows)]
    distances[start.row][start.col] = 0
    came_from = {}
    nodes_expanded = 0
    queue = deque([(start, 0)])  # (cell, distance when queued)

    while queue:
        node, dist = queue.popleft()
        nodes_expanded += 1
        if node == end:
            break
        for neighbor in grid.neighbors(node):
            if grid.is_obstacle(neighbor):
                continue
            new_dist = dist + 1
            # Only requeue if we found a shorter route (relaxation)
            if new_dist < distances[neighbor.row][neighbor.col]:
                distances[neighbor.row][neighbor.col] = new_dist
                came_from[neighbor] = node
                queue.append((neighbor, new_dist))

    return nodes_expanded, reconstruct_path(came_from, end, start)
