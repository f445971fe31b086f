import heapq
import itertools
from grid import Coord
from strategies.common import manhattan, reconstruct_path

def run_astar(grid, start, end):
    """
    Performs A* search with the Manhattan heuristic from start to end.
    Args:
        grid: Grid to search (read only)
        start: start Coord
        end: end Coord
    Returns:
        (nodes_expanded, path_list)

    The open set is a heap keyed on (f_score, insertion counter): among equal
    f scores the cell that entered the open set first is expanded first.
    A cell whose score improves while open keeps its place in that order.
    """
    start, end = Coord(*start), Coord(*end)
    g_score = [[float('inf')] * grid.cols for _ in range(grid.rows)]
    f_score = [[float('inf')] * grid.cols for _ in range(grid.rows)]
    g_score[start.row][start.col] = 0
    f_score[start.row][start.col] = manhattan(start, end)

    came_from = {}
    nodes_expanded = 0
    counter = itertools.count()
    open_order = {start: next(counter)}   # cells currently in the open set
    heap = [(f_score[start.row][start.col], open_order[start], start)]

    while heap:
        f, order, current = heapq.heappop(heap)
        # skip entries superseded by a better score or already expanded
        if open_order.get(current) != order or f != f_score[current.row][current.col]:
            continue
        del open_order[current]
        nodes_expanded += 1

        if current == end:
            break

        for neighbor in grid.neighbors(current):
            if grid.is_obstacle(neighbor):
                continue
            tentative_g = g_score[current.row][current.col] + 1
            if tentative_g < g_score[neighbor.row][neighbor.col]:
                came_from[neighbor] = current
                g_score[neighbor.row][neighbor.col] = tentative_g
                f_score[neighbor.row][neighbor.col] = tentative_g + manhattan(neighbor, end)
                # no duplicate open set entries: an open cell only gets its heap key refreshed
                if neighbor not in open_order:
                    open_order[neighbor] = next(counter)
                heapq.heappush(heap, (f_score[neighbor.row][neighbor.col], open_order[neighbor], neighbor))

    return nodes_expanded, reconstruct_path(came_from, end, start)
