def manhattan(a, b):
    """Manhattan distance between (row, col) coordinates a and b."""
    (r1, c1), (r2, c2) = a, b
    return abs(r1 - r2) + abs(c1 - c2)

def reconstruct_path(came_from, current, start=None):
    """Reconstructs path (list of coordinates) from came_from map.

    Returns an empty list when `current` was never reached, i.e. it has no
    predecessor entry and is not the start cell itself.
    """
    if current not in came_from and current != start:
        return []
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path
