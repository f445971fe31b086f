import constants


def FormatBytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes is None:
        return "N/A"
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"


def format_path(path):
    """'(r,c) -> (r,c) -> ...' string of a path, empty string for no path."""
    return " -> ".join(f"({r},{c})" for r, c in path)


def render_grid(grid, path=()):
    """Text rendering of the grid, one line per row, path cells drawn as '*'."""
    cells = grid.mark_path(path)
    return "\n".join(
        "".join(constants.STATE_CHARS[state] for state in row)
        for row in cells
    )
