from grid import Grid, Coord
import constants


def parse_coord(parts, line):
    if len(parts) < 2:
        raise ValueError(f"Line '{line}' needs a row and a column")
    try:
        return Coord(int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(f"Line '{line}' has a non integer coordinate")


def parse_grid_file(path):
    """Parses a grid problem file

    Sections:
        [META]       ROWS,<n> / COLS,<n> / START,<r>,<c> / END,<r>,<c>
        [OBSTACLES]  one <r>,<c> per line
        [GRID]       literal rows ('.' empty, '#' obstacle, 'S' start, 'E' end)

    Args:
        path (string): Filepath to the grid txt file

    Returns:
        Grid: populated grid with start/end markers placed when given
    """
    section = None
    meta = {}
    obstacles = []
    grid_rows = []

    def is_header(line):
        return line.startswith("[") and line.endswith("]")

    def ignore(line):
        return (not line.strip()) or line.strip().startswith("#") and section != "[GRID]"

    with open(path, "r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            if ignore(line):
                continue
            if is_header(line):
                section = line.upper()
                continue

            if section == "[META]":
                p = [x.strip() for x in line.split(",")]
                key = p[0].upper()
                if key in ("ROWS", "COLS"):
                    try:
                        meta[key] = int(p[1])
                    except (IndexError, ValueError):
                        raise ValueError(f"Line '{line}' needs an integer value")
                elif key in ("START", "END"):
                    meta[key] = parse_coord(p[1:], line)
                else:
                    raise ValueError(f"Unknown META key in line '{line}'")

            elif section == "[OBSTACLES]":
                obstacles.append(parse_coord([x.strip() for x in line.split(",")], line))

            elif section == "[GRID]":
                grid_rows.append(line)

            else:
                raise ValueError(f"Line '{line}' is outside of any section")

    if grid_rows:
        grid = Grid.from_rows(grid_rows)
        if meta.get("ROWS", grid.rows) != grid.rows or meta.get("COLS", grid.cols) != grid.cols:
            raise ValueError(
                f"META size {meta.get('ROWS')}x{meta.get('COLS')} does not match "
                f"[GRID] size {grid.rows}x{grid.cols}"
            )
    else:
        grid = Grid(meta.get("ROWS", constants.GRID_ROWS), meta.get("COLS", constants.GRID_COLS))

    for coord in obstacles:
        if not grid.in_bounds(coord):
            raise ValueError(f"Obstacle {tuple(coord)} is outside the {grid.rows}x{grid.cols} grid")
        if grid.cell(coord) == constants.EMPTY:
            grid.cells[coord.row][coord.col] = constants.OBSTACLE

    if "START" in meta:
        grid.set_start(*meta["START"])
    if "END" in meta:
        grid.set_end(*meta["END"])
    return grid
