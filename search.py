import argparse
import sys
import time
import tracemalloc
from collections import namedtuple

import psutil

import constants
from file_reader import parse_grid_file
from strategies import STRATEGIES
from util import FormatBytes, format_path, render_grid

SearchResult = namedtuple(
    "SearchResult",
    ["method", "nodes_expanded", "path", "runtime_s", "peak_bytes", "rss_bytes"],
)


def resolve_method(method):
    """Maps a user supplied method name (BFS, DFS, DIJKSTRA, AS, ...) to its canonical name."""
    key = str(method).strip().upper()
    if key not in constants.METHOD_ALIASES:
        raise ValueError(f"Unknown method: {method}. Methods: {', '.join(constants.ENUM_METHODS)}")
    return constants.METHOD_ALIASES[key]


def _execute_with_metrics(run_fn, grid, start, end):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage)

    A tracemalloc session that is already running is left running, and the
    peak reported is then that session's peak.
    """
    owns_tracing = not tracemalloc.is_tracing()
    if owns_tracing:
        tracemalloc.start()
    proc = psutil.Process()
    t0 = time.perf_counter()
    try:
        result = run_fn(grid, start, end)
    finally:
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
        if owns_tracing:
            tracemalloc.stop()
    rss_after = proc.memory_info().rss
    return result, dt, peak, rss_after


def _prepare(grid, strategy, start, end):
    """Resolves the method name and validates start/end (defaulting to the grid markers).

    Raises:
        InvalidInputError: start/end unset, out of bounds or on an obstacle
        ValueError: unknown strategy name
    """
    method = resolve_method(strategy)
    start = grid.start if start is None else start
    end = grid.end if end is None else end
    start, end = grid.validate_endpoints(start, end)
    return method, start, end


def run_strategy(grid, strategy, start=None, end=None):
    """Runs one strategy on a snapshot of the grid: returns (method, nodes_expanded, path)."""
    method, start, end = _prepare(grid, strategy, start, end)
    nodes_expanded, path = STRATEGIES[method](grid.copy(), start, end)
    return method, nodes_expanded, path


def run_search(grid, strategy, start=None, end=None):
    """Like run_strategy but also measures runtime and memory; returns a SearchResult."""
    method, start, end = _prepare(grid, strategy, start, end)
    (nodes_expanded, path), runtime_s, peak, rss = _execute_with_metrics(
        STRATEGIES[method], grid.copy(), start, end
    )
    return SearchResult(method, nodes_expanded, path, runtime_s, peak, rss)


def search(grid, strategy, start=None, end=None):
    """Route from start to end as a list of Coords, or [] when end is unreachable."""
    return run_strategy(grid, strategy, start, end)[2]


def print_metrics(result, metrics_mode):
    if metrics_mode not in ("stderr", "stdout"):
        return
    metrics_line = (
        f"Metrics: method={result.method} nodes_expanded={result.nodes_expanded} "
        f"steps={len(result.path)} "
        f"runtime_ms={(result.runtime_s*1000):.3f} peak_py_mem={FormatBytes(result.peak_bytes)}"
        f" rss_now={FormatBytes(result.rss_bytes)}"
    )
    if metrics_mode == "stdout":
        print(metrics_line)
    else:
        print(metrics_line, file=sys.stderr)


def main(filename, method, metrics_mode="none", render=True):
    """Main function to run the search algorithm on a grid file.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the normal output
    """
    grid = parse_grid_file(filename)

    print(f"Problem File: {filename}, Method: {method}")
    print(f"Grid: {grid.rows}x{grid.cols}")
    print(f"Start: {grid.start}")
    print(f"End: {grid.end}")

    result = run_search(grid, method)

    print(f"{filename} {result.method}")
    if not result.path:
        print("No path found. Please adjust the obstacles.")
    else:
        print(f"Number of Nodes visited:{result.nodes_expanded}")
        print(f"Number of steps:{len(result.path)}")
        print(format_path(result.path))
        if render:
            print(render_grid(grid, result.path))

    print_metrics(result, metrics_mode)
    return result


def cli(argv=None):
    parser = argparse.ArgumentParser(description="Find a route across a grid file with one search strategy")
    parser.add_argument("filename", help="Grid problem file")
    parser.add_argument("method", help=f"Search method: {', '.join(constants.ENUM_METHODS)}")
    metrics = parser.add_mutually_exclusive_group()
    metrics.add_argument("--metrics", "-m", dest="metrics_mode", action="store_const", const="stderr", default="none",
                         help="Print a metrics line to stderr")
    metrics.add_argument("--metrics-stdout", dest="metrics_mode", action="store_const", const="stdout",
                         help="Print a metrics line to stdout")
    parser.add_argument("--no-render", action="store_true", help="Do not draw the grid with the path")
    args = parser.parse_args(argv)

    try:
        main(args.filename, args.method, args.metrics_mode, render=not args.no_render)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    # e.g., python search.py Test_Cases_Grid/default.txt BFS --metrics
    sys.exit(cli())
