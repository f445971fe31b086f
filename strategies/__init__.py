"""Package exposing grid search strategy implementations."""

# Expose names for convenience (optional)
from .dfs import run_dfs
from .bfs import run_bfs
from .dijkstra import run_dijkstra
from .astar import run_astar

# canonical method name -> strategy function
STRATEGIES = {
    "BFS": run_bfs,
    "DFS": run_dfs,
    "DIJKSTRA": run_dijkstra,
    "AS": run_astar,
}

__all__ = ["run_dfs", "run_bfs", "run_dijkstra", "run_astar", "STRATEGIES"]
