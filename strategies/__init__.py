"""Package exposing search strategy implementations."""

from .bfs import run_bfs
from .least_cost import run_least_cost
from .astar import run_astar

__all__ = ["run_bfs", "run_least_cost", "run_astar"]
