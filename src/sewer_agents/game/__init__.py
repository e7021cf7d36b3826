"""Sewer game: maze graph, shortest paths and the seek/scram environment."""

from .config import EpisodeConfig, MazeConfig, ScramConfig
from .errors import IllegalMoveError, NoPathError, OutOfStepsError, SewerGameError
from .maze import Edge, Maze, MazeBuilder, Node, Sewers, Tile, TileType, generate_maze
from .priority_queue import MinPQueue
from .shortest_paths import ShortestPaths
from .states import NodeStatus, ScramState, SeekState

__all__ = [
    "Edge",
    "EpisodeConfig",
    "IllegalMoveError",
    "Maze",
    "MazeBuilder",
    "MazeConfig",
    "MinPQueue",
    "NoPathError",
    "Node",
    "NodeStatus",
    "OutOfStepsError",
    "ScramConfig",
    "ScramState",
    "SeekState",
    "Sewers",
    "SewerGameError",
    "ShortestPaths",
    "Tile",
    "TileType",
    "generate_maze",
]
