"""
RoutePlanner service for the Diver policy.

Thin layer over ShortestPaths that answers distance and path queries between
arbitrary node pairs and remembers the last single-source run.
"""

from __future__ import annotations

from typing import Iterable

from sewer_agents.game.maze import Edge, Maze, Node
from sewer_agents.game.shortest_paths import ShortestPaths, path_length


class RoutePlanner:
    """Distance and path queries over a fixed node set."""

    def __init__(self, nodes: Iterable[Node]):
        self._maze = Maze(nodes)
        self._paths = ShortestPaths(self._maze)
        # Cached single-source tables: source -> {node: distance}
        self._tables: dict[Node, dict[Node, int]] = {}

    @property
    def maze(self) -> Maze:
        return self._maze

    def distances_from(self, source: Node) -> dict[Node, int]:
        """Shortest distance from ``source`` to every reachable node."""
        table = self._tables.get(source)
        if table is None:
            table = self._paths.single_source_distances(source)
            self._tables[source] = table
        return table

    def best_path(self, source: Node, target: Node) -> list[Edge]:
        """Best edge sequence from ``source`` to ``target``. Raises NoPathError if unreachable."""
        if self._paths.source != source:
            self._paths.single_source_distances(source)
        return self._paths.best_path(target)

    def path_length(self, source: Node, target: Node) -> int:
        """Length of the best path, summed edge by edge."""
        return path_length(self.best_path(source, target))

    def distance(self, source: Node, target: Node) -> int:
        return self.distances_from(source)[target]

    def reachable(self, source: Node, target: Node) -> bool:
        return target in self.distances_from(source)
