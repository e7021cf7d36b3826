"""
Single-source shortest paths over a ``Maze``.

Dijkstra with a binary heap. Call ``single_source_distances`` first, then query
``distance``/``best_path`` for any destination.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Optional

from sewer_agents.game.errors import NoPathError
from sewer_agents.game.maze import Edge, Maze, Node


class ShortestPaths:
    """Shortest-path oracle bound to one maze."""

    def __init__(self, maze: Maze):
        self._maze = maze
        self._source: Optional[Node] = None
        self._distances: dict[Node, int] = {}
        self._best_edge: dict[Node, Edge] = {}

    @property
    def maze(self) -> Maze:
        return self._maze

    @property
    def source(self) -> Optional[Node]:
        return self._source

    def single_source_distances(self, source: Node) -> dict[Node, int]:
        """Compute distances from ``source`` to every reachable node."""
        if source not in self._maze:
            raise ValueError(f"Source {source!r} is not part of the maze")

        distances: dict[Node, int] = {source: 0}
        best_edge: dict[Node, Edge] = {}
        settled: set[Node] = set()
        tie = itertools.count()
        frontier: list[tuple[int, int, Node]] = [(0, next(tie), source)]

        while frontier:
            dist, _, node = heapq.heappop(frontier)
            if node in settled:
                continue
            settled.add(node)
            for edge in self._maze.outgoing(node):
                neighbor = self._maze.dest(edge)
                candidate = dist + edge.length
                if neighbor not in distances or candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    best_edge[neighbor] = edge
                    heapq.heappush(frontier, (candidate, next(tie), neighbor))

        self._source = source
        self._distances = distances
        self._best_edge = best_edge
        return dict(distances)

    def reachable(self, target: Node) -> bool:
        self._require_source()
        return target in self._distances

    def distance(self, target: Node) -> int:
        self._require_source()
        if target not in self._distances:
            raise NoPathError(f"No path from {self._source!r} to {target!r}")
        return self._distances[target]

    def best_path(self, target: Node) -> list[Edge]:
        """Edges from the last source to ``target``; empty when ``target`` is the source."""
        self._require_source()
        if target not in self._distances:
            raise NoPathError(f"No path from {self._source!r} to {target!r}")
        path: list[Edge] = []
        node = target
        while node != self._source:
            edge = self._best_edge[node]
            path.append(edge)
            node = self._maze.source(edge)
        path.reverse()
        return path

    def _require_source(self) -> None:
        if self._source is None:
            raise RuntimeError("single_source_distances() must be called first")


def path_length(path: list[Edge]) -> int:
    return sum(edge.length for edge in path)
