"""
Interfaces the diver sees during each phase.

During seek the diver only knows its own tile, its neighbors and how far each of
them is from the ring. During scram the whole maze is visible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Collection, Protocol, Sequence

if TYPE_CHECKING:
    from sewer_agents.game.maze import Node


@dataclass(frozen=True)
class NodeStatus:
    """A neighbor seen during seek, with its heuristic distance to the ring."""

    id: int
    distance_to_ring: int


class SeekState(Protocol):
    """Observations and moves available while looking for the ring."""

    def distance_to_ring(self) -> int:
        """Heuristic distance from the current tile to the ring; 0 on the ring."""
        ...

    def current_location(self) -> int:
        ...

    def neighbors(self) -> Sequence[NodeStatus]:
        ...

    def move_to(self, node_id: int) -> None:
        """Move to an adjacent node. Raises IllegalMoveError otherwise."""
        ...


class ScramState(Protocol):
    """Observations and moves available while collecting coins on the way out."""

    def steps_to_go(self) -> int:
        ...

    def all_nodes(self) -> Collection[Node]:
        ...

    def current_node(self) -> Node:
        ...

    def exit(self) -> Node:
        ...

    def move_to(self, node: Node) -> None:
        """Move to an adjacent node, spending the edge length from the budget."""
        ...
