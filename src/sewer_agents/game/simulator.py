"""
In-memory sewer environment.

``SeekPhase`` and ``ScramPhase`` implement the ``SeekState``/``ScramState`` interfaces
over a ``Sewers`` layout, enforce the movement rules and keep a move log.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sewer_agents.game.errors import IllegalMoveError, OutOfStepsError
from sewer_agents.game.maze import Node, Sewers
from sewer_agents.game.states import NodeStatus

# Debug flag for environment-side move printing
DEBUG = False


def manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class MoveRecord:
    """One committed move."""

    source: int
    dest: int
    length: int


@dataclass
class MoveLog:
    """Moves committed during one phase."""

    moves: list[MoveRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.moves)

    @property
    def steps(self) -> int:
        return sum(move.length for move in self.moves)

    def destinations(self) -> list[int]:
        return [move.dest for move in self.moves]

    def record(self, source: Node, dest: Node, length: int) -> None:
        self.moves.append(MoveRecord(source=source.id, dest=dest.id, length=length))


class SeekPhase:
    """Seek environment: the diver starts at the entrance and looks for the ring."""

    def __init__(self, sewers: Sewers, start: Node | None = None):
        self._sewers = sewers
        self._position = start or sewers.entrance
        self.log = MoveLog()

    @property
    def position(self) -> Node:
        return self._position

    def distance_to_ring(self) -> int:
        return manhattan(self._position.tile.position, self._sewers.ring.tile.position)

    def current_location(self) -> int:
        return self._position.id

    def neighbors(self) -> list[NodeStatus]:
        ring_pos = self._sewers.ring.tile.position
        return [
            NodeStatus(id=neighbor.id, distance_to_ring=manhattan(neighbor.tile.position, ring_pos))
            for neighbor in self._position.neighbors()
        ]

    def move_to(self, node_id: int) -> None:
        target = self._sewers.nodes.get(node_id)
        edge = self._position.edge_to(target) if target is not None else None
        if edge is None:
            raise IllegalMoveError(f"Seek move from {self._position.id} to {node_id}: not adjacent")
        if DEBUG:
            print(f"[sewers] seek {self._position.id} -> {node_id} (len={edge.length})")
        self.log.record(self._position, target, edge.length)
        self._position = target


class ScramPhase:
    """Scram environment: the diver starts on the ring and must reach the entrance in time.

    Coins are picked up automatically when the diver stands on a tile, including the start.
    """

    def __init__(self, sewers: Sewers, steps: int, start: Node | None = None):
        if steps < 0:
            raise ValueError(f"Step budget must be non-negative, got {steps}")
        self._sewers = sewers
        self._nodes = frozenset(sewers.nodes.values())
        self._position = start or sewers.ring
        self._steps = steps
        self.coins_collected = 0
        self.log = MoveLog()
        self._pick_up()

    @property
    def sewers(self) -> Sewers:
        return self._sewers

    def steps_to_go(self) -> int:
        return self._steps

    def all_nodes(self) -> frozenset[Node]:
        return self._nodes

    def current_node(self) -> Node:
        return self._position

    def exit(self) -> Node:
        return self._sewers.entrance

    def move_to(self, node: Node) -> None:
        edge = self._position.edge_to(node)
        if edge is None:
            raise IllegalMoveError(f"Scram move from {self._position.id} to {node.id}: not adjacent")
        if edge.length > self._steps:
            raise OutOfStepsError(
                f"Scram move from {self._position.id} to {node.id} needs {edge.length} steps, {self._steps} left"
            )
        if DEBUG:
            print(f"[sewers] scram {self._position.id} -> {node.id} (len={edge.length}, left={self._steps})")
        self._steps -= edge.length
        self.log.record(self._position, node, edge.length)
        self._position = node
        self._pick_up()

    def at_exit(self) -> bool:
        return self._position == self._sewers.entrance

    def _pick_up(self) -> None:
        self.coins_collected += self._position.tile.take_coins()
