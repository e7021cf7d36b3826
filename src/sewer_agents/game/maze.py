"""
Maze graph for the sewer game.

Nodes sit on grid tiles; corridors are weighted and walkable both ways. ``MazeBuilder`` assembles
hand-made layouts, ``generate_maze`` produces seeded random ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np

if TYPE_CHECKING:
    from sewer_agents.game.config import MazeConfig

# Grid deltas used when carving generated mazes
MOVE_DELTAS: dict[str, tuple[int, int]] = {
    "north": (-1, 0),
    "south": (1, 0),
    "east": (0, 1),
    "west": (0, -1),
}


class TileType(Enum):
    """What occupies a tile."""

    FLOOR = "floor"
    ENTRANCE = "entrance"  # Seek start and scram exit
    RING = "ring"  # Seek target and scram start


@dataclass
class Tile:
    """Grid cell backing a node."""

    row: int
    col: int
    tile_type: TileType = TileType.FLOOR
    coins: int = 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    def take_coins(self) -> int:
        """Remove and return the coins lying on this tile."""
        taken = self.coins
        self.coins = 0
        return taken


@dataclass(eq=False)
class Edge:
    """Directed half of a weighted corridor. ``MazeBuilder.connect`` creates both halves."""

    source: Node
    dest: Node
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"Edge length must be non-negative, got {self.length}")

    def __repr__(self) -> str:
        return f"Edge({self.source.id}->{self.dest.id}, length={self.length})"


@dataclass(eq=False)
class Node:
    """Maze location. Identity is the integer id."""

    id: int
    tile: Tile
    _edges: dict[int, Edge] = field(default_factory=dict, repr=False)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Node) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Node({self.id}, pos={self.tile.position}, coins={self.tile.coins})"

    @property
    def edges(self) -> list[Edge]:
        """Outgoing edges in the order they were connected."""
        return list(self._edges.values())

    def neighbors(self) -> list[Node]:
        return [edge.dest for edge in self._edges.values()]

    def edge_to(self, other: Node) -> Optional[Edge]:
        return self._edges.get(other.id)

    def is_adjacent(self, other: Node) -> bool:
        return other.id in self._edges


class Maze:
    """Read-only graph view over a node set."""

    def __init__(self, nodes: Iterable[Node]):
        self._nodes: dict[int, Node] = {node.id: node for node in nodes}

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and node.id in self._nodes

    def outgoing(self, node: Node) -> list[Edge]:
        """Edges leaving ``node`` that stay inside this maze."""
        return [edge for edge in node.edges if edge.dest.id in self._nodes]

    def source(self, edge: Edge) -> Node:
        return edge.source

    def dest(self, edge: Edge) -> Node:
        return edge.dest


@dataclass
class Sewers:
    """A complete layout: the maze plus the entrance and ring nodes."""

    nodes: dict[int, Node]
    entrance: Node
    ring: Node

    @property
    def maze(self) -> Maze:
        return Maze(self.nodes.values())

    def total_coins(self) -> int:
        return sum(node.tile.coins for node in self.nodes.values())


class MazeBuilder:
    """Incrementally assemble a ``Sewers`` layout.

    Example:
        builder = MazeBuilder()
        builder.add_node(0, 0, 0)
        builder.add_node(1, 0, 1, coins=50)
        builder.connect(0, 1, length=2)
        sewers = builder.build(entrance=0, ring=1)
    """

    def __init__(self) -> None:
        self._nodes: dict[int, Node] = {}

    def add_node(self, node_id: int, row: int, col: int, coins: int = 0) -> Node:
        if node_id in self._nodes:
            raise ValueError(f"Duplicate node id {node_id}")
        if coins < 0:
            raise ValueError(f"Coins must be non-negative, got {coins}")
        node = Node(id=node_id, tile=Tile(row=row, col=col, coins=coins))
        self._nodes[node_id] = node
        return node

    def node(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def connect(self, a: int, b: int, length: int = 1) -> Edge:
        """Open a corridor between ``a`` and ``b``. Returns the ``a -> b`` half."""
        if a == b:
            raise ValueError(f"Cannot connect node {a} to itself")
        first, second = self._nodes[a], self._nodes[b]
        if first.is_adjacent(second):
            raise ValueError(f"Nodes {a} and {b} are already connected")
        forward = Edge(source=first, dest=second, length=length)
        first._edges[b] = forward
        second._edges[a] = Edge(source=second, dest=first, length=length)
        return forward

    def build(self, entrance: int, ring: int) -> Sewers:
        entrance_node = self._nodes[entrance]
        ring_node = self._nodes[ring]
        entrance_node.tile.tile_type = TileType.ENTRANCE
        if ring_node != entrance_node:
            ring_node.tile.tile_type = TileType.RING
        return Sewers(nodes=dict(self._nodes), entrance=entrance_node, ring=ring_node)


def generate_maze(config: MazeConfig) -> Sewers:
    """Generate a random grid maze.

    A randomized depth-first walk carves a spanning tree over the grid, then
    ``loop_fraction`` of the remaining grid adjacencies are opened to create cycles.
    """
    rng = np.random.default_rng(config.seed)
    rows, cols = config.rows, config.cols
    builder = MazeBuilder()

    def cell_id(r: int, c: int) -> int:
        return r * cols + c

    for r in range(rows):
        for c in range(cols):
            coins = 0
            if rng.random() < config.coin_fraction:
                coins = int(rng.integers(1, config.max_coins + 1))
            builder.add_node(cell_id(r, c), r, c, coins=coins)

    def edge_length() -> int:
        return int(rng.integers(1, config.max_edge_length + 1))

    # Randomized DFS spanning tree
    start = (int(rng.integers(rows)), int(rng.integers(cols)))
    carved: set[tuple[int, int]] = {start}
    stack = [start]
    directions = list(MOVE_DELTAS.values())
    while stack:
        r, c = stack[-1]
        options = [
            (r + dr, c + dc)
            for dr, dc in directions
            if 0 <= r + dr < rows and 0 <= c + dc < cols and (r + dr, c + dc) not in carved
        ]
        if not options:
            stack.pop()
            continue
        nr, nc = options[int(rng.integers(len(options)))]
        builder.connect(cell_id(r, c), cell_id(nr, nc), edge_length())
        carved.add((nr, nc))
        stack.append((nr, nc))

    # Extra loops
    for r in range(rows):
        for c in range(cols):
            for nr, nc in ((r + 1, c), (r, c + 1)):
                if nr >= rows or nc >= cols:
                    continue
                a, b = builder.node(cell_id(r, c)), builder.node(cell_id(nr, nc))
                if a.is_adjacent(b):
                    continue
                if rng.random() < config.loop_fraction:
                    builder.connect(a.id, b.id, edge_length())

    cell_count = rows * cols
    entrance = int(rng.integers(cell_count))
    ring = entrance
    if cell_count > 1:
        while ring == entrance:
            ring = int(rng.integers(cell_count))

    # Entrance and ring never hold coins
    builder.node(entrance).tile.coins = 0
    builder.node(ring).tile.coins = 0
    return builder.build(entrance=entrance, ring=ring)
