"""Shared maze fixtures for sewer-agents tests.

Layouts are small hand-built graphs whose seek/scram behavior can be traced by hand.
"""

from __future__ import annotations

import pytest

from sewer_agents.game.maze import MazeBuilder, Sewers


def build_line(length: int, coins: dict[int, int] | None = None, entrance: int = 0, ring: int | None = None) -> Sewers:
    """Nodes 0..length-1 on one row, each corridor of length 1."""
    coins = coins or {}
    builder = MazeBuilder()
    for i in range(length):
        builder.add_node(i, 0, i, coins=coins.get(i, 0))
    for i in range(length - 1):
        builder.connect(i, i + 1, 1)
    return builder.build(entrance=entrance, ring=length - 1 if ring is None else ring)


@pytest.fixture
def line_sewers() -> Sewers:
    """A - B - C with the diver at A and the ring at C."""
    return build_line(3)


@pytest.fixture
def dead_end_sewers() -> Sewers:
    """The neighbor closest to the ring is a dead end.

        (0,0) 0 -- 1 (0,1)              ring 6 at (0,3)
              |
        (1,0) 2 -- 3 -- 4 -- 5          5 -- 6
    """
    builder = MazeBuilder()
    builder.add_node(0, 0, 0)
    builder.add_node(1, 0, 1)
    builder.add_node(2, 1, 0)
    builder.add_node(3, 1, 1)
    builder.add_node(4, 1, 2)
    builder.add_node(5, 1, 3)
    builder.add_node(6, 0, 3)
    builder.connect(0, 1)
    builder.connect(0, 2)
    builder.connect(2, 3)
    builder.connect(3, 4)
    builder.connect(4, 5)
    builder.connect(5, 6)
    return builder.build(entrance=0, ring=6)


@pytest.fixture
def split_sewers() -> Sewers:
    """Entrance side (0 - 1) and ring side (2 - 3) are not connected."""
    builder = MazeBuilder()
    builder.add_node(0, 0, 0)
    builder.add_node(1, 0, 1)
    builder.add_node(2, 0, 3, coins=10)
    builder.add_node(3, 0, 4, coins=20)
    builder.connect(0, 1)
    builder.connect(2, 3)
    return builder.build(entrance=0, ring=2)


@pytest.fixture
def detour_sewers() -> Sewers:
    """Ring 0 is three edges from exit 3; a rich node 4 hangs off the ring, four edges from the exit.

        4 (1000 coins) -- 0 (ring) -- 1 -- 2 -- 3 (exit)
    """
    builder = MazeBuilder()
    builder.add_node(0, 0, 1)
    builder.add_node(1, 0, 2)
    builder.add_node(2, 0, 3)
    builder.add_node(3, 0, 4)
    builder.add_node(4, 0, 0, coins=1000)
    builder.connect(0, 1)
    builder.connect(1, 2)
    builder.connect(2, 3)
    builder.connect(0, 4)
    return builder.build(entrance=3, ring=0)


@pytest.fixture
def stretch_sewers() -> Sewers:
    """A long corridor to a coin node that sits right next to the exit.

        0 (ring) --3-- 2 (100 coins) --1-- 1 (exit)
    """
    builder = MazeBuilder()
    builder.add_node(0, 0, 0)
    builder.add_node(2, 0, 1, coins=100)
    builder.add_node(1, 0, 2)
    builder.connect(0, 2, 3)
    builder.connect(2, 1, 1)
    return builder.build(entrance=1, ring=0)


@pytest.fixture
def make_line():
    """Factory for corridor layouts, see ``build_line``."""
    return build_line
