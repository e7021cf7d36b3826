"""
Per-episode state for the Diver policy.

Each seek or scram call gets a fresh episode object; nothing carries over between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sewer_agents.game.priority_queue import MinPQueue
from sewer_agents.game.states import NodeStatus


@dataclass
class SeekFrame:
    """One level of the exploration stack: where it started and what is left to try."""

    origin: int
    candidates: MinPQueue[NodeStatus]


@dataclass
class SeekEpisode:
    """Exploration bookkeeping for a single seek call."""

    # Node ids explored so far; only ever grows
    visited: set[int] = field(default_factory=set)
    # First-visit order, for tracing and tests
    visit_order: list[int] = field(default_factory=list)
    moves: int = 0
    backtracks: int = 0
    found: bool = False

    def mark_visited(self, node_id: int) -> None:
        if node_id not in self.visited:
            self.visited.add(node_id)
            self.visit_order.append(node_id)


@dataclass
class ScramEpisode:
    """Collection bookkeeping for a single scram call."""

    iterations: int = 0
    aborted_paths: int = 0
    handed_off: bool = False
    reached_exit: bool = False
    targets: list[int] = field(default_factory=list)
    # Budget-check value of the last edge considered; starts below any budget
    length_to_exit: float = float("-inf")
