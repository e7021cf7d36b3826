"""
Types and constants for the Diver policy.

Phase enum, scoring weights, phase outcomes and failure exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Phase(Enum):
    """Which part of the episode the diver is in."""

    SEEK = "seek"  # Looking for the ring
    SCRAM = "scram"  # Collecting coins on the way out
    RETURN = "return"  # Walking the shortest path to the exit


# Scram scoring weights (empirically tuned, keep as is)
PROXIMITY_WEIGHT = 4.2  # Weight on distance from the diver to a candidate
EXIT_WEIGHT = 1.0  # Weight on distance from a candidate to the exit, scaled by 1/(budget+1)


# Debug flag for ad-hoc prints; tracing is the URI-controlled path
DEBUG = False


class RingNotFoundError(RuntimeError):
    """Seek exhausted every reachable node without reaching the ring."""


class ExitUnreachableError(RuntimeError):
    """No path leads from the diver's node to the exit."""


@dataclass
class SeekOutcome:
    """Result of one seek episode."""

    found: bool
    moves: int = 0
    backtracks: int = 0
    visited: frozenset[int] = frozenset()


@dataclass
class ScramOutcome:
    """Result of one scram episode."""

    handed_off: bool  # Collection aborted into the return walk
    reached_exit: bool = False
    iterations: int = 0
    aborted_paths: int = 0
    targets: list[int] = field(default_factory=list)  # Candidate node ids chosen, in order
