"""Exceptions raised by the sewer game environment and graph helpers."""

from __future__ import annotations


class SewerGameError(RuntimeError):
    """Base class for environment rule violations."""


class IllegalMoveError(SewerGameError):
    """Raised when a move targets a node that is not adjacent to the diver."""


class OutOfStepsError(SewerGameError):
    """Raised when a scram move is longer than the remaining step budget."""


class NoPathError(ValueError):
    """Raised when a shortest path is requested for an unreachable node."""
