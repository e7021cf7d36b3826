"""Diver policy: seek the ring, then scram out with as many coins as the budget allows."""

from .policy import DiverPolicy
from .types import ExitUnreachableError, RingNotFoundError, ScramOutcome, SeekOutcome

__all__ = [
    "DiverPolicy",
    "ExitUnreachableError",
    "RingNotFoundError",
    "ScramOutcome",
    "SeekOutcome",
]
