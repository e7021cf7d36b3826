"""Behaviors for the Diver policy."""

from .base import PhaseBehavior, Services
from .exit import ReturnBehavior
from .scram import ScramBehavior, score_node
from .seek import SeekBehavior

__all__ = [
    "PhaseBehavior",
    "Services",
    "SeekBehavior",
    "ScramBehavior",
    "ReturnBehavior",
    "score_node",
]
