"""
Base behavior protocol and Services dataclass for the Diver policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional, Protocol

from sewer_agents.policy.scripted_agent.diver.services import RoutePlanner
from sewer_agents.policy.scripted_agent.diver.types import Phase

if TYPE_CHECKING:
    from sewer_agents.game.maze import Node
    from sewer_agents.policy.scripted_agent.diver.trace import TraceLog


@dataclass
class Services:
    """Bundle of shared services passed to behaviors."""

    # Builds a planner over the current node set
    planner_factory: Callable[[Iterable[Node]], RoutePlanner] = RoutePlanner
    trace: Optional[TraceLog] = None
    cache_exit_distances: bool = True


class PhaseBehavior(Protocol):
    """Interface for phase-specific decision making."""

    phase: Phase

    def run(self, state: Any, services: Services) -> Any:
        """Drive the diver through this phase."""
        ...
