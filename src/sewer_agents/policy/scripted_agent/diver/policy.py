"""
Diver Policy - main policy implementation.

DiverPolicy runs the two phases of an episode: seek (find the ring) and scram
(collect coins and leave through the exit before the step budget runs out).
"""

from __future__ import annotations

from typing import Optional

from sewer_agents.game.states import ScramState, SeekState

from .behaviors import PhaseBehavior, ReturnBehavior, ScramBehavior, SeekBehavior, Services
from .trace import TraceLog
from .types import RingNotFoundError, ScramOutcome, SeekOutcome


class DiverPolicy:
    """Scripted seek-and-scram diver.

    URI parameters:
        ?trace=1&trace_level=2        print [diver] trace lines
        ?cache_exit_distances=0       score candidates with one shortest-path run each
    """

    short_names = ["diver", "mcdiver"]

    def __init__(
        self,
        trace: int = 0,
        trace_level: int = 1,
        cache_exit_distances: int = 1,
        # Accept any extra kwargs
        **kwargs: object,
    ) -> None:
        self._trace_enabled = bool(trace)
        self._trace_level = trace_level
        self._cache_exit_distances = bool(cache_exit_distances)

        self._return = ReturnBehavior()
        self._seek: PhaseBehavior = SeekBehavior()
        self._scram: PhaseBehavior = ScramBehavior(self._return)

        # Trace of the most recent seek/scram call, kept for inspection
        self.last_trace: Optional[TraceLog] = None

    def seek(self, state: SeekState) -> SeekOutcome:
        """Walk from the current location to the ring.

        Raises RingNotFoundError if every reachable node was explored without finding it.
        """
        if state is None:
            raise ValueError("seek() requires a state")
        services = self._services()
        outcome = self._seek.run(state, services)
        self._emit(services.trace)
        if not outcome.found:
            raise RingNotFoundError(
                f"Ring not reachable: explored {len(outcome.visited)} nodes in {outcome.moves} moves"
            )
        return outcome

    def scram(self, state: ScramState) -> ScramOutcome:
        """Collect coins, then walk to the exit."""
        if state is None:
            raise ValueError("scram() requires a state")
        services = self._services()
        outcome = self._scram.run(state, services)
        if not outcome.handed_off:
            outcome.reached_exit = self._return.run(state, services)
        self._emit(services.trace)
        return outcome

    def _services(self) -> Services:
        trace = TraceLog() if self._trace_enabled else None
        self.last_trace = trace
        return Services(trace=trace, cache_exit_distances=self._cache_exit_distances)

    def _emit(self, trace: Optional[TraceLog]) -> None:
        if not trace:
            return
        for line in trace.format_lines(self._trace_level):
            print(f"[diver] {line}")
