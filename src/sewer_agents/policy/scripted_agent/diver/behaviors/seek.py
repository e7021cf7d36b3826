"""
Seek behavior for the Diver policy.

Depth-first search toward the ring, trying the neighbor that looks closest first.
Strategy: at every node, queue the unvisited neighbors by their distance to the ring,
descend into the closest one, and step back to the node when a branch dead-ends.

The search keeps an explicit stack of frames instead of recursing, so maze size is not
bounded by the interpreter's recursion limit. A candidate queued by an outer frame is dropped
when a deeper branch has already visited it, so the diver never walks into a node only to
step straight back out.
"""

from __future__ import annotations

from typing import Optional

from sewer_agents.game.priority_queue import MinPQueue
from sewer_agents.game.states import NodeStatus, SeekState
from sewer_agents.policy.scripted_agent.diver.behaviors.base import Services
from sewer_agents.policy.scripted_agent.diver.state import SeekEpisode, SeekFrame
from sewer_agents.policy.scripted_agent.diver.types import DEBUG, Phase, SeekOutcome


class SeekBehavior:
    """Find the ring by prioritized depth-first search with backtracking."""

    phase = Phase.SEEK

    def run(self, state: SeekState, services: Services) -> SeekOutcome:
        """Explore from the current location with a fresh episode."""
        episode = SeekEpisode()
        self.explore(state, episode, services)
        return SeekOutcome(
            found=episode.found,
            moves=episode.moves,
            backtracks=episode.backtracks,
            visited=frozenset(episode.visited),
        )

    def explore(self, state: SeekState, episode: SeekEpisode, services: Optional[Services] = None) -> bool:
        """Walk the diver until it stands on the ring or every reachable node is exhausted.

        Returns True if the ring was reached.
        """
        trace = services.trace if services else None

        if state.distance_to_ring() == 0:
            episode.found = True
            if trace:
                trace.done(Phase.SEEK, f"already on ring at {state.current_location()}")
            return True

        stack = [self._open_frame(state, episode)]

        while stack:
            if state.distance_to_ring() == 0:
                episode.found = True
                break

            frame = stack[-1]
            candidate = self._next_candidate(frame, episode)

            if candidate is None:
                # Branch exhausted: return to the parent's origin before it tries its next neighbor
                stack.pop()
                if stack:
                    parent = stack[-1].origin
                    if DEBUG:
                        print(f"[diver] SEEK: dead end at {frame.origin}, back to {parent}")
                    state.move_to(parent)
                    episode.backtracks += 1
                    if trace:
                        trace.backtrack(parent, f"from {frame.origin}")
                continue

            state.move_to(candidate.id)
            episode.moves += 1
            if trace:
                trace.move(Phase.SEEK, candidate.id, f"dist={candidate.distance_to_ring}")
            stack.append(self._open_frame(state, episode))

        if trace:
            outcome = "ring found" if episode.found else "ring not reachable"
            trace.done(
                Phase.SEEK,
                f"{outcome} moves={episode.moves} backtracks={episode.backtracks} visited={len(episode.visited)}",
            )
        return episode.found

    def _open_frame(self, state: SeekState, episode: SeekEpisode) -> SeekFrame:
        """Mark the current node visited and queue its unvisited neighbors, closest to the ring first."""
        origin = state.current_location()
        episode.mark_visited(origin)
        candidates: MinPQueue[NodeStatus] = MinPQueue()
        for neighbor in state.neighbors():
            if neighbor.id not in episode.visited and neighbor not in candidates:
                candidates.add(neighbor, neighbor.distance_to_ring)
        return SeekFrame(origin=origin, candidates=candidates)

    def _next_candidate(self, frame: SeekFrame, episode: SeekEpisode) -> Optional[NodeStatus]:
        """Pop the closest candidate that no deeper branch has visited in the meantime."""
        while not frame.candidates.is_empty():
            candidate = frame.candidates.extract_min()
            if candidate.id not in episode.visited:
                return candidate
        return None
