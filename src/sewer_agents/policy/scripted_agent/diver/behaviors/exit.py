"""
Return behavior for the Diver policy.

Walks the shortest path from the current node to the exit, one edge per move.
"""

from __future__ import annotations

from sewer_agents.game.errors import NoPathError
from sewer_agents.game.states import ScramState
from sewer_agents.policy.scripted_agent.diver.behaviors.base import Services
from sewer_agents.policy.scripted_agent.diver.types import DEBUG, ExitUnreachableError, Phase


class ReturnBehavior:
    """Head straight for the exit."""

    phase = Phase.RETURN

    def run(self, state: ScramState, services: Services) -> bool:
        """Returns True once the diver stands on the exit."""
        current = state.current_node()
        exit_node = state.exit()
        if current == exit_node:
            return True

        planner = services.planner_factory(state.all_nodes())
        try:
            path = planner.best_path(current, exit_node)
        except NoPathError as e:
            raise ExitUnreachableError(f"No path from node {current.id} to exit {exit_node.id}") from e

        if DEBUG:
            print(f"[diver] RETURN: {len(path)} edges from {current.id} to exit, {state.steps_to_go()} steps left")

        for edge in path:
            dest = planner.maze.dest(edge)
            state.move_to(dest)
            if services.trace:
                services.trace.move(Phase.RETURN, dest.id, f"left={state.steps_to_go()}")
            if dest == exit_node:
                if services.trace:
                    services.trace.done(Phase.RETURN, f"at exit left={state.steps_to_go()}")
                return True
        return False
