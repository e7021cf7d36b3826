"""
Scram behavior for the Diver policy.

Greedy coin collection under a step budget. Each iteration scores every node by
coins per weighted distance, walks toward the best one, and bails out to the
return walk the moment the next edge would leave too few steps to reach the exit.
"""

from __future__ import annotations

from typing import Optional

from sewer_agents.game.maze import Node
from sewer_agents.game.priority_queue import MinPQueue
from sewer_agents.game.states import ScramState
from sewer_agents.policy.scripted_agent.diver.behaviors.base import Services
from sewer_agents.policy.scripted_agent.diver.behaviors.exit import ReturnBehavior
from sewer_agents.policy.scripted_agent.diver.services import RoutePlanner
from sewer_agents.policy.scripted_agent.diver.state import ScramEpisode
from sewer_agents.policy.scripted_agent.diver.types import (
    DEBUG,
    EXIT_WEIGHT,
    PROXIMITY_WEIGHT,
    Phase,
    ScramOutcome,
)


def score_node(coins: int, to_node: int, to_exit: int, budget: int) -> float:
    """Greedy score of a candidate; lower is better.

    -coins / (4.2 * to_node + (1 / (budget + 1)) * to_exit + 1)

    The exit term shrinks as the budget grows, so distance to the exit only matters
    once steps run short.
    """
    denominator = PROXIMITY_WEIGHT * to_node + (1.0 / (budget + 1)) * EXIT_WEIGHT * to_exit + 1
    return -1 * coins / denominator


class ScramBehavior:
    """Collect coins greedily while always keeping a way out."""

    phase = Phase.SCRAM

    def __init__(self, return_behavior: Optional[ReturnBehavior] = None):
        self._return = return_behavior or ReturnBehavior()

    def run(self, state: ScramState, services: Services) -> ScramOutcome:
        episode = ScramEpisode()
        self.collect(state, episode, services)
        return ScramOutcome(
            handed_off=episode.handed_off,
            reached_exit=episode.reached_exit,
            iterations=episode.iterations,
            aborted_paths=episode.aborted_paths,
            targets=list(episode.targets),
        )

    def collect(self, state: ScramState, episode: ScramEpisode, services: Services) -> bool:
        """Run collection iterations. Returns True if it handed off to the return walk."""
        trace = services.trace

        while state.steps_to_go() >= episode.length_to_exit:
            episode.length_to_exit = 0
            episode.iterations += 1

            planner = services.planner_factory(state.all_nodes())
            current = state.current_node()
            exit_node = state.exit()

            scores = self._score_nodes(state, planner, services.cache_exit_distances)
            if scores.is_empty():
                return self._hand_off(state, episode, services, "no reachable candidates")

            goal = scores.extract_min()
            if goal == current or goal.tile.coins == 0:
                return self._hand_off(state, episode, services, "nothing left worth collecting")

            episode.targets.append(goal.id)
            if trace:
                trace.target(goal.id, f"coins={goal.tile.coins} budget={state.steps_to_go()}")

            for edge in planner.best_path(current, goal):
                step_to = planner.maze.dest(edge)
                episode.length_to_exit = edge.length + self._distance_to_exit(planner, step_to, exit_node, services)
                if state.steps_to_go() > episode.length_to_exit:
                    state.move_to(step_to)
                    if trace:
                        trace.move(Phase.SCRAM, step_to.id, f"left={state.steps_to_go()}")
                else:
                    episode.aborted_paths += 1
                    if DEBUG:
                        print(
                            f"[diver] SCRAM: abort toward {goal.id} at {step_to.id}, "
                            f"need {episode.length_to_exit} have {state.steps_to_go()}"
                        )
                    if trace:
                        trace.abort(goal.id, f"need={episode.length_to_exit} left={state.steps_to_go()}")
                    return self._hand_off(state, episode, services, "budget reserved for the exit")

        if trace:
            trace.done(Phase.SCRAM, f"collection ended iterations={episode.iterations}")
        return False

    def _score_nodes(self, state: ScramState, planner: RoutePlanner, cache_exit_distances: bool) -> MinPQueue[Node]:
        current = state.current_node()
        exit_node = state.exit()
        budget = state.steps_to_go()
        from_here = planner.distances_from(current)
        to_exit_table = planner.distances_from(exit_node) if cache_exit_distances else None

        scores: MinPQueue[Node] = MinPQueue()
        for node in state.all_nodes():
            if node not in from_here:
                continue
            if to_exit_table is not None:
                if node not in to_exit_table:
                    continue
                to_exit = to_exit_table[node]
            else:
                if not planner.reachable(node, exit_node):
                    continue
                to_exit = planner.path_length(node, exit_node)
            score = score_node(node.tile.coins, from_here[node], to_exit, budget)
            if node in scores:
                scores.change_priority(node, score)
            else:
                scores.add(node, score)
        return scores

    def _distance_to_exit(self, planner: RoutePlanner, node: Node, exit_node: Node, services: Services) -> int:
        if services.cache_exit_distances:
            return planner.distance(exit_node, node)
        return planner.path_length(node, exit_node)

    def _hand_off(self, state: ScramState, episode: ScramEpisode, services: Services, reason: str) -> bool:
        if services.trace:
            services.trace.done(Phase.SCRAM, f"{reason}, returning iterations={episode.iterations}")
        episode.handed_off = True
        episode.reached_exit = self._return.run(state, services)
        return True
