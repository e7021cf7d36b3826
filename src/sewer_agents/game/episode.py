"""
Episode runner: one seek phase followed by one scram phase on a generated maze.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Optional, Protocol

from sewer_agents.game.config import EpisodeConfig
from sewer_agents.game.maze import Sewers, generate_maze
from sewer_agents.game.shortest_paths import ShortestPaths
from sewer_agents.game.simulator import ScramPhase, SeekPhase
from sewer_agents.game.states import ScramState, SeekState


class SewerDiver(Protocol):
    """Anything that can play both phases."""

    def seek(self, state: SeekState) -> Any:
        ...

    def scram(self, state: ScramState) -> Any:
        ...


@dataclass
class EpisodeReport:
    """Summary of one episode."""

    seed: int
    nodes: int
    found_ring: bool
    seek_moves: int
    seek_steps: int
    scram_budget: int
    scram_steps_left: int
    coins_collected: int
    coins_available: int
    reached_exit: bool

    @property
    def score(self) -> int:
        """Coins count only when the diver made it out."""
        return self.coins_collected if self.reached_exit else 0

    def as_dict(self) -> dict[str, object]:
        data = asdict(self)
        data["score"] = self.score
        return data


def scram_budget(sewers: Sewers, config: EpisodeConfig) -> int:
    """Steps granted for the scram: a multiple of the ring-to-exit distance."""
    paths = ShortestPaths(sewers.maze)
    paths.single_source_distances(sewers.ring)
    shortest = paths.distance(sewers.entrance)
    return math.ceil(config.scram.budget_factor * shortest) + config.scram.budget_slack


def run_episode(diver: SewerDiver, config: Optional[EpisodeConfig] = None) -> EpisodeReport:
    """Generate a maze, play seek then scram, and report what happened."""
    config = config or EpisodeConfig()
    sewers = generate_maze(config.maze)
    coins_available = sewers.total_coins()

    seek = SeekPhase(sewers)
    diver.seek(seek)
    found_ring = seek.position == sewers.ring

    budget = scram_budget(sewers, config)
    scram = ScramPhase(sewers, steps=budget)
    diver.scram(scram)

    return EpisodeReport(
        seed=config.maze.seed,
        nodes=len(sewers.nodes),
        found_ring=found_ring,
        seek_moves=seek.log.count,
        seek_steps=seek.log.steps,
        scram_budget=budget,
        scram_steps_left=scram.steps_to_go(),
        coins_collected=scram.coins_collected,
        coins_available=coins_available,
        reached_exit=scram.at_exit(),
    )
