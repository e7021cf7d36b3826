"""Episode configuration models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class MazeConfig(BaseModel):
    """Shape and contents of a generated maze."""

    rows: int = Field(default=8, ge=1, le=200)
    cols: int = Field(default=8, ge=1, le=200)
    seed: int = Field(default=0)
    loop_fraction: float = Field(default=0.15, ge=0.0, le=1.0)
    max_edge_length: int = Field(default=5, ge=1)
    coin_fraction: float = Field(default=0.3, ge=0.0, le=1.0)
    max_coins: int = Field(default=500, ge=1)

    @model_validator(mode="after")
    def _check_size(self) -> MazeConfig:
        if self.rows * self.cols < 2:
            raise ValueError("A maze needs at least two tiles for an entrance and a ring")
        return self


class ScramConfig(BaseModel):
    """Step budget for the scram phase.

    budget = ceil(budget_factor * shortest distance from ring to exit) + budget_slack
    """

    budget_factor: float = Field(default=3.0, ge=1.0)
    budget_slack: int = Field(default=0, ge=0)


class EpisodeConfig(BaseModel):
    """One seek-then-scram episode."""

    maze: MazeConfig = Field(default_factory=MazeConfig)
    scram: ScramConfig = Field(default_factory=ScramConfig)
