"""Value types for elorate."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class MatchOutcome(float, Enum):
    """Result of a match, credited to the player being rated."""

    WIN = 1
    LOSS = 0
    DRAW = 0.5


class EngineConfig(BaseModel):
    """Configuration held by a rating engine.

    Fixed when the engine is built and never changed afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    adjustment_factor: float = Field(default=32.0, gt=0, allow_inf_nan=False)
    round_result: StrictBool = True


class RelativeRank(BaseModel):
    """Base-10 strengths of both players, derived from their ratings."""

    model_config = ConfigDict(frozen=True)

    player: float
    opponent: float


class OutcomeProbability(BaseModel):
    """Win chance of each side as whole percentages.

    Both sides are rounded on their own, so the pair can add up to 99 or 101.
    """

    model_config = ConfigDict(frozen=True)

    player: int = Field(ge=0, le=100)
    opponent: int = Field(ge=0, le=100)
