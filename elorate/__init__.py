"""ELO ratings and win probabilities for two-player matches."""

from .elo import (
    EloError,
    InvalidOutcome,
    InvalidRating,
    InvalidScoreMargin,
    RatingEngine,
)
from .models import EngineConfig, MatchOutcome, OutcomeProbability, RelativeRank

__all__ = [
    "EloError",
    "EngineConfig",
    "InvalidOutcome",
    "InvalidRating",
    "InvalidScoreMargin",
    "MatchOutcome",
    "OutcomeProbability",
    "RatingEngine",
    "RelativeRank",
]
