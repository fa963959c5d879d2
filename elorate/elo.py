"""ELO rating engine."""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from .models import EngineConfig, MatchOutcome, OutcomeProbability, RelativeRank


logger = logging.getLogger("elorate:engine")

# Rating difference at which one side is ten times stronger
SCALE = 400


class EloError(ValueError):
    """Base class for rejected engine input."""


class InvalidRating(EloError):
    """Rating is not a usable finite number."""


class InvalidOutcome(EloError):
    """Outcome is not one of WIN, LOSS or DRAW."""


class InvalidScoreMargin(EloError):
    """Score margin is not a finite number."""


def _is_real(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def check_rating(rating: Any) -> float:
    """Return the rating as a float, or raise InvalidRating."""
    if not _is_real(rating):
        raise InvalidRating(f"Rating must be a finite number, got {rating!r}")
    return float(rating)


def check_outcome(outcome: Any) -> MatchOutcome:
    """Coerce a number or MatchOutcome member into a MatchOutcome.

    Raises:
        InvalidOutcome: If the value is not 0, 0.5 or 1
    """
    if isinstance(outcome, bool) or not isinstance(outcome, (int, float)):
        raise InvalidOutcome(f"Outcome must be 1, 0 or 0.5, got {outcome!r}")
    try:
        return MatchOutcome(outcome)
    except ValueError as error:
        raise InvalidOutcome(
            f"Outcome must be 1, 0 or 0.5, got {outcome!r}"
        ) from error


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def convert_to_base10(rating: float) -> float:
    """Convert a rating to its base-10 strength.

    Args:
        rating: A rating

    Returns:
        10 raised to rating / 400

    Raises:
        InvalidRating: If the strength does not fit in a float
    """
    try:
        return 10 ** (rating / SCALE)
    except OverflowError as error:
        raise InvalidRating(f"Rating {rating!r} is too large") from error


def relative_rank(player_rating: float, opponent_rating: float) -> RelativeRank:
    """Convert both ratings to base-10 strengths."""
    return RelativeRank(
        player=convert_to_base10(player_rating),
        opponent=convert_to_base10(opponent_rating),
    )


def score_factor(rank: RelativeRank) -> float:
    """Get the expected score of the player (0-1)."""
    total = rank.player + rank.opponent
    if math.isinf(total):
        raise InvalidRating("Ratings are too large to compare")
    return rank.player / total


def to_percentages(probability: float) -> OutcomeProbability:
    """Convert the player's win chance (0-1) to whole percentages.

    Each side is rounded from its own fraction, so the pair may add up to
    99 or 101 instead of 100.
    """
    return OutcomeProbability(
        player=round_half_away(probability * 100),
        opponent=round_half_away((1 - probability) * 100),
    )


class RatingEngine:
    """ELO rating engine.

    Holds an immutable EngineConfig, so an instance can be shared freely.
    """

    def __init__(self, round_result: bool = True, adjustment_factor: float = 32):
        """Initialize the rating engine.

        Args:
            round_result: Round new ratings to whole numbers (default: True)
            adjustment_factor: K-factor for ELO calculation (default: 32)
        """
        self._config = EngineConfig(
            round_result=round_result,
            adjustment_factor=adjustment_factor,
        )

    @classmethod
    def from_config(cls, config: EngineConfig) -> "RatingEngine":
        """Create an engine from an existing configuration."""
        return cls(
            round_result=config.round_result,
            adjustment_factor=config.adjustment_factor,
        )

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def round_result(self) -> bool:
        return self._config.round_result

    @property
    def adjustment_factor(self) -> float:
        return self._config.adjustment_factor

    def __repr__(self) -> str:
        return (
            f"RatingEngine(round_result={self.round_result}, "
            f"adjustment_factor={self.adjustment_factor})"
        )

    def adjusted_factor(self, score_margin: float | None = None) -> float:
        """Get the adjustment factor, amplified by the margin of victory.

        Args:
            score_margin: Difference in score, None or 0 for no amplification

        Returns:
            ln(|score_margin| + 1) * adjustment_factor, or adjustment_factor
        """
        if not score_margin:
            return self.adjustment_factor
        return math.log(abs(score_margin) + 1) * self.adjustment_factor

    def update_rating(
        self,
        player_rating: float,
        opponent_rating: float,
        outcome: MatchOutcome | float,
        score_margin: float | None = None,
    ) -> int | float:
        """Get the new rating of the player after a match.

        Args:
            player_rating: Current rating of the player
            opponent_rating: Current rating of the opponent
            outcome: Result for the player (WIN, LOSS or DRAW)
            score_margin: Optional difference in score

        Returns:
            New rating, an int when round_result is set

        Raises:
            InvalidRating: If a rating is not finite or too large, or the new
                rating does not fit in a float
            InvalidOutcome: If outcome is not 0, 0.5 or 1
            InvalidScoreMargin: If score_margin is not a finite number
        """
        player_rating = check_rating(player_rating)
        opponent_rating = check_rating(opponent_rating)
        outcome = check_outcome(outcome)
        if score_margin is not None and not _is_real(score_margin):
            raise InvalidScoreMargin(
                f"Score margin must be a finite number, got {score_margin!r}"
            )

        rank = relative_rank(player_rating, opponent_rating)
        expected = score_factor(rank)
        factor = self.adjusted_factor(score_margin)
        new_rating = player_rating + (outcome - expected) * factor
        logger.debug(
            f"Update {player_rating} vs {opponent_rating} ({outcome.name}): "
            f"expected {expected}, factor {factor} => {new_rating}"
        )
        if not math.isfinite(new_rating):
            raise InvalidRating(f"New rating {new_rating} is out of range")

        if self.round_result:
            return round_half_away(new_rating)
        return new_rating

    def win_probability(
        self,
        player_rating: float,
        opponent_rating: float,
    ) -> OutcomeProbability:
        """Get the win chance of each side in percent.

        Args:
            player_rating: Rating of the player
            opponent_rating: Rating of the opponent

        Returns:
            Percentages for player and opponent, each rounded on its own
        """
        player_rating = check_rating(player_rating)
        opponent_rating = check_rating(opponent_rating)

        diff = opponent_rating - player_rating
        try:
            ratio = convert_to_base10(diff)
        except InvalidRating:
            # Opponent is overwhelmingly stronger
            ratio = math.inf
        probability = 1 / (1 + ratio)
        logger.debug(
            f"Probability {player_rating} vs {opponent_rating} => {probability}"
        )

        return to_percentages(probability)
