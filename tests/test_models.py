"""Tests for elorate value types."""

import pytest
from pydantic import ValidationError

from elorate.models import EngineConfig, MatchOutcome, OutcomeProbability, RelativeRank


class TestMatchOutcome:
    """Tests for MatchOutcome enum."""

    def test_values(self) -> None:
        """Test outcome values."""
        assert MatchOutcome.WIN == 1
        assert MatchOutcome.LOSS == 0
        assert MatchOutcome.DRAW == 0.5

    def test_arithmetic(self) -> None:
        """Test outcomes behave as numbers."""
        assert MatchOutcome.WIN - 0.25 == 0.75


class TestEngineConfig:
    """Tests for EngineConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = EngineConfig()
        assert config.adjustment_factor == 32
        assert config.round_result is True

    def test_frozen(self) -> None:
        """Test the configuration cannot be changed."""
        config = EngineConfig()
        with pytest.raises(ValidationError):
            config.adjustment_factor = 16

    def test_rejects_unknown_fields(self) -> None:
        """Test misspelled fields are not silently ignored."""
        with pytest.raises(ValidationError):
            EngineConfig(k_factor=16)


class TestOutcomeProbability:
    """Tests for OutcomeProbability model."""

    def test_model_dump(self) -> None:
        """Test dumping to a dict."""
        probability = OutcomeProbability(player=89, opponent=11)
        assert probability.model_dump() == {"player": 89, "opponent": 11}

    def test_rejects_out_of_range(self) -> None:
        """Test percentages must be within 0-100."""
        with pytest.raises(ValidationError):
            OutcomeProbability(player=101, opponent=0)
        with pytest.raises(ValidationError):
            OutcomeProbability(player=50, opponent=-1)

    def test_allows_uneven_sum(self) -> None:
        """Test the pair is not forced to add up to 100."""
        probability = OutcomeProbability(player=51, opponent=50)
        assert probability.player + probability.opponent == 101


class TestRelativeRank:
    """Tests for RelativeRank model."""

    def test_fields(self) -> None:
        """Test field access."""
        rank = RelativeRank(player=100000.0, opponent=1000000.0)
        assert rank.player == 100000.0
        assert rank.opponent == 1000000.0
