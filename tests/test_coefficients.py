"""Tests for the model coefficient registry."""
from dataclasses import FrozenInstanceError

import pytest

from fourcast.errors import FourcastError, UnknownModelRevisionError
from fourcast.scoring import (
    DEFAULT_REVISION,
    FOURCAST_V1,
    RiskScorer,
    available_revisions,
    get_model,
)


class TestShippedCoefficients:
    """The 4cast-v1 weights must match the fitted model exactly."""

    def test_values(self):
        assert FOURCAST_V1.revision == "4cast-v1"
        assert FOURCAST_V1.age == 0.043105212902502056
        assert FOURCAST_V1.smell_rating == 0.027966104711863282
        assert FOURCAST_V1.safety_impact == 0.019908032571725683
        assert FOURCAST_V1.diabetes == 1.3004639643330465
        assert FOURCAST_V1.intercept == -5.117446511633389

    def test_cannot_be_mutated(self):
        with pytest.raises(FrozenInstanceError):
            FOURCAST_V1.intercept = 0.0

    def test_default_scorer_uses_shipped_revision(self):
        scorer = RiskScorer()

        assert scorer.coefficients is FOURCAST_V1
        assert scorer.revision == DEFAULT_REVISION == "4cast-v1"


class TestRegistry:

    def test_get_model_default(self):
        assert get_model() is FOURCAST_V1

    def test_get_model_by_name(self):
        assert get_model("4cast-v1") is FOURCAST_V1

    def test_available_revisions(self):
        assert available_revisions() == ("4cast-v1",)

    def test_unknown_revision(self):
        with pytest.raises(UnknownModelRevisionError) as exc_info:
            get_model("4cast-v0")

        assert exc_info.value.revision == "4cast-v0"
        assert "4cast-v0" in str(exc_info.value)
        assert "4cast-v1" in str(exc_info.value)

    def test_unknown_revision_is_key_error_and_package_error(self):
        with pytest.raises(KeyError):
            get_model("nope")
        with pytest.raises(FourcastError):
            get_model("nope")
