"""Tests for activity level and exercise frequency normalization."""

from __future__ import annotations

import logging

import pytest

from models.profile import ActivityLevel, ExerciseFrequency
from utils.activity_level import (
    get_activity_multiplier,
    get_exercise_frequency_bonus,
    match_activity_level,
    match_exercise_frequency,
)
from utils.exceptions import UnknownActivityLevelError, UnknownExerciseFrequencyError


class TestGetActivityMultiplier:
    """Tests for the lenient activity label lookup."""

    @pytest.mark.parametrize(
        "label,level,base",
        [
            ("bmr", ActivityLevel.BMR, 1.0),
            ("sedentary", ActivityLevel.SEDENTARY, 1.2),
            ("lightly active", ActivityLevel.LIGHTLY_ACTIVE, 1.3),
            ("moderately active", ActivityLevel.MODERATELY_ACTIVE, 1.4),
            ("very active", ActivityLevel.VERY_ACTIVE, 1.55),
            ("extra active", ActivityLevel.EXTRA_ACTIVE, 1.7),
        ],
    )
    def test_canonical_labels(self, label, level, base) -> None:
        multiplier = get_activity_multiplier(label)
        assert multiplier.level == level
        assert multiplier.base == base

    @pytest.mark.parametrize(
        "label,base",
        [
            ("Sedentary (office job)", 1.2),
            ("Light Exercise (1-2 days/week)", 1.3),
            ("Moderate Exercise (3-5 days/week)", 1.4),
            ("Heavy Exercise (6-7 days/week)", 1.55),
            ("Athlete (2x per day)", 1.7),
        ],
    )
    def test_descriptive_labels(self, label, base) -> None:
        assert get_activity_multiplier(label).base == base

    def test_both_vocabularies_resolve_identically(self) -> None:
        assert get_activity_multiplier("sedentary") == get_activity_multiplier(
            "Sedentary (office job)"
        )

    def test_case_and_whitespace_insensitive(self) -> None:
        assert get_activity_multiplier("  VERY Active \n").level == ActivityLevel.VERY_ACTIVE

    @pytest.mark.parametrize(
        "label", ["athlete", "Former ATHLETE, now coaching", "pro-athlete life"]
    )
    def test_any_athlete_label_is_extra_active(self, label) -> None:
        assert get_activity_multiplier(label).base == 1.7

    def test_keyword_priority_order(self) -> None:
        """Sedentary keywords are checked before the lighter ones."""
        assert get_activity_multiplier("office worker, light walks").level == ActivityLevel.SEDENTARY
        assert get_activity_multiplier("light to moderate").level == ActivityLevel.LIGHTLY_ACTIVE
        assert get_activity_multiplier("trains 3-5 times").level == ActivityLevel.MODERATELY_ACTIVE
        assert get_activity_multiplier("heavy lifting").level == ActivityLevel.VERY_ACTIVE
        assert get_activity_multiplier("trains 2x a day").level == ActivityLevel.EXTRA_ACTIVE

    def test_unknown_label_defaults_to_sedentary(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            multiplier = get_activity_multiplier("xyz-unknown")
        assert multiplier.level == ActivityLevel.SEDENTARY
        assert multiplier.base == 1.2
        assert "xyz-unknown" in caplog.text

    def test_known_label_does_not_warn(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            get_activity_multiplier("moderately active")
        assert caplog.records == []


class TestMatchActivityLevel:
    """Tests for the strict activity label lookup."""

    def test_resolves_fuzzy_label(self) -> None:
        assert match_activity_level("Moderate Exercise") == ActivityLevel.MODERATELY_ACTIVE

    def test_raises_on_unknown_label(self) -> None:
        with pytest.raises(UnknownActivityLevelError) as excinfo:
            match_activity_level("couch")
        assert excinfo.value.label == "couch"

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            match_activity_level("")


class TestExerciseFrequency:
    """Tests for the exercise frequency bonus lookup."""

    @pytest.mark.parametrize(
        "label,bonus",
        [("none", 0.0), ("1-2", 0.05), ("3-4", 0.1), ("5-6", 0.15), ("daily", 0.2)],
    )
    def test_known_buckets(self, label, bonus) -> None:
        assert get_exercise_frequency_bonus(label) == bonus

    def test_case_insensitive(self) -> None:
        assert get_exercise_frequency_bonus(" Daily ") == 0.2

    def test_no_fuzzy_matching(self) -> None:
        assert get_exercise_frequency_bonus("3-4 days/week") == 0.0

    def test_unknown_yields_zero(self) -> None:
        assert get_exercise_frequency_bonus("sometimes") == 0.0

    def test_strict_match(self) -> None:
        assert match_exercise_frequency("5-6") == ExerciseFrequency.FIVE_TO_SIX

    def test_strict_match_raises(self) -> None:
        with pytest.raises(UnknownExerciseFrequencyError):
            match_exercise_frequency("twice")
