import logging
from typing import Optional

import config
from models.profile import ActivityLevel, ExerciseFrequency
from models.tdee import ActivityMultiplier
from utils.exceptions import UnknownActivityLevelError, UnknownExerciseFrequencyError

# Both vocabularies keyed by their lowercase form.
_EXACT_ACTIVITY_LABELS = {
    **{key.lower(): key for key in config.ACTIVITY_LEVEL_MAPPING},
    **{alias.lower(): key for alias, key in config.ACTIVITY_LEVEL_ALIASES.items()},
}


def _normalize_label(label: str) -> str:
    return label.lower().strip()


def _lookup_activity_level(label: str) -> Optional[ActivityLevel]:
    normalized = _normalize_label(label)
    canonical = _EXACT_ACTIVITY_LABELS.get(normalized)
    if canonical is not None:
        return ActivityLevel(canonical)
    for keywords, canonical in config.ACTIVITY_LEVEL_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return ActivityLevel(canonical)
    return None


def _multiplier_for(level: ActivityLevel) -> ActivityMultiplier:
    return ActivityMultiplier(level=level, base=config.ACTIVITY_LEVEL_MAPPING[level.value])


def match_activity_level(label: str) -> ActivityLevel:
    """
    Resolves a free-text activity label to its canonical bucket.

    Accepts the canonical labels ("lightly active"), the descriptive labels
    written by the upload flow ("Light Exercise (1-2 days/week)") and anything
    containing one of their keywords. Raises UnknownActivityLevelError when
    nothing matches.
    """
    level = _lookup_activity_level(label)
    if level is None:
        raise UnknownActivityLevelError(label)
    return level


def get_activity_multiplier(label: str) -> ActivityMultiplier:
    """Lenient form of match_activity_level: unknown labels fall back to sedentary."""
    level = _lookup_activity_level(label)
    if level is None:
        logging.warning(f"Unknown activity level: {label}, using sedentary")
        level = ActivityLevel(config.DEFAULT_ACTIVITY_LEVEL)
    return _multiplier_for(level)


def match_exercise_frequency(label: str) -> ExerciseFrequency:
    normalized = _normalize_label(label)
    try:
        return ExerciseFrequency(normalized)
    except ValueError:
        raise UnknownExerciseFrequencyError(label) from None


def get_exercise_frequency_bonus(label: str) -> float:
    # Exact match only; anything else earns no bonus.
    return config.EXERCISE_FREQUENCY_BONUS.get(_normalize_label(label), 0.0)
