import logging
import math

import config
from models.tdee import TDEEBreakdown, TDEEInputs
from utils.activity_level import (
    get_activity_multiplier,
    get_exercise_frequency_bonus,
    match_activity_level,
    match_exercise_frequency,
)
from utils.bmr_calculator import calculate_katch_mcardle_bmr
from utils.exceptions import InvalidBodyFatPercentageError, InvalidWeightError


def calculate_tdee_breakdown(inputs: TDEEInputs) -> TDEEBreakdown:
    """
    Estimates TDEE as BMR * (activity multiplier + exercise frequency bonus).

    Unknown activity labels resolve to sedentary and unknown exercise
    frequencies earn no bonus, so this always returns a result.
    """
    bmr = calculate_katch_mcardle_bmr(inputs.weight_kg, inputs.body_fat_percentage)
    activity = get_activity_multiplier(inputs.activity_level)
    exercise_bonus = get_exercise_frequency_bonus(inputs.exercise_frequency)
    total_multiplier = activity.base + exercise_bonus
    breakdown = TDEEBreakdown(
        bmr=bmr,
        activity_level=activity.level,
        base_multiplier=activity.base,
        exercise_bonus=exercise_bonus,
        total_multiplier=total_multiplier,
        tdee=bmr * total_multiplier,
    )
    logging.info(
        f"TDEE calculation: weight={inputs.weight_kg}kg, "
        f"body_fat={inputs.body_fat_percentage}%, "
        f"activity='{inputs.activity_level}' ({activity.level.value}), "
        f"exercise='{inputs.exercise_frequency}', bmr={breakdown.bmr:.0f}, "
        f"multiplier={breakdown.base_multiplier}+{breakdown.exercise_bonus}, "
        f"tdee={breakdown.tdee:.0f}"
    )
    return breakdown


def calculate_tdee(inputs: TDEEInputs) -> float:
    return calculate_tdee_breakdown(inputs).tdee


def calculate_tdee_with_defaults(
    weight_kg: float,
    activity_level: str,
    exercise_frequency: str = config.DEFAULT_EXERCISE_FREQUENCY,
    body_fat_percentage: float = config.DEFAULT_BODY_FAT_PERCENTAGE,
) -> float:
    """Used before the user has a measured body fat percentage."""
    return calculate_tdee(
        TDEEInputs(
            weight_kg=weight_kg,
            body_fat_percentage=body_fat_percentage,
            activity_level=activity_level,
            exercise_frequency=exercise_frequency,
        )
    )


def validate_tdee_inputs(inputs: TDEEInputs) -> None:
    """
    Checks that the inputs describe a physically possible body and that both
    labels resolve without falling back to a default.
    """
    if not math.isfinite(inputs.weight_kg) or inputs.weight_kg <= 0:
        raise InvalidWeightError(inputs.weight_kg)
    # Lean mass must stay positive, so 100% is excluded.
    if (
        not math.isfinite(inputs.body_fat_percentage)
        or not 0 <= inputs.body_fat_percentage < 100
    ):
        raise InvalidBodyFatPercentageError(inputs.body_fat_percentage)
    match_activity_level(inputs.activity_level)
    match_exercise_frequency(inputs.exercise_frequency)


def calculate_tdee_strict(inputs: TDEEInputs) -> float:
    validate_tdee_inputs(inputs)
    return calculate_tdee(inputs)
