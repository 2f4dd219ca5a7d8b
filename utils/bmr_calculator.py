from typing import Optional

import config


def calculate_lean_mass(weight_kg: float, body_fat_percentage: float) -> float:
    return weight_kg * (1 - body_fat_percentage / 100)


def calculate_katch_mcardle_bmr(weight_kg: float, body_fat_percentage: float) -> float:
    """
    Calculates BMR using the Katch-McArdle equation, which works from lean
    body mass rather than total weight. Inputs are not range-checked.
    """
    lean_mass = calculate_lean_mass(weight_kg, body_fat_percentage)
    return config.KATCH_MCARDLE_INTERCEPT + config.KATCH_MCARDLE_LEAN_MASS_FACTOR * lean_mass


def calculate_bmi(
    weight_kg: Optional[float], height_cm: Optional[float]
) -> Optional[float]:
    if not weight_kg or not height_cm:
        return None
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)
