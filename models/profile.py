from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ActivityLevel(str, Enum):
    BMR = "bmr"
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly active"
    MODERATELY_ACTIVE = "moderately active"
    VERY_ACTIVE = "very active"
    EXTRA_ACTIVE = "extra active"


class ExerciseFrequency(str, Enum):
    NONE = "none"
    ONE_TO_TWO = "1-2"
    THREE_TO_FOUR = "3-4"
    FIVE_TO_SIX = "5-6"
    DAILY = "daily"


class UserProfile(BaseModel):
    """
    Represents a profile row as stored in the remote data store.
    Metrics are kept as strings because the mobile app renders them directly.
    Values are taken as stored; plausibility is checked by the strict TDEE path.
    """

    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    activity_level: Optional[str] = Field(
        default=None,
        description="Free-text label in either the canonical or the descriptive vocabulary.",
    )
    exercise_frequency: Optional[str] = None
    bmi_bmi: Optional[str] = None
    tdee_tdee: Optional[str] = Field(
        default=None, description="Rounded TDEE in kcal/day, stringified."
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
