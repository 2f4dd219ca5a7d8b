from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.profile import ActivityLevel


class ActivityMultiplier(BaseModel):
    """Resolved activity bucket and the base multiplier applied to BMR."""

    level: ActivityLevel
    base: float

    model_config = ConfigDict(frozen=True)


class TDEEInputs(BaseModel):
    """
    Inputs for a single TDEE estimate. Deliberately unconstrained: the lenient
    calculator must accept anything callers pass and still return a number.
    """

    weight_kg: float
    body_fat_percentage: float = Field(
        ..., description="Percentage units, e.g. 18.5 rather than 0.185."
    )
    activity_level: str
    exercise_frequency: str = "none"

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class TDEEBreakdown(BaseModel):
    """Intermediate values of a TDEE calculation."""

    bmr: float
    activity_level: ActivityLevel
    base_multiplier: float
    exercise_bonus: float
    total_multiplier: float
    tdee: float

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
