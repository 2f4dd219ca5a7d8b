import enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel


class MilestoneType(str, enum.Enum):
    """Enumeration for the kinds of progress milestone."""

    REDUCTION = "reduction"
    GOAL = "goal"


class Milestone(BaseModel):
    index: int
    type: MilestoneType
    value: float
    body_fat: float

    @field_serializer("type")
    def serialize_milestone_type(self, milestone_type: MilestoneType, _info):
        """Converts the MilestoneType enum to its string value for serialization."""
        return milestone_type.value

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProgressSummary(BaseModel):
    """Body fat change between the first and the latest scan."""

    first_body_fat: Optional[float] = None
    latest_body_fat: Optional[float] = None
    change: Optional[float] = None
    percent_change: Optional[float] = None
    scan_count: int = 0

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HistoryPeriod(str, enum.Enum):
    """Enumeration for the chart history windows."""

    ALL = "all"
    WEEK = "week"
    MONTH = "month"
    THREE_MONTHS = "3months"
    SIX_MONTHS = "6months"
    YEAR = "year"


class ProgressReport(BaseModel):
    """Everything the progress chart needs for one user and period."""

    period: HistoryPeriod
    summary: ProgressSummary
    milestones: List[Milestone]
    axis_bounds: Tuple[int, int]
    axis_ticks: List[float]

    @field_serializer("period")
    def serialize_period(self, period: HistoryPeriod, _info):
        return period.value

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
