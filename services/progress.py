import math
from datetime import datetime, timedelta
from typing import List, Sequence, Tuple, Union

import numpy as np

import config
from models.body_scan import ProgressEntry
from models.progress import HistoryPeriod, Milestone, MilestoneType, ProgressSummary


def summarize_progress(history: Sequence[ProgressEntry]) -> ProgressSummary:
    """
    Compares the first and the latest scan. History is expected in
    chronological order.
    """
    if not history:
        return ProgressSummary()
    first = history[0].body_fat
    latest = history[-1].body_fat
    change = latest - first
    percent_change = change / first * 100 if first != 0 else None
    return ProgressSummary(
        first_body_fat=first,
        latest_body_fat=latest,
        change=change,
        percent_change=percent_change,
        scan_count=len(history),
    )


def find_milestones(
    history: Sequence[ProgressEntry],
    target_body_fat: float = config.DEFAULT_TARGET_BODY_FAT,
) -> List[Milestone]:
    milestones: List[Milestone] = []
    if len(history) < 2:
        return milestones

    first = history[0].body_fat
    for i, entry in enumerate(history[1:], start=1):
        reduction = first - entry.body_fat
        if reduction >= config.MILESTONE_REDUCTION_POINTS:
            milestones.append(
                Milestone(
                    index=i,
                    type=MilestoneType.REDUCTION,
                    value=reduction,
                    body_fat=entry.body_fat,
                )
            )
        if entry.body_fat <= target_body_fat:
            milestones.append(
                Milestone(
                    index=i,
                    type=MilestoneType.GOAL,
                    value=entry.body_fat,
                    body_fat=entry.body_fat,
                )
            )
    return milestones


def body_fat_axis_bounds(history: Sequence[ProgressEntry]) -> Tuple[int, int]:
    """
    Chooses y-axis bounds for a body fat chart: the observed range padded by
    10% (at least one point), rounded outwards and clamped to [0, 60].
    """
    if not history:
        return config.DEFAULT_AXIS_BOUNDS
    values = np.array([entry.body_fat for entry in history], dtype=float)
    lowest, highest = float(values.min()), float(values.max())
    buffer = max(1.0, (highest - lowest) * config.AXIS_BUFFER_RATIO)
    lower = max(math.floor(lowest - buffer), config.AXIS_FLOOR)
    upper = min(math.ceil(highest + buffer), config.AXIS_CEILING)
    if lower == upper:
        lower = max(config.AXIS_FLOOR, lower - 1)
        upper = upper + 1
    return lower, upper


def body_fat_axis_ticks(
    lower: float, upper: float, steps: int = config.AXIS_TICK_COUNT
) -> List[float]:
    """Returns `steps` evenly spaced ticks from upper down to lower."""
    ticks = np.round(np.linspace(upper, lower, steps), 1)
    return [float(tick) for tick in ticks]


def filter_history(
    history: Sequence[ProgressEntry],
    period: Union[HistoryPeriod, str],
    now: datetime,
) -> List[ProgressEntry]:
    """Keeps entries no older than the period's window; "all" keeps everything."""
    days = config.HISTORY_PERIOD_DAYS.get(HistoryPeriod(period).value)
    if days is None:
        return list(history)
    cutoff = now - timedelta(days=days)
    return [entry for entry in history if entry.timestamp >= cutoff]
