import logging
import re
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

import config
from models.body_scan import BodyScan, BodyScanAnalysis, ProgressEntry
from models.profile import UserProfile
from services.tdee_calculator import calculate_tdee_with_defaults
from utils.bmr_calculator import calculate_bmi
from utils.exceptions import BodyFatExtractionError

_NUMBER = r"(\d+(?:\.\d+)?)"
_PERCENT_PATTERN = re.compile(_NUMBER + r"%")
_NUMBER_PATTERN = re.compile(_NUMBER)
_HEDGED_PATTERN = re.compile(
    r"(?:" + "|".join(config.BODY_FAT_HEDGE_WORDS) + r")\s*" + _NUMBER,
    re.IGNORECASE,
)


def extract_body_fat_percentage(text: Optional[str]) -> Optional[float]:
    """
    Pulls a body fat percentage out of the analysis service's free-text answer.

    Tries "18.5%" first, then any bare number, then hedged phrases such as
    "roughly 18". Returns percentage units, or None when nothing usable is found.
    """
    if not text:
        return None
    match = _PERCENT_PATTERN.search(text) or _NUMBER_PATTERN.search(text)
    body_fat = float(match.group(1)) if match else None
    if not body_fat:
        hedged = _HEDGED_PATTERN.search(text)
        if hedged:
            body_fat = float(hedged.group(1))
    return body_fat or None


def build_body_scan(
    profile: UserProfile,
    analysis: BodyScanAnalysis,
    image_urls: List[str],
    scanned_at: datetime,
) -> Tuple[BodyScan, ProgressEntry]:
    body_fat = extract_body_fat_percentage(analysis.body_fat)
    if body_fat is None:
        raise BodyFatExtractionError(analysis.body_fat)

    bmi = calculate_bmi(profile.weight_kg, profile.height_cm)
    tdee = None
    # The scan row records TDEE without exercise bonus; the profile refresh
    # that follows applies the profile's exercise frequency.
    if profile.weight_kg and profile.activity_level:
        tdee = calculate_tdee_with_defaults(
            profile.weight_kg,
            profile.activity_level,
            config.DEFAULT_EXERCISE_FREQUENCY,
            body_fat,
        )
    else:
        logging.info(
            f"Profile {profile.id} has no weight or activity level; scan stored without TDEE."
        )

    front, side, back = (list(image_urls) + [None, None, None])[:3]
    scan = BodyScan(
        user_id=profile.id,
        front_image_url=front,
        side_image_url=side,
        back_image_url=back,
        analysis_rationale=analysis.rationale,
        analysis_body_fat=body_fat,
        scanned_at=scanned_at,
        bmi=f"{bmi:.2f}" if bmi is not None else None,
        tdee=f"{tdee:.1f}" if tdee is not None else None,
    )
    entry = ProgressEntry(
        body_fat=body_fat, timestamp=scanned_at, analysis=analysis.rationale
    )
    return scan, entry


def scan_cooldown_remaining(
    last_scanned_at: Optional[datetime], now: datetime
) -> timedelta:
    if last_scanned_at is None:
        return timedelta(0)
    remaining = last_scanned_at + timedelta(days=config.SCAN_COOLDOWN_DAYS) - now
    return max(remaining, timedelta(0))
