# main.py
import logging
import asyncio
from datetime import datetime, timezone
from typing import List, Optional

import config
from models.body_scan import BodyScan, BodyScanAnalysis
from models.profile import UserProfile
from models.progress import HistoryPeriod, ProgressReport
from services.body_scan import build_body_scan
from services.firestore import FirestoreService
from services.progress import (
    body_fat_axis_bounds,
    body_fat_axis_ticks,
    filter_history,
    find_milestones,
    summarize_progress,
)
from services.tdee_calculator import calculate_tdee_with_defaults
from utils.bmr_calculator import calculate_bmi

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)


async def refresh_profile_metrics(
    fs: FirestoreService,
    profile: UserProfile,
    body_fat_percentage: Optional[float] = None,
) -> Optional[float]:
    """
    Recomputes BMI and TDEE for a profile and writes back whichever changed.
    Body fat comes from the argument, else the latest scan, else the default.
    Returns the TDEE, or None when the profile has no weight.
    """
    if not profile.weight_kg:
        logging.warning(f"Profile {profile.id} has no weight. Skipping.")
        return None

    if body_fat_percentage is None:
        latest_scan: Optional[BodyScan] = await fs.get_latest_body_scan(profile.id)
        if latest_scan and latest_scan.analysis_body_fat is not None:
            body_fat_percentage = latest_scan.analysis_body_fat
        else:
            logging.info(
                f"No body scan for profile {profile.id}. "
                f"Assuming {config.DEFAULT_BODY_FAT_PERCENTAGE}% body fat."
            )
            body_fat_percentage = config.DEFAULT_BODY_FAT_PERCENTAGE

    tdee = calculate_tdee_with_defaults(
        profile.weight_kg,
        profile.activity_level or config.DEFAULT_ACTIVITY_LEVEL,
        profile.exercise_frequency or config.DEFAULT_EXERCISE_FREQUENCY,
        body_fat_percentage,
    )
    bmi = calculate_bmi(profile.weight_kg, profile.height_cm)

    tdee_str = str(round(tdee))
    bmi_str = f"{bmi:.2f}" if bmi is not None else None
    if tdee_str == profile.tdee_tdee and bmi_str == profile.bmi_bmi:
        logging.info(f"Profile {profile.id} metrics unchanged (TDEE {tdee_str}).")
        return tdee

    await fs.update_profile_metrics(
        profile.id,
        bmi=bmi_str if bmi_str != profile.bmi_bmi else None,
        tdee=tdee_str if tdee_str != profile.tdee_tdee else None,
    )
    logging.info(f"Updated profile {profile.id}: TDEE {tdee_str} kcal, BMI {bmi_str}.")
    return tdee


async def record_body_scan(
    fs: FirestoreService,
    profile: UserProfile,
    analysis: BodyScanAnalysis,
    image_urls: List[str],
    scanned_at: Optional[datetime] = None,
) -> BodyScan:
    scanned_at = scanned_at or datetime.now(timezone.utc)
    scan, entry = build_body_scan(profile, analysis, image_urls, scanned_at)
    await fs.save_body_scan(profile.id, scan, entry)
    await refresh_profile_metrics(fs, profile, scan.analysis_body_fat)
    return scan


async def load_progress_report(
    fs: FirestoreService,
    uid: str,
    period: HistoryPeriod = HistoryPeriod.ALL,
    now: Optional[datetime] = None,
    target_body_fat: float = config.DEFAULT_TARGET_BODY_FAT,
) -> ProgressReport:
    now = now or datetime.now(timezone.utc)
    history = filter_history(await fs.get_progress_history(uid), period, now)
    lower, upper = body_fat_axis_bounds(history)
    return ProgressReport(
        period=period,
        summary=summarize_progress(history),
        milestones=find_milestones(history, target_body_fat),
        axis_bounds=(lower, upper),
        axis_ticks=body_fat_axis_ticks(lower, upper),
    )


async def run_daily_job():
    logging.info("Starting profile metrics refresh job.")
    firestore_service = FirestoreService()
    profile_count = 0
    async for profile in firestore_service.get_all_profiles():
        profile_count += 1
        try:
            await refresh_profile_metrics(firestore_service, profile)
        except Exception as e:
            logging.error(
                f"An unexpected error occurred while processing profile {profile.id}: {e}",
                exc_info=True,
            )
    logging.info(f"Processed a total of {profile_count} profile(s).")
    logging.info("Profile metrics refresh job finished.")


if __name__ == "__main__":
    asyncio.run(run_daily_job())
