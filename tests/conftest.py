"""Pytest fixtures for the TDEE service tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

import pytest

from models.body_scan import BodyScan, ProgressEntry
from models.profile import UserProfile


class FakeFirestoreService:
    """In-memory stand-in for FirestoreService."""

    def __init__(self, profiles: Optional[List[UserProfile]] = None):
        self.profiles = profiles or []
        self.latest_scans: dict[str, BodyScan] = {}
        self.saved_scans: list[tuple[str, BodyScan, ProgressEntry]] = []
        self.metric_updates: list[tuple[str, Optional[str], Optional[str]]] = []
        self.histories: dict[str, list[ProgressEntry]] = {}

    async def get_all_profiles(self, page_size: int = 1000):
        for profile in self.profiles:
            yield profile

    async def get_latest_body_scan(self, uid: str) -> Optional[BodyScan]:
        return self.latest_scans.get(uid)

    async def save_body_scan(self, uid: str, scan: BodyScan, entry: ProgressEntry):
        self.saved_scans.append((uid, scan, entry))
        self.latest_scans[uid] = scan
        self.histories.setdefault(uid, []).append(entry)

    async def get_progress_history(self, uid: str) -> list[ProgressEntry]:
        return list(self.histories.get(uid, []))

    async def update_profile_metrics(
        self, uid: str, bmi: Optional[str], tdee: Optional[str]
    ):
        self.metric_updates.append((uid, bmi, tdee))


@pytest.fixture
def fake_store() -> FakeFirestoreService:
    return FakeFirestoreService()


@pytest.fixture
def profile() -> UserProfile:
    """An 80 kg sedentary user without stored metrics."""
    return UserProfile(
        id="user-1",
        email="user@example.com",
        name="Test User",
        age=30,
        gender="male",
        height_cm=180,
        weight_kg=80,
        activity_level="sedentary",
    )


@pytest.fixture
def scanned_at() -> datetime:
    return datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
