# services/firestore.py
import logging
import os
from typing import AsyncGenerator, List, Optional

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore_v1.async_client import AsyncClient
from pydantic import ValidationError

import config
from models.body_scan import BodyScan, ProgressEntry
from models.profile import UserProfile


def initialize_firebase_app():
    if not firebase_admin._apps:
        cred_path = config.FIREBASE_CREDENTIALS_PATH
        if not os.path.exists(cred_path):
            raise FileNotFoundError(f"Service account key not found at {cred_path}.")
        cred = credentials.Certificate(cred_path)
        firebase_admin.initialize_app(cred)
        logging.info("Firebase Admin SDK initialized successfully.")


class FirestoreService:
    """
    Thin adapter over the remote profile store. Profiles live in the
    'profiles' collection; each has 'bodyScans' and 'progressHistory'
    subcollections.
    """

    def __init__(self):
        initialize_firebase_app()
        self.db: AsyncClient = firestore_async.client()

    def _profile_ref(self, uid: str):
        return self.db.collection(config.PROFILES_COLLECTION).document(uid)

    async def get_all_profiles(
        self, page_size: int = 1000
    ) -> AsyncGenerator[UserProfile, None]:
        profiles_ref = self.db.collection(config.PROFILES_COLLECTION)
        cursor = None
        while True:
            query = profiles_ref.order_by("__name__").limit(page_size)
            if cursor:
                query = query.start_after(cursor)
            docs = await query.get()
            if not docs:
                break
            for doc in docs:
                try:
                    profile = UserProfile(**{**doc.to_dict(), "id": doc.id})
                except ValidationError:
                    logging.error(
                        f"Skipping malformed profile document {doc.id}.", exc_info=True
                    )
                    continue
                yield profile
            cursor = docs[-1]

    async def get_latest_body_scan(self, uid: str) -> Optional[BodyScan]:
        scans_ref = self._profile_ref(uid).collection(config.BODY_SCANS_COLLECTION)
        query = scans_ref.order_by("scanned_at", direction="DESCENDING").limit(1)
        docs = await query.get()
        if not docs:
            return None
        return BodyScan.model_validate(docs[0].to_dict())

    async def get_progress_history(self, uid: str) -> List[ProgressEntry]:
        history_ref = self._profile_ref(uid).collection(
            config.PROGRESS_HISTORY_COLLECTION
        )
        docs = await history_ref.order_by("timestamp").get()
        return [ProgressEntry.model_validate(doc.to_dict()) for doc in docs]

    async def save_body_scan(self, uid: str, scan: BodyScan, entry: ProgressEntry):
        """Writes the scan and its progress entry together, keyed by scan time."""
        profile_ref = self._profile_ref(uid)
        doc_id = scan.scanned_at.isoformat()
        batch = self.db.batch()
        batch.set(
            profile_ref.collection(config.BODY_SCANS_COLLECTION).document(doc_id),
            scan.model_dump(),
        )
        batch.set(
            profile_ref.collection(config.PROGRESS_HISTORY_COLLECTION).document(doc_id),
            entry.model_dump(),
        )
        await batch.commit()
        logging.info(f"Saved body scan {doc_id} for user {uid}.")

    async def update_profile_metrics(
        self, uid: str, bmi: Optional[str], tdee: Optional[str]
    ):
        updates = {}
        if bmi is not None:
            updates["bmi_bmi"] = bmi
        if tdee is not None:
            updates["tdee_tdee"] = tdee
        if not updates:
            return
        await self._profile_ref(uid).update(updates)
