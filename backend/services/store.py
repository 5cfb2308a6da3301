"""Firestore-backed result store.

Verdicts and generated text live under ``{category}/{user_id}/{entry}/{auto_id}``.
Entries are append-only from the pipeline's point of view; deletion exists
only for file references.
"""

import logging
from typing import Any

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from services.errors import PersistenceError

logger = logging.getLogger(__name__)

USERS = "users"
STARTUPS = "startups"


class ResultStore:
    def __init__(self, db: Any) -> None:
        self._db = db

    def _entries(self, user_id: str, category: str, entry: str):
        return self._db.collection(category).document(user_id).collection(entry)

    async def append(
        self,
        user_id: str,
        category: str,
        entry: str,
        payload: dict[str, Any],
        timestamp_field: str = "timestamp",
    ) -> str:
        """Add one document with a server timestamp; returns its id."""
        data = {**payload, timestamp_field: firestore.SERVER_TIMESTAMP}
        try:
            _, ref = await self._entries(user_id, category, entry).add(data)
        except google_exceptions.GoogleAPIError as e:
            logger.error("Firestore write failed (%s/%s/%s): %s", category, user_id, entry, e)
            raise PersistenceError("Failed to save result") from e
        return ref.id

    async def merge(
        self,
        user_id: str,
        category: str,
        payload: dict[str, Any],
        timestamp_field: str = "last_updated",
    ) -> None:
        data = {**payload, timestamp_field: firestore.SERVER_TIMESTAMP}
        try:
            await self._db.collection(category).document(user_id).set(data, merge=True)
        except google_exceptions.GoogleAPIError as e:
            logger.error("Firestore merge failed (%s/%s): %s", category, user_id, e)
            raise PersistenceError("Failed to save result") from e

    async def list_entries(
        self,
        user_id: str,
        category: str,
        entry: str,
        where: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = True,
    ) -> list[dict[str, Any]]:
        query = self._entries(user_id, category, entry)
        for field, value in (where or {}).items():
            query = query.where(filter=FieldFilter(field, "==", value))
        if order_by:
            direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            query = query.order_by(order_by, direction=direction)

        try:
            return [{"id": snap.id, **snap.to_dict()} async for snap in query.stream()]
        except google_exceptions.GoogleAPIError as e:
            logger.error("Firestore query failed (%s/%s/%s): %s", category, user_id, entry, e)
            raise PersistenceError("Failed to read results") from e

    async def get_entry(self, user_id: str, category: str, entry: str, doc_id: str) -> dict[str, Any] | None:
        try:
            snap = await self._entries(user_id, category, entry).document(doc_id).get()
        except google_exceptions.GoogleAPIError as e:
            logger.error("Firestore read failed (%s/%s/%s/%s): %s", category, user_id, entry, doc_id, e)
            raise PersistenceError("Failed to read result") from e
        return snap.to_dict() if snap.exists else None

    async def delete_entry(self, user_id: str, category: str, entry: str, doc_id: str) -> None:
        try:
            await self._entries(user_id, category, entry).document(doc_id).delete()
        except google_exceptions.GoogleAPIError as e:
            logger.error("Firestore delete failed (%s/%s/%s/%s): %s", category, user_id, entry, doc_id, e)
            raise PersistenceError("Failed to delete result") from e

    # ------------------------------------------------------------------
    # User profiles and saved startups
    # ------------------------------------------------------------------

    async def create_profile(self, user_id: str, name: str, email: str) -> None:
        profile = {
            "name": name,
            "email": email,
            "created_at": firestore.SERVER_TIMESTAMP,
            "startups": [],
            "skills": [],
            "preferences": {},
        }
        await self._call(self._db.collection(USERS).document(user_id).set(profile), "create profile")

    async def get_profile(self, user_id: str) -> dict[str, Any] | None:
        snap = await self._call(self._db.collection(USERS).document(user_id).get(), "read profile")
        return snap.to_dict() if snap.exists else None

    async def update_profile(self, user_id: str, changes: dict[str, Any]) -> None:
        data = {**changes, "updated_at": firestore.SERVER_TIMESTAMP}
        await self._call(self._db.collection(USERS).document(user_id).update(data), "update profile")

    async def add_startup(self, user_id: str, startup: dict[str, Any]) -> str:
        data = {**startup, "user_id": user_id, "created_at": firestore.SERVER_TIMESTAMP}
        _, ref = await self._call(self._db.collection(STARTUPS).add(data), "save startup")
        await self._call(
            self._db.collection(USERS).document(user_id).update(
                {"startups": firestore.ArrayUnion([ref.id])}
            ),
            "link startup",
        )
        return ref.id

    async def list_startups(self, user_id: str) -> list[dict[str, Any]]:
        profile = await self.get_profile(user_id) or {}
        startups: list[dict[str, Any]] = []
        for startup_id in profile.get("startups", []):
            snap = await self._call(
                self._db.collection(STARTUPS).document(startup_id).get(), "read startup"
            )
            if snap.exists:
                startups.append({"id": snap.id, **snap.to_dict()})
        return startups

    async def _call(self, operation, action: str):
        try:
            return await operation
        except google_exceptions.GoogleAPIError as e:
            logger.error("Firestore failed to %s: %s", action, e)
            raise PersistenceError(f"Failed to {action}") from e
