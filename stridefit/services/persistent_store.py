"""
Read/merge/write/wipe discipline for the single persisted record.

Contract:
- read() never raises and always returns a fully populated record. Missing
  top-level fields are filled from a freshly built default; fields present in
  the stored document win, even when empty. The merge is shallow on purpose:
  nested objects are taken as stored.
- write() recomputes privacyAudit.storageUsed before committing. Persistence
  is best effort; medium failures are logged, not raised.
- wipe() removes the record and tells listeners to rebuild their state from
  a virgin default.
"""

import json
import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError

from stridefit.core.config import settings
from stridefit.schemas.gait import LENIENT
from stridefit.schemas.storage import LocalStorageSchema, default_record, record_field_aliases
from stridefit.services.storage_medium import StorageMedium, StorageUnavailableError

logger = logging.getLogger(__name__)

WipeListener = Callable[[], None]

MAX_REPAIR_PASSES = 3


class PersistentStore:
    """Owns the persisted record stored under one well-known key."""

    def __init__(self, medium: StorageMedium, key: Optional[str] = None):
        self.medium = medium
        self.key = key or settings.STORAGE_KEY
        self._wipe_listeners: list[WipeListener] = []

    # ------------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------------

    def read(self) -> LocalStorageSchema:
        """Load the record, defaulting on missing, unreadable or corrupt data."""
        try:
            raw = self.medium.get(self.key)
        except StorageUnavailableError as e:
            logger.error(f"Storage unavailable, using defaults: {e}")
            return default_record()

        if not raw:
            return default_record()

        try:
            stored = json.loads(raw)
        except ValueError as e:
            logger.error(f"Stored record is not valid JSON, using defaults: {e}")
            return default_record()

        if not isinstance(stored, dict):
            logger.error(f"Stored record is a {type(stored).__name__}, not an object, using defaults")
            return default_record()

        return self._merge(stored)

    def _merge(self, stored: dict[str, Any]) -> LocalStorageSchema:
        """Shallow merge of the stored document over a fresh default.

        Repair is as narrow as the ValidationError allows: invalid list
        entries are dropped one by one, any other invalid top-level field is
        reset to its default, and the gait profile keeps its known answers.
        """
        aliases = record_field_aliases()
        known = set(aliases) | set(aliases.values())
        values = dict(stored)

        # Absent keys fall back to the model's default factories
        missing = [alias for alias in aliases if alias not in stored]
        if missing:
            logger.debug(f"Stored record predates fields {missing}, filling from defaults")

        for _ in range(MAX_REPAIR_PASSES):
            try:
                return LocalStorageSchema.model_validate(values, context={LENIENT: True})
            except ValidationError as e:
                errors = e.errors()
            if not self._repair(values, errors, known):
                break

        logger.error("Stored record could not be repaired, using defaults")
        return default_record()

    @staticmethod
    def _repair(values: dict[str, Any], errors: list[dict[str, Any]], known: set[str]) -> bool:
        """Drop what the errors point at. Returns False when nothing was repairable."""
        bad_entries: dict[str, set[int]] = {}
        invalid: set[str] = set()

        for err in errors:
            loc = err["loc"]
            if not loc or loc[0] not in known:
                continue
            field = loc[0]
            if len(loc) > 1 and isinstance(loc[1], int) and isinstance(values.get(field), list):
                bad_entries.setdefault(field, set()).add(loc[1])
            else:
                invalid.add(field)

        for field in invalid:
            values.pop(field, None)
        if invalid:
            logger.warning(f"Stored fields {sorted(invalid)} failed validation, resetting them to defaults")

        for field, indexes in bad_entries.items():
            if field in invalid:
                continue
            entries = values[field]
            values[field] = [entry for i, entry in enumerate(entries) if i not in indexes]
            logger.warning(f"Dropped invalid stored {field} entries at {sorted(indexes)}: "
                           f"{[entries[i] for i in sorted(indexes) if i < len(entries)]}")

        return bool(invalid or bad_entries)

    # ------------------------------------------------------------------
    # Write path
    # ------------------------------------------------------------------

    def write(self, record: LocalStorageSchema) -> LocalStorageSchema:
        """Commit the whole record, refreshing the derived storage size first."""
        payload = self._dump(record)
        size = len(self._serialize(payload).encode("utf-8"))
        record.privacy_audit.storage_used = f"{size / 1024:.2f}KB"
        payload["privacyAudit"]["storageUsed"] = record.privacy_audit.storage_used

        try:
            self.medium.set(self.key, self._serialize(payload))
        except StorageUnavailableError as e:
            logger.error(f"Failed to persist record: {e}")
        return record

    @staticmethod
    def _dump(record: LocalStorageSchema) -> dict[str, Any]:
        payload = record.model_dump(mode="json", by_alias=True)
        # The gait profile stays sparse: unanswered questions are absent, not null
        payload["gaitProfile"] = record.gait_profile.model_dump(mode="json", by_alias=True, exclude_none=True)
        return payload

    @staticmethod
    def _serialize(payload: dict[str, Any]) -> str:
        return json.dumps(payload, separators=(",", ":"))

    def wipe(self) -> None:
        """Delete all persisted state and signal owners to reinitialize."""
        try:
            self.medium.remove(self.key)
            logger.info("Local data wiped")
        except StorageUnavailableError as e:
            logger.error(f"Failed to wipe local data: {e}")

        for listener in list(self._wipe_listeners):
            try:
                listener()
            except Exception as e:
                logger.error(f"Wipe listener {listener!r} failed: {e}")

    def add_wipe_listener(self, listener: WipeListener) -> Callable[[], None]:
        """Register a callback run after wipe(); returns an unsubscribe function."""
        self._wipe_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._wipe_listeners:
                self._wipe_listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Auth flag and audit
    # ------------------------------------------------------------------

    def is_authenticated(self) -> bool:
        return self.read().is_authenticated

    def set_authenticated(self, status: bool) -> None:
        record = self.read()
        record.is_authenticated = status
        self.write(record)

    def storage_used(self) -> str:
        return self.read().privacy_audit.storage_used

    def raw_data(self) -> dict[str, Any]:
        """The merged record as plain JSON-compatible data."""
        return self._dump(self.read())
