import logging
from typing import Any, Optional

from pydantic import ValidationError

from stridefit.schemas.gait import GaitProfile
from stridefit.schemas.storage import (
    CartItem, PrivacyAudit, ShoeRotationItem, UserProfile,
)
from stridefit.services.persistent_store import PersistentStore

logger = logging.getLogger(__name__)


class ProfileRepository:
    """Typed accessors over the persisted record.

    Every mutation is a full read-modify-write cycle: read the current record,
    change one sub-collection, write the whole record back.
    """

    def __init__(self, store: PersistentStore):
        self.store = store

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    def get_profile(self) -> UserProfile:
        return self.store.read().profile

    def update_profile(self, **changes: Any) -> UserProfile:
        """Shallow-merge changes into the profile and return the result."""
        data = self.store.read()
        try:
            data.profile = UserProfile.model_validate({**data.profile.model_dump(), **changes})
        except ValidationError as e:
            logger.warning(f"Rejected profile update {sorted(changes)}: {e}")
            return data.profile
        self.store.write(data)
        return data.profile

    def is_member(self) -> bool:
        """Gait analysis and rotation tracking need a non-guest profile."""
        return not self.get_profile().is_guest

    # ------------------------------------------------------------------
    # Gait profile
    # ------------------------------------------------------------------

    def get_gait_profile(self) -> GaitProfile:
        return self.store.read().gait_profile

    def update_gait_profile(self, **changes: Any) -> GaitProfile:
        """Shallow-merge answers; injury_history is replaced as a whole set."""
        data = self.store.read()
        current = data.gait_profile.model_dump(exclude_none=True)
        try:
            data.gait_profile = GaitProfile.model_validate({**current, **changes})
        except ValidationError as e:
            logger.warning(f"Rejected gait profile update {sorted(changes)}: {e}")
            return data.gait_profile
        self.store.write(data)
        return data.gait_profile

    def reset_gait_profile(self) -> GaitProfile:
        data = self.store.read()
        data.gait_profile = GaitProfile()
        self.store.write(data)
        return data.gait_profile

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------

    def get_rotation(self) -> list[ShoeRotationItem]:
        return self.store.read().rotation

    def add_to_rotation(self, item: ShoeRotationItem) -> list[ShoeRotationItem]:
        data = self.store.read()
        data.rotation.append(item)
        self.store.write(data)
        return data.rotation

    def log_rotation_miles(self, instance_id: str, miles: float) -> Optional[ShoeRotationItem]:
        """Add miles to one rotation shoe and to the runner's total in one write."""
        data = self.store.read()
        shoe = next((s for s in data.rotation if s.id == instance_id), None)
        if shoe is None:
            logger.info(f"Rotation shoe {instance_id} not found, nothing logged")
            return None

        shoe.miles += miles
        data.profile.miles_run = (data.profile.miles_run or 0) + miles
        self.store.write(data)
        return shoe

    def remove_rotation_shoe(self, instance_id: str) -> list[ShoeRotationItem]:
        data = self.store.read()
        data.rotation = [s for s in data.rotation if s.id != instance_id]
        self.store.write(data)
        return data.rotation

    # ------------------------------------------------------------------
    # Cart
    # ------------------------------------------------------------------

    def get_cart(self) -> list[CartItem]:
        return self.store.read().cart

    def add_to_cart(self, item: CartItem) -> list[CartItem]:
        """Merge on the (shoe_id, size) key instead of duplicating the line."""
        data = self.store.read()
        existing = next((i for i in data.cart if i.matches(item.shoe_id, item.size)), None)

        if existing:
            existing.quantity += item.quantity
        else:
            data.cart.append(item)
        self.store.write(data)
        return data.cart

    def remove_from_cart(self, shoe_id: str, size: float) -> list[CartItem]:
        data = self.store.read()
        data.cart = [i for i in data.cart if not i.matches(shoe_id, size)]
        self.store.write(data)
        return data.cart

    def clear_cart(self) -> list[CartItem]:
        data = self.store.read()
        data.cart = []
        self.store.write(data)
        return data.cart

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def get_rsvps(self) -> list[str]:
        return self.store.read().rsvped_events

    def rsvp_event(self, event_id: str) -> list[str]:
        """Idempotent: a repeated RSVP changes nothing."""
        data = self.store.read()
        if event_id in data.rsvped_events:
            return data.rsvped_events

        data.rsvped_events.append(event_id)
        data.profile.attendance_count += 1
        self.store.write(data)
        return data.rsvped_events

    def remove_rsvp(self, event_id: str) -> list[str]:
        data = self.store.read()
        if event_id not in data.rsvped_events:
            return data.rsvped_events

        data.rsvped_events = [e for e in data.rsvped_events if e != event_id]
        data.profile.attendance_count = max(data.profile.attendance_count - 1, 0)
        self.store.write(data)
        return data.rsvped_events

    # ------------------------------------------------------------------
    # Auth flag and privacy
    # ------------------------------------------------------------------

    def is_authenticated(self) -> bool:
        return self.store.is_authenticated()

    def set_authenticated(self, status: bool) -> None:
        self.store.set_authenticated(status)

    def get_privacy_audit(self) -> PrivacyAudit:
        return self.store.read().privacy_audit
