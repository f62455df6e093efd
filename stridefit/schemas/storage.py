"""
Canonical shape of the single persisted record and its zero value.

The record is stored as one JSON document with camelCase keys. Older
versions of the app wrote subsets of these fields, so the store fills
anything missing from `default_record()`.

`default_record()` must build a new object on every call. Handing out a
shared default instance would let a mutated in-memory default leak into a
fresh session after a wipe.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from stridefit.schemas.gait import GaitProfile

CUSTOM_SHOE_ID = "custom"


class StorageModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )


class UserProfile(StorageModel):
    name: str = ""
    email: str = ""
    is_guest: bool = False
    attendance_count: int = Field(default=0, ge=0)
    miles_run: Optional[float] = Field(default=0, ge=0)


class ShoeRotationItem(StorageModel):
    id: str  # instance id, not the catalog id
    shoe_id: str = CUSTOM_SHOE_ID
    name: str
    miles: float = Field(default=0, ge=0)
    threshold: float = Field(default=350, gt=0)
    image: Optional[str] = None


class CartItem(StorageModel):
    shoe_id: str
    size: float
    quantity: int = Field(default=1, ge=1)

    def matches(self, shoe_id: str, size: float) -> bool:
        return self.shoe_id == shoe_id and self.size == size


class PrivacyAudit(StorageModel):
    last_wipe: Optional[datetime] = None
    storage_used: str = "0KB"


class LocalStorageSchema(StorageModel):
    """Root persisted record."""

    # Keys written by newer versions survive a read/write round trip
    model_config = ConfigDict(extra="allow")

    profile: UserProfile = Field(default_factory=UserProfile)
    gait_profile: GaitProfile = Field(default_factory=GaitProfile)
    rotation: list[ShoeRotationItem] = Field(default_factory=list)
    cart: list[CartItem] = Field(default_factory=list)
    rsvped_events: list[str] = Field(default_factory=list)
    privacy_audit: PrivacyAudit = Field(default_factory=PrivacyAudit)
    is_authenticated: bool = False


def default_record() -> LocalStorageSchema:
    """Build a brand new zero-value record."""
    return LocalStorageSchema()


def record_field_aliases() -> dict[str, str]:
    """Map persisted top-level keys to attribute names."""
    return {
        (field.alias or name): name
        for name, field in LocalStorageSchema.model_fields.items()
    }
