"""
Shoe rotation mileage tracking.

Each tracked pair unlocks a store discount once its logged miles reach its
threshold. Progress and the unlocked state are derived on every read and
never stored on the rotation item.
"""

import logging
import math
import uuid
from dataclasses import dataclass
from typing import Iterable, Optional

from stridefit.core.config import settings
from stridefit.data.inventory import INVENTORY, get_shoe
from stridefit.schemas.shoe import Shoe
from stridefit.schemas.storage import CUSTOM_SHOE_ID, ShoeRotationItem
from stridefit.services.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass
class RotationStatus:
    item: ShoeRotationItem
    progress: float  # 0.0 - 1.0
    miles_remaining: float
    discount_unlocked: bool


def rotation_progress(item: ShoeRotationItem) -> float:
    return min(item.miles / item.threshold, 1.0)


def discount_unlocked(item: ShoeRotationItem) -> bool:
    return rotation_progress(item) >= 1.0


class RotationTracker:
    """Mileage accumulation and discount threshold detection."""

    def __init__(self, repository: ProfileRepository, catalog: Optional[Iterable[Shoe]] = None):
        self.repository = repository
        self.catalog = tuple(INVENTORY if catalog is None else catalog)

    def add_shoe(
        self,
        ref: str,
        name: Optional[str] = None,
        image: Optional[str] = None,
        threshold: Optional[float] = None,
    ) -> Optional[ShoeRotationItem]:
        """Start tracking a catalog shoe, or a custom one when ref is 'custom'."""
        if not self.repository.is_member():
            logger.info("Rotation tracking requires a local profile, ignoring add")
            return None

        threshold = threshold if threshold is not None else settings.DEFAULT_SHOE_THRESHOLD
        if threshold <= 0:
            logger.warning(f"Rejected rotation threshold {threshold}")
            return None

        if ref == CUSTOM_SHOE_ID:
            if not name or not name.strip():
                logger.warning("Custom rotation shoe needs a name, ignoring add")
                return None
            shoe_id, display_name = CUSTOM_SHOE_ID, name.strip()
        else:
            shoe = get_shoe(ref, self.catalog)
            if shoe is None:
                # Unknown catalog ids are tracked as custom entries
                logger.info(f"Catalog shoe {ref} not found, tracking as custom")
                shoe_id, display_name = CUSTOM_SHOE_ID, (name or ref)
            else:
                shoe_id, display_name = shoe.id, (name or shoe.full_name)
                image = image or shoe.image

        item = ShoeRotationItem(
            id=uuid.uuid4().hex,
            shoe_id=shoe_id,
            name=display_name,
            miles=0,
            threshold=threshold,
            image=image,
        )
        self.repository.add_to_rotation(item)
        logger.info(f"Added {display_name} to rotation as {item.id}")
        return item

    def log_miles(self, instance_id: str, delta: float) -> Optional[ShoeRotationItem]:
        """Add a run to a rotation shoe. Non-positive distances are ignored."""
        if not self.repository.is_member():
            logger.info("Rotation tracking requires a local profile, ignoring mileage")
            return None
        if delta is None or math.isnan(delta) or delta <= 0:
            logger.info(f"Ignoring non-positive mileage {delta} for {instance_id}")
            return None
        return self.repository.log_rotation_miles(instance_id, delta)

    def remove_shoe(self, instance_id: str) -> list[ShoeRotationItem]:
        """Stop tracking a shoe. Historical miles_run is not retracted."""
        return self.repository.remove_rotation_shoe(instance_id)

    def items(self) -> list[ShoeRotationItem]:
        return self.repository.get_rotation()

    def statuses(self) -> list[RotationStatus]:
        return [
            RotationStatus(
                item=item,
                progress=rotation_progress(item),
                miles_remaining=max(item.threshold - item.miles, 0.0),
                discount_unlocked=discount_unlocked(item),
            )
            for item in self.items()
        ]

    def unlocked(self) -> list[ShoeRotationItem]:
        return [item for item in self.items() if discount_unlocked(item)]
