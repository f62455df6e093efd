"""
Catalog schema for the store inventory.

The inventory is seeded at build time and never mutated at runtime, so
every Shoe is a frozen model. Shoe ids are foreign keys for cart lines and
rotation items and must stay stable for the lifetime of the catalog.
"""

import enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ============================================================================
# ENUMS
# ============================================================================

class Gender(str, enum.Enum):
    MEN = "Men"
    WOMEN = "Women"
    UNISEX = "Unisex"


class Category(str, enum.Enum):
    ROAD = "Road"
    TRAIL = "Trail"
    TRACK = "Track"
    HYBRID = "Hybrid"


class SupportType(str, enum.Enum):
    NEUTRAL = "Neutral"
    STABILITY = "Stability"


class CushionLevel(str, enum.Enum):
    FIRM = "Firm"
    BALANCED = "Balanced"
    PLUSH = "Plush"


# ============================================================================
# CATALOG ITEM
# ============================================================================

class Shoe(BaseModel):
    """A single product of the store inventory."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(min_length=1)
    name: str
    brand: str
    price: float = Field(gt=0)
    category: Category
    support: SupportType
    cushion: CushionLevel
    drop: float = Field(ge=0)  # mm
    weight: float = Field(gt=0)  # oz
    gender: Gender
    is_staff_pick: bool = False

    # Display only
    description: Optional[str] = None
    image: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.brand} {self.name}"
