"""
Seeded store inventory.

The catalog is a constant collaborator: it is built once at import time and
shared read-only. Ids are stable foreign keys for carts and rotations, so
never renumber an existing entry.
"""

from typing import Iterable, Optional

from stridefit.schemas.shoe import Shoe, Gender, Category, SupportType, CushionLevel


INVENTORY: tuple[Shoe, ...] = (
    Shoe(
        id="brooks-ghost-16",
        name="Ghost 16",
        brand="Brooks",
        price=140.00,
        category=Category.ROAD,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.BALANCED,
        drop=12,
        weight=9.8,
        gender=Gender.UNISEX,
        is_staff_pick=True,
        description="Smooth, dependable daily trainer.",
    ),
    Shoe(
        id="brooks-adrenaline-gts-24",
        name="Adrenaline GTS 24",
        brand="Brooks",
        price=140.00,
        category=Category.ROAD,
        support=SupportType.STABILITY,
        cushion=CushionLevel.BALANCED,
        drop=12,
        weight=10.1,
        gender=Gender.UNISEX,
        description="GuideRails support for runners who roll inward.",
    ),
    Shoe(
        id="brooks-ghost-16-4e",
        name="Ghost 16 Extra Wide",
        brand="Brooks",
        price=140.00,
        category=Category.ROAD,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.BALANCED,
        drop=12,
        weight=10.0,
        gender=Gender.MEN,
        description="The Ghost on a 4E last.",
    ),
    Shoe(
        id="hoka-clifton-9",
        name="Clifton 9",
        brand="Hoka",
        price=145.00,
        category=Category.ROAD,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.PLUSH,
        drop=5,
        weight=8.7,
        gender=Gender.UNISEX,
        is_staff_pick=True,
        description="Light and plush for easy miles.",
    ),
    Shoe(
        id="hoka-speedgoat-6",
        name="Speedgoat 6",
        brand="Hoka",
        price=155.00,
        category=Category.TRAIL,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.PLUSH,
        drop=4,
        weight=9.8,
        gender=Gender.UNISEX,
        description="Cushioned grip for technical trail.",
    ),
    Shoe(
        id="saucony-guide-17",
        name="Guide 17",
        brand="Saucony",
        price=140.00,
        category=Category.ROAD,
        support=SupportType.STABILITY,
        cushion=CushionLevel.BALANCED,
        drop=6,
        weight=9.4,
        gender=Gender.WOMEN,
        description="Centered path stability with a soft ride.",
    ),
    Shoe(
        id="saucony-endorphin-speed-4",
        name="Endorphin Speed 4",
        brand="Saucony",
        price=170.00,
        category=Category.ROAD,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.FIRM,
        drop=8,
        weight=8.2,
        gender=Gender.UNISEX,
        is_staff_pick=True,
        description="Nylon plated tempo trainer.",
    ),
    Shoe(
        id="saucony-peregrine-14",
        name="Peregrine 14",
        brand="Saucony",
        price=140.00,
        category=Category.TRAIL,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.FIRM,
        drop=4,
        weight=9.6,
        gender=Gender.MEN,
        description="Nimble trail shoe with aggressive lugs.",
    ),
    Shoe(
        id="altra-lone-peak-8",
        name="Lone Peak 8",
        brand="Altra",
        price=140.00,
        category=Category.TRAIL,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.BALANCED,
        drop=0,
        weight=10.6,
        gender=Gender.UNISEX,
        description="Zero drop with a foot-shaped toe box.",
    ),
    Shoe(
        id="altra-via-olympus-2",
        name="Via Olympus 2",
        brand="Altra",
        price=170.00,
        category=Category.ROAD,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.PLUSH,
        drop=0,
        weight=10.8,
        gender=Gender.WOMEN,
        description="Max cushion, zero drop, wide toe box.",
    ),
    Shoe(
        id="new-balance-860v14",
        name="860v14",
        brand="New Balance",
        price=140.00,
        category=Category.ROAD,
        support=SupportType.STABILITY,
        cushion=CushionLevel.BALANCED,
        drop=10,
        weight=10.5,
        gender=Gender.MEN,
        description="Medial post stability for high mileage.",
    ),
    Shoe(
        id="new-balance-hierro-v8",
        name="Fresh Foam X Hierro v8",
        brand="New Balance",
        price=150.00,
        category=Category.HYBRID,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.PLUSH,
        drop=8,
        weight=11.2,
        gender=Gender.UNISEX,
        description="Road-to-trail cruiser with a Vibram outsole.",
    ),
    Shoe(
        id="nike-zoom-rival-xc-6",
        name="Zoom Rival XC 6",
        brand="Nike",
        price=75.00,
        category=Category.TRACK,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.FIRM,
        drop=6,
        weight=6.3,
        gender=Gender.UNISEX,
        description="Cross country and track spike.",
    ),
    Shoe(
        id="asics-gel-kayano-31",
        name="Gel-Kayano 31",
        brand="Asics",
        price=165.00,
        category=Category.ROAD,
        support=SupportType.STABILITY,
        cushion=CushionLevel.PLUSH,
        drop=10,
        weight=10.7,
        gender=Gender.UNISEX,
        is_staff_pick=True,
        description="Plush long-run stability.",
    ),
    Shoe(
        id="on-cloudsurfer-trail",
        name="Cloudsurfer Trail",
        brand="On",
        price=160.00,
        category=Category.TRAIL,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.BALANCED,
        drop=7,
        weight=9.2,
        gender=Gender.WOMEN,
        description="Smooth rolling trail runner.",
    ),
    Shoe(
        id="mizuno-wave-rider-28",
        name="Wave Rider 28",
        brand="Mizuno",
        price=125.00,
        category=Category.ROAD,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.BALANCED,
        drop=12,
        weight=9.6,
        gender=Gender.UNISEX,
        description="Value daily trainer with a Wave plate.",
    ),
)


def get_shoe(shoe_id: str, catalog: Optional[Iterable[Shoe]] = None) -> Optional[Shoe]:
    """Resolve a catalog id, returning None when it no longer exists."""
    for shoe in (INVENTORY if catalog is None else catalog):
        if shoe.id == shoe_id:
            return shoe
    return None


def list_brands(catalog: Optional[Iterable[Shoe]] = None) -> list[str]:
    """Brands present in the catalog, in first-seen order."""
    brands: list[str] = []
    for shoe in (INVENTORY if catalog is None else catalog):
        if shoe.brand not in brands:
            brands.append(shoe.brand)
    return brands
