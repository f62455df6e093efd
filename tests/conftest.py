"""
Test Suite Configuration
"""
import pytest

from stridefit.schemas.shoe import Category, CushionLevel, Gender, Shoe, SupportType
from stridefit.services.cart_ledger import CartLedger
from stridefit.services.persistent_store import PersistentStore
from stridefit.services.profile_repository import ProfileRepository
from stridefit.services.rotation_tracker import RotationTracker
from stridefit.services.storage_medium import MemoryStorageMedium


def make_shoe(shoe_id: str, **overrides) -> Shoe:
    """Build a catalog shoe with neutral defaults."""
    fields = dict(
        id=shoe_id,
        name=shoe_id.title(),
        brand="Brooks",
        price=140.0,
        category=Category.ROAD,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.BALANCED,
        drop=8,
        weight=9.5,
        gender=Gender.UNISEX,
    )
    fields.update(overrides)
    return Shoe(**fields)


@pytest.fixture
def shoe_factory():
    return make_shoe


@pytest.fixture
def medium() -> MemoryStorageMedium:
    """Empty in-memory storage medium"""
    return MemoryStorageMedium()


@pytest.fixture
def store(medium) -> PersistentStore:
    return PersistentStore(medium, key="test_record")


@pytest.fixture
def repository(store) -> ProfileRepository:
    return ProfileRepository(store)


@pytest.fixture
def member(repository) -> ProfileRepository:
    """Repository holding a signed-in member profile"""
    repository.update_profile(name="Jane Runner", email="jane@example.com", is_guest=False)
    repository.set_authenticated(True)
    return repository


@pytest.fixture
def guest(repository) -> ProfileRepository:
    """Repository holding a guest profile"""
    repository.update_profile(name="Guest Runner", email="", is_guest=True)
    repository.set_authenticated(True)
    return repository


@pytest.fixture
def shoe_a() -> Shoe:
    return make_shoe(
        "shoe-a",
        category=Category.ROAD,
        support=SupportType.NEUTRAL,
        cushion=CushionLevel.BALANCED,
        drop=8,
    )


@pytest.fixture
def shoe_b() -> Shoe:
    return make_shoe(
        "shoe-b",
        category=Category.TRAIL,
        support=SupportType.STABILITY,
        cushion=CushionLevel.PLUSH,
        drop=4,
    )


@pytest.fixture
def small_catalog(shoe_a, shoe_b) -> tuple[Shoe, ...]:
    """A handful of shoes spanning categories, genders and brands"""
    return (
        shoe_a,
        shoe_b,
        make_shoe("road-men", gender=Gender.MEN, brand="Saucony"),
        make_shoe("road-women", gender=Gender.WOMEN, brand="Hoka", cushion=CushionLevel.PLUSH),
        make_shoe("trail-neutral", category=Category.TRAIL, brand="Altra", drop=0),
        make_shoe("trail-balanced", category=Category.TRAIL, brand="Saucony", drop=8),
        make_shoe("track-spike", category=Category.TRACK, brand="Nike", cushion=CushionLevel.FIRM, drop=4, price=75.0),
    )


@pytest.fixture
def cart(member, store) -> CartLedger:
    return CartLedger(member, store)


@pytest.fixture
def tracker(member, small_catalog) -> RotationTracker:
    return RotationTracker(member, small_catalog)
