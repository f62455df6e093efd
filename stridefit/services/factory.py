from dataclasses import dataclass
from typing import Iterable, Optional

from stridefit.data.inventory import INVENTORY
from stridefit.schemas.shoe import Shoe
from stridefit.services.account import AccountService
from stridefit.services.cart_ledger import CartLedger
from stridefit.services.gait_quiz import GaitQuiz
from stridefit.services.intents import IntentService, Launcher
from stridefit.services.inventory_filter import InventoryFilterEngine
from stridefit.services.matching import MatchScorer
from stridefit.services.persistent_store import PersistentStore
from stridefit.services.profile_repository import ProfileRepository
from stridefit.services.rotation_tracker import RotationTracker
from stridefit.services.storage_medium import StorageMedium, get_storage_medium


@dataclass
class Services:
    store: PersistentStore
    repository: ProfileRepository
    account: AccountService
    quiz: GaitQuiz
    scorer: MatchScorer
    filters: InventoryFilterEngine
    rotation: RotationTracker
    cart: CartLedger
    intents: IntentService


def create_services(
    medium: Optional[StorageMedium] = None,
    catalog: Optional[Iterable[Shoe]] = None,
    launcher: Optional[Launcher] = None,
) -> Services:
    """Wire every service around one store so they share a single record."""
    medium = medium or get_storage_medium("sql")
    catalog = tuple(INVENTORY if catalog is None else catalog)

    store = PersistentStore(medium)
    repository = ProfileRepository(store)
    scorer = MatchScorer()

    return Services(
        store=store,
        repository=repository,
        account=AccountService(repository),
        quiz=GaitQuiz(repository),
        scorer=scorer,
        filters=InventoryFilterEngine(repository, catalog, scorer),
        rotation=RotationTracker(repository, catalog),
        cart=CartLedger(repository, store),
        intents=IntentService(launcher),
    )
