from stridefit.services.storage_medium import (
    StorageMedium, MemoryStorageMedium, SqlStorageMedium, StorageUnavailableError, get_storage_medium
)
from stridefit.services.persistent_store import PersistentStore
from stridefit.services.profile_repository import ProfileRepository
from stridefit.services.rotation_tracker import RotationTracker
from stridefit.services.cart_ledger import CartLedger, DeliveryMethod, OrderConfirmation
from stridefit.services.matching import MatchScorer, MatchResult, MATCH_THRESHOLD
from stridefit.services.inventory_filter import InventoryFilterEngine, FilterState, filter_inventory
from stridefit.services.gait_quiz import GaitQuiz, GAIT_QUESTIONS
from stridefit.services.account import AccountService
from stridefit.services.intents import IntentService
from stridefit.services.factory import Services, create_services

__all__ = [
    "StorageMedium", "MemoryStorageMedium", "SqlStorageMedium", "StorageUnavailableError",
    "get_storage_medium", "PersistentStore", "ProfileRepository", "RotationTracker",
    "CartLedger", "DeliveryMethod", "OrderConfirmation", "MatchScorer", "MatchResult",
    "MATCH_THRESHOLD", "InventoryFilterEngine", "FilterState", "filter_inventory",
    "GaitQuiz", "GAIT_QUESTIONS", "AccountService", "IntentService", "Services",
    "create_services",
]
