"""
Cart line items keyed by (shoe_id, size), plus checkout totals.

Subscribers are notified with the new item count after every mutation so a
cart badge can stay current without polling.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from pydantic import ValidationError

from stridefit.core.config import settings
from stridefit.data.inventory import INVENTORY, get_shoe
from stridefit.schemas.shoe import Shoe
from stridefit.schemas.storage import CartItem
from stridefit.services.persistent_store import PersistentStore
from stridefit.services.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)

CartListener = Callable[[int], None]


class DeliveryMethod(str, enum.Enum):
    PICKUP = "pickup"
    DELIVERY = "delivery"


@dataclass
class OrderConfirmation:
    items: list[CartItem]
    subtotal: float
    delivery_method: DeliveryMethod
    delivery_fee: float
    total: float
    item_count: int = 0
    unresolved: list[str] = field(default_factory=list)


def unit_price(catalog: Iterable[Shoe], shoe_id: str) -> float:
    """Catalog price of a shoe, or 0.0 when the id no longer resolves."""
    shoe = get_shoe(shoe_id, catalog)
    return shoe.price if shoe else 0.0


class CartLedger:
    """Add/remove/merge of cart lines with observer notification."""

    def __init__(self, repository: ProfileRepository, store: Optional[PersistentStore] = None):
        self.repository = repository
        self._listeners: list[CartListener] = []
        if store is not None:
            # A wipe empties the cart, so the badge must drop to zero too
            store.add_wipe_listener(self._notify)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_item(self, shoe_id: str, size: float, qty: int = 1) -> list[CartItem]:
        if qty is None or qty < 1:
            logger.info(f"Ignoring cart add of {shoe_id} size {size} with quantity {qty}")
            return self.items()

        try:
            item = CartItem(shoe_id=shoe_id, size=size, quantity=qty)
        except ValidationError as e:
            logger.warning(f"Rejected cart add of {shoe_id} size {size} x{qty}: {e}")
            return self.items()

        cart = self.repository.add_to_cart(item)
        self._notify()
        return cart

    def remove_item(self, shoe_id: str, size: float) -> list[CartItem]:
        """Remove the whole line for (shoe_id, size), regardless of quantity."""
        cart = self.repository.remove_from_cart(shoe_id, size)
        self._notify()
        return cart

    def clear(self) -> list[CartItem]:
        cart = self.repository.clear_cart()
        self._notify()
        return cart

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def items(self) -> list[CartItem]:
        return self.repository.get_cart()

    def item_count(self) -> int:
        return sum(item.quantity for item in self.items())

    def subtotal(self, catalog: Optional[Iterable[Shoe]] = None) -> float:
        catalog = tuple(INVENTORY if catalog is None else catalog)
        return round(sum(unit_price(catalog, i.shoe_id) * i.quantity for i in self.items()), 2)

    def delivery_fee(self, method: DeliveryMethod = DeliveryMethod.PICKUP) -> float:
        return settings.DELIVERY_FEE if DeliveryMethod(method) == DeliveryMethod.DELIVERY else 0.0

    def total(
        self,
        catalog: Optional[Iterable[Shoe]] = None,
        method: DeliveryMethod = DeliveryMethod.PICKUP,
    ) -> float:
        return round(self.subtotal(catalog) + self.delivery_fee(method), 2)

    def checkout(
        self,
        catalog: Optional[Iterable[Shoe]] = None,
        method: DeliveryMethod = DeliveryMethod.PICKUP,
    ) -> Optional[OrderConfirmation]:
        """Price the cart, then empty it. An empty cart places no order."""
        catalog = tuple(INVENTORY if catalog is None else catalog)
        items = self.items()
        if not items:
            logger.info("Checkout requested with an empty cart")
            return None

        method = DeliveryMethod(method)
        confirmation = OrderConfirmation(
            items=items,
            subtotal=self.subtotal(catalog),
            delivery_method=method,
            delivery_fee=self.delivery_fee(method),
            total=self.total(catalog, method),
            item_count=sum(i.quantity for i in items),
            unresolved=[i.shoe_id for i in items if get_shoe(i.shoe_id, catalog) is None],
        )
        self.clear()
        logger.info(f"Order placed: {confirmation.item_count} items, ${confirmation.total:.2f} ({method.value})")
        return confirmation

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a cart count listener; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        count = self.item_count()
        for listener in list(self._listeners):
            try:
                listener(count)
            except Exception as e:
                logger.error(f"Cart listener {listener!r} failed: {e}")
