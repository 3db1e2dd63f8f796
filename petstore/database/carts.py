"""Cart storage for the pet store"""

import uuid
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Optional

from ..models.cart import Cart, CartItem

logger = logging.getLogger(__name__)

CartListener = Callable[["CartStore"], None]


class CartStore:
    """
    In-memory shopping cart keyed by product id.

    Items keep insertion order. Aggregates are recomputed on every read, and
    subscribers are notified after each mutation so they can pull fresh state.
    """

    def __init__(self):
        self._items: dict[str, CartItem] = {}
        self._listeners: list[CartListener] = []

    @property
    def items(self) -> list[CartItem]:
        return list(self._items.values())

    def get_item(self, product_id: str) -> Optional[CartItem]:
        return self._items.get(product_id)

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a change listener; returns a function that unregisters it"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def add_item(self, item: CartItem) -> None:
        """
        Add one unit of a product.

        A product already in the cart only gets its quantity bumped; the price
        and discount captured on the first add are kept.
        """
        existing_item = self._items.get(item.id)

        if existing_item:
            existing_item.quantity += 1
        else:
            self._items[item.id] = item.model_copy(update={"quantity": 1})

        self._notify()

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set an item's quantity, removing it when quantity drops to zero"""
        item = self._items.get(product_id)
        if not item:
            return

        if quantity <= 0:
            del self._items[product_id]
        else:
            item.quantity = quantity

        self._notify()

    def remove_item(self, product_id: str) -> None:
        if product_id not in self._items:
            return

        del self._items[product_id]
        self._notify()

    def clear_cart(self) -> None:
        self._items.clear()
        self._notify()

    def get_subtotal(self) -> Decimal:
        """Sum of pre-discount prices"""
        return sum(
            (item.original_price * item.quantity for item in self._items.values()),
            Decimal("0"),
        )

    def get_total_discount(self) -> Decimal:
        return sum(
            (
                (item.original_price - item.price) * item.quantity
                for item in self._items.values()
            ),
            Decimal("0"),
        )

    def get_total(self) -> Decimal:
        return self.get_subtotal() - self.get_total_discount()

    def get_total_items(self) -> int:
        return sum(item.quantity for item in self._items.values())


class CartDatabase:
    """In-memory storage of session carts"""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Drop every cart"""
        self.carts: dict[str, CartStore] = {}
        self.created_at: dict[str, datetime] = {}
        self.updated_at: dict[str, datetime] = {}

    def create_cart(self) -> str:
        """Create a new cart and return its ID"""
        cart_id = str(uuid.uuid4())
        store = CartStore()
        store.subscribe(lambda s: self._touch(cart_id, s))

        now = datetime.now(timezone.utc)
        self.carts[cart_id] = store
        self.created_at[cart_id] = now
        self.updated_at[cart_id] = now
        logger.info(f"Cart {cart_id} created")
        return cart_id

    def get_cart(self, cart_id: str) -> Optional[CartStore]:
        """Get a cart by ID"""
        return self.carts.get(cart_id)

    def delete_cart(self, cart_id: str) -> bool:
        """Delete a cart"""
        if cart_id in self.carts:
            del self.carts[cart_id]
            self.created_at.pop(cart_id, None)
            self.updated_at.pop(cart_id, None)
            return True
        return False

    def cleanup_old_carts(self, max_age_hours: int = 24) -> int:
        """Remove carts not modified within max_age_hours"""
        now = datetime.now(timezone.utc)
        old_carts = [
            cid for cid, updated_at in self.updated_at.items()
            if (now - updated_at).total_seconds() > max_age_hours * 3600
        ]
        for cid in old_carts:
            self.delete_cart(cid)

        if old_carts:
            logger.info(f"Removed {len(old_carts)} expired cart(s)")
        return len(old_carts)

    def snapshot(self, cart_id: str) -> Optional[Cart]:
        """Build the API view of a cart"""
        store = self.get_cart(cart_id)
        if store is None:
            return None

        return Cart(
            cart_id=cart_id,
            items=[item.model_copy() for item in store.items],
            total_items=store.get_total_items(),
            subtotal=store.get_subtotal(),
            total_discount=store.get_total_discount(),
            total=store.get_total(),
            created_at=self.created_at[cart_id],
            updated_at=self.updated_at[cart_id],
        )

    def _touch(self, cart_id: str, store: CartStore) -> None:
        if cart_id not in self.carts:
            return

        self.updated_at[cart_id] = datetime.now(timezone.utc)
        logger.debug(
            f"Cart {cart_id} changed: {store.get_total_items()} items, "
            f"total ${store.get_total():.2f}"
        )


# Singleton instance
cart_db = CartDatabase()
