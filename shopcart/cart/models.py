"""Cart models with Decimal-based pricing."""
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from shopcart.errors import ERROR_EMPTY_IDENTIFIER, ERROR_NOT_A_CART_ITEM, InvalidItemError
from shopcart.logging import get_logger, sanitize_string_for_logging
from shopcart.money import Amount, parse_price, sum_amounts

logger = get_logger(__name__)


@dataclass(frozen=True)
class CartItem:
    """Single priced unit in the cart."""
    identifier: str
    price: Decimal

    def __post_init__(self):
        if not isinstance(self.identifier, str) or not self.identifier.strip():
            raise InvalidItemError(ERROR_EMPTY_IDENTIFIER)
        # Normalize price to Decimal
        object.__setattr__(self, "price", parse_price(self.price))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "identifier": self.identifier,
            "price": str(self.price),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """Create from dictionary."""
        return cls(identifier=data["identifier"], price=data["price"])


class Cart:
    """
    Ordered collection of priced items.

    The cart is the only owner of its item list. Mutations and the snapshot
    taken by ``total()`` share one lock, so a total always reflects a
    consistent set of items.
    """

    def __init__(self, items: Optional[Iterable[CartItem]] = None):
        self._items: list[CartItem] = list(items or [])
        for item in self._items:
            if not isinstance(item, CartItem):
                logger.warning(f"Rejected cart seed of type {type(item).__name__}")
                raise InvalidItemError(ERROR_NOT_A_CART_ITEM)
        self._lock = threading.Lock()

    @property
    def items(self) -> Tuple[CartItem, ...]:
        """Snapshot of the items in insertion order."""
        with self._lock:
            return tuple(self._items)

    @property
    def item_count(self) -> int:
        """Number of priced items in the cart."""
        with self._lock:
            return len(self._items)

    def __len__(self) -> int:
        return self.item_count

    def total(self) -> Decimal:
        """Exact sum of all item prices; ``Decimal("0")`` when empty."""
        return sum_amounts(item.price for item in self.items)

    def add_item(self, identifier: str, price: Amount) -> CartItem:
        """
        Append one priced item.

        Raises:
            InvalidItemError: if the identifier is empty
            InvalidPriceError: if the price is negative or not a number
        """
        try:
            item = CartItem(identifier=identifier, price=price)
        except ValueError as e:
            logger.warning(
                f"Rejected cart item {sanitize_string_for_logging(str(identifier))}: {e}"
            )
            raise

        with self._lock:
            self._items.append(item)
        logger.debug(f"Added {sanitize_string_for_logging(identifier)} at {item.price}")
        return item

    def remove_item(self, identifier: str) -> bool:
        """Remove the first item with ``identifier``. Returns False if none matched."""
        with self._lock:
            for index, item in enumerate(self._items):
                if item.identifier == identifier:
                    del self._items[index]
                    break
            else:
                return False
        logger.debug(f"Removed {sanitize_string_for_logging(identifier)}")
        return True

    def clear(self) -> None:
        """Remove every item."""
        with self._lock:
            self._items.clear()
        logger.debug("Cart cleared")

    def to_dict(self) -> dict:
        """Convert to a plain dictionary with string prices."""
        return {
            "items": [item.to_dict() for item in self.items],
            "total": str(self.total()),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Cart":
        """Create from dictionary. The stored total is recomputed, not trusted."""
        items = [CartItem.from_dict(item) for item in data.get("items", [])]
        return cls(items=items)

    def __repr__(self) -> str:
        return f"Cart(items={len(self)}, total={self.total()})"
