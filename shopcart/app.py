"""
Application facade.

Composes a Cart and a SummaryFormatter behind a single ``summary()`` query.
Both collaborators are injected so tests can substitute them.
"""
from typing import Optional, Sequence, Tuple

from shopcart.cart import Cart, SummaryFormatter
from shopcart.logging import get_logger
from shopcart.models import CartSummary

logger = get_logger(__name__)


class App:
    """Facade over one cart, one formatter and a fixed list of item names."""

    def __init__(
        self,
        cart: Optional[Cart] = None,
        formatter: Optional[SummaryFormatter] = None,
        items: Sequence[str] = (),
    ):
        self.cart = cart if cart is not None else Cart()
        self.formatter = formatter if formatter is not None else SummaryFormatter()
        # Display names are counted, never reconciled with the priced cart
        self._items: Tuple[str, ...] = tuple(items)

    @property
    def items(self) -> Tuple[str, ...]:
        return self._items

    def summary(self) -> str:
        """Render the cart total and the number of item names."""
        text = self.formatter.format(self.cart.total(), len(self._items))
        logger.debug(f"Summary computed: {text}")
        return text

    def summary_data(self) -> CartSummary:
        """Same values as ``summary()``, as a model."""
        total = self.cart.total()
        count = len(self._items)
        return CartSummary(
            total=total,
            item_count=count,
            text=self.formatter.format(total, count),
        )
