"""Cart package: models and summary formatter."""
from .models import CartItem, Cart
from .formatter import SummaryFormatter

__all__ = [
    "CartItem",
    "Cart",
    "SummaryFormatter",
]
