"""shopcart: priced cart items, their total, and a formatted summary."""
from shopcart.app import App
from shopcart.cart import Cart, CartItem, SummaryFormatter
from shopcart.models import CartSummary

__version__ = "1.0.0"

__all__ = [
    "App",
    "Cart",
    "CartItem",
    "CartSummary",
    "SummaryFormatter",
]
