"""
Error messages and exception types for cart operations.

Messages are kept as constants so log lines and raised errors say the same thing.
"""

# Item errors
ERROR_EMPTY_IDENTIFIER = "Item identifier must be a non-empty string"
ERROR_NOT_A_CART_ITEM = "Cart items must be CartItem instances"
ERROR_NEGATIVE_PRICE = "Item price must be non-negative"
ERROR_INVALID_PRICE = "Item price must be a finite number"

# Formatter errors
ERROR_TEMPLATE_PLACEHOLDER = "Summary template must contain {total} and {count}"


class CartError(ValueError):
    """Base error for rejected cart input."""


class InvalidItemError(CartError):
    """Item identifier is missing, or a seeded item is not a CartItem."""


class InvalidPriceError(CartError):
    """Item price is negative, non-finite, or not a number."""


class InvalidTemplateError(CartError):
    """Summary template lacks a required placeholder."""


__all__ = [
    "ERROR_EMPTY_IDENTIFIER",
    "ERROR_NOT_A_CART_ITEM",
    "ERROR_NEGATIVE_PRICE",
    "ERROR_INVALID_PRICE",
    "ERROR_TEMPLATE_PLACEHOLDER",
    "CartError",
    "InvalidItemError",
    "InvalidPriceError",
    "InvalidTemplateError",
]
