"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout.
"""
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Decimal, ROUND_HALF_UP, InvalidOperation, localcontext
from typing import Iterable, Union

from shopcart.errors import ERROR_INVALID_PRICE, ERROR_NEGATIVE_PRICE, InvalidPriceError

Amount = Union[str, int, float, Decimal]

# Display precision for money (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

ZERO = Decimal("0")


def to_decimal(value: Union[Amount, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return ZERO

    if isinstance(value, Decimal):
        return value

    try:
        # Convert via string to avoid float precision issues
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return ZERO


def parse_price(value: Amount) -> Decimal:
    """
    Convert an item price to Decimal, rejecting anything that is not a
    finite, non-negative number.

    Raises:
        InvalidPriceError: if the value is negative, non-finite or not numeric
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise InvalidPriceError(ERROR_INVALID_PRICE)

    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as e:
        raise InvalidPriceError(ERROR_INVALID_PRICE) from e

    if not price.is_finite():
        raise InvalidPriceError(ERROR_INVALID_PRICE)
    if price < 0:
        raise InvalidPriceError(ERROR_NEGATIVE_PRICE)
    return price


def round_money(value: Amount) -> Decimal:
    """Round a monetary value half-up to two decimal places."""
    decimal_value = to_decimal(value)
    if not decimal_value.is_finite():
        return decimal_value
    with localcontext() as ctx:
        # quantize fails once the result has more digits than the context allows
        ctx.prec = max(ctx.prec, decimal_value.adjusted() + 4)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return decimal_value.quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_amount(value: Amount) -> str:
    """
    Render an amount with exactly two decimal places.

    No grouping separators and no currency symbol: ``15.5`` -> ``"15.50"``,
    ``-3`` -> ``"-3.00"``.
    """
    rounded = round_money(value)
    # -0.00 renders as 0.00
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:.2f}"


def sum_amounts(values: Iterable[Amount]) -> Decimal:
    """Exact sum of monetary values; ``Decimal("0")`` for an empty iterable."""
    with localcontext() as ctx:
        # additions only, so unbounded precision and exponent range keep the sum exact
        ctx.prec = MAX_PREC
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return sum((to_decimal(v) for v in values), ZERO)


__all__ = [
    "Amount",
    "MONEY_PRECISION",
    "ZERO",
    "to_decimal",
    "parse_price",
    "round_money",
    "format_amount",
    "sum_amounts",
]
