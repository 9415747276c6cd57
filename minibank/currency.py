"""
Amount Handling Module

Converts caller supplied values to Decimal with a fixed precision.
NEVER uses float for stored balances.
"""

from decimal import (
    Decimal, Inexact, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext
)
from typing import Union

from .exceptions import InvalidAmountError

# Set global decimal context for financial precision
getcontext().prec = 28

AmountLike = Union[Decimal, int, float, str]

DEFAULT_PRECISION = 2


def quantize(amount: Decimal, precision: int = DEFAULT_PRECISION) -> Decimal:
    """
    Round an amount to the given number of decimal places

    Raises:
        InvalidAmountError: If the result needs more digits than the context holds
    """
    try:
        return amount.quantize(Decimal('0.1') ** precision, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmountError(
            f"Amount exceeds supported precision: {amount}"
        ) from None


def to_amount(value: AmountLike, precision: int = DEFAULT_PRECISION,
              exact: bool = False) -> Decimal:
    """
    Convert a numeric value to a rounded Decimal amount.

    Floats go through str() so that 100.1 becomes Decimal('100.10')
    rather than its binary expansion.

    Args:
        value: Decimal, int, float or numeric string
        precision: Decimal places to keep
        exact: Reject values with more decimal places than precision
            instead of rounding them

    Returns:
        Rounded Decimal

    Raises:
        InvalidAmountError: If the value is not a finite number, is too large,
            or (with exact) would change when rounded
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InvalidAmountError(f"Not a monetary amount: {value!r}") from None

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {value!r}")

    rounded = quantize(amount, precision)
    if exact and rounded != amount:
        raise InvalidAmountError(
            f"Amount {value} has more decimal places than the configured precision ({precision})"
        )
    return rounded


def sum_amounts(*amounts: Decimal, precision: int = DEFAULT_PRECISION) -> Decimal:
    """
    Add amounts without silent rounding

    Raises:
        InvalidAmountError: If the exact total does not fit the decimal context
    """
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            total = sum(amounts, Decimal('0'))
        except Inexact:
            raise InvalidAmountError("Amount exceeds supported precision") from None
    return quantize(total, precision)


def format_amount(amount: Decimal, precision: int = DEFAULT_PRECISION) -> str:
    """Format for display"""
    return f"{amount:,.{precision}f}"
