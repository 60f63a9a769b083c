"""Amount parsing utilities."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import re

CENT = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    """Round an amount to whole cents, halves away from zero."""
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def parse_amount(amount_str: str) -> Decimal:
    """Parse a user-entered amount into a positive Decimal.

    The sign of a stored amount comes from its category, so any sign typed
    by the user is dropped. Handles "123.45", "$123.45", "R$ 1,234.56" and
    "-50".

    Args:
        amount_str: Amount string

    Returns:
        Absolute Decimal amount rounded to cents

    Raises:
        ValueError: If amount string cannot be parsed or rounds to zero
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = re.sub(r"R\$|[$€£¥,\s]", "", amount_str.strip())
    try:
        amount = abs(Decimal(cleaned))
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    amount = to_cents(amount)
    if amount == 0:
        raise ValueError("Amount must be greater than zero")
    return amount
