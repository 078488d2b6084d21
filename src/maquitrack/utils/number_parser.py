"""Number parsing utilities."""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional
import math
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount or reading string into a Decimal.

    Handles various formats:
    - "123.45"
    - "S/ 123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols (soles first, "S/" contains no digits)
    amount_str = re.sub(r"S/\.?|[$€£¥]", "", amount_str)

    # Remove thousands separators
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount


def coerce_decimal(value: Any) -> Optional[Decimal]:
    """Coerce a spreadsheet cell to Decimal, or None when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return Decimal(str(value))
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    try:
        return parse_amount(str(value))
    except ValueError:
        return None


def coerce_int(value: Any) -> Optional[int]:
    """Coerce a spreadsheet cell to int (truncating), or None when it is not a number."""
    number = coerce_decimal(value)
    if number is None:
        return None
    return int(number)
