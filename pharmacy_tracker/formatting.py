"""Display helpers for money, timestamps and record identifiers."""

import uuid
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

CENTS = Decimal("0.01")

# English month names, independent of the process locale
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_currency(amount: Union[Decimal, float, int], symbol: str = "$") -> str:
    """Format an amount with two decimals, e.g. ``$12.50``."""
    value = Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"{symbol}{value}"


def format_date_time(value: Union[datetime, str]) -> str:
    """Short en-US form, e.g. ``Oct 6, 2026, 02:05 PM``."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    month = MONTHS[value.month - 1]
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{month} {value.day}, {value.year}, {hour:02d}:{value.minute:02d} {meridiem}"


def generate_id() -> str:
    return uuid.uuid4().hex
