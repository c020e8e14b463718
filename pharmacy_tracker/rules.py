"""
Domain predicates classifying a single catalog entry.

Time-dependent checks take the reference time as an argument. When it is
omitted the current UTC time is read once, at the call boundary.
"""

import math
from datetime import date, datetime, time, timezone
from typing import Optional, Union

from pharmacy_tracker.models.medicine import Medicine, MedicineStatus

LOW_STOCK_THRESHOLD = 5
NEAR_EXPIRY_DAYS = 90

SECONDS_PER_DAY = 24 * 60 * 60

ExpiryValue = Union[date, datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: ExpiryValue) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime.

    A bare date means midnight UTC of that day.
    """
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def resolve_now(now: Optional[datetime]) -> datetime:
    return utc_now() if now is None else _as_utc(now)


def is_expired(expiry_date: ExpiryValue, now: Optional[datetime] = None) -> bool:
    """True if the expiry moment lies strictly before ``now``."""
    return _as_utc(expiry_date) < resolve_now(now)


def is_low_stock(quantity: int, threshold: int = LOW_STOCK_THRESHOLD) -> bool:
    return quantity < threshold


def days_until_expiry(expiry_date: ExpiryValue, now: Optional[datetime] = None) -> int:
    """Whole days until expiry, rounded up. Zero or negative once expired."""
    delta = _as_utc(expiry_date) - resolve_now(now)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def is_near_expiry(
    expiry_date: ExpiryValue,
    days_threshold: int = NEAR_EXPIRY_DAYS,
    now: Optional[datetime] = None,
) -> bool:
    """
    True if the medicine expires within the next ``days_threshold`` days.

    Anything expiring now or in the past is not near expiry; that case is
    covered by :func:`is_expired`.
    """
    days = days_until_expiry(expiry_date, now)
    return 0 < days <= days_threshold


def get_medicine_status(
    medicine: Medicine,
    now: Optional[datetime] = None,
    low_stock_threshold: int = LOW_STOCK_THRESHOLD,
) -> MedicineStatus:
    """Classify a medicine. Expired takes priority over low stock."""
    if is_expired(medicine.expiry_date, now):
        return MedicineStatus.EXPIRED
    if is_low_stock(medicine.quantity, low_stock_threshold):
        return MedicineStatus.LOW_STOCK
    return MedicineStatus.IN_STOCK
