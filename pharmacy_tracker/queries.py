"""
Search, sort and filter helpers over catalog and sales snapshots.

These back the inventory and sales tables. They never modify their input
and always return new lists.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from pharmacy_tracker.models import Medicine, Sale
from pharmacy_tracker.rules import (
    LOW_STOCK_THRESHOLD,
    is_expired,
    is_low_stock,
    resolve_now,
)

SORT_FIELDS = ("name", "supplier", "category", "price", "quantity", "expiry_date", "plu")


def search_medicines(medicines: Iterable[Medicine], term: str) -> List[Medicine]:
    """Case-insensitive match on name, supplier, PLU or category."""
    term = term.strip().lower()
    if not term:
        return list(medicines)
    return [
        m
        for m in medicines
        if term in m.name.lower()
        or term in m.supplier.lower()
        or term in m.plu.lower()
        or term in m.category.lower()
    ]


def sort_medicines(
    medicines: Iterable[Medicine], field: str = "name", descending: bool = False
) -> List[Medicine]:
    if field not in SORT_FIELDS:
        raise ValueError(f"Cannot sort by {field!r}; expected one of {SORT_FIELDS}")

    def key(medicine: Medicine):
        value = getattr(medicine, field)
        return value.lower() if isinstance(value, str) else value

    return sorted(medicines, key=key, reverse=descending)


def expired_medicines(
    medicines: Iterable[Medicine], now: Optional[datetime] = None
) -> List[Medicine]:
    now = resolve_now(now)
    return [m for m in medicines if is_expired(m.expiry_date, now)]


def low_stock_medicines(
    medicines: Iterable[Medicine],
    now: Optional[datetime] = None,
    threshold: int = LOW_STOCK_THRESHOLD,
) -> List[Medicine]:
    """Low-stock entries that have not expired."""
    now = resolve_now(now)
    return [
        m
        for m in medicines
        if is_low_stock(m.quantity, threshold) and not is_expired(m.expiry_date, now)
    ]


def available_for_sale(
    medicines: Iterable[Medicine], now: Optional[datetime] = None
) -> List[Medicine]:
    """Entries offered in the sale form: in date and with stock left."""
    now = resolve_now(now)
    return [
        m for m in medicines if not is_expired(m.expiry_date, now) and m.quantity > 0
    ]


def filter_medicines(
    medicines: Iterable[Medicine],
    term: str = "",
    field: str = "name",
    descending: bool = False,
    expired_only: bool = False,
    now: Optional[datetime] = None,
) -> List[Medicine]:
    """Inventory table view: optional expired filter, then search, then sort."""
    rows = list(medicines)
    if expired_only:
        rows = expired_medicines(rows, now)
    rows = search_medicines(rows, term)
    return sort_medicines(rows, field, descending)


def search_sales(sales: Iterable[Sale], term: str) -> List[Sale]:
    """Case-insensitive match on customer or medicine name."""
    term = term.strip().lower()
    if not term:
        return list(sales)
    return [
        s
        for s in sales
        if term in s.customer_name.lower() or term in s.medicine_name.lower()
    ]
