"""
Chart series for the dashboard built with pandas.

Each function returns a DataFrame ready to be plotted or tabulated. Money
columns are floats here since they only drive chart rendering; exact totals
come from :mod:`pharmacy_tracker.metrics`.
"""

from datetime import datetime
from typing import Iterable, Optional

import pandas as pd

from pharmacy_tracker.models import Medicine, Sale
from pharmacy_tracker.rules import (
    NEAR_EXPIRY_DAYS,
    days_until_expiry,
    is_near_expiry,
    resolve_now,
)

SALES_COLUMNS = ["day", "total", "percent"]
NEAR_EXPIRY_COLUMNS = ["id", "name", "quantity", "expiry_date", "days_until_expiry"]
CATEGORY_COLUMNS = ["category", "value", "percent"]


def _percent_of_max(values: pd.Series) -> pd.Series:
    """Scale values against the series maximum, floored at 1."""
    return values / max(values.max(), 1) * 100


def sales_by_day(sales: Iterable[Sale], days: int = 7) -> pd.DataFrame:
    """
    Daily sales totals for the most recent days that had sales.

    Args:
        sales: Sales history in any order
        days: Number of most recent sale days to keep

    Returns:
        DataFrame with columns ['day', 'total', 'percent'], oldest day first
    """
    records = [
        {"day": sale.date_time.date(), "total": float(sale.total_amount)}
        for sale in sales
    ]
    if not records:
        return pd.DataFrame(columns=SALES_COLUMNS)

    df = pd.DataFrame(records)
    daily = (
        df.groupby("day", as_index=False)["total"]
        .sum()
        .sort_values("day")
        .tail(days)
        .reset_index(drop=True)
    )
    daily["percent"] = _percent_of_max(daily["total"])
    return daily[SALES_COLUMNS]


def near_expiry_products(
    medicines: Iterable[Medicine],
    now: Optional[datetime] = None,
    days_threshold: int = NEAR_EXPIRY_DAYS,
    limit: int = 10,
) -> pd.DataFrame:
    """In-stock medicines expiring within the threshold, soonest first."""
    now = resolve_now(now)
    records = [
        {
            "id": m.id,
            "name": m.name,
            "quantity": m.quantity,
            "expiry_date": m.expiry_date,
            "days_until_expiry": days_until_expiry(m.expiry_date, now),
        }
        for m in medicines
        if m.quantity > 0 and is_near_expiry(m.expiry_date, days_threshold, now)
    ]
    if not records:
        return pd.DataFrame(columns=NEAR_EXPIRY_COLUMNS)

    df = pd.DataFrame(records, columns=NEAR_EXPIRY_COLUMNS)
    return (
        df.sort_values("expiry_date", kind="mergesort")
        .head(limit)
        .reset_index(drop=True)
    )


def inventory_by_category(medicines: Iterable[Medicine], limit: int = 8) -> pd.DataFrame:
    """Stock value per category, largest first."""
    records = [
        {"category": m.category, "value": float(m.stock_value())} for m in medicines
    ]
    if not records:
        return pd.DataFrame(columns=CATEGORY_COLUMNS)

    df = pd.DataFrame(records)
    by_category = (
        df.groupby("category", as_index=False)["value"]
        .sum()
        .sort_values("value", ascending=False, kind="mergesort")
        .head(limit)
        .reset_index(drop=True)
    )
    by_category["percent"] = _percent_of_max(by_category["value"])
    return by_category[CATEGORY_COLUMNS]
