"""
Dashboard metrics aggregation.

Reduces the catalog and the sales history into the four summary figures
shown on the dashboard.
"""

from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from pharmacy_tracker.models import DashboardMetrics, Medicine, Sale
from pharmacy_tracker.rules import (
    LOW_STOCK_THRESHOLD,
    resolve_now,
    is_expired,
    is_low_stock,
)


def calculate_metrics(
    medicines: Iterable[Medicine],
    sales: Iterable[Sale],
    now: Optional[datetime] = None,
    low_stock_threshold: int = LOW_STOCK_THRESHOLD,
) -> DashboardMetrics:
    """
    Calculate dashboard metrics.

    Args:
        medicines: Current catalog, in any order
        sales: Sales history, in any order
        now: Reference time for the expiry checks
        low_stock_threshold: Quantity below which stock counts as low

    Returns:
        DashboardMetrics snapshot

    Inventory value counts every medicine regardless of status. An expired
    medicine is only counted as expired, never also as low stock.
    """
    now = resolve_now(now)
    medicines = list(medicines)

    total_inventory_value = sum(
        (medicine.stock_value() for medicine in medicines), Decimal("0")
    )
    total_sales = sum((sale.total_amount for sale in sales), Decimal("0"))

    expired = [m for m in medicines if is_expired(m.expiry_date, now)]
    low_stock = [
        m
        for m in medicines
        if is_low_stock(m.quantity, low_stock_threshold)
        and not is_expired(m.expiry_date, now)
    ]

    return DashboardMetrics(
        total_inventory_value=total_inventory_value,
        total_sales=total_sales,
        low_stock_items=len(low_stock),
        expired_items=len(expired),
    )
