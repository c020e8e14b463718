"""
Session bootstrap and dashboard assembly.

This is the thin shell between a presentation layer and the store: it
configures logging, builds the store and gathers what the dashboard shows.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

import structlog

from pharmacy_tracker import charts, reports
from pharmacy_tracker.config import Settings, settings as default_settings
from pharmacy_tracker.logging_config import configure_logging
from pharmacy_tracker.models import Medicine
from pharmacy_tracker.queries import expired_medicines, low_stock_medicines
from pharmacy_tracker.rules import LOW_STOCK_THRESHOLD, resolve_now
from pharmacy_tracker.store import InventoryStore

logger = structlog.get_logger(__name__)


def create_store(
    settings: Optional[Settings] = None, medicines: Iterable[Medicine] = ()
) -> InventoryStore:
    """Configure logging and return a store seeded with ``medicines``."""
    settings = settings or default_settings
    configure_logging(settings.log_level, settings.log_format)
    store = InventoryStore(medicines=medicines, settings=settings)
    logger.info(
        "session_started", app_name=settings.app_name, medicines=len(store.medicines)
    )
    return store


def stock_alerts(
    medicines: Iterable[Medicine],
    now: Optional[datetime] = None,
    low_stock_threshold: int = LOW_STOCK_THRESHOLD,
) -> List[str]:
    """Messages shown once when a session opens with problem stock."""
    now = resolve_now(now)
    medicines = list(medicines)
    messages = []

    low_stock = low_stock_medicines(medicines, now, low_stock_threshold)
    if low_stock:
        messages.append(f"{len(low_stock)} item(s) are low in stock")

    expired = expired_medicines(medicines, now)
    if expired:
        messages.append(f"{len(expired)} item(s) have expired")

    return messages


def dashboard(
    store: InventoryStore, now: Optional[datetime] = None, render: bool = False
) -> Dict[str, Any]:
    """
    Collect everything the dashboard view displays.

    Args:
        store: Store to read from
        now: Reference time for expiry-dependent figures, defaults to the
            store's clock
        render: Also render the bar charts to base64 PNG

    Returns:
        Dictionary with metrics, alerts and chart series
    """
    settings = store.settings
    now = resolve_now(store.now() if now is None else now)
    snapshot = store.snapshot()

    daily_sales = reports.sales_by_day(snapshot.sales, settings.sales_chart_days)
    by_category = reports.inventory_by_category(
        snapshot.medicines, settings.category_chart_limit
    )
    result = {
        "metrics": store.metrics(now),
        "alerts": stock_alerts(snapshot.medicines, now, settings.low_stock_threshold),
        "sales_by_day": daily_sales,
        "near_expiry": reports.near_expiry_products(
            snapshot.medicines,
            now,
            settings.near_expiry_days,
            settings.near_expiry_limit,
        ),
        "inventory_by_category": by_category,
    }

    if render:
        result["sales_chart"] = charts.render_sales_chart(
            daily_sales, currency_symbol=settings.currency_symbol
        )
        result["category_chart"] = charts.render_category_chart(
            by_category, currency_symbol=settings.currency_symbol
        )

    return result
