"""
Chart rendering for the dashboard.

Renders the bar-chart series from :mod:`pharmacy_tracker.reports` to
base64-encoded PNG images that a page can embed directly.
"""

import base64
import io
from typing import Optional

import matplotlib
matplotlib.use("Agg")  # Use non-interactive backend
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
import structlog  # noqa: E402

from pharmacy_tracker.formatting import format_currency  # noqa: E402

logger = structlog.get_logger(__name__)


def _render_barh(
    labels, values, title: str, color: str, currency_symbol: str
) -> str:
    fig, ax = plt.subplots(figsize=(10, max(2, 0.6 * len(labels) + 1)))
    try:
        bars = ax.barh(labels, values, color=color)
        ax.invert_yaxis()
        ax.set_title(title)
        ax.bar_label(
            bars,
            labels=[format_currency(v, currency_symbol) for v in values],
            padding=3,
        )
        ax.set_xlim(0, max(max(values), 1) * 1.15)
        fig.tight_layout()

        buffer = io.BytesIO()
        fig.savefig(buffer, format="png", dpi=150, bbox_inches="tight")
        buffer.seek(0)
        return base64.b64encode(buffer.read()).decode()
    finally:
        plt.close(fig)


def render_sales_chart(
    daily_sales: pd.DataFrame, title: str = "Sales Over Time", currency_symbol: str = "$"
) -> Optional[str]:
    """Render a ``sales_by_day`` frame. Returns None when there is no data."""
    if daily_sales.empty:
        return None
    labels = [day.strftime("%Y-%m-%d") for day in daily_sales["day"]]
    logger.debug("rendering_sales_chart", points=len(labels))
    return _render_barh(
        labels, daily_sales["total"].tolist(), title, "tab:green", currency_symbol
    )


def render_category_chart(
    by_category: pd.DataFrame,
    title: str = "Inventory Value by Category",
    currency_symbol: str = "$",
) -> Optional[str]:
    """Render an ``inventory_by_category`` frame. Returns None when empty."""
    if by_category.empty:
        return None
    labels = by_category["category"].astype(str).tolist()
    logger.debug("rendering_category_chart", points=len(labels))
    return _render_barh(
        labels, by_category["value"].tolist(), title, "tab:blue", currency_symbol
    )
