"""Dashboard summary figures derived from the catalog and sales history."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class DashboardMetrics(BaseModel):
    """Snapshot of the four dashboard figures. Recomputed, never stored."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    total_inventory_value: Decimal
    total_sales: Decimal
    low_stock_items: int
    expired_items: int
