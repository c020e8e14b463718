"""Pharmacy inventory and sales tracker."""

from .errors import (
    ExpiredMedicine,
    InsufficientStock,
    InvalidQuantity,
    MedicineNotFound,
    SaleError,
)
from .metrics import calculate_metrics
from .models import (
    DashboardMetrics,
    Medicine,
    MedicineData,
    MedicineStatus,
    Sale,
    SaleRequest,
)
from .rules import get_medicine_status, is_expired, is_low_stock, is_near_expiry
from .store import InventoryStore, StoreSnapshot
from .transactions import SaleDraft, apply_sale, prepare_sale

__all__ = [
    "InventoryStore",
    "StoreSnapshot",
    "Medicine",
    "MedicineData",
    "MedicineStatus",
    "Sale",
    "SaleRequest",
    "DashboardMetrics",
    "SaleDraft",
    "calculate_metrics",
    "prepare_sale",
    "apply_sale",
    "get_medicine_status",
    "is_expired",
    "is_low_stock",
    "is_near_expiry",
    "SaleError",
    "MedicineNotFound",
    "InsufficientStock",
    "InvalidQuantity",
    "ExpiredMedicine",
]

__version__ = "0.1.0"
