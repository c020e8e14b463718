"""
Data models for the pharmacy inventory and sales tracker.
"""

from .medicine import Medicine, MedicineData, MedicineStatus
from .metrics import DashboardMetrics
from .sale import Sale, SaleRequest

__all__ = [
    "Medicine",
    "MedicineData",
    "MedicineStatus",
    "Sale",
    "SaleRequest",
    "DashboardMetrics",
]
