"""
Exceptions raised by the domain layer and the inventory store.
"""

from typing import Optional


class SaleError(Exception):
    """Base exception for a rejected sale or catalog operation"""

    def __init__(self, message: str, medicine_id: Optional[str] = None):
        super().__init__(message)
        self.medicine_id = medicine_id


class MedicineNotFound(SaleError):
    """The referenced medicine id is not in the catalog"""

    def __init__(self, medicine_id: str):
        super().__init__(f"Medicine not found: {medicine_id}", medicine_id)


class InsufficientStock(SaleError):
    """Requested quantity exceeds the stock on hand"""

    def __init__(self, medicine_id: str, requested: int, available: int):
        super().__init__(
            f"Insufficient stock. Available: {available}, requested: {requested}",
            medicine_id,
        )
        self.requested = requested
        self.available = available


class InvalidQuantity(SaleError):
    """Requested quantity is zero or negative"""

    def __init__(self, medicine_id: str, requested: int):
        super().__init__(f"Quantity must be positive, got {requested}", medicine_id)
        self.requested = requested


class ExpiredMedicine(SaleError):
    """The medicine is past its expiry date and cannot be sold"""

    def __init__(self, medicine_id: str):
        super().__init__(f"Medicine has expired: {medicine_id}", medicine_id)
