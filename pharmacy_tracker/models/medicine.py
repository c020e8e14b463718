"""
Pydantic models for the medicine catalog.

A medicine record is immutable once built; the store replaces records
instead of mutating them so that every snapshot handed out stays valid.
"""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class MedicineStatus(str, Enum):
    """Human-readable stock status of a catalog entry."""

    EXPIRED = "Expired"
    LOW_STOCK = "Low Stock"
    IN_STOCK = "In Stock"


class MedicineData(BaseModel):
    """
    Editable fields of a catalog entry.

    This is the payload of the add and edit operations; the identifier is
    owned by the store and never part of it.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        frozen=True,
        extra="forbid",
    )

    name: str
    supplier: str
    category: str
    price: Decimal
    quantity: int
    expiry_date: date
    plu: str

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        """Validate that price is not negative."""
        if v < 0:
            raise ValueError("Price cannot be negative")
        return v

    @field_validator("quantity")
    @classmethod
    def validate_quantity(cls, v):
        """Validate that stock is not negative."""
        if v < 0:
            raise ValueError("Quantity cannot be negative")
        return v

    def stock_value(self) -> Decimal:
        """Value of the stock on hand at the current price."""
        return self.price * self.quantity


class Medicine(MedicineData):
    """A catalog entry with its store-assigned identifier."""

    id: str

    @classmethod
    def from_data(cls, medicine_id: str, data: MedicineData) -> "Medicine":
        """Attach an identifier to an editable payload."""
        return cls(id=medicine_id, **data.model_dump())

    def to_data(self) -> MedicineData:
        """Strip the identifier, e.g. to prefill an edit form."""
        return MedicineData(**self.model_dump(exclude={"id"}))

    def with_quantity(self, quantity: int) -> "Medicine":
        """Return a copy of this record holding a different stock count."""
        return Medicine(**{**self.model_dump(), "quantity": quantity})
