"""
Pydantic models for point-of-sale transactions.

This module defines the sale request collected at the counter and the
immutable sale record kept in the append-only history.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class SaleRequest(BaseModel):
    """
    A proposed sale as entered by the operator.

    Quantity is not constrained here; whether it can be
    sold is decided against the catalog by the transaction layer.
    """

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True, extra="forbid")

    customer_name: str
    medicine_id: str
    quantity: int


class Sale(BaseModel):
    """
    Record of one completed transaction.

    Name and price are copied from the catalog when the sale is made, so
    later edits or deletion of the medicine do not change the record.
    """

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True, extra="forbid")

    id: str
    customer_name: str
    medicine_id: str
    medicine_name: str
    price: Decimal
    quantity: int
    total_amount: Decimal
    date_time: datetime

    @field_validator("quantity")
    @classmethod
    def validate_quantity(cls, v):
        """Validate that a sale moved at least one unit."""
        if v <= 0:
            raise ValueError("Sold quantity must be positive")
        return v

    @model_validator(mode="after")
    def validate_total_amount(self):
        """Validate that the total matches price times quantity."""
        if self.total_amount != self.price * self.quantity:
            raise ValueError("Total amount must equal price times quantity")
        return self
