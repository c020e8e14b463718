"""
Sale transaction validation and application.

A proposed sale is checked against a catalog snapshot and turned into a
``SaleDraft``: the finished sale record plus the stock change it implies.
Nothing here mutates state; the store applies a draft as one unit.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Optional, Tuple

from pharmacy_tracker.errors import (
    ExpiredMedicine,
    InsufficientStock,
    InvalidQuantity,
    MedicineNotFound,
)
from pharmacy_tracker.formatting import generate_id
from pharmacy_tracker.models import Medicine, Sale, SaleRequest
from pharmacy_tracker.rules import is_expired, resolve_now


@dataclass(frozen=True)
class SaleDraft:
    """A validated sale and the stock change to apply with it."""
    sale: Sale
    medicine_id: str
    quantity_delta: int


def find_medicine(medicines: Iterable[Medicine], medicine_id: str) -> Medicine:
    for medicine in medicines:
        if medicine.id == medicine_id:
            return medicine
    raise MedicineNotFound(medicine_id)


def prepare_sale(
    request: SaleRequest,
    medicines: Iterable[Medicine],
    now: Optional[datetime] = None,
    id_factory: Callable[[], str] = generate_id,
    allow_expired: bool = False,
) -> SaleDraft:
    """
    Validate a sale request against the catalog.

    Args:
        request: Customer, medicine id and quantity entered at the counter
        medicines: Catalog snapshot to validate against
        now: Timestamp of the sale, also used for the expiry check
        id_factory: Source of the new sale id
        allow_expired: Accept sales of expired medicines

    Returns:
        SaleDraft holding the sale record and a negative quantity delta

    Raises:
        MedicineNotFound: The medicine id is not in the catalog
        InsufficientStock: More units requested than on hand
        InvalidQuantity: Zero or negative quantity requested
        ExpiredMedicine: The medicine is expired and allow_expired is off
    """
    now = resolve_now(now)
    medicine = find_medicine(medicines, request.medicine_id)

    # Selling the last unit is fine; only strictly more than on hand fails
    if request.quantity > medicine.quantity:
        raise InsufficientStock(medicine.id, request.quantity, medicine.quantity)
    if request.quantity <= 0:
        raise InvalidQuantity(medicine.id, request.quantity)
    if not allow_expired and is_expired(medicine.expiry_date, now):
        raise ExpiredMedicine(medicine.id)

    sale = Sale(
        id=id_factory(),
        customer_name=request.customer_name,
        medicine_id=medicine.id,
        medicine_name=medicine.name,
        price=medicine.price,
        quantity=request.quantity,
        total_amount=medicine.price * request.quantity,
        date_time=now,
    )
    return SaleDraft(sale=sale, medicine_id=medicine.id, quantity_delta=-request.quantity)


def apply_sale(draft: SaleDraft, medicines: Iterable[Medicine]) -> Tuple[Medicine, ...]:
    """Return a new catalog with the draft's stock change applied."""
    return tuple(
        medicine.with_quantity(medicine.quantity + draft.quantity_delta)
        if medicine.id == draft.medicine_id
        else medicine
        for medicine in medicines
    )
