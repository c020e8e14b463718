"""
In-memory inventory store.

The store owns the catalog and the sales history. Both collections live in
a single immutable snapshot that is swapped in one assignment per mutation,
so a reader sees either the state before a change or the state after it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Tuple

import structlog

from pharmacy_tracker.config import Settings, settings as default_settings
from pharmacy_tracker.errors import SaleError
from pharmacy_tracker.formatting import generate_id
from pharmacy_tracker.metrics import calculate_metrics
from pharmacy_tracker.models import (
    DashboardMetrics,
    Medicine,
    MedicineData,
    Sale,
    SaleRequest,
)
from pharmacy_tracker.rules import utc_now
from pharmacy_tracker.transactions import apply_sale, find_medicine, prepare_sale

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StoreSnapshot:
    """Read-only view of the store at one point in time."""

    medicines: Tuple[Medicine, ...] = ()
    sales: Tuple[Sale, ...] = ()  # most recent first


Listener = Callable[[StoreSnapshot], None]


class InventoryStore:
    """
    Owner of the catalog and the sales history.

    All mutations go through this class:
    - add, update and delete catalog entries
    - commit a sale, which records it and decrements stock together
    Listeners registered with :meth:`subscribe` receive the new snapshot
    after every successful mutation.
    """

    def __init__(
        self,
        medicines: Iterable[Medicine] = (),
        sales: Iterable[Sale] = (),
        settings: Optional[Settings] = None,
        medicine_id_factory: Callable[[], str] = generate_id,
        sale_id_factory: Callable[[], str] = generate_id,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.settings = settings or default_settings
        self._medicine_id_factory = medicine_id_factory
        self._sale_id_factory = sale_id_factory
        self._clock = clock
        self._listeners: List[Listener] = []
        self._state = StoreSnapshot(medicines=tuple(medicines), sales=tuple(sales))

    @property
    def medicines(self) -> Tuple[Medicine, ...]:
        return self._state.medicines

    @property
    def sales(self) -> Tuple[Sale, ...]:
        return self._state.sales

    def snapshot(self) -> StoreSnapshot:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, state: StoreSnapshot) -> None:
        """Run listeners on a committed snapshot.

        The mutation has already happened, so a failing listener is logged
        and the remaining listeners still run.
        """
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("listener_failed", listener=repr(listener))

    def get_medicine(self, medicine_id: str) -> Medicine:
        return find_medicine(self._state.medicines, medicine_id)

    def add_medicine(self, data: MedicineData) -> Medicine:
        """Add a catalog entry and return it with its assigned id."""
        medicine = Medicine.from_data(self._medicine_id_factory(), data)
        state = self._state
        self._state = StoreSnapshot(
            medicines=state.medicines + (medicine,), sales=state.sales
        )
        logger.info("medicine_added", medicine_id=medicine.id, name=medicine.name)
        self._notify(self._state)
        return medicine

    def update_medicine(self, medicine_id: str, data: MedicineData) -> Medicine:
        """Replace every field of an entry except its id."""
        state = self._state
        self.get_medicine(medicine_id)
        updated = Medicine.from_data(medicine_id, data)
        medicines = tuple(
            updated if medicine.id == medicine_id else medicine
            for medicine in state.medicines
        )
        self._state = StoreSnapshot(medicines=medicines, sales=state.sales)
        logger.info("medicine_updated", medicine_id=medicine_id, name=updated.name)
        self._notify(self._state)
        return updated

    def delete_medicine(self, medicine_id: str) -> None:
        """Remove an entry. Past sales referencing it are left untouched."""
        state = self._state
        self.get_medicine(medicine_id)
        medicines = tuple(m for m in state.medicines if m.id != medicine_id)
        self._state = StoreSnapshot(medicines=medicines, sales=state.sales)
        logger.info("medicine_deleted", medicine_id=medicine_id)
        self._notify(self._state)

    def commit_sale(self, request: SaleRequest) -> Sale:
        """
        Record a sale and decrement stock as one change.

        Raises:
            SaleError: The request was rejected; the store is unchanged
        """
        state = self._state
        try:
            draft = prepare_sale(
                request,
                state.medicines,
                now=self.now(),
                id_factory=self._sale_id_factory,
                allow_expired=self.settings.allow_expired_sales,
            )
        except SaleError as e:
            logger.info(
                "sale_rejected",
                medicine_id=request.medicine_id,
                quantity=request.quantity,
                reason=type(e).__name__,
                error=str(e),
            )
            raise

        self._state = StoreSnapshot(
            medicines=apply_sale(draft, state.medicines),
            sales=(draft.sale,) + state.sales,
        )
        logger.info(
            "sale_committed",
            sale_id=draft.sale.id,
            medicine_id=draft.medicine_id,
            quantity=draft.sale.quantity,
            total_amount=str(draft.sale.total_amount),
        )
        self._notify(self._state)
        return draft.sale

    def now(self) -> datetime:
        """Current time according to the store's clock."""
        return self._clock()

    def metrics(self, now: Optional[datetime] = None) -> DashboardMetrics:
        return calculate_metrics(
            self._state.medicines,
            self._state.sales,
            now=self.now() if now is None else now,
            low_stock_threshold=self.settings.low_stock_threshold,
        )
