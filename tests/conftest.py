"""Pytest configuration and fixtures."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from itertools import count

import pytest

from pharmacy_tracker.config import Settings
from pharmacy_tracker.models import Medicine, MedicineData, Sale
from pharmacy_tracker.store import InventoryStore

NOW = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed reference time used by every time-dependent test."""
    return NOW


@pytest.fixture
def medicine_data():
    """Factory for editable medicine payloads with sensible defaults."""

    def make(**overrides):
        fields = {
            "name": "Paracetamol 500mg",
            "supplier": "Acme Pharma",
            "category": "Analgesic",
            "price": Decimal("10.00"),
            "quantity": 20,
            "expiry_date": date(2027, 6, 30),
            "plu": "PLU-1001",
        }
        fields.update(overrides)
        return MedicineData(**fields)

    return make


@pytest.fixture
def make_medicine(medicine_data):
    """Factory for catalog entries with sequential ids."""
    ids = count(1)

    def make(medicine_id=None, **overrides):
        return Medicine.from_data(medicine_id or f"med-{next(ids)}", medicine_data(**overrides))

    return make


@pytest.fixture
def sample_catalog(make_medicine):
    """A small catalog covering every status."""
    return [
        make_medicine("med-para", name="Paracetamol 500mg", quantity=20),
        make_medicine(
            "med-amox",
            name="Amoxicillin 250mg",
            supplier="Globex Labs",
            category="Antibiotic",
            price=Decimal("4.50"),
            quantity=3,
            plu="PLU-2002",
        ),
        make_medicine(
            "med-ibu",
            name="Ibuprofen 200mg",
            category="Analgesic",
            price=Decimal("6.25"),
            quantity=2,
            expiry_date=date(2025, 1, 31),
            plu="PLU-3003",
        ),
        make_medicine(
            "med-cet",
            name="Cetirizine 10mg",
            supplier="Initech Health",
            category="Antihistamine",
            price=Decimal("3.00"),
            quantity=40,
            expiry_date=date(2026, 12, 1),
            plu="PLU-4004",
        ),
    ]


@pytest.fixture
def make_sale():
    """Factory for sale records."""
    ids = count(1)

    def make(price="10.00", quantity=1, date_time=NOW, **overrides):
        price = Decimal(price)
        fields = {
            "id": f"sale-{next(ids)}",
            "customer_name": "Jane Doe",
            "medicine_id": "med-para",
            "medicine_name": "Paracetamol 500mg",
            "price": price,
            "quantity": quantity,
            "total_amount": price * quantity,
            "date_time": date_time,
        }
        fields.update(overrides)
        return Sale(**fields)

    return make


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, log_format="console")


@pytest.fixture
def store(sample_catalog, test_settings):
    """Store over the sample catalog with deterministic ids and clock."""
    sale_ids = count(1)
    medicine_ids = count(1)
    return InventoryStore(
        medicines=sample_catalog,
        settings=test_settings,
        medicine_id_factory=lambda: f"new-med-{next(medicine_ids)}",
        sale_id_factory=lambda: f"sale-{next(sale_ids)}",
        clock=lambda: NOW,
    )


@pytest.fixture
def days_from_now():
    """Build a datetime exactly ``n`` days away from the reference time."""

    def make(days):
        return NOW + timedelta(days=days)

    return make
