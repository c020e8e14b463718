"""
Tests for the medicine and sale data contracts.
"""
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from pharmacy_tracker.models import Medicine, MedicineData, Sale


class TestMedicine:
    """Test class for Medicine and MedicineData."""

    def test_valid_medicine(self, medicine_data):
        data = medicine_data(name="  Aspirin  ", price="1.25", quantity=0)
        assert data.name == "Aspirin"
        assert data.price == Decimal("1.25")
        assert data.quantity == 0

    def test_negative_price_rejected(self, medicine_data):
        with pytest.raises(ValidationError):
            medicine_data(price=Decimal("-0.01"))

    def test_negative_quantity_rejected(self, medicine_data):
        with pytest.raises(ValidationError):
            medicine_data(quantity=-1)

    def test_unknown_field_rejected(self, medicine_data):
        with pytest.raises(ValidationError):
            MedicineData(**medicine_data().model_dump(), colour="red")

    def test_records_are_immutable(self, make_medicine):
        medicine = make_medicine()
        with pytest.raises(ValidationError):
            medicine.quantity = 1

    def test_from_data_and_back(self, medicine_data):
        data = medicine_data()
        medicine = Medicine.from_data("abc", data)
        assert medicine.id == "abc"
        assert medicine.to_data() == data

    def test_with_quantity_returns_copy(self, make_medicine):
        medicine = make_medicine(quantity=10)
        lowered = medicine.with_quantity(4)
        assert lowered.quantity == 4
        assert lowered.id == medicine.id
        assert medicine.quantity == 10

    def test_with_quantity_cannot_go_negative(self, make_medicine):
        with pytest.raises(ValidationError):
            make_medicine(quantity=1).with_quantity(-1)

    def test_stock_value(self, medicine_data):
        assert medicine_data(price=Decimal("2.50"), quantity=4).stock_value() == Decimal("10.00")

    def test_expiry_date_parsed_from_iso_string(self, medicine_data):
        assert medicine_data(expiry_date="2027-03-01").expiry_date == date(2027, 3, 1)


class TestSale:
    """Test class for Sale."""

    def test_valid_sale(self, make_sale):
        sale = make_sale(price="2.50", quantity=4)
        assert sale.total_amount == Decimal("10.00")

    def test_total_must_match(self, make_sale):
        with pytest.raises(ValidationError):
            make_sale(price="2.50", quantity=4, total_amount=Decimal("9.99"))

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_quantity_must_be_positive(self, make_sale, quantity):
        with pytest.raises(ValidationError):
            make_sale(quantity=quantity)

    def test_sale_is_immutable(self, make_sale):
        sale = make_sale()
        with pytest.raises(ValidationError):
            sale.customer_name = "Someone else"

    def test_is_a_model(self, make_sale):
        assert isinstance(make_sale(), Sale)
