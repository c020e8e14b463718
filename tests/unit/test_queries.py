"""
Tests for catalog and sales search/sort helpers.
"""
from decimal import Decimal

import pytest

from pharmacy_tracker.queries import (
    available_for_sale,
    expired_medicines,
    filter_medicines,
    low_stock_medicines,
    search_medicines,
    search_sales,
    sort_medicines,
)


def ids(medicines):
    return [m.id for m in medicines]


class TestSearchMedicines:
    """Test class for search_medicines."""

    def test_blank_term_returns_everything(self, sample_catalog):
        assert ids(search_medicines(sample_catalog, "  ")) == ids(sample_catalog)

    @pytest.mark.parametrize(
        "term,expected",
        [
            ("IBU", ["med-ibu"]),  # name
            ("globex", ["med-amox"]),  # supplier
            ("plu-40", ["med-cet"]),  # plu
            ("analgesic", ["med-para", "med-ibu"]),  # category
        ],
    )
    def test_matches_fields(self, sample_catalog, term, expected):
        assert ids(search_medicines(sample_catalog, term)) == expected


class TestSortMedicines:
    """Test class for sort_medicines."""

    def test_by_name(self, sample_catalog):
        assert ids(sort_medicines(sample_catalog)) == ["med-amox", "med-cet", "med-ibu", "med-para"]

    def test_by_price_descending(self, sample_catalog):
        result = sort_medicines(sample_catalog, "price", descending=True)
        assert [m.price for m in result] == [
            Decimal("10.00"),
            Decimal("6.25"),
            Decimal("4.50"),
            Decimal("3.00"),
        ]

    def test_by_expiry_date(self, sample_catalog):
        assert ids(sort_medicines(sample_catalog, "expiry_date"))[:2] == ["med-ibu", "med-cet"]

    def test_case_insensitive(self, make_medicine):
        medicines = [make_medicine("b", name="beta"), make_medicine("a", name="Alpha")]
        assert ids(sort_medicines(medicines)) == ["a", "b"]

    def test_unknown_field(self, sample_catalog):
        with pytest.raises(ValueError):
            sort_medicines(sample_catalog, "id")

    def test_does_not_modify_input(self, sample_catalog):
        before = ids(sample_catalog)
        sort_medicines(sample_catalog, "quantity")
        assert ids(sample_catalog) == before


def test_expired_medicines(sample_catalog, now):
    assert ids(expired_medicines(sample_catalog, now)) == ["med-ibu"]


def test_low_stock_excludes_expired(sample_catalog, now):
    assert ids(low_stock_medicines(sample_catalog, now)) == ["med-amox"]


def test_available_for_sale(sample_catalog, make_medicine, now):
    catalog = sample_catalog + [make_medicine("med-empty", quantity=0)]
    assert ids(available_for_sale(catalog, now)) == ["med-para", "med-amox", "med-cet"]


def test_filter_medicines_expired_view(sample_catalog, now):
    assert ids(filter_medicines(sample_catalog, expired_only=True, now=now)) == ["med-ibu"]


def test_filter_medicines_search_then_sort(sample_catalog, now):
    result = filter_medicines(sample_catalog, term="analgesic", field="quantity", now=now)
    assert ids(result) == ["med-ibu", "med-para"]


def test_search_sales(make_sale):
    sales = [
        make_sale(customer_name="Alice Brown"),
        make_sale(customer_name="Bob Green", medicine_name="Cetirizine 10mg"),
    ]
    assert [s.customer_name for s in search_sales(sales, "alice")] == ["Alice Brown"]
    assert [s.customer_name for s in search_sales(sales, "CETIRIZINE")] == ["Bob Green"]
    assert len(search_sales(sales, "")) == 2
