"""Unit tests for ListingFilters predicate building."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.application.dtos.listing import ListingFilters, ListingPredicate


def test_empty_filters_build_no_predicates():
    """Test that an empty filter set adds no predicate."""
    assert ListingFilters().predicates() == []


def test_every_present_field_becomes_a_predicate():
    """Test equality and range predicates for a fully populated filter set."""
    filters = ListingFilters(
        brand_id="bmw",
        model_id="bmw-3",
        min_price=Decimal("20000"),
        max_price=Decimal("50000"),
        min_year=2015,
        max_year=2022,
        min_mileage=1000,
        max_mileage=90000,
        transmission="manual",
        condition="used",
    )

    predicates = [(p.field, p.operator, p.value) for p in filters.predicates()]

    assert predicates == [
        ("brand_id", "eq", "bmw"),
        ("model_id", "eq", "bmw-3"),
        ("price", "gte", Decimal("20000")),
        ("price", "lte", Decimal("50000")),
        ("year", "gte", 2015),
        ("year", "lte", 2022),
        ("mileage", "gte", 1000),
        ("mileage", "lte", 90000),
        ("transmission", "eq", "manual"),
        ("condition", "eq", "used"),
    ]


def test_zero_is_a_present_value():
    """Test that 0 is not confused with an absent field."""
    filters = ListingFilters(min_mileage=0, max_mileage=0)

    predicates = filters.predicates()

    assert len(predicates) == 2
    assert predicates[0] == ListingPredicate(field="mileage", operator="gte", value=0)
    assert predicates[1] == ListingPredicate(field="mileage", operator="lte", value=0)


def test_absent_fields_are_skipped():
    """Test that only present fields produce predicates."""
    filters = ListingFilters(max_price=Decimal("30000"), condition="certified")

    predicates = filters.predicates()

    assert [(p.field, p.operator) for p in predicates] == [
        ("price", "lte"),
        ("condition", "eq"),
    ]


def test_blank_brand_is_treated_as_absent():
    """Test that an empty brand selection adds no predicate."""
    filters = ListingFilters(brand_id="", model_id="  ")

    assert filters.brand_id is None
    assert filters.model_id is None
    assert filters.predicates() == []


def test_predicate_apply_on_values():
    """Test predicate evaluation against plain Python values."""
    gte = ListingPredicate(field="price", operator="gte", value=Decimal("20000"))
    lte = ListingPredicate(field="price", operator="lte", value=Decimal("50000"))
    eq = ListingPredicate(field="condition", operator="eq", value="used")

    assert gte.apply(Decimal("20000")) is True
    assert gte.apply(Decimal("19999.99")) is False
    assert lte.apply(Decimal("50000")) is True
    assert lte.apply(Decimal("60000")) is False
    assert eq.apply("used") is True
    assert eq.apply("new") is False


def test_active_filters_for_logging():
    """Test that active() only reports present filters."""
    filters = ListingFilters(brand_id="bmw", min_year=2018)

    assert filters.active() == {"brand_id": "bmw", "min_year": 2018}


def test_unknown_enum_value_is_rejected():
    """Test that transmission must be one of the enumerated values."""
    with pytest.raises(ValidationError):
        ListingFilters(transmission="cvt")


def test_negative_price_is_rejected():
    """Test that negative price bounds are rejected."""
    with pytest.raises(ValidationError):
        ListingFilters(min_price=Decimal("-1"))
