"""Unit tests for the BrandModelSelection state machine."""

import pytest

from app.application.dtos.catalog import CarModel
from app.domain.entities.brand_model_selection import (
    BRAND_SELECTED,
    MODEL_SELECTED,
    NO_BRAND,
    BrandModelSelection,
)

BMW_MODELS = [
    CarModel(id="bmw-3", brand_id="bmw", name="3 Series"),
    CarModel(id="bmw-x5", brand_id="bmw", name="X5"),
]
AUDI_MODELS = [
    CarModel(id="audi-a4", brand_id="audi", name="A4"),
]


def test_initial_state():
    """Test that a new selection has no brand and no models."""
    selection = BrandModelSelection()

    assert selection.step == NO_BRAND
    assert selection.models == []
    assert selection.model_id is None


def test_select_brand_loads_models():
    """Test no_brand -> brand_selected."""
    selection = BrandModelSelection()

    selection.select_brand("bmw", BMW_MODELS)

    assert selection.step == BRAND_SELECTED
    assert [m.id for m in selection.models] == ["bmw-3", "bmw-x5"]


def test_select_model_after_brand():
    """Test brand_selected -> model_selected."""
    selection = BrandModelSelection()
    selection.select_brand("bmw", BMW_MODELS)

    selection.select_model("bmw-x5")

    assert selection.step == MODEL_SELECTED
    assert selection.model_id == "bmw-x5"


def test_changing_brand_clears_model():
    """Test that selecting another brand invalidates the model."""
    selection = BrandModelSelection()
    selection.select_brand("bmw", BMW_MODELS)
    selection.select_model("bmw-3")

    selection.select_brand("audi", AUDI_MODELS)

    assert selection.step == BRAND_SELECTED
    assert selection.model_id is None
    assert [m.id for m in selection.models] == ["audi-a4"]


def test_reselecting_same_brand_clears_model():
    """Test that any brand selection resets the model."""
    selection = BrandModelSelection()
    selection.select_brand("bmw", BMW_MODELS)
    selection.select_model("bmw-3")

    selection.select_brand("bmw", BMW_MODELS)

    assert selection.model_id is None


def test_clearing_brand_empties_models():
    """Test brand -> no brand."""
    selection = BrandModelSelection()
    selection.select_brand("bmw", BMW_MODELS)
    selection.select_model("bmw-3")

    selection.select_brand(None)

    assert selection.step == NO_BRAND
    assert selection.brand_id is None
    assert selection.model_id is None
    assert selection.models == []


def test_model_requires_brand():
    """Test that a model cannot be selected without a brand."""
    selection = BrandModelSelection()

    with pytest.raises(ValueError, match="brand must be selected"):
        selection.select_model("bmw-3")


def test_model_must_belong_to_brand():
    """Test that a foreign model is rejected."""
    selection = BrandModelSelection()
    selection.select_brand("bmw", BMW_MODELS)

    with pytest.raises(ValueError):
        selection.select_model("audi-a4")
    assert selection.step == BRAND_SELECTED


def test_foreign_model_options_are_rejected():
    """Test that the loaded model list must be scoped to the brand."""
    selection = BrandModelSelection()

    with pytest.raises(ValueError):
        selection.select_brand("bmw", BMW_MODELS + AUDI_MODELS)


def test_clearing_model_keeps_brand():
    """Test model_selected -> brand_selected."""
    selection = BrandModelSelection()
    selection.select_brand("bmw", BMW_MODELS)
    selection.select_model("bmw-3")

    selection.select_model(None)

    assert selection.step == BRAND_SELECTED
    assert selection.brand_id == "bmw"
