"""Unit tests for the German brand and model seed."""

from collections import Counter

from app.adapters.outbound.catalog.seed import BRAND_LOGOS, brand_id, model_id, seed_models


def test_ids_are_stable():
    """Test that seeded ids are deterministic."""
    assert brand_id("BMW") == brand_id("BMW")
    assert brand_id("BMW") != brand_id("Audi")
    assert model_id("BMW", "X5") != model_id("Audi", "X5")


def test_models_are_unique_per_brand():
    """Test that each (brand, name) pair appears once."""
    pairs = Counter((row["brand_id"], row["name"]) for row in seed_models())

    assert max(pairs.values()) == 1


def test_every_model_has_a_seeded_brand():
    """Test referential integrity of the seed."""
    brand_ids = {brand_id(name) for name in BRAND_LOGOS}

    assert {row["brand_id"] for row in seed_models()} <= brand_ids


def test_seed_counts_after_dedup():
    """Test the model count per brand once repeated names are removed."""
    counts = Counter(row["brand_id"] for row in seed_models())

    assert counts[brand_id("BMW")] == 200
    for brand in ("Mercedes-Benz", "Audi", "Porsche", "Volkswagen"):
        assert counts[brand_id(brand)] == 3
    assert len(seed_models()) == 212


def test_repeated_bmw_names_appear_once():
    """Test that names listed twice for BMW are seeded once."""
    bmw_names = [row["name"] for row in seed_models() if row["brand_id"] == brand_id("BMW")]

    for name in ("3 Series", "1 Series", "5 Series", "X5", "ALPINA B7 xDrive"):
        assert bmw_names.count(name) == 1
    assert {"6 Series", "8 Series", "X7", "XM", "M340i", "Other"} <= set(bmw_names)
