"""German brand and model reference data."""

import uuid

BRAND_LOGOS = {
    "Mercedes-Benz": "https://example.com/mercedes.png",
    "BMW": "https://example.com/bmw.png",
    "Audi": "https://example.com/audi.png",
    "Porsche": "https://example.com/porsche.png",
    "Volkswagen": "https://example.com/vw.png",
}

# Model names in seed order; BMW repeats a few names, removed by seed_models()
BRAND_MODELS = {
    "Mercedes-Benz": ["C-Class", "E-Class", "S-Class"],
    "BMW": [
        "1 Series", "2 Series", "3 Series", "5 Series", "6 Series", "7 Series", "8 Series",
        "M3", "M4", "M5", "M6", "M8", "X1", "X2", "X3", "X4", "X5", "X6", "X7", "Z3", "Z4",
        "Z8", "128i", "135i", "135is", "1 Series M", "228i", "228i Gran Coupe", "228i xDrive",
        "228i xDrive Gran Coupe", "230i", "M235i", "M235i xDrive", "M235i xDrive Gran Coupe",
        "M240i", "M240i xDrive", "318i", "318iS", "318ti", "320i", "320i xDrive", "323ci",
        "323i", "323is", "325", "325ci", "325e", "325es", "325i", "325is", "325iX", "325xi",
        "328Ci", "328d", "328d xDrive", "328i", "328i Gran Turismo xDrive", "328i xDrive",
        "328iS", "328xi", "330ci", "330e", "330e xDrive", "330i", "330i Gran Turismo xDrive",
        "330i xDrive", "330xi", "335d", "335i", "335i Gran Turismo xDrive", "335i xDrive",
        "335is", "335xi", "340i", "340i Gran Turismo xDrive", "340i xDrive", "ActiveHybrid 3",
        "M340i", "M340i xDrive", "428i", "428i Gran Coupe", "428i Gran Coupe xDrive",
        "428i xDrive", "430i", "430i Gran Coupe", "430i Gran Coupe xDrive", "430i xDrive",
        "435i", "435i Gran Coupe", "435i Gran Coupe xDrive", "435i xDrive", "440i",
        "440i Gran Coupe", "440i Gran Coupe xDrive", "440i xDrive", "M440i", "M440i Gran Coupe",
        "M440i xDrive", "M440i xDrive Gran Coupe", "524td", "525i", "525xi", "528e", "528i",
        "528i xDrive", "528xi", "530e", "530e xDrive", "530i", "530i xDrive", "530xi", "533i",
        "535d", "535d xDrive", "535i", "535i Gran Turismo", "535i Gran Turismo xDrive",
        "535i xDrive", "535xi", "540d xDrive", "540i", "540i xDrive", "545i", "550e xDrive",
        "550i", "550i Gran Turismo", "550i Gran Turismo xDrive", "550i xDrive",
        "ActiveHybrid 5", "M550i xDrive", "633CSi", "635CSi", "640i", "640i Gran Coupe",
        "640i Gran Coupe xDrive", "640i Gran Turismo xDrive", "640i xDrive", "645ci", "650i",
        "650i Gran Coupe", "650i Gran Coupe xDrive", "650i xDrive",
        "ALPINA B6 xDrive Gran Coupe", "L6", "733i", "735i", "735iL", "740e xDrive", "740i",
        "740i xDrive", "740iL", "740Ld xDrive", "740Li", "740Li xDrive", "745e xDrive", "745i",
        "745Li", "750e xDrive", "750i", "750i xDrive", "750iL", "750Li", "750Li xDrive", "760i",
        "760i xDrive", "760Li", "ActiveHybrid 7", "ALPINA B7 xDrive", "ALPINA B7 xDrive", "L7",
        "M760i xDrive", "840ci", "840i Gran Coupe", "840i Gran Coupe xDrive", "840i xDrive",
        "850ci", "850CSi", "850i", "ALPINA B8 xDrive Gran Coupe", "M850i Gran Coupe xDrive",
        "M850i xDrive", "ActiveHybrid X6", "ALPINA XB7", "i3", "i4", "i5", "i7", "i8", "iX",
        "M Coupe", "M Roadster", "M3 xDrive", "M4 xDrive", "M6 Gran Coupe",
        "M8 Gran Coupe xDrive", "X3 M", "X4 M", "X5 M", "X6 M", "XM", "Other", "3 Series",
        "1 Series", "5 Series", "X5",
    ],
    "Audi": ["A3", "A4", "Q5"],
    "Porsche": ["911", "Cayenne", "Macan"],
    "Volkswagen": ["Golf", "Passat", "Tiguan"],
}

# Stable ids so seeded rows match across the in-memory store and migrations
SEED_NAMESPACE = uuid.UUID("5f0c2a4e-6f0e-4c58-9c43-2b7d1f8f3a10")


def brand_id(brand: str) -> str:
    """Deterministic id of a seeded brand."""
    return str(uuid.uuid5(SEED_NAMESPACE, f"brand:{brand}"))


def model_id(brand: str, model: str) -> str:
    """Deterministic id of a seeded model."""
    return str(uuid.uuid5(SEED_NAMESPACE, f"model:{brand}:{model}"))


def seed_brands() -> list[dict]:
    """Brand rows."""
    return [
        {"id": brand_id(name), "name": name, "logo_url": logo}
        for name, logo in BRAND_LOGOS.items()
    ]


def seed_models() -> list[dict]:
    """Model rows, one per (brand, name) pair."""
    rows = []
    seen = set()
    for brand, models in BRAND_MODELS.items():
        for name in models:
            if (brand, name) in seen:
                continue
            seen.add((brand, name))
            rows.append({"id": model_id(brand, name), "brand_id": brand_id(brand), "name": name})
    return rows
