from typing import Any, Dict, List

from django.db import transaction

from .models import CarModel, CarVariant

# Each entry: model fields plus a "variants" list of variant fields.
DEFAULT_CATALOG: List[Dict[str, Any]] = [
    {
        "make": "Peugeot", "model": "208", "generation": "II", "body_type": "hatchback",
        "country_of_origin": "France", "production_start_year": 2019,
        "variants": [
            {"fuel_type": "petrol", "transmission": "manual", "engine_type": "I3", "displacement_cc": 1199,
             "power_hp": 100, "max_speed_kmh": 188, "zero_to_hundred_sec": 9.9},
            {"fuel_type": "electric", "transmission": "automatic", "power_hp": 136,
             "max_speed_kmh": 150, "zero_to_hundred_sec": 8.1, "production_start_year": 2020},
        ],
    },
    {
        "make": "Volkswagen", "model": "Golf", "generation": "Mk7", "body_type": "hatchback",
        "country_of_origin": "Germany", "production_start_year": 2012, "production_end_year": 2020,
        "variants": [
            {"fuel_type": "diesel", "transmission": "automatic", "engine_type": "I4", "displacement_cc": 1968,
             "power_hp": 150, "max_speed_kmh": 216, "zero_to_hundred_sec": 8.6},
            {"fuel_type": "petrol", "transmission": "manual", "engine_type": "I4", "displacement_cc": 1984,
             "power_hp": 230, "max_speed_kmh": 250, "zero_to_hundred_sec": 6.4, "production_start_year": 2013},
        ],
    },
    {
        "make": "Ford", "model": "Mustang", "generation": "S550", "body_type": "coupe",
        "country_of_origin": "USA", "production_start_year": 2015,
        "variants": [
            {"fuel_type": "petrol", "transmission": "manual", "engine_type": "V8", "displacement_cc": 4951,
             "power_hp": 450, "max_speed_kmh": 250, "zero_to_hundred_sec": 4.6},
        ],
    },
    {
        "make": "Tesla", "model": "Model 3", "generation": None, "body_type": "sedan",
        "country_of_origin": "USA", "production_start_year": 2017,
        "variants": [
            {"fuel_type": "electric", "transmission": "automatic", "power_hp": 283,
             "max_speed_kmh": 225, "zero_to_hundred_sec": 5.6},
        ],
    },
    {
        "make": "Audi", "model": "A4", "generation": "B9", "body_type": "sedan",
        "country_of_origin": "Germany", "production_start_year": 2015,
        "variants": [
            {"fuel_type": "diesel", "transmission": "automatic", "engine_type": "I4", "displacement_cc": 1968,
             "power_hp": 190, "max_speed_kmh": 238, "zero_to_hundred_sec": 7.7},
        ],
    },
    {
        "make": "Honda", "model": "Civic", "generation": "FK8", "body_type": "hatchback",
        "country_of_origin": "Japan", "production_start_year": 2017, "production_end_year": 2021,
        "variants": [
            {"fuel_type": "petrol", "transmission": "manual", "engine_type": "I4", "displacement_cc": 1996,
             "power_hp": 320, "max_speed_kmh": 272, "zero_to_hundred_sec": 5.8},
        ],
    },
    {
        "make": "Renault", "model": "Clio", "generation": "IV", "body_type": "hatchback",
        "country_of_origin": "France", "production_start_year": 2012, "production_end_year": 2019,
        "variants": [
            {"fuel_type": "petrol", "transmission": "manual", "engine_type": "I3", "displacement_cc": 898,
             "power_hp": 90, "max_speed_kmh": 182, "zero_to_hundred_sec": 12.2},
            {"fuel_type": "diesel", "transmission": "manual", "engine_type": "I4", "displacement_cc": 1461,
             "power_hp": 90, "max_speed_kmh": 178, "zero_to_hundred_sec": 11.7},
        ],
    },
]


# PUBLIC_INTERFACE
def ensure_seed_cars(catalog: List[Dict[str, Any]] | None = None) -> int:
    """Ensure the catalog has at least a minimal playable set of cars.

    Returns number of car models inserted (0 if any model already exists).
    """
    if CarModel.objects.exists():
        return 0
    entries = catalog or DEFAULT_CATALOG
    with transaction.atomic():
        for entry in entries:
            fields = {k: v for k, v in entry.items() if k != "variants"}
            car_model = CarModel.objects.create(**fields)
            CarVariant.objects.bulk_create(
                [CarVariant(model=car_model, **variant) for variant in entry.get("variants", [])]
            )
    return len(entries)
