"""Display labels for suggestions and revealed answers."""
from __future__ import annotations

from .models import CarModel, CarVariant

_FUEL_LABELS = dict(CarVariant.FUEL_TYPE_CHOICES)
_TRANSMISSION_LABELS = {"automatic": "Auto", "manual": "Manual"}


def _base(model: CarModel) -> str:
    generation = f" ({model.generation})" if model.generation else ""
    return f"{model.make} {model.model}{generation}"


def _litres(displacement_cc: int) -> str:
    text = f"{displacement_cc / 1000:.1f}"
    return text[:-2] if text.endswith(".0") else text


# PUBLIC_INTERFACE
def format_model_label(model: CarModel) -> str:
    """e.g. "Volkswagen Golf (Mk7) - Germany - 2012"."""
    return f"{_base(model)} - {model.country_of_origin} - {model.production_start_year}"


# PUBLIC_INTERFACE
def format_variant_label(variant: CarVariant) -> str:
    """e.g. "Peugeot 208 (II) I3 1.2 110hp Petrol Manual - 2019".

    Missing parts are omitted; the year is the effective start year.
    """
    parts = []
    if variant.engine_type:
        parts.append(variant.engine_type)
    if variant.displacement_cc:
        parts.append(_litres(variant.displacement_cc))
    if variant.power_hp:
        parts.append(f"{variant.power_hp}hp")
    if variant.fuel_type:
        parts.append(_FUEL_LABELS.get(variant.fuel_type, variant.fuel_type))
    if variant.transmission:
        parts.append(_TRANSMISSION_LABELS.get(variant.transmission, variant.transmission))
    details = f" {' '.join(parts)}" if parts else ""
    return f"{_base(variant.model)}{details} - {variant.effective_start_year}"
