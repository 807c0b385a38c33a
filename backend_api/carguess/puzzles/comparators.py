from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Literal, Optional, Protocol, Tuple, runtime_checkable

# Statuses shared by every field kind; each kind only emits a subset.
FieldStatus = Literal["correct", "wrong", "higher", "lower", "unknown"]

EXACT = "exact"
NULLABLE_EXACT = "nullable_exact"
ORDERED = "ordered"


# Light-weight protocols instead of importing Django models at import time.
@runtime_checkable
class _ModelLike(Protocol):
    """Minimal interface required from CarModel for comparisons."""
    make: str
    model: str
    generation: Optional[str]
    body_type: str
    country_of_origin: str
    production_start_year: Optional[int]


@runtime_checkable
class _VariantLike(Protocol):
    """Minimal interface required from CarVariant (with its parent model)."""
    model: _ModelLike
    fuel_type: Optional[str]
    transmission: Optional[str]
    power_hp: Optional[int]
    engine_type: Optional[str]
    displacement_cc: Optional[int]
    max_speed_kmh: Optional[int]
    zero_to_hundred_sec: Optional[float]
    production_start_year: Optional[int]


def compare_exact(target: Any, guess: Any) -> FieldStatus:
    """correct when both values are equal, wrong otherwise."""
    return "correct" if target == guess else "wrong"


def compare_nullable_exact(target: Any, guess: Any) -> FieldStatus:
    """Like compare_exact, but absence on either side yields unknown."""
    if target is None or guess is None:
        return "unknown"
    return compare_exact(target, guess)


def compare_ordered(target: Any, guess: Any) -> FieldStatus:
    """Numeric comparison from the target's point of view.

    higher means the true answer is higher than the guess. Absence on either
    side yields unknown and ties are always correct.
    """
    if target is None or guess is None:
        return "unknown"
    if target == guess:
        return "correct"
    return "higher" if target > guess else "lower"


_COMPARATORS: Dict[str, Callable[[Any, Any], FieldStatus]] = {
    EXACT: compare_exact,
    NULLABLE_EXACT: compare_nullable_exact,
    ORDERED: compare_ordered,
}


@dataclass(frozen=True)
class ComparedField:
    """A comparable field: feedback key, comparison kind and value accessor."""

    name: str
    kind: str
    getter: Callable[[Any], Any]

    def evaluate(self, target: Any, guess: Any) -> Dict[str, Any]:
        target_value = self.getter(target)
        guess_value = self.getter(guess)
        return {
            "status": _COMPARATORS[self.kind](target_value, guess_value),
            "value": target_value,
        }


def _attr(name: str) -> Callable[[Any], Any]:
    return lambda obj: getattr(obj, name)


def _model_attr(name: str) -> Callable[[Any], Any]:
    return lambda variant: getattr(variant.model, name)


def effective_start_year(variant: _VariantLike) -> Optional[int]:
    """Variant start year, falling back to the parent model's."""
    if variant.production_start_year is not None:
        return variant.production_start_year
    return variant.model.production_start_year


# (feedback key, entity attribute, kind)
_MODEL_LAYOUT: List[Tuple[str, str, str]] = [
    ("make", "make", EXACT),
    ("model", "model", EXACT),
    ("generation", "generation", NULLABLE_EXACT),
    ("body_type", "body_type", EXACT),
    ("country_of_origin", "country_of_origin", EXACT),
]

MODEL_FIELDS: List[ComparedField] = [
    ComparedField(key, kind, _attr(attr)) for key, attr, kind in _MODEL_LAYOUT
] + [
    ComparedField("production_start_year", ORDERED, _attr("production_start_year")),
]

VARIANT_FIELDS: List[ComparedField] = [
    ComparedField(key, kind, _model_attr(attr)) for key, attr, kind in _MODEL_LAYOUT
] + [
    ComparedField("production_start_year", ORDERED, effective_start_year),
    ComparedField("fuel_type", NULLABLE_EXACT, _attr("fuel_type")),
    ComparedField("transmission", NULLABLE_EXACT, _attr("transmission")),
    ComparedField("power_hp", ORDERED, _attr("power_hp")),
    ComparedField("engine_type", NULLABLE_EXACT, _attr("engine_type")),
    ComparedField("displacement_cc", ORDERED, _attr("displacement_cc")),
    ComparedField("max_speed_kmh", ORDERED, _attr("max_speed_kmh")),
    ComparedField("zero_to_hundred_sec", ORDERED, _attr("zero_to_hundred_sec")),
]


def evaluate_fields(fields: List[ComparedField], target: Any, guess: Any) -> Dict[str, Dict[str, Any]]:
    """Build a feedback record with one {status, value} entry per field."""
    return {field.name: field.evaluate(target, guess) for field in fields}


# PUBLIC_INTERFACE
def evaluate_model_guess(target: _ModelLike, guess: _ModelLike) -> Dict[str, Dict[str, Any]]:
    """Compare two car models field by field.

    Returns:
        {field: {"status": FieldStatus, "value": <target value>}} for make,
        model, generation, body_type, country_of_origin and
        production_start_year.
    """
    return evaluate_fields(MODEL_FIELDS, target, guess)


# PUBLIC_INTERFACE
def evaluate_variant_guess(target: _VariantLike, guess: _VariantLike) -> Dict[str, Dict[str, Any]]:
    """Compare two car variants (each carrying its parent model) field by field.

    Model-level fields are read from the parent model. The start year uses the
    effective value on both sides before comparison.
    """
    return evaluate_fields(VARIANT_FIELDS, target, guess)
