"""Orchestration between the HTTP layer, the ORM and the puzzle core."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from django.conf import settings
from django.db.models import Q

from .exceptions import NotFound, PreconditionFailed
from .labels import format_model_label, format_variant_label
from .models import CarModel, CarVariant
from .puzzles import DailyPuzzleService, get_date_key, get_engine
from .puzzles.daily import PuzzleRecord
from .puzzles.dates import shift_date_key
from .repositories import DjangoPuzzleRepository

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 10

_FUEL_KEYWORDS = {
    "petrol": "petrol",
    "gasoline": "petrol",
    "diesel": "diesel",
    "electric": "electric",
    "ev": "electric",
    "hybrid": "hybrid",
}
_TRANSMISSION_KEYWORDS = {
    "auto": "automatic",
    "automatic": "automatic",
    "manual": "manual",
    "mt": "manual",
}


def get_puzzle_service() -> DailyPuzzleService:
    return DailyPuzzleService(DjangoPuzzleRepository())


def max_attempts() -> int:
    return int(getattr(settings, "CARGUESS_MAX_ATTEMPTS", 10))


def _load_entity(mode: str, entity_id: int) -> Union[CarModel, CarVariant]:
    """Fetch the guessable entity for a mode, raising NotFound if missing."""
    try:
        if mode == "hard":
            return CarVariant.objects.select_related("model").get(pk=entity_id)
        return CarModel.objects.get(pk=entity_id)
    except (CarModel.DoesNotExist, CarVariant.DoesNotExist):
        kind = "variant" if mode == "hard" else "model"
        raise NotFound(f"Car {kind} #{entity_id} not found.")


def label_for(mode: str, entity: Union[CarModel, CarVariant]) -> str:
    return format_variant_label(entity) if mode == "hard" else format_model_label(entity)


def _target_label(puzzle: PuzzleRecord) -> str:
    return label_for(puzzle.mode, _load_entity(puzzle.mode, puzzle.target_id))


def describe_guess(mode: str, entity: Union[CarModel, CarVariant]) -> Dict[str, Any]:
    """Guess values echoed back to the client next to the feedback."""
    model = entity.model if mode == "hard" else entity
    data: Dict[str, Any] = {
        "id": entity.id,
        "label": label_for(mode, entity),
        "make": model.make,
        "model": model.model,
        "generation": model.generation,
        "body_type": model.body_type,
        "country_of_origin": model.country_of_origin,
        "production_start_year": model.production_start_year,
    }
    if mode == "hard":
        data.update(
            {
                "production_start_year": entity.effective_start_year,
                "fuel_type": entity.fuel_type,
                "transmission": entity.transmission,
                "power_hp": entity.power_hp,
                "engine_type": entity.engine_type,
                "displacement_cc": entity.displacement_cc,
                "max_speed_kmh": entity.max_speed_kmh,
                "zero_to_hundred_sec": entity.zero_to_hundred_sec,
            }
        )
    return data


# PUBLIC_INTERFACE
def get_puzzle_overview(mode: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Today's puzzle (created if needed) and yesterday's answer, if any.

    Yesterday is only read, never created.
    """
    service = get_puzzle_service()
    today_key = get_date_key(now)
    today = service.get_or_create_puzzle_for_date(today_key, mode)
    yesterday = service.find_puzzle_for_date(shift_date_key(today_key, -1), mode)
    return {
        "today": {
            "date": today.date,
            "mode": today.mode,
            "puzzle_id": today.id,
            "max_attempts": max_attempts(),
        },
        "yesterday": (
            {"date": yesterday.date, "mode": yesterday.mode, "label": _target_label(yesterday)}
            if yesterday is not None
            else None
        ),
    }


# PUBLIC_INTERFACE
def create_guess_feedback(puzzle_id: int, guess_id: int, mode: str,
                          now: Optional[datetime] = None) -> Dict[str, Any]:
    """Evaluate a guess against the target of today's puzzle.

    Raises:
        NotFound: unknown puzzle or guess entity.
        PreconditionFailed: puzzle belongs to another mode or another day.
    """
    puzzle = DjangoPuzzleRepository().get_puzzle(puzzle_id)
    if puzzle is None:
        raise NotFound("Puzzle not found.")
    if puzzle.mode != mode:
        raise PreconditionFailed(f"Puzzle #{puzzle_id} is a {puzzle.mode} puzzle, not {mode}.")
    today_key = get_date_key(now)
    if puzzle.date != today_key:
        raise PreconditionFailed(f"Puzzle #{puzzle_id} is for {puzzle.date}, today is {today_key}.")

    target = _load_entity(mode, puzzle.target_id)
    guess = _load_entity(mode, guess_id)
    result = get_engine(mode)().evaluate(target, guess)
    logger.debug("Guess %s on %s puzzle #%s: correct=%s", guess_id, mode, puzzle_id, result["is_correct"])
    return {
        "feedback": result["feedback"],
        "is_correct": result["is_correct"],
        "guess": describe_guess(mode, guess),
    }


# PUBLIC_INTERFACE
def search_models(term: str) -> List[Dict[str, Any]]:
    """Up to SEARCH_LIMIT model suggestions matching term."""
    query = (term or "").strip()
    if not query:
        return []
    models_qs = (
        CarModel.objects.filter(
            Q(make__icontains=query)
            | Q(model__icontains=query)
            | Q(generation__icontains=query)
            | Q(country_of_origin__icontains=query)
        )
        .order_by("make", "model", "production_start_year")[:SEARCH_LIMIT]
    )
    return [{"id": m.id, "label": format_model_label(m)} for m in models_qs]


# PUBLIC_INTERFACE
def search_variants(term: str) -> List[Dict[str, Any]]:
    """Up to SEARCH_LIMIT variant suggestions.

    Matches make/model/generation/engine type text, fuel and transmission
    keywords (e.g. "ev", "auto"), and integer power or displacement.
    """
    query = (term or "").strip()
    if not query:
        return []
    keyword = query.lower()
    filters = (
        Q(model__make__icontains=query)
        | Q(model__model__icontains=query)
        | Q(model__generation__icontains=query)
        | Q(engine_type__icontains=query)
    )
    if keyword in _FUEL_KEYWORDS:
        filters |= Q(fuel_type=_FUEL_KEYWORDS[keyword])
    if keyword in _TRANSMISSION_KEYWORDS:
        filters |= Q(transmission=_TRANSMISSION_KEYWORDS[keyword])
    if query.isdigit():
        number = int(query)
        filters |= Q(power_hp=number) | Q(displacement_cc=number)
    variants = CarVariant.objects.select_related("model").filter(filters).order_by("id")[:SEARCH_LIMIT]
    return [{"id": v.id, "label": format_variant_label(v)} for v in variants]
