"""
Puzzle core: guess comparison and daily target selection.

Exports:
- evaluate_model_guess / evaluate_variant_guess field comparators
- ModelEngine / VariantEngine and the mode registry (get_engine)
- DailyPuzzleService and its PuzzleRecord / Candidate value types
- get_date_key for the canonical "today"

These modules are framework-agnostic apart from reading settings and can be
reused by views or services without importing request objects.
"""

from .comparators import evaluate_model_guess, evaluate_variant_guess, effective_start_year
from .engines import ModelEngine, VariantEngine
from .registry import EngineRegistry, get_engine
from .selection import Candidate, pick_candidate, stable_hash
from .daily import DailyPuzzleService, PuzzleRecord, MODES
from .dates import get_date_key, format_date_key

__all__ = [
    "evaluate_model_guess",
    "evaluate_variant_guess",
    "effective_start_year",
    "ModelEngine",
    "VariantEngine",
    "EngineRegistry",
    "get_engine",
    "Candidate",
    "pick_candidate",
    "stable_hash",
    "DailyPuzzleService",
    "PuzzleRecord",
    "MODES",
    "get_date_key",
    "format_date_key",
]
