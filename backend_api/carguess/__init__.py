"""
Car guessing game app.

Re-exports the puzzle core so callers can import from carguess directly, e.g.:

    from carguess import evaluate_variant_guess, DailyPuzzleService
"""

# PUBLIC_INTERFACE
from .puzzles import (
    evaluate_model_guess,
    evaluate_variant_guess,
    EngineRegistry,
    get_engine,
    DailyPuzzleService,
    get_date_key,
)

__all__ = [
    "evaluate_model_guess",
    "evaluate_variant_guess",
    "EngineRegistry",
    "get_engine",
    "DailyPuzzleService",
    "get_date_key",
]
