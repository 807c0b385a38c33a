from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Protocol

from .comparators import evaluate_model_guess, evaluate_variant_guess


class Engine(Protocol):
    """Protocol for guess engines (one per puzzle mode)."""

    # PUBLIC_INTERFACE
    def evaluate(self, target: Any, guess: Any) -> Dict[str, Any]:
        """Evaluate a guess against a target.

        Returns a dict:
        {
            "feedback": Dict[str, {"status", "value"}],  # one entry per field
            "is_correct": bool,
            "metadata": Dict[str, Any]                   # engine-specific info
        }
        """


def _same_entity(target: Any, guess: Any) -> bool:
    target_id = getattr(target, "id", None)
    return target_id is not None and target_id == getattr(guess, "id", None)


@dataclass
class ModelEngine:
    """Easy mode: guess the car model."""

    # PUBLIC_INTERFACE
    def evaluate(self, target: Any, guess: Any) -> Dict[str, Any]:
        """Evaluate a model guess."""
        return {
            "feedback": evaluate_model_guess(target, guess),
            "is_correct": _same_entity(target, guess),
            "metadata": {"engine": "easy"},
        }


@dataclass
class VariantEngine:
    """Hard mode: guess the exact variant (trim) of a model."""

    # PUBLIC_INTERFACE
    def evaluate(self, target: Any, guess: Any) -> Dict[str, Any]:
        """Evaluate a variant guess."""
        return {
            "feedback": evaluate_variant_guess(target, guess),
            "is_correct": _same_entity(target, guess),
            "metadata": {"engine": "hard"},
        }
