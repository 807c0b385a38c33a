from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

_HASH_MULTIPLIER = 31
_HASH_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class Candidate:
    """A selectable puzzle target.

    For easy mode id and model_id are both the car model id; for hard mode id
    is the variant id and model_id its owning model.
    """

    id: int
    model_id: int


def stable_hash(key: str) -> int:
    """Unsigned 32-bit polynomial rolling hash over the UTF-8 bytes of key.

    Independent of PYTHONHASHSEED, so the value is identical across processes
    and hosts.
    """
    value = 0
    for byte in key.encode("utf-8"):
        value = (value * _HASH_MULTIPLIER + byte) & _HASH_MASK
    return value


def selection_key(date_key: str, mode: str) -> str:
    """Seed string for a (date, mode) pair."""
    return f"{date_key}:{mode}"


def deterministic_index(key: str, size: int) -> int:
    """Map key onto [0, size)."""
    if size <= 0:
        raise ValueError("size must be positive")
    return stable_hash(key) % size


def sort_pool(pool: Sequence[Candidate]) -> List[Candidate]:
    """Stable ascending order by id."""
    return sorted(pool, key=lambda c: c.id)


def exclude_model(pool: Sequence[Candidate], model_id: Optional[int]) -> List[Candidate]:
    """Drop candidates belonging to model_id.

    Falls back to the unfiltered pool when every candidate belongs to that
    model, so the filter never empties a non-empty pool.
    """
    if model_id is None:
        return list(pool)
    filtered = [c for c in pool if c.model_id != model_id]
    return filtered or list(pool)


# PUBLIC_INTERFACE
def pick_candidate(pool: Sequence[Candidate], date_key: str, mode: str,
                   avoid_model_id: Optional[int] = None) -> Candidate:
    """Deterministically choose the target for (date_key, mode).

    Parameters:
        pool: every candidate for the mode (order does not matter).
        date_key: calendar date in YYYY-MM-DD form.
        mode: "easy" or "hard".
        avoid_model_id: model already used by the sibling mode today, if any.

    Raises:
        ValueError: if pool is empty.
    """
    ordered = exclude_model(sort_pool(pool), avoid_model_id)
    if not ordered:
        raise ValueError("Cannot pick from an empty candidate pool.")
    return ordered[deterministic_index(selection_key(date_key, mode), len(ordered))]
