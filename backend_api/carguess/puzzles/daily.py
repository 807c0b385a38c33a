from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol

from ..exceptions import EmptyCandidatePool, PuzzleAlreadyExists
from .dates import get_date_key
from .selection import Candidate, pick_candidate

logger = logging.getLogger(__name__)

MODES = ("easy", "hard")


@dataclass(frozen=True)
class PuzzleRecord:
    """A persisted daily puzzle.

    target_variant_id is only set for hard puzzles. target_model_id is the
    underlying car model in both modes (the variant's parent for hard).
    """

    id: int
    date: str
    mode: str
    target_model_id: Optional[int]
    target_variant_id: Optional[int] = None

    @property
    def target_id(self) -> Optional[int]:
        return self.target_variant_id if self.mode == "hard" else self.target_model_id

    @property
    def model_id(self) -> Optional[int]:
        """Underlying car model, whatever the mode."""
        return self.target_model_id


class PuzzleRepository(Protocol):
    """Persistence operations the selector relies on."""

    def find_puzzle(self, date_key: str, mode: str) -> Optional[PuzzleRecord]: ...

    def list_candidates(self, mode: str) -> List[Candidate]: ...

    def create_puzzle(self, date_key: str, mode: str, candidate: Candidate) -> PuzzleRecord:
        """Insert a puzzle; raise PuzzleAlreadyExists on a (date, mode) conflict."""


def sibling_mode(mode: str) -> str:
    return "easy" if mode == "hard" else "hard"


# PUBLIC_INTERFACE
class DailyPuzzleService:
    """Resolves the puzzle of a given day, creating it on first access.

    The (date, mode) pair seeds the selection, so every caller observes the
    same target without storing a random seed.
    """

    def __init__(self, repository: PuzzleRepository):
        self.repository = repository

    def _check_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"Unknown puzzle mode: {mode!r}")

    def find_puzzle_for_date(self, date_key: str, mode: str) -> Optional[PuzzleRecord]:
        """Read-only lookup; never creates."""
        self._check_mode(mode)
        return self.repository.find_puzzle(date_key, mode)

    # PUBLIC_INTERFACE
    def get_or_create_puzzle_for_date(self, date_key: str, mode: str) -> PuzzleRecord:
        """Return the puzzle for (date_key, mode), assigning it if needed.

        Raises:
            EmptyCandidatePool: no candidates exist for the mode.
            ValueError: unknown mode.
        """
        self._check_mode(mode)
        existing = self.repository.find_puzzle(date_key, mode)
        if existing is not None:
            return existing

        pool = self.repository.list_candidates(mode)
        if not pool:
            logger.error("Cannot create %s puzzle for %s: empty candidate pool", mode, date_key)
            raise EmptyCandidatePool(mode)

        sibling = self.repository.find_puzzle(date_key, sibling_mode(mode))
        avoid_model_id = sibling.model_id if sibling is not None else None
        candidate = pick_candidate(pool, date_key, mode, avoid_model_id=avoid_model_id)

        try:
            created = self.repository.create_puzzle(date_key, mode, candidate)
        except PuzzleAlreadyExists:
            winner = self.repository.find_puzzle(date_key, mode)
            if winner is None:
                raise
            logger.warning("Lost race creating %s puzzle for %s; using puzzle #%s", mode, date_key, winner.id)
            return winner

        logger.info(
            "Created %s puzzle #%s for %s: target %s (pool=%d, avoided model=%s)",
            mode, created.id, date_key, candidate.id, len(pool), avoid_model_id,
        )
        return created

    def get_today_puzzle(self, mode: str, now: Optional[datetime] = None) -> PuzzleRecord:
        """get_or_create_puzzle_for_date for the current date key."""
        return self.get_or_create_puzzle_for_date(get_date_key(now), mode)
