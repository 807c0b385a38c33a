from __future__ import annotations

from typing import List, Optional

from django.db import IntegrityError, transaction

from .exceptions import PuzzleAlreadyExists
from .models import CarModel, CarVariant, DailyPuzzle
from .puzzles.daily import PuzzleRecord
from .puzzles.selection import Candidate


def to_record(puzzle: DailyPuzzle) -> PuzzleRecord:
    """Convert a DailyPuzzle row into the selector's value type."""
    if puzzle.mode == "hard":
        return PuzzleRecord(
            id=puzzle.id,
            date=puzzle.date,
            mode=puzzle.mode,
            target_model_id=puzzle.target_variant.model_id,
            target_variant_id=puzzle.target_variant_id,
        )
    return PuzzleRecord(id=puzzle.id, date=puzzle.date, mode=puzzle.mode, target_model_id=puzzle.target_model_id)


# PUBLIC_INTERFACE
class DjangoPuzzleRepository:
    """ORM-backed implementation of the daily puzzle repository."""

    def _queryset(self):
        return DailyPuzzle.objects.select_related("target_variant")

    def find_puzzle(self, date_key: str, mode: str) -> Optional[PuzzleRecord]:
        puzzle = self._queryset().filter(date=date_key, mode=mode).first()
        return to_record(puzzle) if puzzle is not None else None

    def get_puzzle(self, puzzle_id: int) -> Optional[PuzzleRecord]:
        puzzle = self._queryset().filter(pk=puzzle_id).first()
        return to_record(puzzle) if puzzle is not None else None

    def list_candidates(self, mode: str) -> List[Candidate]:
        if mode == "hard":
            rows = CarVariant.objects.order_by("id").values_list("id", "model_id")
            return [Candidate(id=pk, model_id=model_id) for pk, model_id in rows]
        ids = CarModel.objects.order_by("id").values_list("id", flat=True)
        return [Candidate(id=pk, model_id=pk) for pk in ids]

    def create_puzzle(self, date_key: str, mode: str, candidate: Candidate) -> PuzzleRecord:
        """Insert the puzzle row; a concurrent winner surfaces as PuzzleAlreadyExists."""
        if mode == "hard":
            targets = {"target_variant_id": candidate.id}
        else:
            targets = {"target_model_id": candidate.id}
        try:
            # Savepoint so the caller's transaction stays usable after a conflict
            with transaction.atomic():
                puzzle = DailyPuzzle.objects.create(date=date_key, mode=mode, **targets)
        except IntegrityError as exc:
            raise PuzzleAlreadyExists(date_key, mode) from exc
        return PuzzleRecord(
            id=puzzle.id,
            date=puzzle.date,
            mode=puzzle.mode,
            target_model_id=candidate.model_id,
            target_variant_id=candidate.id if mode == "hard" else None,
        )
