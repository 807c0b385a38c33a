from datetime import datetime, timezone as dt_timezone

from django.test import SimpleTestCase

from carguess.exceptions import EmptyCandidatePool, PuzzleAlreadyExists
from carguess.puzzles import DailyPuzzleService, PuzzleRecord
from carguess.puzzles.selection import (
    Candidate,
    deterministic_index,
    exclude_model,
    pick_candidate,
    selection_key,
    stable_hash,
)


class InMemoryPuzzleRepository:
    """Dict-backed repository recording every call."""

    def __init__(self, models=None, variants=None):
        self.models = list(models or [])
        self.variants = list(variants or [])
        self.puzzles = {}
        self.created = []

    def find_puzzle(self, date_key, mode):
        return self.puzzles.get((date_key, mode))

    def list_candidates(self, mode):
        if mode == "hard":
            return [Candidate(id=pk, model_id=model_id) for pk, model_id in self.variants]
        return [Candidate(id=pk, model_id=pk) for pk in self.models]

    def add(self, date_key, mode, candidate):
        record = PuzzleRecord(
            id=len(self.puzzles) + 100,
            date=date_key,
            mode=mode,
            target_model_id=candidate.model_id,
            target_variant_id=candidate.id if mode == "hard" else None,
        )
        self.puzzles[(date_key, mode)] = record
        return record

    def create_puzzle(self, date_key, mode, candidate):
        if (date_key, mode) in self.puzzles:
            raise PuzzleAlreadyExists(date_key, mode)
        self.created.append((date_key, mode, candidate))
        return self.add(date_key, mode, candidate)


class RacingRepository(InMemoryPuzzleRepository):
    """Another request commits its puzzle between our lookup and our insert."""

    def __init__(self, winner, **kwargs):
        super().__init__(**kwargs)
        self.winner = winner

    def create_puzzle(self, date_key, mode, candidate):
        self.add(date_key, mode, self.winner)
        return super().create_puzzle(date_key, mode, candidate)


class StableHashTests(SimpleTestCase):
    def test_known_values(self):
        self.assertEqual(stable_hash(""), 0)
        self.assertEqual(stable_hash("a"), 97)
        self.assertEqual(stable_hash("ab"), 97 * 31 + 98)

    def test_wraps_to_unsigned_32_bits(self):
        self.assertEqual(stable_hash("2025-01-02:easy"), 4115920634)
        self.assertLess(stable_hash("x" * 200), 2 ** 32)

    def test_index_in_range(self):
        for size in (1, 2, 3, 7, 100):
            self.assertIn(deterministic_index(selection_key("2025-01-01", "easy"), size), range(size))

    def test_index_rejects_empty(self):
        with self.assertRaises(ValueError):
            deterministic_index("2025-01-01:easy", 0)


class SelectionTests(SimpleTestCase):
    pool = [Candidate(3, 3), Candidate(1, 1), Candidate(2, 2)]

    def test_pool_order_does_not_matter(self):
        shuffled = [self.pool[2], self.pool[0], self.pool[1]]
        self.assertEqual(pick_candidate(self.pool, "2025-01-02", "easy"), pick_candidate(shuffled, "2025-01-02", "easy"))

    def test_exclude_model(self):
        variants = [Candidate(10, 1), Candidate(11, 2), Candidate(12, 2)]
        self.assertEqual(exclude_model(variants, 2), [Candidate(10, 1)])
        self.assertEqual(exclude_model(variants, None), variants)

    def test_exclude_model_falls_back_to_full_pool(self):
        only = [Candidate(77, 7)]
        self.assertEqual(exclude_model(only, 7), only)

    def test_anti_repeat_scenario(self):
        # "2025-01-02:easy" hashes to 2 mod 3 and 0 mod 2
        self.assertEqual(pick_candidate(self.pool, "2025-01-02", "easy"), Candidate(3, 3))
        self.assertEqual(pick_candidate(self.pool, "2025-01-02", "easy", avoid_model_id=2), Candidate(1, 1))


class DailyPuzzleServiceTests(SimpleTestCase):
    def test_returns_existing_puzzle_without_creating(self):
        repo = InMemoryPuzzleRepository(models=[1, 2])
        existing = repo.add("2025-01-01", "easy", Candidate(2, 2))
        service = DailyPuzzleService(repo)

        self.assertEqual(service.get_or_create_puzzle_for_date("2025-01-01", "easy"), existing)
        self.assertEqual(repo.created, [])

    def test_creates_easy_puzzle(self):
        repo = InMemoryPuzzleRepository(models=[2, 5, 9])
        puzzle = DailyPuzzleService(repo).get_or_create_puzzle_for_date("2025-01-02", "easy")

        self.assertEqual(puzzle.date, "2025-01-02")
        self.assertEqual(puzzle.mode, "easy")
        self.assertIsNone(puzzle.target_variant_id)
        # index 2 of [2, 5, 9]
        self.assertEqual(puzzle.target_model_id, 9)
        self.assertEqual(len(repo.created), 1)

    def test_second_call_returns_same_puzzle(self):
        repo = InMemoryPuzzleRepository(models=[1, 2, 3])
        service = DailyPuzzleService(repo)
        first = service.get_or_create_puzzle_for_date("2025-01-03", "easy")
        second = service.get_or_create_puzzle_for_date("2025-01-03", "easy")

        self.assertEqual(first, second)
        self.assertEqual(len(repo.created), 1)

    def test_selection_is_reproducible_across_instances(self):
        picks = {
            DailyPuzzleService(InMemoryPuzzleRepository(models=[1, 2, 3])).get_or_create_puzzle_for_date(
                "2025-01-03", "easy"
            ).target_id
            for _ in range(3)
        }
        self.assertEqual(len(picks), 1)

    def test_creates_hard_puzzle(self):
        repo = InMemoryPuzzleRepository(variants=[(11, 1), (12, 2)])
        puzzle = DailyPuzzleService(repo).get_or_create_puzzle_for_date("2025-01-05", "hard")

        self.assertEqual(puzzle.mode, "hard")
        # "2025-01-05:hard" hashes to 0 mod 2
        self.assertEqual(puzzle.target_variant_id, 11)
        self.assertEqual(puzzle.target_model_id, 1)

    def test_sibling_model_is_avoided(self):
        repo = InMemoryPuzzleRepository(models=[1, 2, 3])
        repo.add("2025-01-02", "hard", Candidate(20, 2))
        puzzle = DailyPuzzleService(repo).get_or_create_puzzle_for_date("2025-01-02", "easy")

        self.assertEqual(puzzle.target_model_id, 1)

    def test_sibling_is_not_created(self):
        repo = InMemoryPuzzleRepository(models=[1, 2, 3], variants=[(10, 1)])
        DailyPuzzleService(repo).get_or_create_puzzle_for_date("2025-01-02", "easy")

        self.assertIsNone(repo.find_puzzle("2025-01-02", "hard"))

    def test_easy_falls_back_when_only_sibling_model_remains(self):
        repo = InMemoryPuzzleRepository(models=[5])
        repo.add("2025-01-07", "hard", Candidate(55, 5))
        puzzle = DailyPuzzleService(repo).get_or_create_puzzle_for_date("2025-01-07", "easy")

        self.assertEqual(puzzle.target_model_id, 5)

    def test_hard_falls_back_when_only_sibling_model_remains(self):
        repo = InMemoryPuzzleRepository(variants=[(77, 7)])
        repo.add("2025-01-08", "easy", Candidate(7, 7))
        puzzle = DailyPuzzleService(repo).get_or_create_puzzle_for_date("2025-01-08", "hard")

        self.assertEqual(puzzle.target_variant_id, 77)

    def test_empty_easy_pool(self):
        service = DailyPuzzleService(InMemoryPuzzleRepository())
        with self.assertRaisesMessage(EmptyCandidatePool, "No car models available to create today's puzzle."):
            service.get_or_create_puzzle_for_date("2025-01-04", "easy")

    def test_empty_hard_pool(self):
        service = DailyPuzzleService(InMemoryPuzzleRepository(models=[1]))
        with self.assertRaisesMessage(EmptyCandidatePool, "No car variants available to create today's puzzle."):
            service.get_or_create_puzzle_for_date("2025-01-06", "hard")

    def test_losing_the_race_returns_the_winner(self):
        repo = RacingRepository(winner=Candidate(2, 2), models=[1, 2, 3])
        with self.assertLogs("carguess.puzzles.daily", level="WARNING"):
            puzzle = DailyPuzzleService(repo).get_or_create_puzzle_for_date("2025-01-02", "easy")

        self.assertEqual(puzzle.target_model_id, 2)
        self.assertEqual(repo.created, [])

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            DailyPuzzleService(InMemoryPuzzleRepository(models=[1])).get_or_create_puzzle_for_date("2025-01-01", "medium")

    def test_today_uses_canonical_date_key(self):
        repo = InMemoryPuzzleRepository(models=[1, 2, 3])
        now = datetime(2024, 1, 15, 23, 30, tzinfo=dt_timezone.utc)
        puzzle = DailyPuzzleService(repo).get_today_puzzle("easy", now=now)

        self.assertEqual(puzzle.date, "2024-01-16")
