from django.test import TestCase

from carguess.exceptions import PuzzleAlreadyExists
from carguess.models import CarModel, CarVariant, DailyPuzzle
from carguess.puzzles import DailyPuzzleService
from carguess.puzzles.selection import Candidate
from carguess.repositories import DjangoPuzzleRepository


def make_model(make, model, year=2015, **extra):
    return CarModel.objects.create(
        make=make, model=model, body_type="hatchback", country_of_origin="France",
        production_start_year=year, **extra
    )


class DjangoPuzzleRepositoryTests(TestCase):
    def setUp(self):
        self.clio = make_model("Renault", "Clio")
        self.golf = make_model("Volkswagen", "Golf")
        self.clio_dci = CarVariant.objects.create(model=self.clio, fuel_type="diesel", power_hp=90)
        self.golf_gti = CarVariant.objects.create(model=self.golf, fuel_type="petrol", power_hp=230)
        self.repo = DjangoPuzzleRepository()

    def test_candidates_are_sorted_by_id(self):
        self.assertEqual(
            self.repo.list_candidates("easy"),
            [Candidate(self.clio.id, self.clio.id), Candidate(self.golf.id, self.golf.id)],
        )
        self.assertEqual(
            self.repo.list_candidates("hard"),
            [Candidate(self.clio_dci.id, self.clio.id), Candidate(self.golf_gti.id, self.golf.id)],
        )

    def test_hard_record_carries_parent_model(self):
        self.repo.create_puzzle("2025-01-01", "hard", Candidate(self.golf_gti.id, self.golf.id))
        record = self.repo.find_puzzle("2025-01-01", "hard")
        self.assertEqual(record.target_variant_id, self.golf_gti.id)
        self.assertEqual(record.target_model_id, self.golf.id)
        self.assertEqual(record.target_id, self.golf_gti.id)

    def test_duplicate_insert_raises_conflict(self):
        self.repo.create_puzzle("2025-01-01", "easy", Candidate(self.clio.id, self.clio.id))
        with self.assertRaises(PuzzleAlreadyExists):
            self.repo.create_puzzle("2025-01-01", "easy", Candidate(self.golf.id, self.golf.id))
        # Transaction still usable after the conflict
        self.assertEqual(DailyPuzzle.objects.filter(date="2025-01-01").count(), 1)

    def test_get_puzzle_unknown(self):
        self.assertIsNone(self.repo.get_puzzle(999))

    def test_service_persists_once(self):
        service = DailyPuzzleService(self.repo)
        first = service.get_or_create_puzzle_for_date("2025-01-02", "easy")
        second = service.get_or_create_puzzle_for_date("2025-01-02", "easy")
        self.assertEqual(first.id, second.id)
        self.assertEqual(DailyPuzzle.objects.count(), 1)

    def test_both_modes_avoid_the_same_car(self):
        service = DailyPuzzleService(self.repo)
        easy = service.get_or_create_puzzle_for_date("2025-01-02", "easy")
        hard = service.get_or_create_puzzle_for_date("2025-01-02", "hard")
        self.assertNotEqual(easy.model_id, hard.model_id)

    def test_race_recovery_against_database(self):
        winner = DailyPuzzle.objects.create(date="2025-01-03", mode="easy", target_model=self.golf)

        class StaleRepository(DjangoPuzzleRepository):
            calls = 0

            def find_puzzle(self, date_key, mode):
                # First lookup happens before the competing insert commits
                self.calls += 1
                if self.calls == 1:
                    return None
                return super().find_puzzle(date_key, mode)

        puzzle = DailyPuzzleService(StaleRepository()).get_or_create_puzzle_for_date("2025-01-03", "easy")
        self.assertEqual(puzzle.id, winner.id)
        self.assertEqual(puzzle.target_model_id, self.golf.id)

    def test_puzzle_row_requires_target_matching_mode(self):
        with self.assertRaises(ValueError):
            DailyPuzzle.objects.create(date="2025-01-04", mode="hard", target_model=self.clio)
