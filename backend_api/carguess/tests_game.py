from django.core.management import call_command
from django.urls import reverse
from rest_framework.test import APITestCase

from carguess.labels import format_model_label, format_variant_label
from carguess.models import CarModel, CarVariant, DailyPuzzle
from carguess.puzzles import get_date_key
from carguess.puzzles.dates import shift_date_key
from carguess.seed_utils import ensure_seed_cars


class GameFlowTests(APITestCase):
    def setUp(self):
        self.peugeot = CarModel.objects.create(
            make="Peugeot", model="208", generation="II", body_type="hatchback",
            country_of_origin="France", production_start_year=2019,
        )
        self.golf = CarModel.objects.create(
            make="Volkswagen", model="Golf", generation="Mk7", body_type="hatchback",
            country_of_origin="Germany", production_start_year=2012,
        )
        self.e208 = CarVariant.objects.create(
            model=self.peugeot, fuel_type="electric", transmission="automatic", power_hp=136,
            max_speed_kmh=150, zero_to_hundred_sec=8.1, production_start_year=2020,
        )
        self.gti = CarVariant.objects.create(
            model=self.golf, fuel_type="petrol", transmission="manual", engine_type="I4",
            displacement_cc=1984, power_hp=230, max_speed_kmh=250, zero_to_hundred_sec=6.4,
        )

    def _today(self, mode="easy"):
        resp = self.client.get(reverse("puzzle-today"), {"mode": mode})
        self.assertEqual(resp.status_code, 200)
        return resp.json()

    def _guess(self, puzzle_id, guess_id, mode="easy"):
        url = f"{reverse('guess')}?mode={mode}"
        return self.client.post(url, {"puzzle_id": puzzle_id, "guess_id": guess_id}, format="json")

    def test_today_puzzle(self):
        data = self._today()
        self.assertEqual(data["today"]["date"], get_date_key())
        self.assertEqual(data["today"]["mode"], "easy")
        self.assertEqual(data["today"]["max_attempts"], 10)
        self.assertIsNone(data["yesterday"])

    def test_today_puzzle_is_stable(self):
        first = self._today("hard")
        second = self._today("HARD")
        self.assertEqual(first["today"]["puzzle_id"], second["today"]["puzzle_id"])
        self.assertEqual(DailyPuzzle.objects.filter(mode="hard").count(), 1)

    def test_yesterday_label_is_revealed(self):
        yesterday = shift_date_key(get_date_key(), -1)
        DailyPuzzle.objects.create(date=yesterday, mode="hard", target_variant=self.gti)
        data = self._today("hard")
        self.assertEqual(
            data["yesterday"],
            {"date": yesterday, "mode": "hard", "label": format_variant_label(self.gti)},
        )

    def test_invalid_mode(self):
        resp = self.client.get(reverse("puzzle-today"), {"mode": "medium"})
        self.assertEqual(resp.status_code, 400)

    def test_empty_catalog(self):
        CarVariant.objects.all().delete()
        resp = self.client.get(reverse("puzzle-today"), {"mode": "hard"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json()["error"], "No car variants available to create today's puzzle.")

    def test_guess_and_win(self):
        puzzle_id = self._today()["today"]["puzzle_id"]
        target_id = DailyPuzzle.objects.get(pk=puzzle_id).target_model_id

        resp = self._guess(puzzle_id, target_id)
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertTrue(data["is_correct"])
        self.assertEqual({entry["status"] for entry in data["feedback"].values()}, {"correct"})
        self.assertEqual(data["guess"]["id"], target_id)

    def test_wrong_guess_feedback(self):
        puzzle = DailyPuzzle.objects.create(date=get_date_key(), mode="easy", target_model=self.peugeot)
        data = self._guess(puzzle.id, self.golf.id).json()
        self.assertFalse(data["is_correct"])
        self.assertEqual(data["feedback"]["make"], {"status": "wrong", "value": "Peugeot"})
        self.assertEqual(data["feedback"]["body_type"], {"status": "correct", "value": "hatchback"})
        self.assertEqual(data["feedback"]["production_start_year"], {"status": "higher", "value": 2019})
        self.assertEqual(data["guess"]["label"], format_model_label(self.golf))

    def test_hard_guess_feedback(self):
        puzzle = DailyPuzzle.objects.create(date=get_date_key(), mode="hard", target_variant=self.e208)
        resp = self._guess(puzzle.id, self.gti.id, mode="hard")
        self.assertEqual(resp.status_code, 200)
        feedback = resp.json()["feedback"]
        self.assertEqual(feedback["fuel_type"], {"status": "wrong", "value": "electric"})
        self.assertEqual(feedback["engine_type"], {"status": "unknown", "value": None})
        self.assertEqual(feedback["power_hp"], {"status": "lower", "value": 136})
        self.assertEqual(feedback["zero_to_hundred_sec"], {"status": "higher", "value": 8.1})
        # 2020 (variant) vs 2012 (Golf fallback)
        self.assertEqual(feedback["production_start_year"], {"status": "higher", "value": 2020})

    def test_unknown_puzzle(self):
        resp = self._guess(9999, self.golf.id)
        self.assertEqual(resp.status_code, 404)

    def test_unknown_guess(self):
        puzzle_id = self._today()["today"]["puzzle_id"]
        resp = self._guess(puzzle_id, 9999)
        self.assertEqual(resp.status_code, 404)

    def test_mode_mismatch(self):
        puzzle_id = self._today("easy")["today"]["puzzle_id"]
        resp = self._guess(puzzle_id, self.gti.id, mode="hard")
        self.assertEqual(resp.status_code, 412)

    def test_stale_puzzle(self):
        puzzle = DailyPuzzle.objects.create(date="2000-01-01", mode="easy", target_model=self.golf)
        resp = self._guess(puzzle.id, self.golf.id)
        self.assertEqual(resp.status_code, 412)

    def test_invalid_guess_body(self):
        resp = self._guess(0, "abc")
        self.assertEqual(resp.status_code, 400)

    def test_search_models(self):
        resp = self.client.get(reverse("search-models"), {"q": "golf"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [{"id": self.golf.id, "label": "Volkswagen Golf (Mk7) - Germany - 2012"}])

    def test_search_variants_by_keyword(self):
        resp = self.client.get(reverse("search-variants"), {"q": "ev"})
        self.assertEqual([item["id"] for item in resp.json()], [self.e208.id])
        self.assertEqual(resp.json()[0]["label"], "Peugeot 208 (II) 136hp Electric Auto - 2020")

    def test_search_variants_by_power(self):
        resp = self.client.get(reverse("search-variants"), {"q": "230"})
        self.assertEqual(resp.json(), [{"id": self.gti.id, "label": "Volkswagen Golf (Mk7) I4 2 230hp Petrol Manual - 2012"}])

    def test_search_requires_query(self):
        resp = self.client.get(reverse("search-models"))
        self.assertEqual(resp.status_code, 400)

    def test_modes(self):
        resp = self.client.get(reverse("get-modes"))
        self.assertEqual(resp.json(), ["easy", "hard"])


class SeedTests(APITestCase):
    def test_seed_is_idempotent(self):
        inserted = ensure_seed_cars()
        self.assertGreater(inserted, 0)
        self.assertEqual(ensure_seed_cars(), 0)
        self.assertTrue(CarVariant.objects.exists())

    def test_seed_command_then_play(self):
        call_command("seed_cars", verbosity=0)
        data = self.client.get(reverse("puzzle-today"), {"mode": "hard"}).json()
        self.assertIsNotNone(data["today"]["puzzle_id"])
