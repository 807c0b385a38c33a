from django.test import SimpleTestCase

from carguess.models import CarModel, CarVariant
from carguess.puzzles import evaluate_model_guess, evaluate_variant_guess, get_engine
from carguess.puzzles.comparators import (
    MODEL_FIELDS,
    VARIANT_FIELDS,
    compare_exact,
    compare_nullable_exact,
    compare_ordered,
)

BASE_MODEL = {
    "id": 1,
    "make": "Peugeot",
    "model": "208",
    "generation": "II",
    "body_type": "hatchback",
    "country_of_origin": "France",
    "production_start_year": 2019,
}

BASE_VARIANT = {
    "id": 10,
    "fuel_type": "petrol",
    "transmission": "manual",
    "power_hp": 110,
    "engine_type": "I3",
    "displacement_cc": 1199,
    "max_speed_kmh": 190,
    "zero_to_hundred_sec": 9.6,
    "production_start_year": None,
}


def build_model(**overrides):
    return CarModel(**{**BASE_MODEL, **overrides})


def build_variant(model_overrides=None, **overrides):
    return CarVariant(model=build_model(**(model_overrides or {})), **{**BASE_VARIANT, **overrides})


class ComparisonPrimitiveTests(SimpleTestCase):
    def test_exact(self):
        self.assertEqual(compare_exact("sedan", "sedan"), "correct")
        self.assertEqual(compare_exact("sedan", "coupe"), "wrong")

    def test_nullable_exact_absence_wins_over_mismatch(self):
        self.assertEqual(compare_nullable_exact(None, "II"), "unknown")
        self.assertEqual(compare_nullable_exact("II", None), "unknown")
        self.assertEqual(compare_nullable_exact(None, None), "unknown")
        self.assertEqual(compare_nullable_exact("II", "III"), "wrong")

    def test_ordered(self):
        pairs = [
            (2020, 2018, "higher"),
            (2015, 2020, "lower"),
            (2019, 2019, "correct"),
            (-3, -7, "higher"),
            (-7, -3, "lower"),
            (8.5, 6.5, "higher"),
            (6.8, 8.2, "lower"),
            (6.1, 6.1, "correct"),
            (0, 0.0, "correct"),
        ]
        for target, guess, expected in pairs:
            with self.subTest(target=target, guess=guess):
                self.assertEqual(compare_ordered(target, guess), expected)

    def test_ordered_absent(self):
        self.assertEqual(compare_ordered(None, 5), "unknown")
        self.assertEqual(compare_ordered(5, None), "unknown")


class EvaluateModelGuessTests(SimpleTestCase):
    def test_identical_models_are_correct_everywhere(self):
        feedback = evaluate_model_guess(build_model(), build_model())
        self.assertEqual(set(feedback), {field.name for field in MODEL_FIELDS})
        for field, entry in feedback.items():
            self.assertEqual(entry["status"], "correct", field)

    def test_make_wrong_returns_target_value(self):
        feedback = evaluate_model_guess(build_model(make="Peugeot"), build_model(make="Renault"))
        self.assertEqual(feedback["make"], {"status": "wrong", "value": "Peugeot"})

    def test_generation_unknown_when_target_null(self):
        feedback = evaluate_model_guess(build_model(generation=None), build_model(generation="II"))
        self.assertEqual(feedback["generation"], {"status": "unknown", "value": None})

    def test_generation_unknown_when_guess_null(self):
        feedback = evaluate_model_guess(build_model(generation="II"), build_model(generation=None))
        self.assertEqual(feedback["generation"], {"status": "unknown", "value": "II"})

    def test_body_type_wrong(self):
        feedback = evaluate_model_guess(build_model(body_type="hatchback"), build_model(body_type="suv"))
        self.assertEqual(feedback["body_type"], {"status": "wrong", "value": "hatchback"})

    def test_start_year_higher_and_lower(self):
        higher = evaluate_model_guess(build_model(production_start_year=2020), build_model(production_start_year=2018))
        lower = evaluate_model_guess(build_model(production_start_year=2015), build_model(production_start_year=2020))
        self.assertEqual(higher["production_start_year"], {"status": "higher", "value": 2020})
        self.assertEqual(lower["production_start_year"], {"status": "lower", "value": 2015})

    def test_start_year_unknown_when_absent(self):
        feedback = evaluate_model_guess(build_model(production_start_year=None), build_model())
        self.assertEqual(feedback["production_start_year"], {"status": "unknown", "value": None})

    def test_repeatable(self):
        target, guess = build_model(), build_model(make="Renault", production_start_year=2012)
        self.assertEqual(evaluate_model_guess(target, guess), evaluate_model_guess(target, guess))


class EvaluateVariantGuessTests(SimpleTestCase):
    def test_identical_variants_are_correct_everywhere(self):
        feedback = evaluate_variant_guess(build_variant(), build_variant())
        self.assertEqual(set(feedback), {field.name for field in VARIANT_FIELDS})
        for field, entry in feedback.items():
            self.assertEqual(entry["status"], "correct", field)

    def test_model_level_fields_come_from_parent(self):
        target = build_variant(model_overrides={"make": "Peugeot", "country_of_origin": "France"})
        guess = build_variant(model_overrides={"make": "Volkswagen", "country_of_origin": "Germany"})
        feedback = evaluate_variant_guess(target, guess)
        self.assertEqual(feedback["make"], {"status": "wrong", "value": "Peugeot"})
        self.assertEqual(feedback["country_of_origin"], {"status": "wrong", "value": "France"})
        self.assertEqual(feedback["fuel_type"]["status"], "correct")

    def test_start_year_falls_back_to_model_before_comparison(self):
        target = build_variant(production_start_year=None, model_overrides={"production_start_year": 2015})
        guess = build_variant(production_start_year=2012, model_overrides={"production_start_year": 2019})
        feedback = evaluate_variant_guess(target, guess)
        self.assertEqual(feedback["production_start_year"], {"status": "higher", "value": 2015})

    def test_start_year_fallback_on_guess_side(self):
        target = build_variant(production_start_year=2021)
        guess = build_variant(production_start_year=None, model_overrides={"production_start_year": 2021})
        feedback = evaluate_variant_guess(target, guess)
        self.assertEqual(feedback["production_start_year"], {"status": "correct", "value": 2021})

    def test_power_unknown_when_target_null(self):
        for guess_power in (None, 50, 500):
            with self.subTest(guess_power=guess_power):
                feedback = evaluate_variant_guess(build_variant(power_hp=None), build_variant(power_hp=guess_power))
                self.assertEqual(feedback["power_hp"], {"status": "unknown", "value": None})

    def test_fuel_type_wrong(self):
        feedback = evaluate_variant_guess(build_variant(fuel_type="diesel"), build_variant(fuel_type="petrol"))
        self.assertEqual(feedback["fuel_type"], {"status": "wrong", "value": "diesel"})

    def test_transmission_unknown_when_guess_null(self):
        feedback = evaluate_variant_guess(build_variant(transmission="automatic"), build_variant(transmission=None))
        self.assertEqual(feedback["transmission"], {"status": "unknown", "value": "automatic"})

    def test_engine_type_unknown_when_guess_null(self):
        feedback = evaluate_variant_guess(build_variant(engine_type="V6"), build_variant(engine_type=None))
        self.assertEqual(feedback["engine_type"], {"status": "unknown", "value": "V6"})

    def test_numeric_fields(self):
        feedback = evaluate_variant_guess(
            build_variant(displacement_cc=2000, max_speed_kmh=180, zero_to_hundred_sec=8.5),
            build_variant(displacement_cc=1600, max_speed_kmh=210, zero_to_hundred_sec=6.5),
        )
        self.assertEqual(feedback["displacement_cc"], {"status": "higher", "value": 2000})
        self.assertEqual(feedback["max_speed_kmh"], {"status": "lower", "value": 180})
        self.assertEqual(feedback["zero_to_hundred_sec"], {"status": "higher", "value": 8.5})


class EngineTests(SimpleTestCase):
    def test_easy_engine_reports_correct_guess_by_id(self):
        result = get_engine("easy")().evaluate(build_model(id=3), build_model(id=3))
        self.assertTrue(result["is_correct"])
        self.assertEqual(result["metadata"], {"engine": "easy"})

    def test_hard_engine_same_fields_different_variant_is_not_correct(self):
        result = get_engine("HARD")().evaluate(build_variant(id=10), build_variant(id=11))
        self.assertFalse(result["is_correct"])
        self.assertEqual(result["feedback"]["power_hp"]["status"], "correct")

    def test_unknown_mode(self):
        with self.assertRaises(KeyError):
            get_engine("medium")
