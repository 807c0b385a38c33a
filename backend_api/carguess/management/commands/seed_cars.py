from django.core.management.base import BaseCommand

from carguess.models import CarModel, CarVariant
from carguess.seed_utils import ensure_seed_cars


class Command(BaseCommand):
    help = "Seed a minimal playable car catalog if the car model table is empty."

    def handle(self, *args, **options):
        # PUBLIC_INTERFACE
        # This command is idempotent and safe to run multiple times.
        count_before = CarModel.objects.count()
        if count_before > 0:
            self.stdout.write(self.style.WARNING(f"Car models already present: {count_before}. No action taken."))
            return

        inserted = ensure_seed_cars()
        self.stdout.write(
            self.style.SUCCESS(f"Seeded {inserted} car models and {CarVariant.objects.count()} variants.")
        )
