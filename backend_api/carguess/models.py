from __future__ import annotations

from typing import Optional

from django.db import models

from .puzzles.comparators import effective_start_year as _effective_start_year


# PUBLIC_INTERFACE
class TimeStampedModel(models.Model):
    """Abstract base model providing created/updated timestamps.

    Notes:
        Keep this abstract model free of any logic that would access the Django
        app registry or execute queries at module import time.
    """
    created_at = models.DateTimeField(auto_now_add=True, help_text="Time when the record was created.")
    updated_at = models.DateTimeField(auto_now=True, help_text="Time when the record was last updated.")

    class Meta:
        abstract = True


# PUBLIC_INTERFACE
class CarModel(TimeStampedModel):
    """A car model (make + model + generation). The easy-mode answer.

    Fields:
    - make, model: manufacturer and model name
    - generation: optional generation code (e.g. "Mk7", "B9")
    - body_type: body style identifier
    - country_of_origin: manufacturer's country
    - production_start_year / production_end_year: production window
    """
    BODY_TYPE_CHOICES = (
        ("hatchback", "Hatchback"),
        ("sedan", "Sedan"),
        ("suv", "SUV"),
        ("coupe", "Coupe"),
        ("convertible", "Convertible"),
        ("wagon", "Wagon"),
        ("minivan", "Minivan"),
        ("pickup", "Pickup"),
    )

    make = models.CharField(max_length=64, db_index=True)
    model = models.CharField(max_length=64, db_index=True)
    generation = models.CharField(max_length=32, null=True, blank=True)
    body_type = models.CharField(max_length=16, choices=BODY_TYPE_CHOICES)
    country_of_origin = models.CharField(max_length=64)
    production_start_year = models.PositiveSmallIntegerField(help_text="First production year.")
    production_end_year = models.PositiveSmallIntegerField(null=True, blank=True, help_text="Last production year, if ended.")

    class Meta:
        ordering = ["make", "model", "production_start_year"]
        verbose_name = "Car model"
        verbose_name_plural = "Car models"

    def __str__(self) -> str:  # pragma: no cover
        generation = f" ({self.generation})" if self.generation else ""
        return f"{self.make} {self.model}{generation}"


# PUBLIC_INTERFACE
class CarVariant(TimeStampedModel):
    """A specific trim of a CarModel. The hard-mode answer.

    Every performance field is optional. production_start_year falls back to
    the parent model's value when unset (see effective_start_year).
    """
    FUEL_TYPE_CHOICES = (
        ("petrol", "Petrol"),
        ("diesel", "Diesel"),
        ("electric", "Electric"),
        ("hybrid", "Hybrid"),
    )
    TRANSMISSION_CHOICES = (
        ("manual", "Manual"),
        ("automatic", "Automatic"),
    )

    model = models.ForeignKey(CarModel, on_delete=models.PROTECT, related_name="variants")
    fuel_type = models.CharField(max_length=16, choices=FUEL_TYPE_CHOICES, null=True, blank=True)
    transmission = models.CharField(max_length=16, choices=TRANSMISSION_CHOICES, null=True, blank=True)
    power_hp = models.PositiveIntegerField(null=True, blank=True)
    engine_type = models.CharField(max_length=32, null=True, blank=True, help_text="Engine layout, e.g. I4, V6.")
    displacement_cc = models.PositiveIntegerField(null=True, blank=True)
    max_speed_kmh = models.PositiveIntegerField(null=True, blank=True)
    zero_to_hundred_sec = models.FloatField(null=True, blank=True, help_text="0-100 km/h time in seconds.")
    production_start_year = models.PositiveSmallIntegerField(null=True, blank=True)
    production_end_year = models.PositiveSmallIntegerField(null=True, blank=True)

    class Meta:
        ordering = ["id"]
        verbose_name = "Car variant"
        verbose_name_plural = "Car variants"

    @property
    def effective_start_year(self) -> Optional[int]:
        return _effective_start_year(self)

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.model} #{self.pk}"


# PUBLIC_INTERFACE
class DailyPuzzle(TimeStampedModel):
    """The answer of a given day for one mode.

    Fields:
    - date: YYYY-MM-DD key in the puzzle time zone
    - mode: easy (target_model) or hard (target_variant)

    One row per (date, mode); rows are created lazily and never updated.
    """
    MODE_CHOICES = (
        ("easy", "Easy"),
        ("hard", "Hard"),
    )

    date = models.CharField(max_length=10, db_index=True, help_text="Date key (YYYY-MM-DD).")
    mode = models.CharField(max_length=8, choices=MODE_CHOICES)
    target_model = models.ForeignKey(
        CarModel, on_delete=models.PROTECT, null=True, blank=True, related_name="daily_puzzles"
    )
    target_variant = models.ForeignKey(
        CarVariant, on_delete=models.PROTECT, null=True, blank=True, related_name="daily_puzzles"
    )

    class Meta:
        ordering = ["-date", "mode"]
        constraints = [
            models.UniqueConstraint(fields=["date", "mode"], name="unique_daily_puzzle_date_mode"),
        ]
        verbose_name = "Daily puzzle"
        verbose_name_plural = "Daily puzzles"

    def save(self, *args, **kwargs):
        # Exactly one target, matching the mode
        if self.mode == "easy":
            valid = self.target_model_id is not None and self.target_variant_id is None
        else:
            valid = self.target_variant_id is not None and self.target_model_id is None
        if not valid:
            raise ValueError(f"A {self.mode} puzzle needs exactly one {self.mode} target.")
        super().save(*args, **kwargs)

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.date} [{self.mode}]"
