from django.contrib import admin

from .models import CarModel, CarVariant, DailyPuzzle


class CarVariantInline(admin.TabularInline):
    model = CarVariant
    extra = 0
    fields = ("fuel_type", "transmission", "engine_type", "displacement_cc", "power_hp", "production_start_year")


@admin.register(CarModel)
class CarModelAdmin(admin.ModelAdmin):
    list_display = ("make", "model", "generation", "body_type", "country_of_origin", "production_start_year")
    list_filter = ("body_type", "country_of_origin")
    search_fields = ("make", "model", "generation")
    ordering = ("make", "model", "production_start_year")
    inlines = [CarVariantInline]


@admin.register(CarVariant)
class CarVariantAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "model",
        "fuel_type",
        "transmission",
        "engine_type",
        "displacement_cc",
        "power_hp",
        "max_speed_kmh",
        "zero_to_hundred_sec",
        "production_start_year",
    )
    list_filter = ("fuel_type", "transmission")
    search_fields = ("model__make", "model__model", "engine_type")
    list_select_related = ("model",)


@admin.register(DailyPuzzle)
class DailyPuzzleAdmin(admin.ModelAdmin):
    list_display = ("date", "mode", "target_model", "target_variant", "created_at")
    list_filter = ("mode",)
    search_fields = ("date",)
    ordering = ("-date", "mode")
    # Puzzles are immutable once assigned
    readonly_fields = ("date", "mode", "target_model", "target_variant", "created_at", "updated_at")
