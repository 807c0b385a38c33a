from django.urls import path
from .views import (
    health,
    puzzle_today,
    submit_guess,
    search_models,
    search_variants,
    get_modes,
)

urlpatterns = [
    path('health/', health, name='Health'),
    path('puzzle/today', puzzle_today, name='puzzle-today'),
    path('guess', submit_guess, name='guess'),
    path('search/models', search_models, name='search-models'),
    path('search/variants', search_variants, name='search-variants'),
    path('modes', get_modes, name='get-modes'),
]
