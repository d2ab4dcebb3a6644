"""
Collaborators around the scheduling engine: geocoding, the routine pipeline and presets.
"""

from .geocoding import Geocoder, GeminiGeocoder, MockGeocoder
from .routine import RoutineGenerationError, filter_valid_categories, generate_routine
from .presets import default_categories

__all__ = [
    "Geocoder",
    "GeminiGeocoder",
    "MockGeocoder",
    "RoutineGenerationError",
    "filter_valid_categories",
    "generate_routine",
    "default_categories",
]
