from .core import QuizGenerator
from .selection import WeightedTemplateSelector, shuffle_question
from .templates import (
    ContinentTemplate,
    CountryTemplate,
    build_continent_catalog,
    build_country_catalog,
    landmark_template,
)

__all__ = [
    'QuizGenerator',
    'WeightedTemplateSelector',
    'shuffle_question',
    'CountryTemplate',
    'ContinentTemplate',
    'build_country_catalog',
    'build_continent_catalog',
    'landmark_template',
]
