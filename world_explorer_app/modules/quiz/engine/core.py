# File: world_explorer_app/modules/quiz/engine/core.py
# QuizGenerator - binds question templates to reference data

import logging
import math
import random
from typing import Callable, List, Optional, Sequence

from world_explorer_app.models.geography import CONTINENTS
from world_explorer_app.modules.geography.schemas import CountryDTO
from world_explorer_app.modules.geography.services.reference_store import ReferenceDataStore

from ..config import QuizModuleDefaultConfig
from ..schemas import Question
from .selection import WeightedTemplateSelector, shuffle_question
from .templates import build_continent_catalog, build_country_catalog

logger = logging.getLogger(__name__)


class QuizGenerator:
    """
    Builds bounded, shuffled question sequences from the reference data.

    Data shortages shrink the result instead of raising; store errors are
    logged and yield an empty list.
    """

    def __init__(
        self,
        store: ReferenceDataStore,
        rng: Optional[random.Random] = None,
        selector: Optional[WeightedTemplateSelector] = None,
    ):
        self.store = store
        self.rng = rng or random.Random()
        self.selector = selector or WeightedTemplateSelector(self.rng)

    def generate_country_questions(self, country: CountryDTO, count: int = 5) -> List[Question]:
        if count <= 0:
            return []
        try:
            same_continent = self.store.list_countries(
                continent=country.continent,
                exclude_iso2=country.iso2,
                limit=QuizModuleDefaultConfig.SAME_CONTINENT_LIMIT,
            )
            other_continents = self.store.list_countries(
                exclude_continent=country.continent,
                limit=QuizModuleDefaultConfig.OTHER_CONTINENT_LIMIT,
            )
            pois = self.store.list_pois(country.iso2)
        except Exception:
            logger.exception("Error generating country questions for %s", getattr(country, 'iso2', country))
            return []

        distractors = list(same_continent) + list(other_continents)
        catalog = build_country_catalog(pois)
        return self._build(catalog, count, lambda template: template.render(country, distractors))

    def generate_continent_questions(self, continent: str, count: int = 5) -> List[Question]:
        if count <= 0:
            return []
        try:
            countries = self.store.list_countries(
                continent=continent,
                limit=QuizModuleDefaultConfig.CONTINENT_QUIZ_LIMIT,
            )
        except Exception:
            logger.exception("Error generating continent questions for %s", continent)
            return []

        if not countries:
            logger.info("No countries found for continent %s", continent)
            return []

        members = list(countries)
        self.rng.shuffle(members)
        catalog = build_continent_catalog()
        return self._build(catalog, count, lambda template: template.render(continent, members))

    def generate_random_quiz(self, count: int = 5) -> List[Question]:
        """
        Mix ``ceil(count/2)`` questions about a random country with
        ``floor(count/2)`` about a random continent. The continent is drawn
        independently of the chosen country.
        """
        if count <= 0:
            return []
        try:
            pool = self.store.list_countries(limit=QuizModuleDefaultConfig.RANDOM_QUIZ_POOL_LIMIT)
        except Exception:
            logger.exception("Error generating random quiz")
            return []

        if not pool:
            return []

        country = self.rng.choice(pool)
        continent = self.rng.choice(CONTINENTS)
        questions = self.generate_country_questions(country, math.ceil(count / 2))
        questions += self.generate_continent_questions(continent, count // 2)
        return questions[:count]

    def _build(self, catalog: Sequence, count: int, render: Callable) -> List[Question]:
        questions = []
        for index in self.selector.select(catalog, count):
            questions.append(shuffle_question(render(catalog[index]), self.rng))
        return questions
