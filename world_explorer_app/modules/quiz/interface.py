# File: world_explorer_app/modules/quiz/interface.py
from typing import Any, Callable, Optional

from world_explorer_app.core.defaults import get_setting
from world_explorer_app.core.error_handlers import NotFoundError, ValidationError
from world_explorer_app.modules.geography.logics.continents import is_valid_continent
from world_explorer_app.modules.geography.services.reference_store import (
    ReferenceDataStore,
    SqlAlchemyReferenceStore,
)

from .config import QuizModuleDefaultConfig
from .engine.core import QuizGenerator
from .logics.session_logic import QuizSessionRunner


class QuizInterface:
    @staticmethod
    def resolve_count(count: Optional[int]) -> int:
        """Requested question count, defaulted and capped by configuration."""
        default = get_setting('QUIZ_DEFAULT_QUESTION_COUNT', QuizModuleDefaultConfig.QUIZ_DEFAULT_QUESTION_COUNT)
        maximum = get_setting('QUIZ_MAX_QUESTION_COUNT', QuizModuleDefaultConfig.QUIZ_MAX_QUESTION_COUNT)
        if count is None:
            count = default
        return max(1, min(int(count), int(maximum)))

    @staticmethod
    def start_session(
        mode: str,
        iso2: Optional[str] = None,
        continent: Optional[str] = None,
        count: Optional[int] = None,
        store: Optional[ReferenceDataStore] = None,
        generator: Optional[QuizGenerator] = None,
        narrator: Optional[Callable[[str], Any]] = None,
        on_complete: Optional[Callable[[int, int], Any]] = None,
    ) -> QuizSessionRunner:
        """
        Build a runner for a country, continent or random quiz and load it.

        Raises:
            ValidationError: unknown mode, missing iso2 or unknown continent.
            NotFoundError: the iso2 code matches no country.
        """
        store = store or SqlAlchemyReferenceStore()
        generator = generator or QuizGenerator(store)
        count = QuizInterface.resolve_count(count)

        if mode == 'country':
            if not iso2:
                raise ValidationError('A country quiz needs an iso2 code', errors={'iso2': 'required'})
            country = store.get_country(iso2)
            if country is None:
                raise NotFoundError(f"Country '{iso2.upper()}' not found", resource='country')
            quiz_type = f"{country.country_name} Quiz"
            loader = lambda: generator.generate_country_questions(country, count)  # noqa: E731
        elif mode == 'continent':
            if not is_valid_continent(continent):
                raise ValidationError(f"Unknown continent '{continent}'", errors={'continent': 'invalid'})
            quiz_type = f"{continent} Quiz"
            loader = lambda: generator.generate_continent_questions(continent, count)  # noqa: E731
        elif mode == 'random':
            quiz_type = "Random World Quiz"
            loader = lambda: generator.generate_random_quiz(count)  # noqa: E731
        else:
            raise ValidationError(f"Unknown quiz mode '{mode}'", errors={'mode': 'invalid'})

        runner = QuizSessionRunner(quiz_type=quiz_type, narrator=narrator, on_complete=on_complete)
        runner.load(loader)
        return runner
