"""Tests for QuizGenerator against the demo reference data."""

import logging
import random

from world_explorer_app.modules.geography.services.reference_store import InMemoryReferenceStore
from world_explorer_app.modules.quiz.engine.core import QuizGenerator


class FailingStore(InMemoryReferenceStore):
    def list_countries(self, **kwargs):
        raise RuntimeError("database is locked")


def _assert_well_formed(questions):
    for question in questions:
        assert len(question.options) == 4
        assert 0 <= question.correct < 4
        assert question.difficulty in ('easy', 'medium', 'hard')


class TestCountryQuestions:

    def test_catalog_is_exhausted_without_repeats(self, memory_store, japan):
        generator = QuizGenerator(memory_store, rng=random.Random(11))
        questions = generator.generate_country_questions(japan, 20)

        # Seven base templates plus the landmark one
        assert len(questions) == 8
        assert len({q.question for q in questions}) == 8
        assert any(q.category == 'Landmarks' for q in questions)
        _assert_well_formed(questions)

    def test_length_is_bounded_by_count(self, memory_store, japan):
        generator = QuizGenerator(memory_store, rng=random.Random(2))
        for count in range(0, 6):
            assert len(generator.generate_country_questions(japan, count)) == count

    def test_capital_question_uses_sibling_then_other_continents(self, memory_store, japan):
        generator = QuizGenerator(memory_store, rng=random.Random(4))
        questions = generator.generate_country_questions(japan, 20)
        capital = next(q for q in questions if q.question == 'What is the capital of Japan?')

        assert capital.options[capital.correct] == 'Tokyo'
        assert sorted(capital.options) == sorted(['Tokyo', 'New Delhi', 'Washington D.C.', 'Ottawa'])

    def test_country_without_landmark_has_seven_templates(self, memory_store):
        store = InMemoryReferenceStore(memory_store.list_countries(), [])
        generator = QuizGenerator(store, rng=random.Random(0))

        questions = generator.generate_country_questions(store.get_country('FR'), 20)
        assert len(questions) == 7

    def test_same_seed_same_quiz(self, memory_store, japan):
        first = QuizGenerator(memory_store, rng=random.Random(99)).generate_country_questions(japan, 5)
        second = QuizGenerator(memory_store, rng=random.Random(99)).generate_country_questions(japan, 5)
        assert [q.to_dict() for q in first] == [q.to_dict() for q in second]

    def test_store_failure_returns_empty(self, japan, caplog):
        generator = QuizGenerator(FailingStore())
        with caplog.at_level(logging.ERROR):
            assert generator.generate_country_questions(japan, 5) == []
        assert 'Error generating country questions' in caplog.text


class TestContinentQuestions:

    def test_unknown_continent_is_empty(self, memory_store):
        assert QuizGenerator(memory_store).generate_continent_questions('Atlantis', 5) == []

    def test_continent_questions_are_bounded(self, memory_store):
        generator = QuizGenerator(memory_store, rng=random.Random(8))
        questions = generator.generate_continent_questions('Europe', 10)

        assert len(questions) == 4
        assert len({q.question for q in questions}) == 4
        _assert_well_formed(questions)

    def test_member_question_names_a_real_member(self, memory_store):
        generator = QuizGenerator(memory_store, rng=random.Random(1))
        questions = generator.generate_continent_questions('Europe', 4)
        member = next(q for q in questions if q.question == 'Which of these countries is located in Europe?')

        assert member.options[member.correct] in {'France', 'Germany', 'United Kingdom'}

    def test_store_failure_returns_empty(self):
        assert QuizGenerator(FailingStore()).generate_continent_questions('Asia', 5) == []


class TestRandomQuiz:

    def test_random_quiz_mixes_both_scopes(self, memory_store):
        for seed in range(10):
            questions = QuizGenerator(memory_store, rng=random.Random(seed)).generate_random_quiz(5)
            assert len(questions) == 5
            _assert_well_formed(questions)

    def test_random_quiz_on_empty_store(self):
        assert QuizGenerator(InMemoryReferenceStore()).generate_random_quiz(5) == []

    def test_random_quiz_store_failure(self):
        assert QuizGenerator(FailingStore()).generate_random_quiz(5) == []
