# File: world_explorer_app/modules/quiz/logics/session_logic.py
"""
Quiz session state machine.

    loading -> active -> answered -> active (next question) | complete
    loading -> empty  (no questions could be generated)

The runner is independent of any UI: callers drive it with ``load``,
``select_answer`` and ``advance`` (or the async ``answer`` helper, which waits
the fixed inter-question delay). Between HTTP requests it lives in the Flask
session through ``to_dict`` / ``from_dict``.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from world_explorer_app.core.defaults import get_setting
from world_explorer_app.core.signals import answer_submitted, quiz_completed

from ..config import QuizModuleDefaultConfig
from ..schemas import AnswerResult, Question

logger = logging.getLogger(__name__)


class QuizState:
    LOADING = 'loading'
    ACTIVE = 'active'
    ANSWERED = 'answered'
    COMPLETE = 'complete'
    EMPTY = 'empty'


class QuizSessionRunner:
    SESSION_KEY = 'quiz_session'

    def __init__(
        self,
        quiz_type: str = '',
        narrator: Optional[Callable[[str], Any]] = None,
        on_complete: Optional[Callable[[int, int], Any]] = None,
        advance_delay: Optional[float] = None,
    ):
        self.quiz_type = quiz_type
        self.narrator = narrator
        self.on_complete = on_complete
        if advance_delay is None:
            advance_delay = get_setting(
                'QUIZ_ADVANCE_DELAY_SECONDS', QuizModuleDefaultConfig.QUIZ_ADVANCE_DELAY_SECONDS
            )
        self.advance_delay = float(advance_delay)

        self.questions: List[Question] = []
        self.cursor = 0
        self.score = 0
        self.state = QuizState.LOADING
        self.last_answer: Optional[AnswerResult] = None
        self._completion_reported = False

    # === Lifecycle ===

    def load(self, loader: Callable[[], Iterable[Question]]) -> str:
        """Run the question loader; any exception counts as an empty batch."""
        self.state = QuizState.LOADING
        try:
            questions = list(loader() or [])
        except Exception:
            logger.exception("Question loader failed for %s", self.quiz_type or 'quiz')
            questions = []

        self.questions = questions
        self.cursor = 0
        self.score = 0
        self.last_answer = None
        self._completion_reported = False
        self.state = QuizState.ACTIVE if questions else QuizState.EMPTY
        logger.debug("Quiz '%s' loaded with %d questions", self.quiz_type, len(questions))
        return self.state

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Optional[Question]:
        if self.state not in (QuizState.ACTIVE, QuizState.ANSWERED):
            return None
        if not 0 <= self.cursor < len(self.questions):
            return None
        return self.questions[self.cursor]

    @property
    def is_last_question(self) -> bool:
        return self.cursor + 1 >= len(self.questions)

    # === Answering ===

    def select_answer(self, index: int) -> Optional[AnswerResult]:
        """
        Accept exactly one answer for the current question.

        Returns ``None`` unless the session is ``active``.
        """
        if self.state != QuizState.ACTIVE:
            return None

        question = self.current_question
        if question is None:
            self.state = QuizState.EMPTY
            return None

        is_correct = index == question.correct
        if is_correct:
            self.score += 1
            feedback = QuizModuleDefaultConfig.FEEDBACK_CORRECT
        else:
            feedback = QuizModuleDefaultConfig.FEEDBACK_INCORRECT

        self.state = QuizState.ANSWERED
        self.last_answer = AnswerResult(
            question_index=self.cursor,
            selected=index,
            correct_index=question.correct,
            is_correct=is_correct,
            score=self.score,
            feedback=feedback,
            explanation=question.explanation,
            is_last=self.is_last_question,
        )

        self._narrate(feedback)
        answer_submitted.send(
            self,
            question_index=self.cursor,
            answer_index=index,
            is_correct=is_correct,
            score=self.score,
        )
        return self.last_answer

    def advance(self) -> str:
        """Move past an answered question; the last one completes the session."""
        if self.state != QuizState.ANSWERED:
            return self.state

        if self.cursor + 1 < len(self.questions):
            self.cursor += 1
            self.last_answer = None
            self.state = QuizState.ACTIVE
        else:
            self.state = QuizState.COMPLETE
            self._report_completion()
        return self.state

    async def answer(self, index: int) -> Optional[AnswerResult]:
        """Select an answer, wait the fixed delay, then advance."""
        result = self.select_answer(index)
        if result is None:
            return None
        await asyncio.sleep(self.advance_delay)
        self.advance()
        return result

    def _report_completion(self) -> None:
        if self._completion_reported:
            return
        self._completion_reported = True

        quiz_completed.send(self, score=self.score, total=self.total, quiz_type=self.quiz_type)
        if self.on_complete is not None:
            try:
                self.on_complete(self.score, self.total)
            except Exception:
                logger.exception("Quiz completion callback failed")

    # === Speech ===

    def _narrate(self, text: str) -> None:
        if self.narrator is None:
            return
        try:
            self.narrator(text)
        except Exception:
            logger.exception("Narrator failed for quiz feedback")

    def read_question_aloud(self) -> bool:
        question = self.current_question
        if question is None:
            return False
        self._narrate(question.question)
        return True

    def result_message(self) -> str:
        if not self.questions:
            return ''
        # Half-up rounding
        percentage = int(self.score * 100 / len(self.questions) + 0.5)
        if percentage == 100:
            return "Perfect! You're a geography superstar! 🌟"
        if percentage >= 70:
            return "Excellent work! You know your geography! 🎉"
        if percentage >= 50:
            return "Good job! Keep exploring to learn more! 👍"
        return "Great try! Every explorer learns something new! 🌍"

    # === Persistence ===

    def to_dict(self) -> Dict[str, Any]:
        return {
            'quiz_type': self.quiz_type,
            'advance_delay': self.advance_delay,
            'questions': [q.to_dict() for q in self.questions],
            'cursor': self.cursor,
            'score': self.score,
            'state': self.state,
            'last_answer': self.last_answer.to_dict() if self.last_answer else None,
            'completion_reported': self._completion_reported,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        narrator: Optional[Callable[[str], Any]] = None,
        on_complete: Optional[Callable[[int, int], Any]] = None,
    ) -> "QuizSessionRunner":
        runner = cls(
            quiz_type=data.get('quiz_type', ''),
            narrator=narrator,
            on_complete=on_complete,
            advance_delay=data.get('advance_delay'),
        )
        runner.questions = [Question.from_dict(q) for q in data.get('questions', [])]
        runner.cursor = int(data.get('cursor', 0))
        runner.score = int(data.get('score', 0))
        runner.state = data.get('state', QuizState.EMPTY)
        last_answer = data.get('last_answer')
        runner.last_answer = AnswerResult(**last_answer) if last_answer else None
        runner._completion_reported = bool(data.get('completion_reported', False))
        return runner
