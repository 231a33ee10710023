# File: world_explorer_app/modules/quiz/schemas.py
from dataclasses import dataclass
from typing import Any, Dict, List

from marshmallow import Schema, fields, validate

DIFFICULTIES = ('easy', 'medium', 'hard')


@dataclass
class Question:
    """One multiple-choice question; ``options[correct]`` is the true answer."""
    question: str
    options: List[str]
    correct: int
    explanation: str
    category: str
    difficulty: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'question': self.question,
            'options': list(self.options),
            'correct': self.correct,
            'explanation': self.explanation,
            'category': self.category,
            'difficulty': self.difficulty,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        return cls(
            question=data['question'],
            options=list(data['options']),
            correct=int(data['correct']),
            explanation=data.get('explanation', ''),
            category=data.get('category', ''),
            difficulty=data.get('difficulty', 'easy'),
        )


@dataclass
class AnswerResult:
    question_index: int
    selected: int
    correct_index: int
    is_correct: bool
    score: int
    feedback: str
    explanation: str
    is_last: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'question_index': self.question_index,
            'selected': self.selected,
            'correct_index': self.correct_index,
            'is_correct': self.is_correct,
            'score': self.score,
            'feedback': self.feedback,
            'explanation': self.explanation,
            'is_last': self.is_last,
        }


class PublicQuestionSchema(Schema):
    """Question as shown before answering: the correct index stays server-side."""
    question = fields.String()
    options = fields.List(fields.String())
    category = fields.String()
    difficulty = fields.String()


class RevealedQuestionSchema(PublicQuestionSchema):
    correct = fields.Integer()
    explanation = fields.String()


class QuizStartSchema(Schema):
    mode = fields.String(required=True, validate=validate.OneOf(['country', 'continent', 'random']))
    iso2 = fields.String(load_default=None, validate=validate.Length(equal=2))
    continent = fields.String(load_default=None)
    count = fields.Integer(load_default=None, validate=validate.Range(min=1))


class AnswerSchema(Schema):
    answer = fields.Integer(required=True, validate=validate.Range(min=0, max=3))
