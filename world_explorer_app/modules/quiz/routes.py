# File: world_explorer_app/modules/quiz/routes.py
"""JSON API driving one quiz session per browser session."""

from flask import Blueprint, current_app, jsonify, request, session
from marshmallow import ValidationError as SchemaValidationError

from world_explorer_app.core.error_handlers import (
    NotFoundError,
    QuizStateError,
    ValidationError,
    success_response,
)

from .config import QuizModuleDefaultConfig
from .interface import QuizInterface
from .logics.session_logic import QuizSessionRunner, QuizState
from .schemas import AnswerSchema, PublicQuestionSchema, QuizStartSchema, RevealedQuestionSchema

quiz_bp = Blueprint('quiz', __name__)

_start_schema = QuizStartSchema()
_answer_schema = AnswerSchema()
_public_question = PublicQuestionSchema()
_revealed_question = RevealedQuestionSchema()


def _load_payload(schema):
    try:
        return schema.load(request.get_json(silent=True) or {})
    except SchemaValidationError as exc:
        raise ValidationError('Invalid request body', errors=exc.messages)


def _get_runner() -> QuizSessionRunner:
    data = session.get(QuizSessionRunner.SESSION_KEY)
    if not data:
        raise NotFoundError('No quiz in progress', resource='quiz_session')
    return QuizSessionRunner.from_dict(data)


def _save_runner(runner: QuizSessionRunner) -> None:
    session[QuizSessionRunner.SESSION_KEY] = runner.to_dict()
    session.modified = True


def _state_payload(runner: QuizSessionRunner) -> dict:
    payload = {
        'quiz_type': runner.quiz_type,
        'state': runner.state,
        'score': runner.score,
        'total': runner.total,
        'index': runner.cursor,
    }
    question = runner.current_question
    if question is not None:
        schema = _revealed_question if runner.state == QuizState.ANSWERED else _public_question
        payload['question'] = schema.dump(question)
    if runner.state == QuizState.ANSWERED and runner.last_answer is not None:
        payload['answer'] = runner.last_answer.to_dict()
    if runner.state == QuizState.COMPLETE:
        payload['message'] = runner.result_message()
    if runner.state == QuizState.EMPTY:
        payload['message'] = 'No questions available'
    return payload


@quiz_bp.route('/modes', methods=['GET'])
def list_modes():
    return jsonify(success_response(QuizModuleDefaultConfig.QUIZ_MODES))


@quiz_bp.route('/start', methods=['POST'])
def start_quiz():
    params = _load_payload(_start_schema)
    runner = QuizInterface.start_session(
        params['mode'],
        iso2=params.get('iso2'),
        continent=params.get('continent'),
        count=params.get('count'),
    )
    _save_runner(runner)
    current_app.logger.info("Started %s with %d questions", runner.quiz_type, runner.total)
    return jsonify(success_response(_state_payload(runner)))


@quiz_bp.route('/session', methods=['GET'])
def get_session():
    return jsonify(success_response(_state_payload(_get_runner())))


@quiz_bp.route('/answer', methods=['POST'])
def submit_answer():
    params = _load_payload(_answer_schema)
    runner = _get_runner()
    result = runner.select_answer(params['answer'])
    if result is None:
        raise QuizStateError('This quiz is not waiting for an answer', state=runner.state)

    _save_runner(runner)
    payload = _state_payload(runner)
    payload['advance_after_seconds'] = runner.advance_delay
    return jsonify(success_response(payload))


@quiz_bp.route('/next', methods=['POST'])
def next_question():
    runner = _get_runner()
    if runner.state != QuizState.ANSWERED:
        raise QuizStateError('Answer the current question first', state=runner.state)

    runner.advance()
    _save_runner(runner)
    if runner.state == QuizState.COMPLETE:
        current_app.logger.info("%s finished: %d/%d", runner.quiz_type, runner.score, runner.total)
    return jsonify(success_response(_state_payload(runner)))


@quiz_bp.route('/exit', methods=['POST'])
def exit_quiz():
    session.pop(QuizSessionRunner.SESSION_KEY, None)
    return jsonify(success_response(message='Quiz ended'))
