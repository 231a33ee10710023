# File: world_explorer_app/modules/audio/routes.py
from flask import Blueprint, current_app, jsonify, request
from marshmallow import ValidationError as SchemaValidationError

from world_explorer_app.core.error_handlers import SynthesisError, ValidationError, success_response

from .interface import AudioInterface
from .schemas import TTSRequestSchema

audio_bp = Blueprint('audio', __name__)

_tts_schema = TTSRequestSchema()


@audio_bp.route('/tts', methods=['POST'])
async def text_to_speech():
    """
    Synthesize (or fetch from cache) the mp3 for a piece of text.

    Body: {"text": "...", "engine": "edge|gtts|elevenlabs", "voice": "..."}
    """
    try:
        params = _tts_schema.load(request.get_json(silent=True) or {})
    except SchemaValidationError as exc:
        raise ValidationError('Invalid request body', errors=exc.messages)

    if not params['text'].strip():
        raise ValidationError('Text is required', errors={'text': 'required'})

    current_app.logger.info("Generating speech for text: %r", params['text'][:100])
    result = await AudioInterface.generate_audio(
        params['text'],
        engine=params.get('engine'),
        voice=params.get('voice'),
    )
    if result.status == 'error':
        raise SynthesisError(result.error or 'Generation failed', engine=params.get('engine'))

    return jsonify(success_response({'url': result.url, 'status': result.status}))
