import os
from typing import Optional

from flask import current_app

from world_explorer_app.core.defaults import get_setting
from world_explorer_app.core.error_handlers import SynthesisError

from ..config import AudioModuleDefaultConfig
from ..engines.edge import EdgeEngine
from ..engines.elevenlabs import ElevenLabsEngine
from ..engines.gtts_engine import GTTSEngine
from ..logics.audio_logic import generate_hash_name, get_storage_path
from ..schemas import AudioClip, AudioRequestDTO, VoiceSettings


class AudioService:
    """
    Centralized Audio Service for World Explorer.
    Handles Text-to-Speech generation, caching, and storage management.
    Requires an application context for configuration and paths.
    """

    # Engine Registry
    _ENGINES = {
        'edge': EdgeEngine,
        'gtts': GTTSEngine,
        'elevenlabs': ElevenLabsEngine,
    }

    @classmethod
    def default_voice(cls, engine: str) -> Optional[str]:
        if engine == 'edge':
            return get_setting('AUDIO_DEFAULT_VOICE_EDGE', AudioModuleDefaultConfig.AUDIO_DEFAULT_VOICE_EDGE)
        if engine == 'gtts':
            return get_setting('AUDIO_DEFAULT_VOICE_GTTS', AudioModuleDefaultConfig.AUDIO_DEFAULT_VOICE_GTTS)
        if engine == 'elevenlabs':
            return get_setting('ELEVENLABS_VOICE_ID', AudioModuleDefaultConfig.ELEVENLABS_VOICE_ID)
        return None

    @classmethod
    async def get_audio(cls, request_dto: AudioRequestDTO) -> dict:
        """
        Get audio for the given text. Returns existing file or generates new one.

        Returns a dict with ``status`` ('exists', 'generated' or 'error') plus
        ``physical_path`` and ``url`` on success or ``error`` on failure.
        """
        text = (request_dto.text or '').strip()
        if not text:
            return {'error': 'Text is required', 'status': 'error'}

        engine = request_dto.engine or get_setting(
            'AUDIO_DEFAULT_ENGINE', AudioModuleDefaultConfig.AUDIO_DEFAULT_ENGINE
        )
        engine_cls = cls._ENGINES.get(engine)
        if not engine_cls:
            return {'error': f'Unknown engine: {engine}', 'status': 'error'}

        voice = request_dto.voice or cls.default_voice(engine)
        tuning = None
        if request_dto.settings is not None and engine_cls.uses_voice_tuning:
            tuning = request_dto.settings.elevenlabs_payload()
        filename = generate_hash_name(text, engine, voice, tuning)
        paths = get_storage_path(filename)
        physical_path = paths['physical_path']
        url = paths['url']

        # Cache hit
        if os.path.exists(physical_path) and not request_dto.is_manual:
            return {'physical_path': physical_path, 'url': url, 'status': 'exists'}

        try:
            generator = engine_cls()
            success = await generator.generate(text, voice, physical_path, request_dto.settings)
        except Exception as e:
            current_app.logger.error("[AudioService] Exception: %s", e)
            return {'error': str(e), 'status': 'error'}

        if success:
            current_app.logger.debug("[AudioService] Generated %s with %s:%s", filename, engine, voice)
            return {'physical_path': physical_path, 'url': url, 'status': 'generated'}
        return {'error': 'Generation failed', 'status': 'error'}

    @classmethod
    async def synthesize(cls, text: str, voice_settings: Optional[VoiceSettings] = None) -> AudioClip:
        """
        Synthesizer used by the narration queue.

        Raises:
            SynthesisError: when no audio could be produced.
        """
        settings = voice_settings or VoiceSettings()
        result = await cls.get_audio(AudioRequestDTO(
            text=text,
            engine=settings.engine,
            voice=settings.voice,
            settings=settings,
        ))
        if result.get('status') == 'error':
            raise SynthesisError(result.get('error') or 'Generation failed', engine=settings.engine)

        return AudioClip(
            text=text,
            physical_path=result['physical_path'],
            url=result['url'],
            status=result['status'],
        )
