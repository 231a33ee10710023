# File: world_explorer_app/modules/audio/interface.py
from typing import Optional

from world_explorer_app.core.defaults import get_setting

from .config import NarrationDefaultConfig
from .narration.player import AudioPlayer, TimelinePlayer
from .narration.queue import NarrationQueue
from .schemas import AudioRequestDTO, AudioResponseDTO, VoiceSettings
from .services.audio_service import AudioService


class AudioInterface:
    @staticmethod
    async def generate_audio(
        text: str,
        engine: Optional[str] = None,
        voice: Optional[str] = None,
        is_manual: bool = False,
    ) -> AudioResponseDTO:
        """
        Generate audio from text using the centralized AudioService.
        """
        result = await AudioService.get_audio(AudioRequestDTO(
            text=text,
            engine=engine,
            voice=voice,
            is_manual=is_manual,
        ))

        return AudioResponseDTO(
            status=result.get('status'),
            url=result.get('url'),
            physical_path=result.get('physical_path'),
            error=result.get('error')
        )

    @staticmethod
    def create_narration_queue(
        player: Optional[AudioPlayer] = None,
        voice_settings: Optional[VoiceSettings] = None,
        **options,
    ) -> NarrationQueue:
        """Narration queue backed by AudioService; run it inside an app context."""
        options.setdefault('pause_between', get_setting(
            'NARRATION_PAUSE_SECONDS', NarrationDefaultConfig.PAUSE_BETWEEN_SECONDS
        ))
        options.setdefault('speed', get_setting('NARRATION_DEFAULT_SPEED', NarrationDefaultConfig.DEFAULT_SPEED))
        options.setdefault('volume', get_setting('NARRATION_DEFAULT_VOLUME', NarrationDefaultConfig.DEFAULT_VOLUME))
        return NarrationQueue(
            AudioService.synthesize,
            player or TimelinePlayer(),
            voice_settings=voice_settings,
            **options,
        )
