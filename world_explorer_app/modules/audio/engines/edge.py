import logging

import edge_tts

from .base import AudioEngine

logger = logging.getLogger(__name__)


class EdgeEngine(AudioEngine):
    """
    Audio Engine using Microsoft Edge TTS (edge-tts library).
    """

    DEFAULT_VOICE = "en-US-AriaNeural"

    async def generate(self, text: str, voice: str, full_path: str, settings=None) -> bool:
        try:
            self._ensure_directory(full_path)
            selected_voice = voice or self.DEFAULT_VOICE

            logger.debug("[EdgeEngine] Generating %r with %s", text[:100], selected_voice)
            communicate = edge_tts.Communicate(text, selected_voice)
            await communicate.save(full_path)
            return True
        except Exception as e:
            logger.error("[EdgeEngine] Error generating audio: %s", e)
            return False
