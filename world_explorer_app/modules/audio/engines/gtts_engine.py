import asyncio
import logging

from gtts import gTTS

from .base import AudioEngine

logger = logging.getLogger(__name__)


class GTTSEngine(AudioEngine):
    """
    Audio Engine using Google Text-to-Speech (gTTS library).
    Wraps blocking calls in threads.
    """

    async def generate(self, text: str, voice: str, full_path: str, settings=None) -> bool:
        try:
            self._ensure_directory(full_path)

            # 'en-US' -> 'en'
            lang = 'en'
            if voice:
                lang = voice.split('-')[0] or 'en'

            await asyncio.to_thread(self._save_gtts, text, lang, full_path)
            return True
        except Exception as e:
            logger.error("[GTTSEngine] Error generating audio: %s", e)
            return False

    def _save_gtts(self, text: str, lang: str, path: str):
        """Blocking helper method."""
        tts = gTTS(text=text, lang=lang)
        tts.save(path)
