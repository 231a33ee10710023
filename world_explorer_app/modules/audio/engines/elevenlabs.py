import asyncio
import logging
from typing import Optional

import requests

from world_explorer_app.core.defaults import get_setting

from ..config import AudioModuleDefaultConfig
from .base import AudioEngine

logger = logging.getLogger(__name__)


class ElevenLabsEngine(AudioEngine):
    """
    Audio Engine using the ElevenLabs text-to-speech HTTP API.

    ``voice`` is an ElevenLabs voice id; the configured one is used when empty.
    """

    uses_voice_tuning = True

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_id: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key or get_setting('ELEVENLABS_API_KEY')
        self.model_id = model_id or get_setting('ELEVENLABS_MODEL_ID', AudioModuleDefaultConfig.ELEVENLABS_MODEL_ID)
        self.default_voice = get_setting('ELEVENLABS_VOICE_ID', AudioModuleDefaultConfig.ELEVENLABS_VOICE_ID)
        self.session = session or requests.Session()

    async def generate(self, text: str, voice: str, full_path: str, settings=None) -> bool:
        if not self.api_key:
            logger.error("[ElevenLabsEngine] ElevenLabs API key not configured")
            return False
        try:
            self._ensure_directory(full_path)
            await asyncio.to_thread(self._download, text, voice or self.default_voice, full_path, settings)
            return True
        except requests.RequestException as e:
            logger.error("[ElevenLabsEngine] API error: %s", e)
            return False
        except OSError as e:
            logger.error("[ElevenLabsEngine] Could not write %s: %s", full_path, e)
            return False

    def _download(self, text: str, voice_id: str, full_path: str, settings) -> None:
        """Blocking helper method."""
        payload = {'text': text, 'model_id': self.model_id}
        if settings is not None and hasattr(settings, 'elevenlabs_payload'):
            payload['voice_settings'] = settings.elevenlabs_payload()

        response = self.session.post(
            f"{AudioModuleDefaultConfig.ELEVENLABS_API_URL}/{voice_id}",
            headers={
                'Accept': 'audio/mpeg',
                'Content-Type': 'application/json',
                'xi-api-key': self.api_key,
            },
            json=payload,
            timeout=AudioModuleDefaultConfig.ELEVENLABS_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        with open(full_path, 'wb') as handle:
            handle.write(response.content)
        logger.info("[ElevenLabsEngine] Generated %d bytes for %r", len(response.content), text[:100])
