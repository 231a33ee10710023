import os
from abc import ABC, abstractmethod


class AudioEngine(ABC):
    """
    Abstract Base Class for Text-to-Speech engines.
    """

    # Engines that honour the VoiceSettings tuning knobs (stability, style, ...)
    uses_voice_tuning = False

    @abstractmethod
    async def generate(self, text: str, voice: str, full_path: str, settings=None) -> bool:
        """
        Generate an mp3 file from text.

        Args:
            text: The text to convert to speech.
            voice: The voice identifier (engine specific).
            full_path: Absolute path of the .mp3 file to write.
            settings: Optional VoiceSettings; engines use what they understand.

        Returns:
            bool: True if generation was successful, False otherwise.
        """

    @staticmethod
    def _ensure_directory(full_path: str) -> None:
        directory = os.path.dirname(full_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
