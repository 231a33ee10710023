from .base import AudioEngine
from .edge import EdgeEngine
from .elevenlabs import ElevenLabsEngine
from .gtts_engine import GTTSEngine

__all__ = ['AudioEngine', 'EdgeEngine', 'ElevenLabsEngine', 'GTTSEngine']
