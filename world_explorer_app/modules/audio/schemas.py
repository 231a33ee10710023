# File: world_explorer_app/modules/audio/schemas.py
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from marshmallow import Schema, fields, validate

from .config import AudioModuleDefaultConfig, NarrationDefaultConfig


@dataclass
class AudioRequestDTO:
    text: str
    engine: Optional[str] = None
    voice: Optional[str] = None
    is_manual: bool = False
    settings: Optional["VoiceSettings"] = None


@dataclass
class AudioResponseDTO:
    status: str
    url: Optional[str] = None
    physical_path: Optional[str] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class VoiceSettings:
    """Voice selection plus the ElevenLabs tuning knobs; other engines ignore the knobs."""
    engine: Optional[str] = None
    voice: Optional[str] = None
    stability: float = NarrationDefaultConfig.STABILITY
    similarity_boost: float = NarrationDefaultConfig.SIMILARITY_BOOST
    style: float = NarrationDefaultConfig.STYLE
    use_speaker_boost: bool = NarrationDefaultConfig.USE_SPEAKER_BOOST

    def elevenlabs_payload(self) -> Dict[str, Any]:
        return {
            'stability': self.stability,
            'similarity_boost': self.similarity_boost,
            'style': self.style,
            'use_speaker_boost': self.use_speaker_boost,
        }


@dataclass(frozen=True)
class AudioClip:
    text: str
    physical_path: str
    url: str
    status: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class TTSRequestSchema(Schema):
    text = fields.String(required=True)
    engine = fields.String(load_default=None, validate=validate.OneOf(AudioModuleDefaultConfig.AUDIO_ENGINES))
    voice = fields.String(load_default=None)
