# File: world_explorer_app/modules/audio/config.py


class AudioModuleDefaultConfig:
    AUDIO_DEFAULT_ENGINE = "edge"
    AUDIO_DEFAULT_VOICE_EDGE = "en-US-AriaNeural"
    AUDIO_DEFAULT_VOICE_GTTS = "en"
    AUDIO_ENGINES = ('edge', 'gtts', 'elevenlabs')

    ELEVENLABS_API_URL = "https://api.elevenlabs.io/v1/text-to-speech"
    ELEVENLABS_VOICE_ID = "9BWtsMINqrJLrRacOk9x"  # Aria, clear American English
    ELEVENLABS_MODEL_ID = "eleven_multilingual_v2"
    ELEVENLABS_TIMEOUT_SECONDS = 30


class NarrationDefaultConfig:
    PAUSE_BETWEEN_SECONDS = 0.5
    DEFAULT_SPEED = 1.0
    DEFAULT_VOLUME = 1.0
    # Granularity of the playback clock while holding the queue for a clip
    PLAYBACK_TICK_SECONDS = 0.05

    STABILITY = 0.5
    SIMILARITY_BOOST = 0.8
    STYLE = 0.0
    USE_SPEAKER_BOOST = True
