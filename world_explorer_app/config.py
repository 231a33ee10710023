# File: world_explorer_app/config.py

import os

from dotenv import load_dotenv

load_dotenv()

# Project root: this file lives in world_explorer_app/, one level below it.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "world_explorer.db")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """World Explorer application configuration."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Development fallback, set SECRET_KEY in production
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'connect_args': {'timeout': 30},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    UPLOAD_FOLDER = os.path.join(BASE_DIR, 'uploads')
    AUDIO_CACHE_DIR = os.path.join(UPLOAD_FOLDER, 'audio', 'cache')
    UPLOAD_URL_PATH = '/uploads'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = _env_flag('LOG_JSON')
    LOG_MAX_BYTES = 10 * 1024 * 1024
    LOG_BACKUP_COUNT = 5

    # Text-to-speech
    AUDIO_DEFAULT_ENGINE = os.environ.get('AUDIO_DEFAULT_ENGINE', 'edge')
    AUDIO_DEFAULT_VOICE_EDGE = os.environ.get('AUDIO_DEFAULT_VOICE_EDGE', 'en-US-AriaNeural')
    AUDIO_DEFAULT_VOICE_GTTS = os.environ.get('AUDIO_DEFAULT_VOICE_GTTS', 'en')
    ELEVENLABS_API_KEY = os.environ.get('ELEVENLABS_API_KEY')
    ELEVENLABS_VOICE_ID = os.environ.get('ELEVENLABS_VOICE_ID', '9BWtsMINqrJLrRacOk9x')
    ELEVENLABS_MODEL_ID = os.environ.get('ELEVENLABS_MODEL_ID', 'eleven_multilingual_v2')

    # Seed the ten demo countries on first start when the table is empty
    SEED_DEMO_DATA = _env_flag('SEED_DEMO_DATA', default=True)

    @classmethod
    def init_app(cls, app):
        """Create the directories the app writes to."""
        database_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
        if database_uri == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)
        os.makedirs(app.config['AUDIO_CACHE_DIR'], exist_ok=True)
