import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from world_explorer_app import create_app, db
from world_explorer_app.config import Config
from world_explorer_app.modules.geography.logics.seed_data import DEMO_COUNTRIES, DEMO_POIS
from world_explorer_app.modules.geography.schemas import CountryDTO
from world_explorer_app.modules.geography.services.reference_store import InMemoryReferenceStore


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    SEED_DEMO_DATA = False
    LOG_LEVEL = 'WARNING'
    ELEVENLABS_API_KEY = None
    AUDIO_DEFAULT_ENGINE = 'edge'
    AUDIO_DEFAULT_VOICE_EDGE = 'en-US-AriaNeural'
    QUIZ_ADVANCE_DELAY_SECONDS = 0


@pytest.fixture
def app(tmp_path):
    class _Config(TestConfig):
        UPLOAD_FOLDER = str(tmp_path / 'uploads')
        AUDIO_CACHE_DIR = str(tmp_path / 'uploads' / 'audio' / 'cache')
        LOG_DIR = str(tmp_path / 'logs')

    app = create_app(_Config)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded_app(app):
    from world_explorer_app.modules.geography.services.population_service import import_records

    import_records(DEMO_COUNTRIES, DEMO_POIS)
    return app


@pytest.fixture
def memory_store():
    return InMemoryReferenceStore.from_dicts(DEMO_COUNTRIES, DEMO_POIS)


@pytest.fixture
def japan(memory_store):
    return memory_store.get_country('JP')


def make_country(**overrides):
    data = {'iso2': 'XX', 'country_name': 'Nowhere', 'continent': 'Asia'}
    data.update(overrides)
    return CountryDTO(**data)
