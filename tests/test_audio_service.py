import asyncio
import os
from unittest.mock import MagicMock

import pytest

from world_explorer_app.core.error_handlers import SynthesisError
from world_explorer_app.core.signals import narration_started
from world_explorer_app.modules.audio.interface import AudioInterface
from world_explorer_app.modules.audio.narration.player import TimelinePlayer
from world_explorer_app.modules.audio.engines.base import AudioEngine
from world_explorer_app.modules.audio.engines.elevenlabs import ElevenLabsEngine
from world_explorer_app.modules.audio.logics.audio_logic import generate_hash_name
from world_explorer_app.modules.audio.schemas import AudioRequestDTO, VoiceSettings
from world_explorer_app.modules.audio.services.audio_service import AudioService


class FakeEngine(AudioEngine):
    calls = []
    succeed = True

    async def generate(self, text, voice, full_path, settings=None):
        FakeEngine.calls.append((text, voice))
        if not FakeEngine.succeed:
            return False
        self._ensure_directory(full_path)
        with open(full_path, 'wb') as handle:
            handle.write(b'ID3fake')
        return True


@pytest.fixture
def fake_engine(monkeypatch):
    FakeEngine.calls = []
    FakeEngine.succeed = True
    monkeypatch.setitem(AudioService._ENGINES, 'edge', FakeEngine)
    return FakeEngine


def test_hash_name_is_deterministic():
    first = generate_hash_name('Hello world', 'edge', 'en-US-AriaNeural')
    assert first == generate_hash_name('  Hello world ', 'edge', 'en-US-AriaNeural')
    assert first != generate_hash_name('Hello world', 'edge', 'en-GB-SoniaNeural')
    assert first.endswith('.mp3')


def test_generate_then_cache_hit(app, fake_engine):
    request = AudioRequestDTO(text='Welcome to Japan')

    first = asyncio.run(AudioService.get_audio(request))
    second = asyncio.run(AudioService.get_audio(request))

    assert first['status'] == 'generated'
    assert second['status'] == 'exists'
    assert os.path.exists(first['physical_path'])
    assert first['physical_path'].startswith(app.config['AUDIO_CACHE_DIR'])
    assert first['url'].startswith('/uploads/audio/cache/')
    # Default voice comes from configuration
    assert fake_engine.calls == [('Welcome to Japan', 'en-US-AriaNeural')]


def test_manual_request_regenerates(app, fake_engine):
    asyncio.run(AudioService.get_audio(AudioRequestDTO(text='Again')))
    result = asyncio.run(AudioService.get_audio(AudioRequestDTO(text='Again', is_manual=True)))

    assert result['status'] == 'generated'
    assert len(fake_engine.calls) == 2


def test_unknown_engine_and_empty_text(app):
    assert asyncio.run(AudioService.get_audio(AudioRequestDTO(text='Hi', engine='robot')))['status'] == 'error'
    assert asyncio.run(AudioService.get_audio(AudioRequestDTO(text='   ')))['status'] == 'error'


def test_synthesize_returns_clip(app, fake_engine):
    clip = asyncio.run(AudioService.synthesize('Tokyo', VoiceSettings(engine='edge', voice='en-US-GuyNeural')))

    assert clip.text == 'Tokyo'
    assert clip.status == 'generated'
    assert fake_engine.calls == [('Tokyo', 'en-US-GuyNeural')]


def test_synthesize_raises_on_failure(app, fake_engine):
    fake_engine.succeed = False
    with pytest.raises(SynthesisError):
        asyncio.run(AudioService.synthesize('Cairo'))


def test_elevenlabs_without_key_fails(app, tmp_path):
    engine = ElevenLabsEngine()
    assert asyncio.run(engine.generate('Hi', None, str(tmp_path / 'hi.mp3'))) is False


def test_elevenlabs_request(app, tmp_path):
    response = MagicMock()
    response.content = b'mp3-bytes'
    session = MagicMock()
    session.post.return_value = response

    engine = ElevenLabsEngine(api_key='secret', session=session)
    target = tmp_path / 'voice' / 'hi.mp3'
    ok = asyncio.run(engine.generate('Hi there', None, str(target), VoiceSettings(stability=0.3)))

    assert ok
    assert target.read_bytes() == b'mp3-bytes'
    url = session.post.call_args.args[0]
    kwargs = session.post.call_args.kwargs
    assert url.endswith('/9BWtsMINqrJLrRacOk9x')
    assert kwargs['headers']['xi-api-key'] == 'secret'
    assert kwargs['json']['model_id'] == 'eleven_multilingual_v2'
    assert kwargs['json']['voice_settings']['stability'] == 0.3


def test_tts_route(client, fake_engine):
    response = client.post('/api/audio/tts', json={'text': 'Hello explorer'})
    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['status'] == 'generated'

    served = client.get(data['url'])
    assert served.status_code == 200
    assert served.data == b'ID3fake'
    served.close()


def test_tts_route_rejects_empty_text(client):
    response = client.post('/api/audio/tts', json={'text': ''})
    assert response.status_code == 400
    assert response.get_json()['code'] == 'VALIDATION_ERROR'


def test_narration_queue_uses_audio_service(app, fake_engine):
    started = []

    def on_started(sender, **kwargs):
        started.append(kwargs)

    player = TimelinePlayer(tick=0.005, duration_probe=lambda path: 0.02)
    queue = AudioInterface.create_narration_queue(player=player, pause_between=0)
    done = []

    async def scenario():
        queue.queue_narration('Welcome to Egypt', lambda: done.append('Egypt'))
        await queue.wait_until_idle()

    with narration_started.connected_to(on_started):
        asyncio.run(scenario())

    assert done == ['Egypt']
    assert fake_engine.calls == [('Welcome to Egypt', 'en-US-AriaNeural')]
    assert started[0]['url'].startswith('/uploads/audio/cache/')
    assert started[0]['duration'] == 0.02


def test_narration_queue_reads_app_settings(app):
    app.config['NARRATION_PAUSE_SECONDS'] = 0.25
    app.config['NARRATION_DEFAULT_SPEED'] = 1.5

    queue = AudioInterface.create_narration_queue()

    assert queue.pause_between == 0.25
    assert queue.speed == 1.5
    assert queue.volume == 1.0
    assert AudioInterface.create_narration_queue(pause_between=0).pause_between == 0


def test_hash_name_includes_voice_tuning():
    plain = generate_hash_name('Hello', 'elevenlabs', 'voice-1')
    calm = generate_hash_name('Hello', 'elevenlabs', 'voice-1', VoiceSettings(stability=0.9).elevenlabs_payload())
    lively = generate_hash_name('Hello', 'elevenlabs', 'voice-1', VoiceSettings(style=0.7).elevenlabs_payload())

    assert len({plain, calm, lively}) == 3


class TunedFakeEngine(FakeEngine):
    uses_voice_tuning = True


def test_changed_voice_tuning_regenerates(app, monkeypatch):
    FakeEngine.calls = []
    FakeEngine.succeed = True
    monkeypatch.setitem(AudioService._ENGINES, 'elevenlabs', TunedFakeEngine)

    def fetch(settings):
        return asyncio.run(AudioService.get_audio(AudioRequestDTO(
            text='Welcome to Brazil', engine='elevenlabs', voice='voice-1', settings=settings,
        )))

    first = fetch(VoiceSettings(stability=0.5))
    assert fetch(VoiceSettings(stability=0.5))['status'] == 'exists'
    changed = fetch(VoiceSettings(stability=0.2))

    assert changed['status'] == 'generated'
    assert changed['url'] != first['url']


def test_untuned_engine_ignores_voice_tuning(app, fake_engine):
    first = asyncio.run(AudioService.get_audio(AudioRequestDTO(text='Hola', settings=VoiceSettings(stability=0.1))))
    second = asyncio.run(AudioService.get_audio(AudioRequestDTO(text='Hola', settings=VoiceSettings(stability=0.9))))

    assert first['status'] == 'generated'
    assert second['status'] == 'exists'
