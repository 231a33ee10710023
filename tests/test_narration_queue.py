"""
Tests for the narration queue and the timeline player.

Each test drives its own event loop with ``asyncio.run``.
"""

import asyncio

from world_explorer_app.core.error_handlers import SynthesisError
from world_explorer_app.core.signals import narration_failed, narration_started
from world_explorer_app.modules.audio.narration.player import AudioPlayer, TimelinePlayer
from world_explorer_app.modules.audio.narration.queue import NarrationQueue
from world_explorer_app.modules.audio.schemas import AudioClip


async def fake_synthesizer(text, voice_settings=None):
    if text == 'BAD':
        raise SynthesisError('engine offline', engine='edge')
    return AudioClip(text=text, physical_path=f'/tmp/{text}.mp3', url=f'/uploads/{text}.mp3', status='generated')


class RecordingPlayer(AudioPlayer):
    """Plays for ``duration`` seconds (0.2 for texts starting with 'LONG') and records events."""

    def __init__(self, events, duration=0.01):
        self.events = events
        self.duration = duration
        self.active = 0
        self.max_active = 0
        self.paused = False
        self._stopped = False

    async def play(self, clip, speed=1.0, volume=1.0):
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        self.events.append(('play', clip.text, speed, volume))
        self._stopped = False
        remaining = 0.2 if clip.text.startswith('LONG') else self.duration
        try:
            while remaining > 0 and not self._stopped:
                await asyncio.sleep(0.005)
                if not self.paused:
                    remaining -= 0.005
            self.events.append(('end', clip.text))
        finally:
            self.active -= 1

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def stop(self):
        self._stopped = True


def _make_queue(events, **options):
    options.setdefault('pause_between', 0)
    return NarrationQueue(fake_synthesizer, RecordingPlayer(events), **options)


def _done(events, text):
    return lambda: events.append(('done', text))


class TestOrdering:

    def test_items_play_in_submission_order(self):
        events = []

        async def scenario():
            queue = _make_queue(events)
            queue.queue_narration('A', _done(events, 'A'))
            queue.queue_narration('B', _done(events, 'B'))
            await queue.wait_until_idle()

        asyncio.run(scenario())

        assert [e[:2] for e in events] == [
            ('play', 'A'), ('end', 'A'), ('done', 'A'),
            ('play', 'B'), ('end', 'B'), ('done', 'B'),
        ]

    def test_single_processing_loop(self):
        events = []

        async def scenario():
            queue = _make_queue(events)
            for text in ('one', 'two', 'three'):
                queue.queue_narration(text)
            assert queue.is_narrating
            await queue.wait_until_idle()
            return queue

        queue = asyncio.run(scenario())
        assert queue.player.max_active == 1
        assert not queue.is_narrating
        assert queue.pending == 0

    def test_pause_between_items(self):
        events = []

        async def scenario():
            loop = asyncio.get_running_loop()
            queue = _make_queue(events, pause_between=0.05)
            stamps = {}
            queue.queue_narration('A', lambda: stamps.setdefault('a_done', loop.time()))
            queue.queue_narration('B')
            while len(events) < 3:
                await asyncio.sleep(0.001)
            stamps['b_play'] = loop.time()
            await queue.wait_until_idle()
            return stamps

        stamps = asyncio.run(scenario())
        assert stamps['b_play'] - stamps['a_done'] >= 0.045


class TestMute:

    def test_muted_item_completes_without_playback(self):
        events = []

        async def scenario():
            queue = _make_queue(events, muted=True)
            queue.queue_narration('X', _done(events, 'X'))
            queue.queue_narration('Y', _done(events, 'Y'))
            await queue.wait_until_idle()

        asyncio.run(scenario())
        assert events == [('done', 'X'), ('done', 'Y')]

    def test_mute_is_read_when_an_item_is_dequeued(self):
        events = []

        async def scenario():
            queue = _make_queue(events)

            def mute_after_a():
                events.append(('done', 'A'))
                queue.muted = True

            queue.queue_narration('A', mute_after_a)
            queue.queue_narration('B', _done(events, 'B'))
            await queue.wait_until_idle()

        asyncio.run(scenario())
        assert [e[:2] for e in events] == [('play', 'A'), ('end', 'A'), ('done', 'A'), ('done', 'B')]


class TestPlaybackSettings:

    def test_speed_change_applies_to_items_not_started(self):
        events = []

        async def scenario():
            queue = _make_queue(events, speed=1.0, volume=0.8)

            def speed_up():
                queue.speed = 1.5

            queue.queue_narration('A', speed_up)
            queue.queue_narration('B')
            await queue.wait_until_idle()

        asyncio.run(scenario())
        plays = [e for e in events if e[0] == 'play']
        assert plays == [('play', 'A', 1.0, 0.8), ('play', 'B', 1.5, 0.8)]

    def test_pause_and_resume_current_item(self):
        events = []

        async def scenario():
            queue = _make_queue(events)
            assert not queue.pause_narration()

            queue.queue_narration('LONG story', _done(events, 'LONG'))
            await asyncio.sleep(0.02)
            assert queue.pause_narration()
            assert queue.player.paused
            await asyncio.sleep(0.05)
            assert ('done', 'LONG') not in events
            assert queue.resume_narration()
            await queue.wait_until_idle()

        asyncio.run(scenario())
        assert events[-1] == ('done', 'LONG')


class TestCancellation:

    def test_stop_discards_current_and_pending(self):
        events = []

        async def scenario():
            queue = _make_queue(events)
            queue.queue_narration('LONG Y', _done(events, 'Y'))
            queue.queue_narration('Z', _done(events, 'Z'))
            await asyncio.sleep(0.03)
            queue.stop_narration()
            await queue.wait_until_idle()
            await asyncio.sleep(0.05)
            return queue

        queue = asyncio.run(scenario())
        assert ('done', 'Y') not in events
        assert all(e[1] != 'Z' for e in events)
        assert not queue.is_narrating
        assert queue.pending == 0

    def test_start_narration_supersedes(self):
        events = []

        async def scenario():
            queue = _make_queue(events)
            queue.queue_narration('LONG old', _done(events, 'old'))
            queue.queue_narration('later', _done(events, 'later'))
            await asyncio.sleep(0.02)
            queue.start_narration('new', _done(events, 'new'))
            await queue.wait_until_idle()

        asyncio.run(scenario())
        done = [e[1] for e in events if e[0] == 'done']
        assert done == ['new']


class TestFailures:

    def test_failed_item_completes_and_queue_continues(self):
        events, failures = [], []

        def on_failed(sender, **kwargs):
            failures.append(kwargs['text'])

        async def scenario():
            queue = _make_queue(events)
            queue.queue_narration('BAD', _done(events, 'BAD'))
            queue.queue_narration('good', _done(events, 'good'))
            await queue.wait_until_idle()

        narration_failed.connect(on_failed)
        try:
            asyncio.run(scenario())
        finally:
            narration_failed.disconnect(on_failed)

        assert failures == ['BAD']
        assert [e[:2] for e in events] == [('done', 'BAD'), ('play', 'good'), ('end', 'good'), ('done', 'good')]

    def test_callback_error_does_not_stall(self):
        events = []

        def explode():
            raise RuntimeError('listener bug')

        async def scenario():
            queue = _make_queue(events)
            queue.queue_narration('A', explode)
            queue.queue_narration('B', _done(events, 'B'))
            await queue.wait_until_idle()

        asyncio.run(scenario())
        assert events[-1] == ('done', 'B')


class TestTimelinePlayer:

    def _clip(self):
        return AudioClip(text='Hello', physical_path='/tmp/hello.mp3', url='/uploads/hello.mp3', status='exists')

    def test_holds_for_duration_over_speed(self):
        started = []

        def on_started(sender, **kwargs):
            started.append(kwargs)

        async def scenario():
            player = TimelinePlayer(tick=0.01, duration_probe=lambda path: 0.1)
            loop = asyncio.get_running_loop()
            begin = loop.time()
            await player.play(self._clip(), speed=2.0, volume=0.5)
            return loop.time() - begin

        narration_started.connect(on_started)
        try:
            elapsed = asyncio.run(scenario())
        finally:
            narration_started.disconnect(on_started)

        assert 0.04 <= elapsed < 0.5
        assert started == [{'text': 'Hello', 'url': '/uploads/hello.mp3', 'speed': 2.0, 'volume': 0.5,
                            'duration': 0.1}]

    def test_stop_ends_playback_early(self):
        async def scenario():
            player = TimelinePlayer(tick=0.01, duration_probe=lambda path: 5.0)
            task = asyncio.create_task(player.play(self._clip()))
            await asyncio.sleep(0.05)
            player.stop()
            await asyncio.wait_for(task, timeout=1)

        asyncio.run(scenario())

    def test_pause_while_synthesizing_holds_the_clip(self):
        done = []

        async def slow_synthesizer(text, voice_settings=None):
            await asyncio.sleep(0.1)
            return AudioClip(text=text, physical_path='/tmp/slow.mp3', url='/uploads/slow.mp3', status='generated')

        async def scenario():
            player = TimelinePlayer(tick=0.01, duration_probe=lambda path: 0.1)
            queue = NarrationQueue(slow_synthesizer, player, pause_between=0)
            queue.queue_narration('hello', lambda: done.append('hello'))
            await asyncio.sleep(0.02)
            assert queue.pause_narration()

            await asyncio.sleep(0.4)
            assert done == []
            assert player.is_paused

            assert queue.resume_narration()
            await asyncio.wait_for(queue.wait_until_idle(), timeout=1)
            assert not player.is_paused

        asyncio.run(scenario())

        assert done == ['hello']
