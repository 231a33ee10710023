# File: world_explorer_app/modules/audio/narration/queue.py
"""
Narration queue.

Spoken text is played strictly one item at a time, in submission order, by a
single asyncio task. ``stop_narration`` and ``start_narration`` cancel hard:
the in-flight clip is stopped, pending items are dropped, and none of their
completion callbacks run.

Mute, speed and volume are read from the queue when an item is dequeued, so
changing them only affects items that have not started yet.
"""

import asyncio
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Deque, Optional

from world_explorer_app.core.signals import narration_completed, narration_failed

from ..config import NarrationDefaultConfig
from ..schemas import AudioClip, VoiceSettings
from .player import AudioPlayer

logger = logging.getLogger(__name__)

Synthesizer = Callable[[str, Optional[VoiceSettings]], Awaitable[AudioClip]]


@dataclass
class NarrationRequest:
    text: str
    on_complete: Optional[Callable[[], Any]] = None


class NarrationQueue:
    def __init__(
        self,
        synthesizer: Synthesizer,
        player: AudioPlayer,
        voice_settings: Optional[VoiceSettings] = None,
        muted: bool = False,
        speed: float = NarrationDefaultConfig.DEFAULT_SPEED,
        volume: float = NarrationDefaultConfig.DEFAULT_VOLUME,
        pause_between: float = NarrationDefaultConfig.PAUSE_BETWEEN_SECONDS,
    ):
        self.synthesizer = synthesizer
        self.player = player
        self.voice_settings = voice_settings
        self.muted = muted
        self.speed = speed
        self.volume = volume
        self.pause_between = pause_between

        self._queue: Deque[NarrationRequest] = deque()
        self._processing = False
        self._generation = 0
        self._task: Optional[asyncio.Task] = None
        self._current: Optional[NarrationRequest] = None

    @property
    def is_narrating(self) -> bool:
        return self._processing

    @property
    def pending(self) -> int:
        """Number of requests waiting behind the one in progress."""
        return len(self._queue)

    # === Public operations (call from inside the running event loop) ===

    def queue_narration(self, text: str, on_complete: Optional[Callable[[], Any]] = None) -> NarrationRequest:
        request = NarrationRequest(text=text, on_complete=on_complete)
        self._queue.append(request)
        self._ensure_processing()
        return request

    def start_narration(self, text: str, on_complete: Optional[Callable[[], Any]] = None) -> NarrationRequest:
        """Drop everything queued or playing, then narrate ``text``."""
        self._cancel()
        return self.queue_narration(text, on_complete)

    def stop_narration(self) -> None:
        self._cancel()

    def pause_narration(self) -> bool:
        if self._current is None:
            return False
        self.player.pause()
        return True

    def resume_narration(self) -> bool:
        if self._current is None:
            return False
        self.player.resume()
        return True

    async def wait_until_idle(self) -> None:
        """Wait until the queue has drained or been stopped."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})

    # === Processing ===

    def _ensure_processing(self) -> None:
        if self._processing or not self._queue:
            return
        self._processing = True
        self._task = asyncio.get_running_loop().create_task(self._process(self._generation))

    def _cancel(self) -> None:
        self._generation += 1
        self._queue.clear()
        if self._current is not None:
            self.player.stop()
        self._current = None
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self._processing = False

    async def _process(self, generation: int) -> None:
        try:
            while self._queue and generation == self._generation:
                request = self._queue.popleft()

                if self.muted:
                    self._complete(request, skipped=True)
                    continue

                self._current = request
                await self._play(request)
                if generation != self._generation:
                    return
                self._current = None

                self._complete(request, skipped=False)
                await asyncio.sleep(self.pause_between)
        finally:
            if generation == self._generation:
                self._processing = False
                self._task = None
                self._current = None

    async def _play(self, request: NarrationRequest) -> None:
        speed = self.speed
        volume = self.volume
        try:
            clip = await self.synthesizer(request.text, self.voice_settings)
            await self.player.play(clip, speed=speed, volume=volume)
        except Exception as exc:
            logger.error("Narration failed for %r: %s", request.text[:60], exc)
            narration_failed.send(self, text=request.text, error=str(exc))

    def _complete(self, request: NarrationRequest, skipped: bool) -> None:
        narration_completed.send(self, text=request.text, skipped=skipped)
        if request.on_complete is None:
            return
        try:
            request.on_complete()
        except Exception:
            logger.exception("Narration completion callback failed")
