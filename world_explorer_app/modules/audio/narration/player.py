# File: world_explorer_app/modules/audio/narration/player.py
"""Playback backends for the narration queue."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from world_explorer_app.core.signals import narration_started

from ..config import NarrationDefaultConfig
from ..schemas import AudioClip

logger = logging.getLogger(__name__)


def probe_duration(path: str) -> float:
    """Length of an audio file in seconds."""
    from pydub import AudioSegment

    return len(AudioSegment.from_file(path)) / 1000.0


class AudioPlayer(ABC):
    """
    Plays one clip at a time. ``play`` returns once the clip has finished;
    ``stop`` makes a pending ``play`` return early.
    """

    @abstractmethod
    async def play(self, clip: AudioClip, speed: float = 1.0, volume: float = 1.0) -> None:
        """Play ``clip`` to the end."""

    def pause(self) -> None:
        """Suspend the clip currently playing."""

    def resume(self) -> None:
        """Continue a paused clip."""

    def stop(self) -> None:
        """Abandon the clip currently playing."""


class TimelinePlayer(AudioPlayer):
    """
    Announces each clip through the ``narration_started`` signal (so a browser
    client can render it) and holds the queue for the clip's duration at the
    requested speed. Paused time does not count towards the duration.
    """

    def __init__(
        self,
        tick: Optional[float] = None,
        duration_probe: Optional[Callable[[str], float]] = None,
    ):
        self.tick = tick if tick is not None else NarrationDefaultConfig.PLAYBACK_TICK_SECONDS
        self.duration_probe = duration_probe or probe_duration
        self._paused = False
        self._stopped = False

    @property
    def is_paused(self) -> bool:
        return self._paused

    async def play(self, clip: AudioClip, speed: float = 1.0, volume: float = 1.0) -> None:
        duration = await asyncio.to_thread(self.duration_probe, clip.physical_path)
        # A pause requested while the clip was being prepared stays in effect
        self._stopped = False

        narration_started.send(
            self,
            text=clip.text,
            url=clip.url,
            speed=speed,
            volume=volume,
            duration=duration,
        )
        logger.debug("Playing %r (%.2fs at %.2fx)", clip.text[:60], duration, speed)

        remaining = duration / speed if speed > 0 else duration
        try:
            while remaining > 0 and not self._stopped:
                step = min(self.tick, remaining)
                await asyncio.sleep(step)
                if not self._paused:
                    remaining -= step
        finally:
            self._paused = False

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def stop(self) -> None:
        self._stopped = True
        self._paused = False
