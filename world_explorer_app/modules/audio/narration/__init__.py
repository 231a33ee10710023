from .player import AudioPlayer, TimelinePlayer, probe_duration
from .queue import NarrationQueue, NarrationRequest

__all__ = ['AudioPlayer', 'TimelinePlayer', 'probe_duration', 'NarrationQueue', 'NarrationRequest']
