# ============================================================================
# FILE: mjplayer/player/state_machine.py
# ============================================================================
"""
Playback state machine for one listener.

States are IDLE (nothing loaded), PAUSED and PLAYING. Transitions come from
two directions: user intents (toggle_play, next, prev, select, seek, volume,
shuffle, repeat) and audio element events (ready, time update, ended, play,
pause). Every transport side effect goes through a MediaElement.

Changing track keeps the transport state: a playing listener hears the next
track start straight away, a paused one stays paused on it.
"""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import List, Optional, Sequence
import math
import random
import logging
from mjplayer.player.media import MediaElement

logger = logging.getLogger(__name__)

class TransportState(str, Enum):
    IDLE = "idle"
    PAUSED = "paused"
    PLAYING = "playing"

@dataclass
class Track:
    """What the player needs to know about a song"""
    id: str
    title: str
    url: str
    artist: Optional[str] = None
    duration: Optional[float] = None

    def to_dict(self) -> dict:
        return asdict(self)

def _as_seconds(value) -> float:
    """Audio elements report NaN/None until metadata is in; treat that as 0"""
    if value is None:
        return 0.0
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return 0.0
    return value

def format_time(seconds) -> str:
    """Render a position as m:ss"""
    if seconds is None or not math.isfinite(seconds):
        return "0:00"
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"

class PlaybackStateMachine:

    def __init__(self, media: MediaElement, volume: float = 1.0, rng: random.Random = None):
        self.media = media
        self.rng = rng or random.Random()
        self.playlist: List[Track] = []
        self.current_index = 0
        self.current_time = 0.0
        self.duration = 0.0
        self.volume = min(max(volume, 0.0), 1.0)
        self.shuffle = False
        self.repeat = False
        self.state = TransportState.IDLE

    @property
    def current_song(self) -> Optional[Track]:
        if 0 <= self.current_index < len(self.playlist):
            return self.playlist[self.current_index]
        return None

    # ------------------------------------------------------------------
    # User intents
    # ------------------------------------------------------------------

    def load_playlist(self, tracks: Sequence[Track], start_index: int = 0) -> None:
        """Replace the queue; the player ends up paused on `start_index`"""
        tracks = list(tracks)
        if tracks and not 0 <= start_index < len(tracks):
            raise IndexError(f"start index {start_index} out of range")
        was_playing = self.state == TransportState.PLAYING
        self.playlist = tracks
        self.current_time = 0.0
        if not self.playlist:
            self.current_index = 0
            self.duration = 0.0
            if was_playing:
                self.media.pause()
            self.state = TransportState.IDLE
            return
        if was_playing:
            self.media.pause()
        self.state = TransportState.PAUSED
        self._go_to(start_index)

    def toggle_play(self) -> None:
        if self.current_song is None:
            return
        if self.state == TransportState.PLAYING:
            self.media.pause()
            self.state = TransportState.PAUSED
        else:
            self.media.play()
            self.state = TransportState.PLAYING

    def next(self) -> None:
        if not self.playlist:
            return
        if self.shuffle:
            # May land on the current index again
            index = self.rng.randrange(len(self.playlist))
        else:
            index = (self.current_index + 1) % len(self.playlist)
        self._go_to(index)

    def prev(self) -> None:
        if not self.playlist:
            return
        index = len(self.playlist) - 1 if self.current_index == 0 else self.current_index - 1
        self._go_to(index)

    def select(self, index: int) -> None:
        """Jump straight to a track, as when a playlist row is clicked"""
        if not 0 <= index < len(self.playlist):
            raise IndexError(f"track index {index} out of range")
        self._go_to(index)

    def seek(self, seconds: float) -> None:
        # No clamping; the audio element enforces its own bounds
        self.current_time = seconds
        self.media.seek(seconds)

    def set_volume(self, volume: float) -> None:
        self.volume = min(max(volume, 0.0), 1.0)
        self.media.set_volume(self.volume)

    def toggle_shuffle(self) -> None:
        self.shuffle = not self.shuffle

    def toggle_repeat(self) -> None:
        self.repeat = not self.repeat

    # ------------------------------------------------------------------
    # Audio element events
    # ------------------------------------------------------------------

    def on_media_ready(self, duration) -> None:
        self.duration = _as_seconds(duration)

    def on_time_update(self, current_time, duration) -> None:
        self.current_time = _as_seconds(current_time)
        self.duration = _as_seconds(duration)

    def on_media_ended(self) -> None:
        if self.current_song is None:
            return
        # Only a playing element can end; the pause it fires just before is not a user pause
        self.state = TransportState.PLAYING
        if self.repeat:
            self.current_time = 0.0
            self.media.seek(0)
            self.media.play()
        else:
            self.next()

    def on_play(self) -> None:
        if self.current_song is not None:
            self.state = TransportState.PLAYING

    def on_pause(self) -> None:
        if self.state == TransportState.PLAYING:
            self.state = TransportState.PAUSED

    # ------------------------------------------------------------------

    def _go_to(self, index: int) -> None:
        self.current_index = index
        self.current_time = 0.0
        track = self.playlist[index]
        self.duration = _as_seconds(track.duration)
        self.media.load(track.url)
        if self.state == TransportState.PLAYING:
            self.media.play()
        logger.debug(f"Track changed to {index}: {track.title}")

    def snapshot(self) -> dict:
        """Render-ready view of the player"""
        song = self.current_song
        return {
            "state": self.state.value,
            "is_playing": self.state == TransportState.PLAYING,
            "current_index": self.current_index,
            "current_song": song.to_dict() if song else None,
            "playlist": [track.to_dict() for track in self.playlist],
            "current_time": self.current_time,
            "duration": self.duration,
            "current_time_display": format_time(self.current_time),
            "duration_display": format_time(self.duration),
            "volume": self.volume,
            "shuffle": self.shuffle,
            "repeat": self.repeat,
        }
