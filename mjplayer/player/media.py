# ============================================================================
# FILE: mjplayer/player/media.py
# The audio backend seen by the playback state machine
# ============================================================================
from abc import ABC, abstractmethod
from typing import Dict, List

class MediaElement(ABC):
    """Transport calls the state machine makes on the audio element"""

    @abstractmethod
    def load(self, url: str) -> None:
        pass

    @abstractmethod
    def play(self) -> None:
        pass

    @abstractmethod
    def pause(self) -> None:
        pass

    @abstractmethod
    def seek(self, seconds: float) -> None:
        pass

    @abstractmethod
    def set_volume(self, volume: float) -> None:
        pass

class MediaBridge(MediaElement):
    """
    Queues transport commands for the browser's <audio> element
    Each API response drains the queue; the client applies the commands in order
    """

    def __init__(self):
        self._commands: List[Dict] = []

    def _push(self, action: str, **params) -> None:
        self._commands.append({"action": action, **params})

    def load(self, url: str) -> None:
        # A new source makes any queued seek/play for the old one meaningless
        self._commands = [c for c in self._commands if c["action"] == "volume"]
        self._push("load", url=url)

    def play(self) -> None:
        self._push("play")

    def pause(self) -> None:
        self._push("pause")

    def seek(self, seconds: float) -> None:
        self._push("seek", time=seconds)

    def set_volume(self, volume: float) -> None:
        self._push("volume", volume=volume)

    def pending(self) -> List[Dict]:
        return list(self._commands)

    def drain(self) -> List[Dict]:
        commands, self._commands = self._commands, []
        return commands
