# ============================================================================
# FILE: mjplayer/player/registry.py
# ============================================================================
import threading
from typing import Dict
from mjplayer.config import settings
from mjplayer.player.media import MediaBridge
from mjplayer.player.state_machine import PlaybackStateMachine
import logging

logger = logging.getLogger(__name__)

class PlayerRegistry:
    """
    One playback state machine per listener
    Lives on app.state; nothing else holds player state
    """

    def __init__(self, default_volume: float = None):
        self.default_volume = settings.PLAYER_DEFAULT_VOLUME if default_volume is None else default_volume
        self._players: Dict[str, PlaybackStateMachine] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> PlaybackStateMachine:
        """Return the listener's player, creating an idle one on first use"""
        with self._lock:
            player = self._players.get(user_id)
            if player is None:
                player = PlaybackStateMachine(MediaBridge(), volume=self.default_volume)
                self._players[user_id] = player
                logger.info(f"Player created for user {user_id}")
            return player

    def discard(self, user_id: str) -> None:
        with self._lock:
            self._players.pop(user_id, None)

    def __len__(self) -> int:
        return len(self._players)
