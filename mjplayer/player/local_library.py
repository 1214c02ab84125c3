# ============================================================================
# FILE: mjplayer/player/local_library.py
# ============================================================================
"""
The simple player's own song lists.

A listener keeps two lists, songs added by direct link ("My Songs") and
songs added by YouTube link, and picks which one the player uses. Both lists
and the active mode are stored as JSON under fixed key names, scoped per
user, and loaded back when the library is opened.
"""
from typing import Callable, Dict, List, Optional
import uuid
import logging
from mjplayer.config import settings
from mjplayer.core.exceptions import InvalidInput
from mjplayer.core.ytmusic_client import extract_video_id, ytmusic_client
from mjplayer.player.state_machine import Track

logger = logging.getLogger(__name__)

MY_SONGS_KEY = "mjplayer-mysongs"
YOUTUBE_KEY = "mjplayer-youtube"
MODE_KEY = "mjplayer-mode"

MODE_MY_SONGS = "mysongs"
MODE_YOUTUBE = "youtube"
MODES = (MODE_MY_SONGS, MODE_YOUTUBE)

class LocalLibrary:

    def __init__(self, store, user_id: str, lookup: Callable[[str], Optional[Dict]] = None):
        self.store = store
        self.user_id = user_id
        self.lookup = lookup or ytmusic_client.get_song_details
        self.my_songs: List[Dict] = []
        self.youtube_songs: List[Dict] = []
        self.mode = MODE_MY_SONGS
        self.load()

    def _key(self, name: str) -> str:
        return f"{self.user_id}:{name}"

    def load(self) -> None:
        self.my_songs = self.store.get_json(self._key(MY_SONGS_KEY)) or []
        self.youtube_songs = self.store.get_json(self._key(YOUTUBE_KEY)) or []
        saved_mode = self.store.get_json(self._key(MODE_KEY))
        self.mode = saved_mode if saved_mode in MODES else MODE_MY_SONGS

    def _save_songs(self) -> None:
        self.store.set_json(self._key(MY_SONGS_KEY), self.my_songs)
        self.store.set_json(self._key(YOUTUBE_KEY), self.youtube_songs)

    def add_my_song(self, title: str, url: str) -> Dict:
        title, url = (title or "").strip(), (url or "").strip()
        if not title or not url:
            raise InvalidInput("Song name and link are required")
        song = {"id": uuid.uuid4().hex, "title": title, "url": url}
        self.my_songs.append(song)
        self._save_songs()
        logger.info(f"Link song added for {self.user_id}: {title}")
        return song

    def add_youtube_song(self, youtube_url: str) -> Dict:
        """Add a song from a YouTube link, named via YouTube Music when possible"""
        video_id = extract_video_id(youtube_url)
        if not video_id:
            raise InvalidInput("Invalid YouTube URL")

        details = self.lookup(video_id) or {}
        song = {
            "id": uuid.uuid4().hex,
            "title": details.get("title") or f"YouTube Video {video_id}",
            "url": settings.YOUTUBE_AUDIO_URL_TEMPLATE.format(video_id=video_id),
            "video_id": video_id,
        }
        if details.get("artist"):
            song["artist"] = details["artist"]
        if details.get("duration"):
            song["duration"] = details["duration"]
        self.youtube_songs.append(song)
        self._save_songs()
        logger.info(f"YouTube song added for {self.user_id}: {video_id}")
        return song

    def remove_song(self, song_id: str) -> bool:
        for songs in (self.my_songs, self.youtube_songs):
            for i, song in enumerate(songs):
                if song["id"] == song_id:
                    del songs[i]
                    self._save_songs()
                    return True
        return False

    def set_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise InvalidInput(f"Unknown mode: {mode}")
        self.mode = mode
        self.store.set_json(self._key(MODE_KEY), mode)

    def clear(self) -> None:
        """Forget both lists and the mode, as when the account is removed"""
        for name in (MY_SONGS_KEY, YOUTUBE_KEY, MODE_KEY):
            self.store.delete(self._key(name))
        self.my_songs, self.youtube_songs, self.mode = [], [], MODE_MY_SONGS

    def active_songs(self) -> List[Dict]:
        return self.my_songs if self.mode == MODE_MY_SONGS else self.youtube_songs

    def active_tracks(self) -> List[Track]:
        return [
            Track(
                id=song["id"],
                title=song["title"],
                url=song["url"],
                artist=song.get("artist"),
                duration=song.get("duration"),
            )
            for song in self.active_songs()
        ]

    def to_dict(self) -> Dict:
        return {
            "mode": self.mode,
            "my_songs": self.my_songs,
            "youtube_songs": self.youtube_songs,
            "persisted": getattr(self.store, "available", True),
        }
