# ============================================================================
# FILE: mjplayer/core/ytmusic_client.py
# ============================================================================
from ytmusicapi import YTMusic
from typing import Dict, Optional
import re
import logging

logger = logging.getLogger(__name__)

YOUTUBE_URL_PATTERN = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\n?#]+)")

def extract_video_id(url: str) -> Optional[str]:
    """Pull the video id out of a youtube.com/watch or youtu.be link"""
    match = YOUTUBE_URL_PATTERN.search(url or "")
    return match.group(1) if match else None

class YTMusicClient:
    """Wrapper for YTMusic API, used to name songs added by YouTube link"""

    def __init__(self):
        self._ytmusic = None

    @property
    def ytmusic(self) -> YTMusic:
        # Created on first use so importing the app never touches the network
        if self._ytmusic is None:
            self._ytmusic = YTMusic()
        return self._ytmusic

    def get_song_details(self, video_id: str) -> Optional[Dict]:
        """
        Get title/artist/duration for a video
        Returns None when YouTube Music can't be reached or doesn't know the id
        """
        try:
            song = self.ytmusic.get_song(video_id)
        except Exception as e:
            logger.error(f"YTMusic get_song error: {e}")
            return None

        details = (song or {}).get("videoDetails") or {}
        if not details.get("title"):
            return None

        length = details.get("lengthSeconds")
        return {
            "video_id": video_id,
            "title": details.get("title"),
            "artist": details.get("author"),
            "duration": int(length) if length else None,
        }

# Singleton instance
ytmusic_client = YTMusicClient()
