# ============================================================================
# FILE: mjplayer/schemas/library.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional, List

class LibrarySong(BaseModel):
    id: str
    title: str
    url: str
    artist: Optional[str] = None
    duration: Optional[int] = None
    video_id: Optional[str] = None

class LibraryResponse(BaseModel):
    mode: str
    my_songs: List[LibrarySong] = []
    youtube_songs: List[LibrarySong] = []
    persisted: bool = True

class MySongAdd(BaseModel):
    title: str
    url: str

class YoutubeSongAdd(BaseModel):
    url: str

class ModeUpdate(BaseModel):
    mode: str
