# ============================================================================
# FILE: mjplayer/api/v1/endpoints/library.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from mjplayer.api.dependencies import get_library
from mjplayer.schemas.library import (
    LibraryResponse,
    LibrarySong,
    MySongAdd,
    YoutubeSongAdd,
    ModeUpdate,
)
from mjplayer.player.local_library import LocalLibrary

router = APIRouter()

@router.get("/", response_model=LibraryResponse)
async def get_library_state(library: LocalLibrary = Depends(get_library)):
    """Both song lists and the active mode"""
    return library.to_dict()

@router.post("/my-songs", response_model=LibrarySong, status_code=201)
async def add_my_song(song: MySongAdd, library: LocalLibrary = Depends(get_library)):
    """Add a song by direct download link"""
    return library.add_my_song(song.title, song.url)

@router.post("/youtube", response_model=LibrarySong, status_code=201)
async def add_youtube_song(song: YoutubeSongAdd, library: LocalLibrary = Depends(get_library)):
    """Add a song by YouTube link"""
    return library.add_youtube_song(song.url)

@router.put("/mode", response_model=LibraryResponse)
async def set_mode(update: ModeUpdate, library: LocalLibrary = Depends(get_library)):
    """Switch between `mysongs` and `youtube`"""
    library.set_mode(update.mode)
    return library.to_dict()

@router.delete("/songs/{song_id}")
async def remove_song(song_id: str, library: LocalLibrary = Depends(get_library)):
    if not library.remove_song(song_id):
        raise HTTPException(status_code=404, detail="Song not found in library")
    return {"message": "Song removed from library"}
