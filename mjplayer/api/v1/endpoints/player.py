# ============================================================================
# FILE: mjplayer/api/v1/endpoints/player.py
# ============================================================================
"""
Player routes. Every route returns the player state and the transport
commands the browser's audio element has to apply, in order. The audio
element reports back through the /events routes.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from mjplayer.db.session import get_db
from mjplayer.api.dependencies import get_player, get_library
from mjplayer.schemas.player import (
    PlayerStateResponse,
    LoadSongsRequest,
    LoadRequest,
    SeekRequest,
    VolumeRequest,
    MediaReadyEvent,
    TimeUpdateEvent,
)
from mjplayer.services.song_service import song_service
from mjplayer.services.playlist_service import playlist_service
from mjplayer.player.state_machine import PlaybackStateMachine, Track
from mjplayer.player.local_library import LocalLibrary
from mjplayer.db.models.catalog import Song
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def _tracks(songs: List[Song]) -> List[Track]:
    return [
        Track(id=song.id, title=song.title, url=song.url, artist=song.artist, duration=song.duration)
        for song in songs
    ]

def _respond(player: PlaybackStateMachine) -> dict:
    state = player.snapshot()
    state["commands"] = player.media.drain()
    return state

def _load(player: PlaybackStateMachine, tracks: List[Track], start_index: int) -> dict:
    if tracks and start_index >= len(tracks):
        raise HTTPException(status_code=400, detail="Start index out of range")
    player.load_playlist(tracks, 0 if not tracks else start_index)
    return _respond(player)

@router.get("/", response_model=PlayerStateResponse)
async def get_player_state(player: PlaybackStateMachine = Depends(get_player)):
    """Current player state (also drains pending commands)"""
    return _respond(player)

@router.post("/load/songs", response_model=PlayerStateResponse)
async def load_songs(
    options: LoadSongsRequest,
    db: Session = Depends(get_db),
    player: PlaybackStateMachine = Depends(get_player)
):
    """Queue every song the caller can see, optionally one category only"""
    songs = song_service.list_songs(db, options.category_id)
    return _load(player, _tracks(songs), options.start_index)

@router.post("/load/playlist/{playlist_id}", response_model=PlayerStateResponse)
async def load_playlist(
    playlist_id: str,
    options: LoadRequest = LoadRequest(),
    db: Session = Depends(get_db),
    player: PlaybackStateMachine = Depends(get_player)
):
    playlist = playlist_service.get_playlist(db, playlist_id)
    if not playlist:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return _load(player, _tracks(playlist.songs), options.start_index)

@router.post("/load/library", response_model=PlayerStateResponse)
async def load_library(
    options: LoadRequest = LoadRequest(),
    library: LocalLibrary = Depends(get_library),
    player: PlaybackStateMachine = Depends(get_player)
):
    """Queue the active list of the caller's own library"""
    return _load(player, library.active_tracks(), options.start_index)

@router.post("/toggle", response_model=PlayerStateResponse)
async def toggle_play(player: PlaybackStateMachine = Depends(get_player)):
    player.toggle_play()
    return _respond(player)

@router.post("/next", response_model=PlayerStateResponse)
async def next_song(player: PlaybackStateMachine = Depends(get_player)):
    player.next()
    return _respond(player)

@router.post("/prev", response_model=PlayerStateResponse)
async def prev_song(player: PlaybackStateMachine = Depends(get_player)):
    player.prev()
    return _respond(player)

@router.post("/select/{index}", response_model=PlayerStateResponse)
async def select_song(index: int, player: PlaybackStateMachine = Depends(get_player)):
    try:
        player.select(index)
    except IndexError:
        raise HTTPException(status_code=400, detail="Track index out of range")
    return _respond(player)

@router.post("/seek", response_model=PlayerStateResponse)
async def seek(request: SeekRequest, player: PlaybackStateMachine = Depends(get_player)):
    player.seek(request.time)
    return _respond(player)

@router.post("/volume", response_model=PlayerStateResponse)
async def set_volume(request: VolumeRequest, player: PlaybackStateMachine = Depends(get_player)):
    player.set_volume(request.volume)
    return _respond(player)

@router.post("/shuffle", response_model=PlayerStateResponse)
async def toggle_shuffle(player: PlaybackStateMachine = Depends(get_player)):
    player.toggle_shuffle()
    return _respond(player)

@router.post("/repeat", response_model=PlayerStateResponse)
async def toggle_repeat(player: PlaybackStateMachine = Depends(get_player)):
    player.toggle_repeat()
    return _respond(player)

# ----------------------------------------------------------------------------
# Audio element events
# ----------------------------------------------------------------------------

@router.post("/events/ready", response_model=PlayerStateResponse)
async def media_ready(event: MediaReadyEvent, player: PlaybackStateMachine = Depends(get_player)):
    """loadedmetadata"""
    player.on_media_ready(event.duration)
    return _respond(player)

@router.post("/events/timeupdate", response_model=PlayerStateResponse)
async def media_time_update(event: TimeUpdateEvent, player: PlaybackStateMachine = Depends(get_player)):
    player.on_time_update(event.current_time, event.duration)
    return _respond(player)

@router.post("/events/ended", response_model=PlayerStateResponse)
async def media_ended(player: PlaybackStateMachine = Depends(get_player)):
    player.on_media_ended()
    return _respond(player)

@router.post("/events/play", response_model=PlayerStateResponse)
async def media_play(player: PlaybackStateMachine = Depends(get_player)):
    player.on_play()
    return _respond(player)

@router.post("/events/pause", response_model=PlayerStateResponse)
async def media_pause(player: PlaybackStateMachine = Depends(get_player)):
    player.on_pause()
    return _respond(player)
