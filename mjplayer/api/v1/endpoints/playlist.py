# ============================================================================
# FILE: mjplayer/api/v1/endpoints/playlist.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional
from mjplayer.db.session import get_db
from mjplayer.api.dependencies import require_current_user, get_current_user
from mjplayer.schemas.playlist import (
    PlaylistCreate,
    PlaylistUpdate,
    PlaylistResponse,
    PlaylistSongAdd,
    PlaylistReorder,
)
from mjplayer.services.playlist_service import playlist_service
from mjplayer.services.song_service import song_service
from mjplayer.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/my-playlists", response_model=List[PlaylistResponse])
async def get_my_playlists(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Get all playlists for the current user
    Requires authentication
    """
    return playlist_service.get_user_playlists(db, current_user.id)

@router.get("/public", response_model=List[PlaylistResponse])
async def get_public_playlists(
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """Playlists their owners have made public"""
    return playlist_service.list_public_playlists(db)

@router.post("/create", response_model=PlaylistResponse)
async def create_playlist(
    playlist_data: PlaylistCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Create a new playlist
    Requires authentication
    """
    return playlist_service.create_playlist(db, current_user.id, playlist_data)

@router.get("/{playlist_id}", response_model=PlaylistResponse)
async def get_playlist(
    playlist_id: str,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """
    Get a specific playlist
    Public playlists are visible to everyone, private ones to their owner
    """
    playlist = playlist_service.get_playlist(db, playlist_id)
    if not playlist:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return playlist

@router.put("/{playlist_id}", response_model=PlaylistResponse)
async def update_playlist(
    playlist_id: str,
    update_data: PlaylistUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Update playlist details (name, description, visibility)
    Requires authentication and ownership
    """
    playlist = playlist_service.update_playlist(db, playlist_id, update_data)
    if not playlist:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return playlist

@router.delete("/{playlist_id}")
async def delete_playlist(
    playlist_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Delete a playlist
    Requires authentication and ownership
    """
    success = playlist_service.delete_playlist(db, playlist_id)
    if not success:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return {"message": "Playlist deleted successfully"}

@router.post("/{playlist_id}/add-song")
async def add_song_to_playlist(
    playlist_id: str,
    song_data: PlaylistSongAdd,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Add a song to a playlist
    Requires authentication and ownership
    """
    if not song_service.get_song(db, song_data.song_id):
        raise HTTPException(status_code=404, detail="Song not found")
    success = playlist_service.add_song_to_playlist(db, playlist_id, song_data.song_id)
    if not success:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return {"message": "Song added to playlist"}

@router.delete("/{playlist_id}/remove-song/{song_id}")
async def remove_song_from_playlist(
    playlist_id: str,
    song_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Remove a song from a playlist
    Requires authentication and ownership
    """
    success = playlist_service.remove_song_from_playlist(db, playlist_id, song_id)
    if not success:
        raise HTTPException(status_code=404, detail="Song not found in playlist")
    return {"message": "Song removed from playlist"}

@router.put("/{playlist_id}/order", response_model=PlaylistResponse)
async def reorder_playlist(
    playlist_id: str,
    order: PlaylistReorder,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Reorder a playlist's songs
    Requires authentication and ownership
    """
    playlist = playlist_service.reorder_songs(db, playlist_id, order.song_ids)
    if not playlist:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return playlist
