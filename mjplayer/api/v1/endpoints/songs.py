# ============================================================================
# FILE: mjplayer/api/v1/endpoints/songs.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from mjplayer.db.session import get_db
from mjplayer.api.dependencies import get_current_user, require_current_user
from mjplayer.schemas.catalog import SongCreate, SongUpdate, SongResponse
from mjplayer.services.song_service import song_service
from mjplayer.db.models.user import User

router = APIRouter()

@router.get("/", response_model=List[SongResponse])
async def list_songs(
    category_id: Optional[str] = Query(None, description="Only songs in this category"),
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """
    Songs visible to the caller, newest first
    Anonymous callers see public songs only
    """
    return song_service.list_songs(db, category_id)

@router.get("/mine", response_model=List[SongResponse])
async def list_my_songs(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Songs uploaded by the caller"""
    return song_service.list_user_songs(db, current_user.id)

@router.get("/{song_id}", response_model=SongResponse)
async def get_song(
    song_id: str,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    song = song_service.get_song(db, song_id)
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    return song

@router.post("/", response_model=SongResponse, status_code=201)
async def add_song(
    song_data: SongCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Add a song by direct download link
    Requires authentication; the caller is recorded as uploader
    """
    return song_service.create_song(db, current_user.id, song_data)

@router.put("/{song_id}", response_model=SongResponse)
async def update_song(
    song_id: str,
    update_data: SongUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Update a song
    Requires ownership or admin
    """
    song = song_service.update_song(db, song_id, update_data)
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    return song

@router.delete("/{song_id}")
async def delete_song(
    song_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Delete a song
    Requires ownership or admin
    """
    if not song_service.delete_song(db, song_id):
        raise HTTPException(status_code=404, detail="Song not found")
    return {"message": "Song deleted successfully"}
