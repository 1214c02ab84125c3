# ============================================================================
# FILE: mjplayer/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from mjplayer.schemas.catalog import SongResponse

class PlaylistCreate(BaseModel):
    """Schema for creating a playlist"""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    is_public: bool = False
    
    class Config:
        str_strip_whitespace = True

class PlaylistUpdate(BaseModel):
    """Schema for updating a playlist"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    is_public: Optional[bool] = None
    
    class Config:
        str_strip_whitespace = True

class PlaylistSongAdd(BaseModel):
    """Schema for adding a song to playlist"""
    song_id: str

class PlaylistReorder(BaseModel):
    """New order of the playlist, as song ids"""
    song_ids: List[str]

class PlaylistResponse(BaseModel):
    """Schema for playlist response"""
    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    is_public: Optional[bool] = None
    created_at: datetime
    updated_at: datetime
    songs: List[SongResponse] = []
    
    class Config:
        from_attributes = True
