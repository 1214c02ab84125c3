# ============================================================================
# FILE: mjplayer/schemas/player.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any

class TrackInfo(BaseModel):
    id: str
    title: str
    url: str
    artist: Optional[str] = None
    duration: Optional[float] = None

class PlayerStateResponse(BaseModel):
    """Player state plus the transport commands the audio element must apply"""
    state: str
    is_playing: bool
    current_index: int
    current_song: Optional[TrackInfo] = None
    playlist: List[TrackInfo] = []
    current_time: float
    duration: float
    current_time_display: str
    duration_display: str
    volume: float
    shuffle: bool
    repeat: bool
    commands: List[Dict[str, Any]] = []

class LoadSongsRequest(BaseModel):
    """Load the visible song list, optionally one category only"""
    category_id: Optional[str] = None
    start_index: int = Field(0, ge=0)

class LoadRequest(BaseModel):
    start_index: int = Field(0, ge=0)

class SeekRequest(BaseModel):
    time: float = Field(..., allow_inf_nan=False)

class VolumeRequest(BaseModel):
    volume: float = Field(..., allow_inf_nan=False)

class MediaReadyEvent(BaseModel):
    duration: Optional[float] = None

class TimeUpdateEvent(BaseModel):
    current_time: Optional[float] = None
    duration: Optional[float] = None
