# ============================================================================
# FILE: mjplayer/schemas/catalog.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class CategoryCreate(BaseModel):
    """Schema for creating a category"""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    
    class Config:
        str_strip_whitespace = True

class CategoryUpdate(BaseModel):
    """Schema for updating a category"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    
    class Config:
        str_strip_whitespace = True

class CategoryResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True

class SongCreate(BaseModel):
    """Schema for adding a song; title and URL are required"""
    title: str = Field(..., min_length=1)
    artist: Optional[str] = None
    url: str = Field(..., min_length=1)
    duration: Optional[int] = Field(None, ge=0)
    category_id: Optional[str] = None
    is_public: bool = True
    # Defaults to the caller; anything else is refused by the songs policy
    uploaded_by: Optional[str] = None
    
    class Config:
        str_strip_whitespace = True

class SongUpdate(BaseModel):
    """Schema for updating a song"""
    title: Optional[str] = Field(None, min_length=1)
    artist: Optional[str] = None
    url: Optional[str] = Field(None, min_length=1)
    duration: Optional[int] = Field(None, ge=0)
    category_id: Optional[str] = None
    is_public: Optional[bool] = None
    
    class Config:
        str_strip_whitespace = True

class SongResponse(BaseModel):
    """Schema for song information"""
    id: str
    title: str
    artist: Optional[str] = None
    url: str
    duration: Optional[int] = None  # Duration in seconds
    category_id: Optional[str] = None
    category_name: Optional[str] = None
    uploaded_by: Optional[str] = None
    is_public: Optional[bool] = None
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True
