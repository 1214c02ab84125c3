# ============================================================================
# FILE: mjplayer/db/models/catalog.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime
from mjplayer.db.base import Base, generate_uuid

class Category(Base):
    """Song category (genre); managed by admins"""
    __tablename__ = "categories"
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # songs.category_id is set to NULL by the database when a category goes away
    songs = relationship("Song", back_populates="category", passive_deletes="all")

class Song(Base):
    """A playable track; `url` must be a direct download link"""
    __tablename__ = "songs"
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String, nullable=False)
    artist = Column(String, nullable=True)
    url = Column(String, nullable=False)
    duration = Column(Integer, nullable=True)  # Duration in seconds
    category_id = Column(String(36), ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    uploaded_by = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True)
    is_public = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    category = relationship("Category", back_populates="songs")
    uploader = relationship("User", back_populates="songs")
    playlist_entries = relationship("PlaylistSong", back_populates="song", passive_deletes="all")
    
    @property
    def category_name(self):
        return self.category.name if self.category else None
