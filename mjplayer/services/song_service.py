# ============================================================================
# FILE: mjplayer/services/song_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.orm import Session
from mjplayer.core.exceptions import InvalidInput
from mjplayer.db.models.catalog import Category, Song
from mjplayer.schemas.catalog import SongCreate, SongUpdate
import logging

logger = logging.getLogger(__name__)

class SongService:
    """
    Service layer for songs
    Which songs a caller sees and may change is decided by the songs policy:
    public songs, own uploads, or everything for admins
    """
    
    def list_songs(self, db: Session, category_id: Optional[str] = None) -> List[Song]:
        """All songs visible to the caller, newest first"""
        query = db.query(Song)
        if category_id:
            query = query.filter(Song.category_id == category_id)
        return query.order_by(Song.created_at.desc()).all()
    
    def list_user_songs(self, db: Session, user_id: str) -> List[Song]:
        """Songs uploaded by `user_id`, newest first"""
        return db.query(Song).filter(Song.uploaded_by == user_id).order_by(Song.created_at.desc()).all()
    
    def get_song(self, db: Session, song_id: str) -> Optional[Song]:
        return db.get(Song, song_id)
    
    def _check_category(self, db: Session, category_id: Optional[str]) -> None:
        if category_id and db.get(Category, category_id) is None:
            raise InvalidInput("Unknown category")
    
    def create_song(self, db: Session, caller_id: Optional[str], song_data: SongCreate) -> Song:
        """Add a song uploaded by the caller unless `uploaded_by` says otherwise"""
        self._check_category(db, song_data.category_id)
        try:
            song = Song(
                title=song_data.title,
                artist=song_data.artist or None,
                url=song_data.url,
                duration=song_data.duration,
                category_id=song_data.category_id or None,
                is_public=song_data.is_public,
                uploaded_by=song_data.uploaded_by or caller_id,
            )
            db.add(song)
            db.commit()
            db.refresh(song)
            logger.info(f"Song created: {song.id} by {song.uploaded_by}")
            return song
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating song: {e}")
            raise
    
    def update_song(self, db: Session, song_id: str, update_data: SongUpdate) -> Optional[Song]:
        song = self.get_song(db, song_id)
        if not song:
            return None
        
        changes = update_data.model_dump(exclude_unset=True)
        self._check_category(db, changes.get("category_id"))
        try:
            for field, value in changes.items():
                setattr(song, field, value)
            db.commit()
            db.refresh(song)
            logger.info(f"Song updated: {song_id}")
            return song
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating song: {e}")
            raise
    
    def delete_song(self, db: Session, song_id: str) -> bool:
        """Delete a song; it also disappears from every playlist"""
        song = self.get_song(db, song_id)
        if not song:
            return False
        
        try:
            db.delete(song)
            db.commit()
            logger.info(f"Song deleted: {song_id}")
            return True
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting song: {e}")
            raise

# Create singleton instance
song_service = SongService()
