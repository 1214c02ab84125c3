# ============================================================================
# FILE: mjplayer/services/playlist_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from mjplayer.core.exceptions import InvalidInput
from mjplayer.db.models.playlist import Playlist, PlaylistSong
from mjplayer.schemas.playlist import PlaylistCreate, PlaylistUpdate
import logging

logger = logging.getLogger(__name__)

class PlaylistService:
    """
    Service layer for playlist operations
    Reads return public playlists and the caller's own; every write needs
    ownership, which the playlists policy enforces on commit
    """

    def create_playlist(self, db: Session, user_id: str, playlist_data: PlaylistCreate) -> Playlist:
        """Create a new playlist for a user"""
        try:
            playlist = Playlist(
                user_id=user_id,
                name=playlist_data.name,
                description=playlist_data.description,
                is_public=playlist_data.is_public,
            )
            db.add(playlist)
            db.commit()
            db.refresh(playlist)
            logger.info(f"Playlist created: {playlist.id} for user {user_id}")
            return playlist
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating playlist: {e}")
            raise

    def get_user_playlists(self, db: Session, user_id: str) -> List[Playlist]:
        """Get all playlists for a user"""
        return db.query(Playlist).filter(Playlist.user_id == user_id).order_by(Playlist.created_at.desc()).all()

    def list_public_playlists(self, db: Session) -> List[Playlist]:
        return db.query(Playlist).filter(Playlist.is_public.is_(True)).order_by(Playlist.created_at.desc()).all()

    def get_playlist(self, db: Session, playlist_id: str) -> Optional[Playlist]:
        """Get a specific playlist if the caller can see it"""
        return db.get(Playlist, playlist_id)

    def update_playlist(self, db: Session, playlist_id: str, update_data: PlaylistUpdate) -> Optional[Playlist]:
        """Update playlist details"""
        playlist = self.get_playlist(db, playlist_id)
        if not playlist:
            return None

        try:
            for field, value in update_data.model_dump(exclude_unset=True).items():
                setattr(playlist, field, value)
            db.commit()
            db.refresh(playlist)
            logger.info(f"Playlist updated: {playlist_id}")
            return playlist
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating playlist: {e}")
            raise

    def delete_playlist(self, db: Session, playlist_id: str) -> bool:
        """Delete a playlist"""
        playlist = self.get_playlist(db, playlist_id)
        if not playlist:
            return False

        try:
            db.delete(playlist)
            db.commit()
            logger.info(f"Playlist deleted: {playlist_id}")
            return True
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting playlist: {e}")
            raise

    def _get_entry(self, db: Session, playlist_id: str, song_id: str) -> Optional[PlaylistSong]:
        return db.query(PlaylistSong).filter(
            PlaylistSong.playlist_id == playlist_id,
            PlaylistSong.song_id == song_id
        ).first()

    def add_song_to_playlist(self, db: Session, playlist_id: str, song_id: str) -> bool:
        """Append a song to a playlist"""
        playlist = self.get_playlist(db, playlist_id)
        if not playlist:
            return False

        # Check if song already exists in playlist
        if self._get_entry(db, playlist_id, song_id):
            logger.info(f"Song already in playlist: {song_id}")
            return True

        last_position = db.query(func.max(PlaylistSong.position)).filter(
            PlaylistSong.playlist_id == playlist_id
        ).scalar()

        try:
            playlist_song = PlaylistSong(
                playlist_id=playlist_id,
                song_id=song_id,
                position=0 if last_position is None else last_position + 1,
            )
            db.add(playlist_song)
            db.commit()
            logger.info(f"Song added to playlist {playlist_id}: {song_id}")
            return True
        except Exception as e:
            db.rollback()
            logger.error(f"Error adding song to playlist: {e}")
            raise

    def remove_song_from_playlist(self, db: Session, playlist_id: str, song_id: str) -> bool:
        """Remove a song from a playlist"""
        playlist = self.get_playlist(db, playlist_id)
        if not playlist:
            return False

        playlist_song = self._get_entry(db, playlist_id, song_id)
        if not playlist_song:
            return False

        try:
            db.delete(playlist_song)
            db.commit()
            logger.info(f"Song removed from playlist {playlist_id}: {song_id}")
            return True
        except Exception as e:
            db.rollback()
            logger.error(f"Error removing song from playlist: {e}")
            raise

    def reorder_songs(self, db: Session, playlist_id: str, song_ids: List[str]) -> Optional[Playlist]:
        """
        Put the listed songs first, in the given order
        Songs left out keep their relative order after them
        """
        playlist = self.get_playlist(db, playlist_id)
        if not playlist:
            return None

        entries = db.query(PlaylistSong).filter(
            PlaylistSong.playlist_id == playlist_id
        ).order_by(PlaylistSong.position).all()
        by_song = {entry.song_id: entry for entry in entries}

        unknown = [song_id for song_id in song_ids if song_id not in by_song]
        if unknown:
            raise InvalidInput(f"Songs not in playlist: {', '.join(unknown)}")
        if len(set(song_ids)) != len(song_ids):
            raise InvalidInput("Duplicate songs in new order")

        listed = [by_song[song_id] for song_id in song_ids]
        rest = [entry for entry in entries if entry.song_id not in set(song_ids)]

        try:
            for position, entry in enumerate(listed + rest):
                entry.position = position
            db.commit()
            db.refresh(playlist)
            logger.info(f"Playlist reordered: {playlist_id}")
            return playlist
        except Exception as e:
            db.rollback()
            logger.error(f"Error reordering playlist: {e}")
            raise

# Create singleton instance
playlist_service = PlaylistService()
