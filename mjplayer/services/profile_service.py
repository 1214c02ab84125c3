# ============================================================================
# FILE: mjplayer/services/profile_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.orm import Session
from mjplayer.db.models.user import Profile
from mjplayer.schemas.user import ProfileUpdate
import logging

logger = logging.getLogger(__name__)

class ProfileService:
    """Service layer for profiles"""
    
    def list_profiles(self, db: Session) -> List[Profile]:
        """All profiles, newest first"""
        return db.query(Profile).order_by(Profile.created_at.desc()).all()
    
    def get_profile(self, db: Session, user_id: str) -> Optional[Profile]:
        return db.query(Profile).filter(Profile.user_id == user_id).first()
    
    def update_profile(self, db: Session, user_id: str, update_data: ProfileUpdate) -> Optional[Profile]:
        """Update a profile; only its owner gets past the profiles policy"""
        profile = self.get_profile(db, user_id)
        if not profile:
            return None
        
        try:
            for field, value in update_data.model_dump(exclude_unset=True).items():
                setattr(profile, field, value)
            db.commit()
            db.refresh(profile)
            logger.info(f"Profile updated for user {user_id}")
            return profile
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating profile: {e}")
            raise

# Create singleton instance
profile_service = ProfileService()
