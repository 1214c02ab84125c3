# ============================================================================
# FILE: mjplayer/services/user_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from mjplayer.db.models.user import User, UserRole
from mjplayer.db.policies import policy_bypass, has_role
from mjplayer.schemas.user import UserCreate
from mjplayer.core.security import get_password_hash, verify_password
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for accounts; account writes always run as the system"""
    
    def create_user(self, db: Session, user_data: UserCreate) -> User:
        """Create a new user account (the registration trigger adds profile and role)"""
        with policy_bypass(db):
            try:
                user = User(
                    email=user_data.email,
                    hashed_password=get_password_hash(user_data.password),
                    full_name=user_data.full_name,
                )
                db.add(user)
                db.commit()
                db.refresh(user)
                logger.info(f"User created: {user.email}")
                return user
            except Exception as e:
                db.rollback()
                logger.error(f"Error creating user: {e}")
                raise
    
    def get_user(self, db: Session, user_id: str) -> Optional[User]:
        return db.get(User, user_id)
    
    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email).first()
    
    def authenticate_user(self, db: Session, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password"""
        user = self.get_user_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user
    
    def delete_user(self, db: Session, user_id: str) -> bool:
        """Remove an account; profile, roles, playlists and uploads go with it"""
        with policy_bypass(db):
            user = db.get(User, user_id)
            if not user:
                return False
            try:
                db.delete(user)
                db.commit()
                logger.info(f"User deleted: {user_id}")
                return True
            except Exception as e:
                db.rollback()
                logger.error(f"Error deleting user: {e}")
                raise
    
    def get_roles(self, db: Session, user_id: str) -> List[str]:
        rows = db.execute(select(UserRole.role).where(UserRole.user_id == user_id)).scalars()
        return sorted(role.value for role in rows)
    
    def has_role(self, db: Session, user_id: str, role: str) -> bool:
        return has_role(db, user_id, role)

# Create singleton instance
user_service = UserService()
