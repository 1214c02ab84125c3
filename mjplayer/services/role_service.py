# ============================================================================
# FILE: mjplayer/services/role_service.py
# ============================================================================
from typing import List
from sqlalchemy.orm import Session
from mjplayer.db.models.user import UserRole, AppRole
import logging

logger = logging.getLogger(__name__)

class RoleService:
    """Service layer for role membership (admin-only writes)"""
    
    def list_roles(self, db: Session, user_id: str) -> List[UserRole]:
        return db.query(UserRole).filter(UserRole.user_id == user_id).order_by(UserRole.role).all()
    
    def _get(self, db: Session, user_id: str, role: AppRole):
        return db.query(UserRole).filter(UserRole.user_id == user_id, UserRole.role == role).first()
    
    def grant_role(self, db: Session, user_id: str, role: str) -> UserRole:
        """Give `role` to a user; granting a role twice is a no-op"""
        app_role = AppRole(role)
        existing = self._get(db, user_id, app_role)
        if existing:
            return existing
        
        try:
            user_role = UserRole(user_id=user_id, role=app_role)
            db.add(user_role)
            db.commit()
            db.refresh(user_role)
            logger.info(f"Role {role} granted to {user_id}")
            return user_role
        except Exception as e:
            db.rollback()
            logger.error(f"Error granting role: {e}")
            raise
    
    def revoke_role(self, db: Session, user_id: str, role: str) -> bool:
        user_role = self._get(db, user_id, AppRole(role))
        if not user_role:
            return False
        
        try:
            db.delete(user_role)
            db.commit()
            logger.info(f"Role {role} revoked from {user_id}")
            return True
        except Exception as e:
            db.rollback()
            logger.error(f"Error revoking role: {e}")
            raise

# Create singleton instance
role_service = RoleService()
