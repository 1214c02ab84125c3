# ============================================================================
# FILE: mjplayer/db/models/user.py
# ============================================================================
from sqlalchemy import Column, String, DateTime, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
import enum
from mjplayer.db.base import Base, generate_uuid

class AppRole(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"

class User(Base):
    """Account managed by the auth layer; only system code writes these rows"""
    __tablename__ = "users"
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    full_name = Column(String, nullable=True)  # registration metadata, copied into the profile
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships (deletes cascade in the database, not the ORM)
    profile = relationship("Profile", back_populates="user", uselist=False, passive_deletes="all")
    roles = relationship("UserRole", back_populates="user", passive_deletes="all")
    playlists = relationship("Playlist", back_populates="user", passive_deletes="all")
    songs = relationship("Song", back_populates="uploader", passive_deletes="all")

class Profile(Base):
    """Public profile, one per user, created by the registration trigger"""
    __tablename__ = "profiles"
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    full_name = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    user = relationship("User", back_populates="profile")

class UserRole(Base):
    """Role membership; a (user, role) pair is unique"""
    __tablename__ = "user_roles"
    __table_args__ = (UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),)
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(
        Enum(AppRole, name="app_role", values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
        default=AppRole.USER,
    )
    created_at = Column(DateTime, default=datetime.utcnow)
    
    user = relationship("User", back_populates="roles")
