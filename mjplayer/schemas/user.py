# ============================================================================
# FILE: mjplayer/schemas/user.py
# ============================================================================
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime
from mjplayer.db.models.user import AppRole

class UserCreate(BaseModel):
    """Schema for user registration"""
    email: EmailStr
    password: str = Field(..., min_length=6)
    full_name: Optional[str] = None

class UserResponse(BaseModel):
    """Schema for user response"""
    id: str
    email: str
    full_name: Optional[str] = None
    created_at: datetime
    roles: List[str] = []

class Token(BaseModel):
    """Schema for JWT token response"""
    access_token: str
    token_type: str = "bearer"

class ProfileUpdate(BaseModel):
    """Schema for updating the caller's profile"""
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None

class ProfileResponse(BaseModel):
    """Schema for profile response"""
    id: str
    user_id: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True

class RoleResponse(BaseModel):
    user_id: str
    role: AppRole
    created_at: datetime
    
    class Config:
        from_attributes = True

class RoleGrant(BaseModel):
    role: str = Field(..., pattern="^(admin|user)$")

class HasRoleResponse(BaseModel):
    user_id: str
    role: str
    has_role: bool

class AdminUserResponse(BaseModel):
    """A row in the admin user list"""
    id: str
    email: str
    full_name: Optional[str] = None
    created_at: datetime
    roles: List[str] = []
