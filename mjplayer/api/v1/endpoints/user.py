# ============================================================================
# FILE: mjplayer/api/v1/endpoints/user.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from datetime import timedelta
from mjplayer.db.session import get_db
from mjplayer.api.dependencies import require_current_user, get_current_user
from mjplayer.schemas.user import (
    UserCreate,
    UserResponse,
    Token,
    ProfileResponse,
    ProfileUpdate,
    HasRoleResponse,
)
from mjplayer.services.user_service import user_service
from mjplayer.services.profile_service import profile_service
from mjplayer.core.security import create_access_token
from mjplayer.config import settings
from mjplayer.db.models.user import User, AppRole
from typing import Optional
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def build_user_response(db: Session, user: User) -> UserResponse:
    profile = profile_service.get_profile(db, user.id)
    return UserResponse(
        id=user.id,
        email=user.email,
        full_name=profile.full_name if profile else user.full_name,
        created_at=user.created_at,
        roles=user_service.get_roles(db, user.id),
    )

@router.post("/signup", response_model=UserResponse)
async def signup(
    user_data: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new user account
    A profile and the default `user` role are created with it
    """
    existing_email = user_service.get_user_by_email(db, user_data.email)
    if existing_email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )
    
    user = user_service.create_user(db, user_data)
    return build_user_response(db, user)

@router.post("/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    """
    Login with email (sent as `username`) and password
    Returns JWT access token
    """
    user = user_service.authenticate_user(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    # Create access token
    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": user.id}, expires_delta=access_token_expires
    )
    
    return {"access_token": access_token, "token_type": "bearer"}

@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Get current user information
    Requires authentication
    """
    return build_user_response(db, current_user)

@router.put("/me/profile", response_model=ProfileResponse)
async def update_my_profile(
    update_data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Update the caller's display name / avatar"""
    profile = profile_service.update_profile(db, current_user.id, update_data)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile

@router.get("/has-role", response_model=HasRoleResponse)
async def check_role(
    user_id: str = Query(..., description="User to check"),
    role: AppRole = Query(..., description="admin or user"),
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """
    Boolean role check used by the UI to gate screens
    Available to all users (authenticated and anonymous)
    """
    return HasRoleResponse(
        user_id=user_id,
        role=role.value,
        has_role=user_service.has_role(db, user_id, role),
    )
