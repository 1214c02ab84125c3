# ============================================================================
# FILE: mjplayer/api/dependencies.py
# ============================================================================
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from mjplayer.db.session import get_db
from mjplayer.db.policies import bind_caller, get_caller
from mjplayer.core.security import decode_access_token
from mjplayer.db.models.user import User
from mjplayer.player.registry import PlayerRegistry
from mjplayer.player.state_machine import PlaybackStateMachine
from mjplayer.player.local_library import LocalLibrary
from typing import Optional

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/user/login", auto_error=False)

def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Get current authenticated user from JWT token
    Returns None if no token or invalid token (allows anonymous access)
    The request's session is bound to this caller so row-level policies apply
    """
    user = None
    if token:
        try:
            payload = decode_access_token(token)
            user_id: str = payload.get("sub")
            if user_id is not None:
                user = db.get(User, user_id)
        except HTTPException:
            user = None

    bind_caller(db, user.id if user else None)
    return user

def require_current_user(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    """
    Require authenticated user (raises 401 if not authenticated)
    Use this dependency for protected endpoints
    """
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user

def require_admin(
    current_user: User = Depends(require_current_user),
    db: Session = Depends(get_db)
) -> User:
    """
    Gate for admin panel routes
    Writes are also checked by the row-level policies; this only keeps
    non-admins out of the panel
    """
    if not get_caller(db).is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You don't have admin privileges",
        )
    return current_user

def get_player_registry(request: Request) -> PlayerRegistry:
    return request.app.state.players

def get_player(
    current_user: User = Depends(require_current_user),
    registry: PlayerRegistry = Depends(get_player_registry)
) -> PlaybackStateMachine:
    return registry.get(current_user.id)

def get_state_store(request: Request):
    """The persisted UI state store; created on startup"""
    store = getattr(request.app.state, "state_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="State store not ready")
    return store

def get_library(
    current_user: User = Depends(require_current_user),
    store=Depends(get_state_store)
) -> LocalLibrary:
    return LocalLibrary(store, current_user.id)
