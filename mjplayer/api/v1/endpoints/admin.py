# ============================================================================
# FILE: mjplayer/api/v1/endpoints/admin.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from mjplayer.db.session import get_db
from mjplayer.api.dependencies import require_admin
from mjplayer.schemas.catalog import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    SongCreate,
    SongResponse,
)
from mjplayer.schemas.user import AdminUserResponse, RoleGrant, RoleResponse
from mjplayer.services.category_service import category_service
from mjplayer.services.song_service import song_service
from mjplayer.services.profile_service import profile_service
from mjplayer.services.role_service import role_service
from mjplayer.services.user_service import user_service
from mjplayer.player.registry import PlayerRegistry
from mjplayer.api.dependencies import get_player_registry, get_state_store
from mjplayer.player.local_library import LocalLibrary
from mjplayer.db.models.user import User
import logging

logger = logging.getLogger(__name__)

# Every route here is admin-only
router = APIRouter(dependencies=[Depends(require_admin)])

# ----------------------------------------------------------------------------
# Songs
# ----------------------------------------------------------------------------

@router.get("/songs", response_model=List[SongResponse])
async def list_all_songs(db: Session = Depends(get_db)):
    """Every song, private ones included"""
    return song_service.list_songs(db)

@router.post("/songs", response_model=SongResponse, status_code=201)
async def add_song(
    song_data: SongCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return song_service.create_song(db, current_user.id, song_data)

@router.delete("/songs/{song_id}")
async def delete_song(song_id: str, db: Session = Depends(get_db)):
    if not song_service.delete_song(db, song_id):
        raise HTTPException(status_code=404, detail="Song not found")
    return {"message": "Song deleted successfully"}

# ----------------------------------------------------------------------------
# Categories
# ----------------------------------------------------------------------------

@router.get("/categories", response_model=List[CategoryResponse])
async def list_categories(db: Session = Depends(get_db)):
    return category_service.list_categories(db)

@router.post("/categories", response_model=CategoryResponse, status_code=201)
async def add_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    return category_service.create_category(db, category_data)

@router.put("/categories/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    update_data: CategoryUpdate,
    db: Session = Depends(get_db)
):
    category = category_service.update_category(db, category_id, update_data)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category

@router.delete("/categories/{category_id}")
async def delete_category(category_id: str, db: Session = Depends(get_db)):
    """Delete a category; its songs are kept without a category"""
    if not category_service.delete_category(db, category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return {"message": "Category deleted successfully"}

# ----------------------------------------------------------------------------
# Users
# ----------------------------------------------------------------------------

@router.get("/users", response_model=List[AdminUserResponse])
async def list_users(db: Session = Depends(get_db)):
    """Registered users, newest first"""
    users = []
    for profile in profile_service.list_profiles(db):
        users.append(AdminUserResponse(
            id=profile.user_id,
            email=profile.user.email,
            full_name=profile.full_name,
            created_at=profile.created_at,
            roles=user_service.get_roles(db, profile.user_id),
        ))
    return users

@router.get("/users/{user_id}/roles", response_model=List[RoleResponse])
async def list_user_roles(user_id: str, db: Session = Depends(get_db)):
    return role_service.list_roles(db, user_id)

@router.post("/users/{user_id}/roles", response_model=RoleResponse, status_code=201)
async def grant_role(user_id: str, grant: RoleGrant, db: Session = Depends(get_db)):
    if not user_service.get_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return role_service.grant_role(db, user_id, grant.role)

@router.delete("/users/{user_id}/roles/{role}")
async def revoke_role(user_id: str, role: str, db: Session = Depends(get_db)):
    if role not in ("admin", "user"):
        raise HTTPException(status_code=400, detail="Unknown role")
    if not role_service.revoke_role(db, user_id, role):
        raise HTTPException(status_code=404, detail="Role not found")
    return {"message": "Role revoked"}

@router.delete("/users/{user_id}")
async def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    registry: PlayerRegistry = Depends(get_player_registry),
    store=Depends(get_state_store)
):
    """Remove an account along with its profile, roles, playlists, uploads and player state"""
    if not user_service.delete_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    registry.discard(user_id)
    LocalLibrary(store, user_id).clear()
    return {"message": "User deleted successfully"}
