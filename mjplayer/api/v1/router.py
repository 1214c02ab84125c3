# ============================================================================
# FILE: mjplayer/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from mjplayer.api.v1.endpoints import (
    user,
    songs,
    categories,
    playlist,
    player,
    library,
    dashboard,
    admin,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(user.router, prefix="/user", tags=["user"])
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(playlist.router, prefix="/playlist", tags=["playlist"])
api_router.include_router(player.router, prefix="/player", tags=["player"])
api_router.include_router(library.router, prefix="/library", tags=["library"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
