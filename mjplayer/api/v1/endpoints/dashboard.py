# ============================================================================
# FILE: mjplayer/api/v1/endpoints/dashboard.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from mjplayer.db.session import get_db
from mjplayer.api.dependencies import require_current_user
from mjplayer.schemas.catalog import SongCreate, SongResponse
from mjplayer.schemas.dashboard import DashboardResponse, DashboardSong
from mjplayer.services.song_service import song_service
from mjplayer.services.category_service import category_service
from mjplayer.services.subscription_service import subscription_service
from mjplayer.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/", response_model=DashboardResponse)
async def get_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Everything the user dashboard shows: plan, uploads, categories, referrals
    Requires authentication
    """
    songs = [
        DashboardSong.model_validate(song, from_attributes=True)
        for song in song_service.list_user_songs(db, current_user.id)
    ]
    return {
        "subscription": subscription_service.get_subscription(current_user.id),
        "songs": songs,
        "categories": category_service.list_categories(db),
        "referrals": subscription_service.get_referral_stats(current_user.id),
        "referral_link": subscription_service.referral_link(current_user.id),
    }

@router.post("/songs", response_model=SongResponse, status_code=201)
async def upload_premium_song(
    song_data: SongCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Upload a song from the dashboard
    Requires an active subscription
    """
    subscription = subscription_service.get_subscription(current_user.id)
    if not subscription["is_active"]:
        raise HTTPException(status_code=403, detail="Premium required")
    return song_service.create_song(db, current_user.id, song_data)

@router.post("/upgrade")
async def upgrade_to_premium(current_user: User = Depends(require_current_user)):
    subscription_service.upgrade(current_user.id)

@router.post("/referrals/withdraw")
async def request_withdrawal(current_user: User = Depends(require_current_user)):
    subscription_service.request_withdrawal(current_user.id)
