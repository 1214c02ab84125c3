# ============================================================================
# FILE: mjplayer/schemas/dashboard.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional, List
from mjplayer.schemas.catalog import SongResponse, CategoryResponse

class SubscriptionStatus(BaseModel):
    plan: str
    is_active: bool
    expires_at: Optional[str] = None

class ReferralStats(BaseModel):
    total_referrals: int = 0
    points: int = 0
    pending_withdrawals: int = 0

class DashboardSong(SongResponse):
    plays: int = 0  # play counts are not tracked

class DashboardResponse(BaseModel):
    subscription: SubscriptionStatus
    songs: List[DashboardSong] = []
    categories: List[CategoryResponse] = []
    referrals: ReferralStats
    referral_link: str
