# ============================================================================
# FILE: mjplayer/services/subscription_service.py
# ============================================================================
from typing import Dict
from mjplayer.config import settings
from mjplayer.core.exceptions import FeatureUnavailable
import logging

logger = logging.getLogger(__name__)

class SubscriptionService:
    """
    Subscription and referral lookups for the user dashboard
    No payment or referral backend is connected: every account is on the
    free plan, referral stats are empty, and upgrades/withdrawals are refused
    """

    def get_subscription(self, user_id: str) -> Dict:
        return {"plan": "free", "is_active": False, "expires_at": None}

    def get_referral_stats(self, user_id: str) -> Dict:
        return {"total_referrals": 0, "points": 0, "pending_withdrawals": 0}

    def referral_link(self, user_id: str) -> str:
        return f"{settings.PUBLIC_BASE_URL.rstrip('/')}?ref={user_id}"

    def upgrade(self, user_id: str) -> None:
        logger.info(f"Upgrade requested by {user_id}")
        raise FeatureUnavailable("Payment integration is not available")

    def request_withdrawal(self, user_id: str) -> None:
        logger.info(f"Referral withdrawal requested by {user_id}")
        raise FeatureUnavailable("Referral withdrawals are not available")

# Create singleton instance
subscription_service = SubscriptionService()
