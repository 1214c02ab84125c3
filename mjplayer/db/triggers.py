# ============================================================================
# FILE: mjplayer/db/triggers.py
# Session events standing in for database triggers
# ============================================================================
from sqlalchemy import event
from sqlalchemy.orm import Session
from mjplayer.db.models.user import User, Profile, UserRole, AppRole
import logging

logger = logging.getLogger(__name__)

@event.listens_for(Session, "before_flush")
def handle_new_user(session, flush_context, instances):
    """Every new account gets a profile and the default `user` role in the same flush"""
    for obj in list(session.new):
        if not isinstance(obj, User) or obj.profile is not None:
            continue
        obj.profile = Profile(full_name=obj.full_name)
        obj.roles.append(UserRole(role=AppRole.USER))
        logger.debug(f"Registration trigger fired for {obj.email}")
