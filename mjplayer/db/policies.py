# ============================================================================
# FILE: mjplayer/db/policies.py
# Row-level access policies, enforced by session events
# ============================================================================
"""
Every ORM read and write made through a Session is checked against the
caller bound to that session.

Reads get a WHERE clause per entity (`with_loader_criteria`), so rows the
caller may not see are never returned. Writes are checked row by row just
before the flush; the first row that fails aborts the flush with
PolicyViolation. Updates must pass against both the stored row and the
new row.

Code that runs on behalf of the system (registration, account removal,
seeding) wraps its work in `policy_bypass`.
"""
from contextlib import contextmanager
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Optional
from sqlalchemy import event, exists, inspect, or_, select
from sqlalchemy.orm import Session, with_loader_criteria
from mjplayer.core.exceptions import PolicyViolation
from mjplayer.db.models.user import User, Profile, UserRole, AppRole
from mjplayer.db.models.catalog import Category, Song
from mjplayer.db.models.playlist import Playlist, PlaylistSong
import logging

logger = logging.getLogger(__name__)

INSERT = "insert"
UPDATE = "update"
DELETE = "delete"

CALLER_KEY = "mjplayer.caller"
BYPASS_OPTION = "bypass_policies"

@dataclass(frozen=True)
class Caller:
    """Who a session is acting for"""
    user_id: Optional[str] = None
    is_admin: bool = False
    system: bool = False

ANONYMOUS = Caller()
SYSTEM = Caller(system=True)

def get_caller(session: Session) -> Caller:
    return session.info.get(CALLER_KEY, ANONYMOUS)

def has_role(session: Session, user_id: Optional[str], role) -> bool:
    """True if `user_id` holds `role` (an AppRole or its string value)"""
    if user_id is None:
        return False
    stmt = select(
        exists().where(UserRole.user_id == user_id, UserRole.role == AppRole(role))
    ).execution_options(**{BYPASS_OPTION: True})
    with session.no_autoflush:
        return bool(session.execute(stmt).scalar())

def bind_caller(session: Session, user_id: Optional[str]) -> Caller:
    """Attach the authenticated user (or anonymous, for None) to the session"""
    caller = Caller(user_id=user_id, is_admin=has_role(session, user_id, AppRole.ADMIN)) if user_id else ANONYMOUS
    session.info[CALLER_KEY] = caller
    return caller

@contextmanager
def policy_bypass(session: Session):
    """Run a block as the system; the previous caller is restored afterwards"""
    previous = session.info.get(CALLER_KEY)
    session.info[CALLER_KEY] = SYSTEM
    try:
        yield session
    finally:
        if previous is None:
            session.info.pop(CALLER_KEY, None)
        else:
            session.info[CALLER_KEY] = previous

# ----------------------------------------------------------------------------
# Read policies
# ----------------------------------------------------------------------------

def _playlist_visible(caller: Caller):
    if caller.user_id:
        return or_(Playlist.is_public.is_(True), Playlist.user_id == caller.user_id)
    return Playlist.is_public.is_(True)

def select_criteria(caller: Caller):
    """(entity, where-clause) pairs limiting what `caller` can read"""
    playlist_visible = _playlist_visible(caller)
    criteria = [
        (Playlist, playlist_visible),
        (PlaylistSong, PlaylistSong.playlist_id.in_(select(Playlist.id).where(playlist_visible))),
    ]
    if not caller.is_admin:
        if caller.user_id:
            criteria.append((Song, or_(Song.is_public.is_(True), Song.uploaded_by == caller.user_id)))
        else:
            criteria.append((Song, Song.is_public.is_(True)))
    # Profiles, roles and categories are readable by anyone
    return criteria

@event.listens_for(Session, "do_orm_execute")
def _apply_read_policies(execute_state):
    if (
        not execute_state.is_select
        or execute_state.is_column_load
        or execute_state.is_relationship_load
        or execute_state.execution_options.get(BYPASS_OPTION, False)
    ):
        return
    caller = get_caller(execute_state.session)
    if caller.system:
        return
    execute_state.statement = execute_state.statement.options(
        *[with_loader_criteria(entity, where) for entity, where in select_criteria(caller)]
    )

# ----------------------------------------------------------------------------
# Write policies
# ----------------------------------------------------------------------------

@dataclass
class PolicyContext:
    session: Session
    caller: Caller

def _deny(ctx, row):
    return False

def _admin(ctx, row):
    return ctx.caller.is_admin

def _profile_owner(ctx, row):
    return ctx.caller.user_id is not None and row.user_id == ctx.caller.user_id

def _uploader_is_caller(ctx, row):
    return ctx.caller.user_id is not None and row.uploaded_by == ctx.caller.user_id

def _song_owner_or_admin(ctx, row):
    return ctx.caller.is_admin or _uploader_is_caller(ctx, row)

def _playlist_owner(ctx, row):
    return ctx.caller.user_id is not None and row.user_id == ctx.caller.user_id

def _parent_playlist_owner(ctx, row):
    if ctx.caller.user_id is None or row.playlist_id is None:
        return False
    playlist = ctx.session.get(Playlist, row.playlist_id)
    return playlist is not None and playlist.user_id == ctx.caller.user_id

def _same_for_all(predicate):
    return {INSERT: predicate, UPDATE: predicate, DELETE: predicate}

WRITE_POLICIES = {
    User: _same_for_all(_deny),
    Profile: {INSERT: _deny, UPDATE: _profile_owner, DELETE: _deny},
    UserRole: _same_for_all(_admin),
    Category: _same_for_all(_admin),
    Song: {INSERT: _uploader_is_caller, UPDATE: _song_owner_or_admin, DELETE: _song_owner_or_admin},
    Playlist: _same_for_all(_playlist_owner),
    PlaylistSong: _same_for_all(_parent_playlist_owner),
}

def _row(obj, stored: bool = False) -> SimpleNamespace:
    """Column values of `obj`; with `stored`, the values before pending changes"""
    state = inspect(obj)
    values = {}
    for attr in state.mapper.column_attrs:
        if stored:
            history = state.attrs[attr.key].history
            if history.deleted:
                values[attr.key] = history.deleted[0]
                continue
        values[attr.key] = getattr(obj, attr.key)
    return SimpleNamespace(**values)

def _enforce(ctx: PolicyContext, obj, operation: str, row) -> None:
    policies = WRITE_POLICIES.get(type(obj))
    if policies is None:
        return
    if not policies[operation](ctx, row):
        table = obj.__table__.name
        logger.warning(f"Policy rejected {operation} on {table} for caller {ctx.caller.user_id}")
        raise PolicyViolation(table, operation)

@event.listens_for(Session, "before_flush")
def _apply_write_policies(session, flush_context, instances):
    caller = get_caller(session)
    if caller.system:
        return
    ctx = PolicyContext(session=session, caller=caller)
    with session.no_autoflush:
        for obj in list(session.new):
            _enforce(ctx, obj, INSERT, _row(obj))
        for obj in list(session.dirty):
            if not session.is_modified(obj, include_collections=False):
                continue
            _enforce(ctx, obj, UPDATE, _row(obj, stored=True))
            _enforce(ctx, obj, UPDATE, _row(obj))
        for obj in list(session.deleted):
            _enforce(ctx, obj, DELETE, _row(obj, stored=True))
