# ============================================================================
# FILE: mjplayer/db/init_db.py
# ============================================================================
from sqlalchemy import select
from sqlalchemy.orm import Session
from mjplayer.db.base import Base
from mjplayer.db.policies import policy_bypass
from mjplayer.db.models.user import User, Profile, UserRole  # noqa: F401
from mjplayer.db.models.catalog import Category, Song  # noqa: F401
from mjplayer.db.models.playlist import Playlist, PlaylistSong  # noqa: F401
import logging

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    ("Bollywood", "Hindi film songs"),
    ("Pop", "Popular music"),
    ("Rock", "Rock music"),
    ("Classical", "Classical music"),
    ("Hip Hop", "Hip hop and rap music"),
    ("Electronic", "Electronic and dance music"),
    ("Jazz", "Jazz music"),
    ("Country", "Country music"),
    ("R&B", "Rhythm and blues"),
    ("Regional", "Regional language songs"),
    ("Love Songs", "Romantic and love-themed songs"),
    ("Party Songs", "High-energy party and dance tracks"),
]

def seed_categories(db: Session) -> int:
    """Insert the default categories that don't exist yet; returns how many were added"""
    with policy_bypass(db):
        existing = set(db.execute(select(Category.name)).scalars())
        missing = [(name, desc) for name, desc in DEFAULT_CATEGORIES if name not in existing]
        for name, description in missing:
            db.add(Category(name=name, description=description))
        db.commit()
    if missing:
        logger.info(f"Seeded {len(missing)} default categories")
    return len(missing)

def init_db(engine, session_factory=None, seed: bool = True) -> None:
    """Create tables and, optionally, the default categories"""
    Base.metadata.create_all(bind=engine)
    if seed and session_factory is not None:
        db = session_factory()
        try:
            seed_categories(db)
        finally:
            db.close()
