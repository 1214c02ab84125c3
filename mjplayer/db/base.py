# ============================================================================
# FILE: mjplayer/db/base.py
# ============================================================================
from sqlalchemy.orm import declarative_base
import uuid

Base = declarative_base()

def generate_uuid() -> str:
    return str(uuid.uuid4())
