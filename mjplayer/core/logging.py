# ============================================================================
# FILE: mjplayer/core/logging.py
# ============================================================================
import logging
import sys
from mjplayer.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("sqlalchemy.engine", "httpx", "urllib3", "multipart")

def setup_logging(level: str = None) -> None:
    """Configure root logging once for the whole application"""
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    
    root = logging.getLogger()
    root.setLevel(level.upper())
    
    # Avoid stacking handlers when the app module is imported more than once
    if not any(getattr(h, "_mjplayer", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._mjplayer = True
        root.addHandler(handler)
    
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
