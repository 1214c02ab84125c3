# ============================================================================
# FILE: mjplayer/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""
    
    # App settings
    APP_NAME: str = "MJ Player"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Database
    DATABASE_URL: str = "sqlite:///./mjplayer.db"  # Change to PostgreSQL in production
    SEED_DEFAULT_CATEGORIES: bool = True
    
    # Redis (persisted player library state)
    REDIS_URL: str = "redis://localhost:6379/0"
    
    # Security
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    
    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    
    # Used to build referral links
    PUBLIC_BASE_URL: str = "http://localhost:8000"
    
    # Player
    PLAYER_DEFAULT_VOLUME: float = 1.0
    YOUTUBE_AUDIO_URL_TEMPLATE: str = "https://example.com/youtube-audio/{video_id}.mp3"
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
