# ============================================================================
# FILE: mjplayer/core/state_store.py
# Redis-backed JSON store for small per-user UI state (player library, mode)
# ============================================================================
import redis
import json
from typing import Optional, Any
from mjplayer.config import settings
import logging

logger = logging.getLogger(__name__)

class RedisStateStore:
    """
    JSON key/value store on top of Redis
    If Redis is unreachable the store stays usable but nothing is persisted
    """
    
    def __init__(self, url: str = None):
        try:
            self.redis_client = redis.from_url(url or settings.REDIS_URL, decode_responses=True)
            self.redis_client.ping()
            logger.info("Redis connection established")
        except redis.RedisError as e:
            logger.warning(f"Redis connection failed: {e}. Player state will not be persisted.")
            self.redis_client = None
    
    @property
    def available(self) -> bool:
        return self.redis_client is not None
    
    def set_json(self, key: str, value: Any) -> bool:
        """Serialize and store a value"""
        if not self.redis_client:
            return False
        
        try:
            self.redis_client.set(key, json.dumps(value))
            return True
        except redis.RedisError as e:
            logger.error(f"State store set error for {key}: {e}")
            return False
    
    def get_json(self, key: str) -> Optional[Any]:
        """Load a stored value, None when missing or unreadable"""
        if not self.redis_client:
            return None
        
        try:
            value = self.redis_client.get(key)
            if value:
                return json.loads(value)
            return None
        except (redis.RedisError, ValueError) as e:
            logger.error(f"State store get error for {key}: {e}")
            return None
    
    def delete(self, key: str) -> bool:
        if not self.redis_client:
            return False
        
        try:
            self.redis_client.delete(key)
            return True
        except redis.RedisError as e:
            logger.error(f"State store delete error for {key}: {e}")
            return False
