import json
import logging
from functools import lru_cache
from typing import Optional, Any

import redis

from product_api.config import get_settings

logger = logging.getLogger(__name__)


class CacheService:
    """
    Redis cache service for product details.

    This service provides methods for:
    - Setting cache with TTL
    - Getting cached values
    - Invalidating cache

    Redis errors are logged and reported as a miss (or a failed write);
    they never reach the caller.
    """

    def __init__(self, client: redis.Redis, ttl: int = 300):
        self.client = client
        self.ttl = ttl

    def _make_key(self, prefix: str, key: str) -> str:
        """Create a namespaced cache key."""
        return f"{prefix}:{key}"

    def get(self, prefix: str, key: str) -> Optional[Any]:
        """
        Get a value from cache.

        Args:
            prefix: Cache key prefix (e.g., 'product')
            key: Unique identifier

        Returns:
            Cached value or None if not found
        """
        cache_key = self._make_key(prefix, key)
        try:
            value = self.client.get(cache_key)
            if value:
                return json.loads(value)
            return None
        except (redis.RedisError, json.JSONDecodeError) as e:
            logger.warning(f"Cache read failed for {cache_key}: {e}")
            return None

    def set(self, prefix: str, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        Set a value in cache with TTL.

        Args:
            prefix: Cache key prefix
            key: Unique identifier
            value: Value to cache (will be JSON serialized)
            ttl: Time to live in seconds (optional, uses default if not provided)

        Returns:
            True if successful, False otherwise
        """
        cache_key = self._make_key(prefix, key)
        ttl = ttl or self.ttl
        try:
            serialized = json.dumps(value, default=str)
            self.client.setex(cache_key, ttl, serialized)
            return True
        except (redis.RedisError, TypeError) as e:
            logger.warning(f"Cache write failed for {cache_key}: {e}")
            return False

    def delete(self, prefix: str, key: str) -> bool:
        """
        Delete a value from cache.

        Returns:
            True if deleted, False otherwise
        """
        cache_key = self._make_key(prefix, key)
        try:
            self.client.delete(cache_key)
            return True
        except redis.RedisError as e:
            logger.warning(f"Cache invalidation failed for {cache_key}: {e}")
            return False

    def ping(self) -> bool:
        """Check that Redis is reachable."""
        try:
            return bool(self.client.ping())
        except redis.RedisError:
            return False


@lru_cache
def get_cache_service() -> Optional[CacheService]:
    """
    Return the shared cache service, or None when REDIS_URL is not configured.
    """
    settings = get_settings()
    if not settings.REDIS_URL:
        return None

    client = redis.from_url(settings.REDIS_URL, decode_responses=True)
    return CacheService(client, ttl=settings.CACHE_TTL)
