"""Cache Redis des réponses de recherche."""
from typing import Optional

import redis.asyncio as redis

from product_search.config import settings


class CacheManager:
    """A class to manage the Redis cache."""
    def __init__(self, redis_url: str = settings.REDIS_URL):
        """Initialize the CacheManager."""
        self.redis_url = redis_url
        self.redis = redis.from_url(self.redis_url, encoding="utf-8", decode_responses=True)

    async def get(self, key: str) -> Optional[str]:
        """Get a value from the cache."""
        return await self.redis.get(key)

    async def set(self, key: str, value: str, expire: int = settings.CACHE_TTL_SECONDS):
        """Set a value in the cache, expiring after `expire` seconds."""
        await self.redis.set(key, value, ex=expire)

    async def ping(self) -> bool:
        """Check that the Redis server answers."""
        return await self.redis.ping()

    async def close(self):
        """Close the Redis connection."""
        await self.redis.aclose()


cache_manager = CacheManager()
