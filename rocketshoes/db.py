"""
Database Module - Upstash Redis Client

Provides a singleton sync Upstash Redis client used as the durable
cart slot when CART_STORAGE_BACKEND=redis.
"""

from typing import Optional

from upstash_redis import Redis

from rocketshoes.config import UPSTASH_REDIS_REST_URL, UPSTASH_REDIS_REST_TOKEN

# Singleton instance
_sync_redis_client: Optional[Redis] = None


def get_redis_sync() -> Redis:
    """
    Get sync Upstash Redis client (singleton).

    Cart persistence is synchronous from the store's point of view,
    so the sync client is used rather than upstash_redis.asyncio.
    """
    global _sync_redis_client

    if _sync_redis_client is None:
        if not UPSTASH_REDIS_REST_URL or not UPSTASH_REDIS_REST_TOKEN:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        _sync_redis_client = Redis(url=UPSTASH_REDIS_REST_URL, token=UPSTASH_REDIS_REST_TOKEN)

    return _sync_redis_client
