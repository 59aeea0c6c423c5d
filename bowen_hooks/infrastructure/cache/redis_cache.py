"""Redis-backed cache client"""

import logging
from typing import Optional

import redis

from ...domain.repositories.cache_client import ICacheClient

logger = logging.getLogger(__name__)


class RedisCache(ICacheClient):
    """Thin wrapper over a redis client exposing the operations the auth core needs"""

    def __init__(self, client: redis.Redis):
        self.client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisCache":
        return cls(redis.from_url(url, decode_responses=True))

    def get(self, key: str) -> Optional[str]:
        try:
            return self.client.get(key)
        except redis.RedisError as e:
            logger.error("Error getting Redis key %s: %s", key, e)
            raise

    def set_with_expiry(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            self.client.setex(key, ttl_seconds, value)
        except redis.RedisError as e:
            logger.error("Error setting Redis key %s: %s", key, e)
            raise

    def delete(self, key: str) -> None:
        try:
            self.client.delete(key)
        except redis.RedisError as e:
            logger.error("Error deleting Redis key %s: %s", key, e)
            raise

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError as e:
            logger.warning("Redis ping failed: %s", e)
            return False

    def close(self) -> None:
        self.client.close()
        logger.info("Redis connection closed")
