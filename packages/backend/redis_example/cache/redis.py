from __future__ import annotations

import logging

import redis

from redis_example.cache.base import Store
from redis_example.errors import StoreError

logger = logging.getLogger(__name__)


class Cache:
    def __init__(self, connection: Store) -> None:
        # Owned by the caller; never closed here.
        self._connection = connection

    async def set(self, key: str, value: str) -> None:
        logger.debug("SET %s", key)
        # redis-py reconnects a released pool on demand, so check explicitly.
        if getattr(self._connection, "closed", False):
            logger.warning("SET %s on closed connection", key)
            raise StoreError(f"failed to set {key!r}: connection is closed", key=key)
        try:
            ack = await self._connection.set(key, value)
        except redis.RedisError as exc:
            logger.warning("SET %s failed: %s", key, exc)
            raise StoreError(f"failed to set {key!r}: {exc}", key=key) from exc
        if not ack:
            logger.warning("SET %s not acknowledged", key)
            raise StoreError(f"store did not acknowledge set of {key!r}", key=key)
