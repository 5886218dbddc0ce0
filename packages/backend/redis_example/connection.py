from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import redis
import redis.asyncio as aioredis

from redis_example.config import get_settings
from redis_example.errors import StoreError

logger = logging.getLogger(__name__)


def connect(url: str) -> aioredis.Redis:
    """Build a client for ``url``. No network I/O happens until the first command."""
    return aioredis.from_url(url, decode_responses=True)


@asynccontextmanager
async def open_connection(url: str | None = None) -> AsyncIterator[aioredis.Redis]:
    """Open a connection to the store, yield it, and close it on exit.

    ``url`` defaults to the configured ``REDIS_URL``. On exit the client is
    marked ``closed`` so a ``Cache`` holding it refuses further writes.

    Raises StoreError if the store does not answer a PING.
    """
    client = connect(url or get_settings().redis_url)
    try:
        try:
            await client.ping()
        except redis.RedisError as exc:
            raise StoreError(f"store unreachable: {exc}") from exc
        logger.info("connected to store")
        yield client
    finally:
        client.closed = True
        await client.aclose()
        logger.info("store connection closed")
