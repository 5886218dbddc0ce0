"""Disposable Redis server for integration tests.

Uses ``TEST_REDIS_URL`` when set, otherwise starts a container per test module.
"""

import os

import pytest
from docker.errors import DockerException
from testcontainers.redis import RedisContainer

from redis_example.connection import open_connection

REDIS_IMAGE = "redis:7-alpine"


@pytest.fixture(scope="module")
def redis_url():
    url = os.getenv("TEST_REDIS_URL")
    if url:
        yield url
        return

    try:
        # The constructor already talks to the Docker daemon.
        container = RedisContainer(REDIS_IMAGE)
        container.start()
    except DockerException as exc:
        pytest.skip(f"Docker is not available: {exc}")
    try:
        host = container.get_container_host_ip()
        port = container.get_exposed_port(container.port)
        yield f"redis://{host}:{port}/0"
    finally:
        container.stop()


@pytest.fixture
async def redis_connection(redis_url):
    async with open_connection(redis_url) as client:
        await client.flushdb()
        yield client
