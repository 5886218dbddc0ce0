from __future__ import annotations

from typing import Protocol


class Store(Protocol):
    """String commands the cache needs from a store connection.

    A connection released by ``open_connection`` carries ``closed = True``.
    """

    async def set(self, name: str, value: str) -> bool | None:
        ...

    async def get(self, name: str) -> str | None:
        ...
