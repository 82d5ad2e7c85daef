"""Durable single-value stores for the run status.

The tracker only needs get/set on one key; backends differ in where it lives.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Protocol

from loguru import logger
from redis.asyncio import Redis


class StatusStore(Protocol):
    async def get(self) -> str | None: ...

    async def set(self, value: str) -> None: ...


class FileStatusStore:
    """JSON record `{"lastStatus": ...}` on disk, replaced atomically on write."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    async def get(self) -> str | None:
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"[STATUS] Unreadable status file {self._path}: {e}")
            return None

        if not isinstance(data, dict):
            return None
        value = data.get("lastStatus")
        return value if isinstance(value, str) else None

    async def set(self, value: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, prefix=".status-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"lastStatus": value}, f, indent=2)
            os.replace(tmp_path, self._path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise


class RedisStatusStore:
    """Status kept as a plain Redis string key."""

    def __init__(self, redis: Redis, key: str = "clawclaim:last_status") -> None:
        self._redis = redis
        self._key = key

    async def get(self) -> str | None:
        return await self._redis.get(self._key)

    async def set(self, value: str) -> None:
        await self._redis.set(self._key, value)


class MemoryStatusStore:
    """In-process store for tests and one-off checks."""

    def __init__(self, value: str | None = None) -> None:
        self.value = value
        self.writes = 0

    async def get(self) -> str | None:
        return self.value

    async def set(self, value: str) -> None:
        self.value = value
        self.writes += 1
