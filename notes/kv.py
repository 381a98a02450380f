"""Durable key-value backends for note persistence.

Each backend maps string keys to string values, the same contract a
browser's local storage offers. The note store only ever touches one key.
Backend I/O failures surface as ``StorageError``; malformed *values* are
the note store's concern, not the backend's.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol

import redis

from notes.config import Settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a backend cannot be read from or written to."""


class KeyValueStore(Protocol):
    """Minimal string key-value contract."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class InMemoryKeyValueStore:
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileKeyValueStore:
    """Manages key-value persistence using a local JSON file.

    The file holds one JSON object whose values are strings. Every write
    rewrites the file atomically.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        """Read the whole mapping. Missing or unreadable file -> empty."""
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            logger.warning("Unreadable store file %s (%s) — starting fresh", self._path, exc)
            return {}
        except OSError as exc:
            raise StorageError(f"Cannot read {self._path}: {exc}") from exc

        if not isinstance(raw, dict):
            logger.warning("Store file %s is not a JSON object — starting fresh", self._path)
            return {}
        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        tmp: Optional[str] = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, ensure_ascii=False)
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError) as exc:
            if tmp is not None and os.path.exists(tmp):
                os.unlink(tmp)
            raise StorageError(f"Cannot write {self._path}: {exc}") from exc

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


class RedisKeyValueStore:
    """Redis-backed store, for pages served from more than one process."""

    def __init__(self, redis_url: str, client: Optional[redis.Redis] = None) -> None:
        self._redis_url = redis_url
        self._client = client or redis.Redis.from_url(redis_url, decode_responses=True)

    def get(self, key: str) -> Optional[str]:
        try:
            return self._client.get(key)
        except redis.RedisError as exc:
            raise StorageError(f"Redis get failed: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value)
        except redis.RedisError as exc:
            raise StorageError(f"Redis set failed: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except redis.RedisError as exc:
            raise StorageError(f"Redis delete failed: {exc}") from exc


def create_key_value_store(settings: Settings) -> KeyValueStore:
    """Build the backend selected by ``settings.notes_backend``."""
    backend = settings.notes_backend
    if backend == "memory":
        store: KeyValueStore = InMemoryKeyValueStore()
    elif backend == "file":
        store = FileKeyValueStore(Path(settings.notes_file))
    elif backend == "redis":
        store = RedisKeyValueStore(settings.redis_url)
    else:
        raise ValueError(f"Unknown notes backend: {backend!r}")
    logger.info("Using %s key-value backend", backend)
    return store
