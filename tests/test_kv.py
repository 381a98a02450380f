"""Unit tests for notes.kv — key-value backends."""

from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
import redis

from notes.config import Settings
from notes.kv import (
    FileKeyValueStore,
    InMemoryKeyValueStore,
    RedisKeyValueStore,
    StorageError,
    create_key_value_store,
)
from notes.storage import NoteStorage

# ---------------------------------------------------------------------------
# In-memory
# ---------------------------------------------------------------------------


class TestInMemory:
    def test_get_missing(self) -> None:
        assert InMemoryKeyValueStore().get("notes") is None

    def test_set_get_delete(self) -> None:
        store = InMemoryKeyValueStore()
        store.set("notes", "[]")
        assert store.get("notes") == "[]"
        store.delete("notes")
        assert store.get("notes") is None

    def test_delete_missing_is_noop(self) -> None:
        InMemoryKeyValueStore().delete("nothing")

    def test_initial_data_copied(self) -> None:
        seed = {"notes": "[]"}
        store = InMemoryKeyValueStore(seed)
        store.set("notes", "changed")
        assert seed["notes"] == "[]"


# ---------------------------------------------------------------------------
# JSON file
# ---------------------------------------------------------------------------


class TestFileStore:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        store = FileKeyValueStore(tmp_path / "kv.json")
        assert store.get("notes") is None

    def test_persistence(self, tmp_path: Path) -> None:
        path = tmp_path / "kv.json"
        FileKeyValueStore(path).set("notes", '{"version": 1}')
        assert FileKeyValueStore(path).get("notes") == '{"version": 1}'

    def test_keys_are_independent(self, tmp_path: Path) -> None:
        store = FileKeyValueStore(tmp_path / "kv.json")
        store.set("notes", "a")
        store.set("theme", "dark")
        store.delete("theme")
        assert store.get("notes") == "a"
        assert store.get("theme") is None

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "data" / "nested" / "kv.json"
        FileKeyValueStore(path).set("notes", "x")
        assert json.loads(path.read_text(encoding="utf-8")) == {"notes": "x"}

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        FileKeyValueStore(tmp_path / "kv.json").set("notes", "x")
        assert [p.name for p in tmp_path.iterdir()] == ["kv.json"]

    def test_corrupt_file_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "kv.json"
        path.write_text("garbage{", encoding="utf-8")
        store = FileKeyValueStore(path)
        assert store.get("notes") is None
        store.set("notes", "fresh")
        assert store.get("notes") == "fresh"

    def test_invalid_utf8_file_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "kv.json"
        path.write_bytes(b'{"notes": "\xff\xfe"}')
        store = FileKeyValueStore(path)
        assert store.get("notes") is None
        assert NoteStorage(store).load() == []

    def test_deeply_nested_file_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "kv.json"
        path.write_text("[" * 100_000, encoding="utf-8")
        assert FileKeyValueStore(path).get("notes") is None

    def test_failed_write_removes_temp_file(self, tmp_path: Path) -> None:
        store = FileKeyValueStore(tmp_path / "kv.json")
        with patch("notes.kv.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(StorageError, match="disk full"):
                store.set("notes", "x")
        assert list(tmp_path.iterdir()) == []

    def test_non_object_file_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "kv.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert FileKeyValueStore(path).get("notes") is None

    def test_unwritable_location_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = FileKeyValueStore(blocker / "kv.json")
        with pytest.raises(StorageError):
            store.set("notes", "x")


# ---------------------------------------------------------------------------
# Redis
# ---------------------------------------------------------------------------


class TestRedisStore:
    def _make_store(self) -> tuple[RedisKeyValueStore, MagicMock]:
        client = MagicMock()
        return RedisKeyValueStore("redis://localhost:6379", client=client), client

    def test_from_url_with_decoded_responses(self) -> None:
        with patch("notes.kv.redis.Redis.from_url") as from_url:
            RedisKeyValueStore("redis://cache:6379")
        from_url.assert_called_once_with("redis://cache:6379", decode_responses=True)

    def test_get(self) -> None:
        store, client = self._make_store()
        client.get.return_value = "[]"
        assert store.get("notes") == "[]"
        client.get.assert_called_once_with("notes")

    def test_set(self) -> None:
        store, client = self._make_store()
        store.set("notes", "[]")
        client.set.assert_called_once_with("notes", "[]")

    def test_delete(self) -> None:
        store, client = self._make_store()
        store.delete("notes")
        client.delete.assert_called_once_with("notes")

    def test_connection_error_wrapped(self) -> None:
        store, client = self._make_store()
        client.get.side_effect = redis.ConnectionError("refused")
        with pytest.raises(StorageError, match="refused"):
            store.get("notes")

    def test_set_error_wrapped(self) -> None:
        store, client = self._make_store()
        client.set.side_effect = redis.TimeoutError("slow")
        with pytest.raises(StorageError):
            store.set("notes", "[]")


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


class TestFactory:
    def test_memory(self) -> None:
        settings = Settings(_env_file=None, notes_backend="memory")
        assert isinstance(create_key_value_store(settings), InMemoryKeyValueStore)

    def test_file(self, tmp_path: Path) -> None:
        settings = Settings(
            _env_file=None, notes_backend="file", notes_file=str(tmp_path / "n.json")
        )
        store = create_key_value_store(settings)
        assert isinstance(store, FileKeyValueStore)
        assert store.path == tmp_path / "n.json"

    def test_redis(self) -> None:
        settings = Settings(
            _env_file=None, notes_backend="redis", redis_url="redis://cache:6379"
        )
        with patch("notes.kv.redis.Redis.from_url"):
            assert isinstance(create_key_value_store(settings), RedisKeyValueStore)

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="sqlite"):
            create_key_value_store(SimpleNamespace(notes_backend="sqlite"))


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.notes_backend == "file"
        assert settings.notes_key == "notes"
        assert settings.metrics_port == 0

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NOTES_BACKEND", "redis")
        monkeypatch.setenv("NOTES_KEY", "portfolio")
        settings = Settings(_env_file=None)
        assert settings.notes_backend == "redis"
        assert settings.notes_key == "portfolio"
