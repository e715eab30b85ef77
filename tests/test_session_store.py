"""
Tests for session store backends and the factory.
"""

import json

import pytest

from core.config import Settings
from core.session_store import (
    FileSessionStore,
    MemorySessionStore,
    SessionBackend,
    SessionStoreError,
    create_session_store,
    get_session_backend,
)


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path):
    """Run the contract tests against every backend."""
    if request.param == "memory":
        return MemorySessionStore()
    return FileSessionStore(tmp_path / "nested" / "session.json")


@pytest.mark.asyncio
async def test_get_missing_key(store):
    assert await store.get("oxvsUser") is None


@pytest.mark.asyncio
async def test_set_get_overwrite(store):
    await store.set("oxvsUser", "first")
    await store.set("oxvsUser", "second")

    assert await store.get("oxvsUser") == "second"


@pytest.mark.asyncio
async def test_remove(store):
    """Remove deletes only the given key and tolerates missing keys."""
    await store.set("oxvsUser", "x")
    await store.set("other", "y")

    await store.remove("oxvsUser")
    await store.remove("never-set")

    assert await store.get("oxvsUser") is None
    assert await store.get("other") == "y"


@pytest.mark.asyncio
async def test_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "session.json"

    await FileSessionStore(path).set("oxvsUser", '{"id": "alice", "token": "T1"}')

    assert await FileSessionStore(path).get("oxvsUser") == '{"id": "alice", "token": "T1"}'
    assert json.loads(path.read_text()) == {"oxvsUser": '{"id": "alice", "token": "T1"}'}


@pytest.mark.asyncio
async def test_file_store_leaves_no_temp_files(tmp_path):
    path = tmp_path / "session.json"
    store = FileSessionStore(path)

    await store.set("a", "1")
    await store.remove("a")

    assert [p.name for p in tmp_path.iterdir()] == ["session.json"]


@pytest.mark.asyncio
async def test_file_store_corrupt_file(tmp_path):
    """Corrupt content raises SessionStoreError instead of being discarded."""
    path = tmp_path / "session.json"
    path.write_text("{not json")

    with pytest.raises(SessionStoreError):
        await FileSessionStore(path).get("oxvsUser")

    path.write_text("[]")
    with pytest.raises(SessionStoreError):
        await FileSessionStore(path).set("oxvsUser", "x")


@pytest.mark.asyncio
async def test_file_store_non_string_value(tmp_path):
    """Values must be strings; a nested object is reported as corruption."""
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"oxvsUser": {"id": "alice", "token": "T1"}}))

    with pytest.raises(SessionStoreError, match="oxvsUser"):
        await FileSessionStore(path).get("oxvsUser")


@pytest.mark.asyncio
async def test_file_store_empty_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("")

    assert await FileSessionStore(path).get("oxvsUser") is None


def test_factory_memory():
    settings = Settings(_env_file=None, session_backend="memory")

    assert get_session_backend(settings) == SessionBackend.MEMORY
    assert isinstance(create_session_store(settings), MemorySessionStore)


def test_factory_file(tmp_path):
    settings = Settings(
        _env_file=None,
        session_backend="file",
        session_file_path=tmp_path / "s.json",
    )

    store = create_session_store(settings)

    assert isinstance(store, FileSessionStore)
    assert store.path == tmp_path / "s.json"


def test_factory_rejects_unknown_backend():
    # model_copy skips validation, so the bad value slips through
    settings = Settings(_env_file=None).model_copy(update={"session_backend": "redis"})

    with pytest.raises(ValueError, match="Unsupported session backend"):
        get_session_backend(settings)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
