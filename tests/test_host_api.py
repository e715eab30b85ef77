"""
Tests for the stateless AuthAPI and StorageAPI façades.
"""

import pytest

from core.models import Credential, UploadInfo
from tools.host_api.auth import AuthAPI
from tools.host_api.storage import StorageAPI


ALICE = Credential(id="alice", token="T1")


@pytest.fixture
def auth(dispatcher):
    return AuthAPI(dispatcher)


@pytest.fixture
def storage(dispatcher):
    return StorageAPI(dispatcher)


@pytest.mark.asyncio
async def test_login_request(auth, transport):
    """Login posts id and password anonymously."""
    transport.add_response("POST", "auth/login", {"token": "T1"})

    result = await auth.login("alice", "pw")

    sent = transport.requests[0]
    assert result == {"token": "T1"}
    assert sent.url.endswith("/api/v1/auth/login")
    assert sent.headers["Authorization"] == "!unknown(::AT::)?"
    assert sent.json == {"id": "alice", "password": "pw"}


@pytest.mark.asyncio
async def test_logout_request(auth, transport):
    """Logout posts an empty object with the caller's credential."""
    transport.add_response("POST", "auth/logout", {})

    await auth.logout(ALICE)

    sent = transport.requests[0]
    assert sent.url.endswith("/api/v1/auth/logout")
    assert sent.headers["Authorization"] == "alice(::AT::)T1"
    assert sent.json == {}


@pytest.mark.asyncio
async def test_register_request(auth, transport):
    """Register posts to auth/new anonymously."""
    transport.add_response("POST", "auth/new", {})

    await auth.register("bob", "pw")

    sent = transport.requests[0]
    assert sent.method == "POST"
    assert sent.url.endswith("/api/v1/auth/new")
    assert sent.headers["Authorization"] == "!unknown(::AT::)?"
    assert sent.json == {"id": "bob", "password": "pw"}


@pytest.mark.asyncio
async def test_get_request(storage, transport):
    """Get issues a bodiless GET for the resource."""
    transport.add_response("GET", "bucket/get/res-1", {"data": "X"})

    result = await storage.get(ALICE, "res-1")

    sent = transport.requests[0]
    assert result == {"data": "X"}
    assert sent.url.endswith("/api/v1/bucket/get/res-1")
    assert sent.body is None


@pytest.mark.asyncio
async def test_upload_wraps_payload(storage, transport):
    """Upload wraps data and keeps shareList order and the encrypted flag."""
    transport.add_response("POST", "bucket/upload", {"id": "res-2"})

    await storage.upload(
        ALICE,
        UploadInfo(data="X", share_list=["bob"], encrypted=True),
    )

    sent = transport.requests[0]
    assert sent.headers["Authorization"] == "alice(::AT::)T1"
    assert sent.json == {
        "data": {"wrappedPayload": "X"},
        "shareList": ["bob"],
        "encrypted": True,
    }


@pytest.mark.asyncio
async def test_upload_structured_payload(storage, transport):
    """Arbitrary JSON payloads are carried untouched."""
    transport.add_response("POST", "bucket/upload", {})
    payload = {"type": "o.encrypted", "value": "Hello, world!"}

    await storage.upload(
        ALICE,
        UploadInfo(data=payload, share_list=["carol", "bob"]),
    )

    assert transport.requests[0].json == {
        "data": {"wrappedPayload": payload},
        "shareList": ["carol", "bob"],
        "encrypted": False,
    }


@pytest.mark.asyncio
async def test_remove_request(storage, transport):
    """Remove sends DELETE with the requesting id."""
    transport.add_response("DELETE", "bucket/res-3/delete", {"deleted": True})

    await storage.remove(ALICE, "res-3", "alice")

    sent = transport.requests[0]
    assert sent.method == "DELETE"
    assert sent.url.endswith("/api/v1/bucket/res-3/delete")
    assert sent.json == {"requestFrom": "alice"}


@pytest.mark.asyncio
async def test_get_network_error(storage, transport):
    """Transport errors surface as the same exception."""
    error = OSError("NetworkError")
    transport.add_response("GET", "bucket/get/res-1", error)

    with pytest.raises(OSError) as exc_info:
        await storage.get(ALICE, "res-1")

    assert exc_info.value is error


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
