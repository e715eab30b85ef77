"""
Data model shared by the dispatcher, the façades and the session manager.

Wire-level constants live here too because every layer needs them and the
host server parses them byte for byte.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union


# Literal separator the host server splits the Authorization header on
AUTH_SEPARATOR = "(::AT::)"

DEFAULT_HOST_URL = "https://api.oxvs.net"
DEFAULT_API_PREFIX = "api/v1"

JSONValue = Union[dict[str, Any], list[Any], str, int, float, bool, None]


@dataclass(frozen=True)
class Credential:
    """
    Identity of the caller: the user's opaque id and a bearer token.

    Both parts must be non-empty; the anonymous sentinel satisfies this too.
    """
    id: str
    token: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Credential id must be a non-empty string")
        if not self.token:
            raise ValueError("Credential token must be a non-empty string")

    def authorization_header(self) -> str:
        """Render the value of the Authorization header."""
        return f"{self.id}{AUTH_SEPARATOR}{self.token}"

    def __repr__(self) -> str:
        return f"Credential(id={self.id!r}, token='***')"


# Used by login and register before the user has a token
ANONYMOUS_CREDENTIAL = Credential(id="!unknown", token="?")


@dataclass
class SessionRecord:
    """
    The credential persisted by the session manager.

    token is Optional because it is copied verbatim from the login response,
    which the SDK does not validate.
    """
    id: str
    token: Optional[str] = None

    def to_json(self) -> str:
        """Serialize for the key/value session store."""
        return json.dumps({"id": self.id, "token": self.token}, separators=(",", ":"))

    @classmethod
    def from_json(cls, raw: str) -> "SessionRecord":
        """
        Parse a stored record.

        Raises:
            ValueError: If raw is not a JSON object with a string "id"
        """
        data = json.loads(raw)
        if not isinstance(data, dict) or not isinstance(data.get("id"), str):
            raise ValueError(f"Malformed session record: {raw!r}")
        return cls(id=data["id"], token=data.get("token"))

    def to_credential(self) -> Optional[Credential]:
        """Return a usable Credential, or None when the token is missing."""
        if not self.id or not self.token:
            return None
        return Credential(id=self.id, token=self.token)


@dataclass
class HostConfiguration:
    """
    Where requests are sent.

    Mutable: the embedding application may repoint host_url at
    any time and every dispatcher sharing this object picks it up on the
    next request.
    """
    host_url: str = DEFAULT_HOST_URL
    api_prefix: str = DEFAULT_API_PREFIX

    def build_url(self, path: str, host_url: Optional[str] = None) -> str:
        """Join host, API prefix and endpoint path."""
        return f"{host_url or self.host_url}/{self.api_prefix}/{path}"


@dataclass
class RequestDescriptor:
    """Everything needed to issue one request. Built per call, never stored."""
    method: str
    host_url: str
    path: str
    authorization: Credential
    body: Any = None


@dataclass
class UploadInfo:
    """
    Payload of a storage upload.

    encrypted is metadata for the server and other clients; the SDK does not
    encrypt or check anything.
    """
    data: Any
    share_list: list[str] = field(default_factory=list)
    encrypted: bool = False
