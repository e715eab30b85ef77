"""
Mock transport for testing.

Stands in for the host server without any network access. Responses are
queued per (method, path) and every request is recorded so tests can
assert on the exact headers and body that went over the wire.

Key features:
- Per-route response queues with an optional default
- Exception instances in a queue are raised instead of returned
- Full request log, including the decoded JSON body
"""

import json
from dataclasses import dataclass
from typing import Any, Optional, Union

from core.models import JSONValue
from tools.host_api.base import Transport, UnroutedRequestError


# Sentinel distinguishing "no default configured" from a default of None
_NO_DEFAULT = object()

MockReply = Union[JSONValue, BaseException]


@dataclass
class RecordedRequest:
    """A request as MockTransport received it."""
    url: str
    method: str
    headers: dict[str, str]
    body: Optional[str]

    @property
    def json(self) -> Any:
        """Decoded body, or None when no body was sent."""
        if self.body is None:
            return None
        return json.loads(self.body)

    def matches(self, method: str, path: str) -> bool:
        """Check whether this request targeted the given route."""
        return self.method == method and _path_matches(self.url, path)


def _path_matches(url: str, path: str) -> bool:
    path = path.lstrip("/")
    return url == path or url.endswith("/" + path)


class MockTransport(Transport):
    """
    In-memory implementation of Transport for tests.

    Usage:
        transport = MockTransport()
        transport.add_response("POST", "auth/login", {"token": "T1"})
        transport.add_response("GET", "bucket/get/x", ConnectionError("down"))

        await dispatcher.request("POST", "auth/login", ANONYMOUS_CREDENTIAL, {...})
        assert transport.requests[0].json == {...}
    """

    def __init__(self, default: Any = _NO_DEFAULT):
        """
        Initialize mock transport.

        Args:
            default: Reply for requests without a queued response. When not
                given, such requests raise UnroutedRequestError.
        """
        self._routes: list[tuple[str, str, list[MockReply]]] = []
        self._default = default
        self.requests: list[RecordedRequest] = []
        self.closed = False

    def add_response(self, method: str, path: str, reply: MockReply) -> None:
        """
        Queue a reply for the next request to method + path.

        path is matched against the end of the request URL, so
        "auth/login" matches "https://host/api/v1/auth/login".
        """
        for route_method, route_path, queue in self._routes:
            if route_method == method and route_path == path:
                queue.append(reply)
                return
        self._routes.append((method, path, [reply]))

    def set_default(self, reply: MockReply) -> None:
        """Reply used when no queued response matches."""
        self._default = reply

    async def request(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: Optional[str] = None,
    ) -> JSONValue:
        self.requests.append(
            RecordedRequest(url=url, method=method, headers=dict(headers), body=body)
        )

        reply = self._next_reply(url, method)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    async def aclose(self) -> None:
        self.closed = True

    def _next_reply(self, url: str, method: str) -> MockReply:
        for route_method, route_path, queue in self._routes:
            if route_method == method and queue and _path_matches(url, route_path):
                return queue.pop(0)

        if self._default is _NO_DEFAULT:
            raise UnroutedRequestError(f"No mock response for {method} {url}")
        return self._default

    # =========================================
    # Testing utilities
    # =========================================

    def requests_to(self, method: str, path: str) -> list[RecordedRequest]:
        """All recorded requests for a route, in order."""
        return [r for r in self.requests if r.matches(method, path)]

    def pending(self) -> int:
        """Number of queued replies not yet consumed."""
        return sum(len(queue) for _, _, queue in self._routes)

    def reset(self) -> None:
        """Forget queued replies and recorded requests."""
        self._routes.clear()
        self.requests.clear()
