"""
Abstract base class for host server transports.

A transport performs exactly one HTTP exchange and hands back the decoded
JSON body. It is the only place that touches the network, so the
dispatcher and everything above it can be tested against MockTransport.

Design principles:
- Async-first: All operations are coroutines
- Status-agnostic: Any response with a JSON body is a result, whatever
  its HTTP status
- Transparent errors: Network and decode errors are raised as-is, never
  wrapped or retried
"""

from abc import ABC, abstractmethod
from typing import Optional

from core.models import JSONValue


class Transport(ABC):
    """
    Abstract interface for sending a request to the host server.

    Usage:
        transport = HttpxTransport()

        data = await transport.request(
            url="https://api.oxvs.net/api/v1/auth/login",
            method="POST",
            headers={"Content-Type": "application/json"},
            body='{"id": "alice", "password": "pw"}',
        )
    """

    @abstractmethod
    async def request(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: Optional[str] = None,
    ) -> JSONValue:
        """
        Send one request and decode the response body as JSON.

        Args:
            url: Absolute URL
            method: HTTP method, passed through unvalidated
            headers: Request headers
            body: Already-serialized JSON text, or None for no body

        Returns:
            The decoded JSON value

        Raises:
            Whatever the underlying client raises for network failures or
            an undecodable body.
        """
        pass

    async def aclose(self) -> None:
        """Release connections held by the transport."""
        pass


class HostAPIError(Exception):
    """Base exception for errors raised by the SDK itself."""
    pass


class UnroutedRequestError(HostAPIError):
    """MockTransport received a request it has no response for."""
    pass
