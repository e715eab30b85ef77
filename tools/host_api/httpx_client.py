"""
httpx-based transport for talking to a real host server.
"""

from typing import Optional

import httpx

from core.logging import get_logger
from core.models import JSONValue
from tools.host_api.base import Transport


logger = get_logger(__name__)


class HttpxTransport(Transport):
    """
    Transport built on httpx.AsyncClient.

    The HTTP status is never inspected: an error page that carries a JSON
    body is returned like any other body. httpx.HTTPError and
    json.JSONDecodeError propagate to the caller untouched.

    Usage:
        async with HttpxTransport() as transport:
            data = await transport.request(url, "GET", headers)
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the transport.

        Args:
            client: Pre-built client to use. The caller keeps ownership and
                must close it.
            timeout: Seconds before httpx gives up. None disables timeouts,
                which is the default.
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def request(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: Optional[str] = None,
    ) -> JSONValue:
        response = await self._client.request(
            method,
            url,
            headers=headers,
            content=body,
        )
        logger.debug(
            "Host server responded",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return response.json()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
