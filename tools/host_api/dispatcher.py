"""
Request dispatcher: the single primitive every host server call goes through.

Builds the wire-level request from a RequestDescriptor, issues it once via
the injected transport and returns the decoded JSON body.
"""

import json
from typing import Any, Optional

from core.logging import get_logger
from core.models import Credential, HostConfiguration, JSONValue, RequestDescriptor
from tools.host_api.base import Transport


logger = get_logger(__name__)


class RequestDispatcher:
    """
    Issues authenticated requests against the configured host.

    Single-shot: no retries, no timeout of its own, no backoff. Any error
    raised by the transport reaches the caller unchanged, and an error
    payload returned by the server is returned like a success.
    """

    def __init__(
        self,
        transport: Transport,
        host_config: Optional[HostConfiguration] = None,
    ):
        """
        Args:
            transport: Performs the actual HTTP exchange
            host_config: Shared, mutable host configuration. A fresh default
                one is created when omitted.
        """
        self._transport = transport
        self._host_config = host_config or HostConfiguration()

    @property
    def host_config(self) -> HostConfiguration:
        return self._host_config

    @property
    def transport(self) -> Transport:
        return self._transport

    async def send(self, descriptor: RequestDescriptor) -> JSONValue:
        """
        Send one request.

        The body is serialized compactly, byte for byte as JSON.stringify
        would, and only for non-GET methods; a body passed with a GET is
        dropped. A body of None is not sent at all.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": descriptor.authorization.authorization_header(),
        }

        body: Optional[str] = None
        if descriptor.method != "GET" and descriptor.body is not None:
            body = json.dumps(descriptor.body, separators=(",", ":"))

        url = self._host_config.build_url(descriptor.path, host_url=descriptor.host_url)

        logger.debug(
            "Dispatching request",
            method=descriptor.method,
            path=descriptor.path,
            user_id=descriptor.authorization.id,
        )
        return await self._transport.request(url, descriptor.method, headers, body)

    async def request(
        self,
        method: str,
        path: str,
        authorization: Credential,
        body: Any = None,
    ) -> JSONValue:
        """Build a descriptor against the current host_url and send it."""
        return await self.send(
            RequestDescriptor(
                method=method,
                host_url=self._host_config.host_url,
                path=path,
                authorization=authorization,
                body=body,
            )
        )
