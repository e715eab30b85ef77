"""
Authentication requests.

Stateless: nothing here stores the token. See manager.session_manager for
the layer that persists sessions.
"""

from core.models import ANONYMOUS_CREDENTIAL, Credential, JSONValue
from tools.host_api.dispatcher import RequestDispatcher


class AuthAPI:
    """Builds login, logout and register requests."""

    def __init__(self, dispatcher: RequestDispatcher):
        self._dispatcher = dispatcher

    async def login(self, user_id: str, password: str) -> JSONValue:
        """
        Authenticate with the host server.

        Returns:
            The server's response; on success it carries a "token" field.
        """
        return await self._dispatcher.request(
            "POST",
            "auth/login",
            ANONYMOUS_CREDENTIAL,
            {"id": user_id, "password": password},
        )

    async def logout(self, credential: Credential) -> JSONValue:
        """Invalidate credential's token on the host server."""
        return await self._dispatcher.request("POST", "auth/logout", credential, {})

    async def register(self, user_id: str, password: str) -> JSONValue:
        """
        Create a new user.

        The host server does not hand out a token here; log in afterwards.
        """
        return await self._dispatcher.request(
            "POST",
            "auth/new",
            ANONYMOUS_CREDENTIAL,
            {"id": user_id, "password": password},
        )
