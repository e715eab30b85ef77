"""
Bucket storage requests.

Payloads are transported as-is. Encryption, if any, happens before upload;
the "encrypted" flag only tells other readers what to expect.
"""

from core.models import Credential, JSONValue, UploadInfo
from tools.host_api.dispatcher import RequestDispatcher


class StorageAPI:
    """Builds get, upload and remove requests for the host's bucket."""

    def __init__(self, dispatcher: RequestDispatcher):
        self._dispatcher = dispatcher

    async def get(self, credential: Credential, resource_id: str) -> JSONValue:
        """Fetch a stored object."""
        return await self._dispatcher.request(
            "GET",
            f"bucket/get/{resource_id}",
            credential,
        )

    async def upload(self, credential: Credential, info: UploadInfo) -> JSONValue:
        """
        Store an object.

        Args:
            credential: Owner of the upload
            info: Payload, ordered recipient ids and the encrypted flag
        """
        return await self._dispatcher.request(
            "POST",
            "bucket/upload",
            credential,
            {
                "data": {"wrappedPayload": info.data},
                "shareList": list(info.share_list),
                "encrypted": info.encrypted,
            },
        )

    async def remove(
        self,
        credential: Credential,
        resource_id: str,
        requesting_id: str,
    ) -> JSONValue:
        """
        Delete a stored object.

        requesting_id is sent as "requestFrom" for the server to authorize
        and audit; it is not checked here.
        """
        return await self._dispatcher.request(
            "DELETE",
            f"bucket/{resource_id}/delete",
            credential,
            {"requestFrom": requesting_id},
        )
