"""
Host server API: transports, the request dispatcher and the stateless
auth and storage façades built on it.
"""

from tools.host_api.auth import AuthAPI
from tools.host_api.base import HostAPIError, Transport, UnroutedRequestError
from tools.host_api.dispatcher import RequestDispatcher
from tools.host_api.httpx_client import HttpxTransport
from tools.host_api.mock_client import MockTransport, RecordedRequest
from tools.host_api.storage import StorageAPI

__all__ = [
    "AuthAPI",
    "HostAPIError",
    "HttpxTransport",
    "MockTransport",
    "RecordedRequest",
    "RequestDispatcher",
    "StorageAPI",
    "Transport",
    "UnroutedRequestError",
]
