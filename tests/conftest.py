"""
Pytest configuration and fixtures.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("SESSION_BACKEND", "memory")

from core.models import HostConfiguration  # noqa: E402
from core.session_store.memory import MemorySessionStore  # noqa: E402
from manager.session_manager import SessionManager  # noqa: E402
from tools.host_api.dispatcher import RequestDispatcher  # noqa: E402
from tools.host_api.mock_client import MockTransport  # noqa: E402


TEST_HOST = "https://host.test"


@pytest.fixture
def transport():
    """Mock transport with no routes; tests queue their own replies."""
    return MockTransport()


@pytest.fixture
def host_config():
    """Isolated host configuration per test."""
    return HostConfiguration(host_url=TEST_HOST)


@pytest.fixture
def dispatcher(transport, host_config):
    return RequestDispatcher(transport, host_config)


@pytest.fixture
def session_store():
    return MemorySessionStore()


@pytest.fixture
def manager(dispatcher, session_store):
    """Session manager wired to the mock transport and memory store."""
    return SessionManager(dispatcher, session_store, session_key="oxvsUser")
