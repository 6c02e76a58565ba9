"""
Pytest configuration and fixtures for the Mylar API client tests.
"""
import pytest
import pytest_asyncio

from mylar_client.api.client import MylarClient
from mylar_client.utils.logging import clear_context
from tests.factories import API_KEY, MYLAR_URL


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset the config singleton and logging context between tests."""
    yield

    import mylar_client.config as cfg
    cfg._config = None
    clear_context()


@pytest_asyncio.fixture
async def client():
    """Client against the mocked server; its session is closed afterwards."""
    client = MylarClient(MYLAR_URL, API_KEY)
    yield client
    await client.close()
