"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from sharelink.common.logging_config import setup_logging
from web_app import create_app

from samples import HYPHEN_HEAVY_SHARE_ID, PROJECT_SHARE_ID, PROPOSAL_SHARE_ID


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def sample_share_ids():
    """Valid share ids covering both entity types and awkward payloads."""
    return [PROJECT_SHARE_ID, PROPOSAL_SHARE_ID, HYPHEN_HEAVY_SHARE_ID]


@pytest.fixture
def config():
    return Config(base_url="http://testserver", shared_path="/shared")


@pytest.fixture
def app(config, logger):
    """Create test FastAPI app."""
    return create_app(config=config, logger=logger)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
