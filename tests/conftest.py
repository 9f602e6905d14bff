"""Pytest configuration and shared fixtures.

This module provides reusable fixtures for testing the BlueCat client.
Fixtures are organized by category:
- Config fixtures: BAM connection settings for a fake server
- HTTP fixtures: respx router with the login endpoint already stubbed
- Client fixtures: logged-in BAMClient bound to the router
"""

import httpx
import pytest
import respx

from src.bluecat.bam.client import BAMClient
from src.bluecat.config import BAMConfig
from src.bluecat.observability import clear_all_context

BAM_SERVER = "bam.example.com"
BASE_URL = f"https://{BAM_SERVER}/Services/REST/v1"
TOKEN = "BAMAuthToken: Mjk3MzM6MTU2NDY0NTk0NDcxNTphZG1pbg=="
LOGIN_TEXT = f'"Session Token-> {TOKEN} <- for User : apiuser"'

# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def bam_config() -> BAMConfig:
    """BAM configuration pointing at the fake server."""
    return BAMConfig(server=BAM_SERVER, username="apiuser", password="s3cret")


# =============================================================================
# HTTP Fixtures
# =============================================================================


@pytest.fixture
def bam_mock():
    """respx router for the fake BAM server with a working login endpoint."""
    with respx.mock(assert_all_called=False) as mock:
        mock.get(f"{BASE_URL}/login", name="login").mock(
            return_value=httpx.Response(200, text=LOGIN_TEXT)
        )
        yield mock


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def client(bam_config, bam_mock):
    """Logged-in BAMClient whose requests go to ``bam_mock``."""
    with BAMClient(bam_config) as bam_client:
        yield bam_client


@pytest.fixture(autouse=True)
def reset_log_context():
    """Keep log context from leaking between tests."""
    yield
    clear_all_context()
