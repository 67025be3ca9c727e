"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_BASEKIT_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_BASEKIT_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_BASEKIT_NETWORK_TESTS=1 to run",
)

ECHO_BASE_URL = os.environ.get("BASEKIT_ECHO_BASE_URL", "https://httpbin.org/")


@pytest.fixture
def echo_base_url() -> str:
    return ECHO_BASE_URL
