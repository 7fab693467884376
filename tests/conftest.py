"""Root conftest - shared test configuration."""

import os

import pytest

# Ensure tests never reach a real refresh endpoint
os.environ.setdefault("TOKEN_REFRESH_URL", "https://auth.example.test/refresh")
os.environ.setdefault("TOKEN_SERVICE_NAME", "test-service")

from promise_queue.tokens import store  # noqa: E402


@pytest.fixture(autouse=True)
def _empty_token_buckets():
    """Token buckets are process-wide, start every test without tokens."""
    store._buckets.clear()
    yield
    store._buckets.clear()
