"""Pytest configuration and shared fixtures."""

import pytest

from oss_client.search import OssEndpoint, SearchRequest


@pytest.fixture
def endpoint():
    """Endpoint with index and credentials."""
    return OssEndpoint(
        engine_url="http://localhost:9090",
        index="articles",
        login="admin",
        api_key="secret-key",
    )


@pytest.fixture
def request_builder():
    """Search request without endpoint, so no base fragments are emitted."""
    return SearchRequest()


@pytest.fixture
def clean_oss_env(monkeypatch):
    """Keep OSS_* variables from the developer's shell out of the tests."""
    for name in (
        "OSS_ENGINE_URL",
        "OSS_INDEX",
        "OSS_LOGIN",
        "OSS_API_KEY",
        "OSS_TEMPLATE",
        "OSS_TIMEOUT",
        "OSS_MAX_RETRIES",
        "OSS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
