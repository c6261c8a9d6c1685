"""Shared fixtures for Gamma MCP tests."""

import pytest

from gamma_mcp.config import GammaConfig
from gamma_mcp.core.execution import ErrorHandler
from gamma_mcp.integrations.gamma import GammaClient
from gamma_mcp.tests.fakes import FakeTransport, RecordingSleep


@pytest.fixture
def config():
    return GammaConfig(api_key="sk-gamma-test-key")


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def sleeper():
    return RecordingSleep()


@pytest.fixture
def client(config, transport, sleeper):
    handler = ErrorHandler(config.submit_retry_config(), sleep=sleeper, random_fn=lambda: 0.0)
    return GammaClient(config, transport=transport, error_handler=handler)
