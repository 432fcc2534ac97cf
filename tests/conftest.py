"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from management_metadata import DefaultManagementMetadataResolver, InstanceConfig
from management_metadata.config import runtime

_CONFIG_ENV_VARS = (
    "INSTANCE_HOSTNAME",
    "INSTANCE_SECURE_PORT_ENABLED",
    "INSTANCE_HEALTH_CHECK_URL_PATH",
    "INSTANCE_STATUS_PAGE_URL_PATH",
    "SERVER_PORT",
    "SERVER_CONTEXT_PATH",
    "MANAGEMENT_CONTEXT_PATH",
    "MANAGEMENT_PORT",
    "LOG_APPEND",
    "LOG_DIRECTORY",
)


@pytest.fixture(autouse=True)
def isolated_runtime_config(monkeypatch):
    """Keep tests independent of the developer's environment and .env files."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime._DEFAULT_VALUES = None
    yield
    runtime._DEFAULT_VALUES = None


@pytest.fixture
def instance() -> InstanceConfig:
    return InstanceConfig(
        hostname="host",
        secure_port_enabled=False,
        health_check_url_path="/actuator/health",
        status_page_url_path="/actuator/info",
    )


@pytest.fixture
def resolver() -> DefaultManagementMetadataResolver:
    return DefaultManagementMetadataResolver()
