"""Load resolver inputs from the process environment and ``.env`` files."""

from __future__ import annotations

import socket

from .config import env_bool, env_port, env_str
from .constants import (
    DEFAULT_HEALTH_CHECK_URL_PATH,
    DEFAULT_SERVER_PORT,
    DEFAULT_STATUS_PAGE_URL_PATH,
)
from .instance_config import InstanceConfig
from .resolution_inputs import ResolutionInputs


def load_instance_config() -> InstanceConfig:
    """Build the instance view from ``INSTANCE_*`` variables."""
    hostname = env_str("INSTANCE_HOSTNAME")
    if hostname is None:
        hostname = socket.gethostname()

    # Empty paths are meaningful, so blanks are kept as-is
    return InstanceConfig(
        hostname=hostname,
        secure_port_enabled=env_bool("INSTANCE_SECURE_PORT_ENABLED"),
        health_check_url_path=env_str(
            "INSTANCE_HEALTH_CHECK_URL_PATH", or_value=DEFAULT_HEALTH_CHECK_URL_PATH, keep_blank=True
        ),
        status_page_url_path=env_str(
            "INSTANCE_STATUS_PAGE_URL_PATH", or_value=DEFAULT_STATUS_PAGE_URL_PATH, keep_blank=True
        ),
    )


def load_resolution_inputs() -> ResolutionInputs:
    """Build resolution inputs from ``SERVER_*`` and ``MANAGEMENT_*`` variables."""
    return ResolutionInputs(
        server_port=env_port("SERVER_PORT", or_value=DEFAULT_SERVER_PORT),
        server_context_path=env_str("SERVER_CONTEXT_PATH", or_value="", keep_blank=True),
        management_context_path=env_str("MANAGEMENT_CONTEXT_PATH"),
        management_port=env_port("MANAGEMENT_PORT"),
    )


__all__ = ["load_instance_config", "load_resolution_inputs"]
