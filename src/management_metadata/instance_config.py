"""Instance-level settings consumed by the metadata resolver."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_HEALTH_CHECK_URL_PATH, DEFAULT_STATUS_PAGE_URL_PATH


@dataclass(frozen=True)
class InstanceConfig:
    """
    Read-only view of the registering instance.

    Attributes:
        hostname: Host name advertised to the discovery registry
        secure_port_enabled: Whether the instance also serves TLS traffic
        health_check_url_path: Health endpoint path, possibly empty
        status_page_url_path: Status page path, possibly empty
    """

    hostname: str
    secure_port_enabled: bool = False
    health_check_url_path: str = DEFAULT_HEALTH_CHECK_URL_PATH
    status_page_url_path: str = DEFAULT_STATUS_PAGE_URL_PATH


__all__ = ["InstanceConfig"]
