"""
Management metadata resolution.

Reconciles the primary server port and context path with the optional
management port and context path into the health-check URL, status-page URL
and effective management port an instance advertises to a discovery registry.

Resolution is a pure function of its arguments: nothing is cached between
calls, so a single resolver may be shared across threads.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .constants import HTTP_SCHEME, HTTPS_SCHEME, PORT_UNASSIGNED
from .instance_config import InstanceConfig
from .metadata import ManagementMetadata
from .resolution_inputs import ResolutionInputs
from .resolver_helpers import build_url, refine_management_context_path

logger = logging.getLogger(__name__)


def is_unassigned_port(port: Optional[int]) -> bool:
    """Return True when *port* is present and still the pre-bind placeholder."""
    return port is not None and port == PORT_UNASSIGNED


class ManagementMetadataProvider(ABC):
    """Abstract source of management metadata for a registering instance."""

    @abstractmethod
    def resolve(
        self,
        instance: InstanceConfig,
        server_port: int,
        server_context_path: str,
        management_context_path: Optional[str] = None,
        management_port: Optional[int] = None,
    ) -> Optional[ManagementMetadata]:
        """Return the metadata to publish, or None when it cannot be published yet."""

    def resolve_inputs(self, instance: InstanceConfig, inputs: ResolutionInputs) -> Optional[ManagementMetadata]:
        """Resolve using a bundled set of inputs."""
        return self.resolve(
            instance,
            inputs.server_port,
            inputs.server_context_path,
            inputs.management_context_path,
            inputs.management_port,
        )


class DefaultManagementMetadataResolver(ManagementMetadataProvider):
    """Resolves management URLs for actuator-style health and info endpoints."""

    def resolve(
        self,
        instance: InstanceConfig,
        server_port: int,
        server_context_path: str,
        management_context_path: Optional[str] = None,
        management_port: Optional[int] = None,
    ) -> Optional[ManagementMetadata]:
        """
        Resolve the management metadata for *instance*.

        Returns None while the management interface would listen on a random
        port that has not been bound yet; callers retry once the port is known.

        Raises:
            ConfigurationError: If the inputs cannot form a valid URL
        """
        if is_unassigned_port(management_port):
            logger.debug("Management port not yet assigned; skipping metadata")
            return None
        if management_port is None and is_unassigned_port(server_port):
            logger.debug("Server port not yet assigned and no management port set; skipping metadata")
            return None

        health_check_url = self.health_check_url(
            instance, server_port, server_context_path, management_context_path, management_port
        )
        status_page_url = self.status_page_url(
            instance, server_port, server_context_path, management_context_path, management_port
        )

        metadata = ManagementMetadata(
            health_check_url=health_check_url,
            status_page_url=status_page_url,
            management_port=server_port if management_port is None else management_port,
        )
        if instance.secure_port_enabled:
            metadata = metadata.with_secure_health_check_url(
                self.health_check_url(
                    instance,
                    server_port,
                    server_context_path,
                    management_context_path,
                    management_port,
                    secure=True,
                )
            )
        return metadata

    def health_check_url(
        self,
        instance: InstanceConfig,
        server_port: int,
        server_context_path: str,
        management_context_path: Optional[str] = None,
        management_port: Optional[int] = None,
        *,
        secure: bool = False,
    ) -> str:
        url = self._management_url(
            instance,
            server_port,
            server_context_path,
            management_context_path,
            management_port,
            instance.health_check_url_path,
            secure=secure,
        )
        logger.debug("Constructed management metadata healthCheckUrl: %s", url)
        return url

    def status_page_url(
        self,
        instance: InstanceConfig,
        server_port: int,
        server_context_path: str,
        management_context_path: Optional[str] = None,
        management_port: Optional[int] = None,
    ) -> str:
        url = self._management_url(
            instance,
            server_port,
            server_context_path,
            management_context_path,
            management_port,
            instance.status_page_url_path,
            secure=False,
        )
        logger.debug("Constructed management metadata statusPageUrl: %s", url)
        return url

    @staticmethod
    def _management_url(
        instance: InstanceConfig,
        server_port: int,
        server_context_path: str,
        management_context_path: Optional[str],
        management_port: Optional[int],
        url_path: str,
        *,
        secure: bool,
    ) -> str:
        context_path = refine_management_context_path(server_context_path, management_context_path, management_port)
        port = server_port if management_port is None else management_port
        scheme = HTTPS_SCHEME if secure else HTTP_SCHEME
        return build_url(scheme, instance.hostname, port, context_path, url_path)


__all__ = [
    "DefaultManagementMetadataResolver",
    "ManagementMetadataProvider",
    "is_unassigned_port",
]
