"""
Management metadata resolution for service-registry clients.

Computes the health-check URL, status-page URL and effective management port
an instance advertises to a discovery registry.
"""

from .constants import PORT_UNASSIGNED
from .exceptions import ApplicationError, ConfigurationError
from .instance_config import InstanceConfig
from .metadata import ManagementMetadata
from .resolution_inputs import ResolutionInputs
from .resolver import DefaultManagementMetadataResolver, ManagementMetadataProvider, is_unassigned_port

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "DefaultManagementMetadataResolver",
    "InstanceConfig",
    "ManagementMetadata",
    "ManagementMetadataProvider",
    "PORT_UNASSIGNED",
    "ResolutionInputs",
    "is_unassigned_port",
]
