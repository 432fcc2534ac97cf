"""
Resolved management metadata and its serialized forms.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

import orjson

from .constants import MANAGEMENT_PORT_METADATA_KEY
from .exceptions import ConfigurationError

_REQUIRED_FIELDS = ("health_check_url", "status_page_url", "management_port")


@dataclass(frozen=True)
class ManagementMetadata:
    """Absolute introspection URLs and the effective management port."""

    health_check_url: str
    status_page_url: str
    management_port: int
    secure_health_check_url: Optional[str] = None

    def with_secure_health_check_url(self, secure_health_check_url: str) -> "ManagementMetadata":
        """Return a copy carrying the HTTPS health-check URL."""
        return replace(self, secure_health_check_url=secure_health_check_url)

    def to_registry_metadata(self) -> Dict[str, str]:
        """Entries published into the instance metadata map of the registry."""
        return {MANAGEMENT_PORT_METADATA_KEY: str(self.management_port)}

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "health_check_url": self.health_check_url,
            "status_page_url": self.status_page_url,
            "management_port": self.management_port,
        }
        if self.secure_health_check_url is not None:
            data["secure_health_check_url"] = self.secure_health_check_url
        return data

    def to_json(self) -> str:
        """Convert to JSON string"""
        return orjson.dumps(self.to_dict()).decode()

    @classmethod
    def from_json(cls, data: str | bytes) -> "ManagementMetadata":
        """Create from JSON string"""
        try:
            payload = orjson.loads(data)
        except orjson.JSONDecodeError as exc:
            raise ConfigurationError(f"Management metadata is not valid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise ConfigurationError("Management metadata JSON must contain an object at the top level")
        for field_name in _REQUIRED_FIELDS:
            if field_name not in payload:
                raise ConfigurationError.missing_value(field_name, "management metadata JSON")

        try:
            management_port = int(payload["management_port"])
        except (TypeError, ValueError) as exc:
            raise ConfigurationError.invalid_value("management_port", payload["management_port"]) from exc

        return cls(
            health_check_url=str(payload["health_check_url"]),
            status_page_url=str(payload["status_page_url"]),
            management_port=management_port,
            secure_health_check_url=payload.get("secure_health_check_url"),
        )


__all__ = ["ManagementMetadata"]
