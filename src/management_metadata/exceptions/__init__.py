"""Exception classes for management metadata resolution.

All custom exceptions inherit from ApplicationError so callers can catch the
package's failures in one place.

Exception classes support two patterns:
1. No-argument raise: raise ConfigurationError()
2. Contextual attributes: err = ConfigurationError(hostname="x", port=8080); raise err
"""

from __future__ import annotations

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ConfigurationError(ApplicationError):
    """Configuration is invalid or missing."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Configuration is invalid or missing"
        super().__init__(message, **kwargs)

    @classmethod
    def url_construction_failed(
        cls,
        scheme: str,
        hostname: str,
        port: int,
        context_path: str,
        sub_path: str,
        reason: str = "",
    ) -> "ConfigurationError":
        """Create error for a URL that cannot be built from its parts."""
        msg = (
            f"Failed to construct url for scheme: {scheme}, hostName: {hostname} "
            f"port: {port} contextPath: {context_path} statusPath: {sub_path}"
        )
        if reason:
            msg += f" ({reason})"
        return cls(
            msg,
            scheme=scheme,
            hostname=hostname,
            port=port,
            context_path=context_path,
            sub_path=sub_path,
        )

    @classmethod
    def invalid_value(cls, param_name: str, value: Any, reason: str = "") -> "ConfigurationError":
        """Create error for invalid value."""
        msg = f"Invalid value for {param_name}: {value!r}"
        if reason:
            msg += f". {reason}"
        return cls(msg, param_name=param_name, value=value)

    @classmethod
    def missing_value(cls, param_name: str, context: str = "") -> "ConfigurationError":
        """Create error for missing value."""
        msg = f"{param_name} is missing or empty"
        if context:
            msg += f": {context}"
        return cls(msg, param_name=param_name)


__all__ = ["ApplicationError", "ConfigurationError"]
