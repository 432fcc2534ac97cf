"""Environment-backed configuration helpers."""

from ..exceptions import ConfigurationError
from .runtime import env_bool, env_port, env_str

__all__ = [
    "ConfigurationError",
    "env_bool",
    "env_port",
    "env_str",
]
