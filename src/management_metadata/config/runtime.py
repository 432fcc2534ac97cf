"""Environment-backed settings lookup.

Values come from the process environment first, then from the first ``.env``
file that declares them. Blank values count as unset unless the caller keeps
them, since an empty endpoint path is meaningful but an empty port is not.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..constants import MAX_PORT, MIN_PORT
from ..exceptions import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".management_metadata.env")

_DEFAULT_VALUES: dict[str, str] | None = None


def _read_dotenv(path: Path) -> dict[str, str]:
    """Parse ``KEY=value`` lines, tolerating comments, quotes and ``export``."""
    if not path.exists():
        return {}
    try:
        lines = path.read_text().splitlines()
    except OSError as exc:
        raise ConfigurationError(f"Failed to load configuration from {path}") from exc

    values: dict[str, str] = {}
    for line in lines:
        key, sep, raw_value = line.strip().partition("=")
        if not sep or key.startswith("#"):
            continue
        key = key.removeprefix("export ").strip()
        if key:
            values[key] = raw_value.strip().strip("'\"")
    return values


def _dotenv_defaults() -> dict[str, str]:
    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is None:
        merged: dict[str, str] = {}
        for path in _DOTENV_CANDIDATES:
            for key, value in _read_dotenv(path).items():
                merged.setdefault(key, value)
        _DEFAULT_VALUES = merged
    return _DEFAULT_VALUES


def _lookup(name: str, *, keep_blank: bool) -> Optional[str]:
    for candidate in (os.getenv(name), _dotenv_defaults().get(name)):
        if candidate is None:
            continue
        candidate = candidate.strip()
        if candidate or keep_blank:
            return candidate
    return None


def env_str(name: str, or_value: str | None = None, *, keep_blank: bool = False) -> str | None:
    """Return the setting *name*, or *or_value* when it is unset."""
    value = _lookup(name, keep_blank=keep_blank)
    return or_value if value is None else value


def env_bool(name: str, or_value: bool = False) -> bool:
    """Return the flag *name*; unrecognised spellings are a configuration error."""
    raw = _lookup(name, keep_blank=False)
    if raw is None:
        return or_value
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_value(name, raw, f"Expected one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}")


def env_port(name: str, or_value: int | None = None) -> int | None:
    """Return the TCP port *name*; ``0`` is accepted as the unassigned placeholder."""
    raw = _lookup(name, keep_blank=False)
    if raw is None:
        return or_value
    try:
        port = int(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_value(name, raw, "Port must be an integer") from exc
    if not MIN_PORT <= port <= MAX_PORT:
        raise ConfigurationError.invalid_value(name, port, f"Port must be between {MIN_PORT} and {MAX_PORT}")
    return port


__all__ = ["env_bool", "env_port", "env_str"]
