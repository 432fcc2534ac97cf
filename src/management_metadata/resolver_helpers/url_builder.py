"""Absolute URL construction for management endpoints.

The base URL is assembled from scheme, host, port and the normalized context
path; the endpoint path is then resolved against it with standard relative-URL
semantics (``urllib.parse.urljoin``).
"""

from __future__ import annotations

import ipaddress
import re
from urllib.parse import urljoin, urlsplit, urlunsplit

from ..constants import ALLOWED_SCHEMES, MAX_PORT, MIN_PORT, PATH_SEPARATOR, ROOT_PATH
from ..exceptions import ConfigurationError

_REPEATED_SEPARATORS = re.compile(r"/{2,}")
# Control characters, whitespace and URL delimiters that cannot appear in a host
_INVALID_HOST_CHARACTERS = re.compile(r"[\x00-\x20\x7f/?#@\\\[\]]")
_CONTEXT_PATH_DELIMITERS = re.compile(r"[?#]")


def normalize_context_path(context_path: str) -> str:
    """Return *context_path* with exactly one leading and one trailing separator."""
    if not context_path.endswith(PATH_SEPARATOR):
        context_path = context_path + PATH_SEPARATOR
    refined = PATH_SEPARATOR + context_path.lstrip(PATH_SEPARATOR)
    return _REPEATED_SEPARATORS.sub(PATH_SEPARATOR, refined)


def refine_sub_path(sub_path: str, context_path: str) -> str:
    """
    Make *sub_path* relative to the normalized *context_path*.

    Only a leading occurrence of a non-root context path is removed; the
    context path appearing later in *sub_path* is left alone.
    """
    if context_path != ROOT_PATH and sub_path.startswith(context_path):
        sub_path = sub_path[len(context_path) :]
    return sub_path.lstrip(PATH_SEPARATOR)


def _format_host(hostname: str) -> str:
    if not hostname:
        raise ValueError("hostname is empty")

    if hostname.startswith("[") and hostname.endswith("]"):
        literal = hostname[1:-1]
    elif ":" in hostname:
        literal = hostname
    else:
        invalid = _INVALID_HOST_CHARACTERS.search(hostname)
        if invalid:
            raise ValueError(f"hostname contains {invalid.group()!r} at position {invalid.start()}")
        # Non-ASCII controls and invisible separators
        if not hostname.isprintable():
            raise ValueError(f"hostname contains non-printable characters: {hostname!r}")
        return hostname

    ipaddress.IPv6Address(literal)
    return f"[{literal}]"


def _validate_port(port: int) -> None:
    if isinstance(port, bool) or not isinstance(port, int):
        raise ValueError(f"port must be an integer, got {type(port).__name__}")
    if not MIN_PORT <= port <= MAX_PORT:
        raise ValueError(f"port must be between {MIN_PORT} and {MAX_PORT}")


def _collapse_path_separators(url: str) -> str:
    parts = urlsplit(url)
    return urlunsplit(parts._replace(path=_REPEATED_SEPARATORS.sub(PATH_SEPARATOR, parts.path)))


def _ensure_absolute_url(url: str) -> None:
    parsed = urlsplit(url)
    if parsed.scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"unsupported scheme in {url!r}")
    if not parsed.hostname:
        raise ValueError(f"missing network location in {url!r}")
    # Accessing .port validates the numeric range
    _ = parsed.port


def build_url(scheme: str, hostname: str, port: int, context_path: str, sub_path: str) -> str:
    """
    Build the absolute URL of *sub_path* served under *context_path*.

    Args:
        scheme: ``http`` or ``https``
        hostname: Advertised host name or IP literal
        port: Port the endpoint listens on
        context_path: Context path the endpoint is served under
        sub_path: Endpoint path, absolute or relative to the context path

    Returns:
        Absolute URL string

    Raises:
        ConfigurationError: If the parts cannot form a valid URL
    """
    try:
        if scheme not in ALLOWED_SCHEMES:
            raise ValueError(f"scheme must be one of {sorted(ALLOWED_SCHEMES)}")
        host = _format_host(hostname)
        _validate_port(port)

        refined_context_path = normalize_context_path(context_path)
        if _CONTEXT_PATH_DELIMITERS.search(refined_context_path):
            raise ValueError("context path must not contain a query or fragment")
        base = urlunsplit((scheme, f"{host}:{port}", refined_context_path, "", ""))
        refined_sub_path = refine_sub_path(sub_path, refined_context_path)
        resolved = _collapse_path_separators(urljoin(base, refined_sub_path))
        _ensure_absolute_url(resolved)
    except ValueError as exc:
        raise ConfigurationError.url_construction_failed(
            scheme, hostname, port, context_path, sub_path, reason=str(exc)
        ) from exc
    return resolved


__all__ = ["build_url", "normalize_context_path", "refine_sub_path"]
