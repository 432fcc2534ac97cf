"""Management context-path refinement."""

from __future__ import annotations

from typing import Optional

from ..constants import ROOT_PATH


def refine_management_context_path(
    server_context_path: str,
    management_context_path: Optional[str],
    management_port: Optional[int],
) -> str:
    """
    Return the context path the management endpoints are served under.

    A management interface sharing the server port lives below the server
    context path. One with its own port has no server context to nest under.

    Args:
        server_context_path: Context path of the primary server
        management_context_path: Explicit management base path, or None
        management_port: Dedicated management port, or None

    Returns:
        Effective management context path (not yet normalized)
    """
    if management_context_path is not None and management_port is None:
        return server_context_path + management_context_path
    if management_context_path is not None:
        return management_context_path
    if management_port is not None:
        return ROOT_PATH
    return server_context_path


__all__ = ["refine_management_context_path"]
