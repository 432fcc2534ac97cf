"""Port and context-path inputs for a single resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ResolutionInputs:
    """Primary server settings plus optional management overrides.

    ``None`` marks an override as absent; it is never used as a port value.
    """

    server_port: int
    server_context_path: str = ""
    management_context_path: Optional[str] = None
    management_port: Optional[int] = None


__all__ = ["ResolutionInputs"]
