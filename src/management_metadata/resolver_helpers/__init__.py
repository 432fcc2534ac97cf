"""Helper modules for management metadata resolution."""

from .context_path import refine_management_context_path
from .url_builder import build_url, normalize_context_path, refine_sub_path

__all__ = [
    "build_url",
    "normalize_context_path",
    "refine_management_context_path",
    "refine_sub_path",
]
