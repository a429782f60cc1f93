"""Shared typed data models for kvconfig.

This package contains the dataclasses returned by the loader so that parsing,
rendering, and the CLI share one vocabulary without circular imports.
"""

from .datatypes import (
    ConfigEntry,
    InvalidLine,
    ParseResult,
    ParseStats,
    ParseStatus,
)

__all__ = [
    "ConfigEntry",
    "InvalidLine",
    "ParseResult",
    "ParseStats",
    "ParseStatus",
]
