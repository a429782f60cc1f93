"""Telemetry and observability helpers.

This package emits diagnostic parse events for deterministic auditing.
"""

from .logger import ParseLogger

__all__ = ["ParseLogger"]
