"""Domain exceptions for configuration loading and CLI diagnostics."""

from __future__ import annotations

from pathlib import Path


class ConfigLoadError(RuntimeError):
    """Raised when a caller escalates a file-level parse failure."""

    def __init__(
        self,
        *,
        path: Path,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a path-scoped configuration load error."""

        super().__init__(detail)
        self.path = path
        self.detail = detail
        self.hint = hint


class ConfigFileNotFoundError(ConfigLoadError):
    """The configuration file does not exist."""


class ConfigFileAccessError(ConfigLoadError):
    """The configuration file exists but could not be opened or decoded."""


class EmptyConfigFileError(ConfigLoadError):
    """The configuration file holds zero bytes."""
