"""Core datatypes produced by configuration parsing.

Responsibilities:
- Represent immutable parse outputs handed back to callers.
- Keep parse status explicit so file-level failures never need exceptions.

Key types:
- `ConfigEntry`, `InvalidLine`, `ParseStats`, `ParseStatus`, and `ParseResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from ..errors import (
    ConfigFileAccessError,
    ConfigFileNotFoundError,
    EmptyConfigFileError,
)


@dataclass(frozen=True, slots=True)
class ConfigEntry:
    """A validated key/value pair extracted from one line.

    Attributes:
        key: Trimmed, non-empty configuration key.
        value: Trimmed, non-empty configuration value.
    """

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class InvalidLine:
    """A non-ignored line that could not be split into an entry.

    Attributes:
        line_number: 1-based physical line number in the source file.
        text: The line content after trimming surrounding whitespace.
    """

    line_number: int
    text: str


@dataclass(frozen=True, slots=True)
class ParseStats:
    """Aggregate line counters for one parse.

    Attributes:
        total: Physical lines read.
        ignored: Blank and comment lines.
        valid: Lines accepted as entries.
        invalid: Lines rejected as malformed entries.
    """

    total: int = 0
    ignored: int = 0
    valid: int = 0
    invalid: int = 0

    def __post_init__(self) -> None:
        if self.total != self.ignored + self.valid + self.invalid:
            raise ValueError(
                "`total` must equal `ignored + valid + invalid` "
                f"({self.total} != {self.ignored} + {self.valid} + {self.invalid})."
            )


class ParseStatus(str, Enum):
    """File-level outcome of a parse."""

    OK = "ok"
    FILE_NOT_FOUND = "file_not_found"
    FILE_ACCESS = "file_access"
    EMPTY_FILE = "empty_file"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Structured outcome of parsing one configuration file.

    Attributes:
        source: Path of the parsed file.
        entries: Key/value mapping; later duplicates overwrite earlier ones.
        invalid_lines: Rejected lines in ascending line-number order.
        stats: Line counters.
        status: File-level outcome.
        detail: Optional human-readable reason for a non-ok status.
        size_bytes: File size in bytes, `0` when the file could not be opened.
    """

    source: Path
    entries: dict[str, str] = field(default_factory=dict)
    invalid_lines: tuple[InvalidLine, ...] = field(default_factory=tuple)
    stats: ParseStats = field(default_factory=ParseStats)
    status: ParseStatus = ParseStatus.OK
    detail: str | None = None
    size_bytes: int = 0

    @property
    def ok(self) -> bool:
        """Return whether the file was opened and contained data."""

        return self.status is ParseStatus.OK

    def raise_for_status(self) -> None:
        """Raise the matching `ConfigLoadError` subclass for a non-ok status.

        Parsing itself never raises for file-level problems; callers that treat
        a missing or empty file as fatal escalate through this method.
        """

        if self.status is ParseStatus.FILE_NOT_FOUND:
            raise ConfigFileNotFoundError(
                path=self.source,
                detail=self.detail or f"Config file not found: `{self.source}`.",
                hint="Check the path or create the file.",
            )
        if self.status is ParseStatus.FILE_ACCESS:
            raise ConfigFileAccessError(
                path=self.source,
                detail=self.detail or f"Config file could not be read: `{self.source}`.",
                hint="Verify file permissions and encoding.",
            )
        if self.status is ParseStatus.EMPTY_FILE:
            raise EmptyConfigFileError(
                path=self.source,
                detail=self.detail or f"Config file is empty: `{self.source}`.",
            )

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the result."""

        return {
            "source": str(self.source),
            "status": self.status.value,
            "detail": self.detail,
            "size_bytes": self.size_bytes,
            "entries": dict(self.entries),
            "invalid_lines": [
                {"line_number": line.line_number, "text": line.text}
                for line in self.invalid_lines
            ],
            "stats": {
                "total": self.stats.total,
                "ignored": self.stats.ignored,
                "valid": self.stats.valid,
                "invalid": self.stats.invalid,
            },
        }
