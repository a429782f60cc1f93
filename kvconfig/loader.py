"""Configuration file loader.

Responsibilities:
- Decode one `key = value` file fully, then classify lines in one forward pass.
- Classify each line as ignored, valid, or invalid and aggregate counters.
- Report open, read, and empty-file conditions as result status, never raise.

Key public API:
- `ConfigLoader`: stateless loader bound to one path and settings.
- `parse_file`: one-shot convenience wrapper.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from .config import LoaderSettings
from .models.datatypes import InvalidLine, ParseResult, ParseStats, ParseStatus
from .parsing import is_ignored_line, split_key_value
from .telemetry.logger import ParseLogger


class ConfigLoader:
    """Parse a configuration file into entries, rejected lines, and counters.

    The loader keeps only construction-time configuration. Every call to
    `parse` builds a fresh `ParseResult`, so parsing the same unchanged file
    twice yields equal results.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        debug: bool = False,
        *,
        settings: LoaderSettings | None = None,
        logger: ParseLogger | None = None,
    ) -> None:
        """Bind the loader to a path without touching the filesystem.

        Args:
            path: Configuration file to parse.
            debug: Emit per-entry traces and the invalid-line listing.
            settings: Loader behaviour; defaults to `LoaderSettings()`.
            logger: Diagnostic logger; one writing to stderr is created when omitted.

        Raises:
            ValueError: If `settings` fail validation.
        """

        self._path = Path(path)
        self._debug = debug
        self._settings = settings if settings is not None else LoaderSettings()
        self._settings.validate()
        self._logger = logger if logger is not None else ParseLogger(debug=debug)

    def parse(self) -> ParseResult:
        """Parse the bound file and return structured results.

        Returns:
            A `ParseResult` whose `status` is `ok` for a readable, non-empty
            file. Missing, unreadable, undecodable, and empty files yield an
            empty result with the matching status and a `detail` message.
        """

        path = self._path
        try:
            handle = path.open("r", encoding=self._settings.encoding)
        except FileNotFoundError as exc:
            return self._failed_result(
                ParseStatus.FILE_NOT_FOUND,
                f"Config file not found: `{path}`.",
                exc,
            )
        except OSError as exc:
            return self._failed_result(
                ParseStatus.FILE_ACCESS,
                f"Config file could not be opened: `{path}` ({exc.strerror or exc}).",
                exc,
            )

        with handle:
            size_bytes = os.fstat(handle.fileno()).st_size
            if size_bytes == 0:
                self._logger.log_empty_file(path)
                return ParseResult(
                    source=path,
                    status=ParseStatus.EMPTY_FILE,
                    detail=f"Config file is empty: `{path}`.",
                )

            try:
                lines = handle.readlines()
            except UnicodeDecodeError as exc:
                return self._failed_result(
                    ParseStatus.FILE_ACCESS,
                    f"Config file is not valid `{self._settings.encoding}` text: `{path}`.",
                    exc,
                )

        self._logger.log_open(path, size_bytes)
        result = self._parse_lines(lines, size_bytes)
        self._log_completion(result)
        return result

    def _parse_lines(self, lines: Iterable[str], size_bytes: int) -> ParseResult:
        """Classify lines in order and build the completed result."""

        settings = self._settings
        entries: dict[str, str] = {}
        invalid_lines: list[InvalidLine] = []
        total = ignored = valid = 0

        for line_number, raw_line in enumerate(lines, start=1):
            total += 1
            line = raw_line.strip()
            if is_ignored_line(line, settings.comment_marker):
                ignored += 1
                continue

            entry = split_key_value(
                line,
                settings.separator,
                legacy_key_boundary=settings.legacy_key_boundary,
            )
            if entry is None:
                invalid_lines.append(InvalidLine(line_number=line_number, text=line))
                continue

            entries[entry.key] = entry.value
            valid += 1
            if self._debug:
                self._logger.log_entry(line_number, entry.key, entry.value)

        return ParseResult(
            source=self._path,
            entries=entries,
            invalid_lines=tuple(invalid_lines),
            stats=ParseStats(
                total=total,
                ignored=ignored,
                valid=valid,
                invalid=len(invalid_lines),
            ),
            size_bytes=size_bytes,
        )

    def _log_completion(self, result: ParseResult) -> None:
        stats = result.stats
        self._logger.log_summary(
            result.source,
            total=stats.total,
            ignored=stats.ignored,
            valid=stats.valid,
            invalid=stats.invalid,
        )
        if self._debug:
            for invalid_line in result.invalid_lines:
                self._logger.log_invalid_line(invalid_line.line_number, invalid_line.text)

    def _failed_result(
        self, status: ParseStatus, detail: str, exc: BaseException
    ) -> ParseResult:
        """Log a file-level failure and return the matching empty result."""

        self._logger.log_file_failure(status.value, self._path, type(exc).__name__)
        return ParseResult(source=self._path, status=status, detail=detail)


def parse_file(
    path: str | os.PathLike[str],
    debug: bool = False,
    *,
    settings: LoaderSettings | None = None,
    logger: ParseLogger | None = None,
) -> ParseResult:
    """Parse one configuration file with a throwaway `ConfigLoader`."""

    return ConfigLoader(path, debug, settings=settings, logger=logger).parse()
