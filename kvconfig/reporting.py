"""Report rendering for parse results.

This module turns `ParseResult` data into human-readable lines and centralizes
user-facing CLI output, keeping presentation out of the loader.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import ConfigLoadError
from .models.datatypes import ParseResult, ParseStatus


_RULE = "+" + "-" * 66
_LABEL_WIDTH = 35


def _row(label: str, value: object) -> str:
    return f"{label:<{_LABEL_WIDTH}}: {value}"


def render_file_header(result: ParseResult, debug: bool) -> list[str]:
    """Render the file name, parse mode, and size banner.

    Non-ok results render a single line describing the file-level condition.
    """

    if result.status is ParseStatus.EMPTY_FILE:
        return [f"Config file [ {result.source} ] is empty"]
    if result.status is ParseStatus.FILE_NOT_FOUND:
        return [f"File [ {result.source} ] NOT found!"]
    if result.status is ParseStatus.FILE_ACCESS:
        return [result.detail or f"File [ {result.source} ] could not be read"]

    mode = "DEBUG" if debug else "NON-DEBUG"
    return [
        f"Processing [ {result.source} ] in {mode} mode",
        f"Parsing config file [ {result.source} ], size: {result.size_bytes} bytes",
    ]


def render_parse_summary(result: ParseResult) -> list[str]:
    """Render the aggregate statistics table."""

    stats = result.stats
    return [
        _RULE,
        "| Config file parsing details:",
        _RULE,
        _row("Config file name", result.source),
        _row("Lines in file", stats.total),
        _row("Valid entries", stats.valid),
        _row("Invalid entries", stats.invalid),
        _row("Commented/Whitespace", stats.ignored),
        _RULE,
    ]


def render_invalid_lines(result: ParseResult) -> list[str]:
    """Render rejected lines with their line numbers, or nothing when none exist."""

    if not result.invalid_lines:
        return []
    lines = [f"Invalid lines found in [ {result.source} ]"]
    lines.extend(
        f"Line #{invalid.line_number:<3}: {invalid.text}" for invalid in result.invalid_lines
    )
    return lines


def render_entries(result: ParseResult) -> list[str]:
    """Render accepted entries as `key = value` rows sorted by key."""

    return [f"{key} = {result.entries[key]}" for key in sorted(result.entries)]


def echo_lines(lines: list[str]) -> None:
    """Print pre-rendered lines to stdout."""

    for line in lines:
        typer.echo(line)


def echo_parse_report(
    result: ParseResult,
    *,
    debug: bool = False,
    show_entries: bool = False,
) -> None:
    """Print the full human-readable report for one parse."""

    echo_lines(render_file_header(result, debug))
    if not result.ok:
        return
    typer.echo("")
    echo_lines(render_parse_summary(result))
    if debug and result.invalid_lines:
        typer.echo("")
        echo_lines(render_invalid_lines(result))
    if show_entries and result.entries:
        typer.echo("")
        echo_lines(render_entries(result))


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ConfigLoadError):
        typer.secho(f"{command_name} failed: {exc.detail}", fg=typer.colors.RED, err=True)
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc
