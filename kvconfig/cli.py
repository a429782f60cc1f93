"""Command-line interface for kvconfig.

Responsibilities:
- Expose user-facing commands for parsing and querying configuration files.
- Resolve loader settings from `KVCONFIG_*` environment values and CLI flags.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger as _loguru_logger

from .config import LoaderSettings
from .errors import ConfigLoadError
from .loader import ConfigLoader
from .models.datatypes import ParseResult
from .parsing import normalize_optional_string, parse_required_boolean
from .reporting import echo_parse_report, exit_with_command_error

DEFAULT_CONFIG_FILENAME = "sample_input.cfg"

app = typer.Typer(
    name="kvconfig",
    no_args_is_help=True,
    help="Parse and inspect `key = value` configuration files.",
)


def _resolve_debug(debug: bool | None) -> bool:
    """Resolve debug mode from the CLI flag, then `KVCONFIG_DEBUG`, then off."""

    if debug is not None:
        return debug
    env_value = normalize_optional_string(os.environ.get("KVCONFIG_DEBUG"))
    if env_value is None:
        return False
    return parse_required_boolean(env_value, "KVCONFIG_DEBUG")


def _resolve_settings(
    comment_marker: str | None,
    separator: str | None,
    legacy_key_boundary: bool | None,
) -> LoaderSettings:
    """Layer explicit CLI overrides on top of environment-derived settings."""

    settings = LoaderSettings.from_env().with_overrides(
        comment_marker=comment_marker,
        separator=separator,
        legacy_key_boundary=legacy_key_boundary,
    )
    settings.validate()
    return settings


def _load(
    path: Path,
    debug: bool,
    comment_marker: str | None = None,
    separator: str | None = None,
    legacy_key_boundary: bool | None = None,
) -> ParseResult:
    settings = _resolve_settings(comment_marker, separator, legacy_key_boundary)
    return ConfigLoader(path, debug, settings=settings).parse()


@app.command("parse")
def parse_command(
    path: Annotated[
        Path,
        typer.Argument(help="Path to the configuration file."),
    ] = Path(DEFAULT_CONFIG_FILENAME),
    debug: Annotated[
        bool | None,
        typer.Option(
            "--debug/--no-debug",
            help="Trace each entry and list invalid lines (env: `KVCONFIG_DEBUG`).",
        ),
    ] = None,
    show_entries: Annotated[
        bool,
        typer.Option("--show-entries", help="Print accepted `key = value` entries."),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print the parse result as a JSON document."),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with code 1 when any line is invalid."),
    ] = False,
    comment_marker: Annotated[
        str | None,
        typer.Option("--comment-marker", help="Comment marker character."),
    ] = None,
    separator: Annotated[
        str | None,
        typer.Option("--separator", help="Key/value separator character."),
    ] = None,
    legacy_key_boundary: Annotated[
        bool | None,
        typer.Option(
            "--legacy-key-boundary/--no-legacy-key-boundary",
            help="Drop the character immediately before the separator from keys.",
        ),
    ] = None,
) -> None:
    """Parse a configuration file and print its statistics."""

    try:
        resolved_debug = _resolve_debug(debug)
        result = _load(path, resolved_debug, comment_marker, separator, legacy_key_boundary)
    except Exception as exc:
        exit_with_command_error("parse", exc)

    if json_output:
        typer.echo(json.dumps(result.as_dict(), indent=2, sort_keys=True))
    else:
        echo_parse_report(result, debug=resolved_debug, show_entries=show_entries)

    try:
        result.raise_for_status()
    except ConfigLoadError as exc:
        exit_with_command_error("parse", exc)

    if strict and result.invalid_lines:
        line_numbers = ", ".join(str(line.line_number) for line in result.invalid_lines)
        exit_with_command_error(
            "parse",
            ValueError(f"`{path}` has invalid line(s): {line_numbers}."),
        )


@app.command("get")
def get_command(
    path: Annotated[Path, typer.Argument(help="Path to the configuration file.")],
    key: Annotated[str, typer.Argument(help="Configuration key to print.")],
    comment_marker: Annotated[
        str | None,
        typer.Option("--comment-marker", help="Comment marker character."),
    ] = None,
    separator: Annotated[
        str | None,
        typer.Option("--separator", help="Key/value separator character."),
    ] = None,
) -> None:
    """Print the value stored for one key."""

    try:
        result = _load(path, False, comment_marker, separator)
        result.raise_for_status()
        if key not in result.entries:
            raise KeyError(key)
    except KeyError:
        exit_with_command_error("get", ValueError(f"Key `{key}` not found in `{path}`."))
    except Exception as exc:
        exit_with_command_error("get", exc)

    typer.echo(result.entries[key])


def main() -> None:
    """CLI entrypoint for console scripts."""
    # Parse diagnostics get their own stderr handler; drop loguru's default one.
    _loguru_logger.remove()
    app()


if __name__ == "__main__":
    main()
