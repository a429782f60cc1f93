"""Loader settings and their environment-based construction.

Responsibilities:
- Define loader behaviour (comment marker, separator, encoding, key boundary)
  as a typed dataclass instead of module-level constants.
- Validate settings before any file is touched.
- Resolve settings from `KVCONFIG_*` environment variables for the CLI.

Key types:
- `LoaderSettings`: normalized, validated loader behaviour.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, replace
import os
from typing import Mapping

from .parsing import normalize_optional_string, parse_required_boolean


DEFAULT_COMMENT_MARKER = "#"
DEFAULT_SEPARATOR = "="
DEFAULT_ENCODING = "utf-8-sig"


@dataclass(frozen=True, slots=True)
class LoaderSettings:
    """Behavioural settings fixed for the lifetime of a loader.

    Attributes:
        comment_marker: Character that marks a trimmed line as a comment.
        separator: Character that delimits key from value.
        encoding: Text encoding used to decode the file. The default accepts
            UTF-8 with or without a leading byte-order mark.
        legacy_key_boundary: End keys one character before the separator.
    """

    comment_marker: str = DEFAULT_COMMENT_MARKER
    separator: str = DEFAULT_SEPARATOR
    encoding: str = DEFAULT_ENCODING
    legacy_key_boundary: bool = False

    def validate(self) -> None:
        """Validate settings values before parsing."""

        self._require_single_character(self.comment_marker, "comment_marker")
        self._require_single_character(self.separator, "separator")
        if self.comment_marker == self.separator:
            raise ValueError("`comment_marker` and `separator` must differ.")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown `encoding` value `{self.encoding}`.") from exc

    def with_overrides(
        self,
        *,
        comment_marker: str | None = None,
        separator: str | None = None,
        encoding: str | None = None,
        legacy_key_boundary: bool | None = None,
    ) -> LoaderSettings:
        """Return a copy where explicitly provided values replace current ones."""

        overrides: dict[str, object] = {}
        if comment_marker is not None:
            overrides["comment_marker"] = comment_marker
        if separator is not None:
            overrides["separator"] = separator
        if encoding is not None:
            overrides["encoding"] = encoding
        if legacy_key_boundary is not None:
            overrides["legacy_key_boundary"] = legacy_key_boundary
        return replace(self, **overrides)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> LoaderSettings:
        """Create validated settings from `KVCONFIG_*` environment variables.

        Blank values fall back to defaults.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env

        comment_marker = normalize_optional_string(env_map.get("KVCONFIG_COMMENT_MARKER"))
        separator = normalize_optional_string(env_map.get("KVCONFIG_SEPARATOR"))
        encoding = normalize_optional_string(env_map.get("KVCONFIG_ENCODING"))
        legacy_raw = normalize_optional_string(env_map.get("KVCONFIG_LEGACY_KEY_BOUNDARY"))
        legacy_key_boundary = (
            parse_required_boolean(legacy_raw, "KVCONFIG_LEGACY_KEY_BOUNDARY")
            if legacy_raw is not None
            else False
        )

        settings = cls(
            comment_marker=comment_marker or DEFAULT_COMMENT_MARKER,
            separator=separator or DEFAULT_SEPARATOR,
            encoding=encoding or DEFAULT_ENCODING,
            legacy_key_boundary=legacy_key_boundary,
        )
        settings.validate()
        return settings

    @staticmethod
    def _require_single_character(value: str, field_name: str) -> None:
        """Validate that a delimiter setting is one non-whitespace character."""

        if not isinstance(value, str) or len(value) != 1 or value.isspace():
            raise ValueError(f"`{field_name}` must be a single non-whitespace character.")
