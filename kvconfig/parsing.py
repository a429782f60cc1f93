"""Line-level parsing helpers for `key = value` configuration files.

Responsibilities:
- Classify trimmed lines as ignorable (blank or comment).
- Split entry lines into validated key/value pairs.
- Normalize optional and boolean tokens for settings resolution.
"""

from __future__ import annotations

from .models.datatypes import ConfigEntry


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: str, field_name: str) -> bool:
    """Parse a required boolean value from accepted textual tokens.

    Args:
        value: Text value to parse.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the token is not one of the accepted boolean values.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed

    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def is_ignored_line(line: str, comment_marker: str = "#") -> bool:
    """Return whether an already-trimmed line is blank or a comment."""

    return not line or line[0] == comment_marker


def split_key_value(
    line: str,
    separator: str = "=",
    *,
    legacy_key_boundary: bool = False,
) -> ConfigEntry | None:
    """Split a trimmed line into a key/value entry.

    A line is accepted only when it holds exactly one separator, the separator
    is not the first character, and both sides are non-empty after trimming.

    Args:
        line: Trimmed, non-ignored line.
        separator: Single-character key/value delimiter.
        legacy_key_boundary: End the key one character before the separator,
            dropping the character that immediately precedes it. Matches files
            written against the older loader behaviour.

    Returns:
        The parsed entry, or `None` when the line is not a valid entry.
    """

    separator_index = line.find(separator)
    if separator_index == -1:
        return None
    if line.find(separator, separator_index + 1) != -1:
        return None
    if separator_index == 0:
        return None

    key_end = separator_index - 1 if legacy_key_boundary else separator_index
    key = line[:key_end].strip()
    value = line[separator_index + 1 :].strip()
    if not key or not value:
        return None
    return ConfigEntry(key=key, value=value)
