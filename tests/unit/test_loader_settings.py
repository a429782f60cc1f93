"""Unit tests for loader settings validation and environment resolution."""

from __future__ import annotations

import pytest

from kvconfig.config import LoaderSettings


def test_loader_settings_defaults_validate() -> None:
    settings = LoaderSettings()

    settings.validate()

    assert settings.comment_marker == "#"
    assert settings.separator == "="
    assert settings.encoding == "utf-8-sig"
    assert settings.legacy_key_boundary is False


@pytest.mark.parametrize(
    ("settings", "message"),
    [
        (LoaderSettings(comment_marker=""), "`comment_marker` must be a single"),
        (LoaderSettings(comment_marker="//"), "`comment_marker` must be a single"),
        (LoaderSettings(separator=" "), "`separator` must be a single"),
        (LoaderSettings(separator="#"), "must differ"),
        (LoaderSettings(encoding="no-such-codec"), "Unknown `encoding`"),
    ],
)
def test_loader_settings_validate_rejects_invalid_values(
    settings: LoaderSettings, message: str
) -> None:
    with pytest.raises(ValueError, match=message):
        settings.validate()


def test_loader_settings_from_env_loads_values_and_normalizes_blanks() -> None:
    """Environment values should be stripped and blank values fall back to defaults."""

    env = {
        "KVCONFIG_COMMENT_MARKER": " ; ",
        "KVCONFIG_SEPARATOR": "   ",
        "KVCONFIG_ENCODING": " latin-1 ",
        "KVCONFIG_LEGACY_KEY_BOUNDARY": " yes ",
    }

    settings = LoaderSettings.from_env(env)

    assert settings == LoaderSettings(
        comment_marker=";",
        separator="=",
        encoding="latin-1",
        legacy_key_boundary=True,
    )


def test_loader_settings_from_env_uses_defaults_for_empty_env() -> None:
    assert LoaderSettings.from_env({}) == LoaderSettings()


def test_loader_settings_from_env_reads_process_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("KVCONFIG_SEPARATOR", ":")

    assert LoaderSettings.from_env().separator == ":"


def test_loader_settings_from_env_rejects_invalid_values() -> None:
    with pytest.raises(ValueError, match="`KVCONFIG_LEGACY_KEY_BOUNDARY` must be a boolean"):
        LoaderSettings.from_env({"KVCONFIG_LEGACY_KEY_BOUNDARY": "maybe"})

    with pytest.raises(ValueError, match="must differ"):
        LoaderSettings.from_env({"KVCONFIG_COMMENT_MARKER": "="})


def test_loader_settings_with_overrides_replaces_only_given_values() -> None:
    base = LoaderSettings(comment_marker=";", encoding="latin-1")

    updated = base.with_overrides(separator=":", legacy_key_boundary=True)

    assert updated == LoaderSettings(
        comment_marker=";",
        separator=":",
        encoding="latin-1",
        legacy_key_boundary=True,
    )
    assert base.separator == "="
