from __future__ import annotations

import pytest
from pydantic import ValidationError

from toastcall.config import Settings, load_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.loading_message == "Processing..."
    assert settings.error_message == "Operation failed"
    assert settings.copy_label == "Copy"
    assert (
        settings.success_duration_ms,
        settings.error_duration_ms,
        settings.warning_duration_ms,
        settings.info_duration_ms,
    ) == (3000, 5000, 4000, 3000)


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TOASTCALL_LOADING_MESSAGE", "Working")
    monkeypatch.setenv("TOASTCALL_ERROR_DURATION_MS", "8000")

    settings = Settings(_env_file=None)

    assert settings.loading_message == "Working"
    assert settings.error_duration_ms == 8000


def test_durations_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("TOASTCALL_INFO_DURATION_MS", "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_load_settings_applies_explicit_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)

    settings = load_settings(error_message="Nope", loading_message=None)

    assert settings.error_message == "Nope"
    assert settings.loading_message == "Processing..."
