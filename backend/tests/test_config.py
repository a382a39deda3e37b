"""Tests for backend.config."""

from __future__ import annotations

import pytest

from backend.config import Settings, settings
from engine.preview.types import PreviewConfig


def test_defaults_match_engine():
    assert settings.preview_config() == PreviewConfig()


def test_overrides_flow_into_preview_config(monkeypatch):
    custom = Settings()
    monkeypatch.setattr(custom, "PREVIEW_REACT_VERSION", "17.0.2")
    monkeypatch.setattr(custom, "PREVIEW_CDN_BASE_URL", "https://cdn.jsdelivr.net/npm")
    config = custom.preview_config()
    assert config.ui_library_version == "17.0.2"
    assert config.script_urls()[0] == "https://cdn.jsdelivr.net/npm/react@17.0.2/umd/react.production.min.js"


def test_empty_version_rejected(monkeypatch):
    custom = Settings()
    monkeypatch.setattr(custom, "PREVIEW_BABEL_VERSION", "")
    with pytest.raises(ValueError):
        custom.preview_config()


def test_settings_cover_preview_and_logging_only():
    names = {name for name in vars(Settings) if name.isupper()}
    assert names == {
        "PREVIEW_REACT_VERSION",
        "PREVIEW_REACT_DOM_VERSION",
        "PREVIEW_BABEL_VERSION",
        "PREVIEW_CDN_BASE_URL",
        "PREVIEW_MAX_SOURCE_CHARS",
        "LOG_LEVEL",
    }
