"""
Code Preview service configuration: all environment variables in one place.

Read from environment at import time. Nothing is required; every value has a
default matching the pinned engine defaults.
"""

from __future__ import annotations

import os

from engine.preview.types import (
    DEFAULT_BABEL_VERSION,
    DEFAULT_CDN_BASE_URL,
    DEFAULT_REACT_DOM_VERSION,
    DEFAULT_REACT_VERSION,
    PreviewConfig,
)


class Settings:
    """Application settings from environment variables."""

    # CDN libraries loaded by every preview page
    PREVIEW_REACT_VERSION: str = os.environ.get("PREVIEW_REACT_VERSION", DEFAULT_REACT_VERSION)
    PREVIEW_REACT_DOM_VERSION: str = os.environ.get("PREVIEW_REACT_DOM_VERSION", DEFAULT_REACT_DOM_VERSION)
    PREVIEW_BABEL_VERSION: str = os.environ.get("PREVIEW_BABEL_VERSION", DEFAULT_BABEL_VERSION)
    PREVIEW_CDN_BASE_URL: str = os.environ.get("PREVIEW_CDN_BASE_URL", DEFAULT_CDN_BASE_URL)

    # Largest source accepted per render request (characters)
    PREVIEW_MAX_SOURCE_CHARS: int = int(os.environ.get("PREVIEW_MAX_SOURCE_CHARS", str(1024 * 1024)))

    # Application
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    def preview_config(self) -> PreviewConfig:
        """PreviewConfig built from the current settings."""
        return PreviewConfig(
            ui_library_version=self.PREVIEW_REACT_VERSION,
            dom_binding_version=self.PREVIEW_REACT_DOM_VERSION,
            transpiler_version=self.PREVIEW_BABEL_VERSION,
            cdn_base_url=self.PREVIEW_CDN_BASE_URL,
        )


# Singleton instance
settings = Settings()
