"""
Code Preview: value types.

SourceDocument is what the host hands in per render request. PreviewConfig
holds the pinned CDN versions of the three browser-side libraries.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

CANDIDATE_NAMES: tuple[str, ...] = ("App", "Component", "Main")

PREVIEWABLE_EXTENSIONS: tuple[str, ...] = (".jsx", ".tsx", ".js", ".ts")

DEFAULT_REACT_VERSION = "18.2.0"
DEFAULT_REACT_DOM_VERSION = "18.2.0"
DEFAULT_BABEL_VERSION = "7.23.5"
DEFAULT_CDN_BASE_URL = "https://unpkg.com"


@dataclass(frozen=True)
class SourceDocument:
    """A document to preview: lower-cased extension (with dot) plus raw text."""

    file_extension: str
    text: str

    @classmethod
    def from_path(cls, path: str | PurePath, text: str) -> SourceDocument:
        return cls(file_extension=PurePath(path).suffix.lower(), text=text)


@dataclass(frozen=True)
class PreviewConfig:
    """Pinned versions for React, ReactDOM and Babel standalone."""

    ui_library_version: str = DEFAULT_REACT_VERSION
    dom_binding_version: str = DEFAULT_REACT_DOM_VERSION
    transpiler_version: str = DEFAULT_BABEL_VERSION
    cdn_base_url: str = DEFAULT_CDN_BASE_URL

    def __post_init__(self) -> None:
        for field_name in ("ui_library_version", "dom_binding_version", "transpiler_version", "cdn_base_url"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"PreviewConfig.{field_name} must be a non-empty string")

    def script_urls(self) -> tuple[str, str, str]:
        """Script URLs in load order: UI library, DOM binding, transpiler."""
        base = self.cdn_base_url.rstrip("/")
        return (
            f"{base}/react@{self.ui_library_version}/umd/react.production.min.js",
            f"{base}/react-dom@{self.dom_binding_version}/umd/react-dom.production.min.js",
            f"{base}/@babel/standalone@{self.transpiler_version}/babel.min.js",
        )
