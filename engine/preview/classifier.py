"""Code Preview: decides which files get a live preview."""

from __future__ import annotations

from pathlib import PurePath

from engine.preview.types import PREVIEWABLE_EXTENSIONS


def is_previewable(extension: str) -> bool:
    """
    True iff extension is exactly one of .jsx, .tsx, .js, .ts.

    The check is case-sensitive; callers pass an already lower-cased
    extension (see extension_of / SourceDocument.from_path).
    """
    return extension in PREVIEWABLE_EXTENSIONS


def extension_of(path: str | PurePath) -> str:
    """Lower-cased suffix of a file name including the dot, "" if none."""
    return PurePath(path).suffix.lower()
