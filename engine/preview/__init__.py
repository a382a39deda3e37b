"""
Code Preview: the pure preview library.

Four components:
  classifier     - which file extensions can be previewed
  transformer    - strips import/export syntax from component source
  resolver       - emits the App / Component / Main lookup logic
  react_preview  - assembles the HTML preview document

Hosts call two things: is_previewable(extension) and render_preview(doc).
"""

from engine.preview.classifier import extension_of, is_previewable
from engine.preview.react_preview import render_preview, render_unsupported
from engine.preview.transformer import transform
from engine.preview.types import CANDIDATE_NAMES, PREVIEWABLE_EXTENSIONS, PreviewConfig, SourceDocument

__all__ = [
    "is_previewable",
    "extension_of",
    "transform",
    "render_preview",
    "render_unsupported",
    "SourceDocument",
    "PreviewConfig",
    "CANDIDATE_NAMES",
    "PREVIEWABLE_EXTENSIONS",
]
