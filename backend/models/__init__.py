"""
Pydantic models for the preview service.

All data shapes defined here. No imports from routes.
"""

from backend.models.preview import PreviewRequest, SupportResponse

__all__ = [
    "PreviewRequest",
    "SupportResponse",
]
