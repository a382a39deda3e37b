"""Preview request and response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from backend.config import settings


class PreviewRequest(BaseModel):
    """What the client sends to POST /api/preview and with each WS edit."""

    model_config = {"extra": "forbid"}

    filename: str = Field(min_length=1, max_length=255)
    text: str = Field(max_length=settings.PREVIEW_MAX_SOURCE_CHARS)


class SupportResponse(BaseModel):
    """What GET /api/preview/supports returns."""

    extension: str
    previewable: bool
