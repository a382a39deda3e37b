"""Preview rendering: POST /api/preview returns the preview page for a file."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from backend.config import settings
from backend.models.preview import PreviewRequest, SupportResponse
from engine.preview import SourceDocument, extension_of, is_previewable, render_preview

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/preview", tags=["preview"])

# Every edit produces a fresh document; never cache one
_HEADERS = {
    "Cache-Control": "no-store",
    "X-Content-Type-Options": "nosniff",
}


@router.get("/supports", response_model=SupportResponse)
async def supports(filename: str = Query(min_length=1, max_length=255)) -> SupportResponse:
    """Whether a file with this name gets a live preview."""
    extension = extension_of(filename)
    return SupportResponse(extension=extension, previewable=is_previewable(extension))


@router.post("", response_class=HTMLResponse)
async def preview(req: PreviewRequest) -> HTMLResponse:
    """
    Render the preview page for one file.

    Unsupported files still get a 200 with the fixed "unsupported" page; the
    client just displays whatever comes back. Rendering runs in the threadpool
    so a large source never stalls the event loop.
    """
    html = await run_in_threadpool(render_document, req)
    return HTMLResponse(content=html, headers=_HEADERS)


def render_document(req: PreviewRequest) -> str:
    """Render a request with the configured CDN versions."""
    doc = SourceDocument.from_path(req.filename, req.text)
    logger.debug("preview: %s (%d chars)", req.filename, len(req.text))
    return render_preview(doc, config=settings.preview_config(), title=req.filename)
