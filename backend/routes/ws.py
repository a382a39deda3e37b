"""
WebSocket endpoint for live preview.

Accepts connections at /ws/preview. The client sends the current file contents
on open and again after every edit; each edit is rendered from scratch and the
full preview page is sent back.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from backend.models.preview import PreviewRequest
from backend.routes.preview import render_document
from engine.preview import extension_of, is_previewable

logger = logging.getLogger(__name__)

router = APIRouter(tags=["websocket"])


def _make_preview(seq: int, req: PreviewRequest) -> dict[str, Any]:
    """Build the preview payload for one edit."""
    return {
        "type": "preview",
        "seq": seq,
        "filename": req.filename,
        "previewable": is_previewable(extension_of(req.filename)),
        "html": render_document(req),
    }


@router.websocket("/ws/preview")
async def preview_websocket(websocket: WebSocket) -> None:
    """
    Re-render the preview on every edit.

    Protocol:
      Client → Server:  {"type": "edit", "filename": "App.tsx", "text": "..."}
      Server → Client:  {"type": "preview", "seq": n, "filename": ..., "previewable": bool, "html": "..."}
                        {"type": "error", "message": "..."}

    The only per-connection state is the sequence counter; every edit is
    rendered independently of the ones before it.
    """
    await websocket.accept()
    logger.info("WebSocket accepted: /ws/preview")

    seq = 0
    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning("ws: malformed message from client: %r", raw[:200])
                continue

            if not isinstance(msg, dict) or msg.get("type") != "edit":
                logger.warning("ws: ignoring message type %r", msg.get("type") if isinstance(msg, dict) else None)
                continue

            try:
                req = PreviewRequest.model_validate({k: v for k, v in msg.items() if k != "type"})
            except ValidationError as e:
                logger.warning("ws: invalid edit: %d error(s)", e.error_count())
                await websocket.send_text(json.dumps({"type": "error", "message": _describe(e)}))
                continue

            seq += 1
            payload = await run_in_threadpool(_make_preview, seq, req)
            await websocket.send_text(json.dumps(payload))
            logger.debug("ws: sent preview seq=%d for %s", seq, req.filename)

    except WebSocketDisconnect:
        logger.info("WebSocket disconnected: /ws/preview after %d preview(s)", seq)


def _describe(error: ValidationError) -> str:
    """One line per failing field, e.g. "text: Field required"."""
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item.get("loc", ())) or "message"
        parts.append(f"{loc}: {item.get('msg', 'invalid')}")
    return "; ".join(parts)
