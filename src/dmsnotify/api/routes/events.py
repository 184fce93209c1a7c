"""Event intake endpoint mirroring the Lambda invocation."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request

router = APIRouter(tags=["events"])


@router.post("/events")
def process_event(request: Request, event: dict[str, Any] = Body(...)) -> dict[str, str]:
    """Run one register, stoppage or failure event through the handler."""
    signal = request.app.state.handler.handle(event)
    return {"status": "processed", "signal": signal.kind}
