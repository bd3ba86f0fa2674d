"""
Welcome page and health endpoint.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from ..templating import render

router = APIRouter(tags=["System"])


@router.get("/", response_class=HTMLResponse)
async def welcome(request: Request) -> Response:
    return render(request, "welcome.html")


@router.get("/health")
async def health(request: Request) -> Dict[str, Any]:
    """Database connectivity as reported by the session manager."""
    return await request.app.state.session_manager.health_check()
