"""
Jinja2 template rendering with flash message support.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from .flash import clear_flash, read_flash

BASE_PATH = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_PATH / "templates"))


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
) -> Response:
    """
    Render a page, showing and then clearing any pending flash values.

    Args:
        request: Current request
        name: Template path relative to the templates directory
        context: Template variables
        status_code: HTTP status of the response

    Returns:
        Rendered HTML response
    """
    page_context: Dict[str, Any] = {"message": None, "error": None}
    page_context.update(read_flash(request))
    page_context.update(context or {})

    response = templates.TemplateResponse(
        request=request, name=name, context=page_context, status_code=status_code
    )
    clear_flash(request, response)
    return response
