"""
One-shot flash messages carried across a redirect in a cookie.

A write handler attaches ``message`` or ``error`` to its redirect response;
the next rendered page shows it and clears the cookie.
"""

import base64
import binascii
import json
import logging
from typing import Dict, Optional

from fastapi import Request, Response
from fastapi.responses import RedirectResponse

logger = logging.getLogger(__name__)

FLASH_COOKIE = "petclinic_flash"
FLASH_MAX_AGE = 60

FLASH_CATEGORIES = ("message", "error")


def set_flash(
    response: Response, message: Optional[str] = None, error: Optional[str] = None
) -> None:
    """Store flash values on a response."""
    payload = {
        key: value
        for key, value in (("message", message), ("error", error))
        if value
    }
    if not payload:
        return
    encoded = base64.urlsafe_b64encode(json.dumps(payload).encode("utf-8"))
    response.set_cookie(
        FLASH_COOKIE,
        encoded.decode("ascii"),
        max_age=FLASH_MAX_AGE,
        httponly=True,
        samesite="lax",
    )


def read_flash(request: Request) -> Dict[str, str]:
    """Decode the flash values sent with a request, if any."""
    raw = request.cookies.get(FLASH_COOKIE)
    if not raw:
        return {}
    try:
        payload = json.loads(base64.urlsafe_b64decode(raw.encode("ascii")))
    except (binascii.Error, UnicodeError, ValueError) as e:
        logger.warning(f"Discarding unreadable flash cookie: {e}")
        return {}
    if not isinstance(payload, dict):
        return {}
    return {
        key: str(value) for key, value in payload.items() if key in FLASH_CATEGORIES
    }


def clear_flash(request: Request, response: Response) -> None:
    """Expire the flash cookie once its values have been shown."""
    if FLASH_COOKIE in request.cookies:
        response.delete_cookie(FLASH_COOKIE)


def redirect(
    url: str, message: Optional[str] = None, error: Optional[str] = None
) -> RedirectResponse:
    """303 redirect, optionally carrying flash values to the target page."""
    response = RedirectResponse(url, status_code=303)
    set_flash(response, message=message, error=error)
    return response
