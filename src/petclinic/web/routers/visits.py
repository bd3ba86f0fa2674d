"""
Upcoming visits page.
"""

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from ...repositories import VisitRepository
from ...utils.datetime_utils import DEFAULT_UPCOMING_DAYS, upcoming_window
from ..dependencies import get_visit_repository
from ..templating import render

router = APIRouter(tags=["Visits"])


@router.get("/visits/upcoming", response_class=HTMLResponse)
async def show_upcoming_visits(
    request: Request,
    days: int = Query(DEFAULT_UPCOMING_DAYS, ge=0),
    visits: VisitRepository = Depends(get_visit_repository),
) -> Response:
    """Visits from today through ``days`` days ahead."""
    start, end = upcoming_window(days)
    return render(
        request,
        "visits/upcomingVisits.html",
        {"visits": await visits.find_between(start, end), "days": days},
    )
