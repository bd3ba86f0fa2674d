"""
Vet pages: the filtered, paginated HTML list and the JSON resource.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from ...repositories import VetRepository
from ...schemas import VetResponse, VetsResponse
from ...search import build_vet_listing
from ..dependencies import get_vet_repository
from ..templating import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Vets"])


@router.get("/vets.html", response_class=HTMLResponse)
async def show_vet_list(
    request: Request,
    page: int = Query(1),
    last_name: str = Query("", alias="lastName"),
    specialty: Optional[str] = Query(None),
    vets: VetRepository = Depends(get_vet_repository),
) -> Response:
    """
    Render one page of vets.

    The last name narrows the vets loaded from the database; the specialty
    filter and the page cut are applied in memory.
    """
    candidates = await vets.find_by_last_name_prefix(last_name)
    listing = build_vet_listing(candidates, page, specialty, last_name)
    logger.debug(
        f"Vet list page={page} last_name={last_name!r} specialty={specialty!r} "
        f"matched {listing.page.total_elements}"
    )
    return render(request, "vets/vetList.html", listing.to_context())


@router.get("/vets")
async def show_resources_vet_list(
    vets: VetRepository = Depends(get_vet_repository),
) -> Dict[str, Any]:
    """Every vet as ``{"vetList": [...]}``."""
    payload = VetsResponse(
        vet_list=[VetResponse.model_validate(vet) for vet in await vets.find_all()]
    )
    return payload.model_dump(by_alias=True)
