"""
Owner pages: search, details, create and edit.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from ...exceptions import IdentityMismatchException
from ...models import Owner
from ...repositories import OwnerRepository
from ...schemas import OwnerForm, OwnerSearchForm
from ...search import OwnerSearchCriteria, PageRequest
from ..dependencies import get_owner_repository
from ..flash import redirect
from ..forms import read_form, validate_form
from ..templating import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Owners"])

OWNER_PAGE_SIZE = 5

FIND_OWNERS_VIEW = "owners/findOwners.html"
OWNERS_LIST_VIEW = "owners/ownersList.html"
OWNER_DETAILS_VIEW = "owners/ownerDetails.html"
OWNER_FORM_VIEW = "owners/createOrUpdateOwnerForm.html"

DUPLICATE_OWNER = "An owner with this name and telephone already exists"


def _owner_form_values(owner: Owner) -> Dict[str, Any]:
    return {
        "id": owner.id,
        "firstName": owner.first_name,
        "lastName": owner.last_name,
        "address": owner.address,
        "city": owner.city,
        "telephone": owner.telephone,
    }


@router.get("/owners/new", response_class=HTMLResponse)
async def init_creation_form(request: Request) -> Response:
    """Render an empty owner form."""
    return render(
        request, OWNER_FORM_VIEW, {"owner": {}, "errors": {}, "is_new": True}
    )


@router.post("/owners/new", response_class=HTMLResponse)
async def process_creation_form(
    request: Request,
    owners: OwnerRepository = Depends(get_owner_repository),
) -> Response:
    """
    Create an owner from the submitted form.

    Invalid input and duplicates re-render the form with the submitted
    values; success redirects to the new owner's page.
    """
    values = await read_form(request)
    form, errors = validate_form(OwnerForm, values)

    if form is not None:
        duplicates = await owners.find_duplicates(
            form.first_name, form.last_name, form.telephone
        )
        if duplicates:
            errors = {"owner": [DUPLICATE_OWNER]}

    if errors:
        return render(
            request,
            OWNER_FORM_VIEW,
            {"owner": values, "errors": errors, "is_new": True},
        )

    owner = Owner(**form.model_dump(exclude={"id"}), pets=[])
    await owners.save(owner)
    return redirect(f"/owners/{owner.id}", message="New Owner Created")


@router.get("/owners/find", response_class=HTMLResponse)
async def init_find_form(request: Request) -> Response:
    """Render the find owners form."""
    return render(request, FIND_OWNERS_VIEW, {"owner": {}, "errors": {}})


@router.get("/owners", response_class=HTMLResponse)
async def process_find_form(
    request: Request,
    page: int = Query(1),
    last_name: Optional[str] = Query(None, alias="lastName"),
    telephone: Optional[str] = Query(None),
    city: Optional[str] = Query(None),
    owners: OwnerRepository = Depends(get_owner_repository),
) -> Response:
    """
    Search owners and show one page of the result.

    A single match redirects straight to that owner; no match re-renders the
    search form with a ``not found`` error.
    """
    values = {
        "lastName": last_name or "",
        "telephone": telephone or "",
        "city": city or "",
    }
    form, errors = validate_form(OwnerSearchForm, values)
    if errors:
        return render(request, FIND_OWNERS_VIEW, {"owner": values, "errors": errors})

    criteria = OwnerSearchCriteria(
        last_name=form.last_name, telephone=form.telephone, city=form.city
    )
    page_request = PageRequest(page=page, size=OWNER_PAGE_SIZE)

    if criteria.uses_combined_filter:
        results = await owners.find_by_criteria(
            criteria.last_name, criteria.telephone, criteria.city, page_request
        )
    else:
        results = await owners.find_by_last_name_prefix(
            criteria.last_name, page_request
        )

    if results.total_elements == 0:
        return render(
            request,
            FIND_OWNERS_VIEW,
            {"owner": values, "errors": {"lastName": ["not found"]}},
        )

    if results.total_elements == 1 and len(results.content) == 1:
        return redirect(f"/owners/{results.content[0].id}")

    return render(
        request,
        OWNERS_LIST_VIEW,
        {
            "lastName": criteria.last_name,
            "telephone": criteria.telephone,
            "city": criteria.city,
            "filtered": not criteria.is_empty,
            "currentPage": results.number,
            "totalPages": results.total_pages,
            "hasPrevious": results.has_previous,
            "hasNext": results.has_next,
            "totalItems": results.total_elements,
            "listOwners": results.content,
        },
    )


@router.get("/owners/{owner_id}/edit", response_class=HTMLResponse)
async def init_update_owner_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
) -> Response:
    """Render the owner form filled with the stored values."""
    owner = await owners.get_by_id(owner_id)
    return render(
        request,
        OWNER_FORM_VIEW,
        {"owner": _owner_form_values(owner), "errors": {}, "is_new": False},
    )


@router.post("/owners/{owner_id}/edit", response_class=HTMLResponse)
async def process_update_owner_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
) -> Response:
    """
    Apply an owner edit.

    A form whose id does not match the path id is rejected without writing
    anything and sends the user back to the edit form.
    """
    values = await read_form(request)
    form, errors = validate_form(OwnerForm, values)
    if errors:
        values["id"] = owner_id
        return render(
            request,
            OWNER_FORM_VIEW,
            {"owner": values, "errors": errors, "is_new": False},
        )

    owner = await owners.get_by_id(owner_id)

    if form.id is not None and form.id != owner_id:
        mismatch = IdentityMismatchException("Owner", owner_id, form.id)
        mismatch.log_error(logger, logging.WARNING)
        return redirect(f"/owners/{owner_id}/edit", error=mismatch.message)

    owner.update_fields(**form.model_dump(exclude={"id"}))
    await owners.save(owner)
    return redirect(f"/owners/{owner_id}", message="Owner Values Updated")


@router.get("/owners/{owner_id}", response_class=HTMLResponse)
async def show_owner(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
) -> Response:
    """Owner details with pets and their visits."""
    owner = await owners.get_by_id(owner_id)
    return render(request, OWNER_DETAILS_VIEW, {"owner": owner})
