"""
Pet and visit pages nested under an owner.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from ...exceptions import EntityNotFoundException
from ...models import Owner, Pet, PetType, Visit
from ...repositories import OwnerRepository, PetRepository, VisitRepository
from ...schemas import PetForm, VisitForm
from ...utils.datetime_utils import get_today
from ..dependencies import (
    get_owner_repository,
    get_pet_repository,
    get_visit_repository,
)
from ..flash import redirect
from ..forms import read_form, validate_form
from ..templating import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pets"])

PET_FORM_VIEW = "pets/createOrUpdatePetForm.html"
VISIT_FORM_VIEW = "pets/createOrUpdateVisitForm.html"


def _find_pet(owner: Owner, pet_id: int) -> Pet:
    pet = owner.get_pet_by_id(pet_id)
    if pet is None:
        raise EntityNotFoundException("Pet", pet_id)
    return pet


def _pet_form_values(pet: Pet) -> Dict[str, Any]:
    return {
        "id": pet.id,
        "name": pet.name,
        "birthDate": pet.birth_date.isoformat() if pet.birth_date else "",
        "type": pet.type_id,
    }


async def _check_pet(
    owner: Owner,
    form: PetForm,
    pets: PetRepository,
    pet_id: Optional[int] = None,
) -> Tuple[Optional[PetType], Dict[str, List[str]]]:
    """Resolve the pet type and reject names already used by this owner."""
    errors: Dict[str, List[str]] = {}

    existing = owner.get_pet(form.name, ignore_new=True)
    if existing is not None and existing.id != pet_id:
        errors["name"] = ["already exists"]

    pet_type = await pets.find_pet_type(form.type_id)
    if pet_type is None:
        errors["type"] = ["is required"]

    return pet_type, errors


async def _render_pet_form(
    request: Request,
    owner: Owner,
    pets: PetRepository,
    values: Dict[str, Any],
    errors: Dict[str, List[str]],
    is_new: bool,
) -> Response:
    return render(
        request,
        PET_FORM_VIEW,
        {
            "owner": owner,
            "pet": values,
            "types": await pets.find_pet_types(),
            "errors": errors,
            "is_new": is_new,
        },
    )


@router.get("/owners/{owner_id}/pets/new", response_class=HTMLResponse)
async def init_creation_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
) -> Response:
    owner = await owners.get_by_id(owner_id)
    return await _render_pet_form(request, owner, pets, {}, {}, is_new=True)


@router.post("/owners/{owner_id}/pets/new", response_class=HTMLResponse)
async def process_creation_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
) -> Response:
    """Add a pet to the owner, or re-render the form with errors."""
    owner = await owners.get_by_id(owner_id)
    values = await read_form(request)
    form, errors = validate_form(PetForm, values)

    pet_type = None
    if form is not None:
        pet_type, errors = await _check_pet(owner, form, pets)

    if errors:
        return await _render_pet_form(
            request, owner, pets, values, errors, is_new=True
        )

    owner.add_pet(
        Pet(name=form.name, birth_date=form.birth_date, type=pet_type, visits=[])
    )
    await owners.save(owner)
    return redirect(f"/owners/{owner_id}", message="New Pet has been Added")


@router.get("/owners/{owner_id}/pets/{pet_id}/edit", response_class=HTMLResponse)
async def init_update_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
) -> Response:
    owner = await owners.get_by_id(owner_id)
    pet = _find_pet(owner, pet_id)
    return await _render_pet_form(
        request, owner, pets, _pet_form_values(pet), {}, is_new=False
    )


@router.post("/owners/{owner_id}/pets/{pet_id}/edit", response_class=HTMLResponse)
async def process_update_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
) -> Response:
    """Apply a pet edit; the new name must not collide with a sibling pet."""
    owner = await owners.get_by_id(owner_id)
    pet = _find_pet(owner, pet_id)
    values = await read_form(request)
    form, errors = validate_form(PetForm, values)

    pet_type = None
    if form is not None:
        pet_type, errors = await _check_pet(owner, form, pets, pet_id=pet_id)

    if errors:
        values["id"] = pet_id
        return await _render_pet_form(
            request, owner, pets, values, errors, is_new=False
        )

    pet.update_fields(name=form.name, birth_date=form.birth_date, type=pet_type)
    await owners.save(owner)
    return redirect(f"/owners/{owner_id}", message="Pet details has been edited")


@router.post("/owners/{owner_id}/pets/{pet_id}/delete")
async def delete_pet(
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
) -> Response:
    """Delete a pet together with its visits."""
    owner = await owners.get_by_id(owner_id)
    pet = _find_pet(owner, pet_id)
    await pets.delete(owner, pet)
    return redirect(f"/owners/{owner_id}", message="Pet has been deleted")


@router.get(
    "/owners/{owner_id}/pets/{pet_id}/visits/new", response_class=HTMLResponse
)
async def init_new_visit_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
) -> Response:
    owner = await owners.get_by_id(owner_id)
    pet = _find_pet(owner, pet_id)
    return render(
        request,
        VISIT_FORM_VIEW,
        {
            "owner": owner,
            "pet": pet,
            "visit": {"date": get_today().isoformat(), "description": ""},
            "errors": {},
        },
    )


@router.post(
    "/owners/{owner_id}/pets/{pet_id}/visits/new", response_class=HTMLResponse
)
async def process_new_visit_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    visits: VisitRepository = Depends(get_visit_repository),
) -> Response:
    """Book a visit for one of the owner's pets."""
    owner = await owners.get_by_id(owner_id)
    pet = _find_pet(owner, pet_id)
    values = await read_form(request)
    form, errors = validate_form(VisitForm, values)

    if errors:
        return render(
            request,
            VISIT_FORM_VIEW,
            {"owner": owner, "pet": pet, "visit": values, "errors": errors},
        )

    visit = Visit(visit_date=form.visit_date, description=form.description)
    owner.add_visit(pet_id, visit)
    await visits.save(visit)
    return redirect(f"/owners/{owner_id}", message="Your visit has been booked")
