"""
Pet routes (Controller) - Layered Architecture.

This module handles HTTP requests/responses for the /api/pets endpoints.
Persistence is delegated to ClinicService; DTO translation to the pet mapper.

Responsibilities:
- Authorization chain (router dependency, runs before every handler)
- Referential checks on owner and pet type
- Error reporting through the `errors` response header
- Status codes (note: create/update answer 204 *with* a body, kept for
  compatibility with existing clients)

Structural validation errors on PetDto are turned into 400 responses by the
RequestValidationError handler registered in main.py.
"""

from fastapi import APIRouter, HTTPException, Depends, Path, status
from fastapi.responses import JSONResponse, Response
from typing import List, Optional, Tuple
import logging

from models.pets import PetDto, PetTypeDto, MIN_ID, MAX_ID
from models.errors import ERRORS_HEADER, ErrorMessage
from mappers.pet_mapper import to_pet, to_pet_dto, to_pets_dto, to_pet_type_dtos
from core.exceptions import AppException
from core.security import Role
from database.models import OwnerORM, PetTypeORM
from services.clinic_service import ClinicService
from dependencies import get_clinic_service
from auth import require_roles

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/pets",
    tags=["pets"],
    dependencies=[Depends(require_roles(Role.owner_admin))],
)

MISSING_OWNER_ID = "Missing owner id"
UNKNOWN_PET_TYPE = "Pet type does not exist in the system."
UNKNOWN_OWNER = "Owner does not exist in the system."


# ==================== Helpers ====================

def handle_service_exception(e: AppException) -> HTTPException:
    """Convert service layer exceptions to HTTP exceptions."""
    if e.status_code >= 500:
        logger.error(f"Service error: {e.message}", exc_info=True)
    return HTTPException(status_code=e.status_code, detail=e.message)


def error_response(status_code: int, message: str) -> Response:
    """Empty-bodied response carrying `[{"message": ...}]` in the errors header."""
    return Response(
        status_code=status_code,
        headers={ERRORS_HEADER: ErrorMessage(message=message).to_json()},
    )


def pet_response(pet: PetDto) -> JSONResponse:
    # 204 status with a JSON body
    return JSONResponse(
        content=pet.model_dump(mode="json", by_alias=True),
        status_code=status.HTTP_204_NO_CONTENT,
    )


def resolve_references(
    pet: PetDto,
    service: ClinicService,
) -> Tuple[Optional[Response], Optional[PetTypeORM], Optional[OwnerORM]]:
    """
    Check owner id presence and resolve pet type and owner, in that order.

    Returns:
        (error response or None, pet type, owner)
    """
    if pet.owner_id is None:
        return error_response(status.HTTP_400_BAD_REQUEST, MISSING_OWNER_ID), None, None

    pet_type = service.find_pet_type_by_id(pet.type_id)
    if pet_type is None:
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, UNKNOWN_PET_TYPE), None, None

    owner = service.find_owner_by_id(pet.owner_id)
    if owner is None:
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, UNKNOWN_OWNER), None, None

    return None, pet_type, owner


# ==================== Endpoints ====================

@router.get("/pettypes", response_model=List[PetTypeDto])
async def get_pet_types(service: ClinicService = Depends(get_clinic_service)):
    """
    List the pet types.

    Always 200, even when there are no types (unlike GET /api/pets).
    """
    try:
        return to_pet_type_dtos(service.find_pet_types())
    except AppException as e:
        raise handle_service_exception(e)


@router.get("/{pet_id}", response_model=PetDto)
async def get_pet(
    pet_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: ClinicService = Depends(get_clinic_service),
):
    """
    Get a pet by ID.

    Returns:
        The pet, or 404 with an empty body
    """
    try:
        pet = to_pet_dto(service.find_pet_by_id(pet_id))
    except AppException as e:
        raise handle_service_exception(e)
    if pet is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return pet


@router.get("", response_model=List[PetDto])
async def get_pets(service: ClinicService = Depends(get_clinic_service)):
    """
    List every pet.

    An empty store answers 404, not an empty list.
    """
    try:
        pets = to_pets_dto(service.find_all_pets())
    except AppException as e:
        raise handle_service_exception(e)
    if not pets:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return pets


@router.put("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_pet(
    pet: PetDto,
    pet_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: ClinicService = Depends(get_clinic_service),
):
    """
    Update name, birth date and type of an existing pet.

    The owner is never reassigned, whatever `ownerId` the payload carries;
    `ownerId` must still be present and resolvable.

    Args:
        pet: Pet payload
        pet_id: Pet ID from the path
        service: Injected ClinicService

    Returns:
        204 with the updated pet as body; 400/422 with the errors header;
        404 if the pet does not exist
    """
    try:
        error, pet_type, _owner = resolve_references(pet, service)
        if error is not None:
            return error

        current = service.find_pet_by_id(pet_id)
        if current is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)

        current.birth_date = pet.birth_date
        current.name = pet.name
        current.type = pet_type
        saved = service.save_pet(current)
        return pet_response(to_pet_dto(saved))
    except AppException as e:
        raise handle_service_exception(e)


@router.post("/", status_code=status.HTTP_204_NO_CONTENT)
async def add_pet(
    pet: PetDto,
    service: ClinicService = Depends(get_clinic_service),
):
    """
    Create a pet for an existing owner and pet type.

    Args:
        pet: Pet payload (`id`, `type` and `visits` are ignored)
        service: Injected ClinicService

    Returns:
        204 with the created pet, including its new id, as body;
        400/422 with the errors header
    """
    try:
        error, pet_type, owner = resolve_references(pet, service)
        if error is not None:
            return error

        entity = to_pet(pet)
        entity.type = pet_type
        entity.owner = owner
        saved = service.save_pet(entity)
        return pet_response(to_pet_dto(saved))
    except AppException as e:
        raise handle_service_exception(e)


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pet(
    pet_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: ClinicService = Depends(get_clinic_service),
):
    """
    Delete a pet and its visits in a single transaction.

    Returns:
        204 with no body, or 404 if the pet does not exist
    """
    try:
        pet = service.find_pet_by_id(pet_id)
        if pet is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        with service.transaction():
            service.delete_pet(pet)
    except AppException as e:
        raise handle_service_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
