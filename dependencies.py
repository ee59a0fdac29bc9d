"""
Dependency injection for services and repositories.

This module provides FastAPI dependencies for injecting the clinic service
and its repositories into route handlers.
"""

from sqlalchemy.orm import Session
from fastapi import Depends

from database.db import get_db
from repositories.pet_repository import PetRepository
from repositories.owner_repository import OwnerRepository
from repositories.pet_type_repository import PetTypeRepository
from services.clinic_service import ClinicService


def get_clinic_service(db: Session = Depends(get_db)) -> ClinicService:
    """
    Get ClinicService instance bound to the request session.

    All repositories share the same session, so a commit or rollback covers
    every change made during the request.

    Example:
        ```python
        @router.get("/pets")
        def get_pets(service: ClinicService = Depends(get_clinic_service)):
            return service.find_all_pets()
        ```
    """
    return ClinicService(
        PetRepository(db),
        OwnerRepository(db),
        PetTypeRepository(db),
    )
