"""
Service facade over the clinic repositories.

Exposes the lookups and mutations the pets controller consumes. Lookups return
None when nothing matches; the controller decides the HTTP outcome.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional
import logging

from repositories.pet_repository import PetRepository
from repositories.owner_repository import OwnerRepository
from repositories.pet_type_repository import PetTypeRepository
from database.models import PetORM, OwnerORM, PetTypeORM

logger = logging.getLogger(__name__)


class ClinicService:
    """Clinic operations over pets, owners and pet types."""

    def __init__(
        self,
        pet_repository: PetRepository,
        owner_repository: OwnerRepository,
        pet_type_repository: PetTypeRepository,
    ):
        """
        Initialize clinic service.

        Args:
            pet_repository: PetRepository instance
            owner_repository: OwnerRepository instance
            pet_type_repository: PetTypeRepository instance
        """
        self.pet_repo = pet_repository
        self.owner_repo = owner_repository
        self.pet_type_repo = pet_type_repository

    # ==================== Lookups ====================

    def find_pet_by_id(self, pet_id: int) -> Optional[PetORM]:
        return self.pet_repo.get_by_id(pet_id)

    def find_all_pets(self) -> List[PetORM]:
        return self.pet_repo.get_all()

    def find_pet_types(self) -> List[PetTypeORM]:
        return self.pet_type_repo.get_all()

    def find_pet_type_by_id(self, pet_type_id: Optional[int]) -> Optional[PetTypeORM]:
        return self.pet_type_repo.get_by_id(pet_type_id)

    def find_owner_by_id(self, owner_id: Optional[int]) -> Optional[OwnerORM]:
        return self.owner_repo.get_by_id(owner_id)

    # ==================== Mutations ====================

    def save_pet(self, pet: PetORM) -> PetORM:
        """
        Insert or update a pet and commit.

        Args:
            pet: New or session-bound PetORM with type and owner set

        Returns:
            The persisted pet with its identity assigned

        Raises:
            DatabaseException: If the flush or commit fails (already rolled back)
        """
        creating = pet.id is None
        saved = self.pet_repo.save(pet)
        self.pet_repo.commit()
        logger.info(f"Pet {saved.id} {'created' if creating else 'updated'}")
        return saved

    def delete_pet(self, pet: PetORM) -> None:
        """
        Delete a pet and, through the ORM cascade, its visits.

        Only flushes; run it inside ``transaction()`` so the whole removal is
        committed or rolled back as one unit.
        """
        self.pet_repo.delete(pet)
        logger.info(f"Pet {pet.id} deleted")

    @contextmanager
    def transaction(self) -> Iterator["ClinicService"]:
        """
        Unit of work: commit on success, rollback on any exception.

        Usage:
            with service.transaction():
                service.delete_pet(pet)
        """
        try:
            yield self
        except Exception:
            logger.warning("Transaction rolled back")
            self.pet_repo.rollback()
            raise
        self.pet_repo.commit()
