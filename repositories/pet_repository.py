"""
Repositorio para la entidad Pet.
Gestiona las operaciones de base de datos relacionadas con mascotas.
"""

from typing import List
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from database.models import PetORM
from core.exceptions import DatabaseException
import logging

logger = logging.getLogger(__name__)


class PetRepository(BaseRepository[PetORM]):
    """Repositorio para la entidad Pet."""

    def __init__(self, db: Session):
        super().__init__(db, PetORM)

    def get_all(self, order_by=None, order_desc: bool = False) -> List[PetORM]:
        """
        Obtiene todas las mascotas con sus visitas precargadas.

        Returns:
            Lista de mascotas ordenadas por id
        """
        try:
            query = self.db.query(PetORM).options(selectinload(PetORM.visits))
            order_field = getattr(PetORM, order_by or "id")
            query = query.order_by(order_field.desc() if order_desc else order_field.asc())
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error getting all pets: {e}")
            raise DatabaseException("Error listing pets")
