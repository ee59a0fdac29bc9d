"""
Repositorio base con operaciones CRUD comunes:
Este repositorio genérico proporciona operaciones de base de datos estándar
que se reutilizan en los repositorios de mascotas, propietarios y tipos.
"""

from typing import TypeVar, Generic, List, Optional, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import desc, asc
import logging

from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Repositorio genérico que proporciona operaciones CRUD estándar.

    Las operaciones de escritura hacen flush pero no commit; la transacción
    la cierra quien llama (servicio) con ``commit``/``rollback``.
    """

    def __init__(self, db: Session, model_class: Type[T]):
        """
        Inicializa el repositorio.

        Args:
            db: Sesión SQLAlchemy
            model_class: Clase del modelo ORM para este repositorio
        """
        self.db = db
        self.model_class = model_class

    def get_by_id(self, id: Optional[int]) -> Optional[T]:
        """
        Obtiene una entidad por su ID.

        Args:
            id: ID de la entidad (None nunca resuelve)

        Returns:
            The entity or None if not found
        """
        if id is None:
            return None
        try:
            return self.db.get(self.model_class, int(id))
        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.model_class.__name__} by id {id}: {e}")
            raise DatabaseException(f"Error loading {self.model_class.__name__}")

    def get_all(
        self,
        order_by: Optional[str] = None,
        order_desc: bool = False
    ) -> List[T]:
        """
        Obtiene todas las entidades.

        Args:
            order_by: Field name to order by (defaults to primary key)
            order_desc: Whether to order descending

        Returns:
            List of entities
        """
        try:
            query = self.db.query(self.model_class)
            order_field = getattr(self.model_class, order_by or "id")
            query = query.order_by(desc(order_field) if order_desc else asc(order_field))
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error getting all {self.model_class.__name__}: {e}")
            raise DatabaseException(f"Error listing {self.model_class.__name__}")

    def save(self, entity: T) -> T:
        """
        Inserta o actualiza una entidad.

        Args:
            entity: La entidad a guardar (nueva o ya asociada a la sesión)

        Returns:
            The saved entity with its generated identity
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Error saving {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error saving {self.model_class.__name__}")

    def delete(self, entity: T) -> None:
        """
        Elimina una entidad; las relaciones en cascada se eliminan en el mismo flush.

        Args:
            entity: La entidad a eliminar
        """
        try:
            self.db.delete(entity)
            self.db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Error deleting {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error deleting {self.model_class.__name__}")

    def commit(self) -> None:
        """Realiza el commit de la transacción actual."""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error committing transaction: {e}")
            self.db.rollback()
            raise DatabaseException("Error saving changes to the database")

    def rollback(self) -> None:
        """Realiza el rollback de la transacción actual."""
        self.db.rollback()
