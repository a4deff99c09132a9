"""
Repositorio base con operaciones CRUD comunes:
Este repositorio genérico proporciona operaciones de base de datos estándar
que se pueden reutilizar en todos los repositorios de entidades.

Los errores del motor (``NoResultFound``, ``IntegrityError``, ...) se propagan
con su propio tipo; reclasificarlos es responsabilidad de la capa de servicio.
"""

from typing import TypeVar, Generic, Optional, Type, Any
from sqlalchemy.orm import Session
from sqlalchemy import desc, asc, inspect
from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
import logging

from core.pagination import Page, PageRequest, calculate_skip, create_page

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Repositorio genérico proporciona operaciones CRUD estándar

    Esta clase debe ser heredada por repositorios de entidades específicos.
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

    def find_all(self, page_request: PageRequest) -> Page[T]:
        """
        Obtiene una página de entidades.

        Args:
            page_request: Página, tamaño y orden solicitados

        Returns:
            Page con las entidades y la metadata de paginación
        """
        try:
            query = self.db.query(self.model_class)

            # Apply ordering
            order_by = page_request.order_by
            if order_by and order_by in self.sortable_fields():
                order_field = getattr(self.model_class, order_by)
                if page_request.order_desc:
                    query = query.order_by(desc(order_field))
                else:
                    query = query.order_by(asc(order_field))

            skip = calculate_skip(page_request.page, page_request.page_size)
            items = query.offset(skip).limit(page_request.page_size).all()
            total_items = self.count()
        except SQLAlchemyError as e:
            logger.error(f"Error getting all {self.model_class.__name__}: {e}")
            raise

        return create_page(items, page_request, total_items)

    def sortable_fields(self) -> set[str]:
        """Atributos mapeados a columna; relaciones y demás atributos se ignoran."""
        return {attr.key for attr in inspect(self.model_class).column_attrs}

    def find_by_id(self, id: Any) -> Optional[T]:
        """
        Obtiene una entidad por su ID.

        Args:
            id: ID de la entidad

        Returns:
            The entity or None if not found
        """
        try:
            return self.db.get(self.model_class, id)
        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.model_class.__name__} by id {id}: {e}")
            raise

    def get_reference(self, id: Any) -> T:
        """
        Obtiene la entidad existente que se va a modificar.

        Args:
            id: ID de la entidad

        Returns:
            The entity

        Raises:
            NoResultFound: If no row has this ID
        """
        entity = self.find_by_id(id)
        if entity is None:
            raise NoResultFound(f"{self.model_class.__name__} con id {id} no existe")
        return entity

    def count(self) -> int:
        """Cuenta todas las entidades."""
        try:
            return self.db.query(self.model_class).count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model_class.__name__}: {e}")
            raise

    def save(self, entity: T) -> T:
        """
        Persiste una entidad nueva o modificada.

        Args:
            entity: La entidad a guardar

        Returns:
            The saved entity, with its assigned ID
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Error saving {self.model_class.__name__}: {e}")
            self.rollback()
            raise

    def delete_by_id(self, id: Any) -> None:
        """
        Elimina físicamente la entidad con el ID indicado.

        Args:
            id: ID de la entidad

        Raises:
            NoResultFound: If no row has this ID
            IntegrityError: If other rows still reference this one
        """
        entity = self.get_reference(id)
        try:
            self.db.delete(entity)
            self.db.flush()
        except IntegrityError as e:
            logger.error(f"Integrity error deleting {self.model_class.__name__} {id}: {e.orig}")
            self.rollback()
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error deleting {self.model_class.__name__} {id}: {e}")
            self.rollback()
            raise

    def commit(self) -> None:
        """Realiza el commit de la transacción actual."""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error committing transaction: {e}")
            self.rollback()
            raise

    def rollback(self) -> None:
        """Realiza el rollback de la transacción actual."""
        self.db.rollback()
