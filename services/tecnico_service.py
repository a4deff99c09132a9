"""
Service for Tecnico business logic.

Handles listing, lookup, creation, update and deletion of tecnicos,
translating persistence outcomes into domain exceptions.
"""

import logging

from sqlalchemy.exc import NoResultFound

from services.base_service import BaseService, PERSISTENCE_ERRORS
from repositories.tecnico_repository import TecnicoRepository
from database.models import TecnicoORM
from models.tecnicos import TecnicoDTO
from core.pagination import Page, PageRequest

logger = logging.getLogger(__name__)


class TecnicoService(BaseService[TecnicoORM, TecnicoRepository]):
    """Service for managing tecnico business logic."""

    resource_name = "Tecnico"

    def find_all_paged(self, page_request: PageRequest) -> Page[TecnicoDTO]:
        """
        Get a page of tecnicos.

        Args:
            page_request: Page index, size and ordering

        Returns:
            Page of TecnicoDTO in repository order
        """
        page = self.repository.find_all(page_request)
        return page.map(self._to_dto)

    def find_by_id(self, id: int) -> TecnicoDTO:
        """
        Get a tecnico by ID.

        Raises:
            ResourceNotFoundException: If tecnico not found
        """
        entity = self.repository.find_by_id(id)
        if entity is None:
            raise self.not_found(id)
        return self._to_dto(entity)

    def insert(self, dto: TecnicoDTO) -> TecnicoDTO:
        """
        Register a new tecnico. ``dto.id`` is ignored; the store assigns it.

        Returns:
            Created tecnico
        """
        entity = TecnicoORM()
        self._copy_dto_to_entity(dto, entity)

        entity = self.repository.save(entity)
        self.repository.commit()

        logger.info(f"Tecnico {entity.id} created")

        return self._to_dto(entity)

    def update(self, id: int, dto: TecnicoDTO) -> TecnicoDTO:
        """
        Overwrite the fields of an existing tecnico.

        Args:
            id: Tecnico ID
            dto: New field values (``dto.id`` is ignored)

        Returns:
            Updated tecnico

        Raises:
            ResourceNotFoundException: If tecnico not found
        """
        try:
            entity = self.repository.get_reference(id)
            self._copy_dto_to_entity(dto, entity)
            entity = self.repository.save(entity)
            self.repository.commit()
        except NoResultFound as e:
            raise self.translate_error(e, id) from e

        logger.info(f"Tecnico {id} updated")

        return self._to_dto(entity)

    def delete(self, id: int) -> None:
        """
        Delete a tecnico.

        Raises:
            ResourceNotFoundException: If tecnico not found
            DataBaseIntegrityException: If other records still reference it
        """
        try:
            self.repository.delete_by_id(id)
            self.repository.commit()
        except PERSISTENCE_ERRORS as e:
            raise self.translate_error(e, id) from e

        logger.info(f"Tecnico {id} deleted")

    def _copy_dto_to_entity(self, dto: TecnicoDTO, entity: TecnicoORM) -> None:
        """Copy mutable fields; the identifier is never touched."""
        entity.nombre = dto.nombre
        entity.email = dto.email
        entity.telefono = dto.telefono

    def _to_dto(self, entity: TecnicoORM) -> TecnicoDTO:
        """Convert ORM to Pydantic transfer object."""
        return TecnicoDTO(
            id=entity.id,
            nombre=entity.nombre,
            email=entity.email,
            telefono=entity.telefono,
        )
