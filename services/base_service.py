"""
Servicio base con operaciones de lógica de negocio comunes.
Esta clase proporciona una base para las clases de servicio que implementan
la lógica de negocio y coordinan las operaciones del repositorio.
"""

from typing import TypeVar, Generic, Any
import logging

from sqlalchemy.exc import IntegrityError, NoResultFound

from core.exceptions import ResourceNotFoundException, DataBaseIntegrityException

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar('T')  # ORM Model
R = TypeVar('R')  # Repository

#errores del motor que el servicio sabe reclasificar
PERSISTENCE_ERRORS = (NoResultFound, IntegrityError)


def translate_persistence_error(
    error: Exception,
    id: Any,
    resource: str = "Recurso"
) -> Exception:
    """
    Mapea un error del motor de persistencia a la taxonomía de dominio.

    Args:
        error: Excepción lanzada por el repositorio
        id: ID del registro afectado
        resource: Nombre del recurso para el mensaje

    Returns:
        ResourceNotFoundException para ``NoResultFound``,
        DataBaseIntegrityException para ``IntegrityError``,
        o el mismo ``error`` si no es un error conocido
    """
    if isinstance(error, NoResultFound):
        return ResourceNotFoundException(id, resource=resource)
    if isinstance(error, IntegrityError):
        return DataBaseIntegrityException(id, resource=resource)
    return error


class BaseService(Generic[T, R]):
    """
    Servicio base que proporciona operaciones lógicas de negocio comunes.
    Esta clase debe ser heredada por servicios de entidades específicas.
    """

    resource_name = "Recurso"

    def __init__(self, repository: R):
        """
        Inicializa el servicio.

        Args:
            repository: The repository instance for data access
        """
        self.repository = repository

    def not_found(self, id: Any) -> ResourceNotFoundException:
        return ResourceNotFoundException(id, resource=self.resource_name)

    def translate_error(self, error: Exception, id: Any) -> Exception:
        """Traduce ``error`` y registra la reclasificación."""
        translated = translate_persistence_error(error, id, resource=self.resource_name)
        if translated is not error:
            logger.warning(
                f"{self.resource_name} {id}: {type(error).__name__} -> {type(translated).__name__}"
            )
        return translated
