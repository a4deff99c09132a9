""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Excepciones personalizadas
- Funciones auxiliares de paginación
"""

from .exceptions import (
    AppException,
    ResourceNotFoundException,
    DatabaseException,
    DataBaseIntegrityException,
)
from .pagination import (
    PageRequest,
    Page,
    PaginationMeta,
    calculate_pagination_meta,
    create_page,
    calculate_skip,
)

__all__ = [
    # Excepciones
    "AppException",
    "ResourceNotFoundException",
    "DatabaseException",
    "DataBaseIntegrityException",
    # paginacion
    "PageRequest",
    "Page",
    "PaginationMeta",
    "calculate_pagination_meta",
    "create_page",
    "calculate_skip",
]
