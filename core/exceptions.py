"""
Excepciones personalizadas para la aplicación.

Estas excepciones forman la taxonomía de errores de dominio del servicio:
la capa de API (externa) las mapea a códigos de estado HTTP a partir de
``status_code``, sin depender del motor de base de datos subyacente.
"""

from typing import Optional, Any


class AppException(Exception):
    """Excepción base para todos los errores de la aplicación."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = dict(details or {})
        super().__init__(self.message)


class ResourceNotFoundException(AppException):
    """Excepción cuando el registro identificado por ``id`` no existe."""

    def __init__(
        self,
        id: Any,
        resource: str = "Recurso",
        details: Optional[dict[str, Any]] = None,
    ):
        self.id = id
        details = dict(details or {})
        details.setdefault("id", id)
        super().__init__(
            message=f"{resource} no encontrado: {id}",
            status_code=404,
            details=details,
        )


class DatabaseException(AppException):
    """Excepción para errores de base de datos."""

    def __init__(
        self,
        message: str = "Error de base de datos",
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=status_code, details=details)


class DataBaseIntegrityException(DatabaseException):
    """El registro existe pero una restricción de integridad impide eliminarlo."""

    def __init__(
        self,
        id: Any,
        resource: str = "Recurso",
        details: Optional[dict[str, Any]] = None,
    ):
        self.id = id
        details = dict(details or {})
        details.setdefault("id", id)
        super().__init__(
            message=f"Violación de integridad: {resource} {id} está referenciado por otros registros",
            status_code=409,
            details=details,
        )
