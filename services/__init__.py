from .base_service import BaseService, translate_persistence_error
from .tecnico_service import TecnicoService

__all__ = [
    "BaseService",
    "translate_persistence_error",
    "TecnicoService",
]
