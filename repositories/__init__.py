"""
Capa de repositorios para el acceso a datos.

Los repositorios encapsulan el acceso a la base de datos y exponen
operaciones CRUD sobre las entidades ORM.
"""

from .base_repository import BaseRepository
from .tecnico_repository import TecnicoRepository

__all__ = [
    "BaseRepository",
    "TecnicoRepository",
]
