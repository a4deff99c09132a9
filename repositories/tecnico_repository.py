"""
Repositorio para la entidad Tecnico.
Gestiona todas las operaciones de base de datos relacionadas con técnicos.
"""
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import TecnicoORM


class TecnicoRepository(BaseRepository[TecnicoORM]):
    """Repositorio para la gestión de entidades de técnico."""

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de técnicos.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, TecnicoORM)
