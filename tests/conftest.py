"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from database.db import Base, enable_sqlite_foreign_keys
from database.models import TecnicoORM, ChamadoORM
from repositories.tecnico_repository import TecnicoRepository
from services.tecnico_service import TecnicoService


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign keys for SQLite
    enable_sqlite_foreign_keys(engine)

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def tecnico_repository(db_session: Session) -> TecnicoRepository:
    return TecnicoRepository(db_session)


@pytest.fixture
def tecnico_service(tecnico_repository: TecnicoRepository) -> TecnicoService:
    return TecnicoService(tecnico_repository)


# ==================== Tecnico Fixtures ====================

@pytest.fixture
def tecnico_instance(db_session: Session) -> TecnicoORM:
    """Create a tecnico without dependent records."""
    tecnico = TecnicoORM(
        nombre="Ana Souza",
        email="ana.souza@example.com",
        telefono="67999990001",
    )
    db_session.add(tecnico)
    db_session.commit()
    db_session.refresh(tecnico)
    return tecnico


@pytest.fixture
def tecnico_dependiente(db_session: Session) -> TecnicoORM:
    """Create a tecnico referenced by a chamado."""
    tecnico = TecnicoORM(
        nombre="Bruno Lima",
        email="bruno.lima@example.com",
        telefono="67999990002",
    )
    db_session.add(tecnico)
    db_session.flush()
    db_session.add(ChamadoORM(id_tecnico=tecnico.id, titulo="Impresora sin conexión"))
    db_session.commit()
    db_session.refresh(tecnico)
    return tecnico


@pytest.fixture
def tecnicos_varios(db_session: Session) -> list[TecnicoORM]:
    """Create several tecnicos for pagination tests."""
    nombres = ["Carla", "Diego", "Elena", "Fabio", "Gabriela"]
    tecnicos = [
        TecnicoORM(nombre=nombre, email=f"{nombre.lower()}@example.com")
        for nombre in nombres
    ]
    db_session.add_all(tecnicos)
    db_session.commit()
    return tecnicos
