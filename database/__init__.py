from .db import (
    Base,
    SessionLocal,
    create_tables,
    enable_sqlite_foreign_keys,
    engine,
    get_db,
    get_database_url,
    TecnicoORM,
    ChamadoORM,
)

__all__ = [
    "Base",
    "SessionLocal",
    "create_tables",
    "enable_sqlite_foreign_keys",
    "engine",
    "get_db",
    "get_database_url",
    "TecnicoORM",
    "ChamadoORM",
]
