from datetime import datetime

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


#ORM: Tecnicos
class TecnicoORM(Base):
    __tablename__ = "tecnicos"
    #columna en DB: id_tecnico, atributo python: id
    id = Column("id_tecnico", Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(120), nullable=False)
    email = Column(String(120), nullable=False)
    telefono = Column(String(20), nullable=True)

    chamados = relationship("ChamadoORM", back_populates="tecnico", passive_deletes="all")

    def __repr__(self) -> str:
        return f"<TecnicoORM id={self.id} nombre={self.nombre!r}>"


#ORM: Chamados (registros dependientes de un técnico)
class ChamadoORM(Base):
    __tablename__ = "chamados"
    id = Column("id_chamado", Integer, primary_key=True, autoincrement=True)
    id_tecnico = Column(Integer, ForeignKey("tecnicos.id_tecnico"), nullable=False)
    titulo = Column(String(200), nullable=False)
    fecha_apertura = Column(DateTime, default=datetime.utcnow)

    tecnico = relationship("TecnicoORM", back_populates="chamados")
