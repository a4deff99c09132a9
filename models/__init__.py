from .tecnicos import TecnicoDTO

__all__ = [
    "TecnicoDTO",
]
