"""
Utilidades de paginación para una paginación consistente en toda la aplicación.

``PageRequest`` describe la página solicitada (índice, tamaño y orden) y
``Page`` es la porción ordenada de resultados junto con su metadata.
"""

from typing import TypeVar, Generic, List, Callable, Optional
from pydantic import BaseModel, Field

from config import settings

T = TypeVar('T')
U = TypeVar('U')


class PageRequest(BaseModel):
    """Parametros para la paginacion."""
    page: int = Field(0, ge=0, description="Page number (0-indexed)")
    page_size: int = Field(
        settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Items per page"
    )
    order_by: Optional[str] = Field(None, description="Field name to order by")
    order_desc: bool = Field(False, description="Order descending")

    @classmethod
    def of_size(cls, page_size: int) -> "PageRequest":
        """Primera página con el tamaño indicado."""
        return cls(page=0, page_size=page_size)


class PaginationMeta(BaseModel):
    """Metadata para la paginacion."""
    page: int = Field(..., ge=0, description="Current page number (0-indexed)")
    page_size: int = Field(..., ge=1, description="Page size")
    total_items: int = Field(..., ge=0, description="Total items available")
    total_pages: int = Field(..., ge=0, description="Total pages")
    has_next: bool = Field(..., description="Has next page")
    has_previous: bool = Field(..., description="Has previous page")


class Page(BaseModel, Generic[T]):
    """Página de resultados con su metadata."""
    content: List[T] = Field(default_factory=list, description="Items of the current page")
    pagination: PaginationMeta = Field(..., description="Pagination metadata")

    class Config:
        arbitrary_types_allowed = True

    def map(self, converter: Callable[[T], U]) -> "Page[U]":
        """
        Aplica ``converter`` a cada elemento conservando orden y metadata.

        Args:
            converter: Función de conversión por elemento

        Returns:
            Nueva página con los elementos convertidos
        """
        return Page(
            content=[converter(item) for item in self.content],
            pagination=self.pagination,
        )

    def __len__(self) -> int:
        return len(self.content)


def calculate_pagination_meta(
    page: int,
    page_size: int,
    total_items: int
) -> PaginationMeta:
    """
    Calcula la metadata de la paginación.

    Args:
        page: Número de página actual (0-indexed)
        page_size: Items por página
        total_items: Total number of items

    Returns:
        paginationmeta objeto con valores calculados
    """
    total_pages = (total_items + page_size - 1) // page_size if page_size > 0 else 0

    return PaginationMeta(
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
        has_next=page < total_pages - 1,
        has_previous=page > 0
    )


def create_page(items: List[T], page_request: PageRequest, total_items: int) -> Page[T]:
    """Construye una ``Page`` a partir de los items y la solicitud."""
    return Page(
        content=list(items),
        pagination=calculate_pagination_meta(
            page_request.page, page_request.page_size, total_items
        ),
    )


def calculate_skip(page: int, page_size: int) -> int:
    """
    Calcula el valor de skip/offset para las consultas de la base de datos.

    Args:
        page: Número de página actual (indexado desde 0)
        page_size: Número de elementos por página

    Returns:
        Número de elementos a saltar
    """
    return page * page_size
