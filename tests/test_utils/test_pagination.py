"""
Tests for pagination utilities.

Tests cover:
- Pagination metadata calculation
- Page construction and mapping
- Skip/offset calculation
- PageRequest validation
"""

import pytest

from core.pagination import (
    calculate_pagination_meta,
    create_page,
    calculate_skip,
    Page,
    PageRequest,
)
from config import settings


class TestPaginationMetaCalculation:
    """Tests for pagination metadata calculation."""

    def test_calculate_pagination_meta_primera_pagina(self):
        """Test pagination metadata for first page."""
        meta = calculate_pagination_meta(page=0, page_size=10, total_items=50)

        assert meta.total_pages == 5
        assert meta.has_next is True
        assert meta.has_previous is False

    def test_calculate_pagination_meta_ultima_pagina(self):
        """Test pagination metadata for last page."""
        meta = calculate_pagination_meta(page=4, page_size=10, total_items=50)

        assert meta.has_next is False
        assert meta.has_previous is True

    def test_calculate_pagination_meta_items_parciales(self):
        """Test pagination with partial last page."""
        meta = calculate_pagination_meta(page=0, page_size=10, total_items=25)

        # 25 items with page_size 10 = 3 pages (10, 10, 5)
        assert meta.total_pages == 3

    def test_calculate_pagination_meta_sin_items(self):
        """Test pagination with no items."""
        meta = calculate_pagination_meta(page=0, page_size=10, total_items=0)

        assert meta.total_pages == 0
        assert meta.has_next is False
        assert meta.has_previous is False

    def test_pagination_pagina_fuera_de_rango(self):
        """Test pagination with page number beyond available pages."""
        meta = calculate_pagination_meta(page=10, page_size=10, total_items=50)

        assert meta.total_pages == 5
        assert meta.has_next is False
        assert meta.has_previous is True


class TestPageCreation:
    """Tests for building and mapping pages."""

    def test_create_page_estructura(self):
        """Test page keeps items and computes metadata from the request."""
        page = create_page(["a", "b"], PageRequest(page=1, page_size=2), 5)

        assert page.content == ["a", "b"]
        assert len(page) == 2
        assert page.pagination.page == 1
        assert page.pagination.page_size == 2
        assert page.pagination.total_items == 5
        assert page.pagination.total_pages == 3

    def test_create_page_acepta_iterables(self):
        """Test any iterable becomes the page content list."""
        page = create_page((i for i in range(3)), PageRequest(), 3)

        assert page.content == [0, 1, 2]

    def test_map_conserva_orden_y_metadata(self):
        """Test map applies the converter in order and keeps metadata."""
        page = create_page([3, 1, 2], PageRequest(page=0, page_size=3), 7)

        mapped = page.map(lambda n: n * 10)

        assert mapped.content == [30, 10, 20]
        assert mapped.pagination == page.pagination
        assert page.content == [3, 1, 2]

    def test_map_pagina_vacia(self):
        """Test mapping an empty page."""
        page = create_page([], PageRequest(), 0)

        mapped = page.map(str)

        assert isinstance(mapped, Page)
        assert mapped.content == []
        assert mapped.pagination.total_items == 0


class TestSkipCalculation:
    """Tests for skip/offset calculation."""

    def test_calculate_skip_primera_pagina(self):
        """Test skip for first page is 0."""
        assert calculate_skip(page=0, page_size=10) == 0

    def test_calculate_skip_diferentes_page_sizes(self):
        """Test skip calculation with different page sizes."""
        assert calculate_skip(page=2, page_size=25) == 50
        assert calculate_skip(page=5, page_size=100) == 500


class TestPageRequest:
    """Tests for PageRequest model."""

    def test_page_request_valores_default(self):
        """Test PageRequest has correct default values."""
        params = PageRequest()

        assert params.page == 0
        assert params.page_size == settings.default_page_size
        assert params.order_by is None
        assert params.order_desc is False

    def test_page_request_of_size(self):
        """Test of_size builds the first page."""
        params = PageRequest.of_size(10)

        assert params.page == 0
        assert params.page_size == 10

    def test_page_request_validacion_page_negativo(self):
        """Test PageRequest rejects negative page."""
        with pytest.raises(ValueError):
            PageRequest(page=-1, page_size=10)

    def test_page_request_validacion_page_size_cero(self):
        """Test PageRequest rejects zero page size."""
        with pytest.raises(ValueError):
            PageRequest(page=0, page_size=0)

    def test_page_request_validacion_page_size_muy_grande(self):
        """Test PageRequest rejects page size above the configured maximum."""
        with pytest.raises(ValueError):
            PageRequest(page=0, page_size=settings.max_page_size + 1)

    def test_page_request_acepta_page_size_maximo(self):
        """Test the configured maximum page size is accepted."""
        params = PageRequest(page=0, page_size=settings.max_page_size)

        assert params.page_size == settings.max_page_size
