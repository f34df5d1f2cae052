"""Shared test fixtures for the extractor test suite."""

from pathlib import Path

import pytest

from mlscrape.document import Document

PRODUCT_URL = "https://articulo.mercadolibre.com.ar/MLA-1116312585-apple-iphone-13-128-gb-medianoche"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def product_html(fixtures_dir):
    """Raw markup of a complete product page."""
    return (fixtures_dir / "product_page.html").read_text(encoding="utf-8")


@pytest.fixture
def product_doc(product_html):
    """The complete product page, parsed."""
    return Document.from_html(product_html)


@pytest.fixture
def empty_doc():
    """A page with none of the product markup."""
    return Document.from_html("<html><body><p>Publicación finalizada</p></body></html>")


@pytest.fixture
def product_url():
    return PRODUCT_URL
