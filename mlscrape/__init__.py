"""Product detail page extractor for Mercado Libre listings."""

__version__ = "0.1.0"

# Re-export main components for convenient imports
from mlscrape.config import SELECTORS, get_selector, merge_selectors
from mlscrape.document import Document
from mlscrape.logging_config import setup_logging
from mlscrape.models import ImageRecord, ProductRecord, SpecRow, VariationRecord
from mlscrape.scraper import extract_product, parse_product_page

__all__ = [
    # Version
    "__version__",
    # Config
    "SELECTORS",
    "get_selector",
    "merge_selectors",
    # Models
    "ProductRecord",
    "VariationRecord",
    "ImageRecord",
    "SpecRow",
    # Core functions
    "Document",
    "extract_product",
    "parse_product_page",
    "setup_logging",
]
