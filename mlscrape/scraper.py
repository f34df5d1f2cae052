"""Product record assembly."""

from typing import List, Mapping, Optional, Union

from mlscrape.config import DESCRIPTION_AS_HTML, merge_selectors
from mlscrape.document import Document
from mlscrape.html_utils import (
    extract_breadcrumbs,
    extract_description,
    extract_images,
    extract_name,
    extract_price,
    extract_product_id,
    extract_rating,
    extract_specs,
    extract_variations,
)
from mlscrape.logging_config import get_logger, log_scrape_event
from mlscrape.models import ProductRecord
from mlscrape.url_validation import sanitize_url

__all__ = [
    "extract_product",
    "parse_product_page",
]

logger = get_logger("scraper")


def extract_product(
    doc: Document,
    url: str,
    as_html: bool = DESCRIPTION_AS_HTML,
    selectors: Optional[Mapping[str, str]] = None,
) -> ProductRecord:
    """Run every field extractor against one parsed page and assemble the record.

    Args:
        doc: The parsed product page
        url: The page address, as resolved by whatever fetched it
        as_html: Return the description as inner markup instead of plain text
        selectors: Selector overrides, merged over the defaults

    Returns:
        A ProductRecord. Fields whose fragment is missing are None or empty;
        missing markup never raises.
    """
    table = merge_selectors(selectors)

    product = ProductRecord(
        url=sanitize_url(url),
        id=extract_product_id(doc, table),
        name=extract_name(doc, table),
        description=extract_description(doc, as_html=as_html, selectors=table),
        price=extract_price(doc, table),
        rating=extract_rating(doc, table),
        breadcrumbs=extract_breadcrumbs(doc, table),
        variations=extract_variations(doc, table),
        images=extract_images(doc, table),
        specs=extract_specs(doc, table),
    )

    missing = _missing_fields(product)
    if missing:
        logger.debug(f"{product.url}: no data for {', '.join(missing)}")

    log_scrape_event("product_parse", {
        "message": f"Parsed product {product.id or '?'}",
        "url": product.url,
        "product_id": product.id,
        "images": len(product.images),
        "variations": len(product.variations),
        "specs": len(product.specs),
        "missing_fields": missing,
    })

    return product


def parse_product_page(
    html: Union[str, bytes],
    url: str,
    as_html: bool = DESCRIPTION_AS_HTML,
    selectors: Optional[Mapping[str, str]] = None,
) -> ProductRecord:
    """Parse a single product page's markup into a ProductRecord."""
    return extract_product(Document.from_html(html), url, as_html=as_html, selectors=selectors)


def _missing_fields(product: ProductRecord) -> List[str]:
    """Names of scalar fields that are None and collections that are empty."""
    missing = [
        name
        for name in ("id", "name", "description", "price", "rating")
        if getattr(product, name) is None
    ]
    missing.extend(
        name
        for name in ("breadcrumbs", "variations", "images", "specs")
        if not getattr(product, name)
    )
    return missing
