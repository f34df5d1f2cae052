"""HTML extraction utilities for product detail pages.

Each extractor reads one product attribute from a Document and returns
None (scalars) or an empty list (collections) when its fragment is missing.
None of them raise for missing markup.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import List, Mapping, Optional, Union

from mlscrape.config import (
    DESCRIPTION_AS_HTML,
    IMAGE_ALT_ATTR,
    IMAGE_HEIGHT_ATTR,
    IMAGE_WIDTH_ATTR,
    IMAGE_ZOOM_ATTR,
    OPTION_TITLE_ATTR,
    PRODUCT_ID_ATTR,
    get_selector,
)
from mlscrape.document import Document
from mlscrape.logging_config import get_logger
from mlscrape.models import ImageRecord, SpecRow, VariationRecord

__all__ = [
    "extract_product_id",
    "extract_name",
    "extract_price",
    "extract_rating",
    "extract_description",
    "extract_breadcrumbs",
    "extract_images",
    "extract_variations",
    "extract_specs",
    "parse_decimal",
    "parse_dimension",
    "strip_label_colon",
]

logger = get_logger("html_utils")

Selectors = Optional[Mapping[str, str]]

NON_DIGIT_RE = re.compile(r"\D")


# =============================================================================
# Value Helpers
# =============================================================================

def parse_decimal(text: Optional[str]) -> Optional[Decimal]:
    """Parse text like "4.8" or "4,8" into a Decimal. Returns None if not numeric."""
    if text is None:
        return None
    cleaned = text.strip().replace(",", ".")
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        logger.debug(f"Not a decimal: {text!r}")
        return None
    if not value.is_finite():
        return None
    return value


def parse_dimension(text: Optional[str]) -> Optional[Union[int, str]]:
    """Parse a width/height attribute into an int ("500" or "500.0" -> 500).

    Values that are not a whole number ("auto", "50%") are returned unchanged,
    so only a missing attribute gives None.
    """
    if text is None:
        return None
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return text
    if not value.is_finite() or value != value.to_integral_value():
        return text
    return int(value)


def strip_label_colon(label: Optional[str]) -> Optional[str]:
    """Remove trailing colons from a picker label: "Color:" -> "Color"."""
    if label is None:
        return None
    return label.rstrip(":").rstrip()


def _digits_only(text: Optional[str]) -> Optional[str]:
    # "1.299" -> "1299"; empty after cleanup counts as missing
    if text is None:
        return None
    digits = NON_DIGIT_RE.sub("", text)
    return digits or None


# =============================================================================
# Scalar Fields
# =============================================================================

def extract_product_id(doc: Document, selectors: Selectors = None) -> Optional[str]:
    """Extract the marketplace item id from the hidden item_id input."""
    return doc.attribute_of_first(get_selector("product_id", selectors), PRODUCT_ID_ATTR)


def extract_name(doc: Document, selectors: Selectors = None) -> Optional[str]:
    return doc.text_of_first(get_selector("name", selectors))


def extract_price(doc: Document, selectors: Selectors = None) -> Optional[Decimal]:
    """Rebuild the price from its integer and cents fragments.

    The page renders "49" and "90" in separate elements inside one money
    amount block. Both parts are read from the first current-price block, so a
    crossed-out previous price never contributes. If either part is missing the
    price is None rather than a partial number.
    """
    blocks = doc.all_matching(get_selector("price_container", selectors))
    if not blocks:
        logger.debug("No price block")
        return None
    block = blocks[0]

    integer_part = _digits_only(block.text_of_first(get_selector("price_integer", selectors)))
    cents_part = _digits_only(block.text_of_first(get_selector("price_cents", selectors)))

    if integer_part is None or cents_part is None:
        logger.debug(f"Incomplete price (integer={integer_part!r}, cents={cents_part!r})")
        return None

    return Decimal(f"{integer_part}.{cents_part}")


def extract_rating(doc: Document, selectors: Selectors = None) -> Optional[Decimal]:
    return parse_decimal(doc.text_of_first(get_selector("rating", selectors)))


def extract_description(
    doc: Document,
    as_html: bool = DESCRIPTION_AS_HTML,
    selectors: Selectors = None,
) -> Optional[str]:
    """Extract the product description as plain text, or as inner markup if as_html."""
    selector = get_selector("description", selectors)
    if as_html:
        return doc.html_of_first(selector)
    return doc.text_of_first(selector)


# =============================================================================
# Collections
# =============================================================================

def extract_breadcrumbs(doc: Document, selectors: Selectors = None) -> List[str]:
    """Category path labels, first to last."""
    return [link.text() for link in doc.all_matching(get_selector("breadcrumb", selectors))]


def extract_images(doc: Document, selectors: Selectors = None) -> List[ImageRecord]:
    """One ImageRecord per gallery image, in gallery order.

    A missing attribute only blanks that field; the image is still returned.
    """
    images: List[ImageRecord] = []
    for img in doc.all_matching(get_selector("image", selectors)):
        images.append(
            ImageRecord(
                src=img.attribute(IMAGE_ZOOM_ATTR),
                alt_text=img.attribute(IMAGE_ALT_ATTR),
                width=parse_dimension(img.attribute(IMAGE_WIDTH_ATTR)),
                height=parse_dimension(img.attribute(IMAGE_HEIGHT_ATTR)),
            )
        )
    return images


def extract_variations(doc: Document, selectors: Selectors = None) -> List[VariationRecord]:
    """One VariationRecord per picker (e.g. Color, Storage) with its option titles.

    A picker without options still yields a record with an empty options list.
    Option nodes without a title attribute are skipped, so the options list can
    be shorter than the number of option nodes in the picker.
    """
    label_selector = get_selector("variation_label", selectors)
    option_selector = get_selector("variation_option", selectors)

    variations: List[VariationRecord] = []
    for picker in doc.all_matching(get_selector("variation_picker", selectors)):
        name = strip_label_colon(picker.first_string(label_selector))

        options: List[str] = []
        for option in picker.all_matching(option_selector):
            title = option.attribute(OPTION_TITLE_ATTR)
            if title is None:
                logger.debug(f"Skipping option without title in picker {name!r}")
                continue
            options.append(title)

        variations.append(VariationRecord(name=name, options=options))
    return variations


def extract_specs(doc: Document, selectors: Selectors = None) -> List[SpecRow]:
    """
    Extract every row of every spec table body, tables and rows in page order.
    The row's first text node is the spec name; the inner value element is the value.
    """
    value_selector = get_selector("spec_value", selectors)

    specs: List[SpecRow] = []
    for body in doc.all_matching(get_selector("spec_table_body", selectors)):
        for row in body.children():
            specs.append(
                SpecRow(
                    name=row.first_string(),
                    value=row.text_of_first(value_selector),
                )
            )
    return specs
