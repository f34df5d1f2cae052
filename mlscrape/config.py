"""Configuration and constants for the product page extractor."""

from typing import Dict, Mapping, Optional

__all__ = [
    "SELECTORS",
    "PRODUCT_ID_ATTR",
    "IMAGE_ZOOM_ATTR",
    "IMAGE_WIDTH_ATTR",
    "IMAGE_HEIGHT_ATTR",
    "IMAGE_ALT_ATTR",
    "OPTION_TITLE_ATTR",
    "DESCRIPTION_AS_HTML",
    "get_selector",
    "merge_selectors",
]

# =============================================================================
# Selector Table
# =============================================================================
# Logical field name -> CSS selector. These track the marketplace's current
# class names and need updating when the product page markup changes.

SELECTORS: Dict[str, str] = {
    # Scalar fields
    "product_id": 'input[name="item_id"]',
    "name": "h1.ui-pdp-title",
    "price_container": "span.andes-money-amount:not(.andes-money-amount--previous)",
    "price_integer": "span.andes-money-amount__fraction",
    "price_cents": "span.andes-money-amount__cents",
    "rating": "p.ui-review-capability__rating__average",
    "description": "p.ui-pdp-description__content",
    # Navigation
    "breadcrumb": "a.andes-breadcrumb__link",
    # Gallery
    "image": "img.ui-pdp-gallery__figure__image.ui-pdp-image",
    # Variation pickers (label/option are scoped to one picker)
    "variation_picker": "div.ui-pdp-variations__picker",
    "variation_label": "p.ui-pdp-variations__label",
    "variation_option": "a.ui-pdp-thumbnail",
    # Spec tables (value is scoped to one row)
    "spec_table_body": "table.andes-table > tbody",
    "spec_value": "span",
}

# Attribute names read from matched nodes
PRODUCT_ID_ATTR = "value"
IMAGE_ZOOM_ATTR = "data-zoom"  # high-res source, not the thumbnail src
IMAGE_WIDTH_ATTR = "width"
IMAGE_HEIGHT_ATTR = "height"
IMAGE_ALT_ATTR = "alt"
OPTION_TITLE_ATTR = "title"

# Description returns plain text unless the caller asks for markup
DESCRIPTION_AS_HTML = False


def get_selector(field_name: str, selectors: Optional[Mapping[str, str]] = None) -> str:
    """Get the selector for a logical field name.

    Entries in selectors take precedence; anything they do not name comes from
    the default table.

    Raises:
        KeyError: If the field name is in neither table
    """
    if selectors is not None and field_name in selectors:
        return selectors[field_name]
    return SELECTORS[field_name]


def merge_selectors(overrides: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Overlay caller-supplied selectors on the default table.

    Args:
        overrides: Logical field name -> selector entries to replace

    Returns:
        A new selector table; SELECTORS itself is never modified

    Raises:
        KeyError: If an override names an unknown field
    """
    merged = dict(SELECTORS)
    if not overrides:
        return merged

    unknown = sorted(set(overrides) - set(SELECTORS))
    if unknown:
        raise KeyError(f"Unknown selector field(s): {', '.join(unknown)}")

    merged.update(overrides)
    return merged
