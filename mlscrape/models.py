"""Data models for extracted products."""

import json
from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

__all__ = ["ProductRecord", "VariationRecord", "ImageRecord", "SpecRow"]


@dataclass(frozen=True)
class VariationRecord:
    """One variation picker, e.g. name="Color", options=["Red", "Blue"]."""

    name: Optional[str]
    options: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ImageRecord:
    """One gallery image. src is the high-resolution (zoom) URL.

    width/height are ints for whole-number attributes and the raw attribute
    string otherwise ("auto"); None only when the attribute is missing.
    """

    src: Optional[str] = None
    alt_text: Optional[str] = None
    width: Optional[Union[int, str]] = None
    height: Optional[Union[int, str]] = None


@dataclass(frozen=True)
class SpecRow:
    """One row of a specification table."""

    name: Optional[str]
    value: Optional[str]


@dataclass(frozen=True)
class ProductRecord:
    """Represents a single product extracted from a product detail page.

    Optional scalars are None when their fragment is missing from the page.
    Collections are always lists (empty when nothing matched), in document order.

    Fields cannot be reassigned, but the lists themselves are ordinary lists:
    callers that need to modify them should copy first.
    """

    # Required fields
    url: str

    # Optional scalar fields
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    rating: Optional[Decimal] = None

    # Ordered collections
    breadcrumbs: List[str] = field(default_factory=list)
    variations: List[VariationRecord] = field(default_factory=list)
    images: List[ImageRecord] = field(default_factory=list)
    specs: List[SpecRow] = field(default_factory=list)

    # Reserved: no page fragment feeds this yet
    sizes: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-compatible dict (decimals become floats)."""
        data = asdict(self)
        for key in ("price", "rating"):
            if data[key] is not None:
                data[key] = float(data[key])
        return data

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    def specs_dict(self) -> Dict[str, Optional[str]]:
        """Spec rows keyed by name. Later rows win on duplicate names."""
        return {row.name: row.value for row in self.specs if row.name}
