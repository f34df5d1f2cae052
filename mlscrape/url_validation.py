"""URL sanitization for the caller-supplied page address."""

import re
from typing import Optional

__all__ = ["sanitize_url"]

CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def sanitize_url(url: Optional[str]) -> str:
    """Sanitize a URL by stripping whitespace and control characters.

    Args:
        url: Raw URL string

    Returns:
        Sanitized URL string ("" for None/empty input)
    """
    if not url:
        return ""

    url = url.strip()
    url = CONTROL_CHARS_RE.sub("", url)

    # Encoded null bytes
    url = url.replace("%00", "")

    return url
