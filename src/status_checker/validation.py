"""
URL validation and extension-based pre-filtering.

Both functions are total: they never raise, whatever string they receive.
A URL that fails validation is always skipped by the filter, so it never
reaches the prober.
"""

import logging
from typing import FrozenSet, Optional, Tuple
from urllib.parse import urlsplit

# Module logger
logger = logging.getLogger(__name__)

HTTP_URL_SCHEMES: FrozenSet[str] = frozenset({"http", "https"})

SKIP_EXTENSIONS: Tuple[str, ...] = (
    # Images
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tiff", ".webp", ".svg", ".ico",
    # Documents
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".odt",
    # Media
    ".mp3", ".mp4", ".avi", ".mov", ".wmv", ".flv", ".webm",
    # Fonts
    ".ttf", ".otf", ".woff", ".woff2", ".eot",
)


def is_valid_url(url: str) -> bool:
    """
    Checks whether a string is an absolute http or https URL with a host.

    The scheme is case-sensitive: "HTTP://example.com" is rejected.

    Args:
        url: The candidate string.

    Returns:
        bool: True if the string is a valid http(s) URL, False otherwise.
    """
    if not isinstance(url, str) or not url:
        return False
    if any(char.isspace() for char in url):
        return False

    try:
        parsed = urlsplit(url)
        # Accessing the port validates it; urlsplit alone does not.
        parsed.port
    except ValueError:
        return False

    # urlsplit lowercases the scheme, so compare the text as written.
    raw_scheme = url.partition(":")[0]
    return raw_scheme in HTTP_URL_SCHEMES and bool(parsed.hostname)


def _lowercase_path(url: str) -> Optional[str]:
    try:
        return urlsplit(url).path.lower()
    except ValueError:
        return None


def should_skip(url: str) -> bool:
    """
    Decides whether a URL must be excluded from probing.

    A URL is skipped when it is invalid, or when any skip-list extension is
    contained in the lowercased URL, ends the lowercased URL, or ends the
    lowercased path component. The substring check means that a query such
    as '?file=image.png' also causes the URL to be skipped.

    Args:
        url: The trimmed input line.

    Returns:
        bool: True if the URL should not be probed.
    """
    if not is_valid_url(url):
        return True

    lowered = url.lower()
    path = _lowercase_path(url)

    for extension in SKIP_EXTENSIONS:
        if extension in lowered or lowered.endswith(extension):
            return True
        # A path that cannot be extracted counts as no match for this check only.
        if path is not None and path.endswith(extension):
            return True

    return False
