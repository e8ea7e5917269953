"""URL handling utilities."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

SECURE_SCHEMES = frozenset({"https", "data"})


def secure_https(url: str) -> str:
    """Upgrade an ``http://`` URL to ``https://``; other URLs are returned as-is."""
    if url.startswith("http://"):
        return "https://" + url[len("http://") :]
    return url


def is_secure_url(url: str) -> bool:
    """Whether the URL uses a scheme that is safe to load (https or data)."""
    scheme = urlparse(url).scheme.lower()
    return scheme in SECURE_SCHEMES


def validate_image_url(url: str | None) -> str | None:
    """Validate an article image URL and upgrade it to https.

    Args:
        url: Raw image URL from the API, possibly empty or None.

    Returns:
        The secure URL, or None if the URL is empty, malformed or uses an
        insecure scheme.
    """
    if url is None or not url.strip():
        logger.debug("Empty image URL")
        return None

    secure = secure_https(url.strip())
    try:
        parsed = urlparse(secure)
    except ValueError:
        logger.warning(f"Malformed image URL: {url}")
        return None

    if parsed.scheme.lower() not in SECURE_SCHEMES:
        logger.warning(f"Insecure image URL: {url}")
        return None
    if parsed.scheme.lower() == "https" and not parsed.netloc:
        logger.warning(f"Image URL has no host: {url}")
        return None
    return secure


def extract_domain(url: str) -> str:
    """Extract domain name from URL.

    Args:
        url: The URL to extract the domain from.

    Returns:
        The domain name (without 'www.' prefix), or "Unknown" if extraction fails.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return "Unknown"
    domain = parsed.netloc
    if not domain:
        logger.warning(f"Could not get domain from url {url}")
        return "Unknown"
    if domain.startswith("www."):
        domain = domain[4:]
    return domain
