"""Host canonicalization for rule matching.

A canonical host is the lowercased, DNS-safe (IDNA/punycode) host split
into labels and reversed, so index 0 is the rightmost label:

    "http://www.Example.co.uk" -> ["uk", "co", "example", "www"]
"""

from __future__ import annotations

import ipaddress
import logging
import re
from urllib.parse import urlsplit

import idna

from .constants import LABEL_SEPARATOR

logger = logging.getLogger(__name__)

# Valid ASCII host label (underscores allowed, as in real-world DNS names)
_HOST_LABEL_PATTERN = re.compile(r"^[a-z0-9_-]{1,63}$")


class InvalidUrlError(ValueError):
    """Raised when a URL or host cannot be canonicalized."""
    pass


def normalize_name(name: str) -> str:
    """Lowercase a rule or host name."""
    return name.lower()


def _validate_ascii_host(host: str) -> str:
    """Check every label of a lowercased ASCII host; IPv6 literals pass as-is."""
    if ":" in host:
        try:
            ipaddress.IPv6Address(host)
        except ValueError as e:
            raise InvalidUrlError(f"Invalid IPv6 host '{host}': {e}") from e
        return host

    for label in host.split(LABEL_SEPARATOR):
        if not label:
            raise InvalidUrlError(f"Invalid host: empty label in '{host}'")
        if not _HOST_LABEL_PATTERN.match(label):
            raise InvalidUrlError(f"Invalid host label '{label}' in '{host}'")
    return host


def _dns_safe(host: str) -> str:
    """Return the validated ASCII form of a host, encoding Unicode labels with IDNA."""
    if host.isascii():
        return _validate_ascii_host(normalize_name(host))
    try:
        encoded = idna.encode(host, uts46=True).decode("ascii")
    except idna.IDNAError as e:
        raise InvalidUrlError(f"Invalid internationalized host '{host}': {e}") from e
    return _validate_ascii_host(encoded)


def split_reversed(host: str) -> list[str]:
    """Split a host on dots and reverse the labels."""
    labels = host.split(LABEL_SEPARATOR)
    labels.reverse()
    return labels


def canonicalize_host(hostname: str) -> list[str]:
    """
    Canonicalize a bare hostname.

    Args:
        hostname: Host such as "www.Example.com" or "www.example.com."

    Returns:
        Reversed label list, e.g. ["com", "example", "www"]

    Raises:
        InvalidUrlError: If the hostname is empty, has an invalid label or is not IDNA-encodable
    """
    host = hostname.strip()
    if host.endswith(LABEL_SEPARATOR):
        host = host[:-1]
    if not host:
        raise InvalidUrlError(f"Empty hostname: '{hostname}'")
    return split_reversed(_dns_safe(host))


def canonicalize(url: str) -> list[str]:
    """
    Canonicalize an absolute URL into a reversed label list.

    Args:
        url: A valid url, example: http://www.google.com

    Returns:
        Reversed label list, example: ["com", "google", "www"]

    Raises:
        InvalidUrlError: If the string is not an absolute URL with a host
    """
    if not isinstance(url, str):
        raise InvalidUrlError(f"URL must be a string, got {type(url).__name__}")

    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL '{url}': {e}") from e

    if not parts.scheme or not host:
        raise InvalidUrlError(f"Invalid URL '{url}': expected scheme and host")

    logger.debug("Canonicalizing host %s from %s", host, url)
    return canonicalize_host(host)
