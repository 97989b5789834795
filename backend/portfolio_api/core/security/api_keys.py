"""API key generation and domain allow-list matching."""

import secrets
from urllib.parse import urlparse

from portfolio_api.core.config import settings


def generate_api_key(prefix: str | None = None) -> str:
    """
    Generate a new random API key.

    Args:
        prefix: Key prefix for easy identification. Defaults to ``settings.api_key_prefix``.

    Returns:
        The raw key string
    """
    if prefix is None:
        prefix = settings.api_key_prefix
    return prefix + secrets.token_urlsafe(32)


def extract_hostname(source: str | None) -> str | None:
    """Return the lowercase hostname of an Origin/Referer value, or None."""
    if not source:
        return None
    try:
        return urlparse(source).hostname
    except ValueError:
        return None


def domain_matches(domain: str, hostname: str) -> bool:
    """
    Check a hostname against one allowed domain.

    ``example.com`` matches only itself. ``*.example.com`` matches any strict
    subdomain such as ``api.example.com``, but not ``example.com`` or
    ``evilexample.com``.
    """
    domain = domain.strip().lower()
    hostname = hostname.lower()

    if domain.startswith("*."):
        return hostname.endswith(domain[1:])
    return domain == hostname
