"""Security module."""

from portfolio_api.core.security.api_keys import domain_matches, extract_hostname, generate_api_key

__all__ = ["domain_matches", "extract_hostname", "generate_api_key"]
