"""Tests for API key generation and domain matching."""

import pytest

from portfolio_api.core.security import domain_matches, extract_hostname, generate_api_key


@pytest.mark.unit
class TestGenerateApiKey:
    """Test cases for generate_api_key."""

    def test_default_prefix(self):
        """Test that generated keys carry the configured prefix."""
        key = generate_api_key()
        assert key.startswith("pk_")
        assert len(key) > 40

    def test_custom_prefix(self):
        """Test generating a key with an explicit prefix."""
        assert generate_api_key(prefix="test_").startswith("test_")

    def test_keys_are_unique(self):
        """Test that repeated calls produce different keys."""
        keys = {generate_api_key() for _ in range(20)}
        assert len(keys) == 20


@pytest.mark.unit
class TestExtractHostname:
    """Test cases for extract_hostname."""

    def test_origin(self):
        assert extract_hostname("https://example.com") == "example.com"

    def test_referer_with_path_and_port(self):
        assert extract_hostname("https://app.example.com:8443/page?x=1") == "app.example.com"

    def test_hostname_is_lowercased(self):
        assert extract_hostname("https://Sub.Example.COM") == "sub.example.com"

    def test_missing_source(self):
        assert extract_hostname(None) is None
        assert extract_hostname("") is None

    def test_opaque_origin(self):
        """Test the literal 'null' origin sent by sandboxed pages."""
        assert extract_hostname("null") is None


@pytest.mark.unit
class TestDomainMatches:
    """Test cases for domain_matches."""

    def test_exact_match(self):
        assert domain_matches("example.com", "example.com")

    def test_exact_does_not_match_subdomain(self):
        assert not domain_matches("example.com", "sub.example.com")

    def test_wildcard_matches_subdomain(self):
        assert domain_matches("*.example.com", "sub.example.com")
        assert domain_matches("*.example.com", "a.b.example.com")

    def test_wildcard_does_not_match_apex(self):
        assert not domain_matches("*.example.com", "example.com")

    def test_wildcard_does_not_match_suffix_lookalike(self):
        assert not domain_matches("*.example.com", "evilexample.com")

    def test_case_insensitive(self):
        assert domain_matches("Example.com", "example.com")
        assert domain_matches("*.EXAMPLE.com", "sub.example.com")
