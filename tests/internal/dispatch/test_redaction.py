"""Tests for redaction logic."""

from shodan_sdk._internal.dispatch.redaction import (
    REDACTED_VALUE,
    redact_text,
    redact_url,
)


class TestRedactUrl:
    """Tests for redact_url function."""

    def test_redacts_key_in_query(self):
        """Should hide the key value but keep other parameters."""
        result = redact_url("https://api.shodan.io/shodan/host/search?query=nginx&key=secret123")
        assert "secret123" not in result
        assert f"key={REDACTED_VALUE}" in result
        assert "query=nginx" in result
        assert result.startswith("https://api.shodan.io/shodan/host/search?")

    def test_url_without_query(self):
        """Should return URLs without query unchanged."""
        assert redact_url("https://api.shodan.io/org") == "https://api.shodan.io/org"


class TestRedactText:
    """Tests for redact_text function."""

    def test_replaces_every_occurrence(self):
        """Should replace all occurrences of the secret."""
        result = redact_text("abc secret123 def secret123", "secret123")
        assert result == f"abc {REDACTED_VALUE} def {REDACTED_VALUE}"

    def test_empty_secret(self):
        """Should leave text untouched without a secret."""
        assert redact_text("hello", "") == "hello"
        assert redact_text("hello", None) == "hello"

    def test_short_secret_inside_word_is_kept(self):
        """Should not rewrite ordinary words that contain a short secret."""
        assert redact_text("Invalid API key", "a") == "Invalid API key"

    def test_short_secret_as_token(self):
        """Should still hide a short secret standing on its own."""
        assert redact_text("GET /org?key=a&x=1", "a") == f"GET /org?key={REDACTED_VALUE}&x=1"

    def test_secret_glued_to_word_is_kept(self):
        """Should only match the secret as a whole token."""
        assert redact_text("secret1234 secret123", "secret123") == f"secret1234 {REDACTED_VALUE}"
