"""Redaction of the API key from URLs and messages."""

import re
from urllib.parse import urlencode

import httpx

AUTH_PARAM = "key"

REDACT_KEYS: frozenset[str] = frozenset({
    AUTH_PARAM,
    "api_key",
    "apikey",
    "token",
    "secret",
    "password",
    "authorization",
})

REDACTED_VALUE = "[REDACTED]"


def redact_url(url: httpx.URL | str) -> str:
    """Render a URL with sensitive query parameter values replaced."""
    url = httpx.URL(str(url))
    if not url.params:
        return str(url)
    redacted = [
        (name, REDACTED_VALUE if name.lower() in REDACT_KEYS else value)
        for name, value in url.params.multi_items()
    ]
    base = str(url.copy_with(query=None, fragment=None))
    return f"{base}?{urlencode(redacted, safe='[]')}"


def redact_text(text: str, secret: str | None) -> str:
    """Replace every whole-token occurrence of ``secret`` in free text.

    A match must not be flanked by word characters, so a short key never
    rewrites the inside of an ordinary word.

    >>> redact_text("Invalid API key", "a")
    'Invalid API key'
    >>> redact_text("key=a&page=1", "a")
    'key=[REDACTED]&page=1'
    """
    if not secret:
        return text
    pattern = rf"(?<!\w){re.escape(secret)}(?!\w)"
    return re.sub(pattern, lambda _: REDACTED_VALUE, text)
