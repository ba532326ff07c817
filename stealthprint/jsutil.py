"""Helpers for embedding values in generated JavaScript."""

import hashlib

_BASE_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def escape_js_string(text: str, single_quotes: bool = False) -> str:
    """Escape ``text`` for use inside a double-quoted JavaScript string.

    Backslashes, double quotes, newlines, carriage returns and tabs are
    escaped; single quotes too when ``single_quotes`` is true.
    """
    for raw, escaped in _BASE_ESCAPES:
        text = text.replace(raw, escaped)
    if single_quotes:
        text = text.replace("'", "\\'")
    return text


def stable_hash(text: str) -> int:
    """Return a deterministic unsigned 64-bit hash of ``text``.

    Unlike the built-in ``hash``, the value is the same across processes.
    """
    digest = hashlib.blake2b(text.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big")