"""Legacy language-code helpers."""

from __future__ import annotations

# Modern ISO 639 code -> legacy code used by the symbol tables.
LEGACY_LANGUAGE_CODES: dict[str, str] = {
    "he": "iw",
    "yi": "ji",
    "id": "in",
    "und": "",
}

MODERN_LANGUAGE_CODES: dict[str, str] = {
    legacy: modern for modern, legacy in LEGACY_LANGUAGE_CODES.items()
}

# Tags carrying calendar or numbering extensions the symbol records cannot hold.
UNSUPPORTED_TAGS: frozenset[str] = frozenset(
    {
        "ja-JP-u-ca-japanese-x-lvariant-JP",
        "th-TH-u-nu-thai-x-lvariant-TH",
    }
)


def language_fix(code: str) -> str:
    """Map a modern language code to its legacy form, e.g. ``he`` -> ``iw``."""
    code = code.lower()
    return LEGACY_LANGUAGE_CODES.get(code, code)


def language_tag_fix(code: str) -> str:
    """Map a legacy language code back to its tag form, e.g. ``iw`` -> ``he``.

    Only the four explicit mappings round-trip with :func:`language_fix`.
    """
    code = code.lower()
    return MODERN_LANGUAGE_CODES.get(code, code)


def is_unsupported(tag: str) -> bool:
    """Return True if the tag string is on the unsupported denylist."""
    return tag in UNSUPPORTED_TAGS
