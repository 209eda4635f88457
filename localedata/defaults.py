"""Well-known locale constants and the process default locale."""

from __future__ import annotations

from .models import LanguageTag
from .registry import default_registry

CANADA = LanguageTag.of("en", "CA")
CANADA_FRENCH = LanguageTag.of("fr", "CA")
CHINA = LanguageTag.of("zh", "CN")
CHINESE = LanguageTag.of("zh")
ENGLISH = LanguageTag.of("en")
FRANCE = LanguageTag.of("fr", "FR")
FRENCH = LanguageTag.of("fr")
GERMAN = LanguageTag.of("de")
GERMANY = LanguageTag.of("de", "DE")
ITALIAN = LanguageTag.of("it")
ITALY = LanguageTag.of("it", "IT")
JAPAN = LanguageTag.of("ja", "JP")
JAPANESE = LanguageTag.of("ja")
KOREA = LanguageTag.of("ko", "KR")
KOREAN = LanguageTag.of("ko")
PRC = CHINA
ROOT = LanguageTag.of("")
SIMPLIFIED_CHINESE = CHINA
TAIWAN = LanguageTag.of("zh", "TW")
TRADITIONAL_CHINESE = TAIWAN
UK = LanguageTag.of("en", "GB")
US = LanguageTag.of("en", "US")
UNDEFINED = LanguageTag.of("und")

_default: LanguageTag | None = None


class DefaultLocaleNotSetError(Exception):
    """Raised when the default locale is read before it has been set."""


def parse_language_tag(text: str) -> LanguageTag:
    """Parse a tag string; the empty string is the root locale."""
    return ROOT if not text else LanguageTag.parse(text)


def get_default() -> LanguageTag:
    """Return the default locale set by :func:`set_default`."""
    if _default is None:
        raise DefaultLocaleNotSetError("Default locale not set")
    return _default


def set_default(tag: LanguageTag) -> None:
    """Set or replace the default locale."""
    global _default
    _default = tag


def available_language_tags() -> list[LanguageTag]:
    """Return the tag of every registered locale, in registry order."""
    return [locale.language_tag for locale in default_registry().all()]
