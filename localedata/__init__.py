"""Static locale metadata and lookups for runtimes without native locale support."""

from .defaults import (
    DefaultLocaleNotSetError,
    available_language_tags,
    get_default,
    parse_language_tag,
    set_default,
)
from .models import (
    NO_NO_NY,
    DateFormatSymbols,
    DecimalFormatSymbols,
    LanguageTag,
    Locale,
    LocaleTable,
)
from .normalize import is_unsupported, language_fix, language_tag_fix
from .registry import (
    DataTableError,
    LocaleRegistry,
    available_locales,
    default_registry,
    for_language_tag,
    load_registry,
)

__all__ = [
    "NO_NO_NY",
    "DataTableError",
    "DateFormatSymbols",
    "DecimalFormatSymbols",
    "DefaultLocaleNotSetError",
    "LanguageTag",
    "Locale",
    "LocaleRegistry",
    "LocaleTable",
    "available_language_tags",
    "available_locales",
    "default_registry",
    "for_language_tag",
    "get_default",
    "is_unsupported",
    "language_fix",
    "language_tag_fix",
    "load_registry",
    "parse_language_tag",
    "set_default",
]
