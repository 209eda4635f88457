"""The locale registry: an ordered, immutable collection of locales with lookups."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from threading import Lock

from pydantic import ValidationError

from .io import load_json
from .models import LanguageTag, Locale, LocaleTable
from .normalize import is_unsupported

DATA_TABLE_PATH = Path(__file__).resolve().parent / "data" / "locales.json"


class DataTableError(Exception):
    """Raised when a locale data table is missing, malformed or inconsistent."""


class LocaleRegistry:
    """Locales in registration order.

    Lookups scan linearly and the first matching entry wins, so the order of
    the data table is significant.
    """

    def __init__(self, locales: Iterable[Locale], source: str = "") -> None:
        self._locales = tuple(locales)
        self.source = source

    @classmethod
    def from_table(cls, table: LocaleTable) -> LocaleRegistry:
        """Build a registry whose locales share the table's symbol records."""
        locales: list[Locale] = []
        for row in table.locales:
            try:
                date_symbols = table.date_format_symbols[row.date_format_symbols]
                decimal_symbols = table.decimal_format_symbols[
                    row.decimal_format_symbols
                ]
            except KeyError as e:
                raise DataTableError(
                    f"Locale '{row.tag}' refers to unknown symbol set {e}"
                ) from e
            locales.append(
                Locale(
                    language_tag=LanguageTag(
                        tag=row.tag,
                        language=row.language,
                        region=row.region,
                        variant=row.variant,
                        script=row.script,
                    ),
                    date_format_symbols=date_symbols,
                    decimal_format_symbols=decimal_symbols,
                )
            )
        return cls(locales, source=table.source)

    def all(self) -> tuple[Locale, ...]:
        """Return every registered locale in registration order."""
        return self._locales

    def for_language_tag(self, tag: LanguageTag) -> Locale | None:
        """Return the first locale whose tag equals ``tag``, or None."""
        for locale in self._locales:
            if locale.language_tag == tag:
                return locale
        return None

    def for_language_tag_string(self, text: str) -> Locale | None:
        """Parse ``text`` and look it up; unsupported tags are never found."""
        if is_unsupported(text):
            return None
        return self.for_language_tag(LanguageTag.parse(text))

    def __iter__(self) -> Iterator[Locale]:
        return iter(self._locales)

    def __len__(self) -> int:
        return len(self._locales)


def load_table(path: Path) -> LocaleTable:
    """Load and validate a locales.json data table."""
    if not path.is_file():
        raise DataTableError(f"Locale data table not found: {path}")
    try:
        return LocaleTable.model_validate(load_json(path))
    except (ValueError, ValidationError) as e:
        raise DataTableError(f"Invalid locale data table {path}: {e}") from e


def load_registry(path: Path = DATA_TABLE_PATH) -> LocaleRegistry:
    """Build a registry from a data table file."""
    return LocaleRegistry.from_table(load_table(path))


_default_registry: LocaleRegistry | None = None
_default_registry_lock = Lock()


def default_registry() -> LocaleRegistry:
    """Return the registry for the bundled data table, built on first use.

    The registry is fully built under a lock before it is published, so every
    caller sees the same instance.
    """
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = load_registry(DATA_TABLE_PATH)
    return _default_registry


def for_language_tag(tag: LanguageTag) -> Locale | None:
    """Look up ``tag`` in the default registry."""
    return default_registry().for_language_tag(tag)


def available_locales() -> tuple[Locale, ...]:
    """Return every locale of the default registry."""
    return default_registry().all()
