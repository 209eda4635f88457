"""Conversion of CLDR locale data into the legacy symbol table."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .loaders import (
    CldrDataError,
    load_available_locales,
    load_currencies,
    load_currency_data,
    load_default_content,
    load_gregorian_calendar,
    load_likely_subtags,
    load_numbering_systems,
    load_numbers,
    load_parent_locales,
)
from .models import (
    NO_NO_NY,
    DateFormatSymbols,
    DecimalFormatSymbols,
    GregorianCalendar,
    LanguageTag,
    LocaleRow,
    LocaleTable,
    NumberingSystem,
    NumberSymbols,
)
from .normalize import is_unsupported

ROOT_LOCALES = ("und", "root")
MONTH_KEYS = tuple(str(month) for month in range(1, 13))
WEEKDAY_KEYS = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")
DEFAULT_NUMBERING_SYSTEM = "latn"
NO_REGION_CURRENCY = "XXX"
NO_REGION_CURRENCY_SYMBOL = "¤"
DIGIT = "#"
BIDI_MARKS = "\u200e\u200f\u061c"

# Legacy tags registered ahead of the CLDR locale they alias.
LEGACY_ALIASES: dict[str, tuple[LanguageTag, ...]] = {
    "nn-NO": (NO_NO_NY,),
}

Loader = Callable[[Path, str], dict[str, Any] | None]


def fallback_chain(locale: str, parent_locales: dict[str, str]) -> list[str]:
    """Generate the inheritance chain for a locale, nearest first."""
    chain: list[str] = []
    current = locale
    while current and current not in ROOT_LOCALES and current not in chain:
        chain.append(current)
        parent = parent_locales.get(current)
        if parent is None:
            parent = "-".join(current.split("-")[:-1])
        current = parent
    chain.extend(ROOT_LOCALES)
    return chain


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge nested dicts; values from ``override`` win."""
    merged = dict(base)
    for key, value in override.items():
        existing = merged.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            merged[key] = deep_merge(existing, value)
        else:
            merged[key] = value
    return merged


def resolve_locale_data(
    cldr_root: Path,
    locale: str,
    parent_locales: dict[str, str],
    loader: Loader,
) -> dict[str, Any]:
    """Merge a locale's data with everything it inherits."""
    merged: dict[str, Any] = {}
    for fallback in reversed(fallback_chain(locale, parent_locales)):
        data = loader(cldr_root, fallback)
        if data:
            merged = deep_merge(merged, data)
    return merged


def first_char(value: str) -> str:
    """Return the first codepoint of a symbol, ignoring bidi control marks."""
    stripped = value.translate({ord(mark): None for mark in BIDI_MARKS})
    return stripped[:1] or value[:1]


def build_date_format_symbols(calendar: GregorianCalendar) -> DateFormatSymbols:
    """Convert a resolved gregorian calendar to legacy date symbols."""
    months = calendar.months.format
    days = calendar.days.format
    periods = calendar.day_periods.format
    return DateFormatSymbols(
        ampm=(periods.abbreviated["am"], periods.abbreviated["pm"]),
        eras=(calendar.eras.era_abbr["0"], calendar.eras.era_abbr["1"]),
        months=tuple(months.wide[key] for key in MONTH_KEYS) + ("",),
        short_months=tuple(months.abbreviated[key] for key in MONTH_KEYS) + ("",),
        short_weekdays=("",) + tuple(days.abbreviated[key] for key in WEEKDAY_KEYS),
        weekdays=("",) + tuple(days.wide[key] for key in WEEKDAY_KEYS),
    )


def select_numbering_system(
    numbers: dict[str, Any], numbering_systems: dict[str, NumberingSystem]
) -> str:
    """Pick the locale's default numbering system if it has digits and symbols."""
    name = numbers.get("defaultNumberingSystem", DEFAULT_NUMBERING_SYSTEM)
    system = numbering_systems.get(name)
    if (
        system is None
        or not system.digits
        or f"symbols-numberSystem-{name}" not in numbers
    ):
        return DEFAULT_NUMBERING_SYSTEM
    return name


def build_decimal_format_symbols(
    numbers: dict[str, Any],
    currencies: dict[str, Any],
    currency: str | None,
    numbering_systems: dict[str, NumberingSystem],
) -> DecimalFormatSymbols:
    """Convert resolved number and currency data to legacy decimal symbols."""
    system_name = select_numbering_system(numbers, numbering_systems)
    symbols = NumberSymbols.model_validate(
        numbers[f"symbols-numberSystem-{system_name}"]
    )
    system = numbering_systems.get(system_name)
    zero_digit = system.digits[0] if system and system.digits else "0"

    if currency is None:
        currency = NO_REGION_CURRENCY
        currency_symbol = NO_REGION_CURRENCY_SYMBOL
    else:
        currency_symbol = currencies.get(currency, {}).get("symbol", currency)

    return DecimalFormatSymbols(
        currency=currency,
        currency_symbol=currency_symbol,
        decimal_separator=first_char(symbols.decimal),
        digit=DIGIT,
        exponent_separator=symbols.exponential,
        grouping_separator=first_char(symbols.group),
        infinity=symbols.infinity,
        international_currency_symbol=currency,
        minus_sign=first_char(symbols.minus_sign),
        monetary_decimal_separator=first_char(
            symbols.currency_decimal or symbols.decimal
        ),
        nan=symbols.nan,
        pattern_separator=first_char(symbols.list_separator),
        percent=first_char(symbols.percent_sign),
        per_mill=first_char(symbols.per_mille),
        zero_digit=zero_digit,
    )


def likely_script(language: str, region: str, likely_subtags: dict[str, str]) -> str:
    """Return the script CLDR assumes for a language in a region, or ""."""
    keys = [f"{language}-{region}", language] if region else [language]
    for key in keys:
        if key in likely_subtags:
            return LanguageTag.parse(likely_subtags[key]).script
    return ""


def locale_tags(
    locale: str, likely_subtags: dict[str, str] | None = None
) -> list[LanguageTag]:
    """Return the tags registered for a CLDR locale id, legacy aliases first.

    An id whose script is the likely one for its language and region is also
    registered without the script, e.g. zh-Hans-CN as zh-CN.
    """
    source = "und" if locale == "root" else locale
    tag = LanguageTag.parse(source)
    tags = [*LEGACY_ALIASES.get(source, ()), tag]
    if tag.script and likely_subtags:
        language = source.split("-")[0]
        if likely_script(language, tag.region, likely_subtags) == tag.script:
            tags.append(LanguageTag.of(language, tag.region, tag.variant))
    return tags


def _assign_id(ids: dict[Any, str], symbols: Any, tag: str) -> str:
    if symbols not in ids:
        taken = set(ids.values())
        candidate = tag
        suffix = 2
        while candidate in taken:
            candidate = f"{tag}#{suffix}"
            suffix += 1
        ids[symbols] = candidate
    return ids[symbols]


def collect_locales(
    cldr_root: Path,
    source: str,
    locales: Iterable[str] | None = None,
) -> LocaleTable:
    """Build the locale table from an extracted CLDR JSON archive.

    Every available locale is collected along with the default-content
    locales (en-US, he-IL, ...) CLDR ships without data files of their own.
    Rows are ordered by tag; identical symbol sets are stored once under the
    tag of the first row using them. A tag derived by dropping a likely script
    never replaces a locale CLDR lists under that tag itself.
    """
    if locales is not None:
        available = list(locales)
    else:
        available = load_available_locales(cldr_root)
        listed = set(available)
        available += [
            locale
            for locale in load_default_content(cldr_root)
            if locale not in listed
        ]
    parent_locales = load_parent_locales(cldr_root)
    likely_subtags = load_likely_subtags(cldr_root)
    currency_data = load_currency_data(cldr_root)
    numbering_systems = load_numbering_systems(cldr_root).numbering_systems

    entries: list[
        tuple[LanguageTag, bool, DateFormatSymbols, DecimalFormatSymbols]
    ] = []
    for locale in available:
        if is_unsupported(locale):
            continue
        tags = locale_tags(locale, likely_subtags)
        scripted = any(tag.script for tag in tags)

        calendar = resolve_locale_data(
            cldr_root, locale, parent_locales, load_gregorian_calendar
        )
        numbers = resolve_locale_data(cldr_root, locale, parent_locales, load_numbers)
        currencies = resolve_locale_data(
            cldr_root, locale, parent_locales, load_currencies
        )
        region = tags[-1].region
        currency = currency_data.current_currency(region) if region else None

        try:
            date_symbols = build_date_format_symbols(
                GregorianCalendar.model_validate(calendar)
            )
            decimal_symbols = build_decimal_format_symbols(
                numbers, currencies, currency, numbering_systems
            )
        except (KeyError, ValidationError) as e:
            raise CldrDataError(f"Incomplete CLDR data for '{locale}': {e}") from e

        entries.extend(
            (tag, scripted and not tag.script, date_symbols, decimal_symbols)
            for tag in tags
        )

    entries.sort(key=lambda entry: (entry[0].tag, entry[1]))

    date_ids: dict[DateFormatSymbols, str] = {}
    decimal_ids: dict[DecimalFormatSymbols, str] = {}
    registered: set[LanguageTag] = set()
    rows: list[LocaleRow] = []
    for tag, _, date_symbols, decimal_symbols in entries:
        if tag in registered:
            continue
        registered.add(tag)
        rows.append(
            LocaleRow(
                **tag.model_dump(),
                date_format_symbols=_assign_id(date_ids, date_symbols, tag.tag),
                decimal_format_symbols=_assign_id(
                    decimal_ids, decimal_symbols, tag.tag
                ),
            )
        )

    return LocaleTable(
        source=source,
        date_format_symbols={id_: symbols for symbols, id_ in date_ids.items()},
        decimal_format_symbols={id_: symbols for symbols, id_ in decimal_ids.items()},
        locales=rows,
    )
