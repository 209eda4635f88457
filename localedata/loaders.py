"""CLDR data loaders with Pydantic validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .io import load_json
from .models import (
    AvailableLocalesData,
    CurrencyData,
    DefaultContentData,
    GregorianJsonMain,
    LikelySubtagsData,
    NumberingSystemsData,
    NumbersJsonMain,
    ParentLocalesData,
)

DATES_PACKAGE = "cldr-dates-full"
NUMBERS_PACKAGE = "cldr-numbers-full"
CORE_PACKAGE = "cldr-core"
REQUIRED_PACKAGES = (CORE_PACKAGE, DATES_PACKAGE, NUMBERS_PACKAGE)

ModelT = TypeVar("ModelT", bound=BaseModel)


class CldrDataError(Exception):
    """Raised when required CLDR data is missing or malformed."""


def _load_model(path: Path, model: type[ModelT]) -> ModelT:
    if not path.is_file():
        raise CldrDataError(f"CLDR file missing from archive: {path}")
    try:
        return model.model_validate(load_json(path))
    except ValidationError as e:
        raise CldrDataError(f"Unexpected structure in {path}: {e}") from e


def load_available_locales(cldr_root: Path) -> list[str]:
    """Load and parse availableLocales.json."""
    path = cldr_root / CORE_PACKAGE / "availableLocales.json"
    return _load_model(path, AvailableLocalesData).full


def load_default_content(cldr_root: Path) -> list[str]:
    """Load the default-content locale ids, which have no data files of their own."""
    path = cldr_root / CORE_PACKAGE / "defaultContent.json"
    if not path.is_file():
        return []
    return _load_model(path, DefaultContentData).default_content


def load_likely_subtags(cldr_root: Path) -> dict[str, str]:
    """Load and parse likelySubtags.json."""
    path = cldr_root / CORE_PACKAGE / "supplemental" / "likelySubtags.json"
    if not path.is_file():
        return {}
    return _load_model(path, LikelySubtagsData).likely_subtags


def load_parent_locales(cldr_root: Path) -> dict[str, str]:
    """Load explicit parent locales; an absent file means truncation only."""
    path = cldr_root / CORE_PACKAGE / "supplemental" / "parentLocales.json"
    if not path.is_file():
        return {}
    return _load_model(path, ParentLocalesData).parent_locales


def load_currency_data(cldr_root: Path) -> CurrencyData:
    """Load and parse currencyData.json."""
    path = cldr_root / CORE_PACKAGE / "supplemental" / "currencyData.json"
    return _load_model(path, CurrencyData)


def load_numbering_systems(cldr_root: Path) -> NumberingSystemsData:
    """Load and parse numberingSystems.json."""
    path = cldr_root / CORE_PACKAGE / "supplemental" / "numberingSystems.json"
    return _load_model(path, NumberingSystemsData)


def load_gregorian_calendar(cldr_root: Path, locale: str) -> dict[str, Any] | None:
    """Load a locale's unresolved gregorian calendar block."""
    path = cldr_root / DATES_PACKAGE / "main" / locale / "ca-gregorian.json"
    if not path.is_file():
        return None
    data = _load_model(path, GregorianJsonMain)
    return data.main[locale].dates.calendars.get("gregorian", {})


def load_numbers(cldr_root: Path, locale: str) -> dict[str, Any] | None:
    """Load a locale's unresolved numbers block."""
    path = cldr_root / NUMBERS_PACKAGE / "main" / locale / "numbers.json"
    if not path.is_file():
        return None
    return _load_model(path, NumbersJsonMain).main[locale].numbers


def load_currencies(cldr_root: Path, locale: str) -> dict[str, Any] | None:
    """Load a locale's unresolved currency display data."""
    path = cldr_root / NUMBERS_PACKAGE / "main" / locale / "currencies.json"
    if not path.is_file():
        return None
    numbers = _load_model(path, NumbersJsonMain).main[locale].numbers
    return numbers.get("currencies", {})
