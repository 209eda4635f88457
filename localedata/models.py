"""Pydantic models for locale records, the data table and CLDR JSON structures."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, Field, field_validator

from .normalize import language_fix, language_tag_fix

SEPARATOR = "-"

# A single Unicode codepoint.
Char = Annotated[str, Field(min_length=1, max_length=1)]


class LanguageTag(BaseModel, frozen=True):
    """A locale identifier and its decomposed subtags.

    Empty strings mark absent subtags. Equality compares all five fields and
    applies no normalization, so records must be built normalized; use
    :meth:`of` or :meth:`parse` rather than the constructor for raw input.
    """

    tag: str
    language: str
    region: str = ""
    variant: str = ""
    script: str = ""

    @classmethod
    def of(
        cls,
        language: str,
        region: str = "",
        variant: str = "",
        script: str = "",
    ) -> LanguageTag:
        """Build a normalized tag from raw subtags."""
        if (
            language == NO_NO_NY.language
            and region.upper() == NO_NO_NY.region
            and variant.upper() == NO_NO_NY.variant
            and script.lower() == NO_NO_NY.script
        ):
            return NO_NO_NY

        language = language_fix(language)
        region = region.upper()

        tag = language_tag_fix(language)
        if script:
            tag += SEPARATOR + script
        if region:
            tag += SEPARATOR + region
            if variant:
                tag += SEPARATOR + variant
        if tag == "no-NO-NY":
            tag = "nn-NO"

        return cls(
            tag=tag,
            language=language,
            region=region,
            variant=variant,
            script=script,
        )

    @classmethod
    def parse(cls, source: str) -> LanguageTag:
        """Parse ``language[-Script][-REGION[-variant]]``.

        A second subtag that is alphabetic and already title-cased is a script;
        anything after the third subtag is ignored.
        """
        subtags = source.split(SEPARATOR)
        language = subtags[0]
        script = ""
        region = ""
        variant = ""

        if len(subtags) > 1 and subtags[1]:
            second = subtags[1]
            third = subtags[2] if len(subtags) > 2 else ""
            if second.isalpha() and second == second.title():
                script = second
                region = third
            else:
                region = second
                variant = third

        return cls.of(language, region, variant, script)

    @property
    def display_name(self) -> str:
        """Underscore form used by legacy locale APIs, e.g. ``en_US`` or ``sr_RS_#Latn``."""
        if self.language == "und":
            return ""
        parts = [self.language]
        if self.region:
            parts.append(self.region)
        if self.variant:
            parts.append(self.variant)
        text = "_".join(parts)
        if self.script:
            text += "_#" + self.script
        return text

    def __str__(self) -> str:
        return self.tag


NO_NO_NY = LanguageTag(tag="nn-NO", language="no", region="NO", variant="NY")


class DateFormatSymbols(BaseModel, frozen=True):
    """Localized strings needed to render dates.

    Month sequences carry a trailing empty placeholder and weekday sequences a
    leading one, so 1-based calendar fields index them directly.
    """

    ampm: tuple[str, ...] = Field(min_length=2, max_length=2)
    eras: tuple[str, ...] = Field(min_length=2, max_length=2)
    months: tuple[str, ...] = Field(min_length=13, max_length=13)
    short_months: tuple[str, ...] = Field(min_length=13, max_length=13)
    short_weekdays: tuple[str, ...] = Field(min_length=8, max_length=8)
    weekdays: tuple[str, ...] = Field(min_length=8, max_length=8)

    @field_validator("months", "short_months")
    @classmethod
    def _check_month_placeholder(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if value[-1]:
            raise ValueError("the thirteenth month entry must be empty")
        return value

    @field_validator("short_weekdays", "weekdays")
    @classmethod
    def _check_weekday_placeholder(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if value[0]:
            raise ValueError("the first weekday entry must be empty")
        return value


class DecimalFormatSymbols(BaseModel, frozen=True):
    """Localized symbols needed to render numbers and currency amounts."""

    currency: str
    currency_symbol: str
    decimal_separator: Char
    digit: Char = "#"
    exponent_separator: str
    grouping_separator: Char
    infinity: str
    international_currency_symbol: str
    minus_sign: Char
    monetary_decimal_separator: Char
    nan: str
    pattern_separator: Char
    percent: Char
    per_mill: Char
    zero_digit: Char


class Locale(BaseModel, frozen=True):
    """A language tag with its date and number symbols.

    Symbol records are shared between locales by reference.
    """

    language_tag: LanguageTag
    date_format_symbols: DateFormatSymbols
    decimal_format_symbols: DecimalFormatSymbols


class LocaleRow(BaseModel):
    """One registry entry in the data table, referring to shared symbol sets by id."""

    tag: str
    language: str
    region: str = ""
    variant: str = ""
    script: str = ""
    date_format_symbols: str
    decimal_format_symbols: str


class LocaleTable(BaseModel):
    """Model for the bundled locales.json data table."""

    source: str
    date_format_symbols: dict[str, DateFormatSymbols]
    decimal_format_symbols: dict[str, DecimalFormatSymbols]
    locales: list[LocaleRow]


class AvailableLocalesData(BaseModel):
    """Model for availableLocales.json."""

    available_locales: dict[str, list[str]] = Field(alias="availableLocales")

    @property
    def full(self) -> list[str]:
        return self.available_locales["full"]


class DefaultContentData(BaseModel):
    """Model for defaultContent.json: locales whose data lives in their parent."""

    default_content: list[str] = Field(alias="defaultContent")


class LikelySubtagsData(BaseModel):
    """Model for likelySubtags.json."""

    supplemental: dict[str, dict[str, str]]

    @property
    def likely_subtags(self) -> dict[str, str]:
        return self.supplemental["likelySubtags"]


class ParentLocalesBlock(BaseModel):
    """parentLocales block in parentLocales.json."""

    parent_locale: dict[str, str] = Field(alias="parentLocale")


class ParentLocalesSupplemental(BaseModel):
    parent_locales: ParentLocalesBlock = Field(alias="parentLocales")


class ParentLocalesData(BaseModel):
    """Model for parentLocales.json."""

    supplemental: ParentLocalesSupplemental

    @property
    def parent_locales(self) -> dict[str, str]:
        return self.supplemental.parent_locales.parent_locale


class CurrencyPeriod(BaseModel):
    """Validity period of a currency within a region."""

    valid_from: str | None = Field(default=None, alias="_from")
    valid_to: str | None = Field(default=None, alias="_to")
    tender: str | None = Field(default=None, alias="_tender")

    @property
    def is_current_tender(self) -> bool:
        return self.valid_to is None and self.tender != "false"


class CurrencyDataBlock(BaseModel):
    region: dict[str, list[dict[str, CurrencyPeriod]]]


class CurrencySupplemental(BaseModel):
    currency_data: CurrencyDataBlock = Field(alias="currencyData")


class CurrencyData(BaseModel):
    """Model for currencyData.json."""

    supplemental: CurrencySupplemental

    def current_currency(self, region: str) -> str | None:
        """Return the first currency still legal tender in the region."""
        for entry in self.supplemental.currency_data.region.get(region, []):
            for code, period in entry.items():
                if period.is_current_tender:
                    return code
        return None


class NumberingSystem(BaseModel):
    """One numbering system from numberingSystems.json."""

    digits: str | None = Field(default=None, alias="_digits")
    system_type: str = Field(alias="_type")


class NumberingSystemsSupplemental(BaseModel):
    numbering_systems: dict[str, NumberingSystem] = Field(alias="numberingSystems")


class NumberingSystemsData(BaseModel):
    """Model for numberingSystems.json."""

    supplemental: NumberingSystemsSupplemental

    @property
    def numbering_systems(self) -> dict[str, NumberingSystem]:
        return self.supplemental.numbering_systems


class DatesBlock(BaseModel):
    """Dates block in ca-gregorian.json; calendars stay raw until inheritance is resolved."""

    calendars: dict[str, dict[str, Any]]


class DatesLocaleEntry(BaseModel):
    dates: DatesBlock


class GregorianJsonMain(BaseModel):
    """Main block in ca-gregorian.json."""

    main: dict[str, DatesLocaleEntry]


class NumbersLocaleEntry(BaseModel):
    """Entry for a single locale in numbers.json or currencies.json."""

    numbers: dict[str, Any]


class NumbersJsonMain(BaseModel):
    """Main block in numbers.json and currencies.json."""

    main: dict[str, NumbersLocaleEntry]


class CalendarWidths(BaseModel):
    abbreviated: dict[str, str] = {}
    wide: dict[str, str] = {}


class CalendarContexts(BaseModel):
    format: CalendarWidths


class CalendarEras(BaseModel):
    era_abbr: dict[str, str] = Field(alias="eraAbbr")


class GregorianCalendar(BaseModel):
    """Resolved gregorian calendar data for one locale."""

    months: CalendarContexts
    days: CalendarContexts
    day_periods: CalendarContexts = Field(alias="dayPeriods")
    eras: CalendarEras


class NumberSymbols(BaseModel):
    """Resolved ``symbols-numberSystem-*`` block for one locale."""

    decimal: str
    group: str
    list_separator: str = Field(default=";", alias="list")
    percent_sign: str = Field(alias="percentSign")
    minus_sign: str = Field(alias="minusSign")
    exponential: str
    per_mille: str = Field(alias="perMille")
    infinity: str
    nan: str
    currency_decimal: str | None = Field(default=None, alias="currencyDecimal")
