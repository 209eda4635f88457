"""Shared fixtures: a miniature extracted CLDR JSON archive."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
DAY_KEYS = ["sun", "mon", "tue", "wed", "thu", "fri", "sat"]
DAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

LATN_SYMBOLS = {
    "decimal": ".",
    "group": ",",
    "list": ";",
    "percentSign": "%",
    "plusSign": "+",
    "minusSign": "-",
    "approximatelySign": "~",
    "exponential": "E",
    "superscriptingExponent": "×",
    "perMille": "‰",
    "infinity": "∞",
    "nan": "NaN",
    "timeSeparator": ":",
}


def _write(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


def _calendar(root: Path, locale: str, gregorian: dict[str, Any]) -> None:
    _write(
        root / "cldr-dates-full" / "main" / locale / "ca-gregorian.json",
        {
            "main": {
                locale: {
                    "identity": {"language": locale.split("-")[0]},
                    "dates": {"calendars": {"gregorian": gregorian}},
                }
            }
        },
    )


def _numbers(root: Path, locale: str, numbers: dict[str, Any]) -> None:
    _write(
        root / "cldr-numbers-full" / "main" / locale / "numbers.json",
        {"main": {locale: {"numbers": numbers}}},
    )


def _currencies(root: Path, locale: str, currencies: dict[str, Any]) -> None:
    _write(
        root / "cldr-numbers-full" / "main" / locale / "currencies.json",
        {"main": {locale: {"numbers": {"currencies": currencies}}}},
    )


def build_cldr_tree(root: Path) -> Path:
    """Write a small but structurally faithful CLDR JSON tree under ``root``."""
    core = root / "cldr-core"
    _write(
        core / "availableLocales.json",
        {
            "availableLocales": {
                "modern": ["en", "en-GB"],
                "full": [
                    "en",
                    "en-GB",
                    "nn-NO",
                    "he",
                    "ar-EG",
                    "zh",
                    "zh-Hant",
                    "ja-JP-u-ca-japanese-x-lvariant-JP",
                ],
            }
        },
    )
    _write(
        core / "defaultContent.json",
        {"defaultContent": ["en-US", "he-IL", "zh-Hans", "zh-Hans-CN", "zh-Hant-TW"]},
    )
    _write(
        core / "supplemental" / "likelySubtags.json",
        {
            "supplemental": {
                "version": {"_unicodeVersion": "16.0.0", "_cldrVersion": "48"},
                "likelySubtags": {
                    "en": "en-Latn-US",
                    "he": "he-Hebr-IL",
                    "sr": "sr-Cyrl-RS",
                    "zh": "zh-Hans-CN",
                    "zh-Hant": "zh-Hant-TW",
                    "zh-TW": "zh-Hant-TW",
                },
            }
        },
    )
    _write(
        core / "supplemental" / "parentLocales.json",
        {
            "supplemental": {
                "version": {"_unicodeVersion": "16.0.0"},
                "parentLocales": {
                    "parentLocale": {"en-GB": "en-001", "en-001": "en", "zh-Hant": "root"}
                },
            }
        },
    )
    _write(
        core / "supplemental" / "currencyData.json",
        {
            "supplemental": {
                "currencyData": {
                    "fractions": {"DEFAULT": {"_rounding": "0", "_digits": "2"}},
                    "region": {
                        "US": [
                            {"USN": {"_from": "1970-01-01", "_tender": "false"}},
                            {"USD": {"_from": "1792-01-01"}},
                        ],
                        "GB": [{"GBP": {"_from": "1694-07-27"}}],
                        "EG": [{"EGP": {"_from": "1885-11-14"}}],
                        "IL": [{"ILS": {"_from": "1985-09-04"}}],
                        "CN": [{"CNY": {"_from": "1953-03-01"}}],
                        "TW": [{"TWD": {"_from": "1949-06-15"}}],
                        "NO": [
                            {"NOS": {"_from": "1875-01-01", "_to": "1905-06-07"}},
                            {"NOK": {"_from": "1905-06-07"}},
                        ],
                    },
                }
            }
        },
    )
    _write(
        core / "supplemental" / "numberingSystems.json",
        {
            "supplemental": {
                "numberingSystems": {
                    "latn": {"_digits": "0123456789", "_type": "numeric"},
                    "arab": {"_digits": "٠١٢٣٤٥٦٧٨٩", "_type": "numeric"},
                    "hebr": {"_rules": "hebrew", "_type": "algorithmic"},
                }
            }
        },
    )

    _calendar(
        root,
        "root",
        {
            "months": {
                "format": {
                    "abbreviated": {str(i): f"M{i:02d}" for i in range(1, 13)},
                    "wide": {str(i): f"M{i:02d}" for i in range(1, 13)},
                }
            },
            "days": {
                "format": {
                    "abbreviated": dict(zip(DAY_KEYS, [d[:3] for d in DAYS])),
                    "wide": dict(zip(DAY_KEYS, [d[:3] for d in DAYS])),
                }
            },
            "dayPeriods": {"format": {"abbreviated": {"am": "AM", "pm": "PM"}}},
            "eras": {"eraAbbr": {"0": "BCE", "1": "CE"}},
        },
    )
    _calendar(
        root,
        "en",
        {
            "months": {
                "format": {
                    "abbreviated": {str(i): m[:3] for i, m in enumerate(MONTHS, 1)},
                    "wide": {str(i): m for i, m in enumerate(MONTHS, 1)},
                }
            },
            "days": {
                "format": {
                    "abbreviated": dict(zip(DAY_KEYS, [d[:3] for d in DAYS])),
                    "wide": dict(zip(DAY_KEYS, DAYS)),
                }
            },
            "eras": {"eraAbbr": {"0": "BC", "1": "AD", "0-alt-variant": "BCE"}},
        },
    )
    _calendar(
        root,
        "en-001",
        {
            "months": {"format": {"abbreviated": {"9": "Sept"}}},
            "dayPeriods": {"format": {"abbreviated": {"am": "am", "pm": "pm"}}},
        },
    )
    _calendar(root, "he", {"eras": {"eraAbbr": {"0": "לפנה״ס", "1": "לספירה"}}})
    _calendar(
        root,
        "nn",
        {"dayPeriods": {"format": {"abbreviated": {"am": "f.m.", "pm": "e.m."}}}},
    )
    _calendar(root, "ar", {"dayPeriods": {"format": {"abbreviated": {"am": "ص", "pm": "م"}}}})
    _calendar(root, "zh", {"dayPeriods": {"format": {"abbreviated": {"am": "上午", "pm": "下午"}}}})
    _calendar(
        root,
        "zh-Hant",
        {
            "dayPeriods": {"format": {"abbreviated": {"am": "上午", "pm": "下午"}}},
            "eras": {"eraAbbr": {"0": "西元前", "1": "西元"}},
        },
    )

    _numbers(
        root,
        "root",
        {"defaultNumberingSystem": "latn", "symbols-numberSystem-latn": LATN_SYMBOLS},
    )
    _numbers(root, "en", {"defaultNumberingSystem": "latn"})
    _numbers(
        root,
        "he",
        {
            "defaultNumberingSystem": "latn",
            "otherNumberingSystems": {"traditional": "hebr"},
            "symbols-numberSystem-latn": {"minusSign": "\u200e-"},
        },
    )
    _numbers(
        root,
        "nn",
        {"symbols-numberSystem-latn": {"decimal": ",", "group": "\u00a0", "minusSign": "\u2212"}},
    )
    _numbers(
        root,
        "ar",
        {
            "defaultNumberingSystem": "arab",
            "symbols-numberSystem-arab": {
                "decimal": "٫",
                "group": "٬",
                "list": "؛",
                "percentSign": "٪\u061c",
                "minusSign": "\u061c-",
                "exponential": "اس",
                "perMille": "؉",
                "infinity": "∞",
                "nan": "ليس رقمًا",
            },
        },
    )
    _numbers(root, "zh-Hant", {"symbols-numberSystem-latn": {"nan": "非數值"}})

    _currencies(root, "root", {"XXX": {"symbol": "¤"}})
    _currencies(
        root,
        "en",
        {
            "USD": {"displayName": "US Dollar", "symbol": "$"},
            "GBP": {"displayName": "British Pound", "symbol": "£"},
        },
    )
    _currencies(root, "ar", {"EGP": {"symbol": "ج.م.\u200f"}})
    _currencies(root, "nn", {"NOK": {"symbol": "kr"}})
    _currencies(root, "he", {"ILS": {"symbol": "\u20aa"}})
    _currencies(root, "zh", {"CNY": {"symbol": "¥"}})
    _currencies(root, "zh-Hant", {"TWD": {"symbol": "$"}})
    return root


@pytest.fixture
def cldr_tree(tmp_path: Path) -> Path:
    """An extracted miniature CLDR archive."""
    return build_cldr_tree(tmp_path / "cldr")
