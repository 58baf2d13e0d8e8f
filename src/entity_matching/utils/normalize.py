"""Text and date normalization shared by every scorer.

Text rules (fixed order):
- uppercase
- optional German umlaut / sharp-s substitution (Cologne Phonetic only)
- Unicode NFD decomposition, combining marks dropped
- everything outside A-Z removed

Empty or letter-free input normalizes to "" which callers treat as
"no signal", never as an error.
"""
from __future__ import annotations

import re
import unicodedata
from datetime import date, datetime, time

_NON_LETTER_RE = re.compile(r"[^A-Z]")
_WS_RE = re.compile(r"\s+")

UMLAUT_SUBSTITUTIONS = (
    ("Ä", "A"),
    ("Ö", "O"),
    ("Ü", "U"),
    ("ß", "SS"),
    ("ẞ", "SS"),
)


def _strip_diacritics(s: str) -> str:
    return "".join(
        ch for ch in unicodedata.normalize("NFD", s) if not unicodedata.combining(ch)
    )


def normalize(text: str | None, umlauts: bool = False) -> str:
    """Normalize text to the uppercase A-Z alphabet.

    Args:
        text: Raw input, may be empty or None
        umlauts: Apply the German substitutions (Ä->A, Ö->O, Ü->U, ß->SS)

    Returns:
        Normalized string, possibly empty
    """
    if not text:
        return ""

    s = text.upper()
    if umlauts:
        for old, new in UMLAUT_SUBSTITUTIONS:
            s = s.replace(old, new)
    s = _strip_diacritics(s)
    return _NON_LETTER_RE.sub("", s)


def fold_case(text: str) -> str:
    """Lowercase used by the case-insensitive scorers."""
    return text.lower()


def tokenize(text: str | None) -> list[str]:
    """Split on whitespace, dropping empty tokens."""
    if not text:
        return []
    return [t for t in _WS_RE.split(text) if t]


# =============================================================================
# Dates
# =============================================================================

MONTH_NAMES = {
    "january": 1, "jan": 1, "januar": 1, "jänner": 1,
    "february": 2, "feb": 2, "februar": 2,
    "march": 3, "mar": 3, "märz": 3, "maerz": 3, "mrz": 3,
    "april": 4, "apr": 4,
    "may": 5, "mai": 5,
    "june": 6, "jun": 6, "juni": 6,
    "july": 7, "jul": 7, "juli": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9, "sept": 9,
    "october": 10, "oct": 10, "oktober": 10, "okt": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12, "dezember": 12, "dez": 12,
}

_PARTIAL_ISO_RE = re.compile(r"^(\d{4})(?:-(\d{1,2}))?$")
_DAY_MONTH_NAME_RE = re.compile(r"^(\d{1,2})\.?\s+([^\W\d_]{3,9})\.?\s+(\d{4})$")
_MONTH_NAME_DAY_RE = re.compile(r"^([^\W\d_]{3,9})\.?\s+(\d{1,2}),?\s+(\d{4})$")
_NUMERIC_RE = re.compile(r"^(\d{1,2})([/\-.])(\d{1,2})\2(\d{4})$")


def parse_timestamp(value: object) -> datetime | None:
    """Parse a calendar timestamp from a date-like value.

    Handles:
    - datetime / date objects
    - ISO: 1932-06-09, 1932-06-09T14:30:00+01:00, 1932-06, 1932
    - GEDCOM: 9 JUN 1932 (also 9. Juni 1932)
    - US: June 9, 1932
    - Numeric: 9.6.1932 (always day first), 6/9/1932 or 13/6/1932

    Returns:
        A datetime, or None when the value is not a recognizable date
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if value is None:
        return None

    text = str(value).strip()
    if not text:
        return None

    try:
        return _parse_text(text)
    except (ValueError, OverflowError):
        # Out-of-range components such as month 13 or day 32
        return None


def _parse_text(text: str) -> datetime | None:
    partial = _PARTIAL_ISO_RE.match(text)
    if partial:
        return datetime(int(partial.group(1)), int(partial.group(2) or 1), 1)

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    m = _DAY_MONTH_NAME_RE.match(text)
    if m:
        month = MONTH_NAMES.get(m.group(2).lower())
        if month is None:
            return None
        return datetime(int(m.group(3)), month, int(m.group(1)))

    m = _MONTH_NAME_DAY_RE.match(text)
    if m:
        month = MONTH_NAMES.get(m.group(1).lower())
        if month is None:
            return None
        return datetime(int(m.group(3)), month, int(m.group(2)))

    m = _NUMERIC_RE.match(text)
    if m:
        a, sep, b, year = int(m.group(1)), m.group(2), int(m.group(3)), int(m.group(4))
        if sep == "." or a > 12:
            day, month = a, b
        else:
            # Ambiguous slash dates read as M/D/YYYY
            month, day = a, b
        return datetime(year, month, day)

    return None


def prepare_text(text: str, case_sensitive: bool = False, normalize_text: bool = False) -> str:
    """Apply the scorer toggles shared by the string similarity functions.

    ``normalize_text`` runs the full normalizer (which uppercases), so it
    makes ``case_sensitive`` irrelevant.
    """
    if normalize_text:
        return normalize(text)
    return text if case_sensitive else fold_case(text)
