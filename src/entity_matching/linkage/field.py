"""Single-field similarity across every match algorithm.

Missing values are decided before any algorithm runs: two missing values
agree (1.0), one missing value disagrees (0.0). Everything else is coerced
to ``str`` and dispatched on ``MatchAlgorithm``.
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import UTC
from typing import Any, Callable

from pydantic import ValidationError

from ..exceptions import InvalidOptionsError, UnknownAlgorithmError
from ..phonetic.scorer import phonetic_similarity, token_phonetic_similarity
from ..similarity.edit_distance import (
    damerau_levenshtein_similarity,
    levenshtein_similarity,
)
from ..similarity.jaro_winkler import jaro_winkler_similarity, token_jaro_winkler
from ..utils.normalize import fold_case, parse_timestamp
from .models import (
    OPTIONS_TYPES,
    CompositeOptions,
    DateOptions,
    ExactOptions,
    MatchAlgorithm,
    MatchOptions,
    NumericOptions,
    PhoneticOptions,
    TextOptions,
)

_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")
_LEADING_FLOAT_RE = re.compile(r"^-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

# Elapsed-day ceilings and their scores, checked in order
DATE_STEPS = (
    (7, 0.9),
    (30, 0.7),
    (365, 0.5),
)
DATE_FALLBACK_SCORE = 0.3

COMPOSITE_BLEND = (0.5, 0.3, 0.2)


def resolve_match_algorithm(algorithm: MatchAlgorithm | str) -> MatchAlgorithm:
    """Coerce an identifier to ``MatchAlgorithm`` or raise."""
    try:
        return MatchAlgorithm(algorithm)
    except ValueError:
        raise UnknownAlgorithmError(
            algorithm, [a.value for a in MatchAlgorithm]
        ) from None


def resolve_options(
    algorithm: MatchAlgorithm,
    options: MatchOptions | Mapping[str, Any] | None,
) -> MatchOptions:
    """Return options of the type ``algorithm`` expects."""
    expected = OPTIONS_TYPES[algorithm]
    if options is None:
        return expected()
    if isinstance(options, Mapping):
        try:
            return expected(**options)
        except ValidationError as e:
            raise InvalidOptionsError(
                f"Invalid options for algorithm '{algorithm.value}': {e}"
            ) from e
    if not isinstance(options, expected):
        raise InvalidOptionsError(
            f"{type(options).__name__} does not apply to algorithm "
            f"'{algorithm.value}'; use {expected.__name__}"
        )
    return options


# =============================================================================
# Numeric and date scorers
# =============================================================================


def parse_number(value: Any) -> float | None:
    """Parse the leading number of a value.

    Native ints and floats are taken as they are (non-finite ones give None).
    For anything else, everything except digits, ``.`` and ``-`` is dropped,
    then the longest leading decimal is read ("1.234,50 EUR" -> 1.23450,
    "12-34" -> 12).
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None

    cleaned = _NON_NUMERIC_RE.sub("", str(value))
    m = _LEADING_FLOAT_RE.match(cleaned)
    if not m:
        return None
    return float(m.group(0))


def numeric_similarity(value1: Any, value2: Any, tolerance: float = 0.0) -> float:
    """Relative-difference similarity with a tolerance band.

    ``percentDiff = |a - b| / ((|a| + |b|) / 2)``; within ``tolerance`` the
    values count as equal, otherwise the score is ``1 - percentDiff``
    floored at 0. Unparseable input scores 0.
    """
    num1 = parse_number(value1)
    num2 = parse_number(value2)

    if num1 is None or num2 is None:
        return 0.0
    if num1 == num2:
        return 1.0

    diff = abs(num1 - num2)
    avg = (abs(num1) + abs(num2)) / 2
    if avg == 0:
        return 0.0

    percent_diff = diff / avg
    if percent_diff <= tolerance:
        return 1.0
    return max(0.0, 1.0 - percent_diff)


def date_similarity(value1: Any, value2: Any) -> float:
    """Calendar proximity in discrete steps.

    Same instant or same calendar day scores 1.0, then 0.9 within a week,
    0.7 within 30 days, 0.5 within a year and 0.3 beyond. Unparseable
    dates score 0.
    """
    date1 = parse_timestamp(value1)
    date2 = parse_timestamp(value2)

    if date1 is None or date2 is None:
        return 0.0

    # Mixed naive/aware values: read the naive one as UTC
    if (date1.tzinfo is None) != (date2.tzinfo is None):
        if date1.tzinfo is None:
            date1 = date1.replace(tzinfo=UTC)
        else:
            date2 = date2.replace(tzinfo=UTC)

    if date1 == date2 or date1.date() == date2.date():
        return 1.0

    diff_days = abs((date1 - date2).total_seconds()) / 86400
    for max_days, score in DATE_STEPS:
        if diff_days <= max_days:
            return score
    return DATE_FALLBACK_SCORE


def composite_similarity(
    str1: str,
    str2: str,
    options: CompositeOptions | None = None,
) -> float:
    """Blend of Jaro-Winkler, Levenshtein and phonetic similarity.

    The three scores are ranked and weighted 0.5 / 0.3 / 0.2, best first.
    """
    opts = options or CompositeOptions()
    scores = sorted(
        (
            jaro_winkler_similarity(str1, str2, opts.case_sensitive, opts.normalize),
            levenshtein_similarity(str1, str2, opts.case_sensitive, opts.normalize),
            phonetic_similarity(str1, str2, opts.phonetic_algorithm),
        ),
        reverse=True,
    )
    return sum(weight * score for weight, score in zip(COMPOSITE_BLEND, scores))


# =============================================================================
# Dispatch
# =============================================================================

# Each scorer receives (raw1, raw2, str1, str2, options)
_Scorer = Callable[[Any, Any, str, str, Any], float]


def _exact(raw1: Any, raw2: Any, s1: str, s2: str, opts: ExactOptions) -> float:
    if opts.case_sensitive:
        return 1.0 if s1 == s2 else 0.0
    return 1.0 if fold_case(s1) == fold_case(s2) else 0.0


def _levenshtein(raw1: Any, raw2: Any, s1: str, s2: str, opts: TextOptions) -> float:
    return levenshtein_similarity(s1, s2, opts.case_sensitive, opts.normalize)


def _damerau(raw1: Any, raw2: Any, s1: str, s2: str, opts: TextOptions) -> float:
    return damerau_levenshtein_similarity(s1, s2, opts.case_sensitive, opts.normalize)


def _jaro_winkler(raw1: Any, raw2: Any, s1: str, s2: str, opts: TextOptions) -> float:
    return jaro_winkler_similarity(s1, s2, opts.case_sensitive, opts.normalize)


def _token_jaro(raw1: Any, raw2: Any, s1: str, s2: str, opts: TextOptions) -> float:
    return token_jaro_winkler(s1, s2, opts.case_sensitive, opts.normalize)


def _phonetic(raw1: Any, raw2: Any, s1: str, s2: str, opts: PhoneticOptions) -> float:
    return phonetic_similarity(s1, s2, opts.phonetic_algorithm)


def _token_phonetic(raw1: Any, raw2: Any, s1: str, s2: str, opts: PhoneticOptions) -> float:
    return token_phonetic_similarity(s1, s2, opts.phonetic_algorithm)


def _numeric(raw1: Any, raw2: Any, s1: str, s2: str, opts: NumericOptions) -> float:
    return numeric_similarity(raw1, raw2, opts.numeric_tolerance)


def _date(raw1: Any, raw2: Any, s1: str, s2: str, opts: DateOptions) -> float:
    return date_similarity(raw1, raw2)


def _composite(raw1: Any, raw2: Any, s1: str, s2: str, opts: CompositeOptions) -> float:
    return composite_similarity(s1, s2, opts)


SCORERS: dict[MatchAlgorithm, _Scorer] = {
    MatchAlgorithm.EXACT: _exact,
    MatchAlgorithm.LEVENSHTEIN: _levenshtein,
    MatchAlgorithm.DAMERAU: _damerau,
    MatchAlgorithm.JARO_WINKLER: _jaro_winkler,
    MatchAlgorithm.TOKEN_JARO: _token_jaro,
    MatchAlgorithm.PHONETIC: _phonetic,
    MatchAlgorithm.TOKEN_PHONETIC: _token_phonetic,
    MatchAlgorithm.NUMERIC: _numeric,
    MatchAlgorithm.DATE: _date,
    MatchAlgorithm.COMPOSITE: _composite,
}


def calculate_field_similarity(
    value1: Any,
    value2: Any,
    algorithm: MatchAlgorithm | str,
    options: MatchOptions | Mapping[str, Any] | None = None,
) -> float:
    """Score two field values with one algorithm.

    Args:
        value1: Value from the first record (None when missing)
        value2: Value from the second record (None when missing)
        algorithm: A ``MatchAlgorithm`` or its string value
        options: The algorithm's options model, a dict of its fields, or None

    Returns:
        Similarity in [0, 1]

    Raises:
        UnknownAlgorithmError: ``algorithm`` is not a ``MatchAlgorithm``
        InvalidOptionsError: ``options`` belongs to another algorithm
    """
    algo = resolve_match_algorithm(algorithm)
    opts = resolve_options(algo, options)

    if value1 is None:
        return 1.0 if value2 is None else 0.0
    if value2 is None:
        return 0.0

    str1 = str(value1)
    str2 = str(value2)
    if not str1 and not str2:
        return 1.0
    if not str1 or not str2:
        return 0.0

    return SCORERS[algo](value1, value2, str1, str2, opts)
