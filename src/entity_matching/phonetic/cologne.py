"""Cologne Phonetic (Kölner Phonetik).

German phonetic algorithm, a better fit for DACH-region names than Soundex.
Letters map to digits with context rules for C, D/T, P and X; repeated digits
collapse, then every 0 is dropped.

Examples:
    cologne_phonetic("Schmidt") -> "862"
    cologne_phonetic("Schmitt") -> "862"  # Same as Schmidt
    cologne_phonetic("Meyer")   -> "67"
    cologne_phonetic("Maier")   -> "67"   # Same as Meyer
    cologne_phonetic("Aue")     -> "0"    # Vowels only
    cologne_phonetic("")        -> ""     # No signal
"""
from __future__ import annotations

from ..utils.normalize import normalize

# H is silent and has no entry
_SIMPLE_CODES = {
    **dict.fromkeys("AEIOUJY", "0"),
    "B": "1",
    **dict.fromkeys("FVW", "3"),
    **dict.fromkeys("GKQ", "4"),
    "L": "5",
    **dict.fromkeys("MN", "6"),
    "R": "7",
    **dict.fromkeys("SZ", "8"),
}

_C_HARD_AT_START = frozenset("AHKLOQRUX")
_C_HARD = frozenset("AHKOQUX")
_DT_SIBILANT_NEXT = frozenset("CSZ")
_X_SOFT_PREV = frozenset("CKQ")


def _letter_code(s: str, i: int) -> str:
    char = s[i]
    prev = s[i - 1] if i > 0 else ""
    next_ = s[i + 1] if i < len(s) - 1 else ""

    if char == "P":
        return "3" if next_ == "H" else "1"

    if char in "DT":
        return "8" if next_ in _DT_SIBILANT_NEXT else "2"

    if char == "C":
        if i == 0:
            return "4" if next_ in _C_HARD_AT_START else "8"
        if prev in "SZ":
            return "8"
        return "4" if next_ in _C_HARD else "8"

    if char == "X":
        return "8" if prev in _X_SOFT_PREV else "48"

    return _SIMPLE_CODES.get(char, "")


def cologne_phonetic(text: str | None) -> str:
    """Encode text with the Cologne Phonetic algorithm.

    Args:
        text: Name or word to encode

    Returns:
        Digit string; "" for input without letters, "0" when only vowels remain
    """
    s = normalize(text, umlauts=True)
    if not s:
        return ""

    digits = "".join(_letter_code(s, i) for i in range(len(s)))

    collapsed: list[str] = []
    for digit in digits:
        if not collapsed or collapsed[-1] != digit:
            collapsed.append(digit)

    without_zeros = "".join(d for d in collapsed if d != "0")
    return without_zeros or "0"
