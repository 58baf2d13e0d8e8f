"""American Soundex.

Examples:
    soundex("Robert") -> "R163"
    soundex("Rupert") -> "R163"  # Same as Robert
    soundex("Tymczak") -> "T522"
    soundex("") -> ""
"""
from __future__ import annotations

from ..utils.normalize import normalize

SOUNDEX_MAP = {
    **dict.fromkeys("BFPV", "1"),
    **dict.fromkeys("CGJKQSXZ", "2"),
    **dict.fromkeys("DT", "3"),
    "L": "4",
    **dict.fromkeys("MN", "5"),
    "R": "6",
    # A, E, I, O, U, H, W, Y are not coded
}

SOUNDEX_LENGTH = 4


def soundex(text: str | None) -> str:
    """Generate the 4-character Soundex code for a name.

    The first letter is kept verbatim. Uncoded letters (vowels, H, W, Y)
    reset the duplicate tracker, so a consonant repeated across them is
    coded again.

    Args:
        text: Name to encode

    Returns:
        Letter plus three digits, zero padded; "" for input without letters
    """
    s = normalize(text)
    if not s:
        return ""

    code = s[0]
    last = SOUNDEX_MAP.get(s[0], "")

    for char in s[1:]:
        if len(code) >= SOUNDEX_LENGTH:
            break
        digit = SOUNDEX_MAP.get(char)
        if digit is None:
            last = ""
        elif digit != last:
            code += digit
            last = digit

    return code.ljust(SOUNDEX_LENGTH, "0")
