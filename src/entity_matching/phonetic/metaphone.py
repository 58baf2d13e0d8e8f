"""Simplified Metaphone (a Double Metaphone subset).

Handles the common English spelling clusters: silent initial letters,
CH/SH/PH/TH digraphs, soft C and G, DGE, TIO/TIA, and doubled letters.
TH is written as the symbol "0"; it is an ordinary output character and
has nothing to do with the digits used by Cologne Phonetic.

Examples:
    metaphone("Knuth")   -> "N0"
    metaphone("Thomas")  -> "0MS"
    metaphone("Philipp") -> "FLP"
"""
from __future__ import annotations

from ..utils.normalize import normalize

MAX_CODE_LENGTH = 8
VOWELS = "AEIOU"

# Letters that emit themselves and swallow an immediate repeat
_PLAIN = {"F": "F", "J": "J", "K": "K", "L": "L", "M": "M", "N": "N", "R": "R"}
# Letters that emit a substitute and swallow an immediate repeat
_SUBSTITUTE = {"B": "P", "V": "F", "X": "KS", "Z": "S"}


def _rewrite_initial(s: str) -> str:
    if s[:2] in ("KN", "GN", "PN", "WR"):
        return s[1:]
    if s.startswith("AE"):
        return "E" + s[2:]
    if s.startswith("X"):
        return "S" + s[1:]
    if s.startswith("WH"):
        return "W" + s[2:]
    return s


def metaphone(text: str | None) -> str:
    """Generate a simplified Metaphone code.

    Args:
        text: Name or word to encode

    Returns:
        Code of at most 8 characters; "" for input without letters
    """
    s = normalize(text)
    if not s:
        return ""

    s = _rewrite_initial(s)
    length = len(s)
    out: list[str] = []
    i = 0

    while i < length and len(out) < MAX_CODE_LENGTH:
        char = s[i]
        prev = s[i - 1] if i > 0 else ""
        next_ = s[i + 1] if i + 1 < length else ""
        next2 = s[i + 2] if i + 2 < length else ""

        if char in VOWELS:
            if i == 0:
                out.append(char)

        elif char in _PLAIN or char in _SUBSTITUTE:
            out.append(_PLAIN.get(char) or _SUBSTITUTE[char])
            if next_ == char:
                i += 1

        elif char == "C":
            if next_ == "H":
                out.append("X")
                i += 1
            elif next_ in ("I", "E", "Y"):
                out.append("S")
            else:
                out.append("K")
                if next_ in ("C", "K"):
                    i += 1

        elif char == "D":
            if next_ == "G" and next2 in ("E", "I", "Y"):
                out.append("J")
                i += 2
            else:
                out.append("T")
                if next_ == "D":
                    i += 1

        elif char == "G":
            if next_ == "H":
                # Silent after a consonant, hard otherwise
                if not (i > 0 and prev not in VOWELS):
                    out.append("K")
                i += 1
            elif next_ == "N":
                # Trailing GN is silent
                if i != length - 2:
                    out.append("KN")
                i += 1
            elif next_ in ("E", "I", "Y"):
                out.append("J")
            else:
                out.append("K")
                if next_ == "G":
                    i += 1

        elif char == "H":
            if (i == 0 or prev not in VOWELS) and next_ and next_ in VOWELS:
                out.append("H")

        elif char == "P":
            if next_ == "H":
                out.append("F")
                i += 1
            else:
                out.append("P")
                if next_ == "P":
                    i += 1

        elif char == "Q":
            out.append("K")

        elif char == "S":
            if next_ == "H":
                out.append("X")
                i += 1
            elif next_ == "I" and next2 in ("O", "A"):
                out.append("X")
            else:
                out.append("S")
                if next_ == "S":
                    i += 1

        elif char == "T":
            if next_ == "H":
                out.append("0")
                i += 1
            elif next_ == "I" and next2 in ("O", "A"):
                out.append("X")
            else:
                out.append("T")
                if next_ == "T":
                    i += 1

        elif char in ("W", "Y"):
            if next_ and next_ in VOWELS:
                out.append(char)

        i += 1

    return "".join(out)[:MAX_CODE_LENGTH]
