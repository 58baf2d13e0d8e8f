"""Phonetic similarity on top of the three encoders.

Equal codes score 1.0. Unequal codes fall back to a positional comparison
of the codes: matching positions over the longer code, plus a small bonus
for a shared prefix.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable

from ..exceptions import ConfigurationError, UnknownAlgorithmError
from ..utils.normalize import tokenize
from .cologne import cologne_phonetic
from .metaphone import metaphone
from .soundex import soundex

PREFIX_BONUS = 0.1


class PhoneticAlgorithm(str, Enum):
    """Phonetic encoder used for a comparison."""

    COLOGNE = "cologne"  # Kölner Phonetik, default for DACH names
    SOUNDEX = "soundex"
    METAPHONE = "metaphone"
    ALL = "all"  # Mean of the three similarities


ENCODERS: dict[PhoneticAlgorithm, Callable[[str], str]] = {
    PhoneticAlgorithm.COLOGNE: cologne_phonetic,
    PhoneticAlgorithm.SOUNDEX: soundex,
    PhoneticAlgorithm.METAPHONE: metaphone,
}

_SINGLE_ALGORITHMS = tuple(ENCODERS)


def resolve_algorithm(algorithm: PhoneticAlgorithm | str) -> PhoneticAlgorithm:
    """Coerce an identifier to ``PhoneticAlgorithm`` or raise."""
    try:
        return PhoneticAlgorithm(algorithm)
    except ValueError:
        raise UnknownAlgorithmError(
            algorithm, [a.value for a in PhoneticAlgorithm]
        ) from None


def encode(text: str | None, algorithm: PhoneticAlgorithm | str = PhoneticAlgorithm.COLOGNE) -> str:
    """Encode text with the named phonetic algorithm."""
    algo = resolve_algorithm(algorithm)
    if algo is PhoneticAlgorithm.ALL:
        raise ConfigurationError(
            "phonetic algorithm 'all' blends similarities and has no single code"
        )
    return ENCODERS[algo](text)


def code_similarity(code1: str, code2: str) -> float:
    """Similarity of two phonetic codes in [0, 1].

    ``matches / maxLen`` counts equal characters at equal positions; the
    bonus is ``0.1 * sharedPrefix / minLen``. Capped at 1.0.
    """
    if code1 == code2:
        return 1.0
    if not code1 or not code2:
        return 0.0

    max_len = max(len(code1), len(code2))
    min_len = min(len(code1), len(code2))

    matches = sum(1 for i in range(min_len) if code1[i] == code2[i])

    prefix = 0
    for i in range(min_len):
        if code1[i] != code2[i]:
            break
        prefix += 1

    bonus = PREFIX_BONUS * (prefix / min_len) if prefix else 0.0
    return min(1.0, matches / max_len + bonus)


def phonetic_similarity(
    a: str | None,
    b: str | None,
    algorithm: PhoneticAlgorithm | str = PhoneticAlgorithm.COLOGNE,
) -> float:
    """Phonetic similarity of two strings in [0, 1].

    Args:
        a: First string
        b: Second string
        algorithm: Encoder to use; ``all`` averages cologne, soundex and metaphone

    Returns:
        1.0 when the codes are equal, else the code similarity
    """
    algo = resolve_algorithm(algorithm)

    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    if algo is PhoneticAlgorithm.ALL:
        return sum(phonetic_similarity(a, b, single) for single in _SINGLE_ALGORITHMS) / 3

    encoder = ENCODERS[algo]
    return code_similarity(encoder(a), encoder(b))


def token_phonetic_similarity(
    a: str | None,
    b: str | None,
    algorithm: PhoneticAlgorithm | str = PhoneticAlgorithm.COLOGNE,
) -> float:
    """Share of tokens that find a phonetically identical partner.

    Each token of ``b`` can be claimed once. The number of matched tokens is
    divided by the larger token count.
    """
    algo = resolve_algorithm(algorithm)

    tokens1 = tokenize(a)
    tokens2 = tokenize(b)

    if not tokens1 and not tokens2:
        return 1.0
    if not tokens1 or not tokens2:
        return 0.0

    if algo is PhoneticAlgorithm.ALL:
        return sum(token_phonetic_similarity(a, b, single) for single in _SINGLE_ALGORITHMS) / 3

    encoder = ENCODERS[algo]
    codes1 = [encoder(t) for t in tokens1]
    codes2 = [encoder(t) for t in tokens2]

    used: set[int] = set()
    matches = 0
    for code in codes1:
        for j, other in enumerate(codes2):
            if j in used or code != other:
                continue
            used.add(j)
            matches += 1
            break

    return matches / max(len(tokens1), len(tokens2))


class PhoneticScorer:
    """Phonetic comparisons bound to one algorithm.

    Holds nothing but the algorithm choice, so one instance can be shared
    freely between threads.

    Example:
        >>> scorer = PhoneticScorer("cologne")
        >>> scorer.matches("Meyer", "Maier")
        True
    """

    def __init__(self, algorithm: PhoneticAlgorithm | str = PhoneticAlgorithm.COLOGNE) -> None:
        self.algorithm = resolve_algorithm(algorithm)

    def score(self, a: str | None, b: str | None) -> float:
        return phonetic_similarity(a, b, self.algorithm)

    def token_score(self, a: str | None, b: str | None) -> float:
        return token_phonetic_similarity(a, b, self.algorithm)

    def encode(self, text: str | None) -> str:
        return encode(text, self.algorithm)

    def matches(self, a: str | None, b: str | None) -> bool:
        """Whether both inputs share a phonetic code."""
        return self.encode(a) == self.encode(b)
