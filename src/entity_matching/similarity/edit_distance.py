"""Edit-distance similarity scorers.

Both scorers turn a distance ``d`` into ``1 - d / max(len(a), len(b))``.
Damerau-Levenshtein uses the optimal string alignment variant, so a swap of
two adjacent characters costs one edit instead of two.
"""
from __future__ import annotations

from rapidfuzz.distance import OSA, Levenshtein

from ..utils.normalize import prepare_text


def _empty_pair_score(a: str, b: str) -> float | None:
    """Score for pairs where at least one side is empty, else None."""
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return None


def _distance_to_similarity(distance: int, a: str, b: str) -> float:
    return 1.0 - distance / max(len(a), len(b))


def levenshtein_distance(a: str, b: str) -> int:
    """Insert/delete/substitute edit distance."""
    return Levenshtein.distance(a, b)


def damerau_levenshtein_distance(a: str, b: str) -> int:
    """Edit distance that also counts adjacent transpositions as one edit."""
    return OSA.distance(a, b)


def levenshtein_similarity(
    a: str,
    b: str,
    case_sensitive: bool = False,
    normalize: bool = False,
) -> float:
    """Levenshtein similarity in [0, 1].

    Args:
        a: First string
        b: Second string
        case_sensitive: Compare without case folding
        normalize: Run the text normalizer on both sides first

    Returns:
        1.0 for identical strings, 0.0 when nothing survives the edit
    """
    a = prepare_text(a or "", case_sensitive, normalize)
    b = prepare_text(b or "", case_sensitive, normalize)

    empty = _empty_pair_score(a, b)
    if empty is not None:
        return empty
    return _distance_to_similarity(levenshtein_distance(a, b), a, b)


def damerau_levenshtein_similarity(
    a: str,
    b: str,
    case_sensitive: bool = False,
    normalize: bool = False,
) -> float:
    """Damerau-Levenshtein (OSA) similarity in [0, 1]."""
    a = prepare_text(a or "", case_sensitive, normalize)
    b = prepare_text(b or "", case_sensitive, normalize)

    empty = _empty_pair_score(a, b)
    if empty is not None:
        return empty
    return _distance_to_similarity(damerau_levenshtein_distance(a, b), a, b)
