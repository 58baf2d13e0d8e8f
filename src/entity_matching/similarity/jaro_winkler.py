"""Jaro-Winkler similarity scorers.

``jaro_winkler_similarity`` is the classic metric: matching window of
``max(len)//2 - 1``, halved transpositions, and a Winkler prefix bonus of
0.1 per shared leading character (at most 4). The bonus is applied at every
Jaro level, without a boost threshold.

``token_jaro_winkler`` is meant for multi-word values (company names,
streets) where word order or an extra middle word should not sink the score.
"""
from __future__ import annotations

from ..utils.normalize import prepare_text, tokenize
from .edit_distance import _empty_pair_score

PREFIX_SCALE = 0.1
MAX_PREFIX = 4


def jaro_similarity(s1: str, s2: str) -> float:
    """Jaro similarity of two already-prepared strings."""
    empty = _empty_pair_score(s1, s2)
    if empty is not None:
        return empty

    if s1 == s2:
        return 1.0

    len1, len2 = len(s1), len(s2)
    match_distance = max(0, max(len1, len2) // 2 - 1)

    s1_matches = [False] * len1
    s2_matches = [False] * len2
    matches = 0
    transpositions = 0

    for i in range(len1):
        start = max(0, i - match_distance)
        end = min(i + match_distance + 1, len2)

        for j in range(start, end):
            if s2_matches[j] or s1[i] != s2[j]:
                continue
            s1_matches[i] = True
            s2_matches[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    k = 0
    for i in range(len1):
        if not s1_matches[i]:
            continue
        while not s2_matches[k]:
            k += 1
        if s1[i] != s2[k]:
            transpositions += 1
        k += 1

    return (
        matches / len1 +
        matches / len2 +
        (matches - transpositions / 2) / matches
    ) / 3


def _winkler(jaro: float, s1: str, s2: str) -> float:
    prefix = 0
    for i in range(min(len(s1), len(s2), MAX_PREFIX)):
        if s1[i] == s2[i]:
            prefix += 1
        else:
            break

    return min(1.0, jaro + prefix * PREFIX_SCALE * (1 - jaro))


def jaro_winkler_similarity(
    a: str,
    b: str,
    case_sensitive: bool = False,
    normalize: bool = False,
) -> float:
    """Jaro-Winkler similarity in [0, 1]; 1.0 only for identical strings."""
    s1 = prepare_text(a or "", case_sensitive, normalize)
    s2 = prepare_text(b or "", case_sensitive, normalize)

    jaro = jaro_similarity(s1, s2)
    if jaro in (0.0, 1.0):
        return jaro
    return _winkler(jaro, s1, s2)


def token_jaro_winkler(
    a: str,
    b: str,
    case_sensitive: bool = False,
    normalize: bool = False,
) -> float:
    """Greedy one-to-one token alignment scored by Jaro-Winkler.

    Each token of ``a`` takes its best-scoring unused token of ``b``. The
    matched scores are summed and divided by the larger token count, so an
    unmatched extra word costs a share of the score rather than all of it.
    """
    tokens1 = tokenize(a)
    tokens2 = tokenize(b)

    if not tokens1 and not tokens2:
        return 1.0
    if not tokens1 or not tokens2:
        return 0.0

    used: set[int] = set()
    total = 0.0

    for token in tokens1:
        best_score = 0.0
        best_index = -1
        for j, candidate in enumerate(tokens2):
            if j in used:
                continue
            score = jaro_winkler_similarity(token, candidate, case_sensitive, normalize)
            if score > best_score:
                best_score = score
                best_index = j
        if best_index >= 0:
            used.add(best_index)
            total += best_score

    return total / max(len(tokens1), len(tokens2))
