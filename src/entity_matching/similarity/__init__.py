"""String similarity scorers (edit distance and Jaro-Winkler)."""

from .edit_distance import (
    damerau_levenshtein_distance,
    damerau_levenshtein_similarity,
    levenshtein_distance,
    levenshtein_similarity,
)
from .jaro_winkler import (
    jaro_similarity,
    jaro_winkler_similarity,
    token_jaro_winkler,
)

__all__ = [
    "damerau_levenshtein_distance",
    "damerau_levenshtein_similarity",
    "levenshtein_distance",
    "levenshtein_similarity",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "token_jaro_winkler",
]
