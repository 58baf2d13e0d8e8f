"""Phonetic encoders and phonetic similarity.

- Cologne Phonetic: primary encoder, tuned for German/DACH names
- Soundex: classic American 4-character code
- Metaphone: simplified Double Metaphone for English spellings
"""

from .cologne import cologne_phonetic
from .metaphone import metaphone
from .scorer import (
    ENCODERS,
    PhoneticAlgorithm,
    PhoneticScorer,
    code_similarity,
    encode,
    phonetic_similarity,
    resolve_algorithm,
    token_phonetic_similarity,
)
from .soundex import soundex

__all__ = [
    # Encoders
    "cologne_phonetic",
    "soundex",
    "metaphone",
    "encode",
    "ENCODERS",
    # Similarity
    "PhoneticAlgorithm",
    "PhoneticScorer",
    "code_similarity",
    "phonetic_similarity",
    "resolve_algorithm",
    "token_phonetic_similarity",
]
