"""Entity Matching - fuzzy record linkage and deduplication.

Compares business records (people, companies, addresses, products) that may
describe the same real-world entity despite typos, spelling variants,
transliterations and formatting differences.
"""

__version__ = "0.1.0"

from .exceptions import (
    ConfigurationError,
    EntityMatchingError,
    InvalidOptionsError,
    UnknownAlgorithmError,
    UnknownEntityTypeError,
)
from .linkage import (
    CompositeScorer,
    EntityType,
    FieldMatchConfig,
    MatchAlgorithm,
    MatchLevel,
    MatchResult,
    calculate_field_similarity,
    compare_records,
    create_address_scorer,
    create_company_scorer,
    create_composite_scorer,
    create_person_scorer,
    create_product_scorer,
    find_duplicates,
    find_matches,
    get_standard_config,
)
from .logging import configure_logging, get_logger
from .phonetic import PhoneticAlgorithm, cologne_phonetic, metaphone, soundex
from .settings import MatcherSettings

__all__ = [
    "__version__",
    # Errors
    "EntityMatchingError",
    "ConfigurationError",
    "UnknownAlgorithmError",
    "InvalidOptionsError",
    "UnknownEntityTypeError",
    # Matching
    "CompositeScorer",
    "EntityType",
    "FieldMatchConfig",
    "MatchAlgorithm",
    "MatchLevel",
    "MatchResult",
    "MatcherSettings",
    "calculate_field_similarity",
    "compare_records",
    "find_duplicates",
    "find_matches",
    "get_standard_config",
    "create_address_scorer",
    "create_company_scorer",
    "create_composite_scorer",
    "create_person_scorer",
    "create_product_scorer",
    # Phonetics
    "PhoneticAlgorithm",
    "cologne_phonetic",
    "metaphone",
    "soundex",
    # Logging
    "configure_logging",
    "get_logger",
]
