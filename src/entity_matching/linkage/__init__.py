"""Weighted record linkage: field scoring, record comparison, deduplication.

Key Components:
- calculate_field_similarity: one field, one algorithm
- compare_records: weighted comparison with required-field veto
- find_matches / find_duplicates: ranked candidate search and pairwise dedupe
- CompositeScorer: the three operations bound to one field configuration
- STANDARD_MATCH_CONFIGS: ready-made person, company, address, product configs

Example:
    >>> from entity_matching.linkage import create_person_scorer
    >>>
    >>> scorer = create_person_scorer()
    >>> result = scorer.compare(
    ...     {"firstName": "Hans", "lastName": "Meyer"},
    ...     {"firstName": "Hans", "lastName": "Maier"},
    ... )
    >>> result.is_match
    True
"""
from .models import (
    HIGH_FIELD_SCORE,
    OPTIONS_TYPES,
    CompositeOptions,
    DateOptions,
    DuplicatePair,
    ExactOptions,
    FieldMatchConfig,
    MatchAlgorithm,
    MatchLevel,
    MatchOptions,
    MatchResult,
    NumericOptions,
    PhoneticOptions,
    RecordMatch,
    TextOptions,
)
from .configs import (
    STANDARD_MATCH_CONFIGS,
    EntityType,
    get_standard_config,
)
from .field import (
    SCORERS,
    calculate_field_similarity,
    composite_similarity,
    date_similarity,
    numeric_similarity,
    parse_number,
)
from .comparator import (
    MATCH_LEVEL_THRESHOLDS,
    CompositeScorer,
    compare_records,
    create_address_scorer,
    create_company_scorer,
    create_composite_scorer,
    create_person_scorer,
    create_product_scorer,
    find_duplicates,
    find_matches,
    get_nested_value,
    match_level_for,
)

__all__ = [
    # Models - Enums
    "MatchAlgorithm",
    "MatchLevel",
    "EntityType",
    # Models - Options
    "MatchOptions",
    "ExactOptions",
    "TextOptions",
    "PhoneticOptions",
    "NumericOptions",
    "DateOptions",
    "CompositeOptions",
    "OPTIONS_TYPES",
    # Models - Config and results
    "FieldMatchConfig",
    "MatchResult",
    "RecordMatch",
    "DuplicatePair",
    "HIGH_FIELD_SCORE",
    # Field scoring
    "SCORERS",
    "calculate_field_similarity",
    "composite_similarity",
    "date_similarity",
    "numeric_similarity",
    "parse_number",
    # Record comparison
    "MATCH_LEVEL_THRESHOLDS",
    "CompositeScorer",
    "compare_records",
    "find_duplicates",
    "find_matches",
    "get_nested_value",
    "match_level_for",
    # Standard configs
    "STANDARD_MATCH_CONFIGS",
    "get_standard_config",
    "create_address_scorer",
    "create_company_scorer",
    "create_composite_scorer",
    "create_person_scorer",
    "create_product_scorer",
]
