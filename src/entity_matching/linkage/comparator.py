"""Weighted record comparison, candidate search and duplicate discovery.

Comparison steps for each field config:
1. Resolve both values by dot path (missing segments give None)
2. Score them with the configured algorithm
3. Add ``weight * score`` to the weighted sum, or
   ``weight * (1 + exact_match_bonus)`` for a perfect score with a bonus
4. Veto the whole comparison if a required field is below its threshold

``find_duplicates`` compares every pair, O(n²). Callers with large inputs
should block records first (by postal code, phonetic code, ...) and call it
once per block.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from ..logging import get_logger
from ..settings import MatcherSettings
from .configs import EntityType, get_standard_config
from .field import calculate_field_similarity
from .models import (
    HIGH_FIELD_SCORE,
    DuplicatePair,
    FieldMatchConfig,
    MatchLevel,
    MatchResult,
    RecordMatch,
)

logger = get_logger(__name__)

MATCH_LEVEL_THRESHOLDS = (
    (0.95, MatchLevel.EXACT),
    (0.85, MatchLevel.HIGH),
    (0.70, MatchLevel.MEDIUM),
    (0.50, MatchLevel.LOW),
)

# Field score at or above which a ``high:<field>`` flag is raised
HIGH_FLAG_SCORE = 0.9

FieldConfigs = Iterable[FieldMatchConfig | Mapping[str, Any]]


def match_level_for(score: float) -> MatchLevel:
    """Map an overall score to a match level (lower bounds inclusive)."""
    for threshold, level in MATCH_LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return MatchLevel.NONE


def get_nested_value(record: Any, path: str) -> Any:
    """Resolve a dot-separated path in a record.

    Mappings are traversed by key, pydantic models and dataclasses by
    declared field. Any other value on the way (a string, a number, an
    undeclared attribute) ends the walk with None.
    """
    value = record
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        elif isinstance(value, BaseModel):
            value = getattr(value, part) if part in type(value).model_fields else None
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            names = {f.name for f in dataclasses.fields(value)}
            value = getattr(value, part) if part in names else None
        else:
            return None
    return value


def coerce_field_configs(field_configs: FieldConfigs) -> list[FieldMatchConfig]:
    """Validate field configs given as models or plain dicts."""
    return [
        c if isinstance(c, FieldMatchConfig) else FieldMatchConfig.model_validate(c)
        for c in field_configs
    ]


def _score_key(config: FieldMatchConfig, taken: Mapping[str, float]) -> str:
    """Key for ``field_scores``; repeated paths get the algorithm appended."""
    if config.field not in taken:
        return config.field
    key = f"{config.field}:{config.algorithm.value}"
    suffix = 2
    while key in taken:
        key = f"{config.field}:{config.algorithm.value}:{suffix}"
        suffix += 1
    return key


def compare_records(
    record1: Any,
    record2: Any,
    field_configs: FieldConfigs,
    settings: MatcherSettings | None = None,
) -> MatchResult:
    """Compare two records field by field.

    Args:
        record1: First record (mapping, pydantic model or dataclass)
        record2: Second record
        field_configs: Ordered field configurations
        settings: Defaults such as the required-field threshold

    Returns:
        MatchResult with overall score, per-field scores, level, confidence
        and flags
    """
    configs = coerce_field_configs(field_configs)
    settings = settings or MatcherSettings()

    field_scores: dict[str, float] = {}
    flags: list[str] = []
    total_weight = 0.0
    weighted_sum = 0.0
    high_fields = 0
    required_failed = False

    for config in configs:
        value1 = get_nested_value(record1, config.field)
        value2 = get_nested_value(record2, config.field)

        score = calculate_field_similarity(value1, value2, config.algorithm, config.options)

        key = _score_key(config, field_scores)
        field_scores[key] = score
        if score >= HIGH_FIELD_SCORE:
            high_fields += 1

        if score == 1.0 and config.exact_match_bonus:
            weighted_sum += config.weight * (1 + config.exact_match_bonus)
        else:
            weighted_sum += config.weight * score
        total_weight += config.weight

        if config.required:
            threshold = config.options.threshold
            if threshold is None:
                threshold = settings.required_threshold
            if score < threshold:
                required_failed = True
                flags.append(f"required_failed:{key}")
                logger.debug(
                    "linkage.required_veto", field=key, score=score, threshold=threshold
                )

        if score == 1.0:
            flags.append(f"exact:{key}")
        elif score >= HIGH_FLAG_SCORE:
            flags.append(f"high:{key}")

    if required_failed or total_weight == 0:
        overall_score = 0.0
    else:
        # The exact-match bonus can lift the mean above 1
        overall_score = min(1.0, weighted_sum / total_weight)

    confidence = high_fields / len(configs) if configs else 0.0

    return MatchResult(
        overall_score=overall_score,
        field_scores=field_scores,
        match_level=match_level_for(overall_score),
        confidence=confidence,
        flags=flags,
    )


def find_matches(
    target: Any,
    candidates: Iterable[Any],
    field_configs: FieldConfigs,
    min_score: float | None = None,
    settings: MatcherSettings | None = None,
) -> list[RecordMatch]:
    """Rank candidates against a target record.

    Returns:
        Candidates scoring at least ``min_score``, best first; ties keep
        their input order
    """
    configs = coerce_field_configs(field_configs)
    settings = settings or MatcherSettings()
    if min_score is None:
        min_score = settings.find_matches_min_score

    matches = [
        RecordMatch(record=candidate, result=compare_records(target, candidate, configs, settings))
        for candidate in candidates
    ]
    matches = [m for m in matches if m.result.overall_score >= min_score]
    matches.sort(key=lambda m: m.result.overall_score, reverse=True)
    return matches


def find_duplicates(
    records: Sequence[Any],
    field_configs: FieldConfigs,
    min_score: float | None = None,
    settings: MatcherSettings | None = None,
) -> list[DuplicatePair]:
    """Compare every pair of records and return the likely duplicates.

    Every ``i < j`` pair is compared; nothing is blocked or indexed.

    Returns:
        Pairs scoring at least ``min_score``, best first; ties keep pair
        order, so repeated runs over the same input agree
    """
    configs = coerce_field_configs(field_configs)
    settings = settings or MatcherSettings()
    if min_score is None:
        min_score = settings.find_duplicates_min_score

    records = list(records)
    duplicates: list[DuplicatePair] = []
    compared = 0

    for i in range(len(records)):
        for j in range(i + 1, len(records)):
            result = compare_records(records[i], records[j], configs, settings)
            compared += 1
            if result.overall_score >= min_score:
                duplicates.append(DuplicatePair(
                    left_index=i,
                    right_index=j,
                    left=records[i],
                    right=records[j],
                    result=result,
                ))

    duplicates.sort(key=lambda d: d.result.overall_score, reverse=True)
    logger.debug(
        "linkage.duplicate_scan",
        records=len(records),
        pairs_compared=compared,
        duplicates=len(duplicates),
        min_score=min_score,
    )
    return duplicates


class CompositeScorer:
    """Record comparator bound to one list of field configurations.

    Field configs are validated once here instead of on every comparison.
    The scorer holds no mutable state.

    Example:
        >>> scorer = create_company_scorer()
        >>> result = scorer.compare(
        ...     {"name": "Müller GmbH", "vatId": "DE123456789"},
        ...     {"name": "Mueller GmbH", "vatId": "DE123456789"},
        ... )
        >>> result.match_level
        <MatchLevel.EXACT: 'exact'>
    """

    def __init__(
        self,
        field_configs: FieldConfigs,
        settings: MatcherSettings | None = None,
    ) -> None:
        self._field_configs = tuple(coerce_field_configs(field_configs))
        self.settings = settings or MatcherSettings()

    @property
    def field_configs(self) -> tuple[FieldMatchConfig, ...]:
        return self._field_configs

    def compare(self, record1: Any, record2: Any) -> MatchResult:
        return compare_records(record1, record2, self._field_configs, self.settings)

    def find_matches(
        self,
        target: Any,
        candidates: Iterable[Any],
        min_score: float | None = None,
    ) -> list[RecordMatch]:
        return find_matches(target, candidates, self._field_configs, min_score, self.settings)

    def find_duplicates(
        self,
        records: Sequence[Any],
        min_score: float | None = None,
    ) -> list[DuplicatePair]:
        return find_duplicates(records, self._field_configs, min_score, self.settings)


def create_composite_scorer(
    field_configs: FieldConfigs,
    settings: MatcherSettings | None = None,
) -> CompositeScorer:
    return CompositeScorer(field_configs, settings)


def create_person_scorer(settings: MatcherSettings | None = None) -> CompositeScorer:
    return CompositeScorer(get_standard_config(EntityType.PERSON), settings)


def create_company_scorer(settings: MatcherSettings | None = None) -> CompositeScorer:
    return CompositeScorer(get_standard_config(EntityType.COMPANY), settings)


def create_address_scorer(settings: MatcherSettings | None = None) -> CompositeScorer:
    return CompositeScorer(get_standard_config(EntityType.ADDRESS), settings)


def create_product_scorer(settings: MatcherSettings | None = None) -> CompositeScorer:
    return CompositeScorer(get_standard_config(EntityType.PRODUCT), settings)
