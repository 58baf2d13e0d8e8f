"""Typed data model for field and record matching.

Every algorithm has its own options type. ``FieldMatchConfig`` turns a plain
options dict into the options type of its algorithm, so a misspelled option
fails at setup time instead of quietly changing scores.
"""
from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializeAsAny,
    computed_field,
    model_validator,
)

from ..phonetic.scorer import PhoneticAlgorithm

# Field score at or above which a field counts toward confidence
HIGH_FIELD_SCORE = 0.8


# =============================================================================
# Enums
# =============================================================================


class MatchAlgorithm(str, Enum):
    """Similarity algorithm used for one field comparison."""

    EXACT = "exact"  # String equality
    LEVENSHTEIN = "levenshtein"  # Edit distance
    DAMERAU = "damerau"  # Edit distance with adjacent transpositions
    JARO_WINKLER = "jaro_winkler"  # Prefix-weighted, for short names
    TOKEN_JARO = "token_jaro"  # Word-aligned Jaro-Winkler
    PHONETIC = "phonetic"  # Phonetic code comparison
    TOKEN_PHONETIC = "token_phonetic"  # Word-aligned phonetic codes
    NUMERIC = "numeric"  # Relative difference with tolerance
    DATE = "date"  # Calendar proximity
    COMPOSITE = "composite"  # Blend of Jaro-Winkler, Levenshtein, phonetic


class MatchLevel(str, Enum):
    """Discrete classification of an overall score."""

    EXACT = "exact"  # >= 0.95
    HIGH = "high"  # 0.85-0.95
    MEDIUM = "medium"  # 0.70-0.85
    LOW = "low"  # 0.50-0.70
    NONE = "none"  # < 0.50


# =============================================================================
# Options
# =============================================================================


class MatchOptions(BaseModel):
    """Options shared by every algorithm."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    threshold: Annotated[float, Field(ge=0.0, le=1.0)] | None = Field(
        default=None,
        description="Minimum score for a required field (settings default otherwise)",
    )


class ExactOptions(MatchOptions):
    case_sensitive: bool = False


class TextOptions(MatchOptions):
    """Options for the edit-distance and Jaro-Winkler scorers."""

    case_sensitive: bool = False
    normalize: bool = Field(
        default=False,
        description="Strip accents and non-letters before comparing",
    )


class PhoneticOptions(MatchOptions):
    phonetic_algorithm: PhoneticAlgorithm = PhoneticAlgorithm.COLOGNE


class NumericOptions(MatchOptions):
    numeric_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        description="Relative difference still treated as equal (0.05 = 5%)",
    )


class DateOptions(MatchOptions):
    pass


class CompositeOptions(MatchOptions):
    case_sensitive: bool = False
    normalize: bool = False
    phonetic_algorithm: PhoneticAlgorithm = PhoneticAlgorithm.COLOGNE


OPTIONS_TYPES: dict[MatchAlgorithm, type[MatchOptions]] = {
    MatchAlgorithm.EXACT: ExactOptions,
    MatchAlgorithm.LEVENSHTEIN: TextOptions,
    MatchAlgorithm.DAMERAU: TextOptions,
    MatchAlgorithm.JARO_WINKLER: TextOptions,
    MatchAlgorithm.TOKEN_JARO: TextOptions,
    MatchAlgorithm.PHONETIC: PhoneticOptions,
    MatchAlgorithm.TOKEN_PHONETIC: PhoneticOptions,
    MatchAlgorithm.NUMERIC: NumericOptions,
    MatchAlgorithm.DATE: DateOptions,
    MatchAlgorithm.COMPOSITE: CompositeOptions,
}


# =============================================================================
# Field configuration
# =============================================================================


class FieldMatchConfig(BaseModel):
    """How one field contributes to a record comparison.

    Example:
        >>> FieldMatchConfig(
        ...     field="address.city",
        ...     weight=0.5,
        ...     algorithm="phonetic",
        ...     options={"phonetic_algorithm": "soundex"},
        ... )
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1, description="Dot-separated path into the record")
    weight: float = Field(gt=0.0, description="Relative weight in the overall score")
    algorithm: MatchAlgorithm
    options: SerializeAsAny[MatchOptions] = Field(default_factory=MatchOptions)
    required: bool = Field(
        default=False,
        description="Veto the whole comparison when this field falls below threshold",
    )
    exact_match_bonus: float | None = Field(
        default=None,
        gt=0.0,
        description="Extra weight share when the field scores exactly 1.0",
    )

    @model_validator(mode="before")
    @classmethod
    def coerce_options(cls, data: Any) -> Any:
        """Build the algorithm's own options type from a dict or None."""
        if not isinstance(data, Mapping):
            return data
        try:
            algorithm = MatchAlgorithm(data.get("algorithm"))
        except ValueError:
            # Reported by regular field validation
            return data

        options_type = OPTIONS_TYPES[algorithm]
        options = data.get("options")
        if options is None:
            return {**data, "options": options_type()}
        if isinstance(options, Mapping):
            return {**data, "options": options_type(**options)}
        return data

    @model_validator(mode="after")
    def validate_options_type(self) -> "FieldMatchConfig":
        """Options must belong to the configured algorithm."""
        expected = OPTIONS_TYPES[self.algorithm]
        if not isinstance(self.options, expected):
            raise ValueError(
                f"{type(self.options).__name__} does not apply to algorithm "
                f"'{self.algorithm.value}'; use {expected.__name__}"
            )
        return self


# =============================================================================
# Results
# =============================================================================


class MatchResult(BaseModel):
    """Outcome of comparing two records."""

    overall_score: Annotated[float, Field(ge=0.0, le=1.0)]
    field_scores: dict[str, float] = Field(default_factory=dict)
    match_level: MatchLevel
    confidence: Annotated[float, Field(ge=0.0, le=1.0)]
    flags: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def is_match(self) -> bool:
        """Whether the score reaches at least the ``low`` level."""
        return self.match_level != MatchLevel.NONE

    @computed_field
    @property
    def matched_fields(self) -> list[str]:
        """Fields that scored high enough to count toward confidence."""
        return [
            name for name, score in self.field_scores.items()
            if score >= HIGH_FIELD_SCORE
        ]

    @property
    def vetoed(self) -> bool:
        """Whether a required field forced the overall score to zero."""
        return any(flag.startswith("required_failed:") for flag in self.flags)


class RecordMatch(BaseModel):
    """One ranked candidate from ``find_matches``."""

    record: Any
    result: MatchResult


class DuplicatePair(BaseModel):
    """One ranked pair from ``find_duplicates``."""

    left_index: int = Field(ge=0)
    right_index: int = Field(ge=0)
    left: Any
    right: Any
    result: MatchResult
