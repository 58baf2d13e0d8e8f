"""Tests for single-field similarity and field configuration."""
from __future__ import annotations

from datetime import UTC, date, datetime

import pytest
from pydantic import ValidationError

from entity_matching.exceptions import InvalidOptionsError, UnknownAlgorithmError
from entity_matching.linkage import (
    OPTIONS_TYPES,
    SCORERS,
    CompositeOptions,
    ExactOptions,
    FieldMatchConfig,
    MatchAlgorithm,
    NumericOptions,
    PhoneticOptions,
    TextOptions,
    calculate_field_similarity,
    composite_similarity,
    date_similarity,
    numeric_similarity,
    parse_number,
)


class TestDispatch:
    """Tests for algorithm dispatch."""

    def test_every_algorithm_has_a_scorer(self):
        assert set(SCORERS) == set(MatchAlgorithm)
        assert set(OPTIONS_TYPES) == set(MatchAlgorithm)

    @pytest.mark.parametrize("algorithm", list(MatchAlgorithm))
    def test_identical_values_score_one(self, algorithm):
        value = "1990-04-12" if algorithm is MatchAlgorithm.DATE else "4711"
        assert calculate_field_similarity(value, value, algorithm) == pytest.approx(1.0)

    def test_accepts_string_identifier(self):
        assert calculate_field_similarity("Meyer", "Maier", "phonetic") == 1.0

    def test_unknown_algorithm(self):
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            calculate_field_similarity("a", "b", "fuzzy")
        assert "jaro_winkler" in str(exc_info.value)

    def test_unknown_algorithm_raised_before_missing_values(self):
        with pytest.raises(UnknownAlgorithmError):
            calculate_field_similarity(None, None, "fuzzy")


class TestMissingValues:
    """Tests for None and empty handling."""

    @pytest.mark.parametrize("algorithm", list(MatchAlgorithm))
    def test_both_missing(self, algorithm):
        assert calculate_field_similarity(None, None, algorithm) == 1.0

    @pytest.mark.parametrize("algorithm", list(MatchAlgorithm))
    def test_one_missing(self, algorithm):
        assert calculate_field_similarity("x", None, algorithm) == 0.0
        assert calculate_field_similarity(None, "x", algorithm) == 0.0

    def test_both_empty(self):
        assert calculate_field_similarity("", "", MatchAlgorithm.NUMERIC) == 1.0

    def test_one_empty(self):
        assert calculate_field_similarity("", "Meyer", MatchAlgorithm.JARO_WINKLER) == 0.0


class TestOptions:
    """Tests for per-algorithm options."""

    def test_exact_case_handling(self):
        assert calculate_field_similarity("A@B.DE", "a@b.de", MatchAlgorithm.EXACT) == 1.0
        opts = ExactOptions(case_sensitive=True)
        assert calculate_field_similarity("A@B.DE", "a@b.de", MatchAlgorithm.EXACT, opts) == 0.0

    def test_dict_options(self):
        score = calculate_field_similarity(
            "100", "104", "numeric", {"numeric_tolerance": 0.05}
        )
        assert score == 1.0

    def test_misspelled_option_rejected(self):
        with pytest.raises(InvalidOptionsError):
            calculate_field_similarity("a", "b", "exact", {"case_sensitiv": True})

    def test_wrong_options_type_rejected(self):
        with pytest.raises(InvalidOptionsError):
            calculate_field_similarity("a", "b", "exact", NumericOptions())

    def test_phonetic_algorithm_option(self):
        opts = PhoneticOptions(phonetic_algorithm="soundex")
        assert calculate_field_similarity("Robert", "Rupert", "phonetic", opts) == 1.0


class TestNumericSimilarity:
    """Tests for relative-difference numeric scoring."""

    def test_parse_number(self):
        assert parse_number("1.234,50 EUR") == pytest.approx(1.2345)
        assert parse_number("12-34") == 12.0
        assert parse_number(-5) == -5.0
        assert parse_number("n/a") is None

    def test_parse_native_numbers(self):
        """Floats printed in exponent form are read as numbers, not digit strings."""
        assert parse_number(1e-05) == 1e-05
        assert parse_number(2e16) == 2e16
        assert parse_number(float("nan")) is None
        assert parse_number(True) is None

    def test_equal(self):
        assert numeric_similarity("42", 42) == 1.0

    def test_relative_difference(self):
        assert numeric_similarity(100, 105) == pytest.approx(1 - 5 / 102.5)

    def test_tolerance(self):
        assert numeric_similarity(100, 105, tolerance=0.05) == 1.0

    def test_floored_at_zero(self):
        assert numeric_similarity(0, 5) == 0.0

    def test_unparseable(self):
        assert numeric_similarity("abc", "1") == 0.0

    def test_phone_formatting_ignored(self):
        assert numeric_similarity("030 1234-56", "030123456") < 1.0
        assert numeric_similarity("030/123456", "030 123 456") == 1.0

    @pytest.mark.parametrize(
        "native,text",
        [(1e-05, "0.00001"), (2e16, "20000000000000000"), (42, "42.0")],
    )
    def test_native_float_equals_its_decimal_text(self, native, text):
        assert numeric_similarity(native, text) == 1.0
        assert calculate_field_similarity(native, text, MatchAlgorithm.NUMERIC) == 1.0


class TestDateSimilarity:
    """Tests for stepped date proximity."""

    @pytest.mark.parametrize(
        "other,expected",
        [
            ("1980-01-01", 1.0),
            ("1980-01-05", 0.9),
            ("1980-01-20", 0.7),
            ("1980-06-01", 0.5),
            ("1985-01-01", 0.3),
        ],
    )
    def test_steps(self, other, expected):
        assert date_similarity("1980-01-01", other) == expected

    def test_same_day_different_time(self):
        assert date_similarity("1980-01-01T08:00", "1980-01-01T22:00") == 1.0

    def test_mixed_formats(self):
        assert date_similarity("9 JUN 1932", date(1932, 6, 9)) == 1.0

    def test_naive_and_aware(self):
        naive = datetime(2020, 1, 1, 12)
        aware = datetime(2020, 1, 3, 12, tzinfo=UTC)
        assert date_similarity(naive, aware) == 0.9

    def test_unparseable(self):
        assert date_similarity("yesterday", "1980-01-01") == 0.0


class TestCompositeSimilarity:
    """Tests for the blended scorer."""

    def test_identical(self):
        assert composite_similarity("Schmidt", "Schmidt") == pytest.approx(1.0)

    def test_best_score_weighted_highest(self):
        # Phonetic 1.0 ranks first, the weaker string scores follow
        score = composite_similarity("Meyer", "Maier")
        assert 0.5 < score < 1.0

    def test_options(self):
        opts = CompositeOptions(case_sensitive=True)
        assert composite_similarity("ABC", "abc", opts) < composite_similarity("ABC", "abc")


class TestFieldMatchConfig:
    """Tests for FieldMatchConfig validation."""

    def test_options_coerced_from_dict(self):
        config = FieldMatchConfig(
            field="address.city",
            weight=0.5,
            algorithm="phonetic",
            options={"phonetic_algorithm": "soundex"},
        )
        assert isinstance(config.options, PhoneticOptions)
        assert config.options.phonetic_algorithm.value == "soundex"

    def test_default_options_type(self):
        config = FieldMatchConfig(field="name", weight=1, algorithm="token_jaro")
        assert isinstance(config.options, TextOptions)
        assert config.options.threshold is None

    def test_weight_must_be_positive(self):
        with pytest.raises(ValidationError):
            FieldMatchConfig(field="name", weight=0, algorithm="exact")

    def test_empty_field_rejected(self):
        with pytest.raises(ValidationError):
            FieldMatchConfig(field="", weight=1, algorithm="exact")

    def test_unknown_algorithm_rejected(self):
        with pytest.raises(ValidationError):
            FieldMatchConfig(field="name", weight=1, algorithm="fuzzy")

    def test_mismatched_options_rejected(self):
        with pytest.raises(ValidationError):
            FieldMatchConfig(
                field="name", weight=1, algorithm="exact", options=NumericOptions()
            )

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            FieldMatchConfig(
                field="name", weight=1, algorithm="exact", options={"numeric_tolerance": 0.1}
            )

    def test_threshold_range(self):
        with pytest.raises(ValidationError):
            FieldMatchConfig(
                field="name", weight=1, algorithm="exact", options={"threshold": 1.5}
            )

    def test_frozen(self):
        config = FieldMatchConfig(field="name", weight=1, algorithm="exact")
        with pytest.raises(ValidationError):
            config.weight = 2
