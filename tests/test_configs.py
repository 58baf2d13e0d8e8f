"""Tests for the standard entity configurations."""
from __future__ import annotations

import pytest

from entity_matching.exceptions import ConfigurationError, UnknownEntityTypeError
from entity_matching.linkage import (
    STANDARD_MATCH_CONFIGS,
    EntityType,
    MatchAlgorithm,
    MatchLevel,
    create_address_scorer,
    create_product_scorer,
    get_standard_config,
)


class TestStandardConfigs:
    """Tests for STANDARD_MATCH_CONFIGS."""

    def test_every_entity_type_configured(self):
        assert set(STANDARD_MATCH_CONFIGS) == set(EntityType)

    def test_lookup_by_string(self):
        assert get_standard_config("company") is STANDARD_MATCH_CONFIGS[EntityType.COMPANY]

    def test_unknown_entity_type(self):
        with pytest.raises(UnknownEntityTypeError) as exc_info:
            get_standard_config("vehicle")
        assert isinstance(exc_info.value, ConfigurationError)
        assert "person" in str(exc_info.value)

    def test_person_last_name_required(self):
        person = get_standard_config(EntityType.PERSON)
        required = [(c.field, c.algorithm) for c in person if c.required]
        assert required == [("lastName", MatchAlgorithm.JARO_WINKLER)]

    def test_company_identifiers_carry_bonus(self):
        company = {c.field: c for c in get_standard_config(EntityType.COMPANY)}
        assert company["vatId"].weight == 4
        assert company["vatId"].exact_match_bonus == 0.2
        assert company["registrationNumber"].exact_match_bonus == 0.2

    def test_address_requires_street_and_postal_code(self):
        address = get_standard_config(EntityType.ADDRESS)
        assert {c.field for c in address if c.required} == {"street", "postalCode"}

    def test_person_email_case_insensitive(self):
        email = next(c for c in get_standard_config("person") if c.field == "email")
        assert email.algorithm is MatchAlgorithm.EXACT
        assert email.options.case_sensitive is False

    def test_total_weights(self):
        totals = {
            entity_type: sum(c.weight for c in configs)
            for entity_type, configs in STANDARD_MATCH_CONFIGS.items()
        }
        assert totals == {
            EntityType.PERSON: pytest.approx(12.5),
            EntityType.COMPANY: pytest.approx(18.0),
            EntityType.ADDRESS: pytest.approx(7.5),
            EntityType.PRODUCT: pytest.approx(13.5),
        }


class TestStandardScorers:
    """Tests for the entity scorers built from standard configs."""

    def test_address_postal_code_veto(self):
        result = create_address_scorer().compare(
            {"street": "Hauptstraße", "houseNumber": "5", "postalCode": "50667", "city": "Köln"},
            {"street": "Hauptstrasse", "houseNumber": "5", "postalCode": "50668", "city": "Koeln"},
        )
        assert result.overall_score == 0.0
        assert "required_failed:postalCode" in result.flags

    def test_address_spelling_variant(self):
        result = create_address_scorer().compare(
            {"street": "Hauptstraße", "houseNumber": "5", "postalCode": "50667", "city": "Köln"},
            {"street": "Hauptstrasse", "houseNumber": "5", "postalCode": "50667", "city": "Koeln"},
        )
        assert result.field_scores["city"] == 1.0
        assert result.is_match

    def test_product_sku_decides(self):
        result = create_product_scorer().compare(
            {"sku": "AB-100", "ean": "4006381333931", "name": "Drill 500W"},
            {"sku": "AB-200", "ean": "4006381333948", "name": "Drill 500W"},
        )
        assert result.field_scores["sku"] == 0.0
        assert result.field_scores["ean"] == 0.0
        # (2 * 1.0 + 1 * 1.0 + 0.5 * 1.0) / 13.5
        assert result.overall_score == pytest.approx(3.5 / 13.5)
        assert result.match_level is MatchLevel.NONE
