"""Standard field configurations for common entity types.

Each config is tuned for the data it usually meets:
- person: short names with typos and spelling variants, optional contact data
- company: multi-word legal names, strong identifiers (VAT ID, register number)
- address: street and postal code must agree, city may be spelled differently
- product: SKU or EAN usually decides, names are supporting evidence
"""
from __future__ import annotations

from enum import Enum

from ..exceptions import UnknownEntityTypeError
from .models import (
    ExactOptions,
    FieldMatchConfig,
    MatchAlgorithm,
)


class EntityType(str, Enum):
    """Entity types with a standard field configuration."""

    PERSON = "person"
    COMPANY = "company"
    ADDRESS = "address"
    PRODUCT = "product"


def _person_fields() -> tuple[FieldMatchConfig, ...]:
    return (
        FieldMatchConfig(
            field="firstName",
            weight=1.5,
            algorithm=MatchAlgorithm.JARO_WINKLER,
            exact_match_bonus=0.1,
        ),
        FieldMatchConfig(
            field="lastName",
            weight=2.0,
            algorithm=MatchAlgorithm.JARO_WINKLER,
            required=True,
            exact_match_bonus=0.15,
        ),
        # Catches spelling variants Jaro-Winkler misses (Meyer / Maier)
        FieldMatchConfig(field="lastName", weight=1.0, algorithm=MatchAlgorithm.PHONETIC),
        FieldMatchConfig(
            field="email",
            weight=3.0,
            algorithm=MatchAlgorithm.EXACT,
            options=ExactOptions(case_sensitive=False),
        ),
        FieldMatchConfig(field="phone", weight=2.0, algorithm=MatchAlgorithm.NUMERIC),
        FieldMatchConfig(field="dateOfBirth", weight=1.5, algorithm=MatchAlgorithm.DATE),
        FieldMatchConfig(field="address.postalCode", weight=1.0, algorithm=MatchAlgorithm.EXACT),
        FieldMatchConfig(field="address.city", weight=0.5, algorithm=MatchAlgorithm.PHONETIC),
    )


def _company_fields() -> tuple[FieldMatchConfig, ...]:
    return (
        FieldMatchConfig(
            field="name",
            weight=3.0,
            algorithm=MatchAlgorithm.TOKEN_JARO,
            required=True,
        ),
        FieldMatchConfig(field="name", weight=1.0, algorithm=MatchAlgorithm.TOKEN_PHONETIC),
        FieldMatchConfig(
            field="vatId",
            weight=4.0,
            algorithm=MatchAlgorithm.EXACT,
            exact_match_bonus=0.2,
        ),
        FieldMatchConfig(
            field="registrationNumber",
            weight=4.0,
            algorithm=MatchAlgorithm.EXACT,
            exact_match_bonus=0.2,
        ),
        FieldMatchConfig(
            field="email",
            weight=2.0,
            algorithm=MatchAlgorithm.EXACT,
            options=ExactOptions(case_sensitive=False),
        ),
        FieldMatchConfig(field="phone", weight=1.5, algorithm=MatchAlgorithm.NUMERIC),
        FieldMatchConfig(field="address.street", weight=1.0, algorithm=MatchAlgorithm.TOKEN_JARO),
        FieldMatchConfig(field="address.postalCode", weight=1.0, algorithm=MatchAlgorithm.EXACT),
        FieldMatchConfig(field="address.city", weight=0.5, algorithm=MatchAlgorithm.PHONETIC),
    )


def _address_fields() -> tuple[FieldMatchConfig, ...]:
    return (
        FieldMatchConfig(
            field="street",
            weight=2.0,
            algorithm=MatchAlgorithm.TOKEN_JARO,
            required=True,
        ),
        FieldMatchConfig(field="houseNumber", weight=1.5, algorithm=MatchAlgorithm.EXACT),
        FieldMatchConfig(
            field="postalCode",
            weight=2.0,
            algorithm=MatchAlgorithm.EXACT,
            required=True,
        ),
        FieldMatchConfig(field="city", weight=1.5, algorithm=MatchAlgorithm.PHONETIC),
        FieldMatchConfig(field="country", weight=0.5, algorithm=MatchAlgorithm.EXACT),
    )


def _product_fields() -> tuple[FieldMatchConfig, ...]:
    return (
        FieldMatchConfig(field="sku", weight=5.0, algorithm=MatchAlgorithm.EXACT),
        FieldMatchConfig(field="ean", weight=5.0, algorithm=MatchAlgorithm.EXACT),
        FieldMatchConfig(field="name", weight=2.0, algorithm=MatchAlgorithm.TOKEN_JARO),
        FieldMatchConfig(field="manufacturer", weight=1.0, algorithm=MatchAlgorithm.JARO_WINKLER),
        FieldMatchConfig(field="category", weight=0.5, algorithm=MatchAlgorithm.EXACT),
    )


STANDARD_MATCH_CONFIGS: dict[EntityType, tuple[FieldMatchConfig, ...]] = {
    EntityType.PERSON: _person_fields(),
    EntityType.COMPANY: _company_fields(),
    EntityType.ADDRESS: _address_fields(),
    EntityType.PRODUCT: _product_fields(),
}


def get_standard_config(entity_type: EntityType | str) -> tuple[FieldMatchConfig, ...]:
    """Look up the standard field configuration for an entity type.

    Raises:
        UnknownEntityTypeError: No standard configuration for ``entity_type``
    """
    try:
        return STANDARD_MATCH_CONFIGS[EntityType(entity_type)]
    except ValueError:
        known = ", ".join(t.value for t in EntityType)
        raise UnknownEntityTypeError(
            f"No standard config for entity type {entity_type!r}; expected one of: {known}"
        ) from None
