"""Entity matching utilities."""

from .normalize import (
    MONTH_NAMES,
    UMLAUT_SUBSTITUTIONS,
    fold_case,
    normalize,
    parse_timestamp,
    prepare_text,
    tokenize,
)

__all__ = [
    "MONTH_NAMES",
    "UMLAUT_SUBSTITUTIONS",
    "fold_case",
    "normalize",
    "parse_timestamp",
    "prepare_text",
    "tokenize",
]
