"""Tunable defaults for the record comparator.

Settings are plain values passed into the comparator; nothing here is read
or cached at import time.
"""
from __future__ import annotations

import os

from pydantic import BaseModel, Field

from .logging import LogLevel


class MatcherSettings(BaseModel):
    """Defaults applied when a call or field config does not say otherwise."""

    required_threshold: float = Field(
        default=0.7,
        ge=0.0, le=1.0,
        description="Score a required field must reach to avoid the veto",
    )
    find_matches_min_score: float = Field(
        default=0.7,
        ge=0.0, le=1.0,
        description="Default cut-off for candidate search",
    )
    find_duplicates_min_score: float = Field(
        default=0.8,
        ge=0.0, le=1.0,
        description="Default cut-off for pairwise duplicate discovery",
    )
    log_level: LogLevel = Field(default="INFO")

    @classmethod
    def from_env(cls) -> "MatcherSettings":
        """Build settings from ``ENTITY_MATCH_*`` environment variables."""
        return cls(
            required_threshold=float(os.getenv("ENTITY_MATCH_REQUIRED_THRESHOLD", "0.7")),
            find_matches_min_score=float(os.getenv("ENTITY_MATCH_MIN_SCORE", "0.7")),
            find_duplicates_min_score=float(os.getenv("ENTITY_MATCH_DUPLICATE_MIN_SCORE", "0.8")),
            log_level=os.getenv("ENTITY_MATCH_LOG_LEVEL", "INFO").upper(),
        )
