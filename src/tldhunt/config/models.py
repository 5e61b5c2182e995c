"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tldhunt.toml only contains
overrides. No section is required.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

from tldhunt.domain.patterns import (
    AVAILABLE_PHRASES,
    EXPIRY_LABELS,
    RATE_LIMIT_PHRASES,
    PhraseSet,
)
from tldhunt.infrastructure.tld_source import IANA_TLD_URL


class HuntConfig(BaseModel):
    """[hunt] section."""

    model_config = {"frozen": True}

    delay: float = Field(default=1.5, ge=0)
    max_attempts: int = Field(default=3, ge=1)
    backoff_unit: float = Field(default=1.0, ge=0)


class WhoisConfig(BaseModel):
    """[whois] section."""

    model_config = {"frozen": True}

    command: str = "whois"
    timeout: float = Field(default=15.0, gt=0)


class TldsConfig(BaseModel):
    """[tlds] section."""

    model_config = {"frozen": True}

    file: str = "tlds.txt"
    url: str = IANA_TLD_URL
    timeout: float = Field(default=30.0, gt=0)


class PatternsConfig(BaseModel):
    """[patterns] section. Each list replaces the built-in one entirely."""

    model_config = {"frozen": True}

    rate_limit: list[str] = Field(default_factory=lambda: list(RATE_LIMIT_PHRASES))
    available: list[str] = Field(default_factory=lambda: list(AVAILABLE_PHRASES))
    expiry_labels: list[str] = Field(default_factory=lambda: list(EXPIRY_LABELS))

    @field_validator("rate_limit", "available", "expiry_labels")
    @classmethod
    def _compile_each(cls, phrases: list[str]) -> list[str]:
        for phrase in phrases:
            try:
                re.compile(f"(?:{phrase})")
            except re.error as exc:
                msg = f"invalid pattern {phrase!r}: {exc}"
                raise ValueError(msg) from exc
        return phrases

    def to_phrase_set(self) -> PhraseSet:
        return PhraseSet.from_lists(
            rate_limit=self.rate_limit,
            available=self.available,
            expiry_labels=self.expiry_labels,
        )
