"""
Value types shared by the validator, the correction engine and the batch tools
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from email_autocorrect.config.settings import settings


@dataclass(frozen=True)
class ProviderEntry:
    """A canonical mailbox domain, its alias domains and popularity weight."""
    domain: str
    aliases: FrozenSet[str] = field(default_factory=frozenset)
    weight: float = 0.0


@dataclass(frozen=True)
class ValidationResult:
    """Structural verdict; ``error`` is set exactly when ``is_valid`` is False."""
    is_valid: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.is_valid:
            return {'is_valid': True}
        return {'is_valid': False, 'error': self.error}


@dataclass(frozen=True)
class Suggestion:
    """A single best-guess rewrite of an address."""
    original: str
    suggested: str
    confidence: float
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class CorrectionConfig(BaseModel):
    """
    Per-call correction options.

    Accepts the camelCase keys used by front-end callers
    (``customDomains``, ``minConfidence``) as well as snake_case.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    custom_domains: Tuple[str, ...] = Field(default=(), alias='customDomains')
    country: Optional[str] = None
    min_confidence: float = Field(
        default_factory=lambda: settings.DEFAULT_MIN_CONFIDENCE,
        ge=0.0,
        le=1.0,
        alias='minConfidence',
    )

    @field_validator('custom_domains', mode='before')
    @classmethod
    def _clean_domains(cls, value):
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        cleaned = []
        for domain in value:
            domain = str(domain).strip().lower()
            if domain and domain not in cleaned:
                cleaned.append(domain)
        return tuple(cleaned)

    @field_validator('country', mode='before')
    @classmethod
    def _clean_country(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    def cache_key(self) -> Tuple:
        return (self.custom_domains, self.country, self.min_confidence)
