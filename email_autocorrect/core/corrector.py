"""
Email correction engine

Decides whether a typed address should be rewritten and, if so, produces a
single best guess with a confidence score. Lookups run cheapest first:
voice-input repair, exact typo map, known-domain short-circuit, missing
extension, fuzzy provider match, TLD fix, provider extension fix and
finally company-domain near match.
"""

import re
from typing import Any, Dict, FrozenSet, Optional, Union

from email_autocorrect.core.cache import CorrectionCache
from email_autocorrect.core.email_validator import EmailValidator
from email_autocorrect.core.models import CorrectionConfig, ProviderEntry, Suggestion, ValidationResult
from email_autocorrect.core.regional import get_regional_tld
from email_autocorrect.core.registry import DomainRegistry
from email_autocorrect.core.similarity import char_differences, keyboard_score, similarity
from email_autocorrect.utils.logging import get_logger

logger = get_logger(__name__)

MIN_INPUT_LENGTH = 3

SIMILARITY_WEIGHT = 0.7
KEYBOARD_WEIGHT = 0.3
PROVIDER_THRESHOLD = 0.85
TLD_THRESHOLD = 0.8
MAX_LENGTH_GAP = 2
MAX_CUSTOM_DIFFERENCES = 2
CUSTOM_DOMAIN_WEIGHT = 0.01

VOICE_CONFIDENCE = 0.95
TYPO_CONFIDENCE = 0.95
EXTENSION_CONFIDENCE = 0.9
DEFAULT_EXTENSION_CONFIDENCE = 0.7
PROVIDER_EXTENSION_CONFIDENCE = 0.85
COMPANY_DOMAIN_CONFIDENCE = 0.8

AT_PATTERN = re.compile(r'\s+at\s+', re.IGNORECASE)
DOT_PATTERN = re.compile(r'\s+dot\s+', re.IGNORECASE)

ConfigLike = Union[CorrectionConfig, Dict[str, Any], None]


def repair_voice_input(text):
    """Replace the first spoken "at" with @ and every spoken "dot" with a period."""
    repaired = AT_PATTERN.sub('@', text, count=1)
    return DOT_PATTERN.sub('.', repaired)


def process_voice_input(text):
    """
    Turn a dictated address into typed form

    "John at Gmail dot com" -> "john@gmail.com"
    """
    if not text:
        return ''
    result = text.lower()
    result = AT_PATTERN.sub('@', result)
    result = DOT_PATTERN.sub('.', result)
    return re.sub(r'\s+', '', result)


def _better(current, candidate):
    """Pick the higher score; equal scores go to the more popular domain."""
    if current is None:
        return candidate
    score, weight = candidate[0], candidate[1]
    if score > current[0] or (score == current[0] and weight > current[1]):
        return candidate
    return current


class EmailCorrector:
    """
    Correction engine bound to a registry and a result cache

    Both collaborators are injectable so callers (and tests) can run
    engines with isolated TLD sets and caches.
    """

    def __init__(self, registry=None, cache=None, validator=None):
        self.registry = registry or DomainRegistry()
        self.cache = cache if cache is not None else CorrectionCache()
        self.validator = validator or EmailValidator()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, email: str) -> ValidationResult:
        return self.validator.validate(email)

    def correct(self, email: str, config: ConfigLike = None) -> Optional[Suggestion]:
        """
        Suggest a corrected address, or None when no confident rewrite exists

        Results are memoized per raw input and config until clear_cache().
        """
        config = self._coerce_config(config)
        key = (email, config.cache_key())

        found, cached = self.cache.lookup(key)
        if found:
            return cached

        suggestion = self._correct(email, config)
        if suggestion is not None and suggestion.confidence < config.min_confidence:
            logger.debug(
                f"Dropping suggestion {suggestion.suggested!r}: confidence "
                f"{suggestion.confidence:.3f} below {config.min_confidence}"
            )
            suggestion = None

        self.cache.store(key, suggestion)
        return suggestion

    async def load_tlds(self, source_url: Optional[str] = None, client=None) -> FrozenSet[str]:
        """Merge a remote TLD list into this engine's registry."""
        before = len(self.registry.loaded_tlds)
        tlds = await self.registry.load_tlds(source_url, client=client)
        if len(self.registry.loaded_tlds) != before:
            # TLD fixes depend on the TLD set; drop results computed without it
            self.cache.clear()
        return tlds

    def clear_cache(self) -> None:
        self.cache.clear()

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    @staticmethod
    def _coerce_config(config: ConfigLike) -> CorrectionConfig:
        if config is None:
            return CorrectionConfig()
        if isinstance(config, CorrectionConfig):
            return config
        return CorrectionConfig.model_validate(config)

    @staticmethod
    def _suggest(original, suggested, confidence, reason):
        if suggested.lower() == original.strip().lower():
            return None
        return Suggestion(original=original, suggested=suggested, confidence=confidence, reason=reason)

    def _correct(self, email, config):
        if not email:
            return None

        text = email.strip()
        if len(text) < MIN_INPUT_LENGTH:
            return None

        if '@' not in text and AT_PATTERN.search(text):
            text = repair_voice_input(text)
            if self.validator.validate(text).is_valid:
                logger.debug(f"Voice input repaired: {email!r} -> {text!r}")
                return self._suggest(email, text, VOICE_CONFIDENCE, 'voice input corrected')

        parts = text.split('@')
        if len(parts) != 2:
            return None

        local_part, domain = parts
        if not local_part or not domain:
            return None

        domain = domain.lower()

        # A caller's own domain is never rewritten, even if it looks like a typo
        if domain in config.custom_domains:
            return None

        typo_fix = self.registry.typo_correction(domain)
        if typo_fix:
            return self._suggest(email, f"{local_part}@{typo_fix}", TYPO_CONFIDENCE, 'common typo')

        if self.registry.is_known_domain(domain):
            return None

        match = self._suggest_domain(domain, config)
        if match is None:
            return None

        suggested_domain, confidence, reason = match
        logger.debug(f"{domain!r} -> {suggested_domain!r} ({reason}, {confidence:.3f})")
        return self._suggest(email, f"{local_part}@{suggested_domain}", confidence, reason)

    def _suggest_domain(self, domain, config):
        if '.' not in domain:
            return self._complete_extension(domain, config)

        for step in (
            self._match_provider,
            self._correct_tld,
            self._correct_provider_extension,
            self._match_custom_domain,
        ):
            match = step(domain, config)
            if match is not None:
                return match

        return None

    def _complete_extension(self, domain, config):
        if self.registry.provider_tlds(domain):
            tld = get_regional_tld(domain, config.country, self.registry.provider_rules)
            return f"{domain}.{tld}", EXTENSION_CONFIDENCE, 'added missing extension'

        for custom in config.custom_domains:
            if custom.split('.', 1)[0] == domain:
                return custom, EXTENSION_CONFIDENCE, 'added missing extension'

        with_com = f"{domain}.com"
        if self.registry.is_known_domain(with_com):
            return with_com, EXTENSION_CONFIDENCE, 'added missing extension'

        if any(char.isspace() for char in domain):
            return None

        return with_com, DEFAULT_EXTENSION_CONFIDENCE, 'unknown provider, default extension'

    def _match_provider(self, domain, config):
        candidates = list(self.registry.providers())
        candidates.extend(
            ProviderEntry(custom, frozenset(), CUSTOM_DOMAIN_WEIGHT)
            for custom in config.custom_domains
        )

        best = None
        for provider in candidates:
            if abs(len(domain) - len(provider.domain)) <= MAX_LENGTH_GAP:
                edit_score = similarity(domain, provider.domain)
                key_score = keyboard_score(domain, provider.domain)
                combined = SIMILARITY_WEIGHT * edit_score + KEYBOARD_WEIGHT * key_score
                if combined > PROVIDER_THRESHOLD:
                    reason = 'keyboard typing error' if key_score > edit_score else 'similar domain'
                    best = _better(best, (combined, provider.weight, provider.domain, reason))
                    continue

            # Main domain did not clear the bar; try its aliases on their own
            for alias in sorted(provider.aliases):
                if abs(len(domain) - len(alias)) > MAX_LENGTH_GAP:
                    continue
                alias_score = similarity(domain, alias)
                if alias_score > PROVIDER_THRESHOLD:
                    best = _better(best, (alias_score, provider.weight, alias, 'known email provider'))

        if best is None:
            return None
        score, _, suggested, reason = best
        return suggested, score, reason

    def _correct_tld(self, domain, config):
        name, _, tld = domain.rpartition('.')
        if not name or not tld:
            return None

        best = None
        for candidate_tld in sorted(self.registry.valid_tlds()):
            if abs(len(candidate_tld) - len(tld)) > 1:
                continue
            candidate = f"{name}.{candidate_tld}"
            if not self.registry.is_known_domain(candidate):
                continue
            score = similarity(tld, candidate_tld)
            if score > TLD_THRESHOLD:
                best = _better(best, (score, self.registry.weight_of(candidate), candidate, 'TLD correction'))

        if best is None:
            return None
        score, _, suggested, reason = best
        return suggested, score, reason

    def _correct_provider_extension(self, domain, config):
        name, _, extension = domain.partition('.')
        valid_tlds = self.registry.provider_tlds(name)
        if not valid_tlds or extension in valid_tlds:
            return None

        # Only a wrong public suffix is fixed; web.mycompany.com is a subdomain
        if not self.registry.is_valid_tld(extension):
            return None

        tld = get_regional_tld(name, config.country, self.registry.provider_rules)
        return f"{name}.{tld}", PROVIDER_EXTENSION_CONFIDENCE, 'corrected domain extension'

    def _match_custom_domain(self, domain, config):
        for custom in config.custom_domains:
            if abs(len(domain) - len(custom)) > MAX_LENGTH_GAP:
                continue
            if char_differences(domain, custom) <= MAX_CUSTOM_DIFFERENCES:
                return custom, COMPANY_DOMAIN_CONFIDENCE, 'matched company domain'
        return None


# Process-wide default engine behind the module-level helpers
default_corrector = EmailCorrector()


def validate(email: str) -> ValidationResult:
    """Structural validation; never raises for string input."""
    return default_corrector.validate(email)


def correct(email: str, config: ConfigLike = None) -> Optional[Suggestion]:
    """Best-guess correction of ``email`` or None."""
    return default_corrector.correct(email, config)


async def load_tlds(source_url: Optional[str] = None) -> FrozenSet[str]:
    """Fetch and merge a TLD list into the default engine's registry."""
    return await default_corrector.load_tlds(source_url)


def clear_cache() -> None:
    default_corrector.clear_cache()
