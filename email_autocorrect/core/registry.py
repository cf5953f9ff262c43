"""
Domain/TLD registry

Holds the provider table, the typo map and the set of valid TLDs. The
static tables never change; the TLD set can grow at runtime from a
newline-delimited list (IANA format) fetched by ``load_tlds``.
"""

import threading
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence

import httpx
import idna

from email_autocorrect.config.settings import settings
from email_autocorrect.core.common_email_typos import TYPO_MAP
from email_autocorrect.core.email_data import PROVIDER_RULES, PROVIDERS, TLD_DATA
from email_autocorrect.core.models import ProviderEntry
from email_autocorrect.utils.exceptions import TLDLoadError
from email_autocorrect.utils.logging import get_logger

logger = get_logger(__name__)


def to_ascii_label(label: str) -> str:
    """A-label form of a (possibly Unicode) domain label, or the input on failure."""
    try:
        return idna.encode(label, uts46=True).decode('ascii').lower()
    except (idna.IDNAError, UnicodeError):
        return label.lower()


def parse_tld_list(text: str) -> FrozenSet[str]:
    """
    Parse a newline-delimited TLD list.

    Blank lines and ``#`` comment lines are skipped; entries are trimmed
    and lower-cased.
    """
    entries = set()
    for line in text.splitlines():
        entry = line.strip()
        if not entry or entry.startswith('#'):
            continue
        entries.add(entry.lower())
    return frozenset(entries)


class DomainRegistry:
    """
    Provider, typo and TLD tables consulted by the correction engine.

    Lookups are lock-free; the dynamic TLD set is swapped for a new
    frozenset on every merge so readers always see a complete snapshot.
    """

    def __init__(
        self,
        providers: Sequence[ProviderEntry] = PROVIDERS,
        typo_map: Optional[Dict[str, str]] = None,
        provider_rules: Optional[Dict[str, List[str]]] = None,
        tlds: Iterable[str] = TLD_DATA,
    ):
        self._providers = tuple(providers)
        self._typo_map = {k.lower(): v.lower() for k, v in (TYPO_MAP if typo_map is None else typo_map).items()}
        self.provider_rules = PROVIDER_RULES if provider_rules is None else provider_rules
        self._static_tlds = frozenset(t.lower() for t in tlds)
        self._loaded_tlds: FrozenSet[str] = frozenset()
        self._merge_lock = threading.Lock()

        self._weights: Dict[str, float] = {}
        known = set()
        for provider in self._providers:
            domain = provider.domain.lower()
            known.add(domain)
            self._weights[domain] = provider.weight
            for alias in provider.aliases:
                known.add(alias.lower())
                self._weights.setdefault(alias.lower(), provider.weight)
        for name, extensions in self.provider_rules.items():
            for extension in extensions:
                known.add(f"{name}.{extension}")
        self._known_domains = frozenset(known)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def typo_correction(self, domain: str) -> Optional[str]:
        return self._typo_map.get(domain.lower())

    def is_known_domain(self, domain: str) -> bool:
        return domain.lower() in self._known_domains

    def providers(self) -> Sequence[ProviderEntry]:
        return self._providers

    def weight_of(self, domain: str) -> float:
        return self._weights.get(domain.lower(), 0.0)

    def provider_tlds(self, name: str) -> List[str]:
        return list(self.provider_rules.get(name.lower(), []))

    def valid_tlds(self) -> FrozenSet[str]:
        return self._static_tlds | self._loaded_tlds

    @property
    def loaded_tlds(self) -> FrozenSet[str]:
        return self._loaded_tlds

    def is_valid_tld(self, tld: str) -> bool:
        """Membership over static and loaded TLDs; Unicode TLDs match their A-label."""
        tld = tld.strip().lstrip('.').lower()
        if not tld:
            return False
        if tld in self._static_tlds or tld in self._loaded_tlds:
            return True
        ascii_tld = '.'.join(to_ascii_label(label) for label in tld.split('.'))
        return ascii_tld in self._static_tlds or ascii_tld in self._loaded_tlds

    def has_valid_tld(self, domain: str) -> bool:
        """True if the domain ends in a registered one- or two-label TLD."""
        labels = domain.strip().rstrip('.').lower().split('.')
        if len(labels) < 2:
            return False
        if len(labels) > 2 and self.is_valid_tld('.'.join(labels[-2:])):
            return True
        return self.is_valid_tld(labels[-1])

    # ------------------------------------------------------------------
    # Runtime TLD loading
    # ------------------------------------------------------------------

    def merge_tlds(self, tlds: Iterable[str]) -> FrozenSet[str]:
        """Add TLDs to the dynamic set. Entries are never removed."""
        with self._merge_lock:
            merged = self._loaded_tlds | frozenset(t.strip().lower() for t in tlds if t.strip())
            added = len(merged) - len(self._loaded_tlds)
            self._loaded_tlds = merged
        logger.info(f"Merged TLD list: {added} new, {len(merged)} loaded")
        return self.valid_tlds()

    async def _fetch_tlds(self, url: str, client: httpx.AsyncClient) -> FrozenSet[str]:
        response = await client.get(url)
        response.raise_for_status()

        tlds = parse_tld_list(response.text)
        if not tlds:
            raise TLDLoadError("TLD list contained no entries", source_url=url)
        return tlds

    async def load_tlds(
        self,
        source_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None
    ) -> FrozenSet[str]:
        """
        Fetch a TLD list and merge it into the registry.

        Never raises for transport or parse failures: those are logged as
        warnings and the current TLD set is returned unchanged. Safe to call
        repeatedly; each call can only add entries.

        Args:
            source_url: List location. Defaults to settings.TLD_SOURCE_URL.
            client: Optional httpx client to use (left open).

        Returns:
            The full set of valid TLDs after the merge.
        """
        url = source_url or settings.TLD_SOURCE_URL

        try:
            if client is not None:
                tlds = await self._fetch_tlds(url, client)
            else:
                async with httpx.AsyncClient(
                    timeout=httpx.Timeout(settings.TLD_FETCH_TIMEOUT),
                    follow_redirects=True,
                ) as owned_client:
                    tlds = await self._fetch_tlds(url, owned_client)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Failed to load TLDs from {url}: {e!r}; keeping current list")
            return self.valid_tlds()
        except TLDLoadError as e:
            logger.warning(f"Failed to load TLDs from {url}: {e.message}; keeping current list")
            return self.valid_tlds()

        return self.merge_tlds(tlds)
