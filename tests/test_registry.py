"""
Domain registry lookups and runtime TLD loading
"""

import logging

import httpx
import pytest

from email_autocorrect.core.common_email_typos import TYPO_MAP
from email_autocorrect.core.models import ProviderEntry
from email_autocorrect.core.registry import DomainRegistry, parse_tld_list, to_ascii_label

IANA_SAMPLE = """# Version 2024010100, Last Updated Mon Jan  1 07:07:01 2024 UTC
COM
NET
ZZZ
XN--P1AI

"""


class TestParseTldList:

    def test_skips_comments_and_blank_lines(self):
        assert parse_tld_list(IANA_SAMPLE) == frozenset({"com", "net", "zzz", "xn--p1ai"})

    def test_trims_entries(self):
        assert parse_tld_list("  Shop  \r\n\tBlog\n") == frozenset({"shop", "blog"})

    def test_empty(self):
        assert parse_tld_list("# only a header\n") == frozenset()


class TestTypoTable:

    def test_spoken_entries(self, registry):
        assert registry.typo_correction("hot mail.com") == "hotmail.com"
        assert registry.typo_correction("g mail.com") == "gmail.com"

    def test_keys_are_never_real_domains(self, registry):
        assert not [typo for typo in TYPO_MAP if registry.is_known_domain(typo)]

    def test_targets_are_known_domains(self, registry):
        assert all(registry.is_known_domain(domain) for domain in TYPO_MAP.values())


class TestLookups:

    def test_typo_correction(self, registry):
        assert registry.typo_correction("gmial.com") == "gmail.com"
        assert registry.typo_correction("GMIAL.COM") == "gmail.com"
        assert registry.typo_correction("gmail.com") is None

    def test_known_domains_include_aliases_and_rule_domains(self, registry):
        assert registry.is_known_domain("gmail.com")
        assert registry.is_known_domain("hotmail.com")
        assert registry.is_known_domain("yahoo.com.au")
        assert registry.is_known_domain("Outlook.FR")
        assert not registry.is_known_domain("example.org")

    def test_weight_of(self, registry):
        assert registry.weight_of("gmail.com") > registry.weight_of("yahoo.co.uk") > 0
        assert registry.weight_of("unknown.example") == 0.0

    def test_provider_tlds(self, registry):
        assert registry.provider_tlds("gmail") == ["com"]
        assert "co.uk" in registry.provider_tlds("Yahoo")
        assert registry.provider_tlds("examplecorp") == []

    def test_provider_tlds_returns_copy(self, registry):
        registry.provider_tlds("gmail").append("net")
        assert registry.provider_tlds("gmail") == ["com"]

    def test_custom_tables(self):
        registry = DomainRegistry(
            providers=[ProviderEntry("acme.io", frozenset({"acme.dev"}), 0.5)],
            typo_map={"acme.oi": "acme.io"},
            provider_rules={"acme": ["io"]},
            tlds=["io", "dev"],
        )
        assert registry.is_known_domain("acme.dev")
        assert registry.typo_correction("acme.oi") == "acme.io"
        assert not registry.is_valid_tld("com")


class TestTldMembership:

    def test_static_tlds(self, registry):
        assert registry.is_valid_tld("com")
        assert registry.is_valid_tld(".COM")
        assert registry.is_valid_tld("co.uk")
        assert not registry.is_valid_tld("zzz")
        assert not registry.is_valid_tld("")

    def test_unicode_tld_matches_a_label(self, registry):
        assert to_ascii_label("рф") == "xn--p1ai"
        assert registry.is_valid_tld("рф")

    def test_has_valid_tld(self, registry):
        assert registry.has_valid_tld("example.com")
        assert registry.has_valid_tld("example.co.uk")
        assert not registry.has_valid_tld("example.zzz")
        assert not registry.has_valid_tld("localhost")

    def test_merge_only_adds(self, registry):
        registry.merge_tlds(["zzz"])
        registry.merge_tlds(["yyy"])
        assert registry.loaded_tlds == frozenset({"zzz", "yyy"})
        assert registry.is_valid_tld("zzz")
        assert "com" in registry.valid_tlds()


class TestLoadTlds:

    @pytest.mark.asyncio
    async def test_merges_remote_list(self, registry, tld_client):
        requested = []

        def handler(request):
            requested.append(str(request.url))
            return httpx.Response(200, text=IANA_SAMPLE)

        async with tld_client(handler) as client:
            tlds = await registry.load_tlds("https://tlds.test/list.txt", client=client)

        assert requested == ["https://tlds.test/list.txt"]
        assert "zzz" in tlds
        assert registry.is_valid_tld("zzz")
        assert registry.has_valid_tld("user.example.zzz")

    @pytest.mark.asyncio
    async def test_repeated_loads_are_idempotent(self, registry, tld_client):
        async with tld_client(lambda request: httpx.Response(200, text=IANA_SAMPLE)) as client:
            first = await registry.load_tlds("https://tlds.test/list.txt", client=client)
            second = await registry.load_tlds("https://tlds.test/list.txt", client=client)

        assert first == second

    @pytest.mark.asyncio
    async def test_http_error_keeps_current_set(self, registry, tld_client, caplog):
        before = registry.valid_tlds()

        async with tld_client(lambda request: httpx.Response(503)) as client:
            with caplog.at_level(logging.WARNING, logger="email_autocorrect.core.registry"):
                tlds = await registry.load_tlds("https://tlds.test/list.txt", client=client)

        assert tlds == before
        assert registry.loaded_tlds == frozenset()
        assert "Failed to load TLDs from https://tlds.test/list.txt" in caplog.text

    @pytest.mark.asyncio
    async def test_transport_error_is_not_raised(self, registry, tld_client, caplog):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with tld_client(handler) as client:
            with caplog.at_level(logging.WARNING, logger="email_autocorrect.core.registry"):
                tlds = await registry.load_tlds("https://tlds.test/list.txt", client=client)

        assert tlds == registry.valid_tlds()
        assert "keeping current list" in caplog.text

    @pytest.mark.asyncio
    async def test_empty_list_is_rejected(self, registry, tld_client, caplog):
        async with tld_client(lambda request: httpx.Response(200, text="# nothing\n")) as client:
            with caplog.at_level(logging.WARNING, logger="email_autocorrect.core.registry"):
                await registry.load_tlds("https://tlds.test/list.txt", client=client)

        assert registry.loaded_tlds == frozenset()
        assert "TLD list contained no entries" in caplog.text
