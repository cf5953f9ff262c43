"""
Regional extension preferences
"""

import pytest

from email_autocorrect.core.email_data import PROVIDER_RULES
from email_autocorrect.core.regional import (
    COUNTRY_ALIASES,
    REGIONAL_PREFERENCES,
    get_regional_tld,
    normalize_country,
)


class TestNormalizeCountry:

    @pytest.mark.parametrize("hint, expected", [
        ("UK", "UK"),
        ("gb", "UK"),
        (" United Kingdom ", "UK"),
        ("canada", "Canada"),
        ("AU", "Australia"),
        ("New Zealand", "New Zealand"),
    ])
    def test_aliases(self, hint, expected):
        assert normalize_country(hint) == expected

    def test_unknown_country(self):
        assert normalize_country("Atlantis") is None

    def test_empty(self):
        assert normalize_country("") is None
        assert normalize_country(None) is None


class TestGetRegionalTld:

    @pytest.mark.parametrize("country, expected", [
        ("UK", "co.uk"),
        ("Canada", "ca"),
        ("Australia", "com.au"),
        ("France", "fr"),
        ("Japan", "co.jp"),
    ])
    def test_yahoo_by_country(self, country, expected):
        assert get_regional_tld("yahoo", country) == expected

    def test_no_country_uses_default(self):
        assert get_regional_tld("yahoo") == "com"
        assert get_regional_tld("hotmail") == "com"

    def test_unknown_country_uses_default(self):
        assert get_regional_tld("outlook", "Atlantis") == "com"

    def test_preference_outside_provider_rules_falls_back(self):
        # gmail has no regional domains
        assert get_regional_tld("gmail", "UK") == "com"

    def test_unknown_provider(self):
        assert get_regional_tld("examplecorp", "UK") == "com"

    def test_custom_rules(self):
        rules = {"acme": ["io", "co.uk"]}
        assert get_regional_tld("acme", rules=rules) == "io"
        assert get_regional_tld("acme", "UK", rules=rules) == "io"

    def test_result_is_always_a_provider_extension(self):
        countries = [None, "Atlantis"] + list(REGIONAL_PREFERENCES) + list(COUNTRY_ALIASES)
        for provider, extensions in PROVIDER_RULES.items():
            for country in countries:
                assert get_regional_tld(provider, country) in extensions, (provider, country)

    def test_case_insensitive_provider(self):
        assert get_regional_tld("Yahoo", "uk") == "co.uk"
