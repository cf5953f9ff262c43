"""
Regional TLD preferences for providers that operate several country domains
"""

from email_autocorrect.core.email_data import PROVIDER_RULES


REGIONAL_PREFERENCES = {
    'UK': {
        'yahoo': 'co.uk',
        'hotmail': 'co.uk',
        'outlook': 'co.uk',
        'live': 'co.uk',
    },
    'Canada': {
        'yahoo': 'ca',
        'live': 'ca',
    },
    'Australia': {
        'yahoo': 'com.au',
        'outlook': 'com.au',
        'live': 'com.au',
    },
    'France': {
        'yahoo': 'fr',
        'hotmail': 'fr',
        'outlook': 'fr',
        'live': 'fr',
    },
    'Spain': {
        'yahoo': 'es',
        'hotmail': 'es',
        'outlook': 'es',
    },
    'Germany': {
        'yahoo': 'de',
        'hotmail': 'de',
        'outlook': 'de',
        'live': 'de',
        'gmx': 'de',
    },
    'Italy': {
        'yahoo': 'it',
        'hotmail': 'it',
        'outlook': 'it',
        'live': 'it',
    },
    'Ireland': {
        'yahoo': 'ie',
    },
    'New Zealand': {
        'yahoo': 'co.nz',
    },
    'Brazil': {
        'yahoo': 'com.br',
        'hotmail': 'com.br',
    },
    'Japan': {
        'yahoo': 'co.jp',
    },
    'India': {
        'yahoo': 'co.in',
    },
    'Austria': {
        'gmx': 'at',
    },
    'Switzerland': {
        'gmx': 'ch',
        'protonmail': 'ch',
    },
    'Russia': {
        'yandex': 'ru',
    },
}

# Other spellings callers pass for the same country
COUNTRY_ALIASES = {
    'uk': 'UK',
    'gb': 'UK',
    'gbr': 'UK',
    'united kingdom': 'UK',
    'great britain': 'UK',
    'england': 'UK',
    'scotland': 'UK',
    'wales': 'UK',
    'ca': 'Canada',
    'can': 'Canada',
    'canada': 'Canada',
    'au': 'Australia',
    'aus': 'Australia',
    'australia': 'Australia',
    'fr': 'France',
    'fra': 'France',
    'france': 'France',
    'es': 'Spain',
    'esp': 'Spain',
    'spain': 'Spain',
    'de': 'Germany',
    'deu': 'Germany',
    'germany': 'Germany',
    'it': 'Italy',
    'ita': 'Italy',
    'italy': 'Italy',
    'ie': 'Ireland',
    'irl': 'Ireland',
    'ireland': 'Ireland',
    'nz': 'New Zealand',
    'nzl': 'New Zealand',
    'new zealand': 'New Zealand',
    'br': 'Brazil',
    'bra': 'Brazil',
    'brazil': 'Brazil',
    'jp': 'Japan',
    'jpn': 'Japan',
    'japan': 'Japan',
    'in': 'India',
    'ind': 'India',
    'india': 'India',
    'at': 'Austria',
    'aut': 'Austria',
    'austria': 'Austria',
    'ch': 'Switzerland',
    'che': 'Switzerland',
    'switzerland': 'Switzerland',
    'ru': 'Russia',
    'rus': 'Russia',
    'russia': 'Russia',
}


def normalize_country(country):
    """Map a country hint to a REGIONAL_PREFERENCES key, or None if unknown."""
    if not country:
        return None
    return COUNTRY_ALIASES.get(country.strip().lower())


def get_regional_tld(provider, country=None, rules=None):
    """
    Preferred extension for ``provider`` given an optional country hint

    The result is always one of the provider's own extensions; a regional
    preference the provider does not operate falls back to its default.
    Unknown providers get ``com``.
    """
    rules = PROVIDER_RULES if rules is None else rules
    valid_tlds = rules.get(provider.lower()) if provider else None
    if not valid_tlds:
        return 'com'

    region = normalize_country(country)
    if region is None:
        return valid_tlds[0]

    regional_tld = REGIONAL_PREFERENCES.get(region, {}).get(provider.lower())
    if regional_tld and regional_tld in valid_tlds:
        return regional_tld

    return valid_tlds[0]
