"""
Static provider, TLD and keyboard data consumed by the registry
"""

from email_autocorrect.core.models import ProviderEntry


# Popular mailbox providers with alias domains and a popularity weight
# (rough share of consumer mailboxes). Domains and aliases are disjoint.
PROVIDERS = (
    # Major global providers
    ProviderEntry('gmail.com', frozenset({'googlemail.com'}), 0.43),
    ProviderEntry('yahoo.com', frozenset({'ymail.com', 'rocketmail.com'}), 0.08),
    ProviderEntry('outlook.com', frozenset({'hotmail.com', 'live.com', 'msn.com'}), 0.09),
    ProviderEntry('icloud.com', frozenset({'me.com', 'mac.com'}), 0.02),
    ProviderEntry('aol.com', frozenset({'aim.com'}), 0.01),

    # Regional variants
    ProviderEntry('yahoo.co.uk', frozenset(), 0.02),
    ProviderEntry('yahoo.co.in', frozenset(), 0.01),
    ProviderEntry('yahoo.in', frozenset(), 0.01),
    ProviderEntry('yahoo.fr', frozenset(), 0.01),
    ProviderEntry('hotmail.co.uk', frozenset(), 0.01),
    ProviderEntry('hotmail.fr', frozenset(), 0.01),
    ProviderEntry('gmx.de', frozenset(), 0.01),
    ProviderEntry('web.de', frozenset(), 0.01),
    ProviderEntry('yandex.ru', frozenset({'yandex.com'}), 0.01),

    # Privacy / professional
    ProviderEntry('protonmail.com', frozenset({'pm.me', 'protonmail.ch'}), 0.005),
    ProviderEntry('gmx.com', frozenset(), 0.005),
    ProviderEntry('mail.com', frozenset(), 0.005),
    ProviderEntry('zoho.com', frozenset(), 0.005),
    ProviderEntry('fastmail.com', frozenset(), 0.002),
)


# Which extensions each provider actually operates, keyed by the bare
# provider label. The first entry is the provider default.
PROVIDER_RULES = {
    # Global providers - restricted TLDs
    'gmail': ['com'],
    'googlemail': ['com'],
    'icloud': ['com'],
    'me': ['com'],
    'mac': ['com'],
    'aol': ['com'],
    'aim': ['com'],
    'zoho': ['com'],
    'protonmail': ['com', 'ch'],
    'proton': ['me'],
    'tutanota': ['com'],
    'fastmail': ['com', 'fm'],
    'ymail': ['com'],
    'rocketmail': ['com'],

    # Multi-TLD providers
    'yahoo': ['com', 'co.uk', 'ca', 'com.au', 'fr', 'es', 'ie', 'co.nz', 'de', 'it', 'com.br', 'co.jp', 'co.in', 'in'],
    'hotmail': ['com', 'co.uk', 'fr', 'es', 'de', 'it', 'com.br'],
    'live': ['com', 'co.uk', 'fr', 'de', 'it', 'ca', 'com.au'],
    'outlook': ['com', 'co.uk', 'com.au', 'fr', 'es', 'de', 'it'],
    'msn': ['com'],

    # Regional ISPs
    'btinternet': ['com'],
    'virginmedia': ['com'],
    'sky': ['com'],
    'talktalk': ['net'],
    'orange': ['fr', 'es'],
    'free': ['fr'],
    'sfr': ['fr'],
    'laposte': ['net'],
    'wanadoo': ['fr'],
    'gmx': ['com', 'de', 'at', 'ch', 'net'],
    'web': ['de'],
    't-online': ['de'],
    'yandex': ['ru', 'com'],
    'telstra': ['com.au'],
    'bigpond': ['com', 'com.au', 'net.au'],
    'optusnet': ['com.au'],
    'rogers': ['com'],
    'bell': ['net', 'ca'],
    'shaw': ['ca'],
    'telus': ['net'],
    'qq': ['com'],
    '163': ['com'],
    '126': ['com'],
    'sina': ['com'],
    'naver': ['com'],
    'hanmail': ['net'],
    'rediffmail': ['com'],
}


# Baseline TLDs; the registry unions these with any list loaded at runtime
TLD_DATA = (
    # Generic
    'com', 'net', 'org', 'edu', 'gov', 'mil', 'int',

    # Modern gTLDs
    'io', 'ai', 'app', 'dev', 'tech', 'xyz', 'online', 'site', 'website',
    'blog', 'shop', 'store', 'cloud', 'digital', 'email', 'social',

    # Business / professional
    'biz', 'info', 'pro', 'name', 'mobi', 'tel', 'jobs', 'company',

    # Major ccTLDs
    'uk', 'de', 'fr', 'it', 'es', 'nl', 'be', 'ch', 'at', 'dk', 'se', 'no', 'fi',
    'ie', 'pt', 'ru', 'ua', 'pl', 'cz', 'sk', 'hu', 'ro', 'bg', 'gr', 'tr',
    'jp', 'cn', 'kr', 'tw', 'hk', 'sg', 'my', 'th', 'vn', 'ph', 'id',
    'in', 'pk', 'bd', 'lk', 'np',
    'au', 'nz',
    'us', 'ca', 'mx', 'br', 'ar', 'cl', 'co', 'pe', 've',
    'za', 'eg', 'ma', 'ng', 'ke', 'tn',
    'ae', 'sa', 'il', 'jo', 'qa', 'kw',

    # Tech-friendly ccTLDs
    'me', 'tv', 'cc', 'to', 'ly', 'am', 'fm', 'ws', 'gg', 'im',

    # Common second-level registrations
    'co.uk', 'org.uk', 'ac.uk', 'gov.uk',
    'co.in', 'org.in', 'gov.in', 'ac.in', 'edu.in', 'net.in',
    'com.au', 'org.au', 'gov.au', 'edu.au', 'net.au',
    'co.nz', 'org.nz', 'govt.nz', 'ac.nz', 'net.nz',
    'com.br', 'org.br', 'gov.br', 'edu.br', 'net.br',
    'co.za', 'org.za', 'gov.za', 'ac.za', 'net.za',
    'co.jp', 'or.jp', 'go.jp', 'ac.jp', 'ne.jp',

    # IDN ccTLDs, stored as A-labels
    'xn--fiqs8s',          # .中国
    'xn--fiqz9s',          # .中國
    'xn--p1ai',            # .рф
    'xn--wgbh1c',          # .مصر
    'xn--j6w193g',         # .香港
    'xn--h2brj9c',         # .भारत
    'xn--mgbbh1a71e',      # .بھارت
    'xn--s9brj9c',         # .ਭਾਰਤ
    'xn--xkc2dl3a5ee0h',   # .இந்தியா
    'xn--45brj9c',         # .ভারত
)


# QWERTY neighbours of each key
KEYBOARD_MAP = {
    'a': ('s', 'q', 'w', 'z'),
    'b': ('v', 'n', 'g', 'h', ' '),
    'c': ('x', 'v', 'd', 'f', ' '),
    'd': ('s', 'f', 'e', 'r', 'c', 'x'),
    'e': ('w', 'r', 'd', 's', '3', '4'),
    'f': ('d', 'g', 'r', 't', 'c', 'v'),
    'g': ('f', 'h', 't', 'y', 'v', 'b'),
    'h': ('g', 'j', 'y', 'u', 'b', 'n'),
    'i': ('u', 'o', 'k', 'j', '8', '9'),
    'j': ('h', 'k', 'u', 'i', 'n', 'm'),
    'k': ('j', 'l', 'i', 'o', 'm', ','),
    'l': ('k', 'o', 'p', ';', '.'),
    'm': ('n', 'j', 'k', ',', ' '),
    'n': ('b', 'm', 'h', 'j', ' '),
    'o': ('i', 'p', 'l', 'k', '9', '0'),
    'p': ('o', 'l', '[', ';', '0', '-'),
    'q': ('w', 'a', '1', '2'),
    'r': ('e', 't', 'f', 'd', '4', '5'),
    's': ('a', 'd', 'w', 'e', 'z', 'x'),
    't': ('r', 'y', 'g', 'f', '5', '6'),
    'u': ('y', 'i', 'j', 'h', '7', '8'),
    'v': ('c', 'b', 'f', 'g', ' '),
    'w': ('q', 'e', 'a', 's', '2', '3'),
    'x': ('z', 'c', 's', 'd', ' '),
    'y': ('t', 'u', 'h', 'g', '6', '7'),
    'z': ('a', 'x', 's'),
    '.': ('l', ',', ';', '/'),
    '@': ('2', 'q', 'a'),
    '1': ('2', 'q'),
    '2': ('1', '3', 'q', 'w', '@'),
    '3': ('2', '4', 'w', 'e'),
    '4': ('3', '5', 'e', 'r'),
    '5': ('4', '6', 'r', 't'),
    '6': ('5', '7', 't', 'y'),
    '7': ('6', '8', 'y', 'u'),
    '8': ('7', '9', 'u', 'i'),
    '9': ('8', '0', 'i', 'o'),
    '0': ('9', '-', 'o', 'p'),
}
