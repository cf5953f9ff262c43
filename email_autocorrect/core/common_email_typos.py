"""
Misspelled mailbox domains and the domain that was meant

Entries are grouped by the intended domain. Keys of the flattened
``TYPO_MAP`` are lower-case full domains as typed; a hit there is always
a rewrite.
"""

MISSPELLINGS = {
    'gmail.com': (
        'gmial.com', 'gmai.com', 'gmil.com', 'gmaill.com', 'gmali.com', 'gmal.com',
        'gnail.com', 'gmaiil.com', 'gmaol.com', 'gmaik.com', 'gamil.com', 'gmeil.com',
        'gmsil.com', 'gmqil.com', 'gmaul.com', 'gfmail.com', 'gtmail.com', 'gmaio.com',
        # slipped dot
        'gmailc.om', 'gmai.lcom', 'gmailcom',
        # extension
        'gmail.co', 'gmail.con', 'gmail.cmo', 'gmail.ocm', 'gmail.vom', 'gmail.comm',
        'gmail.cm', 'gmil.co',
        # phone autocorrect rewriting the provider name
        'email.com',
    ),
    'yahoo.com': (
        'yahooo.com', 'yaho.com', 'yahho.com', 'yahhoo.com', 'yahol.com', 'yhaoo.com',
        'yhoo.com', 'yaoo.com', 'yaoho.com', 'yaaho.com', 'yajoo.com', 'yahpp.com',
        'yahoom.com', 'yshoo.com', 'yaboo.com', 'uahoo.com', 'tahoo.com', 'yeahoo.com',
        'yahou.com', 'yahii.com', 'yahoocom',
        'yahoo.co', 'yahoo.con', 'yahoo.cmo', 'yahoo.ocm', 'yahoo.comm', 'yahoo.cm',
        'yahooo.co',
    ),
    'hotmail.com': (
        'hotmial.com', 'hotmil.com', 'hotmai.com', 'hotmal.com', 'hotmali.com',
        'hotamil.com', 'hotmaill.com', 'hotmeil.com', 'hotmait.com', 'hotmaiil.com',
        'hotmqil.com', 'hotmsil.com', 'hotnail.com', 'hotmaul.com', 'hotmzil.com',
        'homtail.com', 'htomail.com', 'htmail.com', 'homail.com', 'hormail.com',
        'gotmail.com', 'hotmails.com', 'hotmailcom',
        'hotmial.co', 'hotmail.co', 'hotmail.con', 'hotmail.cmo', 'hotmail.ocm',
        'hotmail.comm', 'hotmail.cm',
    ),
    'outlook.com': (
        'outlok.com', 'outloo.com', 'outlokk.com', 'outllook.com', 'outloook.com',
        'ooutlook.com', 'oultook.com', 'outlool.com', 'outllok.com', 'outloot.com',
        'autlook.com', 'putlook.com', 'oitlook.com', 'iutlook.com', 'ourlook.com',
        'outlookcom',
        'outlook.co', 'outlook.con', 'outlook.cmo', 'outlook.comm', 'outlook.cm',
        'outlok.co',
    ),
    'icloud.com': (
        'iclould.com', 'iclou.com', 'iclod.com', 'icoud.com', 'icould.com', 'iclud.com',
        'icloid.com', 'icloyd.com', 'iclooud.com', 'iclound.com', 'iclolud.com',
        'icloude.com', 'icloudcom',
        'icloud.co', 'icloud.con', 'iclud.co',
    ),
    'aol.com': (
        'aoll.com', 'aool.com', 'aoel.com', 'aoil.com', 'apl.com', 'aok.com', 'aolcom',
        'aol.co', 'aol.con', 'aol.cmo', 'aol.comm',
    ),
    'live.com': ('livee.com', 'lve.com', 'liv.com', 'live.co', 'live.con', 'live.comm'),
    'protonmail.com': (
        'protonmal.com', 'protonmial.com', 'protonmai.com', 'protinmail.com',
        'protonmaii.com', 'protonmail.co', 'protonmail.con',
    ),
    'zoho.com': ('zoh.com', 'zohoo.com', 'zoho.co', 'zoho.con', 'zoho.comm'),
    'yandex.com': ('yanex.com', 'yandx.com', 'yandexcom', 'yandex.co', 'yandex.con', 'yandex.comm'),
    'gmx.com': ('gmxx.com', 'gmx.co', 'gmx.con'),
    'mail.com': ('maill.com', 'mail.co', 'mail.con', 'mail.comm'),
    'fastmail.com': ('fastmal.com', 'fastmai.com', 'fastmail.co', 'fastmail.con'),
}

# Dictation splitting or mishearing the provider name
SPOKEN_MISHEARINGS = {
    'gmail.com': ('g mail.com', 'gee mail.com', 'jay mail.com'),
    'yahoo.com': ('why ahoo.com',),
    'hotmail.com': ('hot male.com', 'hot mail.com'),
    'outlook.com': ('out look.com',),
    'icloud.com': ('i cloud.com',),
    'aol.com': ('a o l.com',),
}

TYPO_MAP = {
    typo: domain
    for table in (MISSPELLINGS, SPOKEN_MISHEARINGS)
    for domain, typos in table.items()
    for typo in typos
}
