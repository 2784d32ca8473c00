# Canonical country reference data (ISO-3166-1 alpha-2, lowercase).

from typing import Dict, Iterable, List, Tuple

AFRICA = "Africa"
AMERICAS = "Americas"
ASIA = "Asia"
EUROPE = "Europe"
OCEANIA = "Oceania"
UNKNOWN = "Unknown"

# Column order on the board is fixed.
CONTINENTS: Tuple[str, ...] = (AFRICA, AMERICAS, ASIA, EUROPE, OCEANIA)

_BY_CONTINENT = {
    AFRICA: (
        "dz ao bj bw bf bi cm cv cf td km cg cd ci dj eg gq er sz et ga gm gh gn gw ke "
        "ls lr ly mg mw ml mr mu yt ma mz na ne ng re rw sh st sn sc sl so za ss sd tz "
        "tg tn ug eh zm zw"
    ),
    AMERICAS: (
        "ag ar bs bb bz bo br ca cl co cr cu dm do ec sv gd gt gy ht hn jm mx ni pa py "
        "pe kn lc vc sr tt us uy ve"
    ),
    ASIA: (
        "af am az bh bd bt bn kh cn ge in id ir iq il jp jo kw kg la lb my mv mn mm np "
        "kp om pk ps qa sa sg kr lk sy tw tj th tl tr tm ae uz vn ye ph"
    ),
    # kz is filed under Europe, matching the board's historical grouping.
    EUROPE: (
        "al ad at by be ba bg hr cy cz dk ee fi fr de gr hu is ie it kz xk lv li lt lu "
        "mt md mc me nl mk no pl pt ro ru sm rs sk si es se ch ua gb va"
    ),
    OCEANIA: "au fj ki mh fm nr nz pw pg ws sb to tv vu",
}

CONTINENT_BY_ISO2: Dict[str, str] = {
    code: continent
    for continent, codes in _BY_CONTINENT.items()
    for code in codes.split()
}

# Territories and partially recognised states present in the table above.
NON_MEMBERS = frozenset({"yt", "re", "sh", "eh", "tw", "ps", "xk", "va"})

# The full global catalog: the 193 UN member states.
UN193: Tuple[str, ...] = tuple(c for c in CONTINENT_BY_ISO2 if c not in NON_MEMBERS)

TIER_1_TOURIST: Tuple[str, ...] = (
    "us", "gb", "ca", "au", "nz", "ie",
    "fr", "de", "it", "es", "pt", "nl", "be", "ch", "at", "se", "no", "dk", "fi",
    "jp", "cn", "kr", "in",
    "br", "ar", "mx",
    "za", "eg", "ng", "ke",
    "ru", "tr", "gr", "il", "sa", "ae",
)

TIER_2_COMMON: Tuple[str, ...] = TIER_1_TOURIST + (
    "pl", "cz", "hu", "ro", "ua",
    "th", "vn", "id", "my", "sg", "ph",
    "cl", "co", "pe", "ve",
    "ma", "dz", "gh", "ci", "sn",
    "pk", "bd", "lk", "np",
    "ir", "iq", "jo", "lb",
    "jm", "cu", "do",
)

# Tricolours and look-alike pairs.
TIER_3_TRICKY: Tuple[str, ...] = (
    "td", "ro",
    "id", "mc", "pl",
    "ml", "gn",
    "ie", "ci",
    "nl", "lu",
    "si", "sk", "ru",
    "co", "ec", "ve",
    "nz", "au",
    "no", "is",
    "jo", "ps", "kw", "ae",
)

def continent_of(iso2: str) -> str:
    return CONTINENT_BY_ISO2.get((iso2 or "").lower(), UNKNOWN)

def is_resolved(iso2: str) -> bool:
    return continent_of(iso2) != UNKNOWN

def codes_in(continent: str, catalog: Iterable[str] = UN193) -> List[str]:
    return [c for c in catalog if continent_of(c) == continent]
