"""
constants.py  —  Domain enumerations and classical tables
==========================================================
Closed sets used throughout the annual-chart engine: planets, signs,
nakshatras, Tajika aspect classes, strength bands and the sign-relationship
tables needed for dignity.

Every enum carries its associated data (year allotments, rulers, orbs,
cut-points) so callers never match on display strings.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple


# ---- Planets -----------------------------------------------------------------

class Planet(Enum):
    """The nine grahas. Value tuple: (display name, symbol, Vimshottari years, natural benefic)."""

    SUN     = ("Sun",     "Su", 6,  False)
    MOON    = ("Moon",    "Mo", 10, True)
    MARS    = ("Mars",    "Ma", 7,  False)
    MERCURY = ("Mercury", "Me", 17, True)
    JUPITER = ("Jupiter", "Ju", 16, True)
    VENUS   = ("Venus",   "Ve", 20, True)
    SATURN  = ("Saturn",  "Sa", 19, False)
    RAHU    = ("Rahu",    "Ra", 18, False)
    KETU    = ("Ketu",    "Ke", 7,  False)

    def __init__(self, display_name: str, symbol: str, dasha_years: int, benefic: bool):
        self.display_name = display_name
        self.symbol = symbol
        self.dasha_years = dasha_years
        self.is_benefic = benefic

    @property
    def is_node(self) -> bool:
        return self in (Planet.RAHU, Planet.KETU)

    @classmethod
    def from_name(cls, name: str) -> "Planet":
        key = name.strip().upper()
        for planet in cls:
            if planet.name == key or planet.display_name.upper() == key:
                return planet
        raise KeyError(name)


SEVEN_PLANETS: Tuple[Planet, ...] = (
    Planet.SUN, Planet.MOON, Planet.MARS, Planet.MERCURY,
    Planet.JUPITER, Planet.VENUS, Planet.SATURN,
)
ALL_PLANETS: Tuple[Planet, ...] = SEVEN_PLANETS + (Planet.RAHU, Planet.KETU)

VIMSHOTTARI_ORDER: Tuple[Planet, ...] = (
    Planet.KETU, Planet.VENUS, Planet.SUN, Planet.MOON, Planet.MARS,
    Planet.RAHU, Planet.JUPITER, Planet.SATURN, Planet.MERCURY,
)
VIMSHOTTARI_TOTAL_YEARS = 120

# Sunday first, matching the vara count used for the weekday lord.
WEEKDAY_LORDS: Tuple[Planet, ...] = (
    Planet.SUN, Planet.MOON, Planet.MARS, Planet.MERCURY,
    Planet.JUPITER, Planet.VENUS, Planet.SATURN,
)

# Planetary-hour succession (slowest to fastest).
CHALDEAN_ORDER: Tuple[Planet, ...] = (
    Planet.SATURN, Planet.JUPITER, Planet.MARS, Planet.SUN,
    Planet.VENUS, Planet.MERCURY, Planet.MOON,
)

DIURNAL_PLANETS = {Planet.SUN, Planet.JUPITER, Planet.VENUS}
NOCTURNAL_PLANETS = {Planet.MOON, Planet.MARS, Planet.SATURN}


def vimshottari_sequence_from(lord: Planet) -> Tuple[Planet, ...]:
    """Return the nine-planet Vimshottari cycle starting at ``lord``."""
    idx = VIMSHOTTARI_ORDER.index(lord)
    return VIMSHOTTARI_ORDER[idx:] + VIMSHOTTARI_ORDER[:idx]


# ---- Signs and nakshatras ----------------------------------------------------

class ZodiacSign(Enum):
    ARIES       = (0,  "Aries",       Planet.MARS)
    TAURUS      = (1,  "Taurus",      Planet.VENUS)
    GEMINI      = (2,  "Gemini",      Planet.MERCURY)
    CANCER      = (3,  "Cancer",      Planet.MOON)
    LEO         = (4,  "Leo",         Planet.SUN)
    VIRGO       = (5,  "Virgo",       Planet.MERCURY)
    LIBRA       = (6,  "Libra",       Planet.VENUS)
    SCORPIO     = (7,  "Scorpio",     Planet.MARS)
    SAGITTARIUS = (8,  "Sagittarius", Planet.JUPITER)
    CAPRICORN   = (9,  "Capricorn",   Planet.SATURN)
    AQUARIUS    = (10, "Aquarius",    Planet.SATURN)
    PISCES      = (11, "Pisces",      Planet.JUPITER)

    def __init__(self, index: int, display_name: str, ruler: Planet):
        self.index = index
        self.display_name = display_name
        self.ruler = ruler

    @property
    def start_longitude(self) -> float:
        return self.index * 30.0

    def offset(self, n: int) -> "ZodiacSign":
        return SIGNS[(self.index + n) % 12]

    @classmethod
    def from_longitude(cls, lon: float) -> "ZodiacSign":
        return SIGNS[int((lon % 360.0) // 30.0) % 12]


SIGNS: Tuple[ZodiacSign, ...] = tuple(ZodiacSign)

NAKSHATRA_SPAN = 360.0 / 27.0

NAKSHATRAS: Tuple[str, ...] = (
    "Ashwini", "Bharani", "Krittika", "Rohini", "Mrigashira", "Ardra",
    "Punarvasu", "Pushya", "Ashlesha", "Magha", "Purva Phalguni", "Uttara Phalguni",
    "Hasta", "Chitra", "Swati", "Vishakha", "Anuradha", "Jyeshtha",
    "Mula", "Purva Ashadha", "Uttara Ashadha", "Shravana", "Dhanishtha",
    "Shatabhisha", "Purva Bhadrapada", "Uttara Bhadrapada", "Revati",
)


def nakshatra_of(lon: float) -> Tuple[int, str, Planet, int]:
    """Return (index 0-26, name, ruling planet, pada 1-4) for a sidereal longitude."""
    lon = lon % 360.0
    idx = int(lon / NAKSHATRA_SPAN) % 27
    pada = int((lon % NAKSHATRA_SPAN) / (NAKSHATRA_SPAN / 4.0)) + 1
    return idx, NAKSHATRAS[idx], VIMSHOTTARI_ORDER[idx % 9], min(pada, 4)


# ---- Houses ------------------------------------------------------------------

class HouseSystem(Enum):
    WHOLE_SIGN = "whole_sign"
    EQUAL      = "equal"


KENDRA_HOUSES    = (1, 4, 7, 10)
TRIKONA_HOUSES   = (5, 9)
PANAPHARA_HOUSES = (2, 5, 8, 11)
APOKLIMA_HOUSES  = (3, 6, 9, 12)
DUSTHANA_HOUSES  = (6, 8, 12)
UPACHAYA_HOUSES  = (3, 6)
GAIN_HOUSES      = (2, 11)

# Houses where a lord, Muntha or monthly transit point is considered supportive.
SUPPORTIVE_HOUSES = (1, 2, 4, 5, 7, 9, 10, 11)
MUNTHA_GOOD_HOUSES = (1, 2, 3, 5, 9, 10, 11)


# ---- Languages ---------------------------------------------------------------

class Language(Enum):
    ENGLISH = "en"
    NEPALI  = "ne"

    @classmethod
    def parse(cls, value) -> "Language":
        if isinstance(value, Language):
            return value
        key = str(value).strip().lower()
        for lang in cls:
            if lang.value == key or lang.name.lower() == key:
                return lang
        raise ValueError(f"Unsupported language: {value!r}")


# ---- Tajika aspects ----------------------------------------------------------

class AspectClass(Enum):
    """Tajika aspect angles. Value tuple: (angle, maximum orb in degrees)."""

    CONJUNCTION    = (0,   12.0)
    SEMI_SQUARE    = (45,  2.0)
    SEXTILE        = (60,  6.0)
    QUINTILE       = (72,  2.0)
    SQUARE         = (90,  7.0)
    TRINE          = (120, 8.0)
    SESQUIQUADRATE = (135, 2.0)
    BIQUINTILE     = (144, 2.0)
    QUINCUNX       = (150, 3.0)
    OPPOSITION     = (180, 9.0)

    def __init__(self, angle: int, max_orb: float):
        self.angle = angle
        self.max_orb = max_orb

    @classmethod
    def match(cls, separation: float) -> Optional["AspectClass"]:
        """Return the class whose window [angle - orb, angle + orb] holds ``separation``."""
        for aspect in cls:
            if abs(separation - aspect.angle) <= aspect.max_orb:
                return aspect
        return None


class AspectStrength(Enum):
    VERY_STRONG = 1.0
    STRONG      = 0.8
    MODERATE    = 0.6
    WEAK        = 0.4
    VERY_WEAK   = 0.2

    @property
    def weight(self) -> float:
        return self.value

    @classmethod
    def from_orb_ratio(cls, ratio: float) -> "AspectStrength":
        if ratio < 0.2:
            return cls.VERY_STRONG
        if ratio < 0.4:
            return cls.STRONG
        if ratio < 0.6:
            return cls.MODERATE
        if ratio < 0.8:
            return cls.WEAK
        return cls.VERY_WEAK


class TajikaYoga(Enum):
    """Value tuple: (display name, favourable)."""

    ITHASALA   = ("Ithasala",   True)
    MUTHASHILA = ("Muthashila", True)
    KAMBOOLA   = ("Kamboola",   True)
    NAKTA      = ("Nakta",      True)
    RADDA      = ("Radda",      False)
    DURAPHA    = ("Durapha",    False)
    EASARAPHA  = ("Easarapha",  False)

    def __init__(self, display_name: str, positive: bool):
        self.display_name = display_name
        self.is_positive = positive


# ---- Strength bands ----------------------------------------------------------

class Dignity(Enum):
    EXALTED     = "exalted"
    OWN_SIGN    = "own_sign"
    FRIENDLY    = "friendly"
    NEUTRAL     = "neutral"
    INIMICAL    = "inimical"
    DEBILITATED = "debilitated"


class PlanetStrength(Enum):
    EXALTED     = "exalted"
    DEBILITATED = "debilitated"
    STRONG      = "strong"
    ANGULAR     = "angular"
    RETROGRADE  = "retrograde"
    MODERATE    = "moderate"

    @property
    def is_strong(self) -> bool:
        return self in (PlanetStrength.EXALTED, PlanetStrength.STRONG)


class BalaCategory(Enum):
    """Cut-points over a 0-20 composite. Value tuple: (key, minimum total)."""

    EXCELLENT = ("excellent", 16.0)
    STRONG    = ("strong",    12.0)
    AVERAGE   = ("average",   8.0)
    WEAK      = ("weak",      4.0)
    POOR      = ("poor",      0.0)

    def __init__(self, key: str, minimum: float):
        self.key = key
        self.minimum = minimum

    @classmethod
    def from_total(cls, total: float) -> "BalaCategory":
        for category in cls:
            if total >= category.minimum:
                return category
        return cls.POOR


class TriPatakiRole(Enum):
    """Value tuple: (key, first house of the four-sign arc)."""

    UDAYA  = ("udaya",  1)
    MADHYA = ("madhya", 5)
    ANTA   = ("anta",   9)

    def __init__(self, key: str, first_house: int):
        self.key = key
        self.first_house = first_house

    @property
    def houses(self) -> Tuple[int, ...]:
        return tuple(range(self.first_house, self.first_house + 4))


class KeyDateType(Enum):
    FAVORABLE   = "favorable"
    CHALLENGING = "challenging"
    IMPORTANT   = "important"


# ---- Sign-relationship tables ------------------------------------------------

EXALTATION_DEGREES: Dict[Planet, float] = {
    Planet.SUN: 10.0, Planet.MOON: 33.0, Planet.MARS: 298.0,
    Planet.MERCURY: 165.0, Planet.JUPITER: 95.0, Planet.VENUS: 357.0,
    Planet.SATURN: 200.0,
}

OWN_SIGNS: Dict[Planet, Tuple[ZodiacSign, ...]] = {
    Planet.SUN: (ZodiacSign.LEO,),
    Planet.MOON: (ZodiacSign.CANCER,),
    Planet.MARS: (ZodiacSign.ARIES, ZodiacSign.SCORPIO),
    Planet.MERCURY: (ZodiacSign.GEMINI, ZodiacSign.VIRGO),
    Planet.JUPITER: (ZodiacSign.SAGITTARIUS, ZodiacSign.PISCES),
    Planet.VENUS: (ZodiacSign.TAURUS, ZodiacSign.LIBRA),
    Planet.SATURN: (ZodiacSign.CAPRICORN, ZodiacSign.AQUARIUS),
}

# Naisargika (natural) relationships; anything not listed is inimical.
FRIENDS: Dict[Planet, Tuple[Planet, ...]] = {
    Planet.SUN: (Planet.MOON, Planet.MARS, Planet.JUPITER),
    Planet.MOON: (Planet.SUN, Planet.MERCURY),
    Planet.MARS: (Planet.SUN, Planet.MOON, Planet.JUPITER),
    Planet.MERCURY: (Planet.SUN, Planet.VENUS),
    Planet.JUPITER: (Planet.SUN, Planet.MOON, Planet.MARS),
    Planet.VENUS: (Planet.MERCURY, Planet.SATURN),
    Planet.SATURN: (Planet.MERCURY, Planet.VENUS),
}

NEUTRALS: Dict[Planet, Tuple[Planet, ...]] = {
    Planet.SUN: (Planet.MERCURY,),
    Planet.MOON: (Planet.MARS, Planet.JUPITER, Planet.VENUS, Planet.SATURN),
    Planet.MARS: (Planet.MERCURY, Planet.VENUS, Planet.SATURN),
    Planet.MERCURY: (Planet.MARS, Planet.JUPITER, Planet.SATURN),
    Planet.JUPITER: (Planet.MERCURY, Planet.SATURN),
    Planet.VENUS: (Planet.MARS, Planet.JUPITER),
    Planet.SATURN: (Planet.MARS, Planet.JUPITER),
}

# Pancha Vargiya Bala: house cusp where each planet gains directional strength.
DIG_BALA_HOUSE: Dict[Planet, int] = {
    Planet.JUPITER: 1, Planet.MERCURY: 1,
    Planet.MOON: 4, Planet.VENUS: 4,
    Planet.SATURN: 7,
    Planet.SUN: 10, Planet.MARS: 10,
}


def exaltation_sign(planet: Planet) -> Optional[ZodiacSign]:
    deg = EXALTATION_DEGREES.get(planet)
    return None if deg is None else ZodiacSign.from_longitude(deg)


def debilitation_sign(planet: Planet) -> Optional[ZodiacSign]:
    deg = EXALTATION_DEGREES.get(planet)
    return None if deg is None else ZodiacSign.from_longitude(deg + 180.0)


def signs_ruled_by(planet: Planet) -> List[ZodiacSign]:
    return [s for s in SIGNS if s.ruler is planet]
