"""
sahams.py  —  Sahams (Tajika sensitive points)
===============================================
Each saham is ``A - B + C`` on the zodiac, i.e. ``(C + A - B) mod 360``.
Sahams flagged as reversible use ``B - A + C`` in a night chart.

Operands are planets, the ascendant, house cusps (``asc + 30 * (h - 1)``),
the lord of a cusp, the lord of the Moon's sign, or the Punya Saham itself.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .chart import format_degree
from .constants import Planet, ZodiacSign
from .ephemeris import normalize
from .mudda_dasha import find_period

ASC = "ASC"
PUNYA = "PUNYA"
MOON_SIGN_LORD = "MOON_SIGN_LORD"


class SahamType(Enum):
    """Value tuple: (A, B, C, reversed at night)."""

    PUNYA       = ("MOON",    "SUN",        ASC,            True)
    VIDYA       = ("SUN",     "MOON",       ASC,            True)
    YASHAS      = ("JUPITER", "PUNYA",        ASC,            True)
    MITRA       = ("JUPITER", "PUNYA",        "VENUS",        False)
    MAHATMYA    = ("PUNYA",     "MARS",       ASC,            True)
    ASHA        = ("SATURN",  "VENUS",      ASC,            True)
    SAMARTHA    = ("MARS",    "SATURN",     ASC,            True)
    BHRATRI     = ("JUPITER", "SATURN",     ASC,            False)
    PITRI       = ("SATURN",  "SUN",        ASC,            True)
    MATRI       = ("MOON",    "VENUS",      ASC,            True)
    PUTRA       = ("JUPITER", "MOON",       ASC,            True)
    VIVAHA      = ("VENUS",   "SATURN",     ASC,            True)
    KARMA       = ("MARS",    "MERCURY",    ASC,            True)
    ROGA        = (ASC,       "MOON",       ASC,            False)
    MRITYU      = ("CUSP8",   "MOON",       "SATURN",       False)
    PARADESA    = ("CUSP9",   "SATURN",     ASC,            True)
    DHANA       = ("CUSP2",   "CUSP2_LORD", ASC,            False)
    RAJA        = ("SUN",     "SATURN",     ASC,            True)
    KARYASIDDHI = ("SATURN",  "SUN",        MOON_SIGN_LORD, True)

    def __init__(self, a: str, b: str, c: str, reverse_at_night: bool):
        self.a = a
        self.b = b
        self.c = c
        self.reverse_at_night = reverse_at_night

    @property
    def display_name(self) -> str:
        return self.name.title()

    def operands(self, day_chart: bool) -> Tuple[str, str, str]:
        if self.reverse_at_night and not day_chart:
            return self.b, self.a, self.c
        return self.a, self.b, self.c


@dataclass(frozen=True)
class SahamResult:
    saham: SahamType
    formula: str
    longitude: float
    sign: ZodiacSign
    degree_in_sign: float
    house: int
    lord: Planet
    lord_house: int
    active: bool
    activation_periods: Tuple[Tuple[date, date], ...]
    name: str
    meaning: str
    narrative: str

    def to_dict(self) -> dict:
        return {
            "saham": self.saham.name.lower(),
            "name": self.name,
            "meaning": self.meaning,
            "formula": self.formula,
            "sidereal_longitude": round(self.longitude, 4),
            "sign": self.sign.display_name,
            "degree_in_sign": round(self.degree_in_sign, 4),
            "degree_formatted": format_degree(self.degree_in_sign),
            "house": self.house,
            "lord": self.lord.display_name,
            "lord_house": self.lord_house,
            "is_active": self.active,
            "activation_periods": [
                {"start": s.isoformat(), "end": e.isoformat()} for s, e in self.activation_periods
            ],
            "narrative": self.narrative,
        }


def _label(token: str) -> str:
    if token == ASC:
        return "Asc"
    if token == PUNYA:
        return "Punya"
    if token == MOON_SIGN_LORD:
        return "Moon-sign lord"
    if token.startswith("CUSP"):
        number, _, lord = token[4:].partition("_")
        return f"Cusp {number} lord" if lord else f"Cusp {number}"
    return Planet[token].display_name


def operand_longitude(chart, token: str, punya: Optional[float] = None) -> float:
    if token == ASC:
        return chart.ascendant
    if token == PUNYA:
        if punya is None:
            punya = saham_longitude(chart, SahamType.PUNYA)
        return punya
    if token == MOON_SIGN_LORD:
        return chart.position(chart.moon_sign.ruler).longitude
    if token.startswith("CUSP"):
        number, _, lord = token[4:].partition("_")
        house = int(number)
        if lord:
            return chart.position(chart.house_lord(house)).longitude
        return chart.cusp_longitude(house)
    return chart.position(Planet[token]).longitude


def saham_formula(saham: SahamType, day_chart: bool) -> str:
    a, b, c = saham.operands(day_chart)
    return f"{_label(a)} - {_label(b)} + {_label(c)}"


def saham_longitude(chart, saham: SahamType, punya: Optional[float] = None) -> float:
    a, b, c = saham.operands(chart.is_day_chart)
    return normalize(operand_longitude(chart, c, punya)
                     + operand_longitude(chart, a, punya)
                     - operand_longitude(chart, b, punya))


def is_active(lord: Planet, house: int, chart, current: Optional[Planet]) -> bool:
    if current is None:
        return False
    return lord is current or chart.position(current).house == house


def compute_sahams(chart, current_planet: Optional[Planet], text, language,
                   mudda: Sequence = ()) -> List[SahamResult]:
    """
    Every saham of the catalogue for the annual chart. ``current_planet`` is
    the running Mudda Dasha planet (None outside the year).
    """
    punya = saham_longitude(chart, SahamType.PUNYA)
    results = []
    for saham in SahamType:
        lon = punya if saham is SahamType.PUNYA else saham_longitude(chart, saham, punya)
        sign = ZodiacSign.from_longitude(lon)
        house = chart.house_of_longitude(lon)
        lord = sign.ruler
        lord_house = chart.position(lord).house
        active = is_active(lord, house, chart, current_planet)
        period = find_period(mudda, lord)
        activation = ((period.start, period.end),) if period is not None else ()

        name = text.render(f"saham.name.{saham.name}", language)
        meaning = text.render(f"saham.meaning.{saham.name}", language)
        parts = [
            text.render("saham.narrative", language,
                        name=name, meaning=meaning,
                        sign=text.sign_name(sign, language), house=house),
            text.render("saham.lord", language,
                        lord=text.planet_name(lord, language), lord_house=lord_house),
        ]
        if active:
            parts.append(text.render("saham.active_note", language))
        if period is not None:
            parts.append(text.render("saham.activation", language,
                                     planet=text.planet_name(lord, language),
                                     start=period.start.isoformat(),
                                     end=period.end.isoformat()))

        results.append(SahamResult(
            saham=saham,
            formula=saham_formula(saham, chart.is_day_chart),
            longitude=lon,
            sign=sign,
            degree_in_sign=lon % 30.0,
            house=house,
            lord=lord,
            lord_house=lord_house,
            active=active,
            activation_periods=activation,
            name=name,
            meaning=meaning,
            narrative=" ".join(parts),
        ))
    return results
