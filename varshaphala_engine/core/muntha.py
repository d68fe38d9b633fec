"""
muntha.py  —  Muntha (progressed ascendant)
============================================
The natal ascendant advanced one sign per completed year of life:

    muntha = natal_ascendant + (age mod 12) * 30

The degree within the sign is preserved. Muntha in houses 1, 2, 3, 5, 9,
10 or 11 of the annual chart is considered well placed.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import MUNTHA_GOOD_HOUSES, Planet, PlanetStrength, ZodiacSign
from .chart import format_degree, house_from_ascendant
from .dignity import chart_strength
from .ephemeris import normalize
from .errors import ValidationError

# Tone keys by the strength of the Muntha lord.
_LORD_TONE = {
    PlanetStrength.EXALTED: "tone.excellent",
    PlanetStrength.STRONG: "tone.excellent",
    PlanetStrength.MODERATE: "tone.favorable",
    PlanetStrength.ANGULAR: "tone.favorable",
    PlanetStrength.DEBILITATED: "tone.challenging",
}


@dataclass(frozen=True)
class Muntha:
    longitude: float
    sign: ZodiacSign
    degree_in_sign: float
    house: int
    natal_house: int
    lord: Planet
    lord_house: int
    lord_strength: PlanetStrength
    is_good_house: bool
    tags: Tuple[str, ...]
    themes: Tuple[str, ...]
    narrative: str

    def to_dict(self) -> dict:
        return {
            "sidereal_longitude": round(self.longitude, 4),
            "sign": self.sign.display_name,
            "degree_in_sign": round(self.degree_in_sign, 4),
            "degree_formatted": format_degree(self.degree_in_sign),
            "house": self.house,
            "natal_house": self.natal_house,
            "lord": self.lord.display_name,
            "lord_house": self.lord_house,
            "lord_strength": self.lord_strength.value,
            "is_good_house": self.is_good_house,
            "tags": list(self.tags),
            "themes": list(self.themes),
            "narrative": self.narrative,
        }


def muntha_longitude(natal_ascendant_longitude: float, age: int) -> float:
    return normalize(natal_ascendant_longitude + (age % 12) * 30.0)


def resolve_muntha(natal_ascendant_longitude: float, age: int, chart, text, language) -> Muntha:
    if age < 0:
        raise ValidationError(f"Muntha requires a non-negative age, got {age}", {"age": age})

    lon = muntha_longitude(natal_ascendant_longitude, age)
    sign = ZodiacSign.from_longitude(lon)
    house = chart.house_of_longitude(lon)
    lord = sign.ruler
    lord_house = chart.position(lord).house
    lord_strength = chart_strength(chart, lord)
    good = house in MUNTHA_GOOD_HOUSES

    narrative = " ".join([
        text.render("muntha.narrative", language,
                    house=house,
                    sign=text.sign_name(sign, language),
                    significance=text.render(f"house.significance.{house}", language)),
        text.render("muntha.lord", language,
                    lord=text.planet_name(lord, language),
                    lord_house=lord_house,
                    tone=text.render(_LORD_TONE.get(lord_strength, "tone.balanced"), language)),
        text.render("muntha.outlook.good" if good else "muntha.outlook.difficult", language),
    ])

    return Muntha(
        longitude=lon,
        sign=sign,
        degree_in_sign=lon % 30.0,
        house=house,
        natal_house=house_from_ascendant(lon, natal_ascendant_longitude, chart.house_system),
        lord=lord,
        lord_house=lord_house,
        lord_strength=lord_strength,
        is_good_house=good,
        tags=tuple(text.render_list(f"muntha.tags.{sign.name}", language)),
        themes=tuple(text.render_list(f"muntha.themes.{house}", language)),
        narrative=narrative,
    )
