"""
pancha_bala.py  —  Pancha-Vargiya Bala
=======================================
Five-fold positional strength for the seven planets of the annual chart.
Each component is scored on [0, 4], so the total is bounded by 20.

1. Kshetra  sign dignity: exalted/own 4, friendly 3, neutral 2, inimical 1,
            debilitated 0
2. Uchcha   proximity to the exaltation degree, 4 * (1 - d / 180)
3. Dig      proximity to the planet's directional cusp, 4 * (1 - d / 180)
            (Jupiter/Mercury 1st, Moon/Venus 4th, Saturn 7th, Sun/Mars 10th)
4. Kala     vara lord 1.5 + hora lord 1.5 + 1 for a diurnal planet by day
            or a nocturnal planet by night (Mercury always)
5. Bhava    kendra 4, panaphara 2, apoklima 1

Category cut-points over the total: >=16 excellent, >=12 strong,
>=8 average, >=4 weak, else poor.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Tuple

from .chart import MEAN_SUNRISE_HOUR, vara_lord
from .constants import (
    CHALDEAN_ORDER, DIG_BALA_HOUSE, DIURNAL_PLANETS, EXALTATION_DEGREES,
    KENDRA_HOUSES, NOCTURNAL_PLANETS, PANAPHARA_HOUSES, SEVEN_PLANETS,
    BalaCategory, Dignity, Planet,
)
from .dignity import planet_dignity
from .ephemeris import angular_distance

COMPONENT_MAX = 4.0

KSHETRA_POINTS = {
    Dignity.EXALTED: 4.0,
    Dignity.OWN_SIGN: 4.0,
    Dignity.FRIENDLY: 3.0,
    Dignity.NEUTRAL: 2.0,
    Dignity.INIMICAL: 1.0,
    Dignity.DEBILITATED: 0.0,
}

VARA_POINTS = 1.5
HORA_POINTS = 1.5
DAY_NIGHT_POINTS = 1.0


@dataclass(frozen=True)
class PanchaVargiyaBala:
    planet: Planet
    kshetra: float
    uchcha: float
    dig: float
    kala: float
    bhava: float
    total: float
    category: BalaCategory

    @property
    def components(self) -> Tuple[float, float, float, float, float]:
        return (self.kshetra, self.uchcha, self.dig, self.kala, self.bhava)

    def to_dict(self) -> dict:
        return {
            "planet": self.planet.display_name,
            "kshetra_bala": round(self.kshetra, 2),
            "uchcha_bala": round(self.uchcha, 2),
            "dig_bala": round(self.dig, 2),
            "kala_bala": round(self.kala, 2),
            "bhava_bala": round(self.bhava, 2),
            "total": round(self.total, 2),
            "category": self.category.key,
        }


def hora_lord(local_dt: datetime) -> Planet:
    """Planetary-hour ruler, counting equal hours from a mean 06:00 sunrise."""
    day_lord = vara_lord(local_dt)
    sunrise = local_dt.replace(hour=MEAN_SUNRISE_HOUR, minute=0, second=0, microsecond=0)
    if local_dt.hour < MEAN_SUNRISE_HOUR:
        sunrise -= timedelta(days=1)
    hours = int((local_dt - sunrise).total_seconds() // 3600)
    return CHALDEAN_ORDER[(CHALDEAN_ORDER.index(day_lord) + hours) % 7]


def _proximity(lon: float, point: float) -> float:
    return COMPONENT_MAX * (1.0 - angular_distance(lon, point) / 180.0)


def kshetra_bala(planet: Planet, pos) -> float:
    return KSHETRA_POINTS[planet_dignity(planet, pos.sign)]


def uchcha_bala(planet: Planet, pos) -> float:
    return _proximity(pos.longitude, EXALTATION_DEGREES[planet])


def dig_bala(planet: Planet, pos, chart) -> float:
    return _proximity(pos.longitude, chart.cusp_longitude(DIG_BALA_HOUSE[planet]))


def kala_bala(planet: Planet, chart) -> float:
    score = 0.0
    if planet is chart.weekday_lord:
        score += VARA_POINTS
    if planet is hora_lord(chart.solar_return_local):
        score += HORA_POINTS
    day = chart.is_day_chart
    if (planet is Planet.MERCURY
            or (day and planet in DIURNAL_PLANETS)
            or (not day and planet in NOCTURNAL_PLANETS)):
        score += DAY_NIGHT_POINTS
    return score


def bhava_bala(pos) -> float:
    if pos.house in KENDRA_HOUSES:
        return 4.0
    if pos.house in PANAPHARA_HOUSES:
        return 2.0
    return 1.0


def score_planet(chart, planet: Planet) -> PanchaVargiyaBala:
    pos = chart.position(planet)
    kshetra = kshetra_bala(planet, pos)
    uchcha = uchcha_bala(planet, pos)
    dig = dig_bala(planet, pos, chart)
    kala = kala_bala(planet, chart)
    bhava = bhava_bala(pos)
    total = kshetra + uchcha + dig + kala + bhava
    return PanchaVargiyaBala(
        planet=planet, kshetra=kshetra, uchcha=uchcha, dig=dig, kala=kala,
        bhava=bhava, total=total, category=BalaCategory.from_total(total),
    )


def score_pancha_vargiya_bala(chart) -> List[PanchaVargiyaBala]:
    """Bala for the seven planets; the nodes carry no Pancha-Vargiya strength."""
    return [score_planet(chart, planet) for planet in SEVEN_PLANETS]


def strongest_planet(balas: List[PanchaVargiyaBala]) -> Planet:
    """Highest total; ties resolved by classical planet order."""
    best = None
    for planet in SEVEN_PLANETS:
        for bala in balas:
            if bala.planet is planet and (best is None or bala.total > best.total):
                best = bala
    if best is None:
        raise ValueError("no Pancha Vargiya Bala scores supplied")
    return best.planet
