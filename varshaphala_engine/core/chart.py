"""
chart.py  —  Natal and annual chart records
============================================
``NatalChart`` is the caller-owned input. ``AnnualChart`` is cast once per
(chart, year) at the solar-return instant and is read by every component.
Both are frozen; helpers never mutate them.
"""

import hashlib
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple

from .constants import (
    ALL_PLANETS, WEEKDAY_LORDS, HouseSystem, Planet, ZodiacSign, nakshatra_of,
)
from .ephemeris import (
    EphemerisPort, is_finite, jd_to_datetime, jd_to_local, local_to_jd,
    longitude_speed, normalize,
)
from .errors import CalculationError

logger = logging.getLogger(__name__)

# Mean local sunrise used to start the Vedic day (vara) and the first hora.
MEAN_SUNRISE_HOUR = 6

DAY_CHART_SUN_HOUSES = (7, 8, 9, 10, 11, 12, 1)


def format_degree(deg: float) -> str:
    d = int(deg)
    m = int((deg - d) * 60)
    return f"{d}°{m:02d}'"


def house_from_ascendant(lon: float, ascendant: float, system: HouseSystem) -> int:
    if system is HouseSystem.EQUAL:
        return int(normalize(lon - ascendant) // 30.0) % 12 + 1
    asc_idx = ZodiacSign.from_longitude(ascendant).index
    return (ZodiacSign.from_longitude(lon).index - asc_idx) % 12 + 1


def vara_lord(local_dt: datetime) -> Planet:
    """Weekday lord, with the Vedic day beginning at mean sunrise."""
    if local_dt.hour < MEAN_SUNRISE_HOUR:
        local_dt = local_dt - timedelta(days=1)
    # datetime.weekday(): Monday=0; WEEKDAY_LORDS starts at Sunday.
    return WEEKDAY_LORDS[(local_dt.weekday() + 1) % 7]


# ---- Natal chart -------------------------------------------------------------

@dataclass(frozen=True)
class NatalChart:
    birth_datetime: datetime          # local clock time, naive
    timezone_offset: float            # hours east of UTC
    latitude: float
    longitude: float
    ascendant: float                  # sidereal degrees
    planets: Dict[Planet, float]      # sidereal natal longitudes
    house_system: HouseSystem = HouseSystem.WHOLE_SIGN
    name: str = ""

    @property
    def birth_year(self) -> int:
        return self.birth_datetime.year

    @property
    def birth_jd(self) -> float:
        return local_to_jd(self.birth_datetime, self.timezone_offset)

    @property
    def ascendant_sign(self) -> ZodiacSign:
        return ZodiacSign.from_longitude(self.ascendant)

    def longitude_of(self, planet: Planet) -> Optional[float]:
        return self.planets.get(planet)

    def problems(self) -> List[Tuple[str, dict]]:
        """
        Template keys (with parameters) describing why the chart is malformed.
        An empty list means the chart is usable.
        """
        issues = []
        if not is_finite(self.latitude) or not -90.0 <= self.latitude <= 90.0:
            issues.append(("error.latitude", {"value": self.latitude}))
        if not is_finite(self.longitude) or not -180.0 <= self.longitude <= 180.0:
            issues.append(("error.longitude", {"value": self.longitude}))
        if not is_finite(self.timezone_offset) or not -12.0 <= self.timezone_offset <= 14.0:
            issues.append(("error.timezone", {"value": self.timezone_offset}))
        if not is_finite(self.ascendant):
            issues.append(("error.ascendant", {}))
        for planet in (Planet.SUN, Planet.MOON):
            if planet not in self.planets:
                issues.append(("error.missing_planet", {"planet": planet.display_name}))
        for planet, lon in self.planets.items():
            if not is_finite(lon):
                issues.append(("error.planet_longitude", {"planet": planet.display_name}))
        return issues

    def fingerprint(self) -> str:
        payload = {
            "birth": self.birth_datetime.isoformat(),
            "tz": repr(float(self.timezone_offset)),
            "lat": repr(float(self.latitude)),
            "lon": repr(float(self.longitude)),
            "asc": repr(float(self.ascendant)),
            "houses": self.house_system.value,
            "planets": {p.name: repr(float(v)) for p, v in sorted(
                self.planets.items(), key=lambda kv: kv[0].name)},
        }
        blob = json.dumps(payload, sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(blob.encode("utf-8")).hexdigest()


# ---- Annual chart ------------------------------------------------------------

@dataclass(frozen=True)
class PlanetPosition:
    planet: Planet
    longitude: float
    speed: float
    is_retrograde: bool
    sign: ZodiacSign
    degree_in_sign: float
    house: int
    nakshatra: str
    nakshatra_lord: Planet
    pada: int

    def to_dict(self) -> dict:
        return {
            "planet": self.planet.display_name,
            "sidereal_longitude": round(self.longitude, 4),
            "speed": round(self.speed, 4),
            "is_retrograde": self.is_retrograde,
            "sign": self.sign.display_name,
            "degree_in_sign": round(self.degree_in_sign, 4),
            "degree_formatted": format_degree(self.degree_in_sign),
            "house": self.house,
            "nakshatra": self.nakshatra,
            "nakshatra_lord": self.nakshatra_lord.display_name,
            "pada": self.pada,
        }


@dataclass(frozen=True)
class AnnualChart:
    year: int
    jd: float
    solar_return_utc: datetime
    solar_return_local: datetime
    timezone_offset: float
    ascendant: float
    house_system: HouseSystem
    positions: Dict[Planet, PlanetPosition] = field(default_factory=dict)

    @property
    def ascendant_sign(self) -> ZodiacSign:
        return ZodiacSign.from_longitude(self.ascendant)

    @property
    def ascendant_degree(self) -> float:
        return self.ascendant % 30.0

    @property
    def moon_sign(self) -> ZodiacSign:
        return self.position(Planet.MOON).sign

    @property
    def moon_nakshatra(self) -> str:
        return self.position(Planet.MOON).nakshatra

    @property
    def is_day_chart(self) -> bool:
        return self.position(Planet.SUN).house in DAY_CHART_SUN_HOUSES

    @property
    def weekday_lord(self) -> Planet:
        return vara_lord(self.solar_return_local)

    def position(self, planet: Planet) -> PlanetPosition:
        try:
            return self.positions[planet]
        except KeyError:
            raise CalculationError(
                f"{planet.display_name} missing from annual chart",
                {"planet": planet.name},
            ) from None

    def house_of_longitude(self, lon: float) -> int:
        return house_from_ascendant(lon, self.ascendant, self.house_system)

    def cusp_longitude(self, house: int) -> float:
        return normalize(self.ascendant + 30.0 * (house - 1))

    def house_sign(self, house: int) -> ZodiacSign:
        if self.house_system is HouseSystem.EQUAL:
            return ZodiacSign.from_longitude(self.cusp_longitude(house))
        return self.ascendant_sign.offset(house - 1)

    def house_lord(self, house: int) -> Planet:
        return self.house_sign(house).ruler

    def planets_in_house(self, house: int) -> List[Planet]:
        return [p for p in ALL_PLANETS if p in self.positions and self.positions[p].house == house]

    def houses_ruled_by(self, planet: Planet) -> List[int]:
        return [h for h in range(1, 13) if self.house_lord(h) is planet]

    def to_dict(self) -> dict:
        asc_sign = self.ascendant_sign
        return {
            "year": self.year,
            "solar_return_jd": round(self.jd, 6),
            "solar_return_utc": self.solar_return_utc.strftime("%Y-%m-%d %H:%M:%S UTC"),
            "solar_return_local": self.solar_return_local.strftime("%Y-%m-%d %H:%M:%S"),
            "timezone_offset": self.timezone_offset,
            "house_system": self.house_system.value,
            "ascendant": {
                "sign": asc_sign.display_name,
                "sidereal_longitude": round(self.ascendant, 4),
                "degree_formatted": format_degree(self.ascendant_degree),
                "lord": asc_sign.ruler.display_name,
            },
            "is_day_chart": self.is_day_chart,
            "weekday_lord": self.weekday_lord.display_name,
            "moon_sign": self.moon_sign.display_name,
            "moon_nakshatra": self.moon_nakshatra,
            "planets": {p.display_name: pos.to_dict() for p, pos in self.positions.items()},
        }


def make_position(planet: Planet, lon: float, speed: float, retrograde: bool,
                  ascendant: float, system: HouseSystem) -> PlanetPosition:
    lon = normalize(lon)
    _, nak_name, nak_lord, pada = nakshatra_of(lon)
    return PlanetPosition(
        planet=planet,
        longitude=lon,
        speed=speed,
        is_retrograde=retrograde,
        sign=ZodiacSign.from_longitude(lon),
        degree_in_sign=lon % 30.0,
        house=house_from_ascendant(lon, ascendant, system),
        nakshatra=nak_name,
        nakshatra_lord=nak_lord,
        pada=pada,
    )


def cast_annual_chart(ephemeris: EphemerisPort, natal: NatalChart,
                      jd: float, year: int) -> AnnualChart:
    """
    Cast the annual chart at the solar-return instant, at the birth place,
    with the natal chart's house rule.
    """
    try:
        ascendant = normalize(ephemeris.ascendant(jd, natal.latitude, natal.longitude))
        raw = []
        for planet in ALL_PLANETS:
            lon = ephemeris.sidereal_longitude(planet, jd)
            speed = longitude_speed(ephemeris, planet, jd)
            retro = bool(ephemeris.is_retrograde(planet, jd))
            raw.append((planet, lon, speed, retro))
    except Exception as exc:
        raise CalculationError(f"Ephemeris evaluation failed at JD {jd:.6f}: {exc}",
                               {"jd": jd}) from exc

    if not is_finite(ascendant):
        raise CalculationError("Ephemeris returned a non-finite ascendant", {"jd": jd})

    positions = {}
    for planet, lon, speed, retro in raw:
        if not is_finite(lon, speed):
            raise CalculationError(
                f"Ephemeris returned a non-finite longitude for {planet.display_name}",
                {"jd": jd, "planet": planet.name},
            )
        positions[planet] = make_position(planet, lon, speed, retro, ascendant, natal.house_system)

    chart = AnnualChart(
        year=year,
        jd=jd,
        solar_return_utc=jd_to_datetime(jd),
        solar_return_local=jd_to_local(jd, natal.timezone_offset),
        timezone_offset=natal.timezone_offset,
        ascendant=ascendant,
        house_system=natal.house_system,
        positions=positions,
    )
    logger.debug("Annual chart %d cast: asc %.4f (%s), day chart %s",
                 year, ascendant, chart.ascendant_sign.display_name, chart.is_day_chart)
    return chart
