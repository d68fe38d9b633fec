"""
varshaphala_tool.py  --  Birth data to annual horoscope
========================================================
Wraps the core engine for the FastAPI endpoint:

    birth details -> NatalChart (via the ephemeris port)
                  -> VarshaphalaResult for the target year
                  -> JSON-ready payload (+ optional plain-text report)
"""

import logging
from datetime import datetime
from functools import lru_cache
from typing import Callable, Optional

from ..config import get_settings
from ..core.chart import NatalChart, format_degree
from ..core.constants import ALL_PLANETS, HouseSystem, Planet, ZodiacSign, nakshatra_of
from ..core.ephemeris import EphemerisPort, SwissEphemeris, local_to_jd
from ..core.errors import CalculationError, ValidationError
from ..core.varshaphala import VarshaphalaOrchestrator

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def swiss_ephemeris(ayanamsa: str) -> SwissEphemeris:
    return SwissEphemeris(ayanamsa, get_settings().EPHEMERIS_PATH)


@lru_cache(maxsize=8)
def default_orchestrator(ayanamsa: str) -> VarshaphalaOrchestrator:
    """One Swiss Ephemeris orchestrator (and result cache) per ayanamsa."""
    return VarshaphalaOrchestrator(swiss_ephemeris(ayanamsa), settings=get_settings())


def build_natal_chart(
    year: int, month: int, day: int,
    hour: int, minute: int, second: int,
    timezone_offset: float,
    latitude: float,
    longitude: float,
    house_system: str = "whole_sign",
    name: str = "",
    ephemeris: Optional[EphemerisPort] = None,
) -> NatalChart:
    """
    Cast the natal positions the annual chart is measured against.

    Args:
        year, month, day: Birth date (Gregorian)
        hour, minute, second: Birth time in LOCAL time
        timezone_offset: Hours ahead of UTC (e.g. 5.75 for Nepal)
        latitude, longitude: Birth place in degrees (North / East positive)
        house_system: 'whole_sign' or 'equal'
        ephemeris: Position source; Swiss Ephemeris (settings ayanamsa) by default
    """
    try:
        birth = datetime(year, month, day, hour, minute, second)
        system = HouseSystem(house_system)
    except ValueError as exc:
        raise ValidationError(f"Invalid birth data: {exc}") from exc

    if ephemeris is None:
        ephemeris = swiss_ephemeris(get_settings().AYANAMSA)

    jd = local_to_jd(birth, timezone_offset)
    try:
        ascendant = ephemeris.ascendant(jd, latitude, longitude)
        planets = {p: ephemeris.sidereal_longitude(p, jd) for p in ALL_PLANETS}
    except Exception as exc:
        raise CalculationError(f"Natal chart evaluation failed: {exc}", {"jd": jd}) from exc

    return NatalChart(
        birth_datetime=birth,
        timezone_offset=timezone_offset,
        latitude=latitude,
        longitude=longitude,
        ascendant=ascendant,
        planets=planets,
        house_system=system,
        name=name,
    )


def natal_summary(chart: NatalChart) -> dict:
    moon = chart.planets[Planet.MOON]
    _, nakshatra, nakshatra_lord, pada = nakshatra_of(moon)
    return {
        "name": chart.name,
        "birth_datetime": chart.birth_datetime.strftime("%Y-%m-%d %H:%M:%S"),
        "lagna": chart.ascendant_sign.display_name,
        "lagna_degree": format_degree(chart.ascendant % 30.0),
        "sun_sign": ZodiacSign.from_longitude(chart.planets[Planet.SUN]).display_name,
        "moon_sign": ZodiacSign.from_longitude(moon).display_name,
        "moon_nakshatra": nakshatra,
        "moon_nakshatra_lord": nakshatra_lord.display_name,
        "moon_pada": pada,
        "house_system": chart.house_system.value,
    }


def get_varshaphala(
    # Birth details
    year: int, month: int, day: int,
    hour: int, minute: int, second: int,
    timezone_offset: float,
    latitude: float,
    longitude: float,
    house_system: str = "whole_sign",
    ayanamsa: str = "lahiri",
    name: str = "",
    # Annual chart
    target_year: Optional[int] = None,
    language: str = "en",
    include_report: bool = False,
    as_of: Optional[datetime] = None,
    ephemeris_factory: Optional[Callable[[str], EphemerisPort]] = None,
    cancel_token=None,
) -> dict:
    """
    Generate a complete Varshaphala for ``target_year`` (default: this year).

    Steps:
    1. Cast the natal chart from birth details
    2. Find the solar return and cast the annual chart
    3. Run every annual component (Muntha, Year Lord, Tajika, Bala,
       Tri-Pataki, Sahams, Mudda Dasha, houses, summary)
    4. Optionally render the plain-text report
    """
    if target_year is None:
        target_year = datetime.now().year

    if ephemeris_factory is None:
        ephemeris = swiss_ephemeris(ayanamsa)
        orchestrator = default_orchestrator(ayanamsa)
    else:
        ephemeris = ephemeris_factory(ayanamsa)
        orchestrator = VarshaphalaOrchestrator(ephemeris, settings=get_settings())
        # injected ephemerides are not memoized
        orchestrator.cache = None

    natal = build_natal_chart(
        year=year, month=month, day=day,
        hour=hour, minute=minute, second=second,
        timezone_offset=timezone_offset,
        latitude=latitude, longitude=longitude,
        house_system=house_system,
        name=name,
        ephemeris=ephemeris,
    )

    result = orchestrator.compute(natal, target_year, language, as_of=as_of,
                                  cancel_token=cancel_token)
    payload = {
        "natal_summary": natal_summary(natal),
        "varshaphala": result.to_dict(),
    }
    if include_report:
        payload["report"] = result.to_plain_text(orchestrator.text)
    return payload
