"""Shared fixtures: a deterministic linear ephemeris and charts cast from it."""

from datetime import datetime

import pytest

from varshaphala_engine.config import Settings
from varshaphala_engine.core.chart import AnnualChart, NatalChart, make_position
from varshaphala_engine.core.constants import ALL_PLANETS, HouseSystem, Planet
from varshaphala_engine.core.ephemeris import (
    SUN_MEAN_MOTION, jd_to_datetime, local_to_jd, normalize,
)
from varshaphala_engine.core.varshaphala import VarshaphalaOrchestrator
from varshaphala_engine.tools.varshaphala_tool import build_natal_chart

BIRTH = dict(year=1990, month=4, day=29, hour=10, minute=30, second=0,
             timezone_offset=5.75, latitude=27.7172, longitude=85.3240)
BIRTH_LOCAL = datetime(1990, 4, 29, 10, 30, 0)
EPOCH_JD = local_to_jd(BIRTH_LOCAL, BIRTH["timezone_offset"])

# Sidereal longitudes at the epoch (natal Sun at 15 Aries).
BASE_LONGITUDES = {
    Planet.SUN: 15.0,
    Planet.MOON: 212.0,
    Planet.MARS: 301.5,
    Planet.MERCURY: 357.0,
    Planet.JUPITER: 82.0,
    Planet.VENUS: 331.0,
    Planet.SATURN: 264.0,
    Planet.RAHU: 296.0,
    Planet.KETU: 116.0,
}

# Degrees per day.
SPEEDS = {
    Planet.SUN: SUN_MEAN_MOTION,
    Planet.MOON: 13.176,
    Planet.MARS: 0.524,
    Planet.MERCURY: 1.383,
    Planet.JUPITER: 0.0831,
    Planet.VENUS: 1.602,
    Planet.SATURN: 0.0335,
    Planet.RAHU: -0.0529,
    Planet.KETU: -0.0529,
}

SIDEREAL_DAY_MOTION = 360.98564736629


class LinearEphemeris:
    """Every body moves at a constant rate from the epoch; the ascendant turns once a sidereal day."""

    def __init__(self, epoch_jd=EPOCH_JD, longitudes=None, speeds=None,
                 ascendant=100.0, ascendant_rate=SIDEREAL_DAY_MOTION):
        self.epoch_jd = epoch_jd
        self.longitudes = dict(BASE_LONGITUDES if longitudes is None else longitudes)
        self.speeds = dict(SPEEDS if speeds is None else speeds)
        self.ascendant_at_epoch = ascendant
        self.ascendant_rate = ascendant_rate
        self.calls = 0

    def sidereal_longitude(self, body, jd_ut):
        self.calls += 1
        return normalize(self.longitudes[body] + self.speeds[body] * (jd_ut - self.epoch_jd))

    def is_retrograde(self, body, jd_ut):
        return self.speeds[body] < 0

    def ascendant(self, jd_ut, latitude, longitude):
        return normalize(self.ascendant_at_epoch + self.ascendant_rate * (jd_ut - self.epoch_jd))


@pytest.fixture
def ephemeris():
    return LinearEphemeris()


@pytest.fixture
def natal_chart(ephemeris):
    return build_natal_chart(**BIRTH, name="Test Native", ephemeris=ephemeris)


@pytest.fixture
def test_settings():
    return Settings(CACHE_ENABLED=False, MAX_WORKERS=2)


@pytest.fixture
def orchestrator(ephemeris, test_settings):
    return VarshaphalaOrchestrator(ephemeris, settings=test_settings)


@pytest.fixture
def as_of():
    return datetime(2025, 8, 1, 12, 0)


@pytest.fixture
def result(orchestrator, natal_chart, as_of):
    return orchestrator.compute(natal_chart, 2025, "en", as_of=as_of)


def build_annual_chart(longitudes, speeds=None, ascendant=0.0,
                       local=datetime(2025, 1, 5, 12, 0), timezone_offset=0.0,
                       house_system=HouseSystem.WHOLE_SIGN, year=2025):
    """Annual chart from explicit positions; unlisted bodies sit at 0 deg with zero speed."""
    speeds = speeds or {}
    positions = {}
    for planet in ALL_PLANETS:
        lon = longitudes.get(planet, 0.0)
        speed = speeds.get(planet, 0.0)
        positions[planet] = make_position(planet, lon, speed, speed < 0, ascendant, house_system)
    jd = local_to_jd(local, timezone_offset)
    return AnnualChart(
        year=year,
        jd=jd,
        solar_return_utc=jd_to_datetime(jd),
        solar_return_local=local,
        timezone_offset=timezone_offset,
        ascendant=ascendant,
        house_system=house_system,
        positions=positions,
    )


def natal_from(ephemeris, **overrides):
    chart = build_natal_chart(**BIRTH, ephemeris=ephemeris)
    if not overrides:
        return chart
    values = dict(
        birth_datetime=chart.birth_datetime, timezone_offset=chart.timezone_offset,
        latitude=chart.latitude, longitude=chart.longitude, ascendant=chart.ascendant,
        planets=chart.planets, house_system=chart.house_system, name=chart.name,
    )
    values.update(overrides)
    return NatalChart(**values)


