import math

import pytest

from varshaphala_engine.core.cancellation import CancellationToken
from varshaphala_engine.core.constants import Planet
from varshaphala_engine.core.ephemeris import angular_distance, jd_to_local
from varshaphala_engine.core.errors import ComputationCancelled, ConvergenceError
from varshaphala_engine.core.solar_return import SolarReturnFinder
from varshaphala_engine.conftest import LinearEphemeris


class WobblingSunEphemeris(LinearEphemeris):
    """Sun hovers around 100 deg and never reaches the natal longitude."""

    def sidereal_longitude(self, body, jd_ut):
        if body is Planet.SUN:
            return 100.0 + 5.0 * math.sin(jd_ut / 10.0)
        return super().sidereal_longitude(body, jd_ut)


def test_sun_returns_to_natal_longitude(ephemeris):
    finder = SolarReturnFinder(ephemeris)
    jd = finder.find(15.0, 2025)
    assert angular_distance(ephemeris.sidereal_longitude(Planet.SUN, jd), 15.0) < 1e-4


def test_return_falls_in_requested_year(ephemeris):
    finder = SolarReturnFinder(ephemeris)
    for year in (1995, 2025, 2040):
        local = jd_to_local(finder.find(15.0, year), 5.75)
        assert local.year == year
        # 15 Aries lands near the end of April
        assert local.month in (4, 5)


def test_consecutive_returns_one_sidereal_year_apart(ephemeris):
    finder = SolarReturnFinder(ephemeris)
    gap = finder.find(15.0, 2026) - finder.find(15.0, 2025)
    assert gap == pytest.approx(365.256363, abs=1e-3)


def test_wrapping_target_near_zero_degrees():
    ephemeris = LinearEphemeris(longitudes={**LinearEphemeris().longitudes, Planet.SUN: 359.99})
    finder = SolarReturnFinder(ephemeris)
    jd = finder.find(359.99, 2030)
    assert angular_distance(ephemeris.sidereal_longitude(Planet.SUN, jd), 359.99) < 1e-4


def test_wobbling_sun_cannot_be_bracketed():
    finder = SolarReturnFinder(WobblingSunEphemeris())
    with pytest.raises(ConvergenceError) as exc_info:
        finder.find(15.0, 2025)
    assert exc_info.value.details["year"] == 2025


def test_iteration_budget_exhausted(ephemeris):
    finder = SolarReturnFinder(ephemeris, tolerance_deg=0.0, max_iterations=1)
    with pytest.raises(ConvergenceError):
        finder.find(15.3, 2025)


def test_cancelled_token_stops_search(ephemeris):
    token = CancellationToken()
    token.cancel()
    with pytest.raises(ComputationCancelled):
        SolarReturnFinder(ephemeris).find(15.0, 2025, cancel_token=token)
