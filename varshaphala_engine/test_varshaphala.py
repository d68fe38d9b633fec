import dataclasses
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import pytest

from varshaphala_engine.cache import VarshaphalaCache, cache_key
from varshaphala_engine.config import Settings
from varshaphala_engine.core.cancellation import CancellationToken
from varshaphala_engine.core.constants import Language, Planet
from varshaphala_engine.core.ephemeris import angular_distance
from varshaphala_engine.core.errors import (
    CalculationError, ComputationCancelled, ConvergenceError, ValidationError,
)
from varshaphala_engine.core.varshaphala import VarshaphalaOrchestrator, compute_varshaphala
from varshaphala_engine.conftest import LinearEphemeris, natal_from


def _numbers(value):
    """Numeric and boolean leaves of a nested payload, in order."""
    if isinstance(value, dict):
        return [n for v in value.values() for n in _numbers(v)]
    if isinstance(value, (list, tuple)):
        return [n for v in value for n in _numbers(v)]
    if isinstance(value, (bool, int, float)):
        return [value]
    return []


class BrokenMarsEphemeris(LinearEphemeris):
    def sidereal_longitude(self, body, jd_ut):
        if body is Planet.MARS:
            raise RuntimeError("ephemeris file missing")
        return super().sidereal_longitude(body, jd_ut)


class StalledSunEphemeris(LinearEphemeris):
    def sidereal_longitude(self, body, jd_ut):
        if body is Planet.SUN:
            return 120.0
        return super().sidereal_longitude(body, jd_ut)


def test_annual_chart_cast_at_solar_return(result, natal_chart):
    chart = result.annual_chart
    assert angular_distance(chart.position(Planet.SUN).longitude,
                            natal_chart.planets[Planet.SUN]) < 1e-4
    assert chart.solar_return_local.year == 2025
    assert len(chart.positions) == 9
    assert chart.position(Planet.RAHU).is_retrograde
    assert result.age == 35


def test_mudda_covers_return_to_return(result):
    periods = result.mudda_dasha
    assert len(periods) == 9
    assert periods[0].start == result.annual_chart.solar_return_local.date()
    assert periods[0].planet is result.annual_chart.position(Planet.MOON).nakshatra_lord
    assert sum(p.days for p in periods) in (365, 366)
    assert sum(1 for p in periods if p.current) == 1
    assert result.current_mudda.contains(datetime(2025, 8, 1).date())


def test_compute_is_idempotent(orchestrator, natal_chart, as_of):
    first = orchestrator.compute(natal_chart, 2025, "en", as_of=as_of)
    second = orchestrator.compute(natal_chart, 2025, "en", as_of=as_of)
    assert first.to_dict() == second.to_dict()


def test_numbers_identical_across_languages(orchestrator, natal_chart, as_of):
    en = orchestrator.compute(natal_chart, 2025, Language.ENGLISH, as_of=as_of)
    ne = orchestrator.compute(natal_chart, 2025, Language.NEPALI, as_of=as_of)
    assert _numbers(en.to_dict()) == _numbers(ne.to_dict())
    assert en.overall_prediction != ne.overall_prediction
    assert ne.to_dict()["language"] == "ne"


def test_birth_year_is_allowed(orchestrator, natal_chart, as_of):
    result = orchestrator.compute(natal_chart, 1990, "en", as_of=as_of)
    assert result.age == 0
    assert result.muntha.sign is natal_chart.ascendant_sign


def test_year_before_birth_rejected(orchestrator, natal_chart):
    with pytest.raises(ValidationError) as exc_info:
        orchestrator.compute(natal_chart, 1989, "en")
    assert "1989" in exc_info.value.message
    assert exc_info.value.details == {"year": 1989, "birth_year": 1990}


def test_validation_message_is_localized(orchestrator, natal_chart):
    with pytest.raises(ValidationError) as exc_info:
        orchestrator.compute(natal_chart, 1989, "ne")
    assert exc_info.value.message == "लक्ष्य वर्ष 1989 जन्म वर्ष 1990 भन्दा अघि छ।"


def test_malformed_chart_rejected(orchestrator, ephemeris):
    planets = dict(natal_from(ephemeris).planets)
    del planets[Planet.MOON]
    chart = natal_from(ephemeris, latitude=95.0, planets=planets)
    with pytest.raises(ValidationError) as exc_info:
        orchestrator.compute(chart, 2025, "en")
    assert exc_info.value.details["problems"] == ["error.latitude", "error.missing_planet"]
    assert "Moon longitude is missing" in exc_info.value.message


def test_unknown_language_rejected(orchestrator, natal_chart):
    with pytest.raises(ValidationError):
        orchestrator.compute(natal_chart, 2025, "fr")


def test_cancelled_before_start(orchestrator, natal_chart):
    token = CancellationToken()
    token.cancel()
    with pytest.raises(ComputationCancelled):
        orchestrator.compute(natal_chart, 2025, "en", cancel_token=token)


def test_stalled_sun_does_not_converge(natal_chart, test_settings):
    orchestrator = VarshaphalaOrchestrator(StalledSunEphemeris(), settings=test_settings)
    with pytest.raises(ConvergenceError):
        orchestrator.compute(natal_chart, 2025, "en")


def test_ephemeris_failure_wrapped(natal_chart, test_settings):
    orchestrator = VarshaphalaOrchestrator(BrokenMarsEphemeris(), settings=test_settings)
    with pytest.raises(CalculationError) as exc_info:
        orchestrator.compute(natal_chart, 2025, "en")
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_caller_executor_is_left_running(ephemeris, natal_chart, test_settings, as_of):
    with ThreadPoolExecutor(max_workers=2) as pool:
        orchestrator = VarshaphalaOrchestrator(ephemeris, settings=test_settings, executor=pool)
        orchestrator.compute(natal_chart, 2025, "en", as_of=as_of)
        assert pool.submit(lambda: 42).result() == 42


def test_module_entry_point(ephemeris, natal_chart, as_of):
    result = compute_varshaphala(natal_chart, 2025, "ne", ephemeris=ephemeris, as_of=as_of)
    assert result.language is Language.NEPALI
    assert result.year == 2025


# ---- Cache -------------------------------------------------------------------

def test_cache_returns_memoized_result(ephemeris, natal_chart, as_of):
    cache = VarshaphalaCache(maxsize=4)
    orchestrator = VarshaphalaOrchestrator(ephemeris, settings=Settings(MAX_WORKERS=2),
                                           cache=cache)
    first = orchestrator.compute(natal_chart, 2025, "en", as_of=as_of)
    calls = ephemeris.calls
    second = orchestrator.compute(natal_chart, 2025, "en", as_of=as_of)
    assert second is first
    assert ephemeris.calls == calls
    assert cache.stats["hits"] == 1
    # another day or language is a different entry
    orchestrator.compute(natal_chart, 2025, "ne", as_of=as_of)
    assert len(cache) == 2


def test_cache_key_ignores_time_of_day(natal_chart):
    morning = cache_key(natal_chart, 2025, Language.ENGLISH, datetime(2025, 8, 1, 6))
    evening = cache_key(natal_chart, 2025, "en", datetime(2025, 8, 1, 21))
    assert morning == evening
    moved = dataclasses.replace(natal_chart, latitude=28.0)
    assert cache_key(moved, 2025, "en", datetime(2025, 8, 1, 6)) != morning


def test_cache_evicts_least_recently_used():
    cache = VarshaphalaCache(maxsize=2)
    cache.put("a", 1)
    cache.put("b", 2)
    assert cache.get("a") == 1
    cache.put("c", 3)
    assert cache.get("b") is None
    assert cache.get("a") == 1
    assert len(cache) == 2
    cache.clear()
    assert cache.stats == {"size": 0, "maxsize": 2, "hits": 0, "misses": 0}
    with pytest.raises(ValueError):
        VarshaphalaCache(maxsize=0)
