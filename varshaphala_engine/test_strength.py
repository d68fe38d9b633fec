from datetime import datetime

import pytest

from varshaphala_engine.core.chart import vara_lord
from varshaphala_engine.core.constants import (
    SEVEN_PLANETS, BalaCategory, Dignity, Language, Planet, ZodiacSign,
)
from varshaphala_engine.core.dignity import planet_dignity
from varshaphala_engine.core.errors import ValidationError
from varshaphala_engine.core.muntha import muntha_longitude, resolve_muntha
from varshaphala_engine.core.pancha_bala import (
    PanchaVargiyaBala, hora_lord, score_planet, strongest_planet,
)
from varshaphala_engine.core.templates import default_templates
from varshaphala_engine.core.year_lord import elect
from varshaphala_engine.conftest import build_annual_chart


def _bala(planet, total):
    return PanchaVargiyaBala(planet=planet, kshetra=0.0, uchcha=0.0, dig=0.0, kala=0.0,
                             bhava=total, total=total, category=BalaCategory.from_total(total))


# ---- Pancha Vargiya Bala -----------------------------------------------------

def test_bala_bounds_and_sum(result):
    assert [b.planet for b in result.pancha_vargiya_bala] == list(SEVEN_PLANETS)
    for bala in result.pancha_vargiya_bala:
        assert 0.0 <= bala.total <= 20.0
        assert bala.total == pytest.approx(sum(bala.components))
        assert all(0.0 <= c <= 4.0 for c in bala.components)
        assert bala.category is BalaCategory.from_total(bala.total)


def test_exalted_angular_sun():
    # Sunday noon, Sun at its exaltation degree in the 1st house
    chart = build_annual_chart({Planet.SUN: 10.0}, ascendant=0.0,
                               local=datetime(2025, 1, 5, 12, 0))
    bala = score_planet(chart, Planet.SUN)
    assert bala.kshetra == 4.0
    assert bala.uchcha == pytest.approx(4.0)
    assert bala.bhava == 4.0
    assert bala.dig == pytest.approx(4.0 * (1 - 100.0 / 180.0))
    # vara lord and day chart; 12:00 on Sunday is the hour of Mars
    assert bala.kala == pytest.approx(2.5)


def test_strongest_planet_tie_follows_classical_order():
    balas = [_bala(Planet.MOON, 12.0), _bala(Planet.SATURN, 11.0), _bala(Planet.SUN, 12.0)]
    assert strongest_planet(balas) is Planet.SUN
    assert strongest_planet([_bala(Planet.VENUS, 3.0)]) is Planet.VENUS
    with pytest.raises(ValueError):
        strongest_planet([])


@pytest.mark.parametrize("total, category", [
    (20.0, BalaCategory.EXCELLENT), (16.0, BalaCategory.EXCELLENT),
    (15.99, BalaCategory.STRONG), (8.0, BalaCategory.AVERAGE),
    (4.0, BalaCategory.WEAK), (0.0, BalaCategory.POOR),
])
def test_bala_categories(total, category):
    assert BalaCategory.from_total(total) is category


def test_vara_and_hora_lords():
    sunday_noon = datetime(2025, 1, 5, 12, 0)
    assert vara_lord(sunday_noon) is Planet.SUN
    # before sunrise the previous day still runs
    assert vara_lord(datetime(2025, 1, 5, 5, 0)) is Planet.SATURN
    assert hora_lord(datetime(2025, 1, 5, 6, 30)) is Planet.SUN
    assert hora_lord(datetime(2025, 1, 5, 7, 30)) is Planet.VENUS
    assert hora_lord(sunday_noon) is Planet.MARS


def test_dignity():
    assert planet_dignity(Planet.SUN, ZodiacSign.ARIES) is Dignity.EXALTED
    assert planet_dignity(Planet.SUN, ZodiacSign.LIBRA) is Dignity.DEBILITATED
    assert planet_dignity(Planet.SATURN, ZodiacSign.AQUARIUS) is Dignity.OWN_SIGN


# ---- Year lord ---------------------------------------------------------------

def test_election_tie_goes_to_earlier_office():
    candidates = (
        ("ascendant_lord", Planet.SUN), ("muntha_lord", Planet.MOON),
        ("weekday_lord", Planet.MOON), ("sun_sign_lord", Planet.SUN),
        ("strongest_planet", Planet.MARS),
    )
    assert elect(candidates) == (Planet.SUN, 2)


def test_year_lord_in_result(result):
    lord = result.year_lord
    assert len(lord.candidates) == 5
    assert lord.votes == sum(1 for _, p in lord.candidates if p is lord.planet)
    assert lord.votes >= max(
        sum(1 for _, p in lord.candidates if p is other) for _, other in lord.candidates)
    assert lord.house == result.annual_chart.position(lord.planet).house


# ---- Muntha ------------------------------------------------------------------

def test_muntha_advances_one_sign_per_year():
    assert muntha_longitude(10.0, 0) == 10.0
    assert muntha_longitude(10.0, 13) == 40.0
    assert muntha_longitude(350.0, 1) == 20.0


def test_muntha_house_and_lord():
    chart = build_annual_chart({}, ascendant=0.0)
    muntha = resolve_muntha(10.0, 35, chart, default_templates(), Language.ENGLISH)
    # 35 mod 12 = 11 signs on from Aries
    assert muntha.sign is ZodiacSign.PISCES
    assert muntha.house == 12
    assert muntha.lord is Planet.JUPITER
    assert not muntha.is_good_house
    assert muntha.degree_in_sign == pytest.approx(10.0)


def test_negative_age_rejected():
    chart = build_annual_chart({}, ascendant=0.0)
    with pytest.raises(ValidationError):
        resolve_muntha(10.0, -1, chart, default_templates(), Language.ENGLISH)
