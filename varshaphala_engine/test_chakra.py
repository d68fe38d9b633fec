import pytest

from varshaphala_engine.core.constants import (
    ALL_PLANETS, Language, Planet, TriPatakiRole, ZodiacSign,
)
from varshaphala_engine.core.sahams import (
    SahamType, compute_sahams, is_active, saham_formula, saham_longitude,
)
from varshaphala_engine.core.templates import default_templates
from varshaphala_engine.core.tri_pataki import build_tri_pataki, role_of_sign
from varshaphala_engine.conftest import build_annual_chart

TEXT = default_templates()


# ---- Tri-Pataki --------------------------------------------------------------

def test_every_body_in_exactly_one_sector(result):
    placed = [p for sector in result.tri_pataki.sectors for p in sector.planets]
    assert sorted(placed, key=ALL_PLANETS.index) == list(ALL_PLANETS)
    assert [s.role for s in result.tri_pataki.sectors] == list(TriPatakiRole)


def test_sector_roles_count_from_rising_sign():
    assert role_of_sign(ZodiacSign.ARIES, ZodiacSign.ARIES) is TriPatakiRole.UDAYA
    assert role_of_sign(ZodiacSign.LEO, ZodiacSign.ARIES) is TriPatakiRole.MADHYA
    assert role_of_sign(ZodiacSign.ARIES, ZodiacSign.LEO) is TriPatakiRole.ANTA


def test_crowded_sector_dominates():
    chart = build_annual_chart({
        Planet.SUN: 250.0, Planet.MOON: 275.0, Planet.MARS: 300.0,
        Planet.MERCURY: 330.0, Planet.JUPITER: 340.0,
        Planet.VENUS: 40.0, Planet.SATURN: 130.0, Planet.RAHU: 170.0, Planet.KETU: 350.0,
    }, ascendant=0.0)
    chakra = build_tri_pataki(chart, TEXT, Language.ENGLISH)
    assert chakra.dominant_role is TriPatakiRole.ANTA
    assert len(chakra.sector(TriPatakiRole.ANTA).planets) == 6
    assert chakra.sector(TriPatakiRole.ANTA).signs[0] is ZodiacSign.SAGITTARIUS


# ---- Sahams ------------------------------------------------------------------

def test_punya_formula_reverses_at_night():
    assert saham_formula(SahamType.PUNYA, day_chart=True) == "Moon - Sun + Asc"
    assert saham_formula(SahamType.PUNYA, day_chart=False) == "Sun - Moon + Asc"
    assert saham_formula(SahamType.ROGA, day_chart=False) == "Asc - Moon + Asc"


def test_punya_longitude_day_and_night():
    # Sun in the 7th: day chart, Moon - Sun + Asc
    day = build_annual_chart({Planet.SUN: 200.0, Planet.MOON: 50.0}, ascendant=0.0)
    assert day.is_day_chart
    assert saham_longitude(day, SahamType.PUNYA) == pytest.approx(210.0)
    # Sun in the 4th: night chart, Sun - Moon + Asc
    night = build_annual_chart({Planet.SUN: 100.0, Planet.MOON: 50.0}, ascendant=0.0)
    assert not night.is_day_chart
    assert saham_longitude(night, SahamType.PUNYA) == pytest.approx(50.0)


def test_operands_resolve_cusps_and_lords():
    chart = build_annual_chart({Planet.SUN: 200.0, Planet.MOON: 50.0, Planet.SATURN: 15.0,
                                Planet.VENUS: 70.0}, ascendant=5.0)
    # Cusp 8 - Moon + Saturn, never reversed
    expected = (5.0 + 210.0) - 50.0 + 15.0
    assert saham_longitude(chart, SahamType.MRITYU) == pytest.approx(expected % 360.0)
    # Cusp 2 (Taurus) lord is Venus
    assert saham_longitude(chart, SahamType.DHANA) == pytest.approx((35.0 - 70.0 + 5.0) % 360.0)


def test_full_catalogue_computed(result):
    names = [s.saham for s in result.sahams]
    assert names == list(SahamType)
    for saham in result.sahams:
        assert 0.0 <= saham.longitude < 360.0
        assert 1 <= saham.house <= 12
        assert saham.lord is saham.sign.ruler
        assert len(saham.activation_periods) == 1


def test_active_flags_follow_current_mudda(result):
    current = result.current_mudda.planet
    chart = result.annual_chart
    for saham in result.sahams:
        assert saham.active == (saham.lord is current
                                or chart.position(current).house == saham.house)


def test_nothing_active_without_running_period():
    chart = build_annual_chart({Planet.SUN: 200.0, Planet.MOON: 50.0}, ascendant=0.0)
    assert not is_active(Planet.SUN, 7, chart, None)
    sahams = compute_sahams(chart, None, TEXT, Language.ENGLISH)
    assert not any(s.active for s in sahams)
    assert all(s.activation_periods == () for s in sahams)


# ---- Houses and summary ------------------------------------------------------

def test_twelve_house_ratings(result):
    houses = result.house_predictions
    assert [h.house for h in houses] == list(range(1, 13))
    for house in houses:
        assert 1.0 <= house.rating <= 5.0
        assert house.lord is house.sign.ruler
        assert house.narrative
        assert len(house.events) <= 4


def test_summary_fields(result):
    assert 1.0 <= result.year_rating <= 5.0
    assert result.year_rating == round(result.year_rating, 2)
    assert 1 <= len(result.major_themes) <= 6
    assert set(result.favorable_months).isdisjoint(result.challenging_months)
    assert all(1 <= m <= 12 for m in result.favorable_months + result.challenging_months)
    assert len(result.key_dates) <= 15
    assert result.overall_prediction
