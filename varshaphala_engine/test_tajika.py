from varshaphala_engine.core.constants import (
    AspectClass, AspectStrength, Language, Planet, TajikaYoga,
)
from varshaphala_engine.core.tajika import compute_tajika_aspects, is_applying
from varshaphala_engine.conftest import build_annual_chart


def _pair(chart, a, b, **kwargs):
    for aspect in compute_tajika_aspects(chart, **kwargs):
        if {aspect.planet1, aspect.planet2} == {a, b}:
            return aspect
    return None


def _mars_saturn(mars_lon, saturn_speed=0.03):
    return build_annual_chart(
        {Planet.MARS: mars_lon, Planet.SATURN: 10.0},
        speeds={Planet.MARS: 0.5, Planet.SATURN: saturn_speed},
    )


def test_exact_square_is_very_strong_and_separating():
    # Mars outruns Saturn, so from exact the square can only widen
    aspect = _pair(_mars_saturn(100.0), Planet.MARS, Planet.SATURN)
    assert aspect.aspect is AspectClass.SQUARE
    assert aspect.orb == 0.0
    assert aspect.strength is AspectStrength.VERY_STRONG
    assert not aspect.is_applying
    assert aspect.yoga is TajikaYoga.EASARAPHA
    assert aspect.planet1 is Planet.MARS


def test_square_either_side_of_exact():
    just_below = _pair(_mars_saturn(99.99), Planet.MARS, Planet.SATURN)
    assert just_below.is_applying
    assert just_below.yoga is TajikaYoga.MUTHASHILA
    just_past = _pair(_mars_saturn(100.01), Planet.MARS, Planet.SATURN)
    assert not just_past.is_applying
    assert just_past.yoga is TajikaYoga.EASARAPHA


def test_closing_square_within_one_degree_is_muthashila():
    aspect = _pair(_mars_saturn(99.5), Planet.MARS, Planet.SATURN)
    assert aspect.is_applying
    assert aspect.orb < 0
    assert aspect.yoga is TajikaYoga.MUTHASHILA
    assert aspect.is_positive


def test_widening_square_is_easarapha():
    aspect = _pair(_mars_saturn(100.5), Planet.MARS, Planet.SATURN)
    assert not aspect.is_applying
    assert aspect.yoga is TajikaYoga.EASARAPHA
    assert not aspect.is_positive


def test_separating_orb_is_narrower():
    # 6 deg past exact: inside the 7 deg square orb but outside 7 * 0.75
    assert _pair(_mars_saturn(106.0), Planet.MARS, Planet.SATURN) is None
    assert _pair(_mars_saturn(106.0), Planet.MARS, Planet.SATURN,
                 separating_orb_factor=1.0) is not None
    # 6 deg before exact and closing
    assert _pair(_mars_saturn(94.0), Planet.MARS, Planet.SATURN) is not None


def test_retrograde_applying_body_gives_radda():
    aspect = _pair(_mars_saturn(99.5, saturn_speed=-0.03), Planet.MARS, Planet.SATURN)
    assert aspect.is_applying
    assert aspect.yoga is TajikaYoga.RADDA


def test_applying_square_beyond_one_degree_is_durapha():
    aspect = _pair(_mars_saturn(97.5), Planet.MARS, Planet.SATURN)
    assert aspect.yoga is TajikaYoga.DURAPHA
    assert aspect.strength is AspectStrength.STRONG


def test_is_applying():
    assert is_applying(99.0, 1.0, 10.0, 0.0, 90)
    assert not is_applying(101.0, 1.0, 10.0, 0.0, 90)
    assert not is_applying(100.0, 0.0, 10.0, 0.0, 90)
    assert not is_applying(100.0, 0.5, 10.0, 0.03, 90)
    assert is_applying(99.99, 0.5, 10.0, 0.03, 90)
    # slower body ahead: exact contact still only opens up
    assert not is_applying(100.0, 0.03, 10.0, 0.5, 90)


def test_annual_aspects_are_unique_and_in_orb(result):
    aspects = result.tajika_aspects
    seen = set()
    for aspect in aspects:
        key = (frozenset((aspect.planet1, aspect.planet2)), aspect.aspect)
        assert key not in seen
        seen.add(key)
        assert abs(aspect.orb) <= aspect.max_orb
        assert not aspect.planet1.is_node and not aspect.planet2.is_node
        assert abs(aspect.separation - aspect.exact_angle) == abs(aspect.orb)
    weights = [a.strength.weight for a in aspects]
    assert weights == sorted(weights, reverse=True)


def test_narratives_follow_language():
    chart = _mars_saturn(100.0)
    en = _pair(chart, Planet.MARS, Planet.SATURN, language=Language.ENGLISH)
    ne = _pair(chart, Planet.MARS, Planet.SATURN, language=Language.NEPALI)
    assert en.prediction != ne.prediction
    assert (en.orb, en.strength, en.yoga) == (ne.orb, ne.strength, ne.yoga)
