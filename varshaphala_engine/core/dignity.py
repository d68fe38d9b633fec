"""
dignity.py
==========
Sign-relationship dignity and the single-word strength descriptor used by
the Year Lord, Muntha, Mudda periods, house scoring and the year rating.
"""

from typing import List, Optional

from .constants import (
    DUSTHANA_HOUSES, FRIENDS, GAIN_HOUSES, KENDRA_HOUSES, NEUTRALS, OWN_SIGNS,
    TRIKONA_HOUSES, UPACHAYA_HOUSES, Dignity, Planet, PlanetStrength, ZodiacSign,
    debilitation_sign, exaltation_sign,
)


def relationship(planet: Planet, other: Planet) -> Dignity:
    """Natural relationship of ``planet`` towards ``other`` (friendly/neutral/inimical)."""
    if planet is other:
        return Dignity.OWN_SIGN
    if other in FRIENDS.get(planet, ()):
        return Dignity.FRIENDLY
    if other in NEUTRALS.get(planet, ()):
        return Dignity.NEUTRAL
    return Dignity.INIMICAL


def planet_dignity(planet: Planet, sign: ZodiacSign) -> Dignity:
    if planet.is_node:
        return Dignity.NEUTRAL
    if sign is exaltation_sign(planet):
        return Dignity.EXALTED
    if sign is debilitation_sign(planet):
        return Dignity.DEBILITATED
    if sign in OWN_SIGNS.get(planet, ()):
        return Dignity.OWN_SIGN
    return relationship(planet, sign.ruler)


def planet_strength(planet: Planet, sign: ZodiacSign, house: int,
                    retrograde: bool) -> PlanetStrength:
    if sign is exaltation_sign(planet):
        return PlanetStrength.EXALTED
    if sign is debilitation_sign(planet):
        return PlanetStrength.DEBILITATED
    if sign in OWN_SIGNS.get(planet, ()):
        return PlanetStrength.STRONG
    if house in KENDRA_HOUSES:
        return PlanetStrength.ANGULAR
    if retrograde:
        return PlanetStrength.RETROGRADE
    return PlanetStrength.MODERATE


def chart_strength(chart, planet: Planet) -> PlanetStrength:
    pos = chart.position(planet)
    return planet_strength(planet, pos.sign, pos.house, pos.is_retrograde)


def house_class(house: int) -> Optional[str]:
    if house in KENDRA_HOUSES:
        return "kendra"
    if house in TRIKONA_HOUSES:
        return "trikona"
    if house in GAIN_HOUSES:
        return "gains"
    if house in UPACHAYA_HOUSES:
        return "upachaya"
    if house in DUSTHANA_HOUSES:
        return "dusthana"
    return None


def dignity_description(chart, planet: Planet, text, language) -> str:
    """'<Planet>: exalted in Aries, angular (kendra) placement, retrograde'."""
    pos = chart.position(planet)
    sign_name = text.sign_name(pos.sign, language)
    details: List[str] = [
        text.render(f"dignity.{planet_dignity(planet, pos.sign).value}", language, sign=sign_name)
    ]
    cls = house_class(pos.house)
    if cls:
        details.append(text.render(f"dignity.house.{cls}", language))
    if pos.is_retrograde:
        details.append(text.render("dignity.retrograde", language))
    return text.render("dignity.summary", language,
                       planet=text.planet_name(planet, language),
                       details=", ".join(details))
