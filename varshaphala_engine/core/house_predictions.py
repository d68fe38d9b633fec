"""
house_predictions.py  —  Per-house rating for the year
=======================================================
Each house starts at 3.0 and is nudged by its lord, its occupants, the
Muntha, the Year Lord and strong Tajika aspects touching it. The rating is
clamped to [1, 5]; the strength label maps ``(rating - 1) * 5`` onto the
Bala category cut-points.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .constants import (
    SUPPORTIVE_HOUSES, AspectStrength, BalaCategory, Planet, PlanetStrength, ZodiacSign,
)
from .dignity import chart_strength

BASE_RATING = 3.0
MIN_RATING = 1.0
MAX_RATING = 5.0

LORD_PLACEMENT_BONUS = 0.5
MUNTHA_BONUS = 0.5
YEAR_LORD_BONUS = 0.3
ASPECT_ADJUSTMENT = 0.3

LORD_STRENGTH_ADJUSTMENT = {
    PlanetStrength.EXALTED: 1.0,
    PlanetStrength.STRONG: 0.7,
    PlanetStrength.ANGULAR: 0.3,
    PlanetStrength.DEBILITATED: -0.8,
}

OCCUPANT_ADJUSTMENT = {
    Planet.JUPITER: 0.5,
    Planet.VENUS: 0.4,
    Planet.MOON: 0.2,
    Planet.MERCURY: 0.1,
    Planet.SUN: 0.0,
    Planet.SATURN: -0.3,
    Planet.MARS: -0.2,
    Planet.RAHU: -0.2,
    Planet.KETU: -0.2,
}

STRONG_ASPECTS = (AspectStrength.VERY_STRONG, AspectStrength.STRONG)

# Lord commentary by strength; anything else reads as variable.
_LORD_NOTE = {
    PlanetStrength.EXALTED: "house.lord.excellent",
    PlanetStrength.STRONG: "house.lord.strong",
    PlanetStrength.MODERATE: "house.lord.moderate",
    PlanetStrength.DEBILITATED: "house.lord.challenged",
}

# Houses that can produce concrete event lines: (events when the lord is
# strong, {occupant: event}).
EVENT_RULES = {
    1: (("vitality", "new_ventures"),
        {Planet.JUPITER: "spiritual_growth", Planet.MARS: "increased_energy"}),
    2: (("financial_gains", "family_relations"),
        {Planet.VENUS: "luxury_acquisition"}),
    5: (("creative_success", "children_matters"),
        {Planet.JUPITER: "academic_success", Planet.VENUS: "romantic_happiness"}),
    7: (("partnership_strength", "marriage_favorable"),
        {Planet.VENUS: "romantic_fulfillment"}),
    10: (("career_advancement", "authority_recognition"),
         {Planet.SUN: "government_favor"}),
    11: (("desire_fulfillment", "multiple_gains"), {}),
}
MAX_EVENTS = 4


@dataclass(frozen=True)
class HousePrediction:
    house: int
    sign: ZodiacSign
    lord: Planet
    lord_house: int
    occupants: Tuple[Planet, ...]
    rating: float
    strength: BalaCategory
    keywords: Tuple[str, ...]
    narrative: str
    events: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "house": self.house,
            "sign": self.sign.display_name,
            "lord": self.lord.display_name,
            "lord_house": self.lord_house,
            "occupants": [p.display_name for p in self.occupants],
            "rating": self.rating,
            "strength": self.strength.key,
            "keywords": list(self.keywords),
            "narrative": self.narrative,
            "specific_events": list(self.events),
        }


def touching_aspects(house: int, aspects) -> Tuple[bool, bool]:
    """(any strong favourable aspect, any strong adverse aspect) touching ``house``."""
    strong = [a for a in aspects if a.strength in STRONG_ASPECTS and house in a.houses]
    return (any(a.yoga.is_positive for a in strong),
            any(not a.yoga.is_positive for a in strong))


def house_rating(house: int, chart, year_lord, muntha, aspects) -> float:
    lord = chart.house_lord(house)
    rating = BASE_RATING
    if chart.position(lord).house in SUPPORTIVE_HOUSES:
        rating += LORD_PLACEMENT_BONUS
    rating += LORD_STRENGTH_ADJUSTMENT.get(chart_strength(chart, lord), 0.0)
    for planet in chart.planets_in_house(house):
        rating += OCCUPANT_ADJUSTMENT[planet]
    if muntha.house == house:
        rating += MUNTHA_BONUS
    if year_lord.planet is lord:
        rating += YEAR_LORD_BONUS
    supported, strained = touching_aspects(house, aspects)
    if supported:
        rating += ASPECT_ADJUSTMENT
    if strained:
        rating -= ASPECT_ADJUSTMENT
    return round(min(MAX_RATING, max(MIN_RATING, rating)), 2)


def specific_events(house: int, lord_strength: PlanetStrength, occupants, text, language
                    ) -> Tuple[str, ...]:
    rule = EVENT_RULES.get(house)
    if rule is None:
        return ()
    strong_events, occupant_events = rule
    names = list(strong_events) if lord_strength.is_strong else []
    names += [event for planet, event in occupant_events.items() if planet in occupants]
    return tuple(text.render(f"event.{name}", language) for name in names[:MAX_EVENTS])


def _occupant_note(occupants, text, language) -> str:
    if not occupants:
        return text.render("house.lord_dependent", language)
    benefics = [p for p in occupants if p in (Planet.JUPITER, Planet.VENUS, Planet.MOON)]
    malefics = [p for p in occupants if p in (Planet.SATURN, Planet.MARS, Planet.RAHU, Planet.KETU)]
    if benefics and not malefics:
        return text.render("house.benefics", language, planets=text.planet_list(benefics, language))
    if malefics and not benefics:
        return text.render("house.malefics", language, planets=text.planet_list(malefics, language))
    if benefics and malefics:
        return text.render("house.mixed", language, planets=text.planet_list(occupants, language))
    return ""


def predict_house(house: int, chart, year_lord, muntha, aspects, text, language
                  ) -> HousePrediction:
    sign = chart.house_sign(house)
    lord = chart.house_lord(house)
    lord_house = chart.position(lord).house
    lord_strength = chart_strength(chart, lord)
    occupants = tuple(chart.planets_in_house(house))
    rating = house_rating(house, chart, year_lord, muntha, aspects)

    parts = [
        text.render("house.narrative", language,
                    house=house, sign=text.sign_name(sign, language),
                    significance=text.render(f"house.significance.{house}", language)),
        text.render("house.lord_position", language,
                    lord=text.planet_name(lord, language), lord_house=lord_house),
        text.render(_LORD_NOTE.get(lord_strength, "house.lord.variable"), language),
        _occupant_note(occupants, text, language),
    ]
    if muntha.house == house:
        parts.append(text.render("house.muntha_emphasis", language))
    if year_lord.planet is lord:
        parts.append(text.render("house.year_lord_rules", language))
    supported, strained = touching_aspects(house, aspects)
    if supported:
        parts.append(text.render("house.aspect_support", language))
    if strained:
        parts.append(text.render("house.aspect_strain", language))

    return HousePrediction(
        house=house,
        sign=sign,
        lord=lord,
        lord_house=lord_house,
        occupants=occupants,
        rating=rating,
        strength=BalaCategory.from_total((rating - 1.0) * 5.0),
        keywords=tuple(text.render_list(f"house.keywords.{house}", language)),
        narrative=" ".join(p for p in parts if p),
        events=specific_events(house, lord_strength, occupants, text, language),
    )


def score_houses(chart, year_lord, muntha, aspects, text, language) -> List[HousePrediction]:
    return [predict_house(h, chart, year_lord, muntha, aspects, text, language)
            for h in range(1, 13)]
