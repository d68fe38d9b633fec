"""
summary.py  —  Year-level synthesis
====================================
Months, key dates, themes, the overall prediction and the 1-5 year rating,
all derived from the component results.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Sequence, Tuple

from .constants import (
    KENDRA_HOUSES, SUPPORTIVE_HOUSES, BalaCategory, KeyDateType, Planet, PlanetStrength,
)
from .dignity import chart_strength

MAX_FAVORABLE_MONTHS = 4
MAX_CHALLENGING_MONTHS = 3
MAX_KEY_DATES = 15
MAX_THEMES = 6

STRONG_HOUSE_CATEGORIES = (BalaCategory.EXCELLENT, BalaCategory.STRONG)
WEAK_HOUSE_CATEGORIES = (BalaCategory.WEAK, BalaCategory.POOR)

YEAR_LORD_RATING = {
    PlanetStrength.EXALTED: 0.8,
    PlanetStrength.STRONG: 0.5,
    PlanetStrength.ANGULAR: 0.3,
    PlanetStrength.DEBILITATED: -0.5,
}
MUNTHA_LORD_RATING = {
    PlanetStrength.EXALTED: 0.3,
    PlanetStrength.STRONG: 0.3,
    PlanetStrength.MODERATE: 0.1,
    PlanetStrength.DEBILITATED: -0.3,
}
MUNTHA_RATING_HOUSES = (1, 2, 4, 5, 9, 10, 11)


@dataclass(frozen=True)
class KeyDate:
    date: date
    type: KeyDateType
    event: str
    description: str

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "type": self.type.value,
            "event": self.event,
            "description": self.description,
        }


def monthly_influences(chart, year_lord) -> Tuple[List[int], List[int]]:
    """(favourable months, challenging months) as calendar months 1-12."""
    favorable, challenging = [], []
    first_month = chart.solar_return_local.month
    for offset in range(12):
        month = (first_month - 1 + offset) % 12 + 1
        transit_house = (year_lord.house + offset - 1) % 12 + 1
        if transit_house in SUPPORTIVE_HOUSES:
            if len(favorable) < MAX_FAVORABLE_MONTHS:
                favorable.append(month)
        elif len(challenging) < MAX_CHALLENGING_MONTHS:
            challenging.append(month)
    return favorable, challenging


def key_dates(chart, mudda: Sequence, text, language) -> List[KeyDate]:
    dates = [KeyDate(
        date=chart.solar_return_local.date(),
        type=KeyDateType.IMPORTANT,
        event=text.render("key_date.solar_return", language),
        description=text.render("key_date.solar_return_desc", language),
    )]
    for period in mudda:
        planet = text.planet_name(period.planet, language)
        strength = period.strength or chart_strength(chart, period.planet)
        dates.append(KeyDate(
            date=period.start,
            type=KeyDateType.FAVORABLE if strength.is_strong else KeyDateType.IMPORTANT,
            event=text.render("key_date.dasha_begins", language, planet=planet),
            description=text.render("key_date.dasha_begins_desc", language,
                                    planet=planet, days=period.days),
        ))
    # stable sort keeps the solar return ahead of a period starting the same day
    return sorted(dates, key=lambda d: d.date)[:MAX_KEY_DATES]


def _aspect_counts(aspects) -> Tuple[int, int]:
    positive = sum(1 for a in aspects if a.yoga.is_positive)
    return positive, len(aspects) - positive


def major_themes(chart, year_lord, muntha, tri_pataki, houses, aspects, text, language
                 ) -> List[str]:
    themes = [
        text.render("theme.year_lord", language,
                    planet=text.planet_name(year_lord.planet, language),
                    area=text.render(f"house.significance.{year_lord.house}", language)),
        text.render("theme.muntha", language,
                    house=muntha.house,
                    theme=muntha.themes[0] if muntha.themes
                    else text.render("theme.general_growth", language)),
        text.render("theme.tripataki", language, influence=tri_pataki.dominant_influence),
    ]
    strong = sorted((h for h in houses if h.strength in STRONG_HOUSE_CATEGORIES),
                    key=lambda h: -h.rating)
    for house in strong[:2]:
        themes.append(text.render("theme.favorable_house", language,
                                  area=text.render(f"house.significance.{house.house}", language),
                                  house=house.house))
    if aspects:
        positive, _ = _aspect_counts(aspects)
        tone = "tone.supportive" if positive > len(aspects) / 2 else "tone.challenging"
        themes.append(text.render("theme.tajika", language,
                                  tone=text.render(tone, language),
                                  positive=positive, total=len(aspects)))
    return themes[:MAX_THEMES]


def overall_tone(year_lord, houses) -> str:
    strong = sum(1 for h in houses if h.strength in STRONG_HOUSE_CATEGORIES)
    weak = sum(1 for h in houses if h.strength in WEAK_HOUSE_CATEGORIES)
    if year_lord.strength.is_strong and strong >= 6:
        return "tone.excellent"
    if year_lord.strength.is_strong and strong >= 4:
        return "tone.favorable"
    if strong > weak:
        return "tone.positive"
    if weak > strong:
        return "tone.challenging_growth"
    return "tone.balanced"


def overall_prediction(chart, year_lord, muntha, aspects, houses, text, language) -> str:
    positive, challenging = _aspect_counts(aspects)
    return " ".join([
        text.render("overall.tone", language,
                    tone=text.render(overall_tone(year_lord, houses), language)),
        text.render(f"year_lord.influence.{year_lord.planet.name}", language),
        text.render("overall.muntha", language,
                    house=muntha.house,
                    sign=text.sign_name(muntha.sign, language),
                    theme=muntha.themes[0] if muntha.themes
                    else text.render("theme.general_growth", language)),
        text.render("overall.aspects", language, positive=positive, challenging=challenging),
        text.render("overall.closing", language),
    ])


def year_rating(chart, year_lord, muntha, aspects, houses) -> float:
    rating = 3.0
    rating += YEAR_LORD_RATING.get(year_lord.strength, 0.0)
    rating += MUNTHA_LORD_RATING.get(muntha.lord_strength, 0.0)
    if muntha.house in MUNTHA_RATING_HOUSES:
        rating += 0.2

    strong_pos = sum(1 for a in aspects if a.yoga.is_positive and a.strength.weight >= 0.6)
    strong_neg = sum(1 for a in aspects if not a.yoga.is_positive and a.strength.weight >= 0.6)
    rating += max(-0.5, min(0.5, 0.1 * (strong_pos - strong_neg)))

    if houses:
        average = sum(h.rating for h in houses) / len(houses)
        rating += (average - 3.0) * 0.3

    angular_benefics = sum(1 for p in (Planet.JUPITER, Planet.VENUS)
                           if chart.position(p).house in KENDRA_HOUSES)
    rating += 0.15 * angular_benefics
    return round(max(1.0, min(5.0, rating)), 2)
