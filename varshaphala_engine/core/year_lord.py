"""
year_lord.py  —  Varshesh (Year Lord)
======================================
Five office-bearers each cast one vote:

    ascendant lord   lord of the annual ascendant sign
    muntha lord      lord of the Muntha sign
    weekday lord     vara lord of the solar-return day
    sun-sign lord    lord of the annual Sun's sign
    strongest        highest Pancha Vargiya Bala total

The planet with the most votes rules the year. Ties go to the planet that
holds the earliest office in the order above.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .constants import Dignity, Planet, PlanetStrength, ZodiacSign
from .dignity import chart_strength, dignity_description, planet_dignity
from .pancha_bala import strongest_planet

logger = logging.getLogger(__name__)

ROLE_PRIORITY: Tuple[str, ...] = (
    "ascendant_lord", "muntha_lord", "weekday_lord", "sun_sign_lord", "strongest_planet",
)


@dataclass(frozen=True)
class YearLord:
    planet: Planet
    votes: int
    roles: Tuple[str, ...]
    candidates: Tuple[Tuple[str, Planet], ...]
    house: int
    sign: ZodiacSign
    dignity: Dignity
    strength: PlanetStrength
    bala_total: float
    dignity_description: str
    narrative: str

    def to_dict(self) -> dict:
        return {
            "planet": self.planet.display_name,
            "votes": self.votes,
            "roles": list(self.roles),
            "candidates": {role: p.display_name for role, p in self.candidates},
            "house": self.house,
            "sign": self.sign.display_name,
            "dignity": self.dignity.value,
            "strength": self.strength.value,
            "bala_total": round(self.bala_total, 2),
            "dignity_description": self.dignity_description,
            "narrative": self.narrative,
        }


def year_lord_candidates(chart, muntha, strongest: Planet) -> Tuple[Tuple[str, Planet], ...]:
    offices: Dict[str, Planet] = {
        "ascendant_lord": chart.ascendant_sign.ruler,
        "muntha_lord": muntha.lord,
        "weekday_lord": chart.weekday_lord,
        "sun_sign_lord": chart.position(Planet.SUN).sign.ruler,
        "strongest_planet": strongest,
    }
    return tuple((role, offices[role]) for role in ROLE_PRIORITY)


def elect(candidates: Sequence[Tuple[str, Planet]]) -> Tuple[Planet, int]:
    """Return (winner, votes). ``candidates`` must be in priority order."""
    tally = Counter(planet for _, planet in candidates)
    top = max(tally.values())
    for _, planet in candidates:
        if tally[planet] == top:
            return planet, top
    raise ValueError("no candidates")


def resolve_year_lord(chart, muntha, balas: List, text, language) -> YearLord:
    strongest = strongest_planet(balas)
    candidates = year_lord_candidates(chart, muntha, strongest)
    winner, votes = elect(candidates)
    pos = chart.position(winner)
    totals = {b.planet: b.total for b in balas}
    strength = chart_strength(chart, winner)

    narrative = " ".join([
        text.render("year_lord.narrative", language,
                    planet=text.planet_name(winner, language),
                    votes=votes, house=pos.house,
                    strength=text.render(f"strength.{strength.value}", language)),
        text.render(f"year_lord.influence.{winner.name}", language),
    ])

    logger.debug("Year lord %s elected with %d votes from %s",
                 winner.display_name, votes,
                 ", ".join(f"{r}={p.display_name}" for r, p in candidates))

    return YearLord(
        planet=winner,
        votes=votes,
        roles=tuple(role for role, p in candidates if p is winner),
        candidates=candidates,
        house=pos.house,
        sign=pos.sign,
        dignity=planet_dignity(winner, pos.sign),
        strength=strength,
        bala_total=totals.get(winner, 0.0),
        dignity_description=dignity_description(chart, winner, text, language),
        narrative=narrative,
    )
