"""
mudda_dasha.py  —  Mudda Dasha (annual Vimshottari)
====================================================
The 120-year Vimshottari cycle compressed into one solar year:

    days(planet) = year_days * years(planet) / 120

Whole days are handed out by the largest-remainder rule (floors first,
then one extra day to the largest fractional parts, ties to the earlier
planet in the sequence), so siblings always add up to their parent.
Each sub-level repeats the rule inside its parent, starting from the
parent's planet.

The sequence opens with the lord of the nakshatra holding the annual Moon.
Periods are half-open: [start, end). Boundaries are whole local dates, so
the year opens at midnight of the return day and "current" is decided by
date, not by the exact return instant.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Sequence, Tuple

from .constants import VIMSHOTTARI_TOTAL_YEARS, Planet, PlanetStrength, vimshottari_sequence_from
from .dignity import chart_strength
from .errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MuddaDashaPeriod:
    planet: Planet
    level: int
    start: date
    end: date                    # exclusive
    days: int
    current: bool = False
    progress: float = 0.0
    sub_periods: Tuple["MuddaDashaPeriod", ...] = ()
    strength: Optional[PlanetStrength] = None
    houses_ruled: Tuple[int, ...] = ()
    keywords: Tuple[str, ...] = ()
    prediction: str = ""

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end

    def to_dict(self) -> dict:
        d = {
            "planet": self.planet.display_name,
            "level": self.level,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "days": self.days,
            "is_current": self.current,
            "progress": round(self.progress, 4),
            "sub_periods": [p.to_dict() for p in self.sub_periods],
        }
        if self.level == 1:
            d.update({
                "strength": self.strength.value if self.strength else None,
                "houses_ruled": list(self.houses_ruled),
                "keywords": list(self.keywords),
                "prediction": self.prediction,
            })
        return d


def allocate_days(total_days: int, order: Sequence[Planet]) -> List[int]:
    """Whole-day shares of ``total_days`` in Vimshottari proportion."""
    numerators = [total_days * p.dasha_years for p in order]
    shares = [n // VIMSHOTTARI_TOTAL_YEARS for n in numerators]
    leftover = total_days - sum(shares)
    ranked = sorted(range(len(order)),
                    key=lambda i: (-(numerators[i] % VIMSHOTTARI_TOTAL_YEARS), i))
    for i in ranked[:leftover]:
        shares[i] += 1
    return shares


def subdivide(start: date, days: int, order: Sequence[Planet], depth: int,
              level: int = 1) -> Tuple[MuddaDashaPeriod, ...]:
    """
    Split ``days`` from ``start`` among ``order``, recursing until ``depth``.
    Zero-day periods are kept so every level lists all nine planets.
    """
    periods = []
    cursor = start
    for planet, share in zip(order, allocate_days(days, order)):
        end = cursor + timedelta(days=share)
        children: Tuple[MuddaDashaPeriod, ...] = ()
        if level < depth:
            children = subdivide(cursor, share, vimshottari_sequence_from(planet),
                                 depth, level + 1)
        periods.append(MuddaDashaPeriod(planet=planet, level=level, start=cursor,
                                        end=end, days=share, sub_periods=children))
        cursor = end
    return tuple(periods)


def starting_planet(chart) -> Planet:
    return chart.position(Planet.MOON).nakshatra_lord


def year_length_days(return_local: datetime, next_return_local: datetime) -> int:
    return (next_return_local.date() - return_local.date()).days


def schedule_mudda_dasha(year_start, year_length_days: int, starting_planet: Planet,
                         depth: int = 2) -> Tuple[MuddaDashaPeriod, ...]:
    if depth < 1:
        raise ValidationError(f"Mudda Dasha depth must be at least 1, got {depth}",
                              {"depth": depth})
    if year_length_days <= 0:
        raise ValidationError(f"Mudda Dasha year must be positive, got {year_length_days}",
                              {"year_length_days": year_length_days})
    if isinstance(year_start, datetime):
        year_start = year_start.date()
    periods = subdivide(year_start, year_length_days,
                        vimshottari_sequence_from(starting_planet), depth)
    logger.debug("Mudda Dasha from %s: %d days starting with %s (depth %d)",
                 year_start, year_length_days, starting_planet.display_name, depth)
    return periods


def _progress(period: MuddaDashaPeriod, as_of: datetime) -> float:
    begin = datetime.combine(period.start, time())
    finish = datetime.combine(period.end, time())
    if as_of < begin:
        return 0.0
    if as_of >= finish:
        return 1.0
    return (as_of - begin).total_seconds() / (finish - begin).total_seconds()


def mark_current(periods: Sequence[MuddaDashaPeriod], as_of: datetime
                 ) -> Tuple[MuddaDashaPeriod, ...]:
    """
    Copies of ``periods`` with ``current`` and ``progress`` set for ``as_of``.

    ``current`` compares the calendar date of ``as_of`` with the period
    dates, so any time on the return day falls in the first period, even
    before the return instant. ``progress`` is measured from midnight.
    """
    today = as_of.date()
    return tuple(
        replace(p,
                current=p.contains(today),
                progress=_progress(p, as_of),
                sub_periods=mark_current(p.sub_periods, as_of))
        for p in periods
    )


def current_planet(periods: Sequence[MuddaDashaPeriod], as_of) -> Optional[Planet]:
    day = as_of.date() if isinstance(as_of, datetime) else as_of
    for period in periods:
        if period.contains(day):
            return period.planet
    return None


def find_period(periods: Sequence[MuddaDashaPeriod], planet: Planet
                ) -> Optional[MuddaDashaPeriod]:
    for period in periods:
        if period.planet is planet:
            return period
    return None


def annotate_periods(periods: Sequence[MuddaDashaPeriod], chart, text, language
                     ) -> Tuple[MuddaDashaPeriod, ...]:
    """Attach strength, rulership, keywords and prediction to top-level periods."""
    annotated = []
    for period in periods:
        planet = period.planet
        pos = chart.position(planet)
        strength = chart_strength(chart, planet)
        prediction = text.render(
            "mudda.prediction", language,
            planet=text.planet_name(planet, language),
            nature=text.render(f"planet.nature.{planet.name}", language),
            area=text.render(f"house.significance.{pos.house}", language),
            quality=text.render(f"mudda.quality.{strength.value}", language),
        )
        keywords = (text.render_list(f"planet.keywords.{planet.name}", language)
                    + text.render_list(f"house.keywords.{pos.house}", language))[:5]
        annotated.append(replace(
            period,
            strength=strength,
            houses_ruled=tuple(chart.houses_ruled_by(planet)),
            keywords=tuple(keywords),
            prediction=prediction,
        ))
    return tuple(annotated)
