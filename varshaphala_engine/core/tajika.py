"""
tajika.py  —  Tajika aspects and yogas
=======================================
Aspects are measured between every pair of the seven visible planets
(the nodes cast no Tajika aspect). A pair matches at most one aspect class
because the orb windows of the catalogue never overlap.

Applying aspects may use the full orb of their class; separating aspects
only ``max_orb * separating_orb_factor``.

Yogas:
    Easarapha   separating
    Radda       applying, either body retrograde
    Muthashila  applying within 1 degree
    Kamboola    applying conjunction within 3 degrees, a body angular
    Nakta       applying with mutual reception
    Durapha     applying square or opposition
    Ithasala    any other applying aspect
"""

from dataclasses import dataclass
from itertools import combinations
from typing import List, Optional, Tuple

from .constants import (
    KENDRA_HOUSES, SEVEN_PLANETS, AspectClass, AspectStrength, Language, Planet,
    TajikaYoga,
)
from .ephemeris import angular_distance
from .templates import default_templates

SEPARATING_ORB_FACTOR = 0.75
MOTION_STEP_DAYS = 0.01

MUTHASHILA_ORB = 1.0
KAMBOOLA_ORB = 3.0


@dataclass(frozen=True)
class TajikaAspectResult:
    planet1: Planet              # faster body
    planet2: Planet
    aspect: AspectClass
    separation: float
    orb: float                   # separation - exact angle
    max_orb: float
    is_applying: bool
    strength: AspectStrength
    yoga: TajikaYoga
    mutual_reception: bool
    houses: Tuple[int, ...]
    effect: str
    prediction: str

    @property
    def exact_angle(self) -> int:
        return self.aspect.angle

    @property
    def is_positive(self) -> bool:
        return self.yoga.is_positive

    def to_dict(self) -> dict:
        return {
            "planet1": self.planet1.display_name,
            "planet2": self.planet2.display_name,
            "aspect": self.aspect.name.lower(),
            "exact_angle": self.aspect.angle,
            "separation": round(self.separation, 4),
            "orb": round(self.orb, 4),
            "max_orb": self.max_orb,
            "is_applying": self.is_applying,
            "strength": self.strength.name.lower(),
            "strength_weight": self.strength.weight,
            "yoga": self.yoga.display_name,
            "is_positive": self.yoga.is_positive,
            "mutual_reception": self.mutual_reception,
            "houses": list(self.houses),
            "effect": self.effect,
            "prediction": self.prediction,
        }


def is_applying(lon1: float, speed1: float, lon2: float, speed2: float,
                angle: float, step: float = MOTION_STEP_DAYS) -> bool:
    """
    True when the separation is still closing on ``angle``. At exact contact
    the next step can only move away, so an exact aspect is separating.
    """
    sep = angular_distance(lon1, lon2)
    later = angular_distance(lon1 + speed1 * step, lon2 + speed2 * step)
    orb = sep - angle
    rate = later - sep
    return orb * rate < 0.0


def mutual_reception(pos1, pos2) -> bool:
    return pos1.sign.ruler is pos2.planet and pos2.sign.ruler is pos1.planet


def classify_yoga(aspect: AspectClass, orb: float, applying: bool, pos1, pos2) -> TajikaYoga:
    if not applying:
        return TajikaYoga.EASARAPHA
    if pos1.is_retrograde or pos2.is_retrograde:
        return TajikaYoga.RADDA
    if abs(orb) < MUTHASHILA_ORB:
        return TajikaYoga.MUTHASHILA
    if (aspect is AspectClass.CONJUNCTION and abs(orb) <= KAMBOOLA_ORB
            and (pos1.house in KENDRA_HOUSES or pos2.house in KENDRA_HOUSES)):
        return TajikaYoga.KAMBOOLA
    if mutual_reception(pos1, pos2):
        return TajikaYoga.NAKTA
    if aspect in (AspectClass.SQUARE, AspectClass.OPPOSITION):
        return TajikaYoga.DURAPHA
    return TajikaYoga.ITHASALA


def measure_pair(pos_a, pos_b, separating_orb_factor: float = SEPARATING_ORB_FACTOR
                 ) -> Optional[Tuple]:
    """
    Return (fast, slow, aspect, separation, orb, applying) for a pair or
    None when no aspect is in orb.
    """
    separation = angular_distance(pos_a.longitude, pos_b.longitude)
    aspect = AspectClass.match(separation)
    if aspect is None:
        return None
    orb = separation - aspect.angle
    applying = is_applying(pos_a.longitude, pos_a.speed, pos_b.longitude, pos_b.speed,
                           aspect.angle)
    allowed = aspect.max_orb if applying else aspect.max_orb * separating_orb_factor
    if abs(orb) > allowed:
        return None
    if abs(pos_b.speed) > abs(pos_a.speed):
        pos_a, pos_b = pos_b, pos_a
    return pos_a, pos_b, aspect, separation, orb, applying


def compute_tajika_aspects(chart, text=None, language: Language = Language.ENGLISH,
                           separating_orb_factor: float = SEPARATING_ORB_FACTOR
                           ) -> List[TajikaAspectResult]:
    if text is None:
        text = default_templates()

    results = []
    for a, b in combinations(SEVEN_PLANETS, 2):
        measured = measure_pair(chart.position(a), chart.position(b), separating_orb_factor)
        if measured is None:
            continue
        fast, slow, aspect, separation, orb, applying = measured

        yoga = classify_yoga(aspect, orb, applying, fast, slow)
        houses = tuple(dict.fromkeys((fast.house, slow.house)))
        p1 = text.planet_name(fast.planet, language)
        p2 = text.planet_name(slow.planet, language)
        yoga_name = text.render(f"tajika.yoga.{yoga.name}", language)

        results.append(TajikaAspectResult(
            planet1=fast.planet,
            planet2=slow.planet,
            aspect=aspect,
            separation=separation,
            orb=orb,
            max_orb=aspect.max_orb,
            is_applying=applying,
            strength=AspectStrength.from_orb_ratio(abs(orb) / aspect.max_orb),
            yoga=yoga,
            mutual_reception=mutual_reception(fast, slow),
            houses=houses,
            effect=text.render(f"tajika.effect.{yoga.name}", language,
                               planet1=p1, planet2=p2,
                               aspect=text.render(f"aspect.{aspect.name}", language)),
            prediction=text.render(
                "tajika.prediction", language,
                yoga=yoga_name, planet1=p1, planet2=p2,
                quality=text.render("tone.favorable" if yoga.is_positive else "tone.challenging",
                                    language),
                houses=text.render_join(
                    [text.render("tajika.house_ref", language, house=h) for h in houses],
                    language),
            ),
        ))

    # sorted() is stable, so pair order survives within a strength band
    return sorted(results, key=lambda r: -r.strength.weight)
