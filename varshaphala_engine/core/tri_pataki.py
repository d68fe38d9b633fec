"""
tri_pataki.py  —  Tri-Pataki Chakra
====================================
The twelve signs, counted from the annual ascendant sign, are cut into
three flags of four signs each:

    Udaya   houses 1-4
    Madhya  houses 5-8
    Anta    houses 9-12

All nine bodies are placed by sign, so each lands in exactly one flag.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .constants import ALL_PLANETS, Planet, TriPatakiRole, ZodiacSign

# Flags with four or more planets get an extra emphasis line.
EMPHASIS_THRESHOLD = 4


@dataclass(frozen=True)
class TriPatakiSector:
    role: TriPatakiRole
    signs: Tuple[ZodiacSign, ...]
    planets: Tuple[Planet, ...]
    influence: str

    def to_dict(self) -> dict:
        return {
            "role": self.role.key,
            "houses": list(self.role.houses),
            "signs": [s.display_name for s in self.signs],
            "planets": [p.display_name for p in self.planets],
            "influence": self.influence,
        }


@dataclass(frozen=True)
class TriPatakiChakra:
    rising_sign: ZodiacSign
    sectors: Tuple[TriPatakiSector, ...]
    dominant_role: TriPatakiRole
    dominant_influence: str
    interpretation: str

    def sector(self, role: TriPatakiRole) -> TriPatakiSector:
        for sector in self.sectors:
            if sector.role is role:
                return sector
        raise KeyError(role)

    def to_dict(self) -> dict:
        return {
            "rising_sign": self.rising_sign.display_name,
            "sectors": [s.to_dict() for s in self.sectors],
            "dominant_role": self.dominant_role.key,
            "dominant_influence": self.dominant_influence,
            "interpretation": self.interpretation,
        }


def role_of_sign(sign: ZodiacSign, rising: ZodiacSign) -> TriPatakiRole:
    offset = (sign.index - rising.index) % 12
    return list(TriPatakiRole)[offset // 4]


def sector_influence(role: TriPatakiRole, planets, text, language) -> str:
    if not planets:
        return text.render("tripataki.quiet", language,
                           role=text.render(f"tripataki.role.{role.key}", language))
    benefics = [p for p in planets if p.is_benefic]
    malefics = [p for p in planets if not p.is_benefic]
    if len(benefics) > len(malefics):
        return text.render("tripataki.favorable", language,
                           planets=text.planet_list(benefics, language))
    if len(malefics) > len(benefics):
        return text.render("tripataki.challenging", language,
                           planets=text.planet_list(malefics, language))
    return text.render("tripataki.variable", language)


def build_tri_pataki(chart, text, language) -> TriPatakiChakra:
    rising = chart.ascendant_sign
    placed: Dict[TriPatakiRole, List[Planet]] = {role: [] for role in TriPatakiRole}
    for planet in ALL_PLANETS:
        placed[role_of_sign(chart.position(planet).sign, rising)].append(planet)

    sectors = tuple(
        TriPatakiSector(
            role=role,
            signs=tuple(rising.offset(h - 1) for h in role.houses),
            planets=tuple(placed[role]),
            influence=sector_influence(role, placed[role], text, language),
        )
        for role in TriPatakiRole
    )

    dominant = TriPatakiRole.UDAYA
    for role in TriPatakiRole:
        if len(placed[role]) > len(placed[dominant]):
            dominant = role

    count = len(placed[dominant])
    role_name = text.render(f"tripataki.role.{dominant.key}", language)
    area = text.render(f"tripataki.area.{dominant.key}", language)
    lines = [text.render("tripataki.interpretation", language,
                         role=role_name, count=count, area=area)]
    if count >= EMPHASIS_THRESHOLD:
        lines.append(text.render("tripataki.emphasis", language, role=role_name, area=area))

    return TriPatakiChakra(
        rising_sign=rising,
        sectors=sectors,
        dominant_role=dominant,
        dominant_influence=text.render(f"tripataki.dominant.{dominant.key}", language),
        interpretation=" ".join(lines),
    )
