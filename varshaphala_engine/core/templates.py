"""
templates.py  —  Localized narrative text
==========================================
Every user-facing sentence the engine produces comes from a keyed
``str.format`` template. ``TextTemplates`` is the port the components talk
to; ``CatalogTemplates`` is the default English + Nepali catalogue.

Lookup order: requested language, then English. A key missing from the
English catalogue is a programming error and raises ``CalculationError``.
Values may be strings (``render``) or lists of strings (``render_list``).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .constants import Language, Planet, ZodiacSign
from .errors import CalculationError

logger = logging.getLogger(__name__)


class TextTemplates(ABC):

    @abstractmethod
    def render(self, key: str, language, **params) -> str:
        ...

    @abstractmethod
    def render_list(self, key: str, language) -> List[str]:
        ...

    def planet_name(self, planet: Planet, language) -> str:
        return self.render(f"planet.{planet.name}", language)

    def sign_name(self, sign: ZodiacSign, language) -> str:
        return self.render(f"sign.{sign.name}", language)

    def planet_list(self, planets: Iterable[Planet], language) -> str:
        return ", ".join(self.planet_name(p, language) for p in planets)

    def render_join(self, items: Iterable[str], language) -> str:
        """'a, b and c' in the requested language."""
        items = list(items)
        if len(items) < 2:
            return "".join(items)
        return self.render("list.and", language, head=", ".join(items[:-1]), last=items[-1])


class CatalogTemplates(TextTemplates):
    def __init__(self, catalogues: Optional[Mapping[Language, Mapping[str, Any]]] = None):
        self._catalogues: Dict[Language, Mapping[str, Any]] = dict(
            catalogues if catalogues is not None else DEFAULT_CATALOGUES
        )
        if Language.ENGLISH not in self._catalogues:
            raise ValueError("An English catalogue is required")

    def _lookup(self, key: str, language) -> Any:
        lang = Language.parse(language)
        catalogue = self._catalogues.get(lang, {})
        if key in catalogue:
            return catalogue[key]
        english = self._catalogues[Language.ENGLISH]
        if key in english:
            if lang is not Language.ENGLISH:
                logger.debug("No %s text for %r, falling back to English", lang.value, key)
            return english[key]
        logger.warning("Missing text template %r", key)
        raise CalculationError(f"Missing text template: {key}", {"key": key})

    def render(self, key: str, language, **params) -> str:
        template = self._lookup(key, language)
        if not isinstance(template, str):
            raise CalculationError(f"Text template {key} is not a string", {"key": key})
        try:
            return template.format(**params)
        except (KeyError, IndexError) as exc:
            raise CalculationError(f"Text template {key} is missing parameter {exc}",
                                   {"key": key}) from exc

    def render_list(self, key: str, language) -> List[str]:
        value = self._lookup(key, language)
        if isinstance(value, str):
            return [value]
        return list(value)


# ---- English ----------------------------------------------------------------

ENGLISH: Dict[str, Any] = {
    "list.and": "{head} and {last}",

    # errors
    "error.year_before_birth": "Target year {year} is before the birth year {birth_year}.",
    "error.invalid_chart": "The natal chart is invalid: {problems}",
    "error.latitude": "latitude {value} is outside [-90, 90]",
    "error.longitude": "longitude {value} is outside [-180, 180]",
    "error.timezone": "timezone offset {value} is outside [-12, 14]",
    "error.ascendant": "the ascendant longitude is not a finite number",
    "error.missing_planet": "{planet} longitude is missing",
    "error.planet_longitude": "{planet} longitude is not a finite number",

    # planets and signs
    "planet.SUN": "Sun", "planet.MOON": "Moon", "planet.MARS": "Mars",
    "planet.MERCURY": "Mercury", "planet.JUPITER": "Jupiter", "planet.VENUS": "Venus",
    "planet.SATURN": "Saturn", "planet.RAHU": "Rahu", "planet.KETU": "Ketu",
    "sign.ARIES": "Aries", "sign.TAURUS": "Taurus", "sign.GEMINI": "Gemini",
    "sign.CANCER": "Cancer", "sign.LEO": "Leo", "sign.VIRGO": "Virgo",
    "sign.LIBRA": "Libra", "sign.SCORPIO": "Scorpio", "sign.SAGITTARIUS": "Sagittarius",
    "sign.CAPRICORN": "Capricorn", "sign.AQUARIUS": "Aquarius", "sign.PISCES": "Pisces",
    "month.1": "January", "month.2": "February", "month.3": "March", "month.4": "April",
    "month.5": "May", "month.6": "June", "month.7": "July", "month.8": "August",
    "month.9": "September", "month.10": "October", "month.11": "November",
    "month.12": "December",

    # dignity and strength
    "dignity.exalted": "exalted in {sign}",
    "dignity.own_sign": "in its own sign {sign}",
    "dignity.friendly": "in the friendly sign {sign}",
    "dignity.neutral": "in the neutral sign {sign}",
    "dignity.inimical": "in the inimical sign {sign}",
    "dignity.debilitated": "debilitated in {sign}",
    "dignity.house.kendra": "angular (kendra) placement",
    "dignity.house.trikona": "trinal (trikona) placement",
    "dignity.house.gains": "placed in a house of gains",
    "dignity.house.upachaya": "placed in a growth (upachaya) house",
    "dignity.house.dusthana": "placed in a difficult (dusthana) house",
    "dignity.retrograde": "retrograde",
    "dignity.summary": "{planet}: {details}",
    "strength.exalted": "Exalted", "strength.debilitated": "Debilitated",
    "strength.strong": "Strong", "strength.angular": "Angular",
    "strength.retrograde": "Retrograde", "strength.moderate": "Moderate",
    "bala.category.excellent": "Excellent", "bala.category.strong": "Strong",
    "bala.category.average": "Average", "bala.category.weak": "Weak",
    "bala.category.poor": "Poor",

    # tones
    "tone.excellent": "excellent",
    "tone.favorable": "favorable",
    "tone.challenging": "challenging",
    "tone.balanced": "balanced",
    "tone.supportive": "supportive",
    "tone.positive": "positive",
    "tone.challenging_growth": "challenging but growth-oriented",

    # year lord
    "year_lord.narrative": ("{planet} rules the year with {votes} of 5 votes, placed in "
                            "house {house} ({strength})."),
    "year_lord.influence.SUN": ("A Sun year brings authority, recognition and dealings "
                                "with government; vitality and leadership are tested."),
    "year_lord.influence.MOON": ("A Moon year highlights emotions, public life, travel "
                                 "and the mother; moods and popularity fluctuate."),
    "year_lord.influence.MARS": ("A Mars year brings energy, competition and initiative; "
                                 "property and courage are in focus, avoid haste."),
    "year_lord.influence.MERCURY": ("A Mercury year favours communication, trade, study "
                                    "and writing; business intelligence pays off."),
    "year_lord.influence.JUPITER": ("A Jupiter year brings wisdom, expansion and good "
                                    "fortune; children, teachers and faith prosper."),
    "year_lord.influence.VENUS": ("A Venus year favours relationships, comforts, the arts "
                                  "and finance; marriage matters come forward."),
    "year_lord.influence.SATURN": ("A Saturn year asks for discipline and patience; "
                                   "steady work brings durable, if delayed, results."),
    "year_lord.influence.RAHU": ("A Rahu influence brings ambition, foreign contacts and "
                                 "sudden change."),
    "year_lord.influence.KETU": ("A Ketu influence turns attention inward towards research "
                                 "and detachment."),

    # muntha
    "muntha.narrative": ("Muntha in house {house} ({sign}) directs the year towards "
                         "{significance}."),
    "muntha.lord": "Its lord {lord} in house {lord_house} gives {tone} support.",
    "muntha.outlook.good": "The Muntha is well placed and the period is well supported.",
    "muntha.outlook.difficult": "The Muntha is in a testing house; effort and care are needed.",
    "muntha.tags.ARIES": ["initiative", "courage", "leadership"],
    "muntha.tags.TAURUS": ["stability", "resources", "comfort"],
    "muntha.tags.GEMINI": ["communication", "learning", "networking"],
    "muntha.tags.CANCER": ["home", "nurturing", "emotional security"],
    "muntha.tags.LEO": ["recognition", "creativity", "authority"],
    "muntha.tags.VIRGO": ["service", "health routines", "analysis"],
    "muntha.tags.LIBRA": ["partnerships", "balance", "diplomacy"],
    "muntha.tags.SCORPIO": ["transformation", "research", "shared resources"],
    "muntha.tags.SAGITTARIUS": ["wisdom", "travel", "higher learning"],
    "muntha.tags.CAPRICORN": ["career", "discipline", "achievement"],
    "muntha.tags.AQUARIUS": ["networks", "innovation", "gains"],
    "muntha.tags.PISCES": ["spirituality", "compassion", "retreat"],
    "muntha.themes.1": ["personal growth", "new beginnings", "health focus"],
    "muntha.themes.2": ["financial gains", "family matters", "speech and expression"],
    "muntha.themes.3": ["communication", "short travels", "siblings"],
    "muntha.themes.4": ["home affairs", "property", "inner peace"],
    "muntha.themes.5": ["creativity", "romance", "children"],
    "muntha.themes.6": ["service", "health issues", "competition"],
    "muntha.themes.7": ["partnerships", "marriage", "business"],
    "muntha.themes.8": ["transformation", "research", "inheritance"],
    "muntha.themes.9": ["fortune", "long travel", "higher learning"],
    "muntha.themes.10": ["career advancement", "recognition", "authority"],
    "muntha.themes.11": ["gains", "friends", "fulfilled wishes"],
    "muntha.themes.12": ["spirituality", "foreign lands", "expenses"],

    # houses
    "house.significance.1": "personality, health and overall vitality",
    "house.significance.2": "finances, speech, family and accumulated wealth",
    "house.significance.3": "communication, siblings, courage and short travels",
    "house.significance.4": "home, property, mother and emotional security",
    "house.significance.5": "creativity, children, education and romance",
    "house.significance.6": "health, service, enemies and debts",
    "house.significance.7": "partnerships, marriage and business dealings",
    "house.significance.8": "transformation, inheritance and joint resources",
    "house.significance.9": "fortune, spirituality, higher learning and long travel",
    "house.significance.10": "career, reputation, authority and public standing",
    "house.significance.11": "gains, networks, aspirations and elder siblings",
    "house.significance.12": "expenditure, isolation, foreign lands and liberation",
    "house.keywords.1": ["self", "personality", "health", "appearance", "new beginnings"],
    "house.keywords.2": ["wealth", "family", "speech", "values", "food"],
    "house.keywords.3": ["siblings", "courage", "communication", "short travel", "skills"],
    "house.keywords.4": ["home", "mother", "property", "vehicles", "inner peace"],
    "house.keywords.5": ["children", "intelligence", "romance", "creativity", "investments"],
    "house.keywords.6": ["enemies", "health issues", "service", "debts", "competition"],
    "house.keywords.7": ["marriage", "partnership", "business", "public dealings", "contracts"],
    "house.keywords.8": ["longevity", "transformation", "research", "inheritance",
                         "hidden matters"],
    "house.keywords.9": ["fortune", "father", "religion", "higher education", "long travel"],
    "house.keywords.10": ["career", "status", "authority", "government", "fame"],
    "house.keywords.11": ["gains", "income", "friends", "elder siblings", "aspirations"],
    "house.keywords.12": ["losses", "expenses", "spirituality", "foreign lands", "liberation"],
    "house.narrative": "House {house} ({sign}) governs {significance}.",
    "house.lord_position": "Its lord {lord} occupies house {lord_house}.",
    "house.lord.excellent": "The exalted lord promises excellent results.",
    "house.lord.strong": "The lord is strong and supports these matters.",
    "house.lord.moderate": "The lord gives moderate, steady results.",
    "house.lord.challenged": "The debilitated lord brings obstacles that need patience.",
    "house.lord.variable": "Results depend on timing and effort.",
    "house.lord_dependent": "With no occupants, results follow the lord's condition.",
    "house.benefics": "Benefics {planets} enhance this house.",
    "house.malefics": "Malefics {planets} challenge this house.",
    "house.mixed": "Mixed influences from {planets}.",
    "house.muntha_emphasis": "The Muntha emphasises this house this year.",
    "house.year_lord_rules": "The Year Lord rules this house, raising its importance.",
    "house.aspect_support": "A strong favourable Tajika aspect supports this house.",
    "house.aspect_strain": "A strong adverse Tajika aspect strains this house.",
    "event.vitality": "Improved vitality and confidence",
    "event.new_ventures": "Favourable time for new ventures",
    "event.spiritual_growth": "Spiritual growth and good judgement",
    "event.increased_energy": "Increased energy and drive",
    "event.financial_gains": "Financial gains and savings",
    "event.family_relations": "Harmonious family relations",
    "event.luxury_acquisition": "Acquisition of comforts or luxuries",
    "event.creative_success": "Creative success",
    "event.children_matters": "Happy news concerning children",
    "event.academic_success": "Academic success",
    "event.romantic_happiness": "Romantic happiness",
    "event.partnership_strength": "Strengthened partnerships",
    "event.marriage_favorable": "Favourable period for marriage",
    "event.romantic_fulfillment": "Romantic fulfilment",
    "event.career_advancement": "Career advancement",
    "event.authority_recognition": "Recognition from authorities",
    "event.government_favor": "Favour from government",
    "event.desire_fulfillment": "Fulfilment of long-held desires",
    "event.multiple_gains": "Gains from several sources",

    # tajika
    "aspect.CONJUNCTION": "conjunction", "aspect.SEMI_SQUARE": "semi-square",
    "aspect.SEXTILE": "sextile", "aspect.QUINTILE": "quintile", "aspect.SQUARE": "square",
    "aspect.TRINE": "trine", "aspect.SESQUIQUADRATE": "sesquiquadrate",
    "aspect.BIQUINTILE": "biquintile", "aspect.QUINCUNX": "quincunx",
    "aspect.OPPOSITION": "opposition",
    "tajika.yoga.ITHASALA": "Ithasala", "tajika.yoga.MUTHASHILA": "Muthashila",
    "tajika.yoga.KAMBOOLA": "Kamboola", "tajika.yoga.NAKTA": "Nakta",
    "tajika.yoga.RADDA": "Radda", "tajika.yoga.DURAPHA": "Durapha",
    "tajika.yoga.EASARAPHA": "Easarapha",
    "tajika.effect.ITHASALA": ("{planet1} applies to {planet2} by {aspect}; matters they "
                               "signify move towards completion."),
    "tajika.effect.MUTHASHILA": ("{planet1} and {planet2} are almost exact by {aspect}; "
                                 "results arrive quickly."),
    "tajika.effect.KAMBOOLA": ("{planet1} joins {planet2} in an angle; an especially "
                               "powerful combination for success."),
    "tajika.effect.NAKTA": ("{planet1} and {planet2} exchange signs while applying; success "
                            "comes through an intermediary."),
    "tajika.effect.RADDA": ("A retrograde body in the {aspect} of {planet1} and {planet2} "
                            "brings delays and reversals."),
    "tajika.effect.DURAPHA": ("The {aspect} of {planet1} and {planet2} brings results "
                              "through struggle."),
    "tajika.effect.EASARAPHA": ("{planet1} separates from {planet2}; the opportunity has "
                                "already passed or is fading."),
    "tajika.prediction": ("{yoga} between {planet1} and {planet2} is {quality} for "
                          "matters of {houses}."),
    "tajika.house_ref": "house {house}",

    # tri-pataki
    "tripataki.role.udaya": "Udaya (rising)",
    "tripataki.role.madhya": "Madhya (middle)",
    "tripataki.role.anta": "Anta (ending)",
    "tripataki.area.udaya": "self, resources and home",
    "tripataki.area.madhya": "creativity, service, partnerships and change",
    "tripataki.area.anta": "fortune, career, gains and release",
    "tripataki.quiet": "The {role} flag is quiet.",
    "tripataki.favorable": "Favourable influence from {planets}.",
    "tripataki.challenging": "Challenging influence from {planets}.",
    "tripataki.variable": "Mixed influences make results variable.",
    "tripataki.dominant.udaya": "Early-year and personal initiatives dominate",
    "tripataki.dominant.madhya": "Relationships and mid-year developments dominate",
    "tripataki.dominant.anta": "Results, recognition and completion dominate",
    "tripataki.interpretation": "{count} planets in the {role} flag emphasise {area}.",
    "tripataki.emphasis": "The concentration in the {role} flag makes {area} the year's focus.",

    # sahams
    "saham.name.PUNYA": "Punya Saham", "saham.name.VIDYA": "Vidya Saham",
    "saham.name.YASHAS": "Yashas Saham", "saham.name.MITRA": "Mitra Saham",
    "saham.name.MAHATMYA": "Mahatmya Saham", "saham.name.ASHA": "Asha Saham",
    "saham.name.SAMARTHA": "Samartha Saham", "saham.name.BHRATRI": "Bhratri Saham",
    "saham.name.PITRI": "Pitri Saham", "saham.name.MATRI": "Matri Saham",
    "saham.name.PUTRA": "Putra Saham", "saham.name.VIVAHA": "Vivaha Saham",
    "saham.name.KARMA": "Karma Saham", "saham.name.ROGA": "Roga Saham",
    "saham.name.MRITYU": "Mrityu Saham", "saham.name.PARADESA": "Paradesa Saham",
    "saham.name.DHANA": "Dhana Saham", "saham.name.RAJA": "Raja Saham",
    "saham.name.KARYASIDDHI": "Karyasiddhi Saham",
    "saham.meaning.PUNYA": "fortune and merit",
    "saham.meaning.VIDYA": "learning and education",
    "saham.meaning.YASHAS": "fame and reputation",
    "saham.meaning.MITRA": "friends and allies",
    "saham.meaning.MAHATMYA": "greatness and dignity",
    "saham.meaning.ASHA": "hopes and aspirations",
    "saham.meaning.SAMARTHA": "capability and enterprise",
    "saham.meaning.BHRATRI": "siblings",
    "saham.meaning.PITRI": "the father",
    "saham.meaning.MATRI": "the mother",
    "saham.meaning.PUTRA": "children",
    "saham.meaning.VIVAHA": "marriage",
    "saham.meaning.KARMA": "career and deeds",
    "saham.meaning.ROGA": "illness",
    "saham.meaning.MRITYU": "danger and endings",
    "saham.meaning.PARADESA": "foreign travel",
    "saham.meaning.DHANA": "wealth",
    "saham.meaning.RAJA": "authority and royal favour",
    "saham.meaning.KARYASIDDHI": "success in undertakings",
    "saham.narrative": "{name} relates to {meaning}; it falls in {sign}, house {house}.",
    "saham.lord": "Its lord {lord} is in house {lord_house}.",
    "saham.active_note": "It is activated by the running Mudda Dasha.",
    "saham.activation": "Most active during the {planet} Mudda Dasha ({start} to {end}).",

    # mudda dasha
    "mudda.prediction": ("{planet} period: {nature} Focus falls on {area}. {quality}"),
    "mudda.quality.exalted": "Exceptional results are indicated.",
    "mudda.quality.strong": "A well-supported period.",
    "mudda.quality.debilitated": "A challenging period that calls for caution.",
    "mudda.quality.angular": "Mixed results with visible activity.",
    "mudda.quality.retrograde": "Mixed results; revisit unfinished matters.",
    "mudda.quality.moderate": "Mixed results depending on effort.",
    "planet.nature.SUN": "authority, government and vitality are highlighted.",
    "planet.nature.MOON": "emotions, the public and the mother are highlighted.",
    "planet.nature.MARS": "energy, courage and property are highlighted.",
    "planet.nature.MERCURY": "communication, trade and study are highlighted.",
    "planet.nature.JUPITER": "wisdom, expansion and fortune are highlighted.",
    "planet.nature.VENUS": "love, comfort and the arts are highlighted.",
    "planet.nature.SATURN": "discipline, labour and karma are highlighted.",
    "planet.nature.RAHU": "ambition, innovation and foreign matters are highlighted.",
    "planet.nature.KETU": "spirituality, detachment and the past are highlighted.",
    "planet.keywords.SUN": ["leadership", "vitality", "father"],
    "planet.keywords.MOON": ["emotions", "mother", "public"],
    "planet.keywords.MARS": ["action", "energy", "courage"],
    "planet.keywords.MERCURY": ["communication", "learning", "business"],
    "planet.keywords.JUPITER": ["wisdom", "growth", "fortune"],
    "planet.keywords.VENUS": ["love", "art", "comfort"],
    "planet.keywords.SATURN": ["discipline", "karma", "delays"],
    "planet.keywords.RAHU": ["ambition", "innovation", "foreign"],
    "planet.keywords.KETU": ["spirituality", "detachment", "past"],

    # summary
    "key_date.solar_return": "Solar Return",
    "key_date.solar_return_desc": "The annual chart begins; set intentions for the year.",
    "key_date.dasha_begins": "{planet} Mudda Dasha begins",
    "key_date.dasha_begins_desc": "{planet} governs the next {days} days.",
    "theme.year_lord": "Year Lord {planet} emphasises {area}",
    "theme.muntha": "Muntha in house {house}: {theme}",
    "theme.general_growth": "general growth",
    "theme.tripataki": "Tri-Pataki: {influence}",
    "theme.favorable_house": "Strong prospects for {area} (house {house})",
    "theme.tajika": "Tajika aspects are {tone} ({positive} of {total} favourable)",
    "overall.tone": "This promises to be a {tone} year.",
    "overall.muntha": "Muntha in house {house} ({sign}) brings focus on {theme}.",
    "overall.aspects": ("Tajika aspects show {positive} supportive and {challenging} "
                        "challenging combinations."),
    "overall.closing": "Working with these influences lets the year's potential be maximised.",

    # report
    "report.title": "VARSHAPHALA - ANNUAL HOROSCOPE",
    "report.year": "Year: {year}    Age: {age}",
    "report.solar_return": "Solar Return: {when} (local)",
    "report.ascendant": "Annual Ascendant: {sign} {degree}",
    "report.rating": "Year Rating: {rating} / 5",
    "report.section.year_lord": "YEAR LORD",
    "report.section.muntha": "MUNTHA",
    "report.section.themes": "MAJOR THEMES",
    "report.section.mudda": "MUDDA DASHA",
    "report.section.months": "MONTHS",
    "report.section.overall": "OVERALL PREDICTION",
    "report.year_lord_line": "{planet} ({votes} votes), house {house}, {strength}",
    "report.muntha_line": "{sign}, house {house}, lord {lord} in house {lord_house}",
    "report.mudda_line": "{planet:<10} {start} to {end}  {days:>3} days{marker}",
    "report.current": "  <- current",
    "report.favorable_months": "Favourable months: {months}",
    "report.challenging_months": "Challenging months: {months}",
    "report.none": "none",
    "report.footer": "Generated by the Varshaphala engine.",
}


# ---- Nepali -----------------------------------------------------------------

NEPALI: Dict[str, Any] = {
    "list.and": "{head} र {last}",

    "error.year_before_birth": "लक्ष्य वर्ष {year} जन्म वर्ष {birth_year} भन्दा अघि छ।",
    "error.invalid_chart": "जन्म कुण्डली अमान्य छ: {problems}",
    "error.latitude": "अक्षांश {value} [-90, 90] बाहिर छ",
    "error.longitude": "देशान्तर {value} [-180, 180] बाहिर छ",
    "error.timezone": "समय क्षेत्र {value} [-12, 14] बाहिर छ",
    "error.ascendant": "लग्नको देशान्तर सीमित संख्या होइन",
    "error.missing_planet": "{planet} को देशान्तर छैन",
    "error.planet_longitude": "{planet} को देशान्तर सीमित संख्या होइन",

    "planet.SUN": "सूर्य", "planet.MOON": "चन्द्र", "planet.MARS": "मंगल",
    "planet.MERCURY": "बुध", "planet.JUPITER": "बृहस्पति", "planet.VENUS": "शुक्र",
    "planet.SATURN": "शनि", "planet.RAHU": "राहु", "planet.KETU": "केतु",
    "sign.ARIES": "मेष", "sign.TAURUS": "वृष", "sign.GEMINI": "मिथुन",
    "sign.CANCER": "कर्कट", "sign.LEO": "सिंह", "sign.VIRGO": "कन्या",
    "sign.LIBRA": "तुला", "sign.SCORPIO": "वृश्चिक", "sign.SAGITTARIUS": "धनु",
    "sign.CAPRICORN": "मकर", "sign.AQUARIUS": "कुम्भ", "sign.PISCES": "मीन",
    "month.1": "जनवरी", "month.2": "फेब्रुअरी", "month.3": "मार्च", "month.4": "अप्रिल",
    "month.5": "मे", "month.6": "जुन", "month.7": "जुलाई", "month.8": "अगस्ट",
    "month.9": "सेप्टेम्बर", "month.10": "अक्टोबर", "month.11": "नोभेम्बर",
    "month.12": "डिसेम्बर",

    "dignity.exalted": "{sign} मा उच्च",
    "dignity.own_sign": "आफ्नै राशि {sign} मा",
    "dignity.friendly": "मित्र राशि {sign} मा",
    "dignity.neutral": "सम राशि {sign} मा",
    "dignity.inimical": "शत्रु राशि {sign} मा",
    "dignity.debilitated": "{sign} मा नीच",
    "dignity.house.kendra": "केन्द्र स्थान",
    "dignity.house.trikona": "त्रिकोण स्थान",
    "dignity.house.gains": "लाभ स्थान",
    "dignity.house.upachaya": "उपचय स्थान",
    "dignity.house.dusthana": "दुःस्थान",
    "dignity.retrograde": "वक्री",
    "dignity.summary": "{planet}: {details}",
    "strength.exalted": "उच्च", "strength.debilitated": "नीच",
    "strength.strong": "बलियो", "strength.angular": "केन्द्रस्थ",
    "strength.retrograde": "वक्री", "strength.moderate": "मध्यम",
    "bala.category.excellent": "उत्कृष्ट", "bala.category.strong": "बलियो",
    "bala.category.average": "औसत", "bala.category.weak": "कमजोर",
    "bala.category.poor": "न्यून",

    "tone.excellent": "उत्कृष्ट",
    "tone.favorable": "अनुकूल",
    "tone.challenging": "चुनौतीपूर्ण",
    "tone.balanced": "सन्तुलित",
    "tone.supportive": "सहयोगी",
    "tone.positive": "सकारात्मक",
    "tone.challenging_growth": "चुनौतीपूर्ण तर विकासोन्मुख",

    "year_lord.narrative": "{planet} ले ५ मध्ये {votes} मत पाई वर्षको स्वामित्व लिन्छ, भाव {house} मा ({strength})।",
    "year_lord.influence.SUN": "सूर्यको वर्षले अधिकार, मान्यता र सरकारी कामकाज ल्याउँछ।",
    "year_lord.influence.MOON": "चन्द्रको वर्षले भावना, सार्वजनिक जीवन, यात्रा र आमालाई उजागर गर्छ।",
    "year_lord.influence.MARS": "मंगलको वर्षले ऊर्जा, प्रतिस्पर्धा र पहल ल्याउँछ; हतार नगर्नुहोस्।",
    "year_lord.influence.MERCURY": "बुधको वर्ष सञ्चार, व्यापार र अध्ययनका लागि अनुकूल छ।",
    "year_lord.influence.JUPITER": "बृहस्पतिको वर्षले ज्ञान, विस्तार र सौभाग्य ल्याउँछ।",
    "year_lord.influence.VENUS": "शुक्रको वर्ष सम्बन्ध, सुख-सुविधा, कला र वित्तका लागि अनुकूल छ।",
    "year_lord.influence.SATURN": "शनिको वर्षले अनुशासन र धैर्य माग्छ; निरन्तर परिश्रमले स्थायी फल दिन्छ।",
    "year_lord.influence.RAHU": "राहुको प्रभावले महत्वाकांक्षा, विदेशी सम्पर्क र अचानक परिवर्तन ल्याउँछ।",
    "year_lord.influence.KETU": "केतुको प्रभावले ध्यान अनुसन्धान र वैराग्यतर्फ मोड्छ।",

    "muntha.narrative": "भाव {house} ({sign}) मा रहेको मुन्थाले वर्षलाई {significance} तर्फ निर्देशित गर्छ।",
    "muntha.lord": "यसको स्वामी {lord} भाव {lord_house} मा रही {tone} सहयोग दिन्छ।",
    "muntha.outlook.good": "मुन्था राम्रो स्थानमा छ र यो अवधि राम्रोसँग समर्थित छ।",
    "muntha.outlook.difficult": "मुन्था कठिन भावमा छ; प्रयास र सावधानी आवश्यक छ।",
    "muntha.themes.1": ["व्यक्तिगत विकास", "नयाँ सुरुवात", "स्वास्थ्यमा ध्यान"],
    "muntha.themes.2": ["आर्थिक लाभ", "पारिवारिक विषय", "वाणी"],
    "muntha.themes.3": ["सञ्चार", "छोटो यात्रा", "भाइबहिनी"],
    "muntha.themes.4": ["घरायसी विषय", "सम्पत्ति", "आन्तरिक शान्ति"],
    "muntha.themes.5": ["सिर्जनशीलता", "प्रेम", "सन्तान"],
    "muntha.themes.6": ["सेवा", "स्वास्थ्य समस्या", "प्रतिस्पर्धा"],
    "muntha.themes.7": ["साझेदारी", "विवाह", "व्यापार"],
    "muntha.themes.8": ["रूपान्तरण", "अनुसन्धान", "पैतृक सम्पत्ति"],
    "muntha.themes.9": ["भाग्य", "लामो यात्रा", "उच्च शिक्षा"],
    "muntha.themes.10": ["करियर उन्नति", "मान्यता", "अधिकार"],
    "muntha.themes.11": ["लाभ", "मित्रहरू", "इच्छा पूर्ति"],
    "muntha.themes.12": ["आध्यात्मिकता", "विदेश", "खर्च"],

    "house.significance.1": "व्यक्तित्व, स्वास्थ्य र समग्र ऊर्जा",
    "house.significance.2": "धन, वाणी, परिवार र सञ्चित सम्पत्ति",
    "house.significance.3": "सञ्चार, भाइबहिनी, साहस र छोटो यात्रा",
    "house.significance.4": "घर, सम्पत्ति, आमा र भावनात्मक सुरक्षा",
    "house.significance.5": "सिर्जनशीलता, सन्तान, शिक्षा र प्रेम",
    "house.significance.6": "स्वास्थ्य, सेवा, शत्रु र ऋण",
    "house.significance.7": "साझेदारी, विवाह र व्यापारिक कारोबार",
    "house.significance.8": "रूपान्तरण, पैतृक सम्पत्ति र संयुक्त स्रोत",
    "house.significance.9": "भाग्य, आध्यात्मिकता, उच्च शिक्षा र लामो यात्रा",
    "house.significance.10": "करियर, प्रतिष्ठा, अधिकार र सार्वजनिक स्थान",
    "house.significance.11": "लाभ, सञ्जाल, आकांक्षा र दाजुदिदी",
    "house.significance.12": "खर्च, एकान्त, विदेश र मोक्ष",
    "house.narrative": "भाव {house} ({sign}) ले {significance} लाई शासन गर्छ।",
    "house.lord_position": "यसको स्वामी {lord} भाव {lord_house} मा छ।",
    "house.lord.excellent": "उच्च स्वामीले उत्कृष्ट फलको संकेत दिन्छ।",
    "house.lord.strong": "स्वामी बलियो छ र यी विषयलाई सहयोग गर्छ।",
    "house.lord.moderate": "स्वामीले मध्यम र स्थिर फल दिन्छ।",
    "house.lord.challenged": "नीच स्वामीले धैर्य चाहिने अवरोध ल्याउँछ।",
    "house.lord.variable": "फल समय र प्रयासमा निर्भर हुन्छ।",
    "house.lord_dependent": "कुनै ग्रह नभएकाले फल स्वामीको अवस्थामा निर्भर हुन्छ।",
    "house.benefics": "शुभ ग्रह {planets} ले यो भावलाई बलियो बनाउँछन्।",
    "house.malefics": "पाप ग्रह {planets} ले यो भावमा चुनौती दिन्छन्।",
    "house.mixed": "{planets} बाट मिश्रित प्रभाव।",
    "house.muntha_emphasis": "यस वर्ष मुन्थाले यो भावलाई जोड दिन्छ।",
    "house.year_lord_rules": "वर्षेश यस भावको स्वामी हो, जसले यसको महत्व बढाउँछ।",
    "house.aspect_support": "बलियो शुभ ताजिक दृष्टिले यो भावलाई सहयोग गर्छ।",
    "house.aspect_strain": "बलियो प्रतिकूल ताजिक दृष्टिले यो भावमा दबाब दिन्छ।",

    "tajika.yoga.ITHASALA": "इत्थशाल", "tajika.yoga.MUTHASHILA": "मुथशिल",
    "tajika.yoga.KAMBOOLA": "कम्बूल", "tajika.yoga.NAKTA": "नक्त",
    "tajika.yoga.RADDA": "रद्द", "tajika.yoga.DURAPHA": "दुरफ",
    "tajika.yoga.EASARAPHA": "ईसराफ",
    "tajika.prediction": "{planet1} र {planet2} बीचको {yoga} {houses} का विषयमा {quality} छ।",
    "tajika.house_ref": "भाव {house}",

    "tripataki.role.udaya": "उदय",
    "tripataki.role.madhya": "मध्य",
    "tripataki.role.anta": "अन्त",
    "tripataki.quiet": "{role} पताका शान्त छ।",
    "tripataki.favorable": "{planets} बाट अनुकूल प्रभाव।",
    "tripataki.challenging": "{planets} बाट चुनौतीपूर्ण प्रभाव।",
    "tripataki.variable": "मिश्रित प्रभावले फल परिवर्तनशील बनाउँछ।",
    "tripataki.interpretation": "{role} पताकामा {count} ग्रहले {area} लाई जोड दिन्छन्।",

    "saham.narrative": "{name} {meaning} सँग सम्बन्धित छ; यो {sign}, भाव {house} मा पर्छ।",
    "saham.lord": "यसको स्वामी {lord} भाव {lord_house} मा छ।",
    "saham.active_note": "चलिरहेको मुद्दा दशाले यसलाई सक्रिय बनाउँछ।",
    "saham.activation": "{planet} मुद्दा दशामा ({start} देखि {end}) सबैभन्दा सक्रिय।",

    "mudda.prediction": "{planet} अवधि: {nature} ध्यान {area} मा केन्द्रित हुन्छ। {quality}",
    "mudda.quality.exalted": "असाधारण फलको संकेत छ।",
    "mudda.quality.strong": "राम्रोसँग समर्थित अवधि।",
    "mudda.quality.debilitated": "सावधानी चाहिने चुनौतीपूर्ण अवधि।",
    "mudda.quality.angular": "सक्रियतासहित मिश्रित फल।",
    "mudda.quality.retrograde": "मिश्रित फल; अधुरा काम फेरि हेर्नुहोस्।",
    "mudda.quality.moderate": "प्रयासअनुसार मिश्रित फल।",
    "planet.keywords.SUN": ["नेतृत्व", "ऊर्जा", "बुबा"],
    "planet.keywords.MOON": ["भावना", "आमा", "जनता"],
    "planet.keywords.MARS": ["कर्म", "ऊर्जा", "साहस"],
    "planet.keywords.MERCURY": ["सञ्चार", "सिकाइ", "व्यापार"],
    "planet.keywords.JUPITER": ["ज्ञान", "वृद्धि", "भाग्य"],
    "planet.keywords.VENUS": ["प्रेम", "कला", "सुख"],
    "planet.keywords.SATURN": ["अनुशासन", "कर्म", "ढिलाइ"],
    "planet.keywords.RAHU": ["महत्वाकांक्षा", "नवीनता", "विदेश"],
    "planet.keywords.KETU": ["आध्यात्मिकता", "वैराग्य", "विगत"],

    "key_date.solar_return": "सौर प्रत्यावर्तन",
    "key_date.solar_return_desc": "वार्षिक कुण्डली सुरु हुन्छ; वर्षका लागि संकल्प गर्नुहोस्।",
    "key_date.dasha_begins": "{planet} मुद्दा दशा सुरु",
    "key_date.dasha_begins_desc": "{planet} ले आगामी {days} दिन शासन गर्छ।",
    "theme.year_lord": "वर्षेश {planet} ले {area} लाई जोड दिन्छ",
    "theme.muntha": "भाव {house} मा मुन्था: {theme}",
    "theme.general_growth": "सामान्य वृद्धि",
    "theme.tripataki": "त्रिपताकी: {influence}",
    "theme.favorable_house": "{area} का लागि बलियो सम्भावना (भाव {house})",
    "theme.tajika": "ताजिक दृष्टिहरू {tone} छन् ({total} मध्ये {positive} अनुकूल)",
    "overall.tone": "यो वर्ष {tone} हुने देखिन्छ।",
    "overall.muntha": "भाव {house} ({sign}) मा मुन्थाले {theme} मा ध्यान ल्याउँछ।",
    "overall.aspects": "ताजिक दृष्टिमा {positive} सहयोगी र {challenging} चुनौतीपूर्ण योग छन्।",
    "overall.closing": "यी प्रभावहरूसँग काम गर्दा वर्षको सम्भावना अधिकतम हुन्छ।",

    "report.title": "वर्षफल - वार्षिक राशिफल",
    "report.year": "वर्ष: {year}    उमेर: {age}",
    "report.solar_return": "सौर प्रत्यावर्तन: {when} (स्थानीय)",
    "report.ascendant": "वार्षिक लग्न: {sign} {degree}",
    "report.rating": "वर्ष मूल्याङ्कन: {rating} / 5",
    "report.section.year_lord": "वर्षेश",
    "report.section.muntha": "मुन्था",
    "report.section.themes": "मुख्य विषयहरू",
    "report.section.mudda": "मुद्दा दशा",
    "report.section.months": "महिनाहरू",
    "report.section.overall": "समग्र भविष्यवाणी",
    "report.year_lord_line": "{planet} ({votes} मत), भाव {house}, {strength}",
    "report.muntha_line": "{sign}, भाव {house}, स्वामी {lord} भाव {lord_house} मा",
    "report.current": "  <- हाल",
    "report.favorable_months": "अनुकूल महिना: {months}",
    "report.challenging_months": "चुनौतीपूर्ण महिना: {months}",
    "report.none": "छैन",
    "report.footer": "वर्षफल इन्जिनद्वारा तयार।",
}

DEFAULT_CATALOGUES: Dict[Language, Dict[str, Any]] = {
    Language.ENGLISH: ENGLISH,
    Language.NEPALI: NEPALI,
}

_default: Optional[CatalogTemplates] = None


def default_templates() -> CatalogTemplates:
    """Shared instance of the built-in catalogue (templates are read-only)."""
    global _default
    if _default is None:
        _default = CatalogTemplates()
    return _default
