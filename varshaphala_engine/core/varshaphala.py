"""
varshaphala.py  —  Annual horoscope orchestration
==================================================
Runs the components in dependency order:

    validate -> solar return (this year and next) -> annual chart
    -> [Tajika aspects | Pancha Vargiya Bala | Tri-Pataki | Mudda Dasha]
    -> Muntha -> Year Lord
    -> [house predictions | sahams]
    -> summary

Bracketed stages fan out over a thread pool. Domain errors propagate
unchanged; anything else is wrapped in ``CalculationError``.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

from ..cache import VarshaphalaCache, cache_key
from ..config import Settings, get_settings
from .cancellation import check
from .chart import AnnualChart, NatalChart, cast_annual_chart
from .constants import Language, Planet
from .ephemeris import EphemerisPort, SwissEphemeris, jd_to_local
from .errors import CalculationError, ValidationError, VarshaphalaError
from .house_predictions import HousePrediction, score_houses
from .mudda_dasha import (
    MuddaDashaPeriod, annotate_periods, current_planet, mark_current, schedule_mudda_dasha,
    starting_planet, year_length_days,
)
from .muntha import Muntha, resolve_muntha
from .pancha_bala import PanchaVargiyaBala, score_pancha_vargiya_bala
from .report import render_plain_text
from .sahams import SahamResult, compute_sahams
from .solar_return import SolarReturnFinder
from .summary import (
    KeyDate, key_dates, major_themes, monthly_influences, overall_prediction, year_rating,
)
from .tajika import TajikaAspectResult, compute_tajika_aspects
from .templates import TextTemplates, default_templates
from .tri_pataki import TriPatakiChakra, build_tri_pataki
from .year_lord import YearLord, resolve_year_lord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VarshaphalaResult:
    year: int
    age: int
    language: Language
    as_of: datetime
    annual_chart: AnnualChart
    year_lord: YearLord
    muntha: Muntha
    pancha_vargiya_bala: Tuple[PanchaVargiyaBala, ...]
    tri_pataki: TriPatakiChakra
    sahams: Tuple[SahamResult, ...]
    tajika_aspects: Tuple[TajikaAspectResult, ...]
    mudda_dasha: Tuple[MuddaDashaPeriod, ...]
    house_predictions: Tuple[HousePrediction, ...]
    major_themes: Tuple[str, ...]
    favorable_months: Tuple[int, ...]
    challenging_months: Tuple[int, ...]
    key_dates: Tuple[KeyDate, ...]
    overall_prediction: str
    year_rating: float

    @property
    def current_mudda(self) -> Optional[MuddaDashaPeriod]:
        for period in self.mudda_dasha:
            if period.current:
                return period
        return None

    def to_dict(self) -> dict:
        current = self.current_mudda
        return {
            "year": self.year,
            "age": self.age,
            "language": self.language.value,
            "as_of": self.as_of.isoformat(),
            "annual_chart": self.annual_chart.to_dict(),
            "year_lord": self.year_lord.to_dict(),
            "muntha": self.muntha.to_dict(),
            "pancha_vargiya_bala": [b.to_dict() for b in self.pancha_vargiya_bala],
            "tri_pataki": self.tri_pataki.to_dict(),
            "sahams": [s.to_dict() for s in self.sahams],
            "tajika_aspects": [a.to_dict() for a in self.tajika_aspects],
            "mudda_dasha": [p.to_dict() for p in self.mudda_dasha],
            "current_mudda": current.planet.display_name if current else None,
            "house_predictions": [h.to_dict() for h in self.house_predictions],
            "major_themes": list(self.major_themes),
            "favorable_months": list(self.favorable_months),
            "challenging_months": list(self.challenging_months),
            "key_dates": [k.to_dict() for k in self.key_dates],
            "overall_prediction": self.overall_prediction,
            "year_rating": self.year_rating,
        }

    def to_plain_text(self, text: Optional[TextTemplates] = None) -> str:
        return render_plain_text(self, text or default_templates())


def local_now(timezone_offset: float) -> datetime:
    return (datetime.now(timezone.utc) + timedelta(hours=timezone_offset)).replace(tzinfo=None)


def to_local(as_of: datetime, timezone_offset: float) -> datetime:
    """Naive local clock time at the chart's offset; naive input is taken as local already."""
    if as_of.tzinfo is None:
        return as_of
    utc = as_of.astimezone(timezone.utc)
    return (utc + timedelta(hours=timezone_offset)).replace(tzinfo=None)


class VarshaphalaOrchestrator:
    def __init__(self, ephemeris: EphemerisPort,
                 text: Optional[TextTemplates] = None,
                 settings: Optional[Settings] = None,
                 executor: Optional[ThreadPoolExecutor] = None,
                 cache: Optional[VarshaphalaCache] = None):
        self.settings = settings or get_settings()
        self.ephemeris = ephemeris
        self.text = text or default_templates()
        self.finder = SolarReturnFinder(
            ephemeris,
            tolerance_deg=self.settings.SOLAR_RETURN_TOLERANCE_DEG,
            max_iterations=self.settings.SOLAR_RETURN_MAX_ITERATIONS,
            bracket_days=self.settings.SOLAR_RETURN_BRACKET_DAYS,
        )
        self._executor = executor
        if cache is None and self.settings.CACHE_ENABLED:
            cache = VarshaphalaCache(self.settings.CACHE_SIZE)
        self.cache = cache

    # ---- validation ----------------------------------------------------------

    def validate(self, chart: NatalChart, year: int, language: Language) -> None:
        problems = chart.problems()
        if problems:
            rendered = "; ".join(self.text.render(key, language, **params)
                                 for key, params in problems)
            raise ValidationError(
                self.text.render("error.invalid_chart", language, problems=rendered),
                {"problems": [key for key, _ in problems]},
            )
        if year < chart.birth_year:
            raise ValidationError(
                self.text.render("error.year_before_birth", language,
                                 year=year, birth_year=chart.birth_year),
                {"year": year, "birth_year": chart.birth_year},
            )

    # ---- execution -----------------------------------------------------------

    @contextmanager
    def _pool(self):
        if self._executor is not None:
            yield self._executor
            return
        pool = ThreadPoolExecutor(max_workers=self.settings.MAX_WORKERS,
                                  thread_name_prefix="varshaphala")
        try:
            yield pool
        finally:
            pool.shutdown(wait=True)

    @staticmethod
    def _gather(futures: Dict, cancel_token) -> Dict:
        results = {}
        try:
            for name, future in futures.items():
                check(cancel_token, name)
                results[name] = future.result()
        except BaseException:
            for future in futures.values():
                future.cancel()
            raise
        return results

    def _mudda(self, chart: AnnualChart, year_days: int, language, as_of: datetime):
        periods = schedule_mudda_dasha(chart.solar_return_local, year_days,
                                       starting_planet(chart), self.settings.MUDDA_DEPTH)
        periods = annotate_periods(periods, chart, self.text, language)
        return mark_current(periods, as_of)

    def compute(self, chart: NatalChart, year: int, language=None, as_of: Optional[datetime] = None,
                cancel_token=None) -> VarshaphalaResult:
        try:
            lang = Language.parse(language or self.settings.DEFAULT_LANGUAGE)
        except ValueError as exc:
            raise ValidationError(str(exc), {"language": language}) from exc
        self.validate(chart, year, lang)
        as_of = local_now(chart.timezone_offset) if as_of is None else to_local(
            as_of, chart.timezone_offset)

        key = cache_key(chart, year, lang, as_of) if self.cache is not None else None
        if key is not None:
            cached = self.cache.get(key)
            if cached is not None:
                logger.info("Varshaphala cache hit for %s year %d (%s)", chart.name or "chart",
                            year, lang.value)
                return cached

        logger.info("Computing Varshaphala for %s year %d (%s)", chart.name or "chart",
                    year, lang.value)
        try:
            result = self._run(chart, year, lang, as_of, cancel_token)
        except VarshaphalaError:
            raise
        except Exception as exc:
            raise CalculationError(f"Varshaphala computation failed: {exc}",
                                   {"year": year}) from exc

        if key is not None:
            self.cache.put(key, result)
        logger.info("Varshaphala %d ready: year lord %s, rating %.2f", year,
                    result.year_lord.planet.display_name, result.year_rating)
        return result

    def _run(self, chart: NatalChart, year: int, lang: Language, as_of: datetime,
             cancel_token) -> VarshaphalaResult:
        text = self.text
        natal_sun = chart.planets[Planet.SUN]

        check(cancel_token, "solar return")
        jd = self.finder.find(natal_sun, year, cancel_token)
        next_jd = self.finder.find(natal_sun, year + 1, cancel_token)

        check(cancel_token, "annual chart")
        annual = cast_annual_chart(self.ephemeris, chart, jd, year)
        year_days = self.settings.MUDDA_YEAR_DAYS or year_length_days(
            annual.solar_return_local, jd_to_local(next_jd, chart.timezone_offset))
        age = year - chart.birth_year

        with self._pool() as pool:
            first = self._gather({
                "tajika aspects": pool.submit(compute_tajika_aspects, annual, text, lang,
                                              self.settings.SEPARATING_ORB_FACTOR),
                "pancha vargiya bala": pool.submit(score_pancha_vargiya_bala, annual),
                "tri-pataki": pool.submit(build_tri_pataki, annual, text, lang),
                "mudda dasha": pool.submit(self._mudda, annual, year_days, lang, as_of),
            }, cancel_token)
            aspects = first["tajika aspects"]
            balas = first["pancha vargiya bala"]
            mudda = first["mudda dasha"]

            check(cancel_token, "muntha")
            muntha = resolve_muntha(chart.ascendant, age, annual, text, lang)
            year_lord = resolve_year_lord(annual, muntha, balas, text, lang)

            second = self._gather({
                "house predictions": pool.submit(score_houses, annual, year_lord, muntha,
                                                 aspects, text, lang),
                "sahams": pool.submit(compute_sahams, annual, current_planet(mudda, as_of),
                                      text, lang, mudda),
            }, cancel_token)
        houses = second["house predictions"]

        check(cancel_token, "summary")
        favorable, challenging = monthly_influences(annual, year_lord)
        tri_pataki = first["tri-pataki"]
        return VarshaphalaResult(
            year=year,
            age=age,
            language=lang,
            as_of=as_of,
            annual_chart=annual,
            year_lord=year_lord,
            muntha=muntha,
            pancha_vargiya_bala=tuple(balas),
            tri_pataki=tri_pataki,
            sahams=tuple(second["sahams"]),
            tajika_aspects=tuple(aspects),
            mudda_dasha=mudda,
            house_predictions=tuple(houses),
            major_themes=tuple(major_themes(annual, year_lord, muntha, tri_pataki, houses,
                                            aspects, text, lang)),
            favorable_months=tuple(favorable),
            challenging_months=tuple(challenging),
            key_dates=tuple(key_dates(annual, mudda, text, lang)),
            overall_prediction=overall_prediction(annual, year_lord, muntha, aspects, houses,
                                                  text, lang),
            year_rating=year_rating(annual, year_lord, muntha, aspects, houses),
        )


# ---- Module-level entry point -------------------------------------------------

_shared_cache: Optional[VarshaphalaCache] = None


def _default_cache(settings: Settings) -> Optional[VarshaphalaCache]:
    global _shared_cache
    if not settings.CACHE_ENABLED:
        return None
    if _shared_cache is None:
        _shared_cache = VarshaphalaCache(settings.CACHE_SIZE)
    return _shared_cache


def compute_varshaphala(chart: NatalChart, year: int, language=Language.ENGLISH, *,
                        ephemeris: Optional[EphemerisPort] = None,
                        text: Optional[TextTemplates] = None,
                        as_of: Optional[datetime] = None,
                        cancel_token=None) -> VarshaphalaResult:
    """
    Compute the annual horoscope of ``chart`` for ``year``.

    Args:
        chart: Natal chart (sidereal longitudes, local birth time + offset)
        year: Gregorian year of the solar return, not before the birth year
        language: ``Language`` or its code ("en", "ne")
        ephemeris: Position source; Swiss Ephemeris from settings by default
        text: Narrative templates; the built-in catalogue by default
        as_of: Instant used to flag the current Mudda period (default: now)
        cancel_token: Optional ``CancellationToken``

    Raises:
        ValidationError, ConvergenceError, CalculationError, ComputationCancelled
    """
    settings = get_settings()
    cache = None
    if ephemeris is None:
        ephemeris = SwissEphemeris(settings.AYANAMSA, settings.EPHEMERIS_PATH)
        if text is None:
            cache = _default_cache(settings)
    orchestrator = VarshaphalaOrchestrator(ephemeris, text=text, settings=settings)
    # only the default ephemeris + catalogue pair may share memoized results
    orchestrator.cache = cache
    return orchestrator.compute(chart, year, language, as_of=as_of, cancel_token=cancel_token)
