"""
solar_return.py  —  Solar Return finder
========================================
Locates the instant in a Gregorian year when the sidereal Sun returns to
its natal longitude.

Algorithm:
1. Estimate from the Sun's position on 1 January and its mean motion
   (360 / 365.256363 deg/day), which absorbs leap-year drift.
2. Bracket the estimate by a few days; the wrapped difference
   f(t) = sun(t) - target, reduced to (-180, 180], must change sign.
   The bracket is doubled a bounded number of times if it does not.
3. Refine with a secant step safeguarded by bisection until
   |f| < tolerance (1e-4 deg by default, under 10 seconds of time).
"""

import logging

from .cancellation import check
from .constants import Planet
from .ephemeris import (
    EphemerisPort, gregorian_to_jd, is_finite, mean_sun_days, normalize,
    signed_difference,
)
from .errors import CalculationError, ConvergenceError

logger = logging.getLogger(__name__)

# Largest |f| accepted at a bracket end; beyond this the wrap at 180 deg
# could masquerade as a sign change.
_MAX_BRACKET_ERROR = 90.0
_MIN_INTERVAL_DAYS = 1e-9


class SolarReturnFinder:
    def __init__(self, ephemeris: EphemerisPort,
                 tolerance_deg: float = 1e-4,
                 max_iterations: int = 100,
                 bracket_days: float = 5.0,
                 max_bracket_expansions: int = 4):
        self.ephemeris = ephemeris
        self.tolerance_deg = tolerance_deg
        self.max_iterations = max_iterations
        self.bracket_days = bracket_days
        self.max_bracket_expansions = max_bracket_expansions

    def _sun(self, jd: float) -> float:
        try:
            lon = self.ephemeris.sidereal_longitude(Planet.SUN, jd)
        except Exception as exc:
            raise CalculationError(f"Sun longitude lookup failed at JD {jd:.6f}: {exc}",
                                   {"jd": jd}) from exc
        if not is_finite(lon):
            raise CalculationError(f"Non-finite Sun longitude at JD {jd:.6f}", {"jd": jd})
        return lon

    def estimate(self, target: float, year: int) -> float:
        jd_jan1 = gregorian_to_jd(year, 1, 1, 0.0)
        return jd_jan1 + mean_sun_days(normalize(target - self._sun(jd_jan1)))

    def find(self, natal_sun_longitude: float, target_year: int,
             cancel_token=None) -> float:
        """
        Return the Julian Day (UT) of the solar return in ``target_year``.

        Raises ConvergenceError when no bracket is found or the iteration
        budget is exhausted.
        """
        target = normalize(natal_sun_longitude)

        def f(jd):
            return signed_difference(self._sun(jd), target)

        estimate = self.estimate(target, target_year)
        half = self.bracket_days
        for expansion in range(self.max_bracket_expansions + 1):
            check(cancel_token, "solar return bracketing")
            lo, hi = estimate - half, estimate + half
            f_lo, f_hi = f(lo), f(hi)
            if (f_lo <= 0.0 <= f_hi and abs(f_lo) < _MAX_BRACKET_ERROR
                    and abs(f_hi) < _MAX_BRACKET_ERROR):
                break
            logger.debug("Solar return bracket +/-%.1f d failed (f_lo=%.4f, f_hi=%.4f)",
                         half, f_lo, f_hi)
            half *= 2.0
        else:
            raise ConvergenceError(
                f"Could not bracket the solar return for {target_year}",
                {"year": target_year, "target": target, "estimate_jd": estimate},
            )

        if f_lo == 0.0:
            return lo
        if f_hi == 0.0:
            return hi

        bisect = False
        for iteration in range(1, self.max_iterations + 1):
            check(cancel_token, "solar return refinement")
            width = hi - lo
            mid = None
            if not bisect and f_hi != f_lo:
                mid = hi - f_hi * width / (f_hi - f_lo)
            if mid is None or not lo < mid < hi:
                mid = 0.5 * (lo + hi)
            f_mid = f(mid)
            if abs(f_mid) < self.tolerance_deg:
                logger.debug("Solar return %d converged in %d iterations (residual %.2e deg)",
                             target_year, iteration, f_mid)
                return mid
            if f_mid < 0.0:
                lo, f_lo = mid, f_mid
            else:
                hi, f_hi = mid, f_mid
            if hi - lo < _MIN_INTERVAL_DAYS:
                break
            # Fall back to bisection whenever a step fails to halve the bracket.
            bisect = (hi - lo) > 0.5 * width

        raise ConvergenceError(
            f"Solar return for {target_year} did not converge",
            {"year": target_year, "target": target, "lo": lo, "hi": hi,
             "residual": min(abs(f_lo), abs(f_hi))},
        )
