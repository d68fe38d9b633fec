"""
ephemeris.py  —  Ephemeris port and Swiss Ephemeris adapter
============================================================
The engine never computes planetary positions itself. It consumes any
object satisfying ``EphemerisPort``:

    sidereal_longitude(body, jd_ut) -> degrees [0, 360)
    is_retrograde(body, jd_ut)      -> bool
    ascendant(jd_ut, lat, lon)      -> sidereal degrees [0, 360)

``SwissEphemeris`` is the production adapter (pyswisseph). Calls into the
C library are serialised behind a module lock because the library keeps
global state (sidereal mode, open ephemeris files).

Julian Day helpers follow Meeus "Astronomical Algorithms", Ch. 7.
"""

import logging
import math
import threading
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Protocol, Tuple

import swisseph as swe

from .constants import Planet

logger = logging.getLogger(__name__)

J2000 = 2451545.0
SIDEREAL_YEAR_DAYS = 365.256363
SUN_MEAN_MOTION = 360.0 / SIDEREAL_YEAR_DAYS


# ---- Port --------------------------------------------------------------------

class EphemerisPort(Protocol):
    def sidereal_longitude(self, body: Planet, jd_ut: float) -> float: ...

    def is_retrograde(self, body: Planet, jd_ut: float) -> bool: ...

    def ascendant(self, jd_ut: float, latitude: float, longitude: float) -> float: ...


# ---- Angle helpers -----------------------------------------------------------

def normalize(x: float) -> float:
    """Normalize angle to [0, 360)."""
    x = x % 360.0
    return 0.0 if x >= 360.0 else x


def signed_difference(a: float, b: float) -> float:
    """Shortest signed arc from ``b`` to ``a`` in (-180, 180]."""
    d = (a - b + 180.0) % 360.0 - 180.0
    return 180.0 if d == -180.0 else d


def angular_distance(a: float, b: float) -> float:
    """Unsigned separation in [0, 180]."""
    return abs(signed_difference(a, b))


# ---- Julian Day --------------------------------------------------------------

def gregorian_to_jd(year: int, month: int, day: int, hour: float = 0.0) -> float:
    """Meeus Ch. 7 (Gregorian calendar)."""
    if month <= 2:
        year -= 1
        month += 12
    a = int(year / 100)
    b = 2 - a + int(a / 4)
    return (int(365.25 * (year + 4716)) + int(30.6001 * (month + 1))
            + day + b - 1524.5 + hour / 24.0)


_JD_EPOCH = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)


def datetime_to_jd(dt: datetime) -> float:
    """Julian Day (UT) for a datetime; naive values are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return J2000 + (dt - _JD_EPOCH).total_seconds() / 86400.0


def jd_to_datetime(jd: float) -> datetime:
    """Aware UTC datetime for a Julian Day, rounded to the microsecond."""
    return _JD_EPOCH + timedelta(days=jd - J2000)


def local_to_jd(local_dt: datetime, timezone_offset: float) -> float:
    """Julian Day for a naive local clock time at a fixed UTC offset (hours)."""
    return datetime_to_jd(local_dt.replace(tzinfo=None) - timedelta(hours=timezone_offset))


def jd_to_local(jd: float, timezone_offset: float) -> datetime:
    """Naive local clock time for a Julian Day at a fixed UTC offset (hours)."""
    return (jd_to_datetime(jd) + timedelta(hours=timezone_offset)).replace(tzinfo=None)


def longitude_speed(ephemeris: EphemerisPort, body: Planet, jd: float,
                    step: float = 0.01) -> float:
    """Central-difference speed in degrees/day from two longitude samples."""
    ahead = ephemeris.sidereal_longitude(body, jd + step)
    behind = ephemeris.sidereal_longitude(body, jd - step)
    return signed_difference(ahead, behind) / (2.0 * step)


# ---- Swiss Ephemeris adapter -------------------------------------------------

_swe_lock = threading.Lock()

SWE_PLANET_IDS: Dict[Planet, int] = {
    Planet.SUN: swe.SUN,
    Planet.MOON: swe.MOON,
    Planet.MARS: swe.MARS,
    Planet.MERCURY: swe.MERCURY,
    Planet.JUPITER: swe.JUPITER,
    Planet.VENUS: swe.VENUS,
    Planet.SATURN: swe.SATURN,
    Planet.RAHU: swe.MEAN_NODE,
}

AYANAMSA_MODES: Dict[str, int] = {
    "lahiri": swe.SIDM_LAHIRI,
    "raman": swe.SIDM_RAMAN,
    "krishnamurti": swe.SIDM_KRISHNAMURTI,
    "kp": swe.SIDM_KRISHNAMURTI,
    "fagan_bradley": swe.SIDM_FAGAN_BRADLEY,
    "fagan": swe.SIDM_FAGAN_BRADLEY,
}

FLAGS = swe.FLG_SWIEPH | swe.FLG_SPEED | swe.FLG_SIDEREAL


class SwissEphemeris:
    """
    ``EphemerisPort`` backed by pyswisseph.

    Ketu is derived as Rahu + 180 (mean node). Without an ephemeris path the
    library falls back to its built-in Moshier model, which is accurate to a
    few arc-seconds for the Sun and is sufficient for solar-return timing.
    """

    def __init__(self, ayanamsa: str = "lahiri", ephemeris_path: Optional[str] = None):
        key = ayanamsa.lower()
        if key not in AYANAMSA_MODES:
            raise ValueError(f"Unsupported ayanamsa: {ayanamsa}")
        self.ayanamsa = key
        self._sid_mode = AYANAMSA_MODES[key]
        if ephemeris_path:
            with _swe_lock:
                swe.set_ephe_path(ephemeris_path)
            logger.info("Swiss Ephemeris path set to %s", ephemeris_path)

    def _calc(self, body: Planet, jd_ut: float) -> Tuple[float, float]:
        node = body is Planet.KETU
        swe_id = SWE_PLANET_IDS[Planet.RAHU if node else body]
        with _swe_lock:
            swe.set_sid_mode(self._sid_mode, 0, 0)
            xx, _ = swe.calc_ut(jd_ut, swe_id, FLAGS)
        lon, speed = xx[0], xx[3]
        if node:
            lon += 180.0
        return normalize(lon), speed

    def sidereal_longitude(self, body: Planet, jd_ut: float) -> float:
        return self._calc(body, jd_ut)[0]

    def is_retrograde(self, body: Planet, jd_ut: float) -> bool:
        return self._calc(body, jd_ut)[1] < 0

    def ascendant(self, jd_ut: float, latitude: float, longitude: float) -> float:
        with _swe_lock:
            swe.set_sid_mode(self._sid_mode, 0, 0)
            _, ascmc = swe.houses_ex(jd_ut, latitude, longitude, b"W", swe.FLG_SIDEREAL)
        return normalize(ascmc[0])


def mean_sun_days(arc: float) -> float:
    """Days the mean Sun needs to cover ``arc`` degrees."""
    return arc / SUN_MEAN_MOTION


def is_finite(*values: float) -> bool:
    return all(isinstance(v, (int, float)) and math.isfinite(v) for v in values)
