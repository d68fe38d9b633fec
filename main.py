"""
Varshaphala API — FastAPI Backend v1.0
=======================================
Endpoints:
  POST /api/varshaphala      — Annual horoscope (Solar Return / Tajika)
  GET  /api/health           — Health check
"""

import logging
from datetime import date, datetime, time
from typing import Callable, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from varshaphala_engine import __version__
from varshaphala_engine.config import settings
from varshaphala_engine.core.ephemeris import EphemerisPort
from varshaphala_engine.core.errors import (
    CalculationError, ComputationCancelled, ConvergenceError, ValidationError,
)
from varshaphala_engine.tools.varshaphala_tool import get_varshaphala

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Varshaphala API",
    version=__version__,
    description="Vedic annual horoscope engine: Solar Return, Muntha, Year Lord, "
                "Tajika aspects, Sahams, Mudda Dasha, house predictions",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Models ─────────────────────────────────────────────

class VarshaphalaRequest(BaseModel):
    year:            int   = Field(..., ge=1800, le=2100)
    month:           int   = Field(..., ge=1,    le=12)
    day:             int   = Field(..., ge=1,    le=31)
    hour:            int   = Field(12,  ge=0,    le=23)
    minute:          int   = Field(0,   ge=0,    le=59)
    second:          int   = Field(0,   ge=0,    le=59)
    timezone_offset: float = Field(0.0, ge=-12,  le=14)
    latitude:        float = Field(..., ge=-90,  le=90)
    longitude:       float = Field(..., ge=-180, le=180)
    house_system:    str   = Field("whole_sign", pattern="^(whole_sign|equal)$")
    ayanamsa:        str   = Field("lahiri",
                                   pattern="^(lahiri|raman|krishnamurti|kp|fagan_bradley|fagan)$")
    name:            str   = Field("", max_length=120)
    target_year:     Optional[int] = Field(None, ge=1800, le=2200,
                                           description="Defaults to the current year")
    language:        str   = Field("en", pattern="^(en|ne)$")
    include_report:  bool  = False
    as_of:           Optional[date] = Field(None,
                                            description="Date used to flag the current Mudda period")


# ── Dependencies ───────────────────────────────────────────────

def get_ephemeris_factory() -> Optional[Callable[[str], EphemerisPort]]:
    """Ephemeris per ayanamsa. None selects the cached Swiss Ephemeris default."""
    return None


# ── Endpoints ──────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "service": "Varshaphala API",
        "version": __version__,
        "endpoints": [
            "POST /api/varshaphala",
        ],
    }


@app.post("/api/varshaphala")
def varshaphala_endpoint(
    data: VarshaphalaRequest,
    ephemeris_factory: Optional[Callable[[str], EphemerisPort]] = Depends(get_ephemeris_factory),
):
    """
    Generate a complete Varshaphala (annual horoscope).

    Returns:
    • Solar return instant and the annual chart (nine bodies in annual houses)
    • Year Lord (Varshesha) with its five candidates and votes
    • Muntha — progressed ascendant, its lord and house
    • Pancha-Vargiya Bala for the seven planets
    • Tajika aspects and yogas
    • Tri-Pataki Chakra sectors
    • Sahams with active flags
    • Mudda Dasha — two-level annual timing with the current period
    • Twelve house predictions, themes, months, key dates, overall rating
    """
    as_of = datetime.combine(data.as_of, time(12)) if data.as_of else None
    try:
        payload = get_varshaphala(
            year=data.year, month=data.month, day=data.day,
            hour=data.hour, minute=data.minute, second=data.second,
            timezone_offset=data.timezone_offset,
            latitude=data.latitude, longitude=data.longitude,
            house_system=data.house_system,
            ayanamsa=data.ayanamsa,
            name=data.name,
            target_year=data.target_year,
            language=data.language,
            include_report=data.include_report,
            as_of=as_of,
            ephemeris_factory=ephemeris_factory,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except ComputationCancelled as e:
        raise HTTPException(status_code=503, detail=e.message)
    except (ConvergenceError, CalculationError) as e:
        logger.error("Varshaphala failed: %s %s", e.message, e.details)
        raise HTTPException(status_code=500, detail=f"Varshaphala error: {e.message}")
    except Exception as e:
        logger.exception("Unexpected Varshaphala failure")
        raise HTTPException(status_code=500, detail=f"Varshaphala error: {str(e)}")

    return {"success": True, **payload}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
