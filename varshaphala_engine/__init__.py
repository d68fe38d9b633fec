"""
Varshaphala Engine
==================
Vedic annual horoscope (Varshaphala / Tajika) calculation engine.

Quick start:
    from varshaphala_engine import get_varshaphala

    report = get_varshaphala(
        year=1990, month=6, day=15,
        hour=10, minute=30, second=0,
        timezone_offset=5.5,
        latitude=28.6139,
        longitude=77.2090,
        target_year=2025,
    )
"""

from .core import (
    CancellationToken, Language, NatalChart, VarshaphalaOrchestrator, VarshaphalaResult,
    compute_varshaphala,
)
from .tools.varshaphala_tool import build_natal_chart, get_varshaphala

__version__ = "1.0.0"
__all__ = [
    "CancellationToken", "Language", "NatalChart", "VarshaphalaOrchestrator",
    "VarshaphalaResult", "compute_varshaphala", "build_natal_chart", "get_varshaphala",
]
