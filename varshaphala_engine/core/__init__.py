# Varshaphala Engine - Core modules
from .cancellation import CancellationToken
from .chart import AnnualChart, NatalChart, PlanetPosition, cast_annual_chart
from .constants import HouseSystem, Language, Planet, ZodiacSign
from .ephemeris import EphemerisPort, SwissEphemeris
from .errors import (
    CalculationError, ComputationCancelled, ConvergenceError, ValidationError, VarshaphalaError,
)
from .solar_return import SolarReturnFinder
from .templates import CatalogTemplates, TextTemplates, default_templates
from .varshaphala import VarshaphalaOrchestrator, VarshaphalaResult, compute_varshaphala

__all__ = [
    "CancellationToken",
    "AnnualChart", "NatalChart", "PlanetPosition", "cast_annual_chart",
    "HouseSystem", "Language", "Planet", "ZodiacSign",
    "EphemerisPort", "SwissEphemeris",
    "VarshaphalaError", "ValidationError", "ConvergenceError", "CalculationError",
    "ComputationCancelled",
    "SolarReturnFinder",
    "CatalogTemplates", "TextTemplates", "default_templates",
    "VarshaphalaOrchestrator", "VarshaphalaResult", "compute_varshaphala",
]
