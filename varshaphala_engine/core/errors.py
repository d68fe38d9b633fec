"""
errors.py
=========
Exception taxonomy for the annual-chart engine. Every failure is terminal
for the request that raised it; nothing here is retried.
"""

from typing import Any, Dict, Optional


class VarshaphalaError(Exception):
    """
    Base exception for all Varshaphala domain errors.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(VarshaphalaError):
    """
    Raised when the natal chart or the requested year is invalid
    (year before birth, missing Sun/Moon, coordinates out of range).
    The message is already localized to the requested language.
    """


class ConvergenceError(VarshaphalaError):
    """
    Raised when the solar return cannot be bracketed or the refinement
    does not converge within the iteration budget.
    """


class CalculationError(VarshaphalaError):
    """
    Raised when an internal calculation fails: ephemeris errors, a planet
    missing from the annual chart, a missing template key.
    """


class ComputationCancelled(VarshaphalaError):
    """
    Raised when a caller cancels an in-flight computation.
    """
