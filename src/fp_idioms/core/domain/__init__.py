"""
Domain models and value objects.

Contains the immutable report models produced by the demo programs.
"""

from fp_idioms.core.domain.reports import ClosuresReport, EvenSquaresReport

__all__ = [
    "EvenSquaresReport",
    "ClosuresReport",
]
