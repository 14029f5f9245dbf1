"""
PawScore - Pet adoptability and shelter staff scoring

This package contains the scoring engine, the compatibility matcher, and the
pet and veterinarian profile models used by shelter adoption workflows.
"""

__version__ = "1.0.0"
__author__ = "Lee Whieldon"

from .engine import ScoringEngine

__all__ = ["ScoringEngine"]
