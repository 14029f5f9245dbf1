"""Scoring models for PawScore."""

from .score_calculator import ScoreCalculator
from .compatibility import CompatibilityMatcher

__all__ = ["ScoreCalculator", "CompatibilityMatcher"]
