"""Recommendation and strength generation from scored issues."""

from readiness.fixes.recommendations import (
    Recommendation,
    Strength,
    generate_recommendations,
    generate_strengths,
)

__all__ = [
    "Recommendation",
    "Strength",
    "generate_recommendations",
    "generate_strengths",
]
