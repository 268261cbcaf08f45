"""Replacement similarity scoring between MPNs."""

from .base import SimilarityCalculator, clamp
from .default import default_similarity
from .engine import CALCULATORS, find_calculator, similarity

__all__ = [
    "CALCULATORS",
    "SimilarityCalculator",
    "clamp",
    "default_similarity",
    "find_calculator",
    "similarity",
]
