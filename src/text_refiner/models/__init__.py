"""Data models for the text refinement pipeline."""

from text_refiner.models.refinement import (
    CATEGORIES,
    Correction,
    CorrectionCategory,
    RefinementResult,
)

__all__ = [
    "CATEGORIES",
    "Correction",
    "CorrectionCategory",
    "RefinementResult",
]
