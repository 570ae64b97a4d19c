"""Pydantic models for text refinement results."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

CorrectionCategory = Literal["grammar", "punctuation", "fluency", "spelling"]

CATEGORIES: tuple[str, ...] = ("grammar", "punctuation", "fluency", "spelling")


class Correction(BaseModel):
    """A single substring change observed while applying a rule."""

    original: str  # substring matched
    corrected: str  # substring after replacement
    category: CorrectionCategory
    position: int = Field(ge=0)  # offset in the text before the rule ran

    model_config = {"frozen": True}


class RefinementResult(BaseModel):
    """Output of one refine call."""

    refined_text: str = Field(alias="refinedText")
    corrections: list[Correction] = []
    fluency_score: int = Field(alias="fluencyScore", ge=0, le=100)

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def empty(cls) -> RefinementResult:
        return cls(refined_text="", corrections=[], fluency_score=0)

    def counts_by_category(self) -> dict[str, int]:
        """Number of corrections per category, zero-filled."""
        counts = {category: 0 for category in CATEGORIES}
        for correction in self.corrections:
            counts[correction.category] += 1
        return counts
