"""Tests for refinement Pydantic models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from text_refiner.models import Correction, RefinementResult


class TestCorrection:
    def test_create(self):
        c = Correction(original="teh", corrected="the", category="spelling", position=4)
        assert c.original == "teh"
        assert c.category == "spelling"
        assert c.position == 4

    def test_rejects_unknown_category(self):
        with pytest.raises(ValidationError):
            Correction(original="a", corrected="b", category="style", position=0)

    def test_rejects_negative_position(self):
        with pytest.raises(ValidationError):
            Correction(original="a", corrected="b", category="grammar", position=-1)

    def test_frozen(self):
        c = Correction(original="a", corrected="b", category="grammar", position=0)
        with pytest.raises(ValidationError):
            c.corrected = "c"


class TestRefinementResult:
    def test_empty(self):
        result = RefinementResult.empty()
        assert result.refined_text == ""
        assert result.corrections == []
        assert result.fluency_score == 0

    def test_populate_by_alias(self):
        result = RefinementResult(refinedText="Done.", corrections=[], fluencyScore=90)
        assert result.refined_text == "Done."
        assert result.fluency_score == 90

    def test_dump_by_alias(self):
        result = RefinementResult(
            refined_text="The end.",
            corrections=[
                Correction(original="teh", corrected="the", category="spelling", position=0),
            ],
            fluency_score=80,
        )
        data = json.loads(result.model_dump_json(by_alias=True))
        assert data["refinedText"] == "The end."
        assert data["fluencyScore"] == 80
        assert data["corrections"][0] == {
            "original": "teh",
            "corrected": "the",
            "category": "spelling",
            "position": 0,
        }

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_range(self, score):
        with pytest.raises(ValidationError):
            RefinementResult(refined_text="x", fluency_score=score)

    def test_counts_by_category(self):
        result = RefinementResult(
            refined_text="x",
            corrections=[
                Correction(original="a", corrected="A", category="grammar", position=0),
                Correction(original="b", corrected="B", category="grammar", position=2),
                Correction(original="  ", corrected=" ", category="fluency", position=1),
            ],
            fluency_score=85,
        )
        assert result.counts_by_category() == {
            "grammar": 2,
            "punctuation": 0,
            "fluency": 1,
            "spelling": 0,
        }
