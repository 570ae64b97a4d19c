"""Shared test fixtures."""

from __future__ import annotations

import pytest

from text_refiner.pipeline.alternatives import AlternativePhraseSuggester
from text_refiner.pipeline.refiner import RefinementPipeline


@pytest.fixture
def pipeline() -> RefinementPipeline:
    """Pipeline with the processing delay disabled."""
    return RefinementPipeline(latency=0)


@pytest.fixture
def suggester() -> AlternativePhraseSuggester:
    return AlternativePhraseSuggester()


@pytest.fixture
def sample_informal_text() -> str:
    return "i dont no teh answer"


@pytest.fixture
def sample_alert_text() -> str:
    return (
        "the river level at station 4 rose quickly and  the alarm sounded .  "
        "residents were told to move to higher ground!!  we recieve updates every hour"
    )


@pytest.fixture
def sample_weak_text() -> str:
    return "That was very good and I think it helps a lot of people"
