"""Refinement pipeline: correction rules, smart punctuation, fluency score."""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Iterable, Sequence

from text_refiner.config import RefinementConfig
from text_refiner.models.refinement import Correction, RefinementResult
from text_refiner.pipeline.fluency_scorer import score_fluency
from text_refiner.pipeline.smart_punctuation import (
    DEFAULT_MIN_PERIOD_LENGTH,
    smart_punctuation,
)
from text_refiner.rules.catalogue import CORRECTION_RULES, CorrectionRule, apply_rule

logger = logging.getLogger(__name__)

DEFAULT_LATENCY_SECONDS = 0.3

_WHITESPACE_RUN = re.compile(r"\s+")


class RefinementPipeline:
    """Apply the correction rule catalogue and score the result.

    The pipeline holds no per-call state, so one instance can serve any
    number of concurrent ``refine`` calls.
    """

    def __init__(
        self,
        rules: Sequence[CorrectionRule] = CORRECTION_RULES,
        *,
        latency: float = DEFAULT_LATENCY_SECONDS,
        min_period_length: int = DEFAULT_MIN_PERIOD_LENGTH,
    ):
        if latency < 0:
            raise ValueError(f"latency must be >= 0, got {latency}")
        self.rules = tuple(rules)
        self.latency = latency
        self.min_period_length = min_period_length

    @classmethod
    def from_config(cls, config: RefinementConfig) -> RefinementPipeline:
        return cls(
            latency=config.latency_seconds,
            min_period_length=config.min_period_length,
        )

    async def refine(self, text: str) -> RefinementResult:
        """Refine ``text`` after the configured processing delay.

        Empty or whitespace-only input resolves immediately with an empty
        result.
        """
        if not text.strip():
            return RefinementResult.empty()

        if self.latency:
            logger.debug("Simulating %.3fs processing latency", self.latency)
            await asyncio.sleep(self.latency)

        return self.refine_sync(text)

    def refine_sync(self, text: str) -> RefinementResult:
        """Refine ``text`` without any delay."""
        if not text.strip():
            return RefinementResult.empty()

        refined = text
        corrections: list[Correction] = []

        for rule in self.rules:
            refined, found = apply_rule(rule, refined)
            if found:
                logger.debug("Rule %s made %d correction(s)", rule.name, len(found))
                corrections.extend(found)

        refined = smart_punctuation(refined, self.min_period_length)
        refined = _WHITESPACE_RUN.sub(" ", refined).strip()

        return RefinementResult(
            refined_text=refined,
            corrections=corrections,
            fluency_score=score_fluency(text, refined),
        )

    async def refine_many(self, texts: Iterable[str]) -> list[RefinementResult]:
        """Refine several texts concurrently, preserving input order."""
        return list(await asyncio.gather(*(self.refine(t) for t in texts)))


async def refine_text(text: str, *, latency: float = DEFAULT_LATENCY_SECONDS) -> RefinementResult:
    """Refine ``text`` with the default rule catalogue."""
    return await RefinementPipeline(latency=latency).refine(text)
