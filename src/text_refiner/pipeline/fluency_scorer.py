"""Heuristic 0-100 fluency score."""

from __future__ import annotations

import re

BASE_SCORE = 85
CAPITALIZED_BONUS = 3
TERMINAL_PUNCTUATION_BONUS = 3
SHORT_TEXT_PENALTY = 10
LONG_TEXT_BONUS = 4
CLEAN_SPACING_BONUS = 5

SHORT_TEXT_WORDS = 5
LONG_TEXT_WORDS = 20


def score_fluency(original: str, refined: str) -> int:
    """Score refined text from simple structural signals.

    Word counts come from splitting ``original`` on single spaces, so runs
    of spaces count as extra (empty) words.
    """
    if not original.strip():
        return 0

    score = BASE_SCORE

    if re.match(r"[A-Z]", refined):
        score += CAPITALIZED_BONUS

    if re.search(r"[.!?]$", refined.strip()):
        score += TERMINAL_PUNCTUATION_BONUS

    word_count = len(original.split(" "))
    if word_count < SHORT_TEXT_WORDS:
        score -= SHORT_TEXT_PENALTY
    if word_count > LONG_TEXT_WORDS:
        score += LONG_TEXT_BONUS

    if not re.search(r"\s{2,}", refined):
        score += CLEAN_SPACING_BONUS

    return min(100, max(0, score))
