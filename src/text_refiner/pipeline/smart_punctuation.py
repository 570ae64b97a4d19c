"""Punctuation insertion applied after the correction rules."""

from __future__ import annotations

import re

DEFAULT_MIN_PERIOD_LENGTH = 20

_TERMINAL_PUNCTUATION = re.compile(r"[.!?]$")
_SENTENCE_BOUNDARY = re.compile(r"([.!?]\s+)([a-z])")
# 5+ ASCII word characters, whitespace, coordinating conjunction, whitespace
_CONJUNCTION = re.compile(r"([A-Za-z0-9_]{5,})(\s+)(and|but|or|so|yet|for|nor)(\s+)")


def smart_punctuation(text: str, min_length: int = DEFAULT_MIN_PERIOD_LENGTH) -> str:
    """Close long sentences, capitalise after sentence ends, add conjunction commas.

    The comma heuristic fires on any 5+ character word followed by a
    conjunction, so it also hits clauses that need no comma.
    """
    result = text

    if len(result) > min_length and not _TERMINAL_PUNCTUATION.search(result.strip()):
        result = result.strip() + "."

    result = _SENTENCE_BOUNDARY.sub(lambda m: m.group(1) + m.group(2).upper(), result)
    result = _CONJUNCTION.sub(r"\1,\2\3\4", result)

    return result
