"""Whole-text rewrites for weak or informal phrases."""

from __future__ import annotations

import re

DEFAULT_MAX_ALTERNATIVES = 3

# phrase -> synonyms, in suggestion order
PHRASE_ALTERNATIVES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("very good", ("excellent", "outstanding")),
    ("very bad", ("terrible", "poor")),
    ("a lot of", ("many", "numerous")),
    ("i think", ("I believe", "in my opinion")),
)


class AlternativePhraseSuggester:
    """Suggest rephrasings of a text by swapping known weak phrases."""

    def __init__(
        self,
        max_alternatives: int = DEFAULT_MAX_ALTERNATIVES,
        table: tuple[tuple[str, tuple[str, ...]], ...] = PHRASE_ALTERNATIVES,
    ):
        if max_alternatives < 1:
            raise ValueError(f"max_alternatives must be >= 1, got {max_alternatives}")
        self.max_alternatives = max_alternatives
        self._patterns = tuple(
            (phrase, re.compile(re.escape(phrase), re.IGNORECASE), synonyms)
            for phrase, synonyms in table
        )

    def suggest(self, text: str) -> list[str]:
        """Return up to ``max_alternatives`` rewrites of ``text``.

        Each rewrite replaces every occurrence of one matched phrase with
        one synonym; phrases are checked independently in table order.
        """
        alternatives: list[str] = []
        lowered = text.lower()
        for phrase, pattern, synonyms in self._patterns:
            if phrase not in lowered:
                continue
            for synonym in synonyms:
                alternatives.append(pattern.sub(lambda _m, s=synonym: s, text))
        return alternatives[: self.max_alternatives]


_default_suggester = AlternativePhraseSuggester()


def suggest_alternatives(text: str) -> list[str]:
    return _default_suggester.suggest(text)
