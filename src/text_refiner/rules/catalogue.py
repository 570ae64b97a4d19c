"""Ordered catalogue of correction rules.

Rules run in sequence and each one sees the output of the previous rule,
so the order of ``CORRECTION_RULES`` is part of the output contract.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from text_refiner.models.refinement import Correction, CorrectionCategory

# \b and \w follow ASCII word semantics, matching the browser regex engine
_WORD = re.ASCII
_WORD_ANY_CASE = re.ASCII | re.IGNORECASE


@dataclass(frozen=True)
class Substitution:
    """Replace every match with a fixed template."""

    name: str
    pattern: re.Pattern
    template: str
    category: CorrectionCategory

    def rewrite(self, match: re.Match) -> str:
        return match.expand(self.template)


@dataclass(frozen=True)
class Transform:
    """Replace every match with the result of a function of the match."""

    name: str
    pattern: re.Pattern
    fn: Callable[[re.Match], str]
    category: CorrectionCategory

    def rewrite(self, match: re.Match) -> str:
        return self.fn(match)


CorrectionRule = Substitution | Transform


def _uppercase_boundary_letter(match: re.Match) -> str:
    return match.group(1) + match.group(2).upper()


SPELLING_FIXES: tuple[tuple[str, str], ...] = (
    ("teh", "the"),
    ("recieve", "receive"),
    ("seperate", "separate"),
    ("occurance", "occurrence"),
    ("definately", "definitely"),
    ("occured", "occurred"),
)

CONTRACTION_FIXES: tuple[tuple[str, str], ...] = (
    ("dont", "don't"),
    ("cant", "can't"),
    ("wont", "won't"),
    ("isnt", "isn't"),
    ("arent", "aren't"),
    ("didnt", "didn't"),
    ("wasnt", "wasn't"),
    ("werent", "weren't"),
    ("havent", "haven't"),
    ("hasnt", "hasn't"),
    ("hadnt", "hadn't"),
    ("wouldnt", "wouldn't"),
    ("couldnt", "couldn't"),
    ("shouldnt", "shouldn't"),
    ("im", "I'm"),
    ("ill", "I'll"),
    ("ive", "I've"),
    ("youre", "you're"),
    ("youll", "you'll"),
    ("youve", "you've"),
    ("theyre", "they're"),
    ("theyll", "they'll"),
    ("theyve", "they've"),
    ("its", "it's"),
    ("thats", "that's"),
    ("whats", "what's"),
    ("wheres", "where's"),
    ("whens", "when's"),
    ("whys", "why's"),
    ("hows", "how's"),
)


def _word_rule(prefix: str, word: str, replacement: str, category: CorrectionCategory) -> Substitution:
    return Substitution(
        name=f"{prefix}.{word}",
        pattern=re.compile(rf"\b({word})\b", _WORD_ANY_CASE),
        template=replacement,
        category=category,
    )


def _build_rules() -> tuple[CorrectionRule, ...]:
    rules: list[CorrectionRule] = [
        Transform(
            name="capitalize.sentence-start",
            pattern=re.compile(r"(^|[.!?]\s+)([a-z])"),
            fn=_uppercase_boundary_letter,
            category="grammar",
        ),
    ]

    rules += [_word_rule("spelling", w, fix, "spelling") for w, fix in SPELLING_FIXES]

    # Lowercase pronoun only; "I" is already correct
    rules.append(
        Substitution(
            name="pronoun.i",
            pattern=re.compile(r"\b(i)\b", _WORD),
            template="I",
            category="grammar",
        )
    )
    rules += [_word_rule("contraction", w, fix, "grammar") for w, fix in CONTRACTION_FIXES]

    rules += [
        Substitution("punctuation.space-before-comma", re.compile(r"\s+,"), ",", "punctuation"),
        Substitution("punctuation.space-before-period", re.compile(r"\s+\."), ".", "punctuation"),
        Substitution("punctuation.space-before-exclamation", re.compile(r"\s+!"), "!", "punctuation"),
        Substitution("punctuation.space-before-question", re.compile(r"\s+\?"), "?", "punctuation"),
        Substitution("punctuation.repeated-comma", re.compile(r",{2,}"), ",", "punctuation"),
        Substitution("punctuation.ellipsis", re.compile(r"\.{3,}"), "...", "punctuation"),
        Substitution("punctuation.repeated-exclamation", re.compile(r"!{2,}"), "!", "punctuation"),
        Substitution("punctuation.repeated-question", re.compile(r"\?{2,}"), "?", "punctuation"),
    ]

    rules += [
        Substitution("fluency.collapse-whitespace", re.compile(r"\s+"), " ", "fluency"),
        Substitution("fluency.trailing-whitespace", re.compile(r"\s+$"), "", "fluency"),
        Substitution("fluency.leading-whitespace", re.compile(r"^\s+"), "", "fluency"),
    ]
    return tuple(rules)


CORRECTION_RULES: tuple[CorrectionRule, ...] = _build_rules()


def apply_rule(rule: CorrectionRule, text: str) -> tuple[str, list[Correction]]:
    """Apply one rule to ``text``.

    Returns the rewritten text and one Correction per match whose
    replacement differs from the matched substring, in match order.
    """
    corrections: list[Correction] = []
    for match in rule.pattern.finditer(text):
        original = match.group(0)
        corrected = rule.rewrite(match)
        if original != corrected:
            corrections.append(
                Correction(
                    original=original,
                    corrected=corrected,
                    category=rule.category,
                    position=match.start(),
                )
            )
    return rule.pattern.sub(rule.rewrite, text), corrections


def get_rule(name: str) -> CorrectionRule:
    """Look up a rule in the catalogue by name."""
    for rule in CORRECTION_RULES:
        if rule.name == name:
            return rule
    raise KeyError(f"Unknown correction rule: {name!r}")
