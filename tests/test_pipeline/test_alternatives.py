"""Tests for alternative phrase suggestions."""

from __future__ import annotations

import pytest

from text_refiner.pipeline.alternatives import (
    PHRASE_ALTERNATIVES,
    AlternativePhraseSuggester,
    suggest_alternatives,
)


class TestSuggestAlternatives:
    def test_mixed_phrases(self, sample_weak_text):
        result = suggest_alternatives(sample_weak_text)

        assert result == [
            "That was excellent and I think it helps a lot of people",
            "That was outstanding and I think it helps a lot of people",
            "That was very good and I think it helps many people",
        ]
        assert any("excellent" in r or "outstanding" in r for r in result)

    def test_at_most_three(self, sample_weak_text):
        assert len(suggest_alternatives(sample_weak_text)) <= 3

    def test_no_match(self):
        assert suggest_alternatives("The levee held overnight.") == []

    def test_empty(self):
        assert suggest_alternatives("") == []

    def test_very_bad(self):
        assert suggest_alternatives("The drainage is very bad") == [
            "The drainage is terrible",
            "The drainage is poor",
        ]

    def test_case_insensitive(self):
        assert suggest_alternatives("VERY GOOD work") == ["excellent work", "outstanding work"]

    def test_all_occurrences_replaced(self):
        result = suggest_alternatives("a lot of rain and a lot of wind")
        assert result[0] == "many rain and many wind"

    def test_i_think(self):
        assert suggest_alternatives("I think so") == ["I believe so", "in my opinion so"]

    def test_table_order(self):
        result = suggest_alternatives("i think it was very bad")
        assert result == [
            "i think it was terrible",
            "i think it was poor",
            "I believe it was very bad",
        ]


class TestAlternativePhraseSuggester:
    def test_custom_limit(self, sample_weak_text):
        suggester = AlternativePhraseSuggester(max_alternatives=5)
        result = suggester.suggest(sample_weak_text)
        assert len(result) == 5
        assert result[-1] == "That was very good and I believe it helps a lot of people"

    @pytest.mark.parametrize("limit", [0, -1])
    def test_rejects_limit_below_one(self, limit):
        with pytest.raises(ValueError, match="max_alternatives"):
            AlternativePhraseSuggester(max_alternatives=limit)

    def test_default_limit(self, suggester, sample_weak_text):
        assert len(suggester.suggest(sample_weak_text)) == 3

    def test_custom_table(self):
        suggester = AlternativePhraseSuggester(table=(("kind of", ("somewhat",)),))
        assert suggester.suggest("kind of wet") == ["somewhat wet"]

    def test_synonym_not_treated_as_template(self):
        suggester = AlternativePhraseSuggester(table=(("path", (r"C:\new",)),))
        assert suggester.suggest("the path") == [r"the C:\new"]

    def test_default_table(self):
        assert [phrase for phrase, _ in PHRASE_ALTERNATIVES] == [
            "very good",
            "very bad",
            "a lot of",
            "i think",
        ]
