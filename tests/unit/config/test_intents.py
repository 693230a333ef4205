"""Tests for intent profiles and model bindings."""

import pytest

from perplexity_search.config.intents import (
    COMPLEXITY_LADDER,
    INTENT_PROFILES,
    MODEL_BINDINGS,
    Complexity,
    SearchIntent,
    get_intent_profile,
    instruction_for,
    model_for,
)
from perplexity_search.prompts.search import (
    RESEARCH_INSTRUCTION,
    TROUBLESHOOT_INSTRUCTION,
    UPDATE_INSTRUCTION,
)


class TestEnums:
    def test_intent_values(self):
        assert [i.value for i in SearchIntent] == ["research", "troubleshoot", "update"]

    def test_complexity_values(self):
        assert [c.value for c in Complexity] == ["low", "medium", "high"]

    def test_ladder_is_cheapest_first(self):
        assert COMPLEXITY_LADDER == (Complexity.LOW, Complexity.MEDIUM, Complexity.HIGH)


class TestInstructionFor:
    def test_default_is_research(self):
        assert instruction_for() == RESEARCH_INSTRUCTION

    @pytest.mark.parametrize(
        ("intent", "expected"),
        [
            (SearchIntent.RESEARCH, RESEARCH_INSTRUCTION),
            (SearchIntent.TROUBLESHOOT, TROUBLESHOOT_INSTRUCTION),
            (SearchIntent.UPDATE, UPDATE_INSTRUCTION),
        ],
    )
    def test_each_intent(self, intent, expected):
        assert instruction_for(intent) == expected

    def test_accepts_string(self):
        assert instruction_for("troubleshoot") == TROUBLESHOOT_INSTRUCTION

    def test_invalid_string_raises_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            instruction_for("debug")
        assert "Invalid intent" in str(exc_info.value)
        assert "research" in str(exc_info.value)


class TestModelFor:
    def test_default_is_medium(self):
        assert model_for() == "llama-3.1-sonar-large-128k-online"

    def test_tiers(self):
        assert model_for(Complexity.LOW) == "llama-3.1-sonar-small-128k-online"
        assert model_for(Complexity.HIGH) == "llama-3.1-sonar-huge-128k-online"

    def test_invalid_string_raises_value_error(self):
        with pytest.raises(ValueError, match="Invalid complexity 'extreme'"):
            model_for("extreme")


class TestTables:
    def test_every_intent_has_profile(self):
        assert set(INTENT_PROFILES) == set(SearchIntent)

    def test_every_tier_has_model(self):
        assert set(MODEL_BINDINGS) == set(Complexity)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            MODEL_BINDINGS[Complexity.LOW] = "other-model"  # type: ignore[index]

    def test_profile_name_matches_intent(self):
        for intent in SearchIntent:
            assert get_intent_profile(intent).name == intent.value
