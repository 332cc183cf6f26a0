"""
Unit tests for deduplication, the sufficiency gate, and the fallback list.
"""

from unittest.mock import patch

from app.config import settings
from app.services.fallback import FALLBACK_ITEMS, fallback_ingredients
from app.services.ingredient_schemas import (
    ClassifiedIngredient,
    EvidenceStatus,
    FoodCategory,
)
from app.services.ranking import apply_sufficiency_gate, dedupe_and_rank


def _item(name: str, confidence: float, category=FoodCategory.VEGETABLES):
    return ClassifiedIngredient(name=name, category=category, confidence=confidence)


# =============================================================================
# dedupe_and_rank Tests
# =============================================================================


class TestDedupeAndRank:
    def test_sorted_descending(self):
        ranked = dedupe_and_rank([_item("a", 0.6), _item("b", 0.9), _item("c", 0.7)])
        assert [c.name for c in ranked] == ["b", "c", "a"]

    def test_keeps_highest_per_name(self):
        ranked = dedupe_and_rank(
            [_item("tomato", 0.8), _item("basil", 0.9), _item("tomato", 1.0)]
        )

        assert [(c.name, c.confidence) for c in ranked] == [
            ("tomato", 1.0),
            ("basil", 0.9),
        ]

    def test_ties_keep_first_seen(self):
        first = _item("tomato", 0.8, FoodCategory.VEGETABLES)
        second = _item("tomato", 0.8, FoodCategory.FRUITS)

        ranked = dedupe_and_rank([first, second])

        assert ranked == [first]

    def test_empty(self):
        assert dedupe_and_rank([]) == []


# =============================================================================
# apply_sufficiency_gate Tests
# =============================================================================


class TestSufficiencyGate:
    def test_empty_is_no_evidence(self):
        assert apply_sufficiency_gate([]) == ([], EvidenceStatus.NO_EVIDENCE)

    def test_all_below_floor_is_insufficient(self):
        """Matches that all miss the floor are rejected evidence, not absent evidence."""
        ingredients, status = apply_sufficiency_gate([_item("a", 0.59), _item("b", 0.5)])

        assert ingredients == []
        assert status == EvidenceStatus.INSUFFICIENT_EVIDENCE

    def test_single_weak_item_suppressed(self):
        ingredients, status = apply_sufficiency_gate([_item("tomato", 0.7)])

        assert ingredients == []
        assert status == EvidenceStatus.INSUFFICIENT_EVIDENCE

    def test_single_item_at_high_bar_accepted(self):
        ingredients, status = apply_sufficiency_gate([_item("tomato", 0.75)])

        assert [c.name for c in ingredients] == ["tomato"]
        assert status == EvidenceStatus.SUFFICIENT

    def test_two_weak_items_accepted(self):
        ingredients, status = apply_sufficiency_gate([_item("a", 0.7), _item("b", 0.6)])

        assert len(ingredients) == 2
        assert status == EvidenceStatus.SUFFICIENT

    def test_floor_is_inclusive(self):
        ingredients, _ = apply_sufficiency_gate(
            [_item("a", 0.9), _item("b", 0.6), _item("c", 0.5999)]
        )
        assert [c.name for c in ingredients] == ["a", "b"]

    def test_weak_tail_does_not_count_toward_quorum(self):
        """Items dropped by the floor do not make a lone weak item sufficient."""
        ingredients, status = apply_sufficiency_gate([_item("a", 0.7), _item("b", 0.4)])

        assert ingredients == []
        assert status == EvidenceStatus.INSUFFICIENT_EVIDENCE

    def test_capped_at_max_results(self):
        ranked = [_item(f"item{i}", 0.9) for i in range(12)]

        ingredients, status = apply_sufficiency_gate(ranked)

        assert len(ingredients) == settings.max_results == 10
        assert [c.name for c in ingredients] == [f"item{i}" for i in range(10)]
        assert status == EvidenceStatus.SUFFICIENT

    def test_thresholds_from_settings(self):
        with patch.object(settings, "high_confidence", 0.65):
            ingredients, status = apply_sufficiency_gate([_item("tomato", 0.7)])

        assert status == EvidenceStatus.SUFFICIENT
        assert len(ingredients) == 1


# =============================================================================
# Fallback Tests
# =============================================================================


class TestFallback:
    def test_fixed_items(self):
        result = fallback_ingredients()

        assert [(c.name, c.confidence) for c in result] == [
            ("tomato", 0.9),
            ("onion", 0.85),
            ("garlic", 0.8),
            ("cheese", 0.75),
            ("basil", 0.7),
        ]

    def test_entries_come_from_catalog(self):
        by_name = {c.name: c for c in fallback_ingredients()}

        assert by_name["tomato"].category == FoodCategory.VEGETABLES
        assert by_name["tomato"].localized_name == "pomodoro"
        assert by_name["cheese"].category == FoodCategory.DAIRY
        assert by_name["basil"].category == FoodCategory.HERBS

    def test_sorted_and_above_floor(self):
        confidences = [c.confidence for c in fallback_ingredients()]

        assert confidences == sorted(confidences, reverse=True)
        assert min(confidences) >= settings.min_confidence

    def test_fresh_list_each_call(self):
        first = fallback_ingredients()
        first.clear()

        assert len(fallback_ingredients()) == len(FALLBACK_ITEMS) == 5
