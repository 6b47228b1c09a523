"""Tests for rating → tier classification."""

from __future__ import annotations

import pytest

from domain.ratings.tiers import (
    DEFAULT_TIER_TABLE,
    TierBand,
    TierLabel,
    TierThresholdTable,
    classify_tier,
    get_tier,
)


def test_default_table_has_five_divisions_per_closed_tier() -> None:
    labels = DEFAULT_TIER_TABLE.labels
    assert len(labels) == 7 * 5 + 1
    assert labels[0].key == "herald1"
    assert labels[-1].key == "immortal"
    assert labels[-1].division is None


def test_boundaries() -> None:
    assert classify_tier(0).key == "herald1"
    assert classify_tier(769.99).key == "herald5"
    assert classify_tier(770).key == "guardian1"
    assert classify_tier(4820).key == "divine2"
    assert classify_tier(5619).key == "divine5"
    assert classify_tier(5620).key == "immortal"


def test_out_of_range_ratings_are_still_classified() -> None:
    assert classify_tier(-250).key == "herald1"
    assert classify_tier(1_000_000).key == "immortal"


def test_classification_is_monotonic() -> None:
    labels = [classify_tier(rating) for rating in range(-500, 11_000, 37)]
    assert all(later >= earlier for earlier, later in zip(labels, labels[1:]))


def test_labels_order_by_index_only() -> None:
    low = TierLabel(index=1, key="b", category="b")
    high = TierLabel(index=2, key="a", category="a")
    assert low < high


def test_get_tier_by_key() -> None:
    label = get_tier("legend3")
    assert label.name == "Legend III"
    assert label.category == "legend"
    assert label.division == 3
    with pytest.raises(KeyError, match="Unknown tier key"):
        get_tier("mythic1")


def test_custom_bands() -> None:
    table = TierThresholdTable.from_bands(
        [TierBand("bronze", 0.0, 100.0), TierBand("gold", 100.0)],
        divisions=2,
    )
    assert [label.key for label in table.labels] == ["bronze1", "bronze2", "gold"]
    assert table.classify(50.0).key == "bronze2"


def test_invalid_tables_raise() -> None:
    with pytest.raises(ValueError, match="strictly increasing"):
        TierThresholdTable(
            lower_bounds=(0.0, 0.0),
            labels=(
                TierLabel(index=0, key="a", category="a"),
                TierLabel(index=1, key="b", category="b"),
            ),
        )
    with pytest.raises(ValueError, match="upper <= lower"):
        TierThresholdTable.from_bands([TierBand("broken", 10.0, 5.0)])
