"""Tests for unit dice and the seeded roller."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ti4rules.domain.dice import SeededDiceRoller, UnitDie
from ti4rules.domain.enums import RollType
from ti4rules.domain.unit_attrs import ExtraHitsOn, RollAttrs, UnitAttrs


def _die(hit: int = 7, extra: ExtraHitsOn | None = None) -> UnitDie:
    unit_attrs = UnitAttrs(unit="cruiser", space_combat=RollAttrs(hit=hit, extra_hits_on=extra))
    return UnitDie(unit_attrs, RollType.SPACE_COMBAT)


def test_unsettled_die():
    die = _die()
    assert die.value is None
    assert not die.is_hit()
    assert die.count_hits() == 0
    assert die.value_str() == "?"


def test_hit_and_miss():
    die = _die(hit=7)
    die.value = 7
    assert die.is_hit()
    assert die.value_str() == "7#"
    die.value = 6
    assert not die.is_hit()
    assert die.value_str() == "6"


def test_crit_scores_extra_hits():
    die = _die(hit=6, extra=ExtraHitsOn(value=9, count=2))
    die.value = 9
    assert die.is_crit()
    assert die.count_hits() == 3
    assert die.value_str() == "9###"
    die.value = 8
    assert not die.is_crit()
    assert die.count_hits() == 1


def test_missing_roll_type():
    die = UnitDie(UnitAttrs(unit="space_dock"), RollType.SPACE_COMBAT)
    die.value = 10
    with pytest.raises(ValueError, match="no space_combat roll"):
        die.is_hit()


@given(
    value=st.integers(min_value=1, max_value=10),
    hit=st.integers(min_value=1, max_value=11),
    crit=st.one_of(st.none(), st.integers(min_value=1, max_value=10)),
    crit_count=st.integers(min_value=1, max_value=3),
)
def test_count_hits_matches_thresholds(value, hit, crit, crit_count):
    extra = ExtraHitsOn(value=crit, count=crit_count) if crit is not None else None
    die = _die(hit=hit, extra=extra)
    die.value = value
    expected = 0
    if value >= hit:
        expected = 1
        if crit is not None and value >= crit:
            expected += crit_count
    assert die.count_hits() == expected


def test_seeded_roller_completes_once_and_is_deterministic():
    first = [_die() for _ in range(5)]
    second = [_die() for _ in range(5)]
    calls: list[int] = []

    SeededDiceRoller("seed").roll(first, lambda dice: calls.append(len(dice)))
    SeededDiceRoller("seed").roll(second, lambda dice: calls.append(len(dice)))

    assert calls == [5, 5]
    assert [d.value for d in first] == [d.value for d in second]
    assert all(1 <= d.value <= 10 for d in first)


def test_seeded_roller_batches_differ():
    roller = SeededDiceRoller("seed")
    first = [_die() for _ in range(20)]
    second = [_die() for _ in range(20)]
    roller.roll(first, lambda _dice: None)
    roller.roll(second, lambda _dice: None)
    assert [d.value for d in first] != [d.value for d in second]
