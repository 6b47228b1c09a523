"""Tests for hero role lookup and KDA normalisation."""

from __future__ import annotations

import pytest

from domain.ratings.hero_roles import (
    DEFAULT_ROLE,
    HERO_ROLES,
    ROLE_EXPECTED_KDA,
    HeroRole,
    expected_kda,
    hero_role,
    normalize_kda,
)


def test_known_heroes_map_to_their_roles() -> None:
    assert hero_role(1) == HeroRole.HARD_CARRY
    assert hero_role(112) == HeroRole.HARD_SUPPORT


def test_unknown_hero_falls_back_to_core() -> None:
    assert DEFAULT_ROLE == HeroRole.CORE
    assert hero_role(0) == HeroRole.CORE
    assert hero_role(999_999) == HeroRole.CORE
    assert expected_kda(999_999) == pytest.approx(3.5)


def test_role_baselines_decrease_from_carry_to_hard_support() -> None:
    ordered = [
        HeroRole.HARD_CARRY,
        HeroRole.CORE,
        HeroRole.OFFLANE,
        HeroRole.SOFT_SUPPORT,
        HeroRole.HARD_SUPPORT,
    ]
    baselines = [ROLE_EXPECTED_KDA[role] for role in ordered]
    assert baselines == sorted(baselines, reverse=True)


def test_normalize_kda_is_relative_to_role_baseline() -> None:
    assert normalize_kda(4.0, 1) == pytest.approx(1.0)
    assert normalize_kda(3.0, 112) == pytest.approx(2.0)
    assert normalize_kda(2.0, 112) > normalize_kda(2.0, 1)


def test_role_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        HERO_ROLES[1] = HeroRole.CORE  # type: ignore[index]
