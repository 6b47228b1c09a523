"""Tests for TOML-based TMMR system config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.ratings.tmmr import TmmrParameters, load_tmmr_system_configs


def test_load_tmmr_system_configs_from_directory(tmp_path: Path) -> None:
    config_path = tmp_path / "default.toml"
    config_path.write_text(
        """
[system]
name = "tmmr_a"
description = "A test system"

[tmmr]
base_rating = 3000.0
min_rating = 600.0
max_rating = 8000.0
performance_scale = 3000.0
wilson_z = 1.65
kda_weight = 100.0
half_life_days = 90.0
recency_min_multiplier = 0.5
maturity_threshold = 150
calibration_games = 20
solo_win_weight = 1.3
party_win_weight = 0.85
""".strip()
    )

    configs = load_tmmr_system_configs(tmp_path)
    assert len(configs) == 1

    system = configs[0]
    assert system.name == "tmmr_a"
    assert system.description == "A test system"
    assert system.parameters.base_rating == pytest.approx(3000.0)
    assert system.parameters.min_rating == pytest.approx(600.0)
    assert system.parameters.max_rating == pytest.approx(8000.0)
    assert system.parameters.performance_scale == pytest.approx(3000.0)
    assert system.parameters.wilson_z == pytest.approx(1.65)
    assert system.parameters.kda_weight == pytest.approx(100.0)
    assert system.parameters.half_life_days == pytest.approx(90.0)
    assert system.parameters.recency_min_multiplier == pytest.approx(0.5)
    assert system.parameters.maturity_threshold == 150
    assert system.parameters.calibration_games == 20
    assert system.parameters.solo_win_weight == pytest.approx(1.3)
    assert system.parameters.party_win_weight == pytest.approx(0.85)
    # untouched keys keep their defaults
    assert system.parameters.rank_growth_base == pytest.approx(1.02)
    assert system.parameters.maturity_max_penalty == pytest.approx(300.0)
    assert system.as_config_json()["base_rating"] == pytest.approx(3000.0)


def test_system_without_algorithm_table_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "bare.toml").write_text('[system]\nname = "bare"\n')
    configs = load_tmmr_system_configs(tmp_path)
    assert configs[0].parameters == TmmrParameters()
    assert configs[0].description is None


def test_duplicate_names_raise_error(tmp_path: Path) -> None:
    template = '[system]\nname = "dup"\n\n[tmmr]\nbase_rating = 3500.0\n'
    (tmp_path / "a.toml").write_text(template)
    (tmp_path / "b.toml").write_text(template)

    with pytest.raises(ValueError, match="Duplicate tmmr system names"):
        load_tmmr_system_configs(tmp_path)


def test_missing_name_raises_error(tmp_path: Path) -> None:
    (tmp_path / "a.toml").write_text("[tmmr]\nbase_rating = 3500.0\n")
    with pytest.raises(ValueError, match=r"\[system\]\.name is required"):
        load_tmmr_system_configs(tmp_path)


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("min_rating = 9000.0\nmax_rating = 500.0", "min_rating must be < max_rating"),
        ("base_rating = 100.0", "base_rating must be within"),
        ("wilson_z = 0.0", "wilson_z must be > 0"),
        ("rank_growth_base = 1.0", "rank_growth_base must be > 1"),
        ("rank_floor = 90.0", "rank_floor must be < rank_ceiling"),
        ("recency_min_multiplier = 1.5", "recency_min_multiplier must be between 0 and 1"),
        ("maturity_threshold = -1", "maturity_threshold must be >= 0"),
        ("party_win_weight = 0.0", "party_win_weight must be > 0"),
    ],
)
def test_invalid_parameters_raise_error(tmp_path: Path, body: str, message: str) -> None:
    (tmp_path / "bad.toml").write_text(f'[system]\nname = "bad"\n\n[tmmr]\n{body}\n')
    with pytest.raises(ValueError, match=message):
        load_tmmr_system_configs(tmp_path)


def test_missing_or_empty_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_tmmr_system_configs(tmp_path / "missing")
    with pytest.raises(ValueError, match="No .toml config files"):
        load_tmmr_system_configs(tmp_path)
