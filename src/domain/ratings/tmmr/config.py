"""Load TMMR system definitions from TOML files."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from domain.ratings.config_base import BaseSystemConfig, load_system_configs, parse_system_section
from domain.ratings.tmmr.calculator import TmmrParameters


@dataclass(frozen=True)
class TmmrSystemConfig(BaseSystemConfig):
    """Configuration for one TMMR formula revision."""

    parameters: TmmrParameters

    def as_config_json(self) -> dict[str, Any]:
        return asdict(self.parameters)


def load_tmmr_system_configs(config_dir: Path) -> list[TmmrSystemConfig]:
    """Load and validate all TMMR TOML config files in a directory."""
    return load_system_configs(
        config_dir,
        _parse_tmmr_system_config,
        duplicate_name_label="tmmr",
    )


def _parse_tmmr_system_config(raw: dict[str, Any], file_path: Path) -> TmmrSystemConfig:
    name, description = parse_system_section(raw, file_path)
    tmmr_raw = raw.get("tmmr", {})
    defaults = TmmrParameters()

    parameters = TmmrParameters(
        base_rating=float(tmmr_raw.get("base_rating", defaults.base_rating)),
        min_rating=float(tmmr_raw.get("min_rating", defaults.min_rating)),
        max_rating=float(tmmr_raw.get("max_rating", defaults.max_rating)),
        performance_scale=float(tmmr_raw.get("performance_scale", defaults.performance_scale)),
        wilson_z=float(tmmr_raw.get("wilson_z", defaults.wilson_z)),
        rank_center=float(tmmr_raw.get("rank_center", defaults.rank_center)),
        rank_growth_base=float(tmmr_raw.get("rank_growth_base", defaults.rank_growth_base)),
        rank_floor=float(tmmr_raw.get("rank_floor", defaults.rank_floor)),
        rank_ceiling=float(tmmr_raw.get("rank_ceiling", defaults.rank_ceiling)),
        default_average_rank=float(
            tmmr_raw.get("default_average_rank", defaults.default_average_rank)
        ),
        kda_weight=float(tmmr_raw.get("kda_weight", defaults.kda_weight)),
        rank_weight=float(tmmr_raw.get("rank_weight", defaults.rank_weight)),
        half_life_days=float(tmmr_raw.get("half_life_days", defaults.half_life_days)),
        recency_min_multiplier=float(
            tmmr_raw.get("recency_min_multiplier", defaults.recency_min_multiplier)
        ),
        maturity_threshold=int(tmmr_raw.get("maturity_threshold", defaults.maturity_threshold)),
        maturity_max_penalty=float(
            tmmr_raw.get("maturity_max_penalty", defaults.maturity_max_penalty)
        ),
        calibration_games=int(tmmr_raw.get("calibration_games", defaults.calibration_games)),
        min_duration_seconds=int(
            tmmr_raw.get("min_duration_seconds", defaults.min_duration_seconds)
        ),
        max_leaver_status=int(tmmr_raw.get("max_leaver_status", defaults.max_leaver_status)),
        solo_win_weight=float(tmmr_raw.get("solo_win_weight", defaults.solo_win_weight)),
        party_win_weight=float(tmmr_raw.get("party_win_weight", defaults.party_win_weight)),
    )
    _validate_parameters(file_path=file_path, parameters=parameters)

    return TmmrSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        parameters=parameters,
    )


def _validate_parameters(*, file_path: Path, parameters: TmmrParameters) -> None:
    if parameters.min_rating >= parameters.max_rating:
        raise ValueError(f"{file_path}: [tmmr].min_rating must be < max_rating")
    if not parameters.min_rating <= parameters.base_rating <= parameters.max_rating:
        raise ValueError(f"{file_path}: [tmmr].base_rating must be within [min_rating, max_rating]")
    if parameters.performance_scale <= 0.0:
        raise ValueError(f"{file_path}: [tmmr].performance_scale must be > 0")
    if parameters.wilson_z <= 0.0:
        raise ValueError(f"{file_path}: [tmmr].wilson_z must be > 0")
    if parameters.rank_center <= 0.0:
        raise ValueError(f"{file_path}: [tmmr].rank_center must be > 0")
    if parameters.rank_growth_base <= 1.0:
        raise ValueError(f"{file_path}: [tmmr].rank_growth_base must be > 1")
    if parameters.rank_floor >= parameters.rank_ceiling:
        raise ValueError(f"{file_path}: [tmmr].rank_floor must be < rank_ceiling")
    if parameters.kda_weight < 0.0:
        raise ValueError(f"{file_path}: [tmmr].kda_weight must be >= 0")
    if parameters.rank_weight < 0.0:
        raise ValueError(f"{file_path}: [tmmr].rank_weight must be >= 0")
    if parameters.half_life_days < 0.0:
        raise ValueError(f"{file_path}: [tmmr].half_life_days must be >= 0")
    if parameters.recency_min_multiplier < 0.0 or parameters.recency_min_multiplier > 1.0:
        raise ValueError(f"{file_path}: [tmmr].recency_min_multiplier must be between 0 and 1")
    if parameters.maturity_threshold < 0:
        raise ValueError(f"{file_path}: [tmmr].maturity_threshold must be >= 0")
    if parameters.maturity_max_penalty < 0.0:
        raise ValueError(f"{file_path}: [tmmr].maturity_max_penalty must be >= 0")
    if parameters.calibration_games < 0:
        raise ValueError(f"{file_path}: [tmmr].calibration_games must be >= 0")
    if parameters.min_duration_seconds < 0:
        raise ValueError(f"{file_path}: [tmmr].min_duration_seconds must be >= 0")
    if parameters.solo_win_weight <= 0.0:
        raise ValueError(f"{file_path}: [tmmr].solo_win_weight must be > 0")
    if parameters.party_win_weight <= 0.0:
        raise ValueError(f"{file_path}: [tmmr].party_win_weight must be > 0")
