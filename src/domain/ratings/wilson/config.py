"""Load Wilson system definitions from TOML files."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from domain.ratings.config_base import BaseSystemConfig, load_system_configs, parse_system_section
from domain.ratings.wilson.calculator import WilsonParameters


@dataclass(frozen=True)
class WilsonSystemConfig(BaseSystemConfig):
    """Configuration for one Wilson × lobby-rank system."""

    parameters: WilsonParameters

    def as_config_json(self) -> dict[str, Any]:
        return asdict(self.parameters)


def load_wilson_system_configs(config_dir: Path) -> list[WilsonSystemConfig]:
    """Load and validate all Wilson TOML config files in a directory."""
    return load_system_configs(
        config_dir,
        _parse_wilson_system_config,
        duplicate_name_label="wilson",
    )


def _parse_wilson_system_config(raw: dict[str, Any], file_path: Path) -> WilsonSystemConfig:
    name, description = parse_system_section(raw, file_path)
    wilson_raw = raw.get("wilson", {})
    defaults = WilsonParameters()

    parameters = WilsonParameters(
        base_rating=float(wilson_raw.get("base_rating", defaults.base_rating)),
        min_rating=float(wilson_raw.get("min_rating", defaults.min_rating)),
        max_rating=float(wilson_raw.get("max_rating", defaults.max_rating)),
        skill_scale=float(wilson_raw.get("skill_scale", defaults.skill_scale)),
        wilson_z=float(wilson_raw.get("wilson_z", defaults.wilson_z)),
        difficulty_floor=float(wilson_raw.get("difficulty_floor", defaults.difficulty_floor)),
        difficulty_span=float(wilson_raw.get("difficulty_span", defaults.difficulty_span)),
        max_rank=float(wilson_raw.get("max_rank", defaults.max_rank)),
        default_average_rank=float(
            wilson_raw.get("default_average_rank", defaults.default_average_rank)
        ),
        calibration_games=int(wilson_raw.get("calibration_games", defaults.calibration_games)),
        min_duration_seconds=int(
            wilson_raw.get("min_duration_seconds", defaults.min_duration_seconds)
        ),
        max_leaver_status=int(wilson_raw.get("max_leaver_status", defaults.max_leaver_status)),
    )
    _validate_parameters(file_path=file_path, parameters=parameters)

    return WilsonSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        parameters=parameters,
    )


def _validate_parameters(*, file_path: Path, parameters: WilsonParameters) -> None:
    if parameters.min_rating >= parameters.max_rating:
        raise ValueError(f"{file_path}: [wilson].min_rating must be < max_rating")
    if not parameters.min_rating <= parameters.base_rating <= parameters.max_rating:
        raise ValueError(
            f"{file_path}: [wilson].base_rating must be within [min_rating, max_rating]"
        )
    if parameters.skill_scale <= 0.0:
        raise ValueError(f"{file_path}: [wilson].skill_scale must be > 0")
    if parameters.wilson_z <= 0.0:
        raise ValueError(f"{file_path}: [wilson].wilson_z must be > 0")
    if parameters.difficulty_floor <= 0.0:
        raise ValueError(f"{file_path}: [wilson].difficulty_floor must be > 0")
    if parameters.difficulty_span < 0.0:
        raise ValueError(f"{file_path}: [wilson].difficulty_span must be >= 0")
    if parameters.max_rank <= 0.0:
        raise ValueError(f"{file_path}: [wilson].max_rank must be > 0")
    if parameters.calibration_games < 0:
        raise ValueError(f"{file_path}: [wilson].calibration_games must be >= 0")
    if parameters.min_duration_seconds < 0:
        raise ValueError(f"{file_path}: [wilson].min_duration_seconds must be >= 0")
