"""Wilson × lobby-rank rating strategy."""

from domain.ratings.wilson.calculator import (
    WilsonCalculator,
    WilsonParameters,
    calculate_difficulty_mod,
)
from domain.ratings.wilson.config import WilsonSystemConfig, load_wilson_system_configs

__all__ = [
    "WilsonCalculator",
    "WilsonParameters",
    "WilsonSystemConfig",
    "calculate_difficulty_mod",
    "load_wilson_system_configs",
]
