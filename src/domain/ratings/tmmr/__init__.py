"""TMMR composite rating strategy."""

from domain.ratings.tmmr.calculator import TmmrCalculator, TmmrParameters
from domain.ratings.tmmr.config import TmmrSystemConfig, load_tmmr_system_configs

__all__ = [
    "TmmrCalculator",
    "TmmrParameters",
    "TmmrSystemConfig",
    "load_tmmr_system_configs",
]
