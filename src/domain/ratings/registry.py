"""Registry of available rating strategies."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Callable, Type

from domain.ratings.config_base import BaseSystemConfig
from domain.ratings.protocol import RatingCalculator
from domain.ratings.tmmr.calculator import TmmrCalculator
from domain.ratings.tmmr.config import load_tmmr_system_configs
from domain.ratings.wilson.calculator import WilsonCalculator
from domain.ratings.wilson.config import load_wilson_system_configs

ROOT_DIR = Path(__file__).resolve().parents[3]

LoadConfigsFn = Callable[[Path], list[BaseSystemConfig]]
CreateCalculatorFn = Callable[[BaseSystemConfig], RatingCalculator]


@dataclass(frozen=True)
class RatingSystemDescriptor:
    """Everything required to build one rating strategy from its configs."""

    algorithm: str
    config_dir: Path
    load_configs: LoadConfigsFn
    create_calculator: CreateCalculatorFn


_REGISTRY: dict[str, RatingSystemDescriptor] = {}


def register(descriptor: RatingSystemDescriptor) -> None:
    """Register one rating-strategy descriptor."""
    key = descriptor.algorithm.lower()
    if key in _REGISTRY:
        raise ValueError(f"Duplicate rating descriptor registration for algorithm={key}")
    _REGISTRY[key] = descriptor


def get_all() -> list[RatingSystemDescriptor]:
    """Return all registered descriptors in deterministic order."""
    return [_REGISTRY[key] for key in sorted(_REGISTRY.keys())]


def get(algorithm: str) -> RatingSystemDescriptor:
    """Get one registered descriptor by algorithm name."""
    try:
        return _REGISTRY[algorithm.lower()]
    except KeyError as exc:
        available = ", ".join(sorted(_REGISTRY.keys()))
        raise KeyError(
            f"No rating descriptor registered for {algorithm}. Available: {available}"
        ) from exc


def _make_creator(
    calculator_class: Type[Any],
    needs_as_of_time: bool = False,
) -> CreateCalculatorFn:
    def creator(config: BaseSystemConfig) -> RatingCalculator:
        kwargs: dict[str, Any] = {"params": getattr(config, "parameters")}
        if needs_as_of_time:
            kwargs["as_of_time"] = datetime.now(UTC).replace(tzinfo=None)
        return calculator_class(**kwargs)

    return creator


# (algorithm, config_subdir, load_configs, calculator_class, needs_as_of_time)
_SYSTEMS: list[tuple[str, str, LoadConfigsFn, Type[Any], bool]] = [
    ("tmmr", "tmmr", load_tmmr_system_configs, TmmrCalculator, True),
    ("wilson", "wilson", load_wilson_system_configs, WilsonCalculator, False),
]


def _register_defaults() -> None:
    if _REGISTRY:
        return
    for algorithm, config_subdir, load_configs, calculator_class, needs_as_of_time in _SYSTEMS:
        register(
            RatingSystemDescriptor(
                algorithm=algorithm,
                config_dir=ROOT_DIR / "configs" / "ratings" / config_subdir,
                load_configs=load_configs,
                create_calculator=_make_creator(calculator_class, needs_as_of_time=needs_as_of_time),
            )
        )


_register_defaults()

__all__ = [
    "RatingSystemDescriptor",
    "get",
    "get_all",
    "register",
]
