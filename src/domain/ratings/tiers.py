"""Rating → tier/division lookup."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass, field

DIVISIONS_PER_TIER = 5
_ROMAN = ("I", "II", "III", "IV", "V")


@dataclass(frozen=True, order=True)
class TierLabel:
    """One ordered bucket; labels compare by ``index``."""

    index: int
    key: str = field(compare=False)
    category: str = field(compare=False)
    division: int | None = field(compare=False, default=None)
    name: str = field(compare=False, default="")


@dataclass(frozen=True)
class TierBand:
    """A named tier covering ``[lower, upper)``; ``upper=None`` is open-ended."""

    category: str
    lower: float
    upper: float | None = None


@dataclass(frozen=True)
class TierThresholdTable:
    """Strictly increasing lower bounds, each mapped to a label.

    The first label also covers every rating below its bound, so the lookup
    is total over the real line.
    """

    lower_bounds: tuple[float, ...]
    labels: tuple[TierLabel, ...]

    def __post_init__(self) -> None:
        if not self.labels:
            raise ValueError("tier table needs at least one label")
        if len(self.lower_bounds) != len(self.labels):
            raise ValueError(
                f"tier table has {len(self.lower_bounds)} bounds for {len(self.labels)} labels"
            )
        for previous, current in zip(self.lower_bounds, self.lower_bounds[1:]):
            if current <= previous:
                raise ValueError(
                    f"tier thresholds must be strictly increasing ({previous} then {current})"
                )

    @classmethod
    def from_bands(
        cls,
        bands: Sequence[TierBand],
        *,
        divisions: int = DIVISIONS_PER_TIER,
    ) -> TierThresholdTable:
        """Split every closed band into equal-width divisions; the open band stays whole."""
        if divisions <= 0 or divisions > len(_ROMAN):
            raise ValueError(f"divisions must be between 1 and {len(_ROMAN)}")

        lower_bounds: list[float] = []
        labels: list[TierLabel] = []
        for band in bands:
            title = band.category.capitalize()
            if band.upper is None:
                lower_bounds.append(band.lower)
                labels.append(
                    TierLabel(index=len(labels), key=band.category, category=band.category, name=title)
                )
                continue

            if band.upper <= band.lower:
                raise ValueError(f"tier band {band.category} has upper <= lower")
            width = (band.upper - band.lower) / divisions
            for division in range(1, divisions + 1):
                lower_bounds.append(band.lower + width * (division - 1))
                labels.append(
                    TierLabel(
                        index=len(labels),
                        key=f"{band.category}{division}",
                        category=band.category,
                        division=division,
                        name=f"{title} {_ROMAN[division - 1]}",
                    )
                )
        return cls(lower_bounds=tuple(lower_bounds), labels=tuple(labels))

    def classify(self, rating: float) -> TierLabel:
        position = bisect_right(self.lower_bounds, rating) - 1
        return self.labels[max(position, 0)]

    def get(self, key: str) -> TierLabel:
        for label in self.labels:
            if label.key == key:
                return label
        available = ", ".join(label.key for label in self.labels)
        raise KeyError(f"Unknown tier key '{key}'. Available: {available}")


DEFAULT_TIER_BANDS: tuple[TierBand, ...] = (
    TierBand("herald", 0.0, 770.0),
    TierBand("guardian", 770.0, 1540.0),
    TierBand("crusader", 1540.0, 2310.0),
    TierBand("archon", 2310.0, 3080.0),
    TierBand("legend", 3080.0, 3850.0),
    TierBand("ancient", 3850.0, 4620.0),
    TierBand("divine", 4620.0, 5620.0),
    TierBand("immortal", 5620.0),
)

DEFAULT_TIER_TABLE = TierThresholdTable.from_bands(DEFAULT_TIER_BANDS)


def classify_tier(rating: float, table: TierThresholdTable = DEFAULT_TIER_TABLE) -> TierLabel:
    return table.classify(rating)


def get_tier(key: str, table: TierThresholdTable = DEFAULT_TIER_TABLE) -> TierLabel:
    return table.get(key)


__all__ = [
    "DEFAULT_TIER_BANDS",
    "DEFAULT_TIER_TABLE",
    "DIVISIONS_PER_TIER",
    "TierBand",
    "TierLabel",
    "TierThresholdTable",
    "classify_tier",
    "get_tier",
]
