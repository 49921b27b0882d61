"""pH and color heuristics for a poured mixture.

These are teaching heuristics, not chemistry: pH moves linearly with the excess
of strong acid over strong base (or the reverse) and is clamped to a display
range, and the liquid color is picked by a short list of ordered rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, Sequence

from beakerlab.constants import (
    ACID_ID,
    BASE_ID,
    COLOR_NEUTRALIZED,
    COLOR_PINK,
    COLOR_PRECIPITATE,
    COLOR_WATER,
    INDICATOR_ID,
    NEUTRAL_PH,
    PH_CEILING,
    PH_FLOOR,
    PH_SLOPE_DIVISOR,
    PRECIPITANT_IDS,
    SALT_ID,
)


class PHModel(Protocol):
    def ph(self, components: Mapping[str, float]) -> float:
        """Estimate pH from cumulative poured amounts."""
        ...


class ColorRule(Protocol):
    color: str

    def matches(self, components: Mapping[str, float]) -> bool:
        ...


@dataclass(frozen=True)
class LinearPHModel:
    """Linear clamp around neutral.

    pH = max(floor, 7 - (acid - base) / divisor) when acid dominates,
    pH = min(ceiling, 7 + (base - acid) / divisor) when base dominates,
    7 otherwise.
    """

    acid_id: str = ACID_ID
    base_id: str = BASE_ID
    divisor: float = PH_SLOPE_DIVISOR
    floor: float = PH_FLOOR
    ceiling: float = PH_CEILING

    def ph(self, components: Mapping[str, float]) -> float:
        acid = components.get(self.acid_id, 0.0)
        base = components.get(self.base_id, 0.0)
        if acid > base:
            return max(self.floor, NEUTRAL_PH - (acid - base) / self.divisor)
        if base > acid:
            return min(self.ceiling, NEUTRAL_PH + (base - acid) / self.divisor)
        return NEUTRAL_PH


@dataclass(frozen=True)
class IndicatorRule:
    """Phenolphthalein turns pink once base outweighs acid."""

    indicator_id: str = INDICATOR_ID
    acid_id: str = ACID_ID
    base_id: str = BASE_ID
    color: str = COLOR_PINK

    def matches(self, components: Mapping[str, float]) -> bool:
        acid = components.get(self.acid_id, 0.0)
        base = components.get(self.base_id, 0.0)
        return bool(components.get(self.indicator_id)) and base > acid


@dataclass(frozen=True)
class PrecipitateRule:
    """Silver nitrate with salt clouds the liquid."""

    precipitant_ids: Sequence[str] = PRECIPITANT_IDS
    salt_id: str = SALT_ID
    color: str = COLOR_PRECIPITATE

    def matches(self, components: Mapping[str, float]) -> bool:
        has_precipitant = any(components.get(name) for name in self.precipitant_ids)
        return has_precipitant and components.get(self.salt_id, 0.0) > 0


@dataclass(frozen=True)
class NeutralizationRule:
    acid_id: str = ACID_ID
    base_id: str = BASE_ID
    color: str = COLOR_NEUTRALIZED

    def matches(self, components: Mapping[str, float]) -> bool:
        return bool(components.get(self.acid_id)) and bool(components.get(self.base_id))


DEFAULT_COLOR_RULES: tuple[ColorRule, ...] = (
    IndicatorRule(),
    PrecipitateRule(),
    NeutralizationRule(),
)


def derive_color(
    components: Mapping[str, float],
    rules: Sequence[ColorRule] = DEFAULT_COLOR_RULES,
    default: str = COLOR_WATER,
) -> str:
    """Evaluate every rule in order; the last matching rule sets the color."""
    color = default
    for rule in rules:
        if rule.matches(components):
            color = rule.color
    return color
