"""
Rarity Config — параметры расчёта редкости

Константы модели редкости и immutable конфигурация RarityConfig.

ФОРМУЛЫ:
    pixel_factor = min(pixels_used / canvas_size², 1)
    color_factor = min(colors_used / MAX_COLORS, 1)
    score = PIXEL_WEIGHT * pixel_factor + COLOR_WEIGHT * color_factor

    raw[t] = max(BASE_PROBABILITIES[t] * (1 + score * BOOST_WEIGHTS[t]), 0)
    p[t] = raw[t] / (Σ raw or 1)
"""

from types import MappingProxyType
from typing import Final, Mapping

from pydantic import BaseModel, Field, model_validator

from pixelforge.core.domain.rarity import TIER_ORDER, RarityTier
from pixelforge.core.math.numerical_safeguards import (
    EPS_PROBABILITY_SUM,
    is_close,
    is_probability_distribution,
)

# =============================================================================
# CANVAS
# =============================================================================

# Размер сетки по умолчанию (32 x 32)
DEFAULT_CANVAS_SIZE: Final[int] = 32

# Размер палитры: знаменатель color_factor (не зависит от фактической палитры)
MAX_COLORS: Final[int] = 16

# =============================================================================
# QUALITY SCORE
# =============================================================================

# Покрытие доминирует над разнообразием цветов (70/30)
PIXEL_WEIGHT: Final[float] = 0.7
COLOR_WEIGHT: Final[float] = 0.3

# Точность отображаемого quality score
QUALITY_SCORE_DECIMALS: Final[int] = 2

# =============================================================================
# PROBABILITIES
# =============================================================================

# Вероятности при score = 0
BASE_PROBABILITIES: Final[Mapping[RarityTier, float]] = MappingProxyType(
    {
        RarityTier.COMMON: 0.60,
        RarityTier.UNCOMMON: 0.25,
        RarityTier.RARE: 0.10,
        RarityTier.EPIC: 0.04,
        RarityTier.LEGENDARY: 0.01,
    }
)

# Линейная чувствительность уровня к score (отрицательная — штраф)
BOOST_WEIGHTS: Final[Mapping[RarityTier, float]] = MappingProxyType(
    {
        RarityTier.COMMON: -0.4,
        RarityTier.UNCOMMON: 0.2,
        RarityTier.RARE: 0.6,
        RarityTier.EPIC: 1.0,
        RarityTier.LEGENDARY: 1.5,
    }
)


# =============================================================================
# CONFIG MODEL
# =============================================================================


class RarityConfig(BaseModel):
    """
    Конфигурация движка редкости.

    Значения по умолчанию совпадают с константами модуля. Проверяется, что
    базовое распределение нормировано, а веса score неотрицательны
    и в сумме дают 1 (тогда score остаётся в [0, 1]).
    """

    default_canvas_size: int = Field(DEFAULT_CANVAS_SIZE, gt=0)
    max_colors: int = Field(MAX_COLORS, gt=0)
    pixel_weight: float = Field(PIXEL_WEIGHT, ge=0, le=1)
    color_weight: float = Field(COLOR_WEIGHT, ge=0, le=1)
    quality_score_decimals: int = Field(QUALITY_SCORE_DECIMALS, ge=0)
    base_probabilities: dict[RarityTier, float] = Field(
        default_factory=lambda: dict(BASE_PROBABILITIES)
    )
    boost_weights: dict[RarityTier, float] = Field(
        default_factory=lambda: dict(BOOST_WEIGHTS)
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_consistency(self) -> "RarityConfig":
        if not is_close(self.pixel_weight + self.color_weight, 1.0):
            raise ValueError(
                f"pixel_weight + color_weight must equal 1, got "
                f"{self.pixel_weight} + {self.color_weight}"
            )

        for name, table in (
            ("base_probabilities", self.base_probabilities),
            ("boost_weights", self.boost_weights),
        ):
            missing = [tier.value for tier in TIER_ORDER if tier not in table]
            if missing:
                raise ValueError(f"{name} missing tiers: {missing}")

        base = [self.base_probabilities[tier] for tier in TIER_ORDER]
        if not is_probability_distribution(base, tol=EPS_PROBABILITY_SUM):
            raise ValueError(f"base_probabilities must be a distribution, got {base}")

        # Уровень с положительным raw при score=1 положителен на всём [0, 1]
        boosted_total = sum(
            max(self.base_probabilities[tier] * (1.0 + self.boost_weights[tier]), 0.0)
            for tier in TIER_ORDER
        )
        if boosted_total <= 0.0:
            raise ValueError(
                f"boost_weights leave no probability mass at score=1 (total={boosted_total})"
            )

        return self


DEFAULT_RARITY_CONFIG: Final[RarityConfig] = RarityConfig()
