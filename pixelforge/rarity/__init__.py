"""Rarity — расчёт quality score, вероятностей и розыгрыш уровня редкости."""

from .config import (
    BASE_PROBABILITIES,
    BOOST_WEIGHTS,
    COLOR_WEIGHT,
    DEFAULT_CANVAS_SIZE,
    DEFAULT_RARITY_CONFIG,
    MAX_COLORS,
    PIXEL_WEIGHT,
    QUALITY_SCORE_DECIMALS,
    RarityConfig,
)
from .engine import (
    FALLBACK_TIER,
    RandomSource,
    RarityEngine,
    compute_probabilities,
    compute_quality_score,
    compute_rarity_stats,
    count_unique_colors,
    roll_rarity,
)

__all__ = [
    # Config
    "BASE_PROBABILITIES",
    "BOOST_WEIGHTS",
    "COLOR_WEIGHT",
    "DEFAULT_CANVAS_SIZE",
    "DEFAULT_RARITY_CONFIG",
    "MAX_COLORS",
    "PIXEL_WEIGHT",
    "QUALITY_SCORE_DECIMALS",
    "RarityConfig",
    # Engine
    "FALLBACK_TIER",
    "RandomSource",
    "RarityEngine",
    "compute_probabilities",
    "compute_quality_score",
    "compute_rarity_stats",
    "count_unique_colors",
    "roll_rarity",
]
