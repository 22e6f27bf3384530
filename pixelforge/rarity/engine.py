"""
Rarity Engine — взвешенный розыгрыш уровня редкости NFT

Движок переводит статистику холста в уровень редкости:
    карта покрытия → (pixels_used, colors_used) → quality score
    → таблица вероятностей → один взвешенный розыгрыш → RarityTier

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. quality score всегда в [0, 1] (входы ограничиваются, а не отвергаются)
2. Таблица вероятностей: значения >= 0, сумма = 1 (± EPS_PROBABILITY_SUM)
3. roll_rarity потребляет ровно одно значение из источника случайности
4. Движок тотален: при любых входах возвращает значение, не бросает исключений

Источник случайности внедряется через конструктор (любой объект с методом
random() -> float в [0, 1), например random.Random(seed)). Без него
используется общий генератор модуля random.
"""

import logging
import random
from typing import Mapping, Optional, Protocol

from pixelforge.core.domain.rarity import (
    TIER_ORDER,
    RarityStats,
    RarityTable,
    RarityTier,
    UsageStats,
)
from pixelforge.core.math.numerical_safeguards import (
    clamp,
    non_negative_float,
    nonzero_total,
    round_half_away,
    safe_ratio,
)
from pixelforge.rarity.config import DEFAULT_RARITY_CONFIG, RarityConfig

logger = logging.getLogger(__name__)

# Уровень, возвращаемый если накопленная сумма не превысила r из-за округления
FALLBACK_TIER = RarityTier.COMMON


class RandomSource(Protocol):
    """Источник равномерных значений в [0, 1) (random.Random и совместимые)."""

    def random(self) -> float: ...


def count_unique_colors(pixel_map: Mapping[str, str]) -> int:
    """
    Количество уникальных цветов в карте покрытия.

    Args:
        pixel_map: Отображение 'col,row' -> цвет

    Returns:
        Мощность множества значений (0 для пустой карты)
    """
    return len(set(pixel_map.values()))


class RarityEngine:
    """
    Движок редкости.

    Stateless (кроме ссылки на источник случайности): параллельные вызовы
    независимы, если источник случайности потокобезопасен.
    """

    def __init__(
        self,
        config: Optional[RarityConfig] = None,
        rng: Optional[RandomSource] = None,
    ):
        self._config = config or DEFAULT_RARITY_CONFIG
        self._rng = rng

    @property
    def config(self) -> RarityConfig:
        return self._config

    # -------------------------------------------------------------------------
    # QUALITY SCORE
    # -------------------------------------------------------------------------

    def compute_quality_score(
        self,
        pixels_used: float,
        colors_used: float,
        canvas_size: Optional[float] = None,
    ) -> float:
        """
        Непрерывный quality score в [0, 1].

        score = pixel_weight * min(pixels / canvas_size², 1)
              + color_weight * min(colors / max_colors, 1)

        Отрицательные счётчики и NaN трактуются как 0. Слишком большие
        значения (включая +inf и int вне диапазона float) ограничиваются
        сверху: фактор равен 1. Вырожденный холст (canvas_size <= 0) даёт
        pixel_factor = 0.

        Args:
            pixels_used: Количество занятых клеток
            colors_used: Количество уникальных цветов (может превышать палитру)
            canvas_size: Размер сетки (default: config.default_canvas_size)

        Returns:
            Quality score в [0, 1]
        """
        cfg = self._config
        if canvas_size is None:
            canvas_size = cfg.default_canvas_size

        pixels = non_negative_float(pixels_used)
        colors = non_negative_float(colors_used)
        size = non_negative_float(canvas_size)

        pixel_factor = safe_ratio(pixels, size * size, upper=1.0)
        color_factor = safe_ratio(colors, cfg.max_colors, upper=1.0)

        score = cfg.pixel_weight * pixel_factor + cfg.color_weight * color_factor
        return clamp(score, 0.0, 1.0)

    # -------------------------------------------------------------------------
    # PROBABILITIES
    # -------------------------------------------------------------------------

    def probabilities_for_score(self, score: float) -> RarityTable:
        """
        Таблица вероятностей для заданного quality score.

        raw[t] = max(base[t] * (1 + score * weight[t]), 0)
        p[t] = raw[t] / (Σ raw, или 1 если сумма равна 0)
        """
        cfg = self._config
        score = clamp(non_negative_float(score), 0.0, 1.0)

        raw = {}
        for tier in TIER_ORDER:
            value = cfg.base_probabilities[tier] * (1.0 + score * cfg.boost_weights[tier])
            raw[tier] = max(value, 0.0)

        total = nonzero_total(raw.values())
        return RarityTable.from_mapping({tier: raw[tier] / total for tier in TIER_ORDER})

    def compute_probabilities(
        self,
        pixels_used: float,
        colors_used: float,
        canvas_size: Optional[float] = None,
    ) -> RarityTable:
        """
        Нормированное распределение вероятностей по уровням редкости.

        Высокий quality score переносит массу с Common на более редкие уровни.
        """
        score = self.compute_quality_score(pixels_used, colors_used, canvas_size)
        return self.probabilities_for_score(score)

    # -------------------------------------------------------------------------
    # ROLL
    # -------------------------------------------------------------------------

    def _draw(self) -> float:
        if self._rng is None:
            return random.random()
        return self._rng.random()

    def roll_from_table(self, probabilities: RarityTable) -> RarityTier:
        """
        Один взвешенный розыгрыш по готовой таблице.

        Уровни проходятся в порядке TIER_ORDER с накоплением суммы;
        возвращается первый уровень, чья накопленная сумма превышает r.
        Если ни один не подошёл (ошибка округления в хвосте), возвращается
        FALLBACK_TIER.
        """
        r = self._draw()

        cumulative = 0.0
        for tier, probability in probabilities.items():
            cumulative += probability
            if r < cumulative:
                logger.debug("Rolled %s (r=%.6f, cumulative=%.6f)", tier.value, r, cumulative)
                return tier

        logger.warning(
            "Rarity roll fell through (r=%.12f, cumulative=%.12f), using %s",
            r,
            cumulative,
            FALLBACK_TIER.value,
        )
        return FALLBACK_TIER

    def roll_rarity(
        self,
        pixels_used: float,
        colors_used: float,
        canvas_size: Optional[float] = None,
    ) -> RarityTier:
        """Розыгрыш уровня редкости для статистики холста."""
        probabilities = self.compute_probabilities(pixels_used, colors_used, canvas_size)
        return self.roll_from_table(probabilities)

    # -------------------------------------------------------------------------
    # STATS
    # -------------------------------------------------------------------------

    def compute_rarity_stats(
        self,
        pixel_map: Mapping[str, str],
        canvas_size: Optional[int] = None,
    ) -> RarityStats:
        """
        Полная оценка редкости для карты покрытия.

        Score вычисляется один раз; неокруглённое значение используется для
        вероятностей и розыгрыша, округлённая копия попадает в stats.

        Args:
            pixel_map: Отображение 'col,row' -> цвет
            canvas_size: Размер сетки (default: config.default_canvas_size)

        Returns:
            RarityStats (уровень, статистика, вероятности)
        """
        pixels_used = len(pixel_map)
        colors_used = count_unique_colors(pixel_map)

        score = self.compute_quality_score(pixels_used, colors_used, canvas_size)
        probabilities = self.probabilities_for_score(score)
        rarity = self.roll_from_table(probabilities)

        stats = UsageStats(
            pixels_used=pixels_used,
            colors_used=colors_used,
            quality_score=round_half_away(score, self._config.quality_score_decimals),
        )

        logger.debug(
            "Rarity stats: pixels=%d colors=%d score=%.4f rarity=%s",
            pixels_used,
            colors_used,
            score,
            rarity.value,
        )

        return RarityStats(rarity=rarity, stats=stats, probabilities=probabilities)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_ENGINE = RarityEngine()


def compute_quality_score(
    pixels_used: float,
    colors_used: float,
    canvas_size: float = DEFAULT_RARITY_CONFIG.default_canvas_size,
) -> float:
    return _DEFAULT_ENGINE.compute_quality_score(pixels_used, colors_used, canvas_size)


def compute_probabilities(
    pixels_used: float,
    colors_used: float,
    canvas_size: float = DEFAULT_RARITY_CONFIG.default_canvas_size,
) -> RarityTable:
    return _DEFAULT_ENGINE.compute_probabilities(pixels_used, colors_used, canvas_size)


def roll_rarity(
    pixels_used: float,
    colors_used: float,
    canvas_size: float = DEFAULT_RARITY_CONFIG.default_canvas_size,
) -> RarityTier:
    return _DEFAULT_ENGINE.roll_rarity(pixels_used, colors_used, canvas_size)


def compute_rarity_stats(
    pixel_map: Mapping[str, str],
    canvas_size: int = DEFAULT_RARITY_CONFIG.default_canvas_size,
) -> RarityStats:
    return _DEFAULT_ENGINE.compute_rarity_stats(pixel_map, canvas_size)
