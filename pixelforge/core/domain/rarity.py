"""
Rarity — модели редкости NFT

Immutable Pydantic модели результата оценки редкости:
- RarityTier: закрытый набор из пяти уровней
- RarityTable: распределение вероятностей по уровням (сумма = 1)
- UsageStats: статистика использования холста
- RarityStats: полный результат (уровень + статистика + вероятности)

Полная совместимость с JSON Schema (contracts/schema/rarity_stats.json).
"""

from enum import Enum
from typing import Final, Iterator, Mapping

from pydantic import BaseModel, Field, model_validator

from pixelforge.core.math.numerical_safeguards import (
    EPS_PROBABILITY_SUM,
    is_probability_distribution,
)


# =============================================================================
# ENUMS
# =============================================================================


class RarityTier(str, Enum):
    """
    Уровень редкости NFT.

    Значение совпадает с отображаемым именем атрибута.
    """

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    EPIC = "Epic"
    LEGENDARY = "Legendary"


# Порядок накопления вероятностей при розыгрыше (от частого к редкому)
TIER_ORDER: Final[tuple[RarityTier, ...]] = (
    RarityTier.COMMON,
    RarityTier.UNCOMMON,
    RarityTier.RARE,
    RarityTier.EPIC,
    RarityTier.LEGENDARY,
)


# =============================================================================
# MODELS
# =============================================================================


class RarityTable(BaseModel):
    """
    Распределение вероятностей по уровням редкости.

    Фиксированный набор ключей (ровно пять уровней). Поля всегда
    сериализуются под именами уровней ("Common", ..., "Legendary"), так что
    любой model_dump(mode="json") соответствует rarity_stats.json.

    Инварианты:
    - каждое значение в [0, 1]
    - сумма значений = 1 (± EPS_PROBABILITY_SUM)
    """

    common: float = Field(..., ge=0, alias="Common")
    uncommon: float = Field(..., ge=0, alias="Uncommon")
    rare: float = Field(..., ge=0, alias="Rare")
    epic: float = Field(..., ge=0, alias="Epic")
    legendary: float = Field(..., ge=0, alias="Legendary")

    model_config = {"frozen": True, "populate_by_name": True, "serialize_by_alias": True}

    @model_validator(mode="after")
    def _check_normalized(self) -> "RarityTable":
        values = [getattr(self, tier.name.lower()) for tier in TIER_ORDER]
        if not is_probability_distribution(values, tol=EPS_PROBABILITY_SUM):
            raise ValueError(
                f"Rarity probabilities must sum to 1 (tol={EPS_PROBABILITY_SUM}), "
                f"got sum={sum(values):.12f}"
            )
        return self

    @classmethod
    def from_mapping(cls, probabilities: Mapping[RarityTier, float]) -> "RarityTable":
        """Построение таблицы из отображения {RarityTier: probability}."""
        return cls(**{tier.name.lower(): probabilities[tier] for tier in TIER_ORDER})

    def __getitem__(self, tier: RarityTier) -> float:
        return getattr(self, RarityTier(tier).name.lower())

    def items(self) -> Iterator[tuple[RarityTier, float]]:
        """Пары (уровень, вероятность) в порядке TIER_ORDER."""
        for tier in TIER_ORDER:
            yield tier, self[tier]

    def as_dict(self) -> dict[RarityTier, float]:
        return dict(self.items())


class UsageStats(BaseModel):
    """
    Статистика использования холста.

    colors_used не ограничен размером палитры: ограничение применяется
    при расчёте quality score, а не при построении статистики.
    quality_score хранится округлённым для отображения.
    """

    pixels_used: int = Field(..., ge=0, description="Количество занятых клеток")
    colors_used: int = Field(..., ge=0, description="Количество уникальных цветов")
    quality_score: float = Field(
        ..., ge=0, le=1, description="Quality score, округлённый для отображения"
    )

    model_config = {"frozen": True}


class RarityStats(BaseModel):
    """
    Полный результат оценки редкости.

    Содержит:
    - rarity: выпавший уровень
    - stats: статистика использования холста
    - probabilities: распределение, по которому выполнен розыгрыш
    """

    rarity: RarityTier = Field(..., description="Выпавший уровень редкости")
    stats: UsageStats = Field(..., description="Статистика холста")
    probabilities: RarityTable = Field(..., description="Распределение вероятностей")

    model_config = {"frozen": True, "serialize_by_alias": True}

    def to_document(self) -> dict:
        """JSON-совместимый документ для контракта rarity_stats."""
        return self.model_dump(mode="json")
