"""
NFT Attributes — атрибуты метаданных с результатом оценки редкости.

Порядок атрибутов:
    Rarity, Pixels Used, Colors Used, Quality Score, Canvas Size
    [, Creator Message — только если сообщение не пустое]
"""

from typing import Mapping, Optional

from pixelforge.core.domain.mint import NFTAttribute
from pixelforge.rarity.engine import RarityEngine


def prepare_nft_attributes(
    pixel_map: Mapping[str, str],
    canvas_size: int,
    creator_message: Optional[str] = None,
    engine: Optional[RarityEngine] = None,
) -> list[NFTAttribute]:
    """
    Атрибуты NFT, включая выпавший уровень редкости.

    Args:
        pixel_map: Отображение 'col,row' -> цвет
        canvas_size: Размер сетки
        creator_message: Сообщение автора (пробелы по краям обрезаются)
        engine: Движок редкости (default: RarityEngine())

    Returns:
        Список NFTAttribute
    """
    engine = engine or RarityEngine()
    rarity_stats = engine.compute_rarity_stats(pixel_map, canvas_size)
    stats = rarity_stats.stats

    attributes = [
        NFTAttribute(trait_type="Rarity", value=rarity_stats.rarity.value),
        NFTAttribute(trait_type="Pixels Used", value=stats.pixels_used),
        NFTAttribute(trait_type="Colors Used", value=stats.colors_used),
        NFTAttribute(trait_type="Quality Score", value=stats.quality_score),
        NFTAttribute(trait_type="Canvas Size", value=f"{canvas_size}x{canvas_size}"),
    ]

    message = (creator_message or "").strip()
    if message:
        attributes.append(NFTAttribute(trait_type="Creator Message", value=message))

    return attributes
