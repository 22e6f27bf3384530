"""
NFT Metadata — сборка Metaplex-совместимого документа метаданных.

Документ проверяется по контракту nft_metadata перед возвратом; загрузка
в хранилище выполняется внешним коллаборатором.
"""

import logging
from typing import Any, Dict, Iterable, Optional, Union

from pixelforge.core.contracts import validate_nft_metadata
from pixelforge.core.domain.mint import (
    MetadataCreator,
    MetadataFile,
    MetadataProperties,
    NFTAttribute,
    NFTMetadata,
)
from pixelforge.mint.constants import (
    CREATOR_SHARE,
    DEFAULT_EXTERNAL_URL,
    DEFAULT_SELLER_FEE_BASIS_POINTS,
    IMAGE_MIME_TYPE,
    NFT_SYMBOL,
)

logger = logging.getLogger(__name__)


def build_nft_metadata(
    name: str,
    image_url: str,
    symbol: Optional[str] = None,
    description: Optional[str] = None,
    attributes: Optional[Iterable[Union[NFTAttribute, Dict[str, Any]]]] = None,
    external_url: Optional[str] = None,
    seller_fee_basis_points: Optional[int] = None,
    creator_address: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Документ метаданных NFT.

    Значения по умолчанию:
    - symbol: NFT_SYMBOL
    - description: "<name> - Pixel art created on PixelForge"
    - external_url: DEFAULT_EXTERNAL_URL
    - seller_fee_basis_points: DEFAULT_SELLER_FEE_BASIS_POINTS
    - creators: [] если creator_address не задан

    Raises:
        ValueError: Если не заданы name или image_url
        jsonschema.ValidationError: Если документ нарушает контракт nft_metadata
    """
    if not name or not image_url:
        raise ValueError("Missing required fields: name and image_url")

    creators = []
    if creator_address:
        creators.append(MetadataCreator(address=creator_address, share=CREATOR_SHARE))

    metadata = NFTMetadata(
        name=name,
        symbol=symbol or NFT_SYMBOL,
        description=description or f"{name} - Pixel art created on PixelForge",
        image=image_url,
        external_url=external_url or DEFAULT_EXTERNAL_URL,
        seller_fee_basis_points=(
            DEFAULT_SELLER_FEE_BASIS_POINTS
            if seller_fee_basis_points is None
            else seller_fee_basis_points
        ),
        attributes=[
            a if isinstance(a, NFTAttribute) else NFTAttribute(**a)
            for a in (attributes or [])
        ],
        properties=MetadataProperties(
            category="image",
            files=[MetadataFile(uri=image_url, type=IMAGE_MIME_TYPE)],
            creators=creators,
        ),
    )

    document = metadata.model_dump(mode="json")
    validate_nft_metadata(document)

    logger.debug(
        "Built metadata for %r with %d attributes", name, len(metadata.attributes)
    )
    return document
