"""
Mint — модели подготовки минта NFT

Immutable Pydantic модели, которые ядро передаёт внешним коллабораторам
(загрузка в хранилище, минт):
- NFTAttribute: пара trait_type/value для метаданных
- MintRequest / PreparedMintData: запрос минта и результат его проверки
- NFTMetadata: Metaplex-совместимый документ метаданных

NFTMetadata совместим с JSON Schema (contracts/schema/nft_metadata.json).
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class MintNetwork(str, Enum):
    """Сеть, в которой выполняется минт."""

    DEVNET = "devnet"
    MAINNET_BETA = "mainnet-beta"


# =============================================================================
# ATTRIBUTES
# =============================================================================


class NFTAttribute(BaseModel):
    """Атрибут NFT в формате trait_type/value."""

    trait_type: str = Field(..., min_length=1, description="Имя атрибута")
    value: Union[str, int, float] = Field(..., description="Значение атрибута")

    model_config = {"frozen": True}


# =============================================================================
# MINT REQUEST
# =============================================================================


class MintRequest(BaseModel):
    """
    Запрос минта, передаваемый backend-коллаборатору.

    Поля не ограничены: ошибки пользовательского ввода собираются
    в PreparedMintData.validation_errors, а не выбрасываются.
    """

    name: str = Field(..., description="Имя NFT (обрезанное)")
    symbol: str = Field(..., description="Символ коллекции")
    creator_message: Optional[str] = Field(None, description="Сообщение автора")
    image_base64: str = Field(..., description="PNG в формате data URL")
    canvas_size: int = Field(..., description="Размер сетки (canvas_size x canvas_size)")
    pixel_data: dict[str, str] = Field(
        default_factory=dict, description="Карта покрытия 'col,row' -> цвет"
    )
    wallet_address: str = Field(..., description="Публичный ключ кошелька")
    network: MintNetwork = Field(MintNetwork.DEVNET, description="Сеть минта")

    model_config = {"frozen": True}


class PreparedMintData(BaseModel):
    """Запрос минта вместе с результатом проверки."""

    request: MintRequest
    is_valid: bool
    validation_errors: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


# =============================================================================
# METADATA DOCUMENT
# =============================================================================


class MetadataFile(BaseModel):
    uri: str = Field(..., min_length=1)
    type: str = Field("image/png")

    model_config = {"frozen": True}


class MetadataCreator(BaseModel):
    address: str = Field(..., min_length=1)
    share: int = Field(100, ge=0, le=100)

    model_config = {"frozen": True}


class MetadataProperties(BaseModel):
    category: str = Field("image")
    files: list[MetadataFile] = Field(default_factory=list)
    creators: list[MetadataCreator] = Field(default_factory=list)

    model_config = {"frozen": True}


class NFTMetadata(BaseModel):
    """
    Metaplex-совместимый документ метаданных NFT.

    Документ загружается внешним коллаборатором в децентрализованное
    хранилище до минта.
    """

    name: str = Field(..., min_length=1)
    symbol: str = Field(..., min_length=1)
    description: str
    image: str = Field(..., min_length=1)
    external_url: str
    seller_fee_basis_points: int = Field(..., ge=0, le=10000)
    attributes: list[NFTAttribute] = Field(default_factory=list)
    properties: MetadataProperties

    model_config = {"frozen": True}
