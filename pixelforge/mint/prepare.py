"""
Mint Preparation — проверка и сборка запроса минта.

Ошибки пользовательского ввода не выбрасываются, а собираются в
PreparedMintData.validation_errors. Порядок проверок:
1. Имя: обязательно, не длиннее NAME_MAX_LENGTH
2. Сообщение автора: не длиннее CREATOR_MESSAGE_MAX_LENGTH
3. Изображение: data URL с префиксом "data:image/"
4. Адрес кошелька: не короче WALLET_ADDRESS_MIN_LENGTH
5. Карта покрытия: не пустая
6. Сеть: devnet или mainnet-beta
"""

import logging
from typing import Mapping, Optional, Union

from pixelforge.core.domain.mint import MintNetwork, MintRequest, PreparedMintData
from pixelforge.mint.constants import (
    CREATOR_MESSAGE_MAX_LENGTH,
    DEFAULT_NETWORK,
    IMAGE_DATA_URL_PREFIX,
    NAME_MAX_LENGTH,
    NFT_SYMBOL,
    WALLET_ADDRESS_MIN_LENGTH,
)

logger = logging.getLogger(__name__)


def _resolve_network(network: Union[str, MintNetwork]) -> Optional[MintNetwork]:
    try:
        return MintNetwork(network)
    except ValueError:
        return None


def prepare_mint_data(
    name: str,
    image_data: str,
    pixel_map: Mapping[str, str],
    canvas_size: int,
    wallet_address: str,
    creator_message: Optional[str] = None,
    network: Union[str, MintNetwork] = DEFAULT_NETWORK,
) -> PreparedMintData:
    """
    Проверка и подготовка данных минта для backend-коллаборатора.

    Args:
        name: Имя NFT
        image_data: PNG с холста в формате data URL
        pixel_map: Отображение 'col,row' -> цвет
        canvas_size: Размер сетки
        wallet_address: Публичный ключ кошелька
        creator_message: Сообщение автора (optional)
        network: Сеть минта

    Returns:
        PreparedMintData с запросом и списком ошибок
    """
    validation_errors: list[str] = []
    name = name or ""

    if not name.strip():
        validation_errors.append("NFT name is required")
    elif len(name) > NAME_MAX_LENGTH:
        validation_errors.append(f"NFT name must be {NAME_MAX_LENGTH} characters or less")

    if creator_message and len(creator_message) > CREATOR_MESSAGE_MAX_LENGTH:
        validation_errors.append(
            f"Creator message must be {CREATOR_MESSAGE_MAX_LENGTH} characters or less"
        )

    if not image_data or not image_data.startswith(IMAGE_DATA_URL_PREFIX):
        validation_errors.append("Invalid image data format")

    if not wallet_address or len(wallet_address) < WALLET_ADDRESS_MIN_LENGTH:
        validation_errors.append("Invalid wallet address")

    if not pixel_map:
        validation_errors.append("Canvas is empty - please create some pixel art first")

    resolved_network = _resolve_network(network)
    if resolved_network is None:
        validation_errors.append(f"Unsupported network: {network}")
        resolved_network = DEFAULT_NETWORK

    request = MintRequest(
        name=name.strip(),
        symbol=NFT_SYMBOL,
        creator_message=(creator_message or "").strip() or None,
        image_base64=image_data or "",
        canvas_size=canvas_size,
        pixel_data=dict(pixel_map or {}),
        wallet_address=wallet_address or "",
        network=resolved_network,
    )

    if validation_errors:
        logger.info("Mint request rejected: %s", "; ".join(validation_errors))

    return PreparedMintData(
        request=request,
        is_valid=not validation_errors,
        validation_errors=validation_errors,
    )
