"""
Mint constants — параметры подготовки минта.

Изменение этих значений меняет правила проверки запросов и содержимое
загружаемых метаданных.
"""

from typing import Final

from pixelforge.core.domain.mint import MintNetwork

# Символ коллекции
NFT_SYMBOL: Final[str] = "FORGE"

# Ограничения пользовательского ввода
NAME_MAX_LENGTH: Final[int] = 32
CREATOR_MESSAGE_MAX_LENGTH: Final[int] = 80
WALLET_ADDRESS_MIN_LENGTH: Final[int] = 32

DEFAULT_NETWORK: Final[MintNetwork] = MintNetwork.DEVNET

# Метаданные
DEFAULT_EXTERNAL_URL: Final[str] = "https://pixelforge.app"
DEFAULT_SELLER_FEE_BASIS_POINTS: Final[int] = 500  # 5%
CREATOR_SHARE: Final[int] = 100
IMAGE_MIME_TYPE: Final[str] = "image/png"

# Формат изображения с холста
IMAGE_DATA_URL_PREFIX: Final[str] = "data:image/"
PNG_DATA_URL_PREFIX: Final[str] = "data:image/png;base64,"
