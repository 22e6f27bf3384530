"""Mint — офлайн-подготовка данных минта (атрибуты, запрос, метаданные)."""

from .attributes import prepare_nft_attributes
from .image import (
    extract_base64_from_data_url,
    format_bytes,
    get_base64_image_size,
    is_valid_png_base64,
)
from .metadata import build_nft_metadata
from .prepare import prepare_mint_data

__all__ = [
    "prepare_nft_attributes",
    "prepare_mint_data",
    "build_nft_metadata",
    "extract_base64_from_data_url",
    "get_base64_image_size",
    "format_bytes",
    "is_valid_png_base64",
]
