"""Image helpers — data URL изображения с холста."""

import base64
import binascii
import math

from pixelforge.mint.constants import PNG_DATA_URL_PREFIX

_SIZE_UNITS = ("Bytes", "KB", "MB")


def extract_base64_from_data_url(data_url: str) -> str:
    """
    Payload без префикса "data:image/png;base64,".

    Строка без префикса считается чистым base64 и возвращается как есть.
    """
    if data_url.startswith(PNG_DATA_URL_PREFIX):
        return data_url[len(PNG_DATA_URL_PREFIX):]
    return data_url


def get_base64_image_size(base64_string: str) -> int:
    """
    Размер декодированного изображения в байтах.

    size = floor(len * 3 / 4 - padding), padding — количество '='.
    """
    payload = extract_base64_from_data_url(base64_string)
    padding = payload.count("=")
    return math.floor(len(payload) * 3 / 4 - padding)


def format_bytes(num_bytes: int) -> str:
    """
    Человекочитаемый размер: "0 Bytes", "512 Bytes", "1.5 KB", "2 MB".

    Examples:
        >>> format_bytes(1536)
        '1.5 KB'
    """
    if num_bytes <= 0:
        return "0 Bytes"

    k = 1024
    exponent = 0
    while exponent < len(_SIZE_UNITS) - 1 and num_bytes >= k ** (exponent + 1):
        exponent += 1

    value = f"{num_bytes / k ** exponent:.2f}".rstrip("0").rstrip(".")
    return f"{value} {_SIZE_UNITS[exponent]}"


def is_valid_png_base64(data_url: str) -> bool:
    """PNG data URL с корректным base64 payload."""
    if not data_url.startswith(PNG_DATA_URL_PREFIX):
        return False

    try:
        base64.b64decode(extract_base64_from_data_url(data_url), validate=True)
    except (binascii.Error, ValueError):
        return False
    return True
