"""
Core math modules для PixelForge

Математические примитивы с гарантией численной стабильности.
"""

from pixelforge.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PROBABILITY_SUM,
    # Safe division
    nonzero_total,
    safe_ratio,
    # NaN/Inf sanitization
    is_valid_float,
    non_negative_float,
    sanitize_float,
    to_float,
    # Comparisons
    is_close,
    is_probability_distribution,
    # Utilities
    clamp,
    round_half_away,
)

__all__ = [
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PROBABILITY_SUM",
    "nonzero_total",
    "safe_ratio",
    "is_valid_float",
    "non_negative_float",
    "sanitize_float",
    "to_float",
    "is_close",
    "is_probability_distribution",
    "clamp",
    "round_half_away",
]
