"""
Contract Validation Module

Валидация JSON документов, передаваемых внешним коллабораторам.
"""

from .validators import (
    ContractValidator,
    NFTMetadataValidator,
    RarityStatsValidator,
    SchemaLoader,
    validate_nft_metadata,
    validate_rarity_stats,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RarityStatsValidator",
    "NFTMetadataValidator",
    # Functions
    "validate_rarity_stats",
    "validate_nft_metadata",
]
