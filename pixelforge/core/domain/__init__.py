"""
Domain models and value objects.

Contains rarity value types (RarityTier, RarityTable, UsageStats, RarityStats)
and mint preparation models (MintRequest, NFTAttribute, NFTMetadata).
"""

from pixelforge.core.domain.mint import (
    MetadataCreator,
    MetadataFile,
    MetadataProperties,
    MintNetwork,
    MintRequest,
    NFTAttribute,
    NFTMetadata,
    PreparedMintData,
)
from pixelforge.core.domain.rarity import (
    TIER_ORDER,
    RarityStats,
    RarityTable,
    RarityTier,
    UsageStats,
)

__all__ = [
    # Rarity
    "TIER_ORDER",
    "RarityTier",
    "RarityTable",
    "UsageStats",
    "RarityStats",
    # Mint
    "MintNetwork",
    "MintRequest",
    "PreparedMintData",
    "NFTAttribute",
    "NFTMetadata",
    "MetadataFile",
    "MetadataCreator",
    "MetadataProperties",
]
