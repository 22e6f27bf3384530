"""
PixelForge — rarity scoring core for pixel-art NFTs.

Converts a drawing's pixel coverage and color diversity into a weighted
random rarity tier and prepares the NFT attributes and metadata document
consumed by the upload/mint collaborators.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
