"""Market-data providers.

This module contains the CoinGecko client used for:
- Meme-token markets listing
- Coin detail (per-chain contract deployments)
"""

from .base import BaseProvider
from .coingecko_markets import CoinGeckoMarketsClient

__all__ = ["BaseProvider", "CoinGeckoMarketsClient"]
