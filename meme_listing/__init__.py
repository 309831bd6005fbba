"""Meme Token Listing API.

Proxies the CoinGecko meme-token market listing and maps a selected token
to its canonical Base network representation for swapping.
"""

__version__ = "0.1.0"
