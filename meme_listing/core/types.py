"""Type definitions, enums and chain constants."""

from enum import Enum


# Target network for swaps
BASE_CHAIN_ID = 8453
BASE_PLATFORM_KEY = "base"  # CoinGecko detail_platforms key for chain 8453

MEME_CATEGORY = "meme-token"
VS_CURRENCY = "usd"
MARKET_ORDER = "market_cap_desc"

WALLET_REQUIRED_MESSAGE = "Please connect your wallet to swap"


class DataSource(str, Enum):
    """Data source identifiers."""

    COINGECKO = "coingecko"
    UNKNOWN = "unknown"


class SelectionOutcome(str, Enum):
    """Outcome of a token selection attempt."""

    SELECTED = "selected"                          # Callback invoked with token
    WALLET_NOT_CONNECTED = "wallet_not_connected"  # Blocked before any fetch
    NO_DEPLOYMENT = "no_deployment"                # Token not on Base
    FAILED = "failed"                              # Fetch or mapping raised


class SortColumn(str, Enum):
    """Sortable listing table columns."""

    RANK = "rank"
    NAME = "name"
    PRICE = "price"
    PRICE_CHANGE = "price_change"
    MARKET_CAP = "market_cap"
    VOLUME = "volume"

    @property
    def display_name(self) -> str:
        """Column header used in table output."""
        names = {
            self.RANK: "#",
            self.NAME: "Name",
            self.PRICE: "Price",
            self.PRICE_CHANGE: "24h %",
            self.MARKET_CAP: "Market Cap",
            self.VOLUME: "Volume",
        }
        return names.get(self, self.value)


# Type aliases
USDAmount = int | float
Percentage = int | float
