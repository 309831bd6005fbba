"""Token listing service - the proxy operations behind every surface.

Coordinates the market-data client and the selection mapper:
1. Listing proxy (read-only, degrades to an empty page)
2. Detail proxy (errors propagate)
3. Selection (explicit outcome, never raises)
"""

import logging
from typing import Optional

from .core.config import APIConfig
from .core.models import (
    ListingOptions,
    SelectionResult,
    TokenDetail,
    TokenListEntry,
)
from .providers.coingecko_markets import CoinGeckoMarketsClient
from .selection.mapper import TokenCallback, TokenSelector

logger = logging.getLogger(__name__)


class TokenListingService:
    """Proxy operations over the CoinGecko market-data client."""

    def __init__(self, client: CoinGeckoMarketsClient):
        self.client = client
        self.selector = TokenSelector(fetch_detail=self.get_token_by_id)

    @classmethod
    def from_config(cls, config: APIConfig) -> "TokenListingService":
        """Build the service with a client configured from `config`."""
        return cls(CoinGeckoMarketsClient.from_config(config))

    def get_tokens(self, options: Optional[ListingOptions] = None) -> list[TokenListEntry]:
        """Listing proxy. Returns the provider's page as-is, or [] on failure."""
        options = options or ListingOptions()
        entries = self.client.fetch_token_list(options)
        logger.debug(
            f"Listing page={options.page} per_page={options.per_page}: {len(entries)} tokens"
        )
        return entries

    def get_token_by_id(self, token_id: str) -> TokenDetail:
        """Detail proxy. Provider failures propagate unchanged."""
        return self.client.fetch_token_detail(token_id)

    def select_token(
        self,
        entry: TokenListEntry,
        wallet_address: Optional[str],
        on_token_selected: Optional[TokenCallback] = None,
    ) -> SelectionResult:
        """Map a listing entry to a canonical Base token via the detail proxy."""
        return self.selector.select(entry, wallet_address, on_token_selected)

    def is_healthy(self) -> bool:
        """Whether the market-data provider is reachable."""
        return self.client.is_available()
