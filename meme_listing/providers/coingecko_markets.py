"""CoinGecko market-data client.

Fetches the meme-token markets listing and single-coin detail records.
The two operations deliberately differ in failure policy: a failed listing
is logged and degrades to an empty page, while a failed detail lookup
raises to the caller.
"""

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..core.config import DEFAULT_COINGECKO_BASE_URL, APIConfig
from ..core.exceptions import DataSourceError, ValidationError
from ..core.models import ListingOptions, TokenDetail, TokenListEntry
from ..core.types import DataSource
from .base import BaseProvider

logger = logging.getLogger(__name__)

MARKETS_ENDPOINT = "/coins/markets"


class CoinGeckoMarketsClient(BaseProvider):
    """Fetches meme-token listings and coin details from CoinGecko."""

    SOURCE = DataSource.COINGECKO

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_COINGECKO_BASE_URL,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize CoinGecko client.

        Args:
            api_key: CoinGecko demo API key, attached to listing requests only
            base_url: API root
            timeout: Request timeout in seconds (None waits indefinitely)
            transport: Optional httpx transport for tests
        """
        super().__init__(base_url=base_url, timeout=timeout, transport=transport)
        self.api_key = api_key

    @classmethod
    def from_config(
        cls,
        config: APIConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> "CoinGeckoMarketsClient":
        """Build a client from explicit configuration."""
        return cls(
            api_key=config.coingecko_api_key,
            base_url=config.coingecko_base_url,
            timeout=config.request_timeout,
            transport=transport,
        )

    def is_available(self) -> bool:
        """Check if CoinGecko API is available."""
        try:
            with self._client() as client:
                response = client.get(f"{self.base_url}/ping")
                return response.status_code == 200
        except httpx.HTTPError as e:
            logger.warning(f"[coingecko] Ping failed: {type(e).__name__}")
            return False

    def fetch_token_list(
        self,
        options: ListingOptions | None = None,
    ) -> list[TokenListEntry]:
        """
        Get one page of the meme-token markets listing.

        Ordered by market cap descending and quoted in USD. Page and page
        size are passed to CoinGecko unmodified.

        Args:
            options: Sparkline/page/perPage options (defaults: true/1/100)

        Returns:
            Listing entries, or an empty list if the request failed for any reason
        """
        options = options or ListingOptions()
        params = options.to_query_params()
        if self.api_key:
            params["x_cg_demo_api_key"] = self.api_key

        try:
            data = self._make_request(
                MARKETS_ENDPOINT,
                params=params,
                headers={"accept": "application/json"},
            )
            if not isinstance(data, list):
                raise DataSourceError(
                    source=self.SOURCE.value,
                    message=f"Expected a list, got {type(data).__name__}",
                    endpoint=MARKETS_ENDPOINT,
                )
            return [TokenListEntry.model_validate(item) for item in data]

        except Exception as e:
            logger.error(
                f"[coingecko] Token list fetch failed "
                f"(page={options.page}, per_page={options.per_page}): {e}"
            )
            return []

    def fetch_token_detail(self, token_id: str) -> TokenDetail:
        """
        Get the full coin record for a CoinGecko ID.

        Args:
            token_id: CoinGecko coin ID (e.g., "brett")

        Returns:
            TokenDetail including detail_platforms

        Raises:
            ValidationError: If token_id is empty
            DataSourceError: On any transport, status or payload failure
        """
        if not isinstance(token_id, str) or not token_id.strip():
            raise ValidationError("id", str(token_id), "must be a non-empty string")

        endpoint = f"/coins/{quote(token_id, safe='')}"
        data = self._make_request(endpoint)

        if not isinstance(data, dict):
            raise DataSourceError(
                source=self.SOURCE.value,
                message=f"Expected an object, got {type(data).__name__}",
                endpoint=endpoint,
            )

        try:
            return TokenDetail.model_validate(data)
        except PydanticValidationError as e:
            raise DataSourceError(
                source=self.SOURCE.value,
                message=f"Unexpected coin detail payload ({e.error_count()} errors)",
                endpoint=endpoint,
            ) from e
