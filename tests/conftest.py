"""Pytest configuration and fixtures for meme listing tests."""

import copy
from typing import Any

import httpx
import pytest

from meme_listing.core.models import TokenDetail, TokenListEntry
from meme_listing.providers.coingecko_markets import CoinGeckoMarketsClient
from meme_listing.service import TokenListingService

TEST_API_KEY = "cg-demo-test-key"
BRETT_BASE_ADDRESS = "0x532f27101965dd16442e59d40670faf5ebb142e4"
WALLET_ADDRESS = "0x00000000000000000000000000000000000a11ce"


class ProviderStub:
    """In-memory CoinGecko stand-in served through httpx.MockTransport."""

    def __init__(
        self,
        markets: list[dict[str, Any]] | None = None,
        details: dict[str, dict[str, Any]] | None = None,
    ):
        self.markets = markets or []
        self.details = details or {}
        self.requests: list[httpx.Request] = []
        self.error: Exception | None = None
        self.markets_response: httpx.Response | None = None

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error

        path = request.url.path
        if path.endswith("/ping"):
            return httpx.Response(200, json={"gecko_says": "(V3) To the Moon!"})

        if path.endswith("/coins/markets"):
            if self.markets_response is not None:
                return self.markets_response
            page = int(request.url.params["page"])
            per_page = int(request.url.params["per_page"])
            if page < 1 or per_page < 1:
                return httpx.Response(200, json=[])
            start = (page - 1) * per_page
            return httpx.Response(200, json=self.markets[start:start + per_page])

        coin_id = path.rsplit("/", 1)[-1]
        if coin_id in self.details:
            return httpx.Response(200, json=self.details[coin_id])
        return httpx.Response(404, json={"error": "coin not found"})

    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def brett_entry_payload() -> dict[str, Any]:
    """Markets listing row for Brett."""
    return {
        "id": "based-brett",
        "symbol": "brett",
        "name": "Brett",
        "image": "https://coin-images.coingecko.com/coins/images/35529/large/brett.png",
        "current_price": 0.0821,
        "market_cap": 813_456_789,
        "market_cap_rank": 3,
        "total_volume": 25_123_456,
        "price_change_percentage_24h": -2.41,
        "sparkline_in_7d": {"price": [0.08, 0.081, 0.0821]},
    }


@pytest.fixture
def markets_payload(brett_entry_payload: dict[str, Any]) -> list[dict[str, Any]]:
    """A small meme-token listing ordered by market cap."""
    return [
        {
            "id": "dogecoin",
            "symbol": "doge",
            "name": "Dogecoin",
            "image": "https://coin-images.coingecko.com/coins/images/5/large/dogecoin.png",
            "current_price": 0.162,
            "market_cap": 23_700_000_000,
            "market_cap_rank": 1,
            "total_volume": 1_200_000_000,
            "price_change_percentage_24h": 1.87,
        },
        {
            "id": "pepe",
            "symbol": "pepe",
            "name": "Pepe",
            "image": "https://coin-images.coingecko.com/coins/images/29850/large/pepe.png",
            "current_price": 0.0000098,
            "market_cap": 4_100_000_000,
            "market_cap_rank": 2,
            "total_volume": 610_000_000,
            "price_change_percentage_24h": 0.52,
        },
        brett_entry_payload,
        {
            "id": "illiquid-frog",
            "symbol": "ifrog",
            "name": "illiquid frog",
            "image": "https://coin-images.coingecko.com/coins/images/1/large/frog.png",
            "current_price": 0.0001,
            "market_cap": None,
            "market_cap_rank": None,
            "total_volume": None,
            "price_change_percentage_24h": None,
        },
    ]


@pytest.fixture
def brett_detail_payload() -> dict[str, Any]:
    """Coin detail for Brett, deployed on Base only."""
    return {
        "id": "based-brett",
        "symbol": "brett",
        "name": "Brett",
        "asset_platform_id": "base",
        "platforms": {"base": BRETT_BASE_ADDRESS},
        "detail_platforms": {
            "base": {
                "decimal_place": 18,
                "contract_address": BRETT_BASE_ADDRESS,
            }
        },
    }


@pytest.fixture
def doge_detail_payload() -> dict[str, Any]:
    """Coin detail for Dogecoin, a native coin with no Base contract."""
    return {
        "id": "dogecoin",
        "symbol": "doge",
        "name": "Dogecoin",
        "asset_platform_id": None,
        "platforms": {"": ""},
        "detail_platforms": {
            "": {"decimal_place": None, "contract_address": ""},
        },
    }


@pytest.fixture
def brett_entry(brett_entry_payload: dict[str, Any]) -> TokenListEntry:
    return TokenListEntry.model_validate(brett_entry_payload)


@pytest.fixture
def brett_detail(brett_detail_payload: dict[str, Any]) -> TokenDetail:
    return TokenDetail.model_validate(brett_detail_payload)


@pytest.fixture
def provider(
    markets_payload: list[dict[str, Any]],
    brett_detail_payload: dict[str, Any],
    doge_detail_payload: dict[str, Any],
) -> ProviderStub:
    """Provider stub serving the sample listing and details."""
    return ProviderStub(
        markets=copy.deepcopy(markets_payload),
        details={
            "based-brett": brett_detail_payload,
            "dogecoin": doge_detail_payload,
        },
    )


@pytest.fixture
def client(provider: ProviderStub) -> CoinGeckoMarketsClient:
    """Client wired to the provider stub."""
    return CoinGeckoMarketsClient(api_key=TEST_API_KEY, transport=provider.transport)


@pytest.fixture
def service(client: CoinGeckoMarketsClient) -> TokenListingService:
    return TokenListingService(client)
