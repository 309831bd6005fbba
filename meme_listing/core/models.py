"""Pydantic data models for the meme token listing API.

All data structures are immutable (frozen) after creation. Provider
payload models keep unknown fields so the proxies can return the raw
response shape.
"""

from typing import Any

from pydantic import BaseModel, Field

from .types import (
    BASE_CHAIN_ID,
    BASE_PLATFORM_KEY,
    MARKET_ORDER,
    MEME_CATEGORY,
    VS_CURRENCY,
    Percentage,
    SelectionOutcome,
    USDAmount,
)

EVM_ADDRESS_PATTERN = r"^0x[0-9a-fA-F]{40}$"


class ListingOptions(BaseModel):
    """Request shaping options for the markets listing."""

    sparkline: bool = True
    page: int = 1
    per_page: int = Field(default=100, alias="perPage")

    model_config = {"frozen": True, "populate_by_name": True}

    def to_query_params(self) -> dict[str, str]:
        """Build the provider query string, excluding credentials."""
        return {
            "vs_currency": VS_CURRENCY,
            "category": MEME_CATEGORY,
            "order": MARKET_ORDER,
            "sparkline": str(self.sparkline).lower(),
            "page": str(self.page),
            "per_page": str(self.per_page),
        }


class TokenListEntry(BaseModel):
    """One row of the CoinGecko markets listing."""

    id: str
    name: str
    symbol: str
    image: str = ""
    current_price: USDAmount | None = None
    price_change_percentage_24h: Percentage | None = None  # Omitted for illiquid tokens
    market_cap: USDAmount | None = None
    total_volume: USDAmount | None = None
    market_cap_rank: int | None = None

    model_config = {"frozen": True, "extra": "allow"}


class PlatformDetail(BaseModel):
    """A single chain's deployment metadata for a token."""

    contract_address: str | None = None
    decimal_place: int | None = None

    model_config = {"frozen": True, "extra": "allow"}


class TokenDetail(BaseModel):
    """Full CoinGecko coin record, including per-chain deployments."""

    id: str
    symbol: str = ""
    name: str = ""
    detail_platforms: dict[str, PlatformDetail] = Field(default_factory=dict)

    model_config = {"frozen": True, "extra": "allow"}

    def platform(self, key: str = BASE_PLATFORM_KEY) -> PlatformDetail | None:
        """Return the deployment for a chain key, or None if not deployed."""
        return self.detail_platforms.get(key)


class CanonicalToken(BaseModel):
    """Normalized on-chain token reference consumed by the swap widget."""

    address: str = Field(pattern=EVM_ADDRESS_PATTERN)
    chain_id: int = Field(default=BASE_CHAIN_ID, alias="chainId")
    decimals: int
    name: str
    symbol: str
    image: str

    model_config = {"frozen": True, "populate_by_name": True}

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the swap widget's field names."""
        return self.model_dump(by_alias=True)


class SelectionResult(BaseModel):
    """Result of mapping a clicked listing entry to a canonical token."""

    outcome: SelectionOutcome
    token: CanonicalToken | None = None
    message: str | None = None  # User-facing notice, if any
    error: str | None = None  # Diagnostic detail for failed selections

    model_config = {"frozen": True}

    @property
    def selected(self) -> bool:
        """True when a token was produced and handed to the callback."""
        return self.outcome == SelectionOutcome.SELECTED and self.token is not None
