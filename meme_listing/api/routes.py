"""HTTP routes for the CoinGecko proxy and token selection."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel, Field

from ..core.models import ListingOptions, TokenListEntry
from ..service import TokenListingService

router = APIRouter()


class TokenByIdRequest(BaseModel):
    """Body of the detail lookup."""

    id: str


class SelectTokenRequest(BaseModel):
    """Body of a selection: the clicked row and the connected wallet."""

    entry: TokenListEntry
    wallet_address: Optional[str] = Field(default=None, alias="walletAddress")

    model_config = {"populate_by_name": True}


def get_service(request: Request) -> TokenListingService:
    """Resolve the service bound to the application."""
    return request.app.state.service


@router.get("/api/health", tags=["health"])
def get_health(service: TokenListingService = Depends(get_service)) -> Dict[str, Any]:
    """Report whether the market-data provider is reachable."""
    provider_ok = service.is_healthy()
    return {
        "status": "ok" if provider_ok else "degraded",
        "components": {"coingecko": {"ok": provider_ok}},
    }


@router.get("/api/coingecko/tokens", tags=["coingecko"])
def get_tokens(
    sparkline: Optional[bool] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = Query(default=None, alias="perPage"),
    service: TokenListingService = Depends(get_service),
) -> List[Dict[str, Any]]:
    """
    List one page of meme tokens by market cap.

    Omitted parameters fall back to sparkline=true, page=1, perPage=100.
    Provider failures yield an empty list rather than an error.
    """
    provided = {"sparkline": sparkline, "page": page, "per_page": per_page}
    options = ListingOptions(**{k: v for k, v in provided.items() if v is not None})
    return [entry.model_dump(exclude_unset=True) for entry in service.get_tokens(options)]


@router.post("/api/coingecko/token", tags=["coingecko"])
def get_token_by_id(
    body: TokenByIdRequest,
    service: TokenListingService = Depends(get_service),
) -> Dict[str, Any]:
    """Return the full CoinGecko coin record. Provider failures surface as 502."""
    return service.get_token_by_id(body.id).model_dump(exclude_unset=True)


@router.post("/api/coingecko/select", tags=["coingecko"])
def select_token(
    body: SelectTokenRequest,
    service: TokenListingService = Depends(get_service),
) -> Dict[str, Any]:
    """Map a listing entry to its canonical Base token, if deployed there."""
    result = service.select_token(body.entry, body.wallet_address)
    return result.model_dump(mode="json", by_alias=True)
