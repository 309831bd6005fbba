"""Selection mapper - turns a clicked listing entry into a swappable token.

The mapping itself is a pure function of (entry, detail). The selector
wraps it with the wallet precondition, the detail fetch and the callback,
and reports every path as a SelectionOutcome instead of raising.
"""

import logging
from typing import Callable, Optional

from ..core.models import (
    CanonicalToken,
    SelectionResult,
    TokenDetail,
    TokenListEntry,
)
from ..core.types import (
    BASE_CHAIN_ID,
    BASE_PLATFORM_KEY,
    WALLET_REQUIRED_MESSAGE,
    SelectionOutcome,
)

logger = logging.getLogger(__name__)

DetailFetcher = Callable[[str], TokenDetail]
TokenCallback = Callable[[CanonicalToken], None]


def map_to_canonical(
    entry: TokenListEntry,
    detail: TokenDetail,
    platform_key: str = BASE_PLATFORM_KEY,
    chain_id: int = BASE_CHAIN_ID,
) -> Optional[CanonicalToken]:
    """
    Map a listing entry and its detail record to a canonical token.

    Address and decimals come from the chain's platform entry; name, symbol
    and image come from the listing entry.

    Returns:
        CanonicalToken, or None if the token has no deployment on the chain
    """
    platform = detail.platform(platform_key)
    if platform is None:
        return None

    return CanonicalToken(
        address=platform.contract_address,
        chain_id=chain_id,
        decimals=platform.decimal_place,
        name=entry.name,
        symbol=entry.symbol,
        image=entry.image,
    )


class TokenSelector:
    """Runs the selection flow for listing entries."""

    def __init__(
        self,
        fetch_detail: DetailFetcher,
        platform_key: str = BASE_PLATFORM_KEY,
        chain_id: int = BASE_CHAIN_ID,
    ):
        """
        Initialize selector.

        Args:
            fetch_detail: Detail lookup, e.g. the detail proxy operation
            platform_key: detail_platforms key of the target chain
            chain_id: Target chain ID stamped on produced tokens
        """
        self.fetch_detail = fetch_detail
        self.platform_key = platform_key
        self.chain_id = chain_id

    def select(
        self,
        entry: TokenListEntry,
        wallet_address: Optional[str],
        on_token_selected: Optional[TokenCallback] = None,
    ) -> SelectionResult:
        """
        Select a listing entry for swapping.

        The callback is invoked at most once, and only when a wallet is
        connected, the detail fetch succeeds and the token is deployed on
        the target chain.

        Args:
            entry: The clicked listing entry
            wallet_address: Connected wallet address, or None
            on_token_selected: Receives the canonical token on success

        Returns:
            SelectionResult describing which path was taken
        """
        if not wallet_address:
            logger.debug(f"Selection of {entry.id} blocked: wallet not connected")
            return SelectionResult(
                outcome=SelectionOutcome.WALLET_NOT_CONNECTED,
                message=WALLET_REQUIRED_MESSAGE,
            )

        try:
            detail = self.fetch_detail(entry.id)
            token = map_to_canonical(
                entry,
                detail,
                platform_key=self.platform_key,
                chain_id=self.chain_id,
            )
            if token is None:
                logger.debug(
                    f"Selection of {entry.id} skipped: no {self.platform_key} deployment"
                )
                return SelectionResult(outcome=SelectionOutcome.NO_DEPLOYMENT)

            if on_token_selected is not None:
                on_token_selected(token)

        except Exception as e:
            logger.exception(f"Error selecting token {entry.id}")
            return SelectionResult(outcome=SelectionOutcome.FAILED, error=str(e))

        logger.debug(f"Selected {token.symbol} at {token.address} on chain {token.chain_id}")
        return SelectionResult(outcome=SelectionOutcome.SELECTED, token=token)
