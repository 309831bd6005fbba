"""Tests for the selection mapper."""

import pytest

from meme_listing.core.exceptions import DataSourceError
from meme_listing.core.models import TokenDetail, TokenListEntry
from meme_listing.core.types import SelectionOutcome
from meme_listing.selection.mapper import TokenSelector, map_to_canonical

from tests.conftest import BRETT_BASE_ADDRESS, WALLET_ADDRESS

FOO_ADDRESS = "0xabc0000000000000000000000000000000000def"


class RecordingFetcher:
    """Detail fetcher that records calls and returns or raises a fixed result."""

    def __init__(self, detail: TokenDetail | None = None, error: Exception | None = None):
        self.detail = detail
        self.error = error
        self.calls: list[str] = []

    def __call__(self, token_id: str) -> TokenDetail:
        self.calls.append(token_id)
        if self.error is not None:
            raise self.error
        return self.detail


@pytest.fixture
def foo_entry() -> TokenListEntry:
    return TokenListEntry(id="x", name="Foo", symbol="FOO", image="http://img/foo.png")


@pytest.fixture
def foo_detail() -> TokenDetail:
    return TokenDetail.model_validate(
        {
            "id": "x",
            "detail_platforms": {
                "base": {"contract_address": FOO_ADDRESS, "decimal_place": 18},
            },
        }
    )


@pytest.fixture
def undeployed_detail() -> TokenDetail:
    return TokenDetail.model_validate({"id": "x", "detail_platforms": {}})


class TestMapToCanonical:
    """Tests for the pure entry + detail mapping."""

    def test_maps_base_platform(self, foo_entry, foo_detail):
        """Test the canonical token takes chain data from detail and labels from the entry."""
        token = map_to_canonical(foo_entry, foo_detail)

        assert token.to_dict() == {
            "address": FOO_ADDRESS,
            "chainId": 8453,
            "decimals": 18,
            "name": "Foo",
            "symbol": "FOO",
            "image": "http://img/foo.png",
        }

    def test_entry_labels_win_over_detail(self, brett_entry, brett_detail):
        """Test name and symbol come from the listing entry as displayed."""
        token = map_to_canonical(brett_entry, brett_detail)

        assert token.symbol == "brett"
        assert token.image == brett_entry.image
        assert token.address == BRETT_BASE_ADDRESS

    def test_empty_platforms_is_no_deployment(self, foo_entry, undeployed_detail):
        """Test a token without a Base platform maps to None."""
        assert map_to_canonical(foo_entry, undeployed_detail) is None

    def test_other_chains_only_is_no_deployment(self, foo_entry):
        """Test platforms on other chains are ignored."""
        detail = TokenDetail.model_validate(
            {
                "id": "x",
                "detail_platforms": {
                    "ethereum": {"contract_address": FOO_ADDRESS, "decimal_place": 9},
                    "": {"contract_address": "", "decimal_place": None},
                },
            }
        )

        assert map_to_canonical(foo_entry, detail) is None

    def test_invalid_contract_address_raises(self, foo_entry):
        """Test malformed platform data is not turned into a token."""
        detail = TokenDetail.model_validate(
            {
                "id": "x",
                "detail_platforms": {"base": {"contract_address": "", "decimal_place": 18}},
            }
        )

        with pytest.raises(ValueError):
            map_to_canonical(foo_entry, detail)


class TestTokenSelector:
    """Tests for the selection flow and its outcomes."""

    def test_selected_invokes_callback_once(self, foo_entry, foo_detail):
        """Test a deployed token is handed to the callback exactly once."""
        fetcher = RecordingFetcher(detail=foo_detail)
        received = []

        result = TokenSelector(fetcher).select(foo_entry, WALLET_ADDRESS, received.append)

        assert result.outcome == SelectionOutcome.SELECTED
        assert result.selected
        assert fetcher.calls == ["x"]
        assert received == [result.token]
        assert result.token.address == FOO_ADDRESS

    def test_wallet_required(self, foo_entry, foo_detail):
        """Test no fetch happens without a connected wallet."""
        fetcher = RecordingFetcher(detail=foo_detail)
        received = []

        for wallet in (None, ""):
            result = TokenSelector(fetcher).select(foo_entry, wallet, received.append)

            assert result.outcome == SelectionOutcome.WALLET_NOT_CONNECTED
            assert result.message == "Please connect your wallet to swap"
            assert not result.selected

        assert fetcher.calls == []
        assert received == []

    def test_no_deployment_skips_callback(self, foo_entry, undeployed_detail):
        """Test a confirmed-absent Base deployment is a named outcome."""
        received = []

        result = TokenSelector(RecordingFetcher(detail=undeployed_detail)).select(
            foo_entry, WALLET_ADDRESS, received.append
        )

        assert result.outcome == SelectionOutcome.NO_DEPLOYMENT
        assert result.token is None
        assert result.error is None
        assert received == []

    def test_fetch_failure_is_caught(self, foo_entry):
        """Test detail failures are logged and reported, not raised."""
        fetcher = RecordingFetcher(
            error=DataSourceError("coingecko", "HTTP 500", endpoint="/coins/x", status_code=500)
        )
        received = []

        result = TokenSelector(fetcher).select(foo_entry, WALLET_ADDRESS, received.append)

        assert result.outcome == SelectionOutcome.FAILED
        assert "HTTP 500" in result.error
        assert received == []

    def test_malformed_platform_is_failure(self, foo_entry):
        """Test mapping errors end in a failed outcome."""
        detail = TokenDetail.model_validate(
            {"id": "x", "detail_platforms": {"base": {"contract_address": "0x12"}}}
        )
        received = []

        result = TokenSelector(RecordingFetcher(detail=detail)).select(
            foo_entry, WALLET_ADDRESS, received.append
        )

        assert result.outcome == SelectionOutcome.FAILED
        assert received == []

    def test_callback_error_is_failure(self, foo_entry, foo_detail):
        """Test a raising callback does not escape the selection boundary."""
        calls = []

        def explode(token):
            calls.append(token)
            raise RuntimeError("widget unmounted")

        result = TokenSelector(RecordingFetcher(detail=foo_detail)).select(
            foo_entry, WALLET_ADDRESS, explode
        )

        assert result.outcome == SelectionOutcome.FAILED
        assert result.error == "widget unmounted"
        assert len(calls) == 1

    def test_without_callback(self, foo_entry, foo_detail):
        """Test selection works for callers that only read the result."""
        result = TokenSelector(RecordingFetcher(detail=foo_detail)).select(
            foo_entry, WALLET_ADDRESS
        )

        assert result.selected
        assert result.token.chain_id == 8453
