import pytest

from x402_autopay.constants import (
    CHAIN_NETWORKS,
    DEFAULT_ASSETS,
    DEFAULT_INTERVAL_MS,
    PAYMENT_RESPONSE_HEADERS,
    SUPPORTED_CHAINS,
    UnsupportedChainError,
    get_default_asset,
    get_network,
)


def test_supported_chains_match_expected():
    assert SUPPORTED_CHAINS == ["base", "solana"]


def test_chain_networks_match_expected():
    assert CHAIN_NETWORKS["base"] == "eip155:8453"
    assert CHAIN_NETWORKS["solana"] == "solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp"
    assert set(CHAIN_NETWORKS) == set(SUPPORTED_CHAINS)


def test_default_assets_cover_every_chain():
    for network in CHAIN_NETWORKS.values():
        assert DEFAULT_ASSETS[network]["decimals"] == 6
    assert get_default_asset("eip155:8453")["address"] == "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"


def test_v2_payment_response_header_is_checked_first():
    assert PAYMENT_RESPONSE_HEADERS == ["PAYMENT-RESPONSE", "X-PAYMENT-RESPONSE"]


def test_default_interval_is_one_second():
    assert DEFAULT_INTERVAL_MS == 1000


@pytest.mark.parametrize("chain", ["ethereum", "Base", "", " base"])
def test_get_network_raises_on_unsupported_chain(chain):
    with pytest.raises(UnsupportedChainError):
        get_network(chain)


def test_get_default_asset_raises_on_unsupported_network():
    with pytest.raises(UnsupportedChainError):
        get_default_asset("eip155:1")
