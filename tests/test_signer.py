import pytest

pytest.importorskip("x402")

from x402 import x402Client

from x402_autopay.constants import UnsupportedChainError
from x402_autopay.signer import InvalidPrivateKeyError, WalletSigner, create_signer

EVM_KEY = "0x" + "1" * 64


@pytest.mark.asyncio
async def test_unsupported_chain_is_rejected_before_key_parsing():
    with pytest.raises(UnsupportedChainError):
        await create_signer("ethereum", "not even a key")


@pytest.mark.asyncio
async def test_base_signer_from_hex_key():
    pytest.importorskip("eth_account")
    from eth_account import Account

    signer = await create_signer("base", EVM_KEY)
    assert isinstance(signer, WalletSigner)
    assert signer.chain == "base"
    assert signer.network == "eip155:8453"
    assert signer.address == Account.from_key(EVM_KEY).address


@pytest.mark.asyncio
async def test_base_signer_accepts_key_without_prefix():
    pytest.importorskip("eth_account")
    with_prefix = await create_signer("base", EVM_KEY)
    without_prefix = await create_signer("base", EVM_KEY[2:])
    assert with_prefix.address == without_prefix.address


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["", "0x1234", "zz" * 32])
async def test_malformed_base_key_raises(key):
    pytest.importorskip("eth_account")
    with pytest.raises(InvalidPrivateKeyError):
        await create_signer("base", key)


@pytest.mark.asyncio
async def test_malformed_solana_key_raises():
    pytest.importorskip("solders")
    with pytest.raises(InvalidPrivateKeyError):
        await create_signer("solana", "0x-not-base58")


@pytest.mark.asyncio
async def test_invalid_key_error_is_a_value_error():
    pytest.importorskip("eth_account")
    with pytest.raises(ValueError):
        await create_signer("base", "0x1234")


@pytest.mark.asyncio
async def test_register_returns_client():
    pytest.importorskip("eth_account")
    signer = await create_signer("base", EVM_KEY)
    client = x402Client()
    assert signer.register(client) is client
