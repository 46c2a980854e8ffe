"""Integration tests for the EVM client — RPC fallback and error handling."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from venue_strategy.chains.evm.client import EvmClient
from venue_strategy.config import ChainConfig


@pytest.fixture()
def client() -> EvmClient:
    return EvmClient(
        ChainConfig(
            rpc_endpoints=(
                "https://rpc1.example.com",
                "https://rpc2.example.com",
                "https://rpc3.example.com",
            ),
            rpc_timeout=5,
        )
    )


def _mock_response(response_data: dict) -> AsyncMock:
    mock_response = AsyncMock()
    mock_response.json = AsyncMock(return_value=response_data)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)
    return mock_response


def _mock_session(post: MagicMock) -> AsyncMock:
    mock_session = AsyncMock()
    mock_session.post = post
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=None)
    return mock_session


class TestRpcCall:
    @pytest.mark.asyncio
    async def test_successful_call(self, client: EvmClient) -> None:
        session = _mock_session(
            MagicMock(return_value=_mock_response({"jsonrpc": "2.0", "result": "0x10"}))
        )

        with patch("venue_strategy.chains.evm.client.aiohttp.ClientSession", return_value=session):
            with patch("venue_strategy.chains.evm.client.aiohttp.TCPConnector"):
                result = await client.rpc_call("eth_blockNumber", [])

        assert result == "0x10"

    @pytest.mark.asyncio
    async def test_rpc_error_raises(self, client: EvmClient) -> None:
        session = _mock_session(
            MagicMock(
                return_value=_mock_response(
                    {"jsonrpc": "2.0", "error": {"code": -32000, "message": "bad"}}
                )
            )
        )

        with patch("venue_strategy.chains.evm.client.aiohttp.ClientSession", return_value=session):
            with patch("venue_strategy.chains.evm.client.aiohttp.TCPConnector"):
                with pytest.raises(RuntimeError, match="All RPC endpoints failed"):
                    await client.rpc_call("eth_call", [])

    @pytest.mark.asyncio
    async def test_fallback_on_connection_error(self, client: EvmClient) -> None:
        """When the first endpoint fails, the next one is used and remembered."""
        success = _mock_response({"jsonrpc": "2.0", "result": "0x2a"})
        post = MagicMock(side_effect=[ConnectionError("first endpoint down"), success])
        session = _mock_session(post)

        with patch("venue_strategy.chains.evm.client.aiohttp.ClientSession", return_value=session):
            with patch("venue_strategy.chains.evm.client.aiohttp.TCPConnector"):
                result = await client.rpc_call("eth_blockNumber", [])

        assert result == "0x2a"
        assert post.call_count == 2
        assert client.current_rpc_index == 1


class TestHelpers:
    @pytest.mark.asyncio
    async def test_block_number_decodes_hex(self, client: EvmClient) -> None:
        client.rpc_call = AsyncMock(return_value="0x1b4")  # type: ignore[method-assign]
        assert await client.block_number() == 436
        client.rpc_call.assert_awaited_once_with("eth_blockNumber", [])

    @pytest.mark.asyncio
    async def test_eth_call_payload(self, client: EvmClient) -> None:
        client.rpc_call = AsyncMock(return_value="0x" + "00" * 32)  # type: ignore[method-assign]
        result = await client.eth_call("0xabc", "0x182df0f5", "0x10")
        assert result == "0x" + "00" * 32
        client.rpc_call.assert_awaited_once_with(
            "eth_call", [{"to": "0xabc", "data": "0x182df0f5"}, "0x10"]
        )

    @pytest.mark.asyncio
    async def test_eth_call_empty_result(self, client: EvmClient) -> None:
        client.rpc_call = AsyncMock(return_value=None)  # type: ignore[method-assign]
        assert await client.eth_call("0xabc", "0x") == "0x"
