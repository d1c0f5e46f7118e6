"""
Wallet Connection Manager Tests
"""

import pytest

from cardano_dapp.connection import ConnectionState, WalletConnectionManager
from cardano_dapp.providers import InjectedWallets, UnsupportedWalletError, WalletProvider
from tests.mocks import MockWallet


@pytest.mark.unit
class TestWalletProvider:
    def test_injected_keys(self):
        assert WalletProvider.NAMI.injected_key == "nami"
        assert WalletProvider.ETERNL.injected_key == "eternl"
        assert WalletProvider.FLINT.injected_key == "flint"

    def test_parse(self):
        assert WalletProvider.parse("flint-wallet") is WalletProvider.FLINT
        with pytest.raises(UnsupportedWalletError):
            WalletProvider.parse("metamask")


@pytest.mark.unit
class TestConnect:
    def test_initially_disconnected(self, connection_manager):
        assert connection_manager.connection.state is ConnectionState.DISCONNECTED
        assert connection_manager.connection.status_message == "Not connected"
        assert connection_manager.wallet is None

    @pytest.mark.asyncio
    async def test_connect_installed_wallet(self, connection_manager, mock_wallet):
        connection = await connection_manager.connect("nami")

        assert connection.state is ConnectionState.CONNECTED
        assert connection.connected
        assert connection.provider is WalletProvider.NAMI
        assert connection.status_message == "Connected to nami!"
        assert connection_manager.wallet is mock_wallet
        assert mock_wallet.calls == ["connect"]

    @pytest.mark.asyncio
    async def test_connect_missing_wallet(self, connection_manager, mock_wallet):
        connection = await connection_manager.connect(WalletProvider.ETERNL)

        assert connection.state is ConnectionState.ERROR
        assert connection.status_message == (
            'Wallet "eternl" is not installed. Please install it first from its official website.'
        )
        assert connection_manager.wallet is None
        assert mock_wallet.calls == []

    @pytest.mark.asyncio
    async def test_connect_flint_uses_flint_key(self):
        wallet = MockWallet()
        injected = InjectedWallets()
        injected.inject("flint", wallet)
        manager = WalletConnectionManager(injected)

        connection = await manager.connect("flint-wallet")

        assert connection.connected
        assert manager.wallet is wallet

    @pytest.mark.asyncio
    async def test_connect_rejected(self, connection_manager, mock_wallet):
        mock_wallet.fail("connect", RuntimeError("user rejected"))

        connection = await connection_manager.connect("nami")

        assert connection.state is ConnectionState.ERROR
        assert connection.status_message == (
            "Failed to connect. Maybe you rejected the connection or there was a network issue."
        )
        assert connection.error == "user rejected"
        assert connection_manager.wallet is None

    @pytest.mark.asyncio
    async def test_switching_wallet_disconnects_previous(self, injected, connection_manager, mock_wallet):
        eternl = MockWallet(address="addr_test1qeternl")
        injected.inject("eternl", eternl)
        await connection_manager.connect("nami")

        connection = await connection_manager.connect("eternl")

        assert connection.provider is WalletProvider.ETERNL
        assert connection_manager.wallet is eternl
        assert mock_wallet.calls == ["connect", "disconnect"]
        assert eternl.calls == ["connect"]

    @pytest.mark.asyncio
    async def test_switching_to_missing_wallet_releases_previous(self, connection_manager, mock_wallet):
        await connection_manager.connect("nami")

        connection = await connection_manager.connect("flint-wallet")

        assert connection.state is ConnectionState.ERROR
        assert connection_manager.wallet is None
        assert mock_wallet.calls == ["connect", "disconnect"]

    @pytest.mark.asyncio
    async def test_connect_unsupported(self, connection_manager):
        with pytest.raises(UnsupportedWalletError):
            await connection_manager.connect("metamask")
        assert connection_manager.connection.state is ConnectionState.DISCONNECTED


@pytest.mark.unit
class TestDisconnect:
    @pytest.mark.asyncio
    async def test_disconnect(self, connection_manager, mock_wallet):
        await connection_manager.connect("nami")

        connection = await connection_manager.disconnect()

        assert connection.state is ConnectionState.DISCONNECTED
        assert connection.status_message == "Disconnected from wallet."
        assert connection_manager.wallet is None
        assert mock_wallet.calls == ["connect", "disconnect"]

    @pytest.mark.asyncio
    async def test_disconnect_from_error_state(self, connection_manager):
        await connection_manager.connect("eternl")

        connection = await connection_manager.disconnect()

        assert connection.state is ConnectionState.DISCONNECTED

    @pytest.mark.asyncio
    async def test_disconnect_failure(self, connection_manager, mock_wallet):
        await connection_manager.connect("nami")
        mock_wallet.fail("disconnect", RuntimeError("extension crashed"))

        connection = await connection_manager.disconnect()

        assert connection.state is ConnectionState.ERROR
        assert connection.status_message == "Error while disconnecting. Please reload the page."
        assert connection_manager.wallet is None
