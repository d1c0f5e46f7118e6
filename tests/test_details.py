"""
Wallet Details Tests
"""

import pytest

from cardano_dapp.balance import BalanceSnapshot
from cardano_dapp.details import ADDRESS_UNAVAILABLE


@pytest.mark.unit
class TestWalletDetails:
    @pytest.mark.asyncio
    async def test_nothing_loaded_when_disconnected(self, details, mock_wallet):
        assert await details.load_address() is None
        assert await details.refresh_balance() == BalanceSnapshot()
        assert mock_wallet.calls == []

    @pytest.mark.asyncio
    async def test_refresh_after_connect(self, connection_manager, details, mock_wallet):
        await connection_manager.connect("nami")

        await details.refresh()

        assert details.address == mock_wallet.address
        assert details.balance == BalanceSnapshot(lovelace="5000000", loading=False)

    @pytest.mark.asyncio
    async def test_address_failure_shows_hint(self, connection_manager, details, mock_wallet):
        await connection_manager.connect("nami")
        mock_wallet.fail("get_change_address", RuntimeError("locked"))

        assert await details.load_address() == ADDRESS_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_balance_failure_is_zero(self, connection_manager, details, mock_wallet):
        await connection_manager.connect("nami")
        await details.refresh_balance()
        mock_wallet.fail("get_balance", RuntimeError("network down"))

        balance = await details.refresh_balance()

        assert balance == BalanceSnapshot(lovelace="0", loading=False)

    def test_reset(self, details):
        details.address = "addr_test1x"
        details.reset()
        assert details.address == ""
        assert details.balance == BalanceSnapshot()
