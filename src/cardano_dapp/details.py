"""
Wallet Details

Change address and balance of the connected wallet.
"""

import logging
from typing import Optional

from .balance import BalanceSnapshot, lovelace_from_assets
from .connection import WalletConnectionManager

logger = logging.getLogger(__name__)

ADDRESS_UNAVAILABLE = "Could not load address. Check wallet connection."


class WalletDetails:
    """Loads and holds the address and balance shown for the connected wallet"""

    def __init__(self, connection_manager: WalletConnectionManager):
        self.connection_manager = connection_manager
        self.address: str = ""
        self._balance = BalanceSnapshot()

    @property
    def balance(self) -> BalanceSnapshot:
        return self._balance

    async def load_address(self) -> Optional[str]:
        """Fetch the change address, or a hint text when it cannot be loaded"""
        wallet = self.connection_manager.wallet
        if wallet is None:
            return None
        try:
            self.address = await wallet.get_change_address()
        except Exception as e:
            logger.error(f"Failed to get change address: {e}")
            self.address = ADDRESS_UNAVAILABLE
        return self.address

    async def refresh_balance(self) -> BalanceSnapshot:
        """
        Fetch the lovelace balance from the connected wallet

        A failed fetch is logged and reported as a zero balance.
        """
        wallet = self.connection_manager.wallet
        if wallet is None:
            return self._balance

        self._balance = BalanceSnapshot(lovelace=self._balance.lovelace, loading=True)
        try:
            assets = await wallet.get_balance()
            lovelace = lovelace_from_assets(assets)
        except Exception as e:
            logger.error(f"Failed to get balance: {e}")
            lovelace = "0"
        self._balance = BalanceSnapshot(lovelace=lovelace, loading=False)
        return self._balance

    async def refresh(self) -> None:
        """Load address and balance, run after connecting"""
        await self.load_address()
        await self.refresh_balance()

    def reset(self) -> None:
        self.address = ""
        self._balance = BalanceSnapshot()
