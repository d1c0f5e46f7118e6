"""
Wallet Capability Interface

The narrow set of wallet operations the dApp relies on. Browser extensions,
local mnemonic wallets and test doubles all plug in behind this interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Asset:
    """One entry of a wallet balance listing"""

    unit: str
    quantity: str


class WalletCapabilityError(Exception):
    """
    Error raised by a wallet capability

    `info` carries the structured detail reported by the wallet, when there is one.
    """

    def __init__(self, message: str = "", info: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.info = info or {}


class WalletCapability(ABC):
    """Operations exposed by a connected Cardano wallet"""

    @abstractmethod
    async def connect(self) -> None:
        """Request access to the wallet (may prompt the user)"""

    @abstractmethod
    async def disconnect(self) -> None:
        """Release access to the wallet"""

    @abstractmethod
    async def get_change_address(self) -> str:
        """Address that receives change, bech32 encoded"""

    @abstractmethod
    async def get_balance(self) -> List[Asset]:
        """Current balance as a list of (unit, quantity) pairs"""

    @abstractmethod
    async def build_transfer(self, address: str, lovelace: int) -> str:
        """
        Build an unsigned transaction paying `lovelace` to `address`

        Returns:
            Unsigned transaction CBOR hex
        """

    @abstractmethod
    async def sign_tx(self, unsigned_tx: str) -> str:
        """Sign an unsigned transaction, returning the signed CBOR hex"""

    @abstractmethod
    async def submit_tx(self, signed_tx: str) -> str:
        """Submit a signed transaction, returning its transaction id"""
