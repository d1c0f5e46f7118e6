"""
Wallet Connection Management

Tracks the connection lifecycle to one of the supported wallet providers.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .capability import WalletCapability
from .providers import InjectedWallets, WalletProvider

logger = logging.getLogger(__name__)


class ConnectionState(str, Enum):
    """Connection lifecycle states"""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERROR = "error"


@dataclass(frozen=True)
class WalletConnection:
    """Snapshot of the current wallet connection"""

    state: ConnectionState = ConnectionState.DISCONNECTED
    provider: Optional[WalletProvider] = None
    status_message: str = "Not connected"
    error: Optional[str] = None

    @property
    def connected(self) -> bool:
        return self.state is ConnectionState.CONNECTED


class WalletConnectionManager:
    """
    Connects to and disconnects from installed wallets

    Only this class changes the WalletConnection; callers read `connection`.
    """

    def __init__(self, injected: InjectedWallets):
        """
        Initialize connection manager

        Args:
            injected: Registry of installed wallet capabilities
        """
        self.injected = injected
        self._connection = WalletConnection()
        self._wallet: Optional[WalletCapability] = None

    @property
    def connection(self) -> WalletConnection:
        return self._connection

    @property
    def connected(self) -> bool:
        return self._connection.connected

    @property
    def wallet(self) -> Optional[WalletCapability]:
        """Connected capability, None unless connected"""
        return self._wallet if self.connected else None

    async def connect(self, provider_id: Union[str, WalletProvider]) -> WalletConnection:
        """
        Connect to a supported wallet

        Args:
            provider_id: One of the WalletProvider values

        Returns:
            Resulting connection snapshot

        Raises:
            UnsupportedWalletError: provider_id is not a supported wallet
        """
        provider = WalletProvider.parse(provider_id)
        await self._release_current()
        wallet = self.injected.get(provider.injected_key)

        if wallet is None:
            message = (
                f'Wallet "{provider.value}" is not installed. '
                "Please install it first from its official website."
            )
            self._set(ConnectionState.ERROR, message, provider=provider, error=message)
            return self._connection

        self._set(ConnectionState.CONNECTING, f"Connecting to {provider.value}...", provider=provider)
        try:
            await wallet.connect()
        except Exception as e:
            logger.error(f"Connection error: {e}")
            self._wallet = None
            self._set(
                ConnectionState.ERROR,
                "Failed to connect. Maybe you rejected the connection or there was a network issue.",
                provider=provider,
                error=str(e),
            )
            return self._connection

        self._wallet = wallet
        self._set(ConnectionState.CONNECTED, f"Connected to {provider.value}!", provider=provider)
        return self._connection

    async def disconnect(self) -> WalletConnection:
        """Disconnect from the current wallet, if any"""
        wallet = self._wallet
        try:
            if wallet is not None:
                await wallet.disconnect()
        except Exception as e:
            logger.error(f"Disconnect error: {e}")
            self._wallet = None
            self._set(ConnectionState.ERROR, "Error while disconnecting. Please reload the page.", error=str(e))
            return self._connection

        self._wallet = None
        self._set(ConnectionState.DISCONNECTED, "Disconnected from wallet.")
        return self._connection

    async def _release_current(self) -> None:
        """Disconnect the capability held from a previous connect, if any"""
        wallet, self._wallet = self._wallet, None
        if wallet is None:
            return
        try:
            await wallet.disconnect()
        except Exception as e:
            logger.error(f"Error releasing previous wallet: {e}")

    def _set(
        self,
        state: ConnectionState,
        message: str,
        provider: Optional[WalletProvider] = None,
        error: Optional[str] = None,
    ) -> None:
        self._connection = WalletConnection(state=state, provider=provider, status_message=message, error=error)
