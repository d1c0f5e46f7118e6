"""
Wallet Providers

The fixed set of supported wallet brands and the registry of wallets that are
actually installed (the console equivalent of the browser's `window.cardano`).
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from .capability import WalletCapability


class UnsupportedWalletError(ValueError):
    """Provider id is not one of the supported wallets"""
    pass


class WalletProvider(str, Enum):
    """Supported wallet brands"""

    NAMI = "nami"
    ETERNL = "eternl"
    FLINT = "flint-wallet"

    @property
    def injected_key(self) -> str:
        """Key under which the wallet injects itself"""
        if self is WalletProvider.FLINT:
            return "flint"
        return self.value.lower()

    @property
    def label(self) -> str:
        if self is WalletProvider.FLINT:
            return "Flint"
        return self.value.capitalize()

    @classmethod
    def parse(cls, provider_id: Union[str, "WalletProvider"]) -> "WalletProvider":
        try:
            return cls(provider_id)
        except ValueError:
            raise UnsupportedWalletError(f"Unsupported wallet: {provider_id}") from None


class InjectedWallets:
    """Registry of installed wallet capabilities keyed by injected key"""

    def __init__(self):
        self._wallets: Dict[str, WalletCapability] = {}

    def inject(self, key: str, wallet: WalletCapability) -> None:
        self._wallets[key] = wallet

    def remove(self, key: str) -> bool:
        return self._wallets.pop(key, None) is not None

    def get(self, key: str) -> Optional[WalletCapability]:
        return self._wallets.get(key)

    def is_installed(self, key: str) -> bool:
        return key in self._wallets

    def keys(self) -> List[str]:
        return list(self._wallets.keys())
