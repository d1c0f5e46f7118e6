"""
Cardano dApp Client Library

Wallet connection, balance formatting, the self-transfer transaction workflow
and the notifier that reports transactions to the collector service.
"""

from .balance import BalanceSnapshot, format_lovelace_to_ada, lovelace_from_assets
from .capability import Asset, WalletCapability, WalletCapabilityError
from .connection import ConnectionState, WalletConnection, WalletConnectionManager
from .details import WalletDetails
from .notifier import PersistenceNotifier
from .providers import InjectedWallets, UnsupportedWalletError, WalletProvider
from .workflow import InvalidTransitionError, TransactionStatus, TransactionWorkflow, TxStep


__all__ = [
    "Asset",
    "BalanceSnapshot",
    "ConnectionState",
    "InjectedWallets",
    "InvalidTransitionError",
    "PersistenceNotifier",
    "TransactionStatus",
    "TransactionWorkflow",
    "TxStep",
    "UnsupportedWalletError",
    "WalletCapability",
    "WalletCapabilityError",
    "WalletConnection",
    "WalletConnectionManager",
    "WalletDetails",
    "WalletProvider",
    "format_lovelace_to_ada",
    "lovelace_from_assets",
]
