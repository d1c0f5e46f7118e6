"""
Pytest configuration for client tests

Fixtures wiring a mock wallet into the connection manager, wallet details and workflow.
"""

import pytest

from cardano_dapp.connection import WalletConnectionManager
from cardano_dapp.details import WalletDetails
from cardano_dapp.providers import InjectedWallets
from cardano_dapp.workflow import TransactionWorkflow
from tests.mocks import MockWallet, RecordingNotifier


@pytest.fixture
def mock_wallet():
    return MockWallet()


@pytest.fixture
def injected(mock_wallet):
    """Only Nami is installed"""
    wallets = InjectedWallets()
    wallets.inject("nami", mock_wallet)
    return wallets


@pytest.fixture
def connection_manager(injected):
    return WalletConnectionManager(injected)


@pytest.fixture
def details(connection_manager):
    return WalletDetails(connection_manager)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def workflow(connection_manager, details, notifier, sleeps):
    async def fake_sleep(seconds: float) -> None:
        sleeps.append(seconds)

    return TransactionWorkflow(connection_manager, details, notifier=notifier, sleep=fake_sleep)
