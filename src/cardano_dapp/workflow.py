"""
Self-Transfer Transaction Workflow

Drives one "send 1 ADA to self" run through an explicit state machine:

    idle → building → signing → submitting → confirming → success
                 ↘          ↘            ↘            ↘
                                error

All ledger work (building, signing, submitting) is delegated to the connected
wallet capability. After success the transaction hash is reported to the
collector service on a best-effort basis.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Dict, FrozenSet, Optional

from .chain_context import explorer_url
from .connection import WalletConnectionManager
from .details import WalletDetails
from .notifier import PersistenceNotifier

logger = logging.getLogger(__name__)


ONE_ADA_IN_LOVELACE = 1_000_000
CONFIRM_DELAY_SECONDS = 8.0
DEFAULT_NETWORK = "preprod"
GENERIC_FAILURE_MESSAGE = "Transaction failed. Please check your wallet and try again."


class TxStep(str, Enum):
    """Workflow steps"""

    IDLE = "idle"
    BUILDING = "building"
    SIGNING = "signing"
    SUBMITTING = "submitting"
    CONFIRMING = "confirming"
    SUCCESS = "success"
    ERROR = "error"


ALLOWED_TRANSITIONS: Dict[TxStep, FrozenSet[TxStep]] = {
    TxStep.IDLE: frozenset({TxStep.BUILDING, TxStep.ERROR}),
    TxStep.BUILDING: frozenset({TxStep.SIGNING, TxStep.ERROR}),
    TxStep.SIGNING: frozenset({TxStep.SUBMITTING, TxStep.ERROR}),
    TxStep.SUBMITTING: frozenset({TxStep.CONFIRMING, TxStep.ERROR}),
    TxStep.CONFIRMING: frozenset({TxStep.SUCCESS, TxStep.ERROR}),
    TxStep.SUCCESS: frozenset({TxStep.IDLE}),
    TxStep.ERROR: frozenset({TxStep.IDLE}),
}

TERMINAL_STEPS = frozenset({TxStep.SUCCESS, TxStep.ERROR})


class InvalidTransitionError(Exception):
    """Transition not allowed by the workflow state machine"""
    pass


@dataclass(frozen=True)
class TransactionStatus:
    """Current step of the workflow, as shown to the user"""

    step: TxStep = TxStep.IDLE
    message: str = "No transaction started yet."
    tx_hash: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.step in TERMINAL_STEPS

    def explorer_url(self, network: str = DEFAULT_NETWORK) -> Optional[str]:
        if not self.tx_hash:
            return None
        return explorer_url(self.tx_hash, network)


INITIAL_STATUS = TransactionStatus()


def describe_error(error: BaseException) -> str:
    """Most specific message available for a failed step"""
    info = getattr(error, "info", None)
    if isinstance(info, dict) and info.get("message"):
        return str(info["message"])
    message = str(error)
    return message if message else GENERIC_FAILURE_MESSAGE


class TransactionWorkflow:
    """
    Sends 1 ADA from the connected wallet back to its own change address

    At most one run is active at a time; triggering a run while one is in
    flight (or while no wallet is connected) does nothing.
    """

    def __init__(
        self,
        connection_manager: WalletConnectionManager,
        details: WalletDetails,
        notifier: Optional[PersistenceNotifier] = None,
        network: str = DEFAULT_NETWORK,
        amount_lovelace: int = ONE_ADA_IN_LOVELACE,
        confirm_delay: float = CONFIRM_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        on_status: Optional[Callable[[TransactionStatus], None]] = None,
    ):
        """
        Initialize workflow

        Args:
            connection_manager: Source of the connected wallet capability
            details: Balance holder refreshed after submission
            notifier: Collector client told about successful transactions
            network: Network label reported to the collector
            amount_lovelace: Amount sent to self
            confirm_delay: Seconds to wait after submission before refreshing the balance
            sleep: Coroutine used for the post-submission wait
            on_status: Called with every new status
        """
        self.connection_manager = connection_manager
        self.details = details
        self.notifier = notifier
        self.network = network
        self.amount_lovelace = amount_lovelace
        self.confirm_delay = confirm_delay
        self._sleep = sleep
        self._on_status = on_status
        self._status = INITIAL_STATUS
        self._running = False

    @property
    def status(self) -> TransactionStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        return self._running

    def _transition(self, step: TxStep, message: str, tx_hash: Optional[str] = None) -> TransactionStatus:
        if step not in ALLOWED_TRANSITIONS[self._status.step]:
            raise InvalidTransitionError(f"Cannot move from {self._status.step.value} to {step.value}")
        if self._status.tx_hash and step is not TxStep.IDLE:
            # Hash is kept for the rest of the run once submission succeeded
            tx_hash = self._status.tx_hash
        self._status = TransactionStatus(step=step, message=message, tx_hash=tx_hash)
        logger.debug(f"Transaction step: {step.value}")
        if self._on_status is not None:
            self._on_status(self._status)
        return self._status

    async def send_to_self(self) -> TransactionStatus:
        """
        Run the full build → sign → submit → confirm sequence

        Returns:
            Final status of the run, or the unchanged status if the call was ignored
        """
        wallet = self.connection_manager.wallet
        if self._running or wallet is None:
            return self._status

        self._running = True
        try:
            if self._status.step is not TxStep.IDLE:
                self._transition(TxStep.IDLE, INITIAL_STATUS.message)

            self._transition(TxStep.BUILDING, "Building transaction to send 1 ADA to your own address...")
            try:
                change_address = await wallet.get_change_address()
                unsigned_tx = await wallet.build_transfer(change_address, self.amount_lovelace)

                self._transition(TxStep.SIGNING, "Please sign the transaction in your wallet...")
                signed_tx = await wallet.sign_tx(unsigned_tx)

                self._transition(TxStep.SUBMITTING, "Submitting transaction to the Cardano testnet...")
                tx_hash = await wallet.submit_tx(signed_tx)

                self._transition(
                    TxStep.CONFIRMING,
                    "Transaction submitted! Waiting briefly before updating balance...",
                    tx_hash=tx_hash,
                )
                await self._sleep(self.confirm_delay)
                await self.details.refresh_balance()

                self._transition(TxStep.SUCCESS, "Transaction successful!", tx_hash=tx_hash)
            except Exception as e:
                logger.error(f"Transaction error: {e}")
                self._transition(TxStep.ERROR, describe_error(e))
                return self._status

            if self.notifier is not None:
                try:
                    await self.notifier.notify(tx_hash, change_address, self.network)
                except Exception as e:
                    logger.error(f"Failed to notify backend about transaction: {e}")
            return self._status
        finally:
            self._running = False
