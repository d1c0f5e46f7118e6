"""
Mnemonic Wallet Capability

A wallet capability backed by a BIP39 mnemonic, using PyCardano to build and
sign transactions and Blockfrost to query balances and submit.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, List, Optional, Union

import pycardano as pc
from blockfrost import ApiError

from .capability import Asset, WalletCapability, WalletCapabilityError
from .chain_context import CardanoChainContext

logger = logging.getLogger(__name__)


PAYMENT_DERIVATION_PATH = "m/1852'/1815'/0'/0/0"

SignApproval = Callable[[str], Union[bool, Awaitable[bool]]]


class MnemonicWallet(WalletCapability):
    """Single-address wallet derived from a mnemonic"""

    def __init__(
        self,
        wallet_mnemonic: str,
        chain_context: CardanoChainContext,
        approve: Optional[SignApproval] = None,
    ):
        """
        Initialize wallet from mnemonic

        Args:
            wallet_mnemonic: BIP39 mnemonic phrase
            chain_context: Chain context for the target network
            approve: Called with the unsigned CBOR before signing; returning
                False rejects the signature request
        """
        self.chain_context = chain_context
        self.approve = approve
        self.enabled = False

        hd_wallet = pc.crypto.bip32.HDWallet.from_mnemonic(wallet_mnemonic)
        payment_key = hd_wallet.derive_from_path(PAYMENT_DERIVATION_PATH)
        self.payment_skey = pc.ExtendedSigningKey.from_hdwallet(payment_key)

        self.address = pc.Address(
            payment_part=self.payment_skey.to_verification_key().hash(),
            network=chain_context.cardano_network,
        )

    def _require_enabled(self) -> None:
        if not self.enabled:
            raise WalletCapabilityError("Wallet is not connected", info={"message": "Wallet is not connected"})

    async def connect(self) -> None:
        self.enabled = True

    async def disconnect(self) -> None:
        self.enabled = False

    async def get_change_address(self) -> str:
        self._require_enabled()
        return str(self.address)

    async def get_balance(self) -> List[Asset]:
        self._require_enabled()
        try:
            address = await asyncio.to_thread(self.chain_context.get_api().address, str(self.address))
        except ApiError as e:
            if e.status_code == 404:
                # Address has never been used on chain
                return []
            raise WalletCapabilityError(f"Error fetching balance: {e}", info={"message": str(e)}) from e
        return [Asset(unit=item.unit, quantity=str(item.quantity)) for item in address.amount]

    def _build(self, address: str, lovelace: int) -> str:
        context = self.chain_context.get_context()
        builder = pc.TransactionBuilder(context)
        builder.add_input_address(self.address)
        builder.add_output(pc.TransactionOutput(pc.Address.from_primitive(address), pc.Value(lovelace)))
        tx_body = builder.build(change_address=self.address)
        return pc.Transaction(tx_body, pc.TransactionWitnessSet()).to_cbor_hex()

    async def build_transfer(self, address: str, lovelace: int) -> str:
        self._require_enabled()
        try:
            return await asyncio.to_thread(self._build, address, lovelace)
        except Exception as e:
            message = str(e)
            if isinstance(e, (pc.UTxOSelectionException, pc.InsufficientUTxOBalanceException)):
                message = f"Insufficient funds: {e}"
            raise WalletCapabilityError(f"Error building transaction: {e}", info={"message": message}) from e

    async def _approved(self, unsigned_tx: str) -> bool:
        if self.approve is None:
            return True
        result: Any = self.approve(unsigned_tx)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)

    async def sign_tx(self, unsigned_tx: str) -> str:
        self._require_enabled()
        if not await self._approved(unsigned_tx):
            message = "User declined to sign the transaction."
            raise WalletCapabilityError(message, info={"message": message})

        tx = pc.Transaction.from_cbor(unsigned_tx)
        signature = self.payment_skey.sign(tx.transaction_body.hash())
        witness = pc.VerificationKeyWitness(self.payment_skey.to_verification_key(), signature)
        tx.transaction_witness_set = pc.TransactionWitnessSet(vkey_witnesses=[witness])
        return tx.to_cbor_hex()

    async def submit_tx(self, signed_tx: str) -> str:
        self._require_enabled()
        tx = pc.Transaction.from_cbor(signed_tx)
        try:
            await asyncio.to_thread(self.chain_context.get_context().submit_tx, tx)
        except Exception as e:
            raise WalletCapabilityError(f"Error submitting transaction: {e}", info={"message": str(e)}) from e

        tx_id = tx.id.payload.hex()
        logger.info(f"Submitted transaction {tx_id}")
        return tx_id
