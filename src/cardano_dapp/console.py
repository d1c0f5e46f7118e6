"""
dApp Console

Interactive menu to connect a wallet, check its balance and send 1 ADA to self.
"""

import asyncio
import logging
from typing import Optional

from dotenv import load_dotenv

from .balance import format_lovelace_to_ada
from .chain_context import CardanoChainContext
from .config import DappSettings
from .connection import WalletConnectionManager
from .details import WalletDetails
from .menu_formatter import MenuFormatter
from .notifier import PersistenceNotifier
from .providers import InjectedWallets, WalletProvider
from .wallet import MnemonicWallet
from .workflow import TransactionStatus, TransactionWorkflow, TxStep

logger = logging.getLogger(__name__)


class DappConsole:
    """Console front-end wiring the connection manager, wallet details and workflow"""

    def __init__(
        self,
        injected: InjectedWallets,
        settings: Optional[DappSettings] = None,
        menu: Optional[MenuFormatter] = None,
    ):
        self.settings = settings or DappSettings()
        self.menu = menu or MenuFormatter()
        self.connection_manager = WalletConnectionManager(injected)
        self.details = WalletDetails(self.connection_manager)
        self.workflow = TransactionWorkflow(
            self.connection_manager,
            self.details,
            notifier=PersistenceNotifier(self.settings.backend_url),
            network=self.settings.network,
            confirm_delay=self.settings.confirm_delay_seconds,
            on_status=self.show_step,
        )

    @classmethod
    def from_settings(cls, settings: Optional[DappSettings] = None) -> "DappConsole":
        """Build a console, installing the mnemonic wallet if one is configured"""
        settings = settings or DappSettings()
        menu = MenuFormatter()
        injected = InjectedWallets()

        if settings.wallet_mnemonic and settings.blockfrost_api_key:
            chain_context = CardanoChainContext(settings.network, settings.blockfrost_api_key)

            def approve(unsigned_tx: str):
                return asyncio.to_thread(menu.confirm_action, "Sign transaction sending 1 ADA to your own address?")

            wallet = MnemonicWallet(settings.wallet_mnemonic, chain_context, approve=approve)
            injected.inject(WalletProvider.parse(settings.injected_wallet).injected_key, wallet)
        else:
            logger.info("No wallet_mnemonic/blockfrost_api_key configured, no wallet installed")

        return cls(injected, settings=settings, menu=menu)

    def show_step(self, status: TransactionStatus) -> None:
        if status.step is not TxStep.IDLE:
            self.menu.print_info(f"[{status.step.value}] {status.message}")

    def show_wallet(self) -> None:
        connection = self.connection_manager.connection
        provider = connection.provider.label if connection.provider and connection.connected else None
        self.menu.print_status_bar(self.settings.network, connection.connected, provider)
        self.menu.print_field("Status:", connection.status_message)
        if connection.connected:
            self.menu.print_field("Address:", self.details.address)
            self.menu.print_field("Balance:", self.details.balance.describe())

    def show_transaction(self) -> None:
        status = self.workflow.status
        self.menu.print_section("Transaction Status")
        self.menu.print_field("Step:", status.step.value)
        self.menu.print_field("Message:", status.message)
        if status.tx_hash:
            self.menu.print_field("Tx Hash:", status.tx_hash)
            self.menu.print_field("Explorer:", status.explorer_url(self.settings.network))
        self.menu.print_footer()

    async def connect(self, provider: WalletProvider) -> None:
        connection = await self.connection_manager.connect(provider)
        if connection.connected:
            self.menu.print_success(connection.status_message)
            await self.details.refresh()
        else:
            self.menu.print_error(connection.status_message)

    async def disconnect(self) -> None:
        connection = await self.connection_manager.disconnect()
        self.details.reset()
        self.menu.print_info(connection.status_message)

    async def check_balance(self) -> None:
        balance = await self.details.refresh_balance()
        self.menu.print_info(f"Balance: {balance.lovelace} lovelace ({format_lovelace_to_ada(balance.lovelace)} ADA)")

    async def send_to_self(self) -> None:
        if self.workflow.is_running:
            self.menu.print_info("A transaction is already in progress.")
            return
        status = await self.workflow.send_to_self()
        if status.step is TxStep.SUCCESS:
            self.menu.print_success(status.message)
        elif status.step is TxStep.ERROR:
            self.menu.print_error(status.message)
        self.show_transaction()

    def print_menu(self) -> None:
        self.menu.print_section("Main Menu")
        if self.connection_manager.connected:
            self.menu.print_menu_option("1", "Check Balance")
            self.menu.print_menu_option("2", "Send 1 ADA to Self")
            self.menu.print_menu_option("3", "Transaction Status")
            self.menu.print_menu_option("4", "Disconnect")
        else:
            for number, provider in enumerate(WalletProvider, start=1):
                self.menu.print_menu_option(str(number), f"Connect {provider.label}")
        self.menu.print_menu_option("0", "Exit")
        self.menu.print_footer()

    async def handle(self, choice: str) -> bool:
        """Run one menu choice, returning False when the user wants to exit"""
        if choice == "0":
            return False

        if self.connection_manager.connected:
            actions = {
                "1": self.check_balance,
                "2": self.send_to_self,
                "4": self.disconnect,
            }
            if choice == "3":
                self.show_transaction()
            elif choice in actions:
                await actions[choice]()
            else:
                self.menu.print_error("Invalid option")
            return True

        providers = list(WalletProvider)
        if choice.isdigit() and 1 <= int(choice) <= len(providers):
            await self.connect(providers[int(choice) - 1])
        else:
            self.menu.print_error("Invalid option")
        return True

    async def run(self) -> None:
        self.menu.print_header(
            "My First Cardano dApp",
            "Connect your Cardano testnet wallet, see your balance, and send 1 ADA to yourself.",
        )
        while True:
            self.show_wallet()
            self.print_menu()
            choice = await asyncio.to_thread(self.menu.get_input, "Select an option")
            if not await self.handle(choice):
                break
        if self.connection_manager.connected:
            await self.connection_manager.disconnect()


def main() -> None:
    load_dotenv()
    settings = DappSettings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        asyncio.run(DappConsole.from_settings(settings).run())
    except KeyboardInterrupt:
        print("\nGoodbye!")


if __name__ == "__main__":
    main()
