"""
Test Data Factories

Provides factory functions to generate test data for API testing.
"""

import random


class CardanoAddressFactory:
    """Factory for generating valid-looking Cardano addresses"""

    @staticmethod
    def create_testnet_address(prefix: str = "addr_test1") -> str:
        """Generate a testnet address"""
        chars = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
        suffix = "".join(random.choice(chars) for _ in range(50))
        return f"{prefix}{suffix}"


class TransactionFactory:
    """Factory for generating transaction test data"""

    @staticmethod
    def create_tx_hash() -> str:
        """Generate a valid transaction hash"""
        return "".join(random.choice("0123456789abcdef") for _ in range(64))

    @staticmethod
    def create_request(
        tx_hash: str | None = None,
        wallet_address: str | None = None,
        network: str | None = "preprod",
    ) -> dict:
        """Create a POST /api/transactions body"""
        body = {
            "txHash": tx_hash if tx_hash is not None else TransactionFactory.create_tx_hash(),
            "walletAddress": wallet_address or CardanoAddressFactory.create_testnet_address(),
        }
        if network is not None:
            body["network"] = network
        return body
