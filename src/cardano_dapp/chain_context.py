"""
Cardano Chain Context Management

Network configuration and Blockfrost connection setup for the local mnemonic wallet.
"""

from typing import Optional

import pycardano as pc
from blockfrost import ApiUrls, BlockFrostApi


NETWORKS = {
    "preprod": (ApiUrls.preprod.value, pc.Network.TESTNET, "https://preprod.cardanoscan.io"),
    "preview": (ApiUrls.preview.value, pc.Network.TESTNET, "https://preview.cardanoscan.io"),
    "mainnet": (ApiUrls.mainnet.value, pc.Network.MAINNET, "https://cardanoscan.io"),
}


def explorer_url(tx_id: str, network: str = "preprod") -> str:
    """Cardanoscan URL for a transaction"""
    _, _, cardanoscan = NETWORKS.get(network, NETWORKS["preprod"])
    return f"{cardanoscan}/transaction/{tx_id}"


class CardanoChainContext:
    """Manages Cardano chain context and network configuration"""

    def __init__(self, network: str = "preprod", blockfrost_api_key: Optional[str] = None):
        """
        Initialize chain context

        Args:
            network: "preprod", "preview" or "mainnet"
            blockfrost_api_key: BlockFrost project id for the network
        """
        if network not in NETWORKS:
            raise ValueError(f"Unknown network: {network}")
        if not blockfrost_api_key:
            raise ValueError("BlockFrost API key required for chain context")

        self.network = network
        self.base_url, self.cardano_network, self.cardanoscan = NETWORKS[network]

        self.api = BlockFrostApi(project_id=blockfrost_api_key, base_url=self.base_url)
        self.context = pc.BlockFrostChainContext(project_id=blockfrost_api_key, base_url=self.base_url)

    def get_context(self) -> pc.ChainContext:
        """Get the chain context"""
        return self.context

    def get_api(self) -> BlockFrostApi:
        """Get the BlockFrost API instance"""
        return self.api

    def get_explorer_url(self, tx_id: str) -> str:
        return f"{self.cardanoscan}/transaction/{tx_id}"
