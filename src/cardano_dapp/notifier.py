"""
Persistence Notifier

Reports successful transactions to the collector service.
"""

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class PersistenceNotifier:
    """Best-effort client for POST /api/transactions"""

    def __init__(
        self,
        base_url: str = "http://localhost:4000",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize notifier

        Args:
            base_url: Collector service base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def notify(self, tx_hash: str, wallet_address: str, network: str) -> Optional[Dict[str, Any]]:
        """
        Send a transaction record to the collector

        Never raises; failures are logged and reported as None.

        Returns:
            Collector response body, or None if the request failed
        """
        payload = {"txHash": tx_hash, "walletAddress": wallet_address, "network": network}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(f"{self.base_url}/api/transactions", json=payload)
                response.raise_for_status()
                return response.json()
        except Exception as e:
            logger.error(f"Failed to notify backend about transaction: {e}")
            return None
