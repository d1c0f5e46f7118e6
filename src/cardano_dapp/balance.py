"""
Balance Formatting

Lovelace to ADA conversion and the balance snapshot shown for a connected wallet.
All arithmetic is done on Python integers so large balances never lose precision.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional


LOVELACE_PER_ADA = 1_000_000
ADA_DECIMALS = 6
LOVELACE_UNIT = "lovelace"


def _to_lovelace(value: Any) -> int:
    """Normalize an amount to a non-negative int, anything malformed becomes 0"""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit() and text.isascii():
            return int(text)
    return 0


def format_lovelace_to_ada(value: Any) -> str:
    """
    Format a lovelace amount as an ADA string with six decimals

    Args:
        value: Amount in lovelace (int, decimal string or None)

    Returns:
        String like "12.000345". Malformed input is formatted as zero.
    """
    lovelace = _to_lovelace(value)
    ada, remainder = divmod(lovelace, LOVELACE_PER_ADA)
    return f"{ada}.{remainder:0{ADA_DECIMALS}d}"


def _field(asset: Any, name: str) -> Any:
    if isinstance(asset, dict):
        return asset.get(name)
    return getattr(asset, name, None)


def lovelace_from_assets(assets: Optional[Iterable[Any]]) -> str:
    """
    Pick the lovelace quantity out of a wallet balance listing

    Args:
        assets: Items with `unit` and `quantity` (dicts or objects)

    Returns:
        Lovelace quantity as a decimal string, "0" if not present
    """
    for asset in assets or []:
        if _field(asset, "unit") == LOVELACE_UNIT:
            return str(_to_lovelace(_field(asset, "quantity")))
    return "0"


@dataclass(frozen=True)
class BalanceSnapshot:
    """Balance of the connected wallet, replaced as a whole on every fetch"""

    lovelace: str = "0"
    loading: bool = False

    @property
    def ada(self) -> str:
        return format_lovelace_to_ada(self.lovelace)

    def describe(self) -> str:
        if self.loading:
            return "Loading balance..."
        return f"{self.lovelace} lovelace ({self.ada} ADA)"
