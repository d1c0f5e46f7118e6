"""
Balance Formatter Tests
"""

import pytest

from cardano_dapp.balance import BalanceSnapshot, format_lovelace_to_ada, lovelace_from_assets
from cardano_dapp.capability import Asset


@pytest.mark.unit
class TestFormatLovelaceToAda:
    @pytest.mark.parametrize(
        "lovelace, expected",
        [
            (1_000_000, "1.000000"),
            (1, "0.000001"),
            (0, "0.000000"),
            (999_999, "0.999999"),
            (12_345_678, "12.345678"),
            ("1000000", "1.000000"),
            (" 2500000 ", "2.500000"),
        ],
    )
    def test_known_values(self, lovelace, expected):
        assert format_lovelace_to_ada(lovelace) == expected

    def test_matches_integer_division(self):
        for m in [0, 7, 10**6 - 1, 10**6, 10**6 + 1, 45_000_000_000_000_000, 2**64 + 12345]:
            assert format_lovelace_to_ada(m) == f"{m // 10**6}.{m % 10**6:06d}"

    def test_beyond_64_bit_is_exact(self):
        lovelace = "123456789012345678901234567890"
        assert format_lovelace_to_ada(lovelace) == "123456789012345678901234.567890"

    @pytest.mark.parametrize("malformed", [None, "", "abc", "1.5", "-5", -5, 1.5, True, [], {}, "١٢"])
    def test_malformed_is_zero(self, malformed):
        assert format_lovelace_to_ada(malformed) == "0.000000"


@pytest.mark.unit
class TestLovelaceFromAssets:
    def test_picks_lovelace(self):
        assets = [Asset(unit="abc.def", quantity="3"), Asset(unit="lovelace", quantity="4200000")]
        assert lovelace_from_assets(assets) == "4200000"

    def test_dict_items(self):
        assert lovelace_from_assets([{"unit": "lovelace", "quantity": "15"}]) == "15"

    def test_missing_lovelace(self):
        assert lovelace_from_assets([Asset(unit="abc.def", quantity="3")]) == "0"
        assert lovelace_from_assets([]) == "0"
        assert lovelace_from_assets(None) == "0"


@pytest.mark.unit
class TestBalanceSnapshot:
    def test_describe(self):
        assert BalanceSnapshot(lovelace="1500000").describe() == "1500000 lovelace (1.500000 ADA)"

    def test_loading(self):
        assert BalanceSnapshot(loading=True).describe() == "Loading balance..."

    def test_ada(self):
        assert BalanceSnapshot().ada == "0.000000"
