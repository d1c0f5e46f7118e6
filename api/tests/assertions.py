"""
Custom Assertions for API Testing

Provides reusable assertion functions for collector responses.
"""

import re
from datetime import datetime


def assert_valid_transaction_hash(tx_hash: str):
    """Assert that a string is a valid transaction hash"""
    assert len(tx_hash) == 64, f"Transaction hash must be 64 characters, got {len(tx_hash)}"
    assert re.match(r"^[0-9a-f]{64}$", tx_hash), f"Invalid transaction hash format: {tx_hash}"


def assert_ok_response(response, expected_status: int = 200, expected_keys: list[str] | None = None):
    """Assert that an API response is successful and contains expected keys"""
    assert response.status_code == expected_status, (
        f"Expected {expected_status}, got {response.status_code}: {response.text}"
    )

    data = response.json()
    assert data["ok"] is True, f"Expected ok=true: {data}"

    if expected_keys:
        for key in expected_keys:
            assert key in data, f"Missing key '{key}' in response: {data.keys()}"

    return data


def assert_error_response(response, expected_status: int, error_message_contains: str | None = None):
    """Assert that an API response is an error with expected status and message"""
    assert response.status_code == expected_status, f"Expected {expected_status}, got {response.status_code}"

    data = response.json()
    assert data["ok"] is False, f"Expected ok=false: {data}"
    assert "message" in data, f"Error response missing 'message' field: {data}"

    if error_message_contains:
        assert error_message_contains.lower() in data["message"].lower(), (
            f"Expected '{error_message_contains}' in error message, got: {data['message']}"
        )

    return data


def assert_valid_transaction_record(item: dict):
    """Assert that a stored record has valid structure"""
    required_keys = ["txHash", "walletAddress", "network", "createdAt"]
    for key in required_keys:
        assert key in item, f"Missing key '{key}' in transaction record"

    assert isinstance(item["txHash"], str) and item["txHash"], "txHash must be a non-empty string"
    assert item["txHash"] == item["txHash"].strip(), "txHash must be trimmed"
    datetime.fromisoformat(item["createdAt"].replace("Z", "+00:00"))
