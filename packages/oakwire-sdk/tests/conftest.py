"""Shared fixtures for the SDK test suite."""

import pytest

from oakwire_sdk.models import TransferInstruction
from oakwire_sdk.types import TransferType


@pytest.fixture(autouse=True)
def clean_fee_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep fee overrides from the host environment out of the tests."""
    for name in (
        "OAKWIRE_DOMESTIC_FEE",
        "OAKWIRE_INTERNATIONAL_FEE",
        "OAKWIRE_URGENT_FEE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def domestic_instruction() -> TransferInstruction:
    return TransferInstruction(
        transfer_type=TransferType.DOMESTIC,
        routing_number="021000021",
        account_number="12345678901",
        amount="2500.00",
    )


@pytest.fixture
def international_instruction() -> TransferInstruction:
    return TransferInstruction(
        transfer_type=TransferType.INTERNATIONAL,
        account_number="NWBK60161331926",
        swift_code="NWBKGB2L",
        amount=1200,
        country="GB",
    )
