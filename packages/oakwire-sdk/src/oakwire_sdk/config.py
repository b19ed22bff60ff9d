"""Configuration from environment variables."""

import os
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path


DATA_DIR = Path(os.environ.get("OAKWIRE_DATA_DIR", "."))


@dataclass
class FeeSchedule:
    domestic_fee: Decimal = Decimal("15.00")
    international_fee: Decimal = Decimal("25.00")
    urgent_fee: Decimal = Decimal("10.00")


def get_fee_schedule() -> FeeSchedule:
    """Get the wire fee schedule from environment variables.

    Optional env vars: OAKWIRE_DOMESTIC_FEE, OAKWIRE_INTERNATIONAL_FEE,
    OAKWIRE_URGENT_FEE (decimal strings, e.g. "15.00")
    """

    return FeeSchedule(
        domestic_fee=Decimal(os.environ.get("OAKWIRE_DOMESTIC_FEE", "15.00")),
        international_fee=Decimal(
            os.environ.get("OAKWIRE_INTERNATIONAL_FEE", "25.00")
        ),
        urgent_fee=Decimal(os.environ.get("OAKWIRE_URGENT_FEE", "10.00")),
    )
