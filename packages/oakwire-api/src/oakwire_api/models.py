from decimal import Decimal

from oakwire_sdk import TransferInstruction


class QuoteRequest(TransferInstruction):
    balance: Decimal | str | int | float | None = None
