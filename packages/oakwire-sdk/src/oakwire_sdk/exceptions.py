from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from oakwire_sdk.models import InstructionReport


class OakwireError(Exception):
    """Base exception for SDK errors."""


class InstructionRejectedError(OakwireError):
    """A transfer instruction failed one or more field checks."""

    def __init__(self, report: "InstructionReport"):
        self.report = report
        self.errors = report.errors
        super().__init__(f"Instruction rejected: {self.errors}")


class InvalidAmountError(OakwireError):
    """An amount could not be used as a money value."""

    def __init__(self, amount: object, reason: str = "not a number"):
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount: {reason}")
