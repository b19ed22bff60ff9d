from decimal import Decimal

from pydantic import BaseModel, computed_field, model_validator

from oakwire_sdk.exceptions import InstructionRejectedError
from oakwire_sdk.types import ErrorCode, TransferType


class ValidationResult(BaseModel):
    """Outcome of a single field check.

    ``valid`` is true exactly when ``error`` and ``code`` are both ``None``.
    ``value`` carries the sanitized input the check ran on, for callers that
    go on to submit the instruction.
    """

    model_config = {"frozen": True}

    valid: bool
    error: str | None = None
    code: ErrorCode | None = None
    value: str | None = None

    @model_validator(mode="after")
    def check_consistency(self) -> "ValidationResult":
        if self.valid != (self.error is None) or self.valid != (self.code is None):
            raise ValueError("valid must be True iff error and code are None")
        return self

    @classmethod
    def ok(cls, value: str | None = None) -> "ValidationResult":
        return cls(valid=True, value=value)

    @classmethod
    def fail(
        cls, code: ErrorCode, error: str, value: str | None = None
    ) -> "ValidationResult":
        return cls(valid=False, error=error, code=code, value=value)


class TransferInstruction(BaseModel):
    transfer_type: TransferType = TransferType.DOMESTIC
    routing_number: str | None = None
    account_number: str | None = None
    swift_code: str | None = None
    amount: Decimal | str | int | float | None = None
    country: str = "US"
    urgent: bool = False


class InstructionReport(BaseModel):
    model_config = {"frozen": True}

    transfer_type: TransferType
    results: dict[str, ValidationResult]

    @computed_field
    @property
    def valid(self) -> bool:
        return all(r.valid for r in self.results.values())

    @computed_field
    @property
    def errors(self) -> dict[str, str]:
        return {
            field: r.error
            for field, r in self.results.items()
            if r.error is not None
        }

    def raise_for_errors(self) -> None:
        """Raise InstructionRejectedError if any field failed."""
        if not self.valid:
            raise InstructionRejectedError(self)


class WireQuote(BaseModel):
    transfer_type: TransferType
    urgent: bool
    amount: Decimal
    fee: Decimal
    urgent_fee: Decimal
    total_fee: Decimal
    total: Decimal
