from enum import StrEnum


class TransferType(StrEnum):
    DOMESTIC = "domestic"
    INTERNATIONAL = "international"


class ErrorCode(StrEnum):
    MISSING_FIELD = "MissingField"
    INVALID_LENGTH = "InvalidLength"
    INVALID_FORMAT = "InvalidFormat"
    INVALID_AMOUNT = "InvalidAmount"
    EXCEEDS_LIMIT = "ExceedsLimit"
    INSUFFICIENT_FUNDS = "InsufficientFunds"


class InstructionField(StrEnum):
    ROUTING_NUMBER = "routing_number"
    ACCOUNT_NUMBER = "account_number"
    SWIFT_CODE = "swift_code"
    AMOUNT = "amount"
