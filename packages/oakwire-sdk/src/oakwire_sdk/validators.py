"""Field-level checks for wire transfer instructions.

Every validator is a pure function returning a ValidationResult. Bad input
is reported, never raised, so the checks are safe to run on every keystroke
of a form as well as once more on submission.
"""

import logging
import re
from decimal import Decimal, InvalidOperation

from oakwire_sdk.models import (
    InstructionReport,
    TransferInstruction,
    ValidationResult,
)
from oakwire_sdk.types import ErrorCode, InstructionField, TransferType

log = logging.getLogger(__name__)

MAX_TRANSFER_AMOUNT = Decimal("999999999.99")

ROUTING_NUMBER_LENGTH = 9
ACCOUNT_NUMBER_MIN_LENGTH = 8
ACCOUNT_NUMBER_MAX_LENGTH = 17

_WHITESPACE = re.compile(r"\s")
_DIGITS = re.compile(r"[0-9]+")
_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")
_SWIFT_CODE = re.compile(r"[A-Z]{4}[A-Z]{2}[A-Z0-9]{2}([A-Z0-9]{3})?")


def _strip_whitespace(value: str) -> str:
    return _WHITESPACE.sub("", value)


def parse_amount(amount: Decimal | str | int | float | None) -> Decimal | None:
    """Normalize a loosely-typed amount into a finite Decimal.

    Returns None for empty or unparseable input. Floats are converted through
    their shortest repr so that 0.1 becomes Decimal("0.1") rather than the
    exact binary expansion.
    """
    if amount is None or isinstance(amount, bool):
        return None

    if isinstance(amount, Decimal):
        parsed = amount
    elif isinstance(amount, int):
        parsed = Decimal(amount)
    elif isinstance(amount, float):
        parsed = Decimal(str(amount))
    elif isinstance(amount, str):
        text = amount.strip()
        if not text:
            return None
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not parsed.is_finite():
        return None

    return parsed


def validate_routing_number(
    routing: str | None,
    transfer_type: TransferType | str,
    country: str = "US",
) -> ValidationResult:
    """Check a routing number for a domestic transfer.

    International routing is not checked here; those transfers identify the
    receiving bank by SWIFT code instead. ``country`` is accepted for future
    per-country rules and currently unused.
    """
    if transfer_type != TransferType.DOMESTIC:
        return ValidationResult.ok(value=routing)

    if not routing:
        return ValidationResult.fail(
            ErrorCode.MISSING_FIELD, "Routing number is required"
        )

    sanitized = _strip_whitespace(routing)

    if len(sanitized) != ROUTING_NUMBER_LENGTH:
        return ValidationResult.fail(
            ErrorCode.INVALID_LENGTH,
            "US routing number must be exactly 9 digits "
            f"(you entered {len(sanitized)})",
            value=sanitized,
        )

    if not _DIGITS.fullmatch(sanitized):
        return ValidationResult.fail(
            ErrorCode.INVALID_FORMAT,
            "US routing number must contain only numbers",
            value=sanitized,
        )

    return ValidationResult.ok(value=sanitized)


def validate_account_number(
    account_number: str | None,
    transfer_type: TransferType | str = TransferType.DOMESTIC,
) -> ValidationResult:
    """Check a beneficiary account number.

    The same 8-17 alphanumeric rule applies to every transfer type.
    """
    if not account_number:
        return ValidationResult.fail(
            ErrorCode.MISSING_FIELD, "Account number is required"
        )

    sanitized = _strip_whitespace(account_number)
    length = len(sanitized)

    if length < ACCOUNT_NUMBER_MIN_LENGTH or length > ACCOUNT_NUMBER_MAX_LENGTH:
        return ValidationResult.fail(
            ErrorCode.INVALID_LENGTH,
            "Account number must be between 8-17 characters "
            f"(you entered {length})",
            value=sanitized,
        )

    if not _ALPHANUMERIC.fullmatch(sanitized):
        return ValidationResult.fail(
            ErrorCode.INVALID_FORMAT,
            "Account number must contain only letters and numbers",
            value=sanitized,
        )

    return ValidationResult.ok(value=sanitized)


def validate_swift_code(swift_code: str | None) -> ValidationResult:
    """Check the shape of an 8 or 11 character SWIFT/BIC code.

    An absent code is valid; whether one is required is the caller's call.
    """
    if not swift_code:
        return ValidationResult.ok()

    trimmed = swift_code.strip()

    if not _SWIFT_CODE.fullmatch(trimmed):
        return ValidationResult.fail(
            ErrorCode.INVALID_FORMAT,
            "Invalid SWIFT code format (e.g., CHASUS33)",
            value=trimmed,
        )

    return ValidationResult.ok(value=trimmed)


def validate_amount(amount: Decimal | str | int | float | None) -> ValidationResult:
    parsed = parse_amount(amount)

    if parsed is None:
        if isinstance(amount, str) and amount.strip():
            return ValidationResult.fail(
                ErrorCode.INVALID_AMOUNT, "Amount must be a valid number"
            )
        return ValidationResult.fail(
            ErrorCode.INVALID_AMOUNT, "Amount must be greater than 0"
        )

    if parsed <= 0:
        return ValidationResult.fail(
            ErrorCode.INVALID_AMOUNT,
            "Amount must be greater than 0",
            value=str(parsed),
        )

    if parsed > MAX_TRANSFER_AMOUNT:
        return ValidationResult.fail(
            ErrorCode.EXCEEDS_LIMIT,
            "Amount exceeds maximum transfer limit",
            value=str(parsed),
        )

    return ValidationResult.ok(value=str(parsed))


def validate_instruction(instruction: TransferInstruction) -> InstructionReport:
    """Run every field check over an instruction and collect the results.

    International transfers must carry a SWIFT code.
    """
    transfer_type = instruction.transfer_type

    if transfer_type == TransferType.INTERNATIONAL and not instruction.swift_code:
        swift = ValidationResult.fail(
            ErrorCode.MISSING_FIELD,
            "SWIFT code is required for international transfers",
        )
    else:
        swift = validate_swift_code(instruction.swift_code)

    results = {
        InstructionField.ROUTING_NUMBER.value: validate_routing_number(
            instruction.routing_number, transfer_type, instruction.country
        ),
        InstructionField.ACCOUNT_NUMBER.value: validate_account_number(
            instruction.account_number, transfer_type
        ),
        InstructionField.SWIFT_CODE.value: swift,
        InstructionField.AMOUNT.value: validate_amount(instruction.amount),
    }

    report = InstructionReport(transfer_type=transfer_type, results=results)

    log.debug(
        "Validated %s instruction: valid=%s errors=%s",
        transfer_type,
        report.valid,
        list(report.errors),
    )

    return report
