"""Wire fee quotes and the funds check that goes with them.

A wire costs a flat base fee that depends on the transfer type, plus a
surcharge when the customer asks for urgent (same-day) delivery. The account
must cover the amount and all fees.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from oakwire_sdk.config import FeeSchedule, get_fee_schedule
from oakwire_sdk.exceptions import InvalidAmountError
from oakwire_sdk.models import ValidationResult, WireQuote
from oakwire_sdk.types import ErrorCode, TransferType
from oakwire_sdk.validators import parse_amount

log = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def quote_wire(
    amount: Decimal | str | int | float,
    transfer_type: TransferType | str,
    urgent: bool = False,
    schedule: FeeSchedule | None = None,
) -> WireQuote:
    """Price a wire transfer.

    Raises InvalidAmountError when ``amount`` does not parse, is not a whole
    number of cents, or is not positive. The transfer limit belongs to
    validate_amount and is not repeated here.
    """
    parsed = parse_amount(amount)
    if parsed is None:
        raise InvalidAmountError(amount)

    try:
        amount_cents = _money(parsed)
    except InvalidOperation:
        raise InvalidAmountError(amount, "too many digits")

    if amount_cents != parsed:
        raise InvalidAmountError(amount, "fractions of a cent are not allowed")
    if amount_cents <= 0:
        raise InvalidAmountError(amount, "must be greater than 0")

    schedule = schedule or get_fee_schedule()
    transfer_type = TransferType(transfer_type)

    if transfer_type == TransferType.INTERNATIONAL:
        fee = schedule.international_fee
    else:
        fee = schedule.domestic_fee

    urgent_fee = schedule.urgent_fee if urgent else Decimal("0")
    total_fee = fee + urgent_fee

    quote = WireQuote(
        transfer_type=transfer_type,
        urgent=urgent,
        amount=amount_cents,
        fee=_money(fee),
        urgent_fee=_money(urgent_fee),
        total_fee=_money(total_fee),
        total=_money(amount_cents + total_fee),
    )

    log.debug(
        "Quoted %s wire of %s: fees=%s total=%s",
        transfer_type,
        quote.amount,
        quote.total_fee,
        quote.total,
    )

    return quote


def check_funds(
    balance: Decimal | str | int | float | None, quote: WireQuote
) -> ValidationResult:
    """Check that ``balance`` covers the quoted total, fees included."""
    parsed = parse_amount(balance)

    if parsed is None:
        return ValidationResult.fail(
            ErrorCode.INVALID_AMOUNT, "Balance must be a valid number"
        )

    if parsed < quote.total:
        return ValidationResult.fail(
            ErrorCode.INSUFFICIENT_FUNDS, "Insufficient funds (including fees)"
        )

    return ValidationResult.ok(value=str(parsed))
