from oakwire_sdk.config import DATA_DIR, FeeSchedule, get_fee_schedule
from oakwire_sdk.exceptions import (
    InstructionRejectedError,
    InvalidAmountError,
    OakwireError,
)
from oakwire_sdk.fees import check_funds, quote_wire
from oakwire_sdk.models import (
    InstructionReport,
    TransferInstruction,
    ValidationResult,
    WireQuote,
)
from oakwire_sdk.types import ErrorCode, InstructionField, TransferType
from oakwire_sdk.validators import (
    MAX_TRANSFER_AMOUNT,
    parse_amount,
    validate_account_number,
    validate_amount,
    validate_instruction,
    validate_routing_number,
    validate_swift_code,
)
