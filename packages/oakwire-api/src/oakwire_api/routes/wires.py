import logging

from fastapi import APIRouter, Depends, HTTPException
from oakwire_api.dependencies import get_audit
from oakwire_api.models import QuoteRequest
from oakwire_api.safeguards import AuditLog
from oakwire_sdk import (
    InstructionField,
    TransferInstruction,
    ValidationResult,
    check_funds,
    quote_wire,
    validate_account_number,
    validate_amount,
    validate_instruction,
    validate_routing_number,
    validate_swift_code,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/wires")


def _check_field(
    field: InstructionField, body: TransferInstruction
) -> ValidationResult:
    if field == InstructionField.ROUTING_NUMBER:
        return validate_routing_number(
            body.routing_number, body.transfer_type, body.country
        )
    if field == InstructionField.ACCOUNT_NUMBER:
        return validate_account_number(body.account_number, body.transfer_type)
    if field == InstructionField.SWIFT_CODE:
        return validate_swift_code(body.swift_code)
    return validate_amount(body.amount)


@router.post("/validate")
def validate(
    body: TransferInstruction,
    audit: AuditLog | None = Depends(get_audit),
) -> dict:
    report = validate_instruction(body)

    if audit is not None:
        audit.log(
            "instruction_validated" if report.valid else "instruction_rejected",
            transfer_type=body.transfer_type,
            account_number=body.account_number,
            amount=report.results[InstructionField.AMOUNT].value,
            errors=report.errors,
        )

    return report.model_dump(mode="json")


@router.post("/validate/{field}")
def validate_field(field: str, body: TransferInstruction) -> dict:
    try:
        name = InstructionField(field)

    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown field '{field}'")

    return _check_field(name, body).model_dump(mode="json")


@router.post("/quote")
def quote(
    body: QuoteRequest,
    audit: AuditLog | None = Depends(get_audit),
) -> dict:
    report = validate_instruction(body)

    if not report.valid:
        raise HTTPException(status_code=422, detail={"errors": report.errors})

    result = quote_wire(body.amount, body.transfer_type, urgent=body.urgent)

    if body.balance is not None:
        funds = check_funds(body.balance, result)

        if not funds.valid:
            log.info(
                "Quote refused for %s wire: %s",
                body.transfer_type,
                funds.error,
            )
            raise HTTPException(status_code=400, detail=funds.error)

    if audit is not None:
        audit.log(
            "quote_issued",
            transfer_type=body.transfer_type,
            account_number=body.account_number,
            amount=str(result.amount),
            total=str(result.total),
        )

    return result.model_dump(mode="json")
