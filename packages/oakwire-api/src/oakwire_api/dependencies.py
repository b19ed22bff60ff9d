import secrets

from fastapi import Header, HTTPException, Request
from oakwire_api.safeguards import AuditLog


def get_audit(request: Request) -> AuditLog | None:
    return request.app.state.audit


def verify_api_key(request: Request, x_api_key: str = Header()) -> None:
    if not secrets.compare_digest(x_api_key, request.app.state.api_key):
        raise HTTPException(status_code=401, detail="Invalid API key")
