"""Append-only audit trail for wire instruction checks.

Writes one JSON line per event to an immutable JSONL file. Account numbers
are reduced to their last four characters before they reach the file.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from oakwire_sdk.config import DATA_DIR

log = logging.getLogger(__name__)

DEFAULT_PATH = DATA_DIR / ".audit.jsonl"


def mask_account(account_number: str | None) -> str | None:
    """Return ``account_number`` with all but the last four characters hidden."""
    if not account_number:
        return None
    compact = "".join(account_number.split())
    if len(compact) <= 4:
        return "*" * len(compact)
    return "*" * (len(compact) - 4) + compact[-4:]


class AuditLog:
    """Append-only JSONL audit logger for validation and quote events."""

    def __init__(self, path: Path = DEFAULT_PATH) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def log(
        self,
        event_type: str,
        *,
        transfer_type: str | None = None,
        account_number: str | None = None,
        amount: str | None = None,
        total: str | None = None,
        errors: dict[str, str] | None = None,
    ) -> None:
        """Write a single audit event as a JSON line."""
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
        }
        if transfer_type is not None:
            entry["transfer_type"] = str(transfer_type)
        masked = mask_account(account_number)
        if masked is not None:
            entry["account"] = masked
        if amount is not None:
            entry["amount"] = amount
        if total is not None:
            entry["total"] = total
        if errors:
            entry["errors"] = errors

        with open(self._path, "a") as f:
            f.write(json.dumps(entry) + "\n")

        log.info("Audit: %s transfer_type=%s", event_type, transfer_type)
