"""HTTP client for the Oakwire API server."""

import logging
from decimal import Decimal
from typing import Any

import httpx
from oakwire_client.exceptions import ApiError


log = logging.getLogger(__name__)


def _instruction_body(
    transfer_type: str,
    routing_number: str | None,
    account_number: str | None,
    swift_code: str | None,
    amount: Decimal | str | int | float | None,
    country: str,
    urgent: bool,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "transfer_type": transfer_type,
        "country": country,
        "urgent": urgent,
    }

    if routing_number is not None:
        body["routing_number"] = routing_number

    if account_number is not None:
        body["account_number"] = account_number

    if swift_code is not None:
        body["swift_code"] = swift_code

    if amount is not None:
        body["amount"] = str(amount) if isinstance(amount, Decimal) else amount

    return body


class OakwireApiClient:
    """Client for the Oakwire REST API server."""

    def __init__(self, base_url: str, api_key: str, timeout: float = 30.0) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers={"X-API-Key": api_key},
            timeout=timeout,
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        resp = self._client.request(method, path, **kwargs)

        if resp.status_code >= 400:
            content_type = resp.headers.get("content-type", "")

            if content_type.startswith("application/json"):
                detail = resp.json().get("detail", resp.text)
            else:
                detail = resp.text

            raise ApiError(resp.status_code, detail)

        return resp.json()

    def health(self) -> dict[str, Any]:
        return self._request("GET", "/api/health")

    # -- Validation --

    def validate_instruction(
        self,
        transfer_type: str = "domestic",
        routing_number: str | None = None,
        account_number: str | None = None,
        swift_code: str | None = None,
        amount: Decimal | str | int | float | None = None,
        country: str = "US",
    ) -> dict[str, Any]:
        return self._request(
            "POST",
            "/api/wires/validate",
            json=_instruction_body(
                transfer_type,
                routing_number,
                account_number,
                swift_code,
                amount,
                country,
                False,
            ),
        )

    def validate_field(self, field: str, value: Any, **context: Any) -> dict[str, Any]:
        """Check one field, e.g. ``validate_field("routing_number", "0210")``.

        ``context`` carries the other instruction fields the check depends on,
        such as ``transfer_type``.
        """
        if isinstance(value, Decimal):
            value = str(value)

        log.debug("Checking %s", field)

        return self._request(
            "POST",
            f"/api/wires/validate/{field}",
            json={**context, field: value},
        )

    # -- Quotes --

    def quote(
        self,
        amount: Decimal | str | int | float,
        transfer_type: str = "domestic",
        routing_number: str | None = None,
        account_number: str | None = None,
        swift_code: str | None = None,
        urgent: bool = False,
        balance: Decimal | str | int | float | None = None,
        country: str = "US",
    ) -> dict[str, Any]:
        body = _instruction_body(
            transfer_type,
            routing_number,
            account_number,
            swift_code,
            amount,
            country,
            urgent,
        )

        if balance is not None:
            body["balance"] = str(balance) if isinstance(balance, Decimal) else balance

        return self._request("POST", "/api/wires/quote", json=body)

    def close(self) -> None:
        self._client.close()
