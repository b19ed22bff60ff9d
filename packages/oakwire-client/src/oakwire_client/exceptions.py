from typing import Any


class ApiError(Exception):
    """HTTP error from the Oakwire API server."""

    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API error {status_code}: {detail}")
