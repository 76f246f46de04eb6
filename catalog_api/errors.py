# catalog_api/errors.py
"""Errors raised by the request pipeline.

Each error carries the HTTP status and the fixed message sent back to
the client. The handlers registered in ``main.py`` turn them into the
``{"msg": ..., "statusCode": ...}`` body.
"""

from typing import Optional


class CatalogAPIError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, reason: Optional[str] = None):
        # ``reason`` is for logs only, the client always gets ``message``.
        super().__init__(reason or self.message)

    def to_dict(self) -> dict:
        return {"msg": self.message, "statusCode": self.status_code}


class QueryValidationError(CatalogAPIError):
    """Any query parameter failed validation.

    The message is deliberately the same whatever failed; clients only
    learn that the request was invalid.
    """

    status_code = 400
    message = "Invalid query parameters or request data"


class RateLimitExceeded(CatalogAPIError):
    """The request counter for the current window is over its limit."""

    status_code = 429
    message = "Too many requests"
