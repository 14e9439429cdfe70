"""
Custom exception classes for the LightBnB data layer.
Lets callers tell a failed query apart from a query that found nothing.
"""

from typing import Optional


class GatewayError(Exception):
    """Base data layer exception."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class QueryFailure(GatewayError):
    """
    A statement could not be executed.

    Covers malformed SQL, constraint violations and lost connections. The
    driver exception is kept as ``cause`` and chained as ``__cause__``.
    """

    def __init__(
        self,
        operation: str,
        cause: Optional[BaseException] = None,
        detail: Optional[str] = None,
        error_code: str = "QUERY_FAILURE"
    ):
        if detail is None:
            detail = f"Query failed during {operation}"
            if cause is not None:
                detail += f": {cause}"
        super().__init__(detail, error_code=error_code)
        self.operation = operation
        self.cause = cause


class QueryTimeout(QueryFailure):
    """A statement did not finish within the configured timeout."""

    def __init__(self, operation: str, timeout: float):
        super().__init__(
            operation,
            detail=f"Query timed out after {timeout}s during {operation}",
            error_code="QUERY_TIMEOUT"
        )
        self.timeout = timeout
