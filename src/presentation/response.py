from datetime import datetime, timezone
from typing import Any

from src.domain.exceptions import DomainError, ErrorKind
from src.domain.models import ApiError, ApiResponse

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class ResponseBuilder:
    """
    Builds the success/error envelope handed back to transport adapters.
    """

    @staticmethod
    def success(data: Any) -> ApiResponse:
        return ApiResponse(success=True, data=data, timestamp=datetime.now(timezone.utc))

    @staticmethod
    def error(error: ApiError) -> ApiResponse:
        return ApiResponse(success=False, error=error, timestamp=datetime.now(timezone.utc))

    @staticmethod
    def from_error(error: BaseException) -> ApiResponse:
        """
        Converts any exception into a failure envelope.

        DomainError keeps its structured fields under ``details``. Anything
        else is reported as InternalError without leaking its message.
        """
        if isinstance(error, DomainError):
            details = error.details()
            api_error = ApiError(
                code=error.kind.value,
                message=error.message,
                details=details or None,
            )
        else:
            api_error = ApiError(code=ErrorKind.INTERNAL.value, message=GENERIC_ERROR_MESSAGE)

        return ResponseBuilder.error(api_error)
