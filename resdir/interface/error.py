"""Interface layer error mapping.

Domain errors reach clients as ``{"detail": {"kind", "message", "fields"?}}``
with a status code chosen by kind.
"""

from fastapi import HTTPException, status

from resdir.domain.error import (
    DomainError,
    DuplicateNameError,
    InvalidStatusError,
    NotFoundError,
    StoreUnavailableError,
    TagAttachmentFailedError,
    ValidationFailedError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateNameError: status.HTTP_409_CONFLICT,
    InvalidStatusError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    TagAttachmentFailedError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ValidationFailedError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    StoreUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error returned to the client."""
    status_code = STATUS_BY_ERROR.get(type(error), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=error.to_detail())


def internal_error(detail: str) -> HTTPException:
    """HTTP error for unexpected failures. Never leaks the exception text."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
    )
