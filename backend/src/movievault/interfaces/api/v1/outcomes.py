"""Translate use-case outcomes into HTTP responses."""
from typing import TypeVar

from fastapi import HTTPException, status

from movievault.application.outcome import ErrorKind, Failure, Outcome

T = TypeVar("T")

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}


def to_http_exception(failure: Failure) -> HTTPException:
    detail: dict[str, str] = {"message": failure.message, "kind": str(failure.kind)}
    if failure.field:
        detail["field"] = failure.field
    headers = {"WWW-Authenticate": "Bearer"} if failure.kind is ErrorKind.UNAUTHENTICATED else None
    return HTTPException(status_code=STATUS_BY_KIND[failure.kind], detail=detail, headers=headers)


def unwrap(outcome: Outcome[T], *, forbidden_as: Failure | None = None) -> T:
    """Return the value or raise the matching HTTPException.

    ``forbidden_as`` replaces a FORBIDDEN failure, so another owner's record can
    be reported exactly like an absent one.
    """
    if outcome.error is None:
        return outcome.value  # type: ignore[return-value]
    failure = outcome.error
    if forbidden_as is not None and failure.kind is ErrorKind.FORBIDDEN:
        failure = forbidden_as
    raise to_http_exception(failure)
