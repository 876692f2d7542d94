from fastapi import status

from taskhub.domain.errors import (
    AuthenticationError,
    DeliveryError,
    NotFoundError,
    ValidationError,
)
from taskhub.libs.result import Error, Result


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Codes whose status differs from their kind's default
_STATUS_OVERRIDES = {
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
}

_STATUS_BY_KIND = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
)


def to_exception(error: Error) -> Exception:
    """Map a typed use-case error to the exception the app handlers render"""
    if isinstance(error, DeliveryError):
        return ServerError(error)
    if error.code in _STATUS_OVERRIDES:
        return ClientError(error, status_code=_STATUS_OVERRIDES[error.code])
    for kind, status_code in _STATUS_BY_KIND:
        if isinstance(error, kind):
            return ClientError(error, status_code=status_code)
    return ServerError(error)


def raise_for_error(result: Result) -> None:
    if result.is_err():
        raise to_exception(result.error)
