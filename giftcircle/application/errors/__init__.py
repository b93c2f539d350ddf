"""Application layer errors."""

from giftcircle.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    persistence_failure,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "persistence_failure",
]
