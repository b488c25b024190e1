"""DRF exception handler translating domain failures into API responses."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.exceptions import (
    AuthenticationRequired,
    ConflictError,
    DomainError,
    DomainValidationError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Operation failed."

STATUS_BY_KIND = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DomainValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (AuthenticationRequired, status.HTTP_401_UNAUTHORIZED),
)


def status_for(exc: DomainError) -> int:
    for kind, status_code in STATUS_BY_KIND:
        if isinstance(exc, kind):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def domain_exception_handler(exc, context):  # type: ignore
    """Configured as REST_FRAMEWORK['EXCEPTION_HANDLER']."""
    if isinstance(exc, DomainError):
        return Response(
            {"detail": exc.message, "code": exc.code},
            status=status_for(exc),
        )

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return Response(
        {"detail": GENERIC_FAILURE_MESSAGE, "code": "error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
