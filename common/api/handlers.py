"""DRF exception handler rendering profile errors as ``{message, error}``."""

import logging

from rest_framework.exceptions import ValidationError
from rest_framework.views import exception_handler

from ..exceptions import MalformedInput, ProfileError

logger = logging.getLogger(__name__)


def profile_exception_handler(exc, context):
    """
    Render profile errors with a `message` (and optional `error`) body.

    Serializer validation failures are reported as MalformedInput (400).
    Other DRF errors, e.g. authentication, keep the default `detail` body.
    """
    if isinstance(exc, ValidationError):
        exc = MalformedInput(error=exc.detail)

    response = exception_handler(exc, context)
    if response is not None and isinstance(exc, ProfileError):
        view = context.get("view")
        logger.info(
            "%s in %s: %s",
            type(exc).__name__,
            type(view).__name__ if view else "-",
            exc.message,
        )
        response.data = exc.as_payload()
    return response
