"""Error kinds raised by the profile endpoints.

Each kind maps to one HTTP status; `common.api.handlers` renders them as
``{"message": ..., "error": ...}``.
"""

from rest_framework import status
from rest_framework.exceptions import APIException


class ProfileError(APIException):
    """Base class; `error` carries optional diagnostic detail."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error."

    def __init__(self, message=None, error=None):
        super().__init__(detail=message or self.default_detail)
        self.message = str(message or self.default_detail)
        self.error = error

    def as_payload(self) -> dict:
        payload = {"message": self.message}
        if self.error is not None:
            payload["error"] = self.error
        return payload


class UserNotFound(ProfileError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "User not found."


class UploadFailure(ProfileError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "File upload failed."


class MalformedInput(ProfileError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input."


class StoredDataCorrupt(ValueError):
    """A persisted column could not be decoded (surfaces as a 500)."""
