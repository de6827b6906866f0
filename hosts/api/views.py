"""Hosts API views.

Provides the caller's own host profile:

- GET `/api/hosts/profile/` returns the stored profile, or a synthesized
  default when none exists yet (nothing is written).
- PUT `/api/hosts/profile/` creates (201) or updates (200) the profile from a
  multipart or JSON body, including optional image uploads.

The owner is always the authenticated user and never taken from the payload.
"""

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from common.api.views import internal_error, user_or_404
from common.uploads import collect_uploads, discard_uploads, form_fields
from ..models import HostProfile
from .serializers import (
    HostProfileSerializer,
    HostProfileUpsertSerializer,
    default_host_profile,
)

logger = logging.getLogger(__name__)


def _upload_limits():
    return {
        "profile_picture": 1,
        "new_gallery_images": settings.PROFILE_GALLERY_MAX_FILES,
    }


class HostProfileView(APIView):
    """GET: fetch own host profile. PUT: create or update it."""

    permission_classes = [IsAuthenticated]
    parser_classes = (JSONParser, FormParser, MultiPartParser)

    def get(self, request):
        """Return the stored profile or the default view for a new host."""
        user = user_or_404(request.user.id)
        try:
            profile = HostProfile.objects.filter(user_id=user.id).first()
            if profile is None:
                return Response(
                    {
                        "message": "Host profile not found, returning default.",
                        "profile": HostProfileSerializer(default_host_profile(user)).data,
                    },
                    status=status.HTTP_200_OK,
                )
            return Response(
                {
                    "message": "Host profile fetched successfully.",
                    "profile": HostProfileSerializer(profile).data,
                },
                status=status.HTTP_200_OK,
            )
        except Exception:
            logger.exception("Error fetching host profile for user %s", user.id)
            return internal_error()

    def put(self, request):
        """Validate input, store uploads, then upsert in a single transaction."""
        serializer = HostProfileUpsertSerializer(data=form_fields(request))
        serializer.is_valid(raise_exception=True)
        uploads = collect_uploads(request, _upload_limits())

        try:
            _, created = serializer.upsert(request.user.id, uploads)
        except APIException:
            discard_uploads(uploads)
            raise
        except Exception as exc:
            discard_uploads(uploads)
            logger.exception("Error updating/creating host profile for user %s", request.user.id)
            return internal_error(exc)

        if created:
            logger.info("Created host profile for user %s", request.user.id)
            return Response(
                {"message": "Host profile created successfully."},
                status=status.HTTP_201_CREATED,
            )
        return Response(
            {"message": "Host profile updated successfully."},
            status=status.HTTP_200_OK,
        )
