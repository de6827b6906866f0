"""Performers API views.

- GET `/api/performers/profile/` returns the caller's profile, or a default
  view when none exists yet.
- PUT `/api/performers/profile/` creates (201) or updates (200) the caller's
  profile, including optional picture and gallery uploads.
- GET `/api/performers/` lists all performer profiles (public).
"""

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from common.api.views import internal_error, user_or_404
from common.uploads import collect_uploads, discard_uploads, form_fields
from ..models import PerformerProfile
from .serializers import (
    PerformerProfileSerializer,
    PerformerProfileUpsertSerializer,
    default_performer_profile,
)

logger = logging.getLogger(__name__)


def _upload_limits():
    return {
        "profile_picture": 1,
        "gallery_images": settings.PROFILE_GALLERY_MAX_FILES,
    }


class PerformerProfileView(APIView):
    """GET: fetch own performer profile. PUT: create or update it."""

    permission_classes = [IsAuthenticated]
    parser_classes = (JSONParser, FormParser, MultiPartParser)

    def get(self, request):
        """Return the stored profile or the default view for a new performer."""
        user = user_or_404(request.user.id)
        try:
            profile = PerformerProfile.objects.filter(user_id=user.id).first()
            if profile is None:
                return Response(
                    {
                        "message": "Performer profile not found, returning default.",
                        "profile": PerformerProfileSerializer(default_performer_profile(user)).data,
                    },
                    status=status.HTTP_200_OK,
                )
            return Response(
                {
                    "message": "Performer profile fetched successfully.",
                    "profile": PerformerProfileSerializer(profile).data,
                },
                status=status.HTTP_200_OK,
            )
        except Exception:
            logger.exception("Error fetching performer profile for user %s", user.id)
            return internal_error()

    def put(self, request):
        """Validate input, store uploads, then upsert in a single transaction."""
        serializer = PerformerProfileUpsertSerializer(data=form_fields(request))
        serializer.is_valid(raise_exception=True)
        uploads = collect_uploads(request, _upload_limits())

        try:
            _, created = serializer.upsert(request.user.id, uploads)
        except APIException:
            discard_uploads(uploads)
            raise
        except Exception as exc:
            discard_uploads(uploads)
            logger.exception(
                "Error updating/creating performer profile for user %s", request.user.id
            )
            return internal_error(exc)

        if created:
            logger.info("Created performer profile for user %s", request.user.id)
            return Response(
                {"message": "Performer profile created successfully."},
                status=status.HTTP_201_CREATED,
            )
        return Response(
            {"message": "Performer profile updated successfully."},
            status=status.HTTP_200_OK,
        )


class PerformerProfileListView(APIView):
    """
    GET `/api/performers/`: every performer profile, for public browsing.

    Authentication: optional
    Permissions: AllowAny
    """

    permission_classes = [AllowAny]

    def get(self, request):
        try:
            profiles = PerformerProfile.objects.all()
            data = PerformerProfileSerializer(profiles, many=True).data
        except Exception:
            logger.exception("Error fetching all performer profiles")
            return internal_error()
        return Response(
            {"message": "All performer profiles fetched successfully.", "profiles": data},
            status=status.HTTP_200_OK,
        )
