"""Shared API views and view helpers."""

import logging

from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ..exceptions import UserNotFound

logger = logging.getLogger(__name__)

User = get_user_model()


# ----------------------------- helpers (module-level) -----------------------------

def user_or_404(user_id: int):
    """Return the owning user or raise UserNotFound."""
    try:
        return User.objects.get(pk=user_id)
    except User.DoesNotExist:
        raise UserNotFound()


def internal_error(exc=None) -> Response:
    """500 response; the underlying message is included when `exc` is given."""
    data = {"message": "Internal server error."}
    if exc is not None:
        data["error"] = str(exc)
    return Response(data, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


# --------------------------------------- views ---------------------------------------

class ServiceStatusAPIView(APIView):
    """
    GET /

    Liveness message for load balancers and humans.

    Authentication: none
    Permissions: AllowAny
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({"message": "Gigs backend is running!"}, status=status.HTTP_200_OK)
