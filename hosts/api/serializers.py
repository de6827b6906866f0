"""Hosts API serializers.

Contains serializers for:
- reading a host profile (stored or synthesized default),
- creating/updating the caller's own host profile from form or JSON input.

List-valued columns are JSON text in the database and real lists in the API.
Host image references are persisted as absolute URLs: new uploads are
expanded under the public origin, client-supplied URLs are trusted verbatim.
"""

from django.db import transaction
from rest_framework import serializers

from common.api.fields import BudgetField, FlagField, JSONListField
from common.exceptions import StoredDataCorrupt
from common.images import get_image_resolver
from common.serialization import dump_list, load_list
from common.upsert import upsert_by_user
from ..models import HostProfile

PLACEHOLDER_PICTURE_URL = "https://placehold.co/150x150/553c9a/ffffff?text=Host"

TEXT_FIELDS = ("company_organization", "contact_person", "contact_number", "location", "bio")
TAG_FIELDS = (
    "event_types_typically_hosted",
    "preferred_performer_types",
    "preferred_locations_for_gigs",
)
FLAG_FIELDS = (
    "urgent_booking_enabled",
    "email_notifications_enabled",
    "sms_notifications_enabled",
)
BUDGET_FIELDS = ("default_budget_range_min", "default_budget_range_max")
AGGREGATE_DEFAULTS = {"events_hosted": 0, "average_rating": 0, "total_reviews": 0}


# ------------------------------ helpers ------------------------------

def _decode(instance, column: str) -> list:
    try:
        return load_list(getattr(instance, column))
    except ValueError as exc:
        raise StoredDataCorrupt(f"hosts.{column} for user {instance.user_id}: {exc}") from exc


def _final_picture_url(resolver, picture_files, client_url):
    """Uploaded file first, then the client's URL as-is, else None."""
    if picture_files:
        return resolver.to_absolute(picture_files[0].relative_path)
    return client_url or None


def _final_gallery(resolver, existing_urls, new_files) -> list:
    """Existing URLs in client order, followed by the new uploads in arrival order."""
    return list(existing_urls) + [resolver.to_absolute(f.relative_path) for f in new_files]


def default_host_profile(user) -> HostProfile:
    """Unsaved profile used when the user has not created one yet."""
    return HostProfile(
        user=user,
        company_organization=user.username,
        location="Not Set",
        profile_picture_url=PLACEHOLDER_PICTURE_URL,
    )


# ------------------------------ serializers ------------------------------

class HostProfileSerializer(serializers.ModelSerializer):
    """Read serializer; decodes list columns and converts numbers/flags."""

    user_id = serializers.IntegerField(read_only=True)
    event_types_typically_hosted = serializers.SerializerMethodField()
    preferred_performer_types = serializers.SerializerMethodField()
    preferred_locations_for_gigs = serializers.SerializerMethodField()
    gallery_images = serializers.SerializerMethodField()
    default_budget_range_min = serializers.FloatField(read_only=True)
    default_budget_range_max = serializers.FloatField(read_only=True)
    average_rating = serializers.FloatField(read_only=True)

    class Meta:
        model = HostProfile
        fields = [
            "id",
            "user_id",
            "company_organization",
            "contact_person",
            "contact_number",
            "location",
            "event_types_typically_hosted",
            "bio",
            "default_budget_range_min",
            "default_budget_range_max",
            "preferred_performer_types",
            "preferred_locations_for_gigs",
            "urgent_booking_enabled",
            "email_notifications_enabled",
            "sms_notifications_enabled",
            "profile_picture_url",
            "gallery_images",
            "events_hosted",
            "average_rating",
            "total_reviews",
        ]
        read_only_fields = fields

    def get_event_types_typically_hosted(self, obj):
        return _decode(obj, "event_types_typically_hosted")

    def get_preferred_performer_types(self, obj):
        return _decode(obj, "preferred_performer_types")

    def get_preferred_locations_for_gigs(self, obj):
        return _decode(obj, "preferred_locations_for_gigs")

    def get_gallery_images(self, obj):
        return _decode(obj, "gallery_images")


class HostProfileUpsertSerializer(serializers.Serializer):
    """
    Full replacement of the caller's host profile.

    Flags accept booleans, 0/1 or their text forms; tag lists and
    `existing_gallery_images` accept JSON text or real lists.
    """

    company_organization = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, default=""
    )
    contact_person = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, default=""
    )
    contact_number = serializers.CharField(
        max_length=50, required=False, allow_blank=True, allow_null=True, default=""
    )
    location = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, default=""
    )
    bio = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    event_types_typically_hosted = JSONListField()
    preferred_performer_types = JSONListField()
    preferred_locations_for_gigs = JSONListField()
    default_budget_range_min = BudgetField()
    default_budget_range_max = BudgetField()
    urgent_booking_enabled = FlagField()
    email_notifications_enabled = FlagField()
    sms_notifications_enabled = FlagField()
    profile_picture_url = serializers.CharField(
        max_length=500, required=False, allow_blank=True, allow_null=True
    )
    existing_gallery_images = JSONListField()

    def validate(self, attrs):
        for key in TEXT_FIELDS:
            if attrs.get(key) is None:
                attrs[key] = ""
        return attrs

    @transaction.atomic
    def upsert(self, user_id: int, uploads: dict):
        """Create or update the profile of `user_id`; returns (profile, created)."""
        data = self.validated_data
        resolver = get_image_resolver()

        values = {key: data[key] for key in TEXT_FIELDS + FLAG_FIELDS + BUDGET_FIELDS}
        for key in TAG_FIELDS:
            values[key] = dump_list(data[key])
        values["profile_picture_url"] = _final_picture_url(
            resolver, uploads.get("profile_picture", []), data.get("profile_picture_url")
        )
        values["gallery_images"] = dump_list(
            _final_gallery(
                resolver,
                data["existing_gallery_images"],
                uploads.get("new_gallery_images", []),
            )
        )
        return upsert_by_user(HostProfile, user_id, values, create_values=AGGREGATE_DEFAULTS)
