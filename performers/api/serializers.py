"""Performers API serializers.

Contains serializers for:
- reading a performer profile (own profile, default view, public listing),
- creating/updating the caller's own performer profile.

Image references are persisted relative to the media root and rendered as
absolute URLs; entries that cannot be resolved are dropped from the gallery
in both directions.
"""

from django.db import transaction
from rest_framework import serializers

from common.api.fields import FlagField, JSONListField, TravelDistanceField
from common.exceptions import StoredDataCorrupt
from common.images import get_image_resolver
from common.serialization import dump_list, load_list
from common.upsert import upsert_by_user
from ..models import PerformerProfile

PLACEHOLDER_PICTURE_URL = "https://placehold.co/150x150/553c9a/ffffff?text=Profile"

TEXT_COLUMNS = (
    "full_name",
    "stage_name",
    "location",
    "performance_type",
    "bio",
    "price_display",
    "contact_number",
)
FLAG_COLUMNS = (
    "accept_direct_booking",
    "preferred_availability_weekdays",
    "preferred_availability_weekends",
    "preferred_availability_mornings",
    "preferred_availability_evenings",
)
AGGREGATE_DEFAULTS = {"average_rating": 0, "total_reviews": 0}


# ------------------------------ helpers ------------------------------

def _decode(instance, column: str) -> list:
    try:
        return load_list(getattr(instance, column))
    except ValueError as exc:
        raise StoredDataCorrupt(f"performers.{column} for user {instance.user_id}: {exc}") from exc


def _stored_picture(resolver, client_url):
    """Storage path for a client-sent picture URL; "" means explicit removal."""
    if client_url in (None, ""):
        return None
    return resolver.to_relative(client_url)


def default_performer_profile(user) -> PerformerProfile:
    """Unsaved profile used when the user has not created one yet."""
    return PerformerProfile(
        user=user,
        full_name=user.username,
        stage_name=user.username,
        location="Not Set",
        performance_type="Not Set",
        bio="Tell us about your talent and experience!",
        price_display="Rs. 0 - Rs. 0",
        profile_picture_url=PLACEHOLDER_PICTURE_URL,
        contact_number="Not Set",
    )


# ------------------------------ serializers ------------------------------

class PerformerProfileSerializer(serializers.ModelSerializer):
    """Read serializer with client-facing field names and absolute image URLs."""

    user_id = serializers.IntegerField(read_only=True)
    price = serializers.CharField(source="price_display", read_only=True)
    skills = serializers.SerializerMethodField()
    profile_picture_url = serializers.SerializerMethodField()
    direct_booking = serializers.BooleanField(source="accept_direct_booking", read_only=True)
    travel_distance = serializers.IntegerField(source="travel_distance_km", read_only=True)
    availability_weekdays = serializers.BooleanField(
        source="preferred_availability_weekdays", read_only=True
    )
    availability_weekends = serializers.BooleanField(
        source="preferred_availability_weekends", read_only=True
    )
    availability_morning = serializers.BooleanField(
        source="preferred_availability_mornings", read_only=True
    )
    availability_evening = serializers.BooleanField(
        source="preferred_availability_evenings", read_only=True
    )
    gallery_images = serializers.SerializerMethodField()
    rating = serializers.FloatField(source="average_rating", read_only=True)
    review_count = serializers.IntegerField(source="total_reviews", read_only=True)

    class Meta:
        model = PerformerProfile
        fields = [
            "id",
            "user_id",
            "full_name",
            "stage_name",
            "location",
            "performance_type",
            "bio",
            "price",
            "skills",
            "profile_picture_url",
            "contact_number",
            "direct_booking",
            "travel_distance",
            "availability_weekdays",
            "availability_weekends",
            "availability_morning",
            "availability_evening",
            "gallery_images",
            "rating",
            "review_count",
        ]
        read_only_fields = fields

    def get_skills(self, obj):
        return _decode(obj, "skills")

    def get_profile_picture_url(self, obj):
        return get_image_resolver().to_absolute(obj.profile_picture_url)

    def get_gallery_images(self, obj):
        return get_image_resolver().absolute_gallery(_decode(obj, "gallery_images"))


class PerformerProfileUpsertSerializer(serializers.Serializer):
    """
    Full replacement of the caller's performer profile.

    `profile_picture_url` is special: leaving it out keeps the stored picture,
    sending "" removes it. `gallery_images` holds the absolute URLs of the
    images to keep; unreadable input is treated as "keep none".
    """

    full_name = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, default=""
    )
    stage_name = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, default=""
    )
    location = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, default=""
    )
    performance_type = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, default=""
    )
    bio = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    price = serializers.CharField(
        source="price_display",
        max_length=100,
        required=False,
        allow_blank=True,
        allow_null=True,
        default="",
    )
    skills = JSONListField()
    profile_picture_url = serializers.CharField(
        max_length=500, required=False, allow_blank=True, allow_null=True
    )
    contact_number = serializers.CharField(
        max_length=50, required=False, allow_blank=True, allow_null=True, default=""
    )
    direct_booking = FlagField(source="accept_direct_booking")
    travel_distance = TravelDistanceField(source="travel_distance_km")
    availability_weekdays = FlagField(source="preferred_availability_weekdays")
    availability_weekends = FlagField(source="preferred_availability_weekends")
    availability_morning = FlagField(source="preferred_availability_mornings")
    availability_evening = FlagField(source="preferred_availability_evenings")
    gallery_images = JSONListField(lenient=True)

    def validate(self, attrs):
        for key in TEXT_COLUMNS:
            if attrs.get(key) is None:
                attrs[key] = ""
        return attrs

    @transaction.atomic
    def upsert(self, user_id: int, uploads: dict):
        """Create or update the profile of `user_id`; returns (profile, created)."""
        data = self.validated_data
        resolver = get_image_resolver()

        values = {key: data[key] for key in TEXT_COLUMNS + FLAG_COLUMNS}
        values["travel_distance_km"] = data["travel_distance_km"]
        values["skills"] = dump_list(data["skills"])

        picture_files = uploads.get("profile_picture", [])
        if picture_files:
            values["profile_picture_url"] = picture_files[0].relative_path
        elif "profile_picture_url" in data:
            values["profile_picture_url"] = _stored_picture(resolver, data["profile_picture_url"])

        kept = resolver.relative_gallery(data["gallery_images"])
        added = [f.relative_path for f in uploads.get("gallery_images", [])]
        values["gallery_images"] = dump_list(kept + added)

        return upsert_by_user(
            PerformerProfile, user_id, values, create_values=AGGREGATE_DEFAULTS
        )
