"""Performers app models.

Defines the PerformerProfile model. Image references (profile picture and
gallery) are stored as storage-relative paths such as ``/uploads/abc.jpg``;
they become absolute URLs only in API responses.
"""

from django.conf import settings
from django.db import models


class PerformerProfile(models.Model):
    """
    Public-facing profile of a performer.

    A user owns at most one performer profile (OneToOne on `user_id`).
    `average_rating` and `total_reviews` are maintained outside the profile
    endpoints.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="performer_profile",
    )
    full_name = models.CharField(max_length=255, blank=True, default="")
    stage_name = models.CharField(max_length=255, blank=True, default="")
    location = models.CharField(max_length=255, blank=True, default="")
    performance_type = models.CharField(max_length=255, blank=True, default="")
    bio = models.TextField(blank=True, default="")
    price_display = models.CharField(max_length=100, blank=True, default="")
    skills = models.TextField(blank=True, default="[]")
    profile_picture_url = models.CharField(max_length=500, blank=True, null=True)
    contact_number = models.CharField(max_length=50, blank=True, default="")
    accept_direct_booking = models.BooleanField(default=False)
    travel_distance_km = models.PositiveIntegerField(default=0)
    preferred_availability_weekdays = models.BooleanField(default=False)
    preferred_availability_weekends = models.BooleanField(default=False)
    preferred_availability_mornings = models.BooleanField(default=False)
    preferred_availability_evenings = models.BooleanField(default=False)
    gallery_images = models.TextField(blank=True, default="[]")

    average_rating = models.DecimalField(max_digits=3, decimal_places=2, default=0)
    total_reviews = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "performers"
        ordering = ["id"]

    def __str__(self):
        return f"PerformerProfile<{self.user_id}:{self.stage_name}>"
