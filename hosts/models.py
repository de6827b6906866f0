"""Hosts app models.

Defines the HostProfile model for event organizers. List-valued attributes
are stored as JSON text. Image references are stored as absolute URLs. The
aggregate counters are maintained elsewhere and never written by the profile
endpoints.
"""

from django.conf import settings
from django.db import models


class HostProfile(models.Model):
    """
    Public-facing profile of a host (event organizer).

    A user owns at most one host profile (OneToOne on `user_id`).
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="host_profile",
    )
    company_organization = models.CharField(max_length=255, blank=True, default="")
    contact_person = models.CharField(max_length=255, blank=True, default="")
    contact_number = models.CharField(max_length=50, blank=True, default="")
    location = models.CharField(max_length=255, blank=True, default="")
    event_types_typically_hosted = models.TextField(blank=True, default="[]")
    bio = models.TextField(blank=True, default="")
    default_budget_range_min = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    default_budget_range_max = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    preferred_performer_types = models.TextField(blank=True, default="[]")
    preferred_locations_for_gigs = models.TextField(blank=True, default="[]")
    urgent_booking_enabled = models.BooleanField(default=False)
    email_notifications_enabled = models.BooleanField(default=False)
    sms_notifications_enabled = models.BooleanField(default=False)
    profile_picture_url = models.CharField(max_length=500, blank=True, null=True)
    gallery_images = models.TextField(blank=True, default="[]")

    events_hosted = models.PositiveIntegerField(default=0)
    average_rating = models.DecimalField(max_digits=3, decimal_places=2, default=0)
    total_reviews = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "hosts"
        ordering = ["id"]

    def __str__(self):
        return f"HostProfile<{self.user_id}:{self.company_organization}>"
