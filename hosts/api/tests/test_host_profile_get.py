from django.contrib.auth import get_user_model
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient, APITestCase

from hosts.models import HostProfile

User = get_user_model()

PROFILE_FIELDS = {
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
}


@override_settings(PUBLIC_BASE_URL="https://api.example.com")
class HostProfileGetTests(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="stagehouse", email="sh@mail.lk", password="Pass123!")
        self.client_auth = APIClient()
        self.client_auth.credentials(HTTP_AUTHORIZATION="Token " + Token.objects.create(user=self.user).key)
        self.client_anon = APIClient()
        self.url = reverse("host-profile")

    def test_missing_profile_returns_complete_default(self):
        resp = self.client_auth.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["message"], "Host profile not found, returning default.")

        profile = resp.data["profile"]
        self.assertEqual(set(profile.keys()), PROFILE_FIELDS)
        self.assertEqual(profile["user_id"], self.user.id)
        self.assertEqual(profile["company_organization"], "stagehouse")
        self.assertEqual(profile["location"], "Not Set")
        for key in [
            "event_types_typically_hosted",
            "preferred_performer_types",
            "preferred_locations_for_gigs",
            "gallery_images",
        ]:
            self.assertEqual(profile[key], [])
        for key in ["urgent_booking_enabled", "email_notifications_enabled", "sms_notifications_enabled"]:
            self.assertIs(profile[key], False)
        self.assertEqual(profile["default_budget_range_min"], 0)
        self.assertEqual(profile["default_budget_range_max"], 0)
        self.assertEqual(
            profile["profile_picture_url"],
            "https://placehold.co/150x150/553c9a/ffffff?text=Host",
        )
        self.assertEqual(profile["events_hosted"], 0)
        self.assertEqual(profile["total_reviews"], 0)

    def test_default_view_is_not_persisted(self):
        self.client_auth.get(self.url)
        self.client_auth.get(self.url)
        self.assertFalse(HostProfile.objects.filter(user=self.user).exists())

    def test_existing_profile_is_decoded(self):
        HostProfile.objects.create(
            user=self.user,
            company_organization="Stage House",
            event_types_typically_hosted='["Wedding", "Corporate"]',
            preferred_performer_types='["DJ"]',
            preferred_locations_for_gigs='["Colombo", "Kandy"]',
            gallery_images='["https://api.example.com/uploads/a.jpg"]',
            default_budget_range_min="1500.50",
            default_budget_range_max="9000.00",
            urgent_booking_enabled=True,
            events_hosted=4,
            average_rating="4.25",
            total_reviews=8,
        )
        resp = self.client_auth.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["message"], "Host profile fetched successfully.")

        profile = resp.data["profile"]
        self.assertEqual(profile["company_organization"], "Stage House")
        self.assertEqual(profile["event_types_typically_hosted"], ["Wedding", "Corporate"])
        self.assertEqual(profile["preferred_locations_for_gigs"], ["Colombo", "Kandy"])
        self.assertEqual(profile["gallery_images"], ["https://api.example.com/uploads/a.jpg"])
        self.assertEqual(profile["default_budget_range_min"], 1500.5)
        self.assertEqual(profile["default_budget_range_max"], 9000.0)
        self.assertIs(profile["urgent_booking_enabled"], True)
        self.assertIs(profile["sms_notifications_enabled"], False)
        self.assertEqual(profile["events_hosted"], 4)
        self.assertEqual(profile["average_rating"], 4.25)
        self.assertEqual(profile["total_reviews"], 8)

    def test_corrupt_stored_list_returns_500(self):
        HostProfile.objects.create(user=self.user, preferred_performer_types="[not json")
        resp = self.client_auth.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(resp.data, {"message": "Internal server error."})

    def test_unauthenticated_gets_401(self):
        resp = self.client_anon.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)
