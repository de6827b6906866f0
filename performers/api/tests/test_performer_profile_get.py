from django.contrib.auth import get_user_model
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient, APITestCase

from performers.models import PerformerProfile

User = get_user_model()

BASE = "https://api.example.com"

PROFILE_FIELDS = {
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
}


@override_settings(PUBLIC_BASE_URL=BASE)
class PerformerProfileGetTests(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="djkasun", email="k@mail.lk", password="Pass123!")
        self.client_auth = APIClient()
        self.client_auth.credentials(HTTP_AUTHORIZATION="Token " + Token.objects.create(user=self.user).key)
        self.client_anon = APIClient()
        self.url = reverse("performer-profile")

    def test_missing_profile_returns_complete_default(self):
        resp = self.client_auth.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["message"], "Performer profile not found, returning default.")

        profile = resp.data["profile"]
        self.assertEqual(set(profile.keys()), PROFILE_FIELDS)
        self.assertEqual(profile["user_id"], self.user.id)
        self.assertEqual(profile["full_name"], "djkasun")
        self.assertEqual(profile["stage_name"], "djkasun")
        self.assertEqual(profile["location"], "Not Set")
        self.assertEqual(profile["performance_type"], "Not Set")
        self.assertEqual(profile["bio"], "Tell us about your talent and experience!")
        self.assertEqual(profile["price"], "Rs. 0 - Rs. 0")
        self.assertEqual(profile["contact_number"], "Not Set")
        self.assertEqual(profile["skills"], [])
        self.assertEqual(profile["gallery_images"], [])
        self.assertEqual(
            profile["profile_picture_url"],
            "https://placehold.co/150x150/553c9a/ffffff?text=Profile",
        )
        for key in [
            "direct_booking",
            "availability_weekdays",
            "availability_weekends",
            "availability_morning",
            "availability_evening",
        ]:
            self.assertIs(profile[key], False)
        self.assertEqual(profile["travel_distance"], 0)
        self.assertEqual(profile["rating"], 0)
        self.assertEqual(profile["review_count"], 0)
        self.assertFalse(PerformerProfile.objects.exists())

    def test_stored_paths_are_returned_as_absolute_urls(self):
        PerformerProfile.objects.create(
            user=self.user,
            stage_name="DJ K",
            skills='["House", "Techno"]',
            profile_picture_url="/uploads/me.jpg",
            gallery_images='["/uploads/a.jpg", "", "uploads/b.jpg"]',
            accept_direct_booking=True,
            travel_distance_km=40,
            preferred_availability_weekends=True,
            average_rating="4.80",
            total_reviews=15,
        )
        resp = self.client_auth.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["message"], "Performer profile fetched successfully.")

        profile = resp.data["profile"]
        self.assertEqual(profile["stage_name"], "DJ K")
        self.assertEqual(profile["skills"], ["House", "Techno"])
        self.assertEqual(profile["profile_picture_url"], f"{BASE}/uploads/me.jpg")
        self.assertEqual(
            profile["gallery_images"],
            [f"{BASE}/uploads/a.jpg", f"{BASE}/uploads/b.jpg"],
        )
        self.assertIs(profile["direct_booking"], True)
        self.assertIs(profile["availability_weekends"], True)
        self.assertIs(profile["availability_weekdays"], False)
        self.assertEqual(profile["travel_distance"], 40)
        self.assertEqual(profile["rating"], 4.8)
        self.assertEqual(profile["review_count"], 15)

    def test_missing_picture_is_null(self):
        PerformerProfile.objects.create(user=self.user, profile_picture_url=None)
        resp = self.client_auth.get(self.url)
        self.assertIsNone(resp.data["profile"]["profile_picture_url"])

    def test_corrupt_stored_skills_returns_500(self):
        PerformerProfile.objects.create(user=self.user, skills='{"not": "a list"}')
        resp = self.client_auth.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(resp.data, {"message": "Internal server error."})

    def test_unauthenticated_gets_401(self):
        resp = self.client_anon.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)


@override_settings(PUBLIC_BASE_URL=BASE)
class PerformerProfileListTests(APITestCase):
    def setUp(self):
        self.user_a = User.objects.create_user(username="singer", password="Pass123!")
        self.user_b = User.objects.create_user(username="drummer", password="Pass123!")
        PerformerProfile.objects.create(
            user=self.user_a,
            stage_name="Voice",
            gallery_images='["/uploads/v1.jpg", "/uploads/v2.jpg"]',
            profile_picture_url="/uploads/voice.jpg",
        )
        PerformerProfile.objects.create(user=self.user_b, stage_name="Beats")
        self.client_anon = APIClient()
        self.url = reverse("performer-profiles")

    def test_public_listing_returns_all_profiles(self):
        resp = self.client_anon.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["message"], "All performer profiles fetched successfully.")
        self.assertEqual([p["stage_name"] for p in resp.data["profiles"]], ["Voice", "Beats"])
        for profile in resp.data["profiles"]:
            self.assertEqual(set(profile.keys()), PROFILE_FIELDS)

    def test_listing_uses_absolute_urls(self):
        resp = self.client_anon.get(self.url)
        voice = resp.data["profiles"][0]
        self.assertEqual(voice["profile_picture_url"], f"{BASE}/uploads/voice.jpg")
        self.assertEqual(
            voice["gallery_images"], [f"{BASE}/uploads/v1.jpg", f"{BASE}/uploads/v2.jpg"]
        )
        self.assertEqual(resp.data["profiles"][1]["gallery_images"], [])

    def test_empty_listing(self):
        PerformerProfile.objects.all().delete()
        resp = self.client_anon.get(self.url)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["profiles"], [])
