from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="HostProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("company_organization", models.CharField(blank=True, default="", max_length=255)),
                ("contact_person", models.CharField(blank=True, default="", max_length=255)),
                ("contact_number", models.CharField(blank=True, default="", max_length=50)),
                ("location", models.CharField(blank=True, default="", max_length=255)),
                ("event_types_typically_hosted", models.TextField(blank=True, default="[]")),
                ("bio", models.TextField(blank=True, default="")),
                ("default_budget_range_min", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("default_budget_range_max", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("preferred_performer_types", models.TextField(blank=True, default="[]")),
                ("preferred_locations_for_gigs", models.TextField(blank=True, default="[]")),
                ("urgent_booking_enabled", models.BooleanField(default=False)),
                ("email_notifications_enabled", models.BooleanField(default=False)),
                ("sms_notifications_enabled", models.BooleanField(default=False)),
                ("profile_picture_url", models.CharField(blank=True, max_length=500, null=True)),
                ("gallery_images", models.TextField(blank=True, default="[]")),
                ("events_hosted", models.PositiveIntegerField(default=0)),
                ("average_rating", models.DecimalField(decimal_places=2, default=0, max_digits=3)),
                ("total_reviews", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="host_profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "hosts",
                "ordering": ["id"],
            },
        ),
    ]
