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
            name="PerformerProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("full_name", models.CharField(blank=True, default="", max_length=255)),
                ("stage_name", models.CharField(blank=True, default="", max_length=255)),
                ("location", models.CharField(blank=True, default="", max_length=255)),
                ("performance_type", models.CharField(blank=True, default="", max_length=255)),
                ("bio", models.TextField(blank=True, default="")),
                ("price_display", models.CharField(blank=True, default="", max_length=100)),
                ("skills", models.TextField(blank=True, default="[]")),
                ("profile_picture_url", models.CharField(blank=True, max_length=500, null=True)),
                ("contact_number", models.CharField(blank=True, default="", max_length=50)),
                ("accept_direct_booking", models.BooleanField(default=False)),
                ("travel_distance_km", models.PositiveIntegerField(default=0)),
                ("preferred_availability_weekdays", models.BooleanField(default=False)),
                ("preferred_availability_weekends", models.BooleanField(default=False)),
                ("preferred_availability_mornings", models.BooleanField(default=False)),
                ("preferred_availability_evenings", models.BooleanField(default=False)),
                ("gallery_images", models.TextField(blank=True, default="[]")),
                ("average_rating", models.DecimalField(decimal_places=2, default=0, max_digits=3)),
                ("total_reviews", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="performer_profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "performers",
                "ordering": ["id"],
            },
        ),
    ]
