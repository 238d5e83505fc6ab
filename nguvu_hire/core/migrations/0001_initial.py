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
            name="AnalyticsEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("event_type", models.CharField(choices=[("page_view", "Page View"), ("profile_view", "Profile View"), ("profile_created", "Profile Created"), ("profile_updated", "Profile Updated"), ("job_created", "Job Created"), ("availability_created", "Availability Created"), ("application_submitted", "Application Submitted"), ("hire_requested", "Hire Requested"), ("post_boosted", "Post Boosted"), ("payment_created", "Payment Created"), ("payment_completed", "Payment Completed"), ("verification_submitted", "Verification Submitted")], db_index=True, max_length=64)),
                ("path", models.CharField(blank=True, help_text="Request path if applicable", max_length=512)),
                ("metadata", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("user", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="analytics_events", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["event_type", "created_at"], name="core_event_type_created_idx")],
            },
        ),
    ]
