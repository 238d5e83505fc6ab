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
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(blank=True, max_length=200)),
                ("message", models.TextField()),
                ("type", models.CharField(choices=[("hire_request", "Hire request"), ("new_application", "New application"), ("application_status", "Application status"), ("hire_status_update", "Hire status update"), ("verification_submitted", "Verification submitted"), ("verification_approved", "Verification approved"), ("verification_rejected", "Verification rejected"), ("payment_completed", "Payment completed"), ("system", "System")], db_index=True, default="system", max_length=40)),
                ("related_id", models.PositiveIntegerField(blank=True, null=True)),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["user", "is_read"], name="dashboard_notif_user_read_idx")],
            },
        ),
    ]
