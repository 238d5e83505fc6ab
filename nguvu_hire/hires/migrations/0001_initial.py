from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("job_list", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Hire",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("job_seeker_name", models.CharField(max_length=200)),
                ("desired_position", models.CharField(max_length=200)),
                ("employer_message", models.TextField()),
                ("job_seeker_response", models.TextField(blank=True)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("accepted", "Accepted"), ("rejected", "Rejected")], db_index=True, default="pending", max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("availability", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="hires", to="job_list.availability")),
                ("employer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="hires_sent", to=settings.AUTH_USER_MODEL)),
                ("job_seeker", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="hires_received", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
