from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


WORK_LOCATION_CHOICES = [("onsite", "On-site"), ("remote", "Remote"), ("hybrid", "Hybrid")]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Job",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                ("responsibilities", models.TextField(blank=True)),
                ("requirements", models.TextField(blank=True)),
                ("company", models.CharField(blank=True, max_length=200)),
                ("location", models.CharField(blank=True, max_length=200)),
                ("country", models.CharField(blank=True, db_index=True, max_length=100)),
                ("preferred_location", models.CharField(blank=True, max_length=200)),
                ("preferred_candidate_countries", models.JSONField(blank=True, default=list)),
                ("work_location_type", models.CharField(choices=WORK_LOCATION_CHOICES, default="onsite", max_length=10)),
                ("remote_work_countries", models.JSONField(blank=True, default=list)),
                ("cover_photo", models.ImageField(blank=True, null=True, upload_to="jobs/covers/")),
                ("deadline", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="jobs", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Availability",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("desired_job", models.CharField(max_length=200)),
                ("skills", models.TextField(blank=True, help_text="Comma separated.")),
                ("location", models.CharField(blank=True, max_length=200)),
                ("country", models.CharField(blank=True, db_index=True, max_length=100)),
                ("availability", models.CharField(blank=True, help_text="e.g. Immediately, Two weeks notice", max_length=100)),
                ("description", models.TextField(blank=True)),
                ("cv", models.FileField(blank=True, null=True, upload_to="availability/cvs/")),
                ("cover_image", models.ImageField(blank=True, null=True, upload_to="availability/covers/")),
                ("work_location_type", models.CharField(choices=WORK_LOCATION_CHOICES, default="onsite", max_length=10)),
                ("remote_work_countries", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="availabilities", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
                "verbose_name_plural": "availabilities",
            },
        ),
        migrations.CreateModel(
            name="Application",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("full_name", models.CharField(max_length=200)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(blank=True, max_length=30)),
                ("cover_message", models.TextField(blank=True)),
                ("resume", models.FileField(upload_to="applications/resumes/")),
                ("cover_letter", models.FileField(upload_to="applications/cover_letters/")),
                ("status", models.CharField(choices=[("pending", "Pending"), ("reviewed", "Reviewed"), ("shortlisted", "Shortlisted"), ("accepted", "Accepted"), ("rejected", "Rejected")], db_index=True, default="pending", max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("applicant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="applications", to=settings.AUTH_USER_MODEL)),
                ("job", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="applications", to="job_list.job")),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="application",
            constraint=models.UniqueConstraint(fields=("job", "applicant"), name="unique_application_per_job"),
        ),
    ]
