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
            name="Profile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(choices=[("job_seeker", "Job Seeker"), ("employer", "Employer"), ("admin", "Admin")], db_index=True, default="job_seeker", max_length=20)),
                ("employer_type", models.CharField(blank=True, choices=[("company", "Company"), ("agency", "Recruitment Agency"), ("recruiter", "Independent Recruiter"), ("freelancer", "Freelancer / Contractor")], max_length=20)),
                ("first_name", models.CharField(blank=True, max_length=100)),
                ("last_name", models.CharField(blank=True, max_length=100)),
                ("username", models.CharField(blank=True, help_text="Public handle shown on cards.", max_length=150)),
                ("bio", models.TextField(blank=True)),
                ("skills", models.TextField(blank=True, help_text="Comma separated.")),
                ("experience", models.TextField(blank=True)),
                ("years_of_experience", models.PositiveIntegerField(blank=True, null=True)),
                ("hourly_rate", models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ("portfolio", models.URLField(blank=True)),
                ("linkedin", models.URLField(blank=True)),
                ("services_offered", models.TextField(blank=True)),
                ("specialization", models.CharField(blank=True, max_length=200)),
                ("company_name", models.CharField(blank=True, max_length=200)),
                ("industry", models.CharField(blank=True, max_length=120)),
                ("company_size", models.CharField(blank=True, choices=[("1-10", "1-10 employees"), ("11-50", "11-50 employees"), ("51-200", "51-200 employees"), ("201-1000", "201-1000 employees"), ("1000+", "1000+ employees")], max_length=20)),
                ("website", models.URLField(blank=True)),
                ("company_description", models.TextField(blank=True)),
                ("country", models.CharField(blank=True, max_length=100)),
                ("phone_number", models.CharField(blank=True, max_length=30)),
                ("profile_picture", models.ImageField(blank=True, null=True, upload_to="profile_pics/")),
                ("is_verified", models.BooleanField(db_index=True, default=False)),
                ("verified_at", models.DateTimeField(blank=True, null=True)),
                ("is_active", models.BooleanField(default=True, help_text="Platform-controlled account state.")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
