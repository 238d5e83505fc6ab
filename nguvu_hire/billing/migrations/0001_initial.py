from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


POST_TYPE_CHOICES = [("job", "Job"), ("availability", "Availability")]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="SubscriptionPlan",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("slug", models.SlugField(max_length=60, unique=True)),
                ("audience", models.CharField(choices=[("job_seeker", "Job Seekers"), ("employer", "Employers")], db_index=True, max_length=20)),
                ("price_monthly", models.DecimalField(decimal_places=2, default=0, max_digits=8)),
                ("price_yearly", models.DecimalField(decimal_places=2, default=0, max_digits=8)),
                ("boost_credits", models.PositiveIntegerField(default=0)),
                ("max_boost_duration", models.PositiveIntegerField(default=3, help_text="Days")),
                ("features", models.JSONField(blank=True, default=list)),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={
                "ordering": ["audience", "price_monthly"],
            },
        ),
        migrations.CreateModel(
            name="UserSubscription",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(choices=[("pending", "Pending"), ("active", "Active"), ("canceled", "Canceled")], db_index=True, default="pending", max_length=20)),
                ("billing_cycle", models.CharField(choices=[("monthly", "Monthly"), ("yearly", "Yearly")], default="monthly", max_length=10)),
                ("started_at", models.DateTimeField(blank=True, null=True)),
                ("expires_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("plan", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="subscriptions", to="billing.subscriptionplan")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="subscriptions", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="BoostCredit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("credits_available", models.PositiveIntegerField(default=0)),
                ("credits_used", models.PositiveIntegerField(default=0)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="boost_credit", to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.CreateModel(
            name="BoostedPost",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("post_type", models.CharField(choices=POST_TYPE_CHOICES, max_length=20)),
                ("post_id", models.PositiveIntegerField()),
                ("boost_type", models.CharField(choices=[("standard", "Standard"), ("premium", "Premium"), ("ultra", "Ultra")], default="standard", max_length=20)),
                ("credits_used", models.PositiveIntegerField(default=1)),
                ("boost_start", models.DateTimeField(default=django.utils.timezone.now)),
                ("boost_end", models.DateTimeField()),
                ("is_active", models.BooleanField(db_index=True, default=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="boosts", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-boost_start"],
                "indexes": [models.Index(fields=["post_type", "post_id", "is_active"], name="billing_boost_post_idx")],
            },
        ),
        migrations.CreateModel(
            name="Payment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("payment_type", models.CharField(choices=[("verification", "Verification"), ("subscription", "Subscription"), ("boost", "Boost credits")], max_length=20)),
                ("reference", models.CharField(max_length=80, unique=True)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=10)),
                ("currency", models.CharField(default="USD", max_length=3)),
                ("description", models.CharField(blank=True, max_length=255)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("completed", "Completed"), ("failed", "Failed")], db_index=True, default="pending", max_length=20)),
                ("post_type", models.CharField(blank=True, choices=POST_TYPE_CHOICES, max_length=20)),
                ("post_id", models.PositiveIntegerField(blank=True, null=True)),
                ("metadata", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("completed_at", models.DateTimeField(blank=True, null=True)),
                ("plan", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="payments", to="billing.subscriptionplan")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="payments", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
