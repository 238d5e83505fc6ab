# billing/models.py

from django.contrib.auth.models import User
from django.db import models
from django.utils import timezone

AUDIENCE_CHOICES = [
    ("job_seeker", "Job Seekers"),
    ("employer", "Employers"),
]


class SubscriptionPlan(models.Model):
    """Pricing tier. Seeded by `manage.py seed_plans`; prices in the payment currency."""

    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=60, unique=True)
    audience = models.CharField(max_length=20, choices=AUDIENCE_CHOICES, db_index=True)
    price_monthly = models.DecimalField(max_digits=8, decimal_places=2, default=0)
    price_yearly = models.DecimalField(max_digits=8, decimal_places=2, default=0)
    boost_credits = models.PositiveIntegerField(default=0)
    max_boost_duration = models.PositiveIntegerField(default=3, help_text="Days")
    features = models.JSONField(default=list, blank=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ["audience", "price_monthly"]

    def __str__(self):
        return f"{self.name} ({self.get_audience_display()})"

    @property
    def is_free(self):
        return self.price_monthly == 0 and self.price_yearly == 0

    def price_for(self, billing_cycle):
        return self.price_yearly if billing_cycle == UserSubscription.CYCLE_YEARLY else self.price_monthly


class UserSubscription(models.Model):
    STATUS_PENDING = "pending"
    STATUS_ACTIVE = "active"
    STATUS_CANCELED = "canceled"
    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_ACTIVE, "Active"),
        (STATUS_CANCELED, "Canceled"),
    ]

    CYCLE_MONTHLY = "monthly"
    CYCLE_YEARLY = "yearly"
    CYCLE_CHOICES = [
        (CYCLE_MONTHLY, "Monthly"),
        (CYCLE_YEARLY, "Yearly"),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="subscriptions")
    plan = models.ForeignKey(SubscriptionPlan, on_delete=models.PROTECT, related_name="subscriptions")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    billing_cycle = models.CharField(max_length=10, choices=CYCLE_CHOICES, default=CYCLE_MONTHLY)
    started_at = models.DateTimeField(blank=True, null=True)
    expires_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.user.username} → {self.plan.name} ({self.status})"

    @property
    def is_current(self):
        if self.status != self.STATUS_ACTIVE:
            return False
        return self.expires_at is None or self.expires_at > timezone.now()


class BoostCredit(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="boost_credit")
    credits_available = models.PositiveIntegerField(default=0)
    credits_used = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.user.username}: {self.credits_available} available"


class BoostedPost(models.Model):
    """Time-boxed promotion of a job or availability listing."""

    POST_JOB = "job"
    POST_AVAILABILITY = "availability"
    POST_TYPE_CHOICES = [
        (POST_JOB, "Job"),
        (POST_AVAILABILITY, "Availability"),
    ]

    BOOST_TYPE_CHOICES = [
        ("standard", "Standard"),
        ("premium", "Premium"),
        ("ultra", "Ultra"),
    ]

    post_type = models.CharField(max_length=20, choices=POST_TYPE_CHOICES)
    post_id = models.PositiveIntegerField()
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="boosts")
    boost_type = models.CharField(max_length=20, choices=BOOST_TYPE_CHOICES, default="standard")
    credits_used = models.PositiveIntegerField(default=1)
    boost_start = models.DateTimeField(default=timezone.now)
    boost_end = models.DateTimeField()
    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        ordering = ["-boost_start"]
        indexes = [
            models.Index(fields=["post_type", "post_id", "is_active"], name="billing_boost_post_idx"),
        ]

    def __str__(self):
        return f"{self.post_type}#{self.post_id} {self.boost_type} until {self.boost_end:%Y-%m-%d}"


class Payment(models.Model):
    """
    Local payment ledger with no card gateway behind it. A row starts
    pending and is completed (or failed) from the billing admin, which then
    applies its effect exactly once.
    """

    TYPE_VERIFICATION = "verification"
    TYPE_SUBSCRIPTION = "subscription"
    TYPE_BOOST = "boost"
    TYPE_CHOICES = [
        (TYPE_VERIFICATION, "Verification"),
        (TYPE_SUBSCRIPTION, "Subscription"),
        (TYPE_BOOST, "Boost credits"),
    ]

    STATUS_PENDING = "pending"
    STATUS_COMPLETED = "completed"
    STATUS_FAILED = "failed"
    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_COMPLETED, "Completed"),
        (STATUS_FAILED, "Failed"),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="payments")
    payment_type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    reference = models.CharField(max_length=80, unique=True)
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    currency = models.CharField(max_length=3, default="USD")
    description = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    plan = models.ForeignKey(SubscriptionPlan, on_delete=models.SET_NULL, null=True, blank=True, related_name="payments")
    post_type = models.CharField(max_length=20, choices=BoostedPost.POST_TYPE_CHOICES, blank=True)
    post_id = models.PositiveIntegerField(blank=True, null=True)
    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    completed_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.reference} {self.amount} {self.currency} ({self.status})"

    @property
    def is_pending(self):
        return self.status == self.STATUS_PENDING
