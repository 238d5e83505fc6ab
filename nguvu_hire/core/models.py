# core/models.py

from django.db import models
from django.contrib.auth.models import User


class AnalyticsEvent(models.Model):
    """
    Lightweight analytics event for app insights.
    - user: optional, for logged-in actions
    - event_type: short string label (e.g., 'page_view', 'job_created')
    - path: optional URL path for page views
    - metadata: JSON blob for IP, user_agent, or extra context
    - created_at: timestamp

    NOTE: Keep this non-blocking at call sites; use a best-effort helper.
    """

    EVENT_TYPES = (
        ("page_view", "Page View"),
        ("profile_view", "Profile View"),
        ("profile_created", "Profile Created"),
        ("profile_updated", "Profile Updated"),
        ("job_created", "Job Created"),
        ("availability_created", "Availability Created"),
        ("application_submitted", "Application Submitted"),
        ("hire_requested", "Hire Requested"),
        ("post_boosted", "Post Boosted"),
        ("payment_created", "Payment Created"),
        ("payment_completed", "Payment Completed"),
        ("verification_submitted", "Verification Submitted"),
    )

    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True, related_name="analytics_events")
    event_type = models.CharField(max_length=64, db_index=True, choices=EVENT_TYPES)
    path = models.CharField(max_length=512, blank=True, help_text="Request path if applicable")
    metadata = models.JSONField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        indexes = [
            models.Index(fields=["event_type", "created_at"], name="core_event_type_created_idx"),
        ]
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        who = self.user.username if self.user else "anon"
        return f"{self.event_type} by {who} @ {self.created_at:%Y-%m-%d %H:%M:%S}"
