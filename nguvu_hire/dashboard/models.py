from django.contrib.auth.models import User
from django.db import models


class Notification(models.Model):
    """In-app notification.

    Every row is addressed to one user. `type` drives where the row links to
    and which page clears it; `related_id` points at the hire, application,
    verification request or payment the notification is about.
    """

    TYPE_CHOICES = [
        ("hire_request", "Hire request"),
        ("new_application", "New application"),
        ("application_status", "Application status"),
        ("hire_status_update", "Hire status update"),
        ("verification_submitted", "Verification submitted"),
        ("verification_approved", "Verification approved"),
        ("verification_rejected", "Verification rejected"),
        ("payment_completed", "Payment completed"),
        ("system", "System"),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="notifications")
    title = models.CharField(max_length=200, blank=True)
    message = models.TextField()
    type = models.CharField(max_length=40, choices=TYPE_CHOICES, default="system", db_index=True)
    related_id = models.PositiveIntegerField(blank=True, null=True)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["user", "is_read"], name="dashboard_notif_user_read_idx"),
        ]

    def __str__(self):
        return f"{self.get_type_display()} → {self.user.username}"
