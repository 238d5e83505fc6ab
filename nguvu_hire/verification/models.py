from django.contrib.auth.models import User
from django.db import models


class VerificationRequest(models.Model):
    """
    Opened when a verification payment completes. The user uploads documents
    while it is pending, submits it for review, and staff approve or reject.
    """

    PLAN_CHOICES = [
        ("basic_verification", "Basic Verification"),
        ("premium_verification", "Premium Verification"),
    ]

    STATUS_PENDING = "pending"
    STATUS_UNDER_REVIEW = "under_review"
    STATUS_APPROVED = "approved"
    STATUS_REJECTED = "rejected"
    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending documents"),
        (STATUS_UNDER_REVIEW, "Under review"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_REJECTED, "Rejected"),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="verification_requests")
    plan = models.CharField(max_length=30, choices=PLAN_CHOICES, default="basic_verification")
    payment = models.OneToOneField(
        "billing.Payment", on_delete=models.SET_NULL, null=True, blank=True, related_name="verification_request"
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    admin_notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    reviewed_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.user.username} {self.get_plan_display()} ({self.status})"

    @property
    def is_editable(self):
        return self.status == self.STATUS_PENDING


class VerificationDocument(models.Model):
    DOCUMENT_TYPE_CHOICES = [
        ("id_front", "ID (front)"),
        ("id_back", "ID (back)"),
        ("selfie", "Selfie holding ID"),
        ("business_registration", "Business registration"),
        ("other", "Other"),
    ]

    request = models.ForeignKey(VerificationRequest, on_delete=models.CASCADE, related_name="documents")
    document_type = models.CharField(max_length=30, choices=DOCUMENT_TYPE_CHOICES)
    file = models.FileField(upload_to="verification/")
    file_name = models.CharField(max_length=255, blank=True)
    file_size = models.PositiveIntegerField(default=0)
    mime_type = models.CharField(max_length=100, blank=True)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["document_type"]
        constraints = [
            models.UniqueConstraint(fields=["request", "document_type"], name="unique_document_per_type"),
        ]

    def __str__(self):
        return f"{self.get_document_type_display()} for request #{self.request_id}"
