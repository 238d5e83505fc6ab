from django.contrib.auth.models import User
from django.db import models


class Hire(models.Model):
    """Employer's offer to a candidate, made from an availability listing."""

    STATUS_PENDING = 'pending'
    STATUS_ACCEPTED = 'accepted'
    STATUS_REJECTED = 'rejected'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_ACCEPTED, 'Accepted'),
        (STATUS_REJECTED, 'Rejected'),
    ]

    employer = models.ForeignKey(User, on_delete=models.CASCADE, related_name='hires_sent')
    job_seeker = models.ForeignKey(User, on_delete=models.CASCADE, related_name='hires_received')
    availability = models.ForeignKey(
        'job_list.Availability', on_delete=models.SET_NULL, null=True, blank=True, related_name='hires'
    )
    # Snapshot of the listing at request time; the listing may be edited or deleted later
    job_seeker_name = models.CharField(max_length=200)
    desired_position = models.CharField(max_length=200)
    employer_message = models.TextField()
    job_seeker_response = models.TextField(blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.employer.username} → {self.job_seeker_name} ({self.status})"

    @property
    def is_pending(self):
        return self.status == self.STATUS_PENDING
