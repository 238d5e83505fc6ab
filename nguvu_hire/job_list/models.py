from django.contrib.auth.models import User
from django.db import models
from django.urls import reverse
from django.utils import timezone


WORK_LOCATION_CHOICES = [
    ('onsite', 'On-site'),
    ('remote', 'Remote'),
    ('hybrid', 'Hybrid'),
]


class Job(models.Model):
    """
    Employer job post.
    Country fields hold country names; JSON list fields hold names too so the
    region search can compare them directly.
    """

    title = models.CharField(max_length=200)
    description = models.TextField()
    responsibilities = models.TextField(blank=True)
    requirements = models.TextField(blank=True)
    company = models.CharField(max_length=200, blank=True)
    location = models.CharField(max_length=200, blank=True)
    country = models.CharField(max_length=100, blank=True, db_index=True)

    # Where the employer would like candidates to come from
    preferred_location = models.CharField(max_length=200, blank=True)
    preferred_candidate_countries = models.JSONField(default=list, blank=True)

    work_location_type = models.CharField(max_length=10, choices=WORK_LOCATION_CHOICES, default='onsite')
    remote_work_countries = models.JSONField(default=list, blank=True)

    cover_photo = models.ImageField(upload_to='jobs/covers/', blank=True, null=True)
    deadline = models.DateField(blank=True, null=True)

    created_by = models.ForeignKey(User, on_delete=models.CASCADE, related_name='jobs')
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} at {self.company or self.created_by.username}"

    def get_absolute_url(self):
        return reverse('job_list:job_detail', kwargs={'job_id': self.pk})

    @property
    def is_expired(self) -> bool:
        return bool(self.deadline and self.deadline < timezone.localdate())


class Availability(models.Model):
    """A candidate's 'available for work' listing, shown to employers."""

    name = models.CharField(max_length=200)
    desired_job = models.CharField(max_length=200)
    skills = models.TextField(blank=True, help_text="Comma separated.")
    location = models.CharField(max_length=200, blank=True)
    country = models.CharField(max_length=100, blank=True, db_index=True)
    availability = models.CharField(max_length=100, blank=True, help_text="e.g. Immediately, Two weeks notice")
    description = models.TextField(blank=True)
    cv = models.FileField(upload_to='availability/cvs/', blank=True, null=True)
    cover_image = models.ImageField(upload_to='availability/covers/', blank=True, null=True)

    work_location_type = models.CharField(max_length=10, choices=WORK_LOCATION_CHOICES, default='onsite')
    remote_work_countries = models.JSONField(default=list, blank=True)

    created_by = models.ForeignKey(User, on_delete=models.CASCADE, related_name='availabilities')
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name_plural = 'availabilities'

    def __str__(self):
        return f"{self.name} - {self.desired_job}"

    def get_absolute_url(self):
        return reverse('job_list:availability_detail', kwargs={'availability_id': self.pk})

    @property
    def skill_list(self):
        return [s.strip() for s in (self.skills or '').split(',') if s.strip()]


class Application(models.Model):
    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('reviewed', 'Reviewed'),
        ('shortlisted', 'Shortlisted'),
        ('accepted', 'Accepted'),
        ('rejected', 'Rejected'),
    ]

    job = models.ForeignKey(Job, on_delete=models.CASCADE, related_name='applications')
    applicant = models.ForeignKey(User, on_delete=models.CASCADE, related_name='applications')
    full_name = models.CharField(max_length=200)
    email = models.EmailField()
    phone = models.CharField(max_length=30, blank=True)
    cover_message = models.TextField(blank=True)
    resume = models.FileField(upload_to='applications/resumes/')
    cover_letter = models.FileField(upload_to='applications/cover_letters/')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending', db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['job', 'applicant'], name='unique_application_per_job'),
        ]

    def __str__(self):
        return f"{self.full_name} → {self.job.title} ({self.status})"
