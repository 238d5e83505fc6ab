# ============================
# profiles/models.py
# ============================
from __future__ import annotations

from django.contrib.auth.models import User
from django.db import models
from django.utils import timezone

from nguvu_hire.core.constants import country_code


ROLE_JOB_SEEKER = "job_seeker"
ROLE_EMPLOYER = "employer"
ROLE_ADMIN = "admin"

ROLE_CHOICES = [
    (ROLE_JOB_SEEKER, "Job Seeker"),
    (ROLE_EMPLOYER, "Employer"),
    (ROLE_ADMIN, "Admin"),
]

EMPLOYER_TYPE_CHOICES = [
    ("company", "Company"),
    ("agency", "Recruitment Agency"),
    ("recruiter", "Independent Recruiter"),
    ("freelancer", "Freelancer / Contractor"),
]

COMPANY_SIZE_CHOICES = [
    ("1-10", "1-10 employees"),
    ("11-50", "11-50 employees"),
    ("51-200", "51-200 employees"),
    ("201-1000", "201-1000 employees"),
    ("1000+", "1000+ employees"),
]


class Profile(models.Model):
    """
    One profile per account, created by the post_save signal on User.

    A single table covers both sides of the marketplace; which fields are
    used depends on `role` and, for employers, `employer_type`.
    """

    # --- Core link ---
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="profile")

    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_JOB_SEEKER, db_index=True)
    employer_type = models.CharField(max_length=20, choices=EMPLOYER_TYPE_CHOICES, blank=True)

    # --- Person fields ---
    first_name = models.CharField(max_length=100, blank=True)
    last_name = models.CharField(max_length=100, blank=True)
    username = models.CharField(max_length=150, blank=True, help_text="Public handle shown on cards.")
    bio = models.TextField(blank=True)
    skills = models.TextField(blank=True, help_text="Comma separated.")
    experience = models.TextField(blank=True)
    years_of_experience = models.PositiveIntegerField(blank=True, null=True)
    hourly_rate = models.DecimalField(max_digits=8, decimal_places=2, blank=True, null=True)
    portfolio = models.URLField(blank=True)
    linkedin = models.URLField(blank=True)
    services_offered = models.TextField(blank=True)
    specialization = models.CharField(max_length=200, blank=True)

    # --- Organisation fields ---
    company_name = models.CharField(max_length=200, blank=True)
    industry = models.CharField(max_length=120, blank=True)
    company_size = models.CharField(max_length=20, choices=COMPANY_SIZE_CHOICES, blank=True)
    website = models.URLField(blank=True)
    company_description = models.TextField(blank=True)

    # --- Contact / location ---
    country = models.CharField(max_length=100, blank=True)
    phone_number = models.CharField(max_length=30, blank=True)
    profile_picture = models.ImageField(upload_to="profile_pics/", blank=True, null=True)

    # --- Verification badge ---
    is_verified = models.BooleanField(default=False, db_index=True)
    verified_at = models.DateTimeField(blank=True, null=True)

    # --- Platform account control (NOT A ROLE FIELD) ---
    is_active = models.BooleanField(default=True, help_text="Platform-controlled account state.")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.display_name} ({self.get_role_display()})"

    # =========================
    # Computed role properties
    # =========================
    @property
    def is_employer(self) -> bool:
        return self.role == ROLE_EMPLOYER

    @property
    def is_job_seeker(self) -> bool:
        return self.role == ROLE_JOB_SEEKER

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def display_name(self) -> str:
        """Employers show their organisation first; everyone falls back to 'User'."""
        if self.is_employer and self.company_name.strip():
            return self.company_name.strip()
        return self.full_name or "User"

    @property
    def country_code(self) -> str:
        return country_code(self.country)

    @property
    def skill_list(self) -> list[str]:
        return [s.strip() for s in (self.skills or "").split(",") if s.strip()]

    def mark_verified(self, when=None):
        self.is_verified = True
        self.verified_at = when or timezone.now()
        self.save(update_fields=["is_verified", "verified_at", "updated_at"])


# =========================
# Role helpers for views
# =========================
def get_role(user) -> str:
    """Role of a (possibly anonymous) user; '' when signed out."""
    if not getattr(user, "is_authenticated", False):
        return ""
    profile = getattr(user, "profile", None)
    return profile.role if profile else ROLE_JOB_SEEKER


def is_employer(user) -> bool:
    return get_role(user) == ROLE_EMPLOYER
