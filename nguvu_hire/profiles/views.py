# profiles/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.contrib.auth.models import User
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from nguvu_hire.core.utils.analytics import track_event
from nguvu_hire.job_list.models import Availability, Job
from .forms import OnboardingForm, profile_form_class
from .models import Profile

logger = logging.getLogger(__name__)


def _get_profile(user) -> Profile:
    profile, _ = Profile.objects.get_or_create(user=user, defaults={"username": user.username})
    return profile


# =========================
# Onboarding
# =========================
@login_required
def onboarding(request):
    """First-run role/country picker; employer type only matters for employers."""
    profile = _get_profile(request.user)
    if request.method == "POST":
        form = OnboardingForm(request.POST, instance=profile)
        if form.is_valid():
            profile = form.save(commit=False)
            profile.employer_type = form.cleaned_data.get("employer_type") or ""
            profile.save()
            logger.info("Onboarding completed for user %s as %s", request.user.pk, profile.role)
            messages.success(request, "Welcome aboard! Finish your profile so others can find you.")
            return redirect("profiles:edit_profile")
    else:
        form = OnboardingForm(instance=profile)
    return render(request, "profiles/onboarding.html", {"form": form})


# =========================
# Own profile
# =========================
@login_required
def my_profile(request):
    profile = _get_profile(request.user)
    jobs = Job.objects.filter(created_by=request.user).order_by("-created_at")
    availabilities = Availability.objects.filter(created_by=request.user).order_by("-created_at")
    return render(request, "profiles/my_profile.html", {
        "profile": profile,
        "jobs": jobs,
        "availabilities": availabilities,
    })


@login_required
def edit_profile(request):
    profile = _get_profile(request.user)
    form_class = profile_form_class(profile)
    if request.method == "POST":
        form = form_class(request.POST, request.FILES, instance=profile)
        if form.is_valid():
            form.save()
            messages.success(request, "Profile updated.")
            return redirect("profiles:my_profile")
        messages.error(request, "Please fix the highlighted fields.")
    else:
        form = form_class(instance=profile)
    return render(request, "profiles/edit_profile.html", {"form": form, "profile": profile})


@require_POST
@login_required
def remove_profile_picture(request):
    profile = _get_profile(request.user)
    if profile.profile_picture:
        profile.profile_picture.delete(save=True)
        messages.success(request, "Profile picture removed.")
    return redirect("profiles:my_profile")


# =========================
# Public profile
# =========================
def public_profile(request, user_id: int):
    owner = get_object_or_404(User.objects.select_related("profile"), pk=user_id)
    profile = _get_profile(owner)
    if not profile.is_active and not request.user.is_staff:
        messages.error(request, "This profile is not available.")
        return redirect("main:home")

    if request.user.is_authenticated and request.user != owner:
        track_event(event_type="profile_view", request=request, metadata={"profile_user_id": owner.pk})

    context = {
        "profile": profile,
        "owner": owner,
        "jobs": Job.objects.filter(created_by=owner).order_by("-created_at"),
        "availabilities": Availability.objects.filter(created_by=owner).order_by("-created_at"),
        "is_owner": request.user == owner,
    }
    return render(request, "profiles/public_profile.html", context)
