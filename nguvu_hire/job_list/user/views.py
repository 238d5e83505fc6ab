# job_list/user/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpResponseForbidden
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from nguvu_hire.core.utils.analytics import track_event
from nguvu_hire.dashboard.services.notifications import notify
from nguvu_hire.job_list.forms import ApplicationForm, AvailabilityForm
from nguvu_hire.job_list.models import Application, Availability, Job
from nguvu_hire.job_list.services.feed import KIND_JOBS, base_queryset, build_feed, filter_posts, preserved_query
from nguvu_hire.profiles.models import is_employer

logger = logging.getLogger(__name__)  # Set up logger for this module

BROWSE_TABS = ("jobs", "talent", "services")


# ---------- Public browse with tabs ----------
def browse_view(request):
    """
    Tabs:
      - jobs: employer job posts
      - talent: candidate availability listings
      - services: placeholder panel
    Filters: q (keyword), location (location or country), page
    """
    tab = request.GET.get('tab') or KIND_JOBS
    if tab not in BROWSE_TABS:
        tab = KIND_JOBS
    q = (request.GET.get('q') or '').strip()
    location = (request.GET.get('location') or '').strip()

    context = {'tab': tab, 'q': q, 'location': location, 'feed': None, 'kind': tab,
               'querystring': preserved_query(request.GET)}
    if tab != 'services':
        posts = filter_posts(base_queryset(tab), tab, q=q, location=location)
        context['feed'] = build_feed(tab, posts, request.GET.get('page'))

    return render(request, 'job_list/browse.html', context)


# ---------- Details ----------
def job_detail_view(request, job_id):
    job = get_object_or_404(Job.objects.select_related('created_by__profile'), pk=job_id)
    has_applied = (
        request.user.is_authenticated
        and Application.objects.filter(job=job, applicant=request.user).exists()
    )
    return render(request, 'job_list/job_detail.html', {
        'job': job,
        'has_applied': has_applied,
        'is_owner': request.user == job.created_by,
    })


def availability_detail_view(request, availability_id):
    availability = get_object_or_404(
        Availability.objects.select_related('created_by__profile'), pk=availability_id
    )
    return render(request, 'job_list/availability_detail.html', {
        'availability': availability,
        'is_owner': request.user == availability.created_by,
        'can_hire': is_employer(request.user) and request.user != availability.created_by,
    })


# ---------- Apply to a job ----------
@login_required
def apply_to_job(request, job_id):
    job = get_object_or_404(Job, pk=job_id)

    if job.created_by_id == request.user.id:
        messages.error(request, "You can't apply to your own job.")
        return redirect('job_list:job_detail', job_id=job.id)

    if job.is_expired:
        messages.error(request, "This job is no longer accepting applications.")
        return redirect('job_list:job_detail', job_id=job.id)

    # Prevent duplicate applications
    if Application.objects.filter(applicant=request.user, job=job).exists():
        messages.warning(request, "You already applied.")
        return redirect('job_list:job_detail', job_id=job.id)

    profile = request.user.profile
    if request.method == 'POST':
        form = ApplicationForm(request.POST, request.FILES)
        if form.is_valid():
            application = form.save(commit=False)
            application.job = job
            application.applicant = request.user
            application.status = 'pending'
            application.save()
            logger.info("Application %s submitted for job %s by user %s", application.pk, job.pk, request.user.pk)

            track_event(
                event_type='application_submitted',
                user=request.user,
                metadata={'job_id': job.id, 'application_id': application.id},
            )
            notify(
                job.created_by,
                title="New application",
                message=f"{application.full_name} applied for \"{job.title}\".",
                type="new_application",
                related_id=application.id,
            )
            messages.success(request, "Application submitted!")
            return redirect('job_list:job_detail', job_id=job.id)
    else:
        form = ApplicationForm(initial={
            'full_name': profile.full_name,
            'email': request.user.email,
            'phone': profile.phone_number,
        })

    return render(request, 'job_list/apply.html', {'job': job, 'form': form})


# ---------- Availability CRUD (candidates) ----------
@login_required
def post_availability(request):
    if is_employer(request.user):
        messages.error(request, "Employers post jobs, not availability listings.")
        return redirect('dashboard:dashboard')

    if request.method == 'POST':
        form = AvailabilityForm(request.POST, request.FILES)
        if form.is_valid():
            availability = form.save(commit=False)
            availability.created_by = request.user
            availability.save()
            track_event(event_type='availability_created', user=request.user, metadata={'availability_id': availability.id})
            messages.success(request, "Your availability is live.")
            return redirect('job_list:availability_detail', availability_id=availability.id)
    else:
        profile = request.user.profile
        form = AvailabilityForm(initial={
            'name': profile.full_name,
            'skills': profile.skills,
            'country': profile.country,
        })
    return render(request, 'job_list/availability_form.html', {'form': form, 'editing': False})


@login_required
def edit_availability(request, availability_id):
    availability = get_object_or_404(Availability, pk=availability_id)
    if availability.created_by_id != request.user.id:
        return HttpResponseForbidden("You can only edit your own listings.")

    if request.method == 'POST':
        form = AvailabilityForm(request.POST, request.FILES, instance=availability)
        if form.is_valid():
            form.save()
            messages.success(request, "Listing updated.")
            return redirect('job_list:availability_detail', availability_id=availability.id)
    else:
        form = AvailabilityForm(instance=availability)
    return render(request, 'job_list/availability_form.html', {
        'form': form,
        'editing': True,
        'availability': availability,
    })


@require_POST
@login_required
def delete_availability(request, availability_id):
    availability = get_object_or_404(Availability, pk=availability_id)
    if availability.created_by_id != request.user.id and not request.user.is_staff:
        return HttpResponseForbidden("You can only delete your own listings.")
    availability.delete()
    logger.info("Availability %s deleted by user %s", availability_id, request.user.pk)
    messages.success(request, "Listing deleted.")
    return redirect('profiles:my_profile')
