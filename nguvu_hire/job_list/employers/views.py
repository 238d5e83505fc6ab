# job_list/employers/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpResponseForbidden
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from nguvu_hire.core.utils.analytics import track_event
from nguvu_hire.dashboard.services.notifications import mark_types_read, notify
from nguvu_hire.job_list.forms import ApplicationStatusForm, JobForm
from nguvu_hire.job_list.models import Application, Job
from nguvu_hire.profiles.models import is_employer

logger = logging.getLogger(__name__)


def _employers_only(request):
    if not is_employer(request.user):
        # Be friendly: redirect to the dashboard instead of 403
        messages.error(request, "Access denied: Employers only.")
        return redirect('dashboard:dashboard')
    return None


# =========================
# Job CRUD
# =========================
@login_required
def post_job(request):
    denied = _employers_only(request)
    if denied:
        return denied

    profile = request.user.profile
    if request.method == 'POST':
        form = JobForm(request.POST, request.FILES)
        if form.is_valid():
            job = form.save(commit=False)
            job.created_by = request.user
            if not job.company:
                job.company = profile.display_name
            job.save()
            logger.info("Job %s created by user %s", job.pk, request.user.pk)
            track_event(event_type='job_created', user=request.user, metadata={'job_id': job.id})
            messages.success(request, "Job posted.")
            return redirect('job_list:job_detail', job_id=job.id)
    else:
        form = JobForm(initial={'company': profile.company_name, 'country': profile.country})
    return render(request, 'job_list/job_form.html', {'form': form, 'editing': False})


@login_required
def edit_job(request, job_id):
    job = get_object_or_404(Job, pk=job_id)
    if job.created_by_id != request.user.id:
        return HttpResponseForbidden("You can only edit your own jobs.")

    if request.method == 'POST':
        form = JobForm(request.POST, request.FILES, instance=job)
        if form.is_valid():
            form.save()
            messages.success(request, "Job updated.")
            return redirect('job_list:job_detail', job_id=job.id)
    else:
        form = JobForm(instance=job)
    return render(request, 'job_list/job_form.html', {'form': form, 'editing': True, 'job': job})


@require_POST
@login_required
def delete_job(request, job_id):
    job = get_object_or_404(Job, pk=job_id)
    if job.created_by_id != request.user.id and not request.user.is_staff:
        return HttpResponseForbidden("You can only delete your own jobs.")
    job.delete()
    logger.info("Job %s deleted by user %s", job_id, request.user.pk)
    messages.success(request, "Job deleted.")
    return redirect('profiles:my_profile')


# =========================
# Applications received
# =========================
@login_required
def applications_view(request):
    denied = _employers_only(request)
    if denied:
        return denied

    applications = (
        Application.objects.filter(job__created_by=request.user)
        .select_related('job', 'applicant__profile')
        .order_by('-created_at')
    )
    status = (request.GET.get('status') or '').strip()
    if status:
        applications = applications.filter(status=status)

    # Opening the page clears the "new application" badge
    mark_types_read(request.user, ['new_application'])

    return render(request, 'job_list/applications.html', {
        'applications': applications,
        'status': status,
        'status_choices': Application.STATUS_CHOICES,
    })


@require_POST
@login_required
def update_application_status(request, application_id):
    application = get_object_or_404(Application.objects.select_related('job'), pk=application_id)
    if application.job.created_by_id != request.user.id:
        return HttpResponseForbidden("Not your job.")

    form = ApplicationStatusForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Invalid status.")
        return redirect('job_list:applications')

    application.status = form.cleaned_data['status']
    application.save(update_fields=['status', 'updated_at'])
    notify(
        application.applicant,
        title="Application update",
        message=f'Your application for "{application.job.title}" has been {application.status}.',
        type="application_status",
        related_id=application.id,
    )
    messages.success(request, "Application status updated.")
    return redirect('job_list:applications')


@require_POST
@login_required
def delete_application(request, application_id):
    application = get_object_or_404(Application.objects.select_related('job'), pk=application_id)
    if application.job.created_by_id != request.user.id and not request.user.is_staff:
        return HttpResponseForbidden("Not your job.")
    application.delete()
    messages.success(request, "Application removed.")
    return redirect('job_list:applications')
