# hires/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpResponseForbidden
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from nguvu_hire.core.utils.analytics import track_event
from nguvu_hire.dashboard.services.notifications import mark_types_read, notify
from nguvu_hire.job_list.models import Availability
from nguvu_hire.profiles.models import is_employer
from .forms import HireRequestForm, HireResponseForm
from .models import Hire

logger = logging.getLogger(__name__)


# =========================
# Employer side
# =========================
@login_required
def send_hire_request(request, availability_id):
    availability = get_object_or_404(Availability.objects.select_related('created_by'), pk=availability_id)

    if not is_employer(request.user):
        messages.error(request, "Only employers can send hire requests.")
        return redirect('job_list:availability_detail', availability_id=availability.id)
    if availability.created_by_id == request.user.id:
        messages.error(request, "You can't hire yourself.")
        return redirect('job_list:availability_detail', availability_id=availability.id)

    if request.method == 'POST':
        form = HireRequestForm(request.POST)
        if form.is_valid():
            hire = Hire.objects.create(
                employer=request.user,
                job_seeker=availability.created_by,
                availability=availability,
                job_seeker_name=availability.name,
                desired_position=availability.desired_job,
                employer_message=form.compose(),
            )
            logger.info("Hire request %s sent by user %s", hire.pk, request.user.pk)
            track_event(event_type='hire_requested', user=request.user, metadata={'hire_id': hire.id})

            employer_name = request.user.profile.display_name
            notify(
                availability.created_by,
                title="New hire request",
                message=f"{employer_name} wants to hire you for {availability.desired_job}",
                type="hire_request",
                related_id=hire.id,
            )
            messages.success(request, "Hire request sent!")
            return redirect('hires:sent_requests')
        messages.error(request, "Please include a message and your contact information.")
    else:
        form = HireRequestForm()

    return render(request, 'hires/send_request.html', {'form': form, 'availability': availability})


@login_required
def sent_requests(request):
    hires = Hire.objects.filter(employer=request.user).select_related('job_seeker__profile')
    mark_types_read(request.user, ['hire_status_update'])
    return render(request, 'hires/sent_requests.html', {'hires': hires})


# =========================
# Candidate side
# =========================
@login_required
def hire_requests(request):
    hires = Hire.objects.filter(job_seeker=request.user).select_related('employer__profile')
    mark_types_read(request.user, ['hire_request'])
    return render(request, 'hires/hire_requests.html', {'hires': hires})


@require_POST
@login_required
def respond_to_hire(request, hire_id):
    hire = get_object_or_404(Hire.objects.select_related('employer'), pk=hire_id)
    if hire.job_seeker_id != request.user.id:
        return HttpResponseForbidden("Not your hire request.")

    form = HireResponseForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Choose accept or decline.")
        return redirect('hires:hire_requests')

    accepted = form.cleaned_data['action'] == 'accept'
    hire.status = Hire.STATUS_ACCEPTED if accepted else Hire.STATUS_REJECTED
    hire.job_seeker_response = (form.cleaned_data.get('response') or '').strip()
    hire.save(update_fields=['status', 'job_seeker_response', 'updated_at'])

    name = hire.job_seeker_name
    if accepted:
        text = f"🎉 {name} accepted your hire request for {hire.desired_position}!"
    else:
        text = f"😞 {name} declined your hire request for {hire.desired_position}."
    notify(hire.employer, title="Hire request update", message=text, type="hire_status_update", related_id=hire.id)

    messages.success(request, "Response sent.")
    return redirect('hires:hire_requests')


@require_POST
@login_required
def delete_hire(request, hire_id):
    hire = get_object_or_404(Hire, pk=hire_id)
    if request.user.id not in (hire.job_seeker_id, hire.employer_id):
        return HttpResponseForbidden("Not your hire request.")
    was_employer = hire.employer_id == request.user.id
    hire.delete()
    messages.success(request, "Hire request deleted.")
    return redirect('hires:sent_requests' if was_employer else 'hires:hire_requests')
