# dashboard/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from nguvu_hire.job_list.services.feed import KIND_JOBS, KIND_TALENT, base_queryset, build_feed, filter_posts, preserved_query
from nguvu_hire.job_list.services.search import region_filter
from nguvu_hire.profiles.models import is_employer
from .models import Notification
from .services.notifications import unread_count

logger = logging.getLogger(__name__)

# Notification types that open a dedicated page instead of the list
NOTIFICATION_TARGETS = {
    "hire_request": "hires:hire_requests",
    "hire_status_update": "hires:sent_requests",
    "new_application": "job_list:applications",
}


# =========================
# Feed dashboard
# =========================
@login_required
def dashboard_view(request):
    """
    Employers browse candidate availability; everyone else browses jobs.
    Filters: q, from, to, local=1 (profile country for both), page.
    """
    profile = request.user.profile
    if not profile.country and not request.GET:
        # First visit without a country yet: finish onboarding
        return redirect('profiles:onboarding')

    kind = KIND_TALENT if is_employer(request.user) else KIND_JOBS
    q = (request.GET.get('q') or '').strip()
    show_local = request.GET.get('local') == '1'
    from_country = (request.GET.get('from') or '').strip()
    to_country = (request.GET.get('to') or '').strip()
    if show_local:
        from_country = to_country = profile.country

    posts = filter_posts(base_queryset(kind), kind, q=q)
    posts = region_filter(posts, kind, from_country=from_country, to_country=to_country)
    feed = build_feed(kind, posts, request.GET.get('page'))

    # Pre-fill the region inputs on first load; filters apply once submitted
    first_load = not request.GET
    context = {
        'feed': feed,
        'kind': kind,
        'q': q,
        'from_country': profile.country if first_load else from_country,
        'to_country': profile.country if first_load else to_country,
        'show_local': show_local,
        'querystring': preserved_query(request.GET),
        'profile': profile,
    }
    return render(request, 'dashboard/dashboard.html', context)


# =========================
# Notifications
# =========================
@login_required
def notifications_view(request):
    notes = Notification.objects.filter(user=request.user).order_by('-created_at', '-id')
    return render(request, 'dashboard/notifications.html', {
        'notifications': notes,
        'unread': notes.filter(is_read=False).count(),
    })


@require_POST
@login_required
def mark_notification_read(request, notification_id):
    note = get_object_or_404(Notification, pk=notification_id, user=request.user)
    if not note.is_read:
        note.is_read = True
        note.save(update_fields=['is_read'])
    target = NOTIFICATION_TARGETS.get(note.type)
    if target:
        return redirect(target)
    return redirect('dashboard:notifications')


@require_POST
@login_required
def mark_all_read(request):
    Notification.objects.filter(user=request.user, is_read=False).update(is_read=True)
    if request.headers.get('x-requested-with') == 'XMLHttpRequest':
        return JsonResponse({'ok': True, 'action': 'mark_all_read'})
    messages.success(request, 'All notifications marked as read.')
    return redirect('dashboard:notifications')


@require_POST
@login_required
def delete_notification(request, notification_id):
    note = get_object_or_404(Notification, pk=notification_id, user=request.user)
    note.delete()
    return redirect('dashboard:notifications')


@require_POST
@login_required
def delete_all_notifications(request):
    deleted, _ = Notification.objects.filter(user=request.user).delete()
    logger.info("User %s cleared %s notifications", request.user.pk, deleted)
    messages.success(request, 'All notifications deleted.')
    return redirect('dashboard:notifications')


@login_required
def unread_count_view(request):
    return JsonResponse({'unread': unread_count(request.user)})
