from django.contrib.auth.models import User
from django.shortcuts import redirect, render

from nguvu_hire.job_list.models import Availability, Job
from nguvu_hire.profiles.models import Profile


def home(request):
    """Landing page; signed-in users go straight to their dashboard."""
    if request.user.is_authenticated:
        return redirect('dashboard:dashboard')

    context = {
        'job_count': Job.objects.count(),
        'candidate_count': Availability.objects.values('created_by').distinct().count(),
        'verified_count': Profile.objects.filter(is_verified=True).count(),
        'member_count': User.objects.filter(is_active=True).count(),
        'latest_jobs': Job.objects.select_related('created_by__profile').order_by('-created_at')[:6],
    }
    return render(request, 'main/home.html', context)
