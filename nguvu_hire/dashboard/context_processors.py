# dashboard/context_processors.py
# Exposes role + unread badge count to every template.

from nguvu_hire.dashboard.services.notifications import unread_count
from nguvu_hire.profiles.models import ROLE_EMPLOYER, get_role


def role_flags(request):
    role = get_role(getattr(request, "user", None))
    return {
        "CURRENT_ROLE": role,
        "IS_EMPLOYER": role == ROLE_EMPLOYER,
    }


def unread_notifications(request):
    return {"UNREAD_NOTIFICATIONS": unread_count(getattr(request, "user", None))}
