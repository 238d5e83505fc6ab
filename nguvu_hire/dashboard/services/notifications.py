"""
Notification helpers.

`notify` is best-effort: a failed insert is logged and never blocks the
action that triggered it.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from django.contrib.auth.models import User
from django.db.models import Q

from nguvu_hire.dashboard.models import Notification
from nguvu_hire.profiles.models import ROLE_ADMIN

logger = logging.getLogger(__name__)


def notify(user, title: str, message: str, type: str = "system", related_id: Optional[int] = None) -> Optional[Notification]:
    try:
        return Notification.objects.create(
            user=user,
            title=title,
            message=message,
            type=type,
            related_id=related_id,
        )
    except Exception:
        logger.warning("Notification %s for user %s failed", type, getattr(user, "pk", None), exc_info=True)
        return None


def admin_users():
    return User.objects.filter(
        Q(is_staff=True) | Q(profile__role=ROLE_ADMIN),
        is_active=True,
    ).distinct()


def notify_admins(title: str, message: str, type: str = "system", related_id: Optional[int] = None) -> int:
    """Notify every admin-role profile and staff user; returns how many were sent."""
    sent = 0
    for admin in admin_users():
        if notify(admin, title, message, type=type, related_id=related_id):
            sent += 1
    return sent


def mark_types_read(user, types: Iterable[str]) -> int:
    return Notification.objects.filter(user=user, type__in=list(types), is_read=False).update(is_read=True)


def unread_count(user) -> int:
    if not getattr(user, "is_authenticated", False):
        return 0
    return Notification.objects.filter(user=user, is_read=False).count()
