"""
Marketplace event tracking.

    from nguvu_hire.core.utils.analytics import track_event
    track_event(event_type='job_created', user=request.user, metadata={'job_id': job.id})

Called from views and services in the middle of user actions, so it never
raises: the insert runs in its own savepoint and failures are logged at
debug level on the "analytics" logger.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from django.db import transaction
from django.http import HttpRequest

from nguvu_hire.core.models import AnalyticsEvent

logger = logging.getLogger("analytics")

MAX_PATH_LENGTH = 512


def client_ip(request: HttpRequest) -> str:
    """First hop of X-Forwarded-For when behind the Render proxy, else REMOTE_ADDR."""
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR") or ""
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "")


def _request_context(request: HttpRequest) -> Dict[str, Any]:
    return {
        "ip": client_ip(request),
        "ua": request.META.get("HTTP_USER_AGENT", ""),
        "referer": request.META.get("HTTP_REFERER", ""),
    }


def track_event(
    *,
    event_type: str,
    user=None,
    path: str | None = None,
    metadata: Optional[Dict[str, Any]] = None,
    request: Optional[HttpRequest] = None,
) -> Optional[AnalyticsEvent]:
    """
    Record one event; returns it, or None when recording failed.
    Explicit `user` / `path` win over what the request carries.
    """
    meta: Dict[str, Any] = dict(metadata or {})
    if request is not None:
        if user is None:
            user = getattr(request, "user", None)
        path = path or request.path
        for key, value in _request_context(request).items():
            meta.setdefault(key, value)

    try:
        with transaction.atomic():
            return AnalyticsEvent.objects.create(
                user=user if getattr(user, "is_authenticated", False) else None,
                event_type=event_type,
                path=(path or "")[:MAX_PATH_LENGTH],
                metadata=meta or None,
            )
    except Exception as exc:
        logger.debug("track_event(%s) failed: %s", event_type, exc)
        return None
