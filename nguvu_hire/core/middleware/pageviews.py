from __future__ import annotations

import logging
from typing import Callable

from django.conf import settings
from django.http import HttpRequest, HttpResponse

from nguvu_hire.core.utils.analytics import track_event

logger = logging.getLogger(__name__)


class PageViewMiddleware:
    """
    Lightweight page-view tracker for HTML GET requests.
    - Skips admin, static, and media paths.
    - Records event_type='page_view' with user + path + basic request metadata.
    """

    SKIP_PATHS = {"/favicon.ico", "/robots.txt", "/sitemap.xml"}

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)

        if self._should_track(request, response):
            track_event(event_type="page_view", request=request)

        return response

    def _should_track(self, request: HttpRequest, response: HttpResponse) -> bool:
        # Only track successful HTML GETs
        if request.method != "GET" or response.status_code != 200:
            return False
        if "text/html" not in response.headers.get("Content-Type", ""):
            return False

        path = request.path or ""
        if path.startswith("/admin"):
            return False
        if settings.STATIC_URL and path.startswith(settings.STATIC_URL):
            return False
        if getattr(settings, "MEDIA_URL", None) and path.startswith(settings.MEDIA_URL):
            return False
        return path not in self.SKIP_PATHS
