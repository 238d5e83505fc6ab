"""
Region search for the dashboard feed.

Seekers look at jobs: `to` is where the job is, `from` is where the employer
wants candidates from. Employers look at availabilities: `from` is the
candidate's country, `to` is where the candidate wants to work.
"""

from __future__ import annotations

from django.conf import settings
from django.db.models import QuerySet

from nguvu_hire.core.constants import country_name

from .feed import KIND_JOBS


def _contains_country(values, name: str) -> bool:
    target = name.lower()
    return any(country_name(v).lower() == target for v in (values or []))


def _first_matches(qs: QuerySet, from_name: str, limit: int) -> list:
    matches = []
    if limit <= 0:
        return matches
    for job in qs.order_by("-created_at", "-pk").iterator(chunk_size=200):
        if _contains_country(job.preferred_candidate_countries, from_name):
            matches.append(job)
            if len(matches) >= limit:
                break
    return matches


def region_filter(qs: QuerySet, kind: str, from_country: str = "", to_country: str = "", limit: int | None = None):
    """
    Returns a queryset when the database can do all the work, otherwise a list.
    JSON list membership is checked in Python so it behaves the same on every backend;
    that scan walks rows newest first and stops at `limit` matches (NGUVU_BROWSE_LIMIT).
    """
    from_name = country_name(from_country)
    to_name = country_name(to_country)

    if kind == KIND_JOBS:
        if to_name:
            qs = qs.filter(country__icontains=to_name)
        if from_name:
            limit = int(getattr(settings, "NGUVU_BROWSE_LIMIT", 100)) if limit is None else limit
            return _first_matches(qs, from_name, limit)
        return qs

    if from_name:
        qs = qs.filter(country__icontains=from_name)
    if to_name:
        qs = qs.filter(location__icontains=to_name)
    return qs
