from django import template

register = template.Library()


@register.filter
def display_name(user):
    """Card/header name for a User, tolerating users without a profile row."""
    profile = getattr(user, "profile", None)
    if profile is None:
        return getattr(user, "username", "") or "User"
    return profile.display_name


@register.filter
def is_verified(user):
    profile = getattr(user, "profile", None)
    return bool(profile and profile.is_verified)


@register.filter
def initials(name):
    parts = [p for p in (name or "").split() if p]
    return "".join(p[0].upper() for p in parts[:2]) or "U"
