from django import template

from nguvu_hire.verification.models import VerificationRequest

register = template.Library()


@register.simple_tag
def pending_verifications_count():
    return VerificationRequest.objects.filter(status=VerificationRequest.STATUS_UNDER_REVIEW).count()
