# ---------------------------------
# Signals: ensure profile existence
# ---------------------------------
from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver

from nguvu_hire.core.utils.analytics import track_event
from nguvu_hire.profiles.models import Profile


@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    if created:
        Profile.objects.get_or_create(
            user=instance,
            defaults={
                "first_name": instance.first_name,
                "last_name": instance.last_name,
                "username": instance.username,
            },
        )


@receiver(post_save, sender=Profile)
def track_profile_change(sender, instance: Profile, created: bool, **kwargs):
    """Log profile create/update as analytics events (non-blocking)."""
    event_type = 'profile_created' if created else 'profile_updated'
    track_event(
        event_type=event_type,
        user=getattr(instance, 'user', None),
        metadata={'profile_id': instance.pk},
    )
