from django.apps import AppConfig


class ProfilesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'nguvu_hire.profiles'

    def ready(self):
        import nguvu_hire.profiles.signals  # noqa: F401
