from django.apps import AppConfig


class HiresConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'nguvu_hire.hires'
