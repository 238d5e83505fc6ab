from django.apps import AppConfig


class JobListConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'nguvu_hire.job_list'
