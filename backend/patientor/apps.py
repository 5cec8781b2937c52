from django.apps import AppConfig


class PatientorConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'patientor'
