from django.apps import AppConfig


class CarguessConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "carguess"
    verbose_name = "Car guessing game"
