from django.apps import AppConfig


class UserConfig(AppConfig):
    name = "user"
    verbose_name = "Accounts"
    default_auto_field = "django.db.models.BigAutoField"
