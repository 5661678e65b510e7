from django.apps import AppConfig


class CarbonConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "ecohub.apps.carbon"
    verbose_name = "Carbon Footprint"

    def ready(self):
        import ecohub.apps.carbon.signals  # noqa
