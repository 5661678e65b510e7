from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "ecohub.apps.catalog"
    verbose_name = "Catalog"
