from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health_check(request):
    return JsonResponse({"status": "ok"})


urlpatterns = [
    path("admin/", admin.site.urls),
    path("healthz", health_check),
    path("api/health", health_check, name="health"),
    path("api/auth/", include("ecohub.apps.users.urls")),
    path("api/", include("ecohub.apps.catalog.urls")),
    path("api/carbon/", include("ecohub.apps.carbon.urls")),
]
