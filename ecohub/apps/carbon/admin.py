from django.contrib import admin
from .models import EmissionRecord


@admin.register(EmissionRecord)
class EmissionRecordAdmin(admin.ModelAdmin):
    list_display = (
        "user",
        "week_identifier",
        "total_emissions",
        "score",
        "date",
    )
    list_filter = ("score", "month_identifier")
    search_fields = ("user__username", "user__email", "week_identifier")
    date_hierarchy = "date"

    # Records are immutable once submitted
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
