from django.contrib import admin  # type: ignore

from .models import CrimeRecord


@admin.register(CrimeRecord)
class CrimeRecordAdmin(admin.ModelAdmin):
    list_display = ("month", "municipality_name", "crime_group_code", "crime_count", "updated_at")
    list_filter = ("month", "municipality_name")
    search_fields = ("municipality_name", "municipality_code", "crime_group_code", "crime_group_name")
    readonly_fields = ("created_at", "updated_at")
