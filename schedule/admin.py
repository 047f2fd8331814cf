from django.contrib import admin
from .models import ScheduleAssignment


@admin.register(ScheduleAssignment)
class ScheduleAssignmentAdmin(admin.ModelAdmin):
    list_display = ("position", "time", "room", "team_name", "team_id")
    list_filter = ("room",)
    search_fields = ("team_name", "team_id")
    ordering = ("position",)
