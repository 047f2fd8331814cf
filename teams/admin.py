from django.contrib import admin
from .models import Team


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "join_code", "devpost", "created_at")
    search_fields = ("name", "join_code")
    readonly_fields = ("join_code", "version", "created_at")
    filter_horizontal = ("members",)
